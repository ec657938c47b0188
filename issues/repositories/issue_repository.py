# -*- coding: utf-8 -*-
"""
Repository layer for Issue / Comment / IssueHistory (pure DB):
- lookups, locked reads, inserts and field saves
- NO business rules (roles, legal transitions); the service decides.

One instance is built per service (per request or per test); it owns no
process-wide state.
"""
from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, Optional

from django.db.models import QuerySet
from django.utils import timezone

from issues.exceptions import NotFoundError
from issues.models import Comment, Issue, IssueHistory


class IssueRepository:

    def __init__(self, queryset: Optional[QuerySet] = None):
        self._queryset = queryset if queryset is not None else Issue.objects.all()

    # ============================
    # Reads
    # ============================
    def base_qs(self) -> QuerySet:
        return self._queryset.all()

    def get(self, issue_id: int) -> Issue:
        try:
            return self.base_qs().select_related('student', 'assigned_to').get(id=issue_id)
        except (Issue.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Issue {issue_id} not found")

    def get_for_update(self, issue_id: int) -> Issue:
        """Row-locked read; call inside transaction.atomic()"""
        try:
            return self.base_qs().select_for_update().get(id=issue_id)
        except (Issue.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Issue {issue_id} not found")

    def filter(
        self,
        *,
        student_id: Optional[int] = None,
        department: Optional[str] = None,
        status: Optional[str] = None,
        assigned_to: Optional[int] = None,
    ) -> QuerySet:
        qs = self.base_qs()
        if student_id is not None:
            qs = qs.filter(student_id=student_id)
        if department is not None:
            qs = qs.filter(department=department)
        if status is not None:
            qs = qs.filter(status=status)
        if assigned_to is not None:
            qs = qs.filter(assigned_to_id=assigned_to)
        return qs.order_by('id')

    def comments(self, issue_id: int) -> QuerySet:
        return Comment.objects.filter(issue_id=issue_id).select_related('author').order_by('created_at', 'id')

    def count(self) -> int:
        return self.base_qs().count()

    # ============================
    # Mutations
    # ============================
    def add(self, data: Dict[str, Any]) -> Issue:
        now = timezone.now()
        return Issue.objects.create(created_at=now, updated_at=now, **data)

    def save_fields(self, issue: Issue, patch: Dict[str, Any], allowed: Optional[Iterable[str]] = None) -> Issue:
        """Apply patch, refresh updated_at and save only the touched columns"""
        fields = []
        for k, v in patch.items():
            if (allowed is None) or (k in allowed):
                setattr(issue, k, v)
                fields.append(k)
        issue.updated_at = timezone.now()
        fields.append('updated_at')
        issue.save(update_fields=fields)
        return issue

    def add_comment(self, *, issue: Issue, author, content: str) -> Comment:
        return Comment.objects.create(issue=issue, author=author, content=content, created_at=timezone.now())

    def log_history(self, *, issue: Issue, actor, field_name: str, old_value: Any, new_value: Any) -> IssueHistory:
        return IssueHistory.objects.create(
            issue=issue,
            actor=actor,
            field_name=field_name,
            old_value=str(old_value) if old_value is not None else '',
            new_value=str(new_value) if new_value is not None else '',
        )

    @staticmethod
    def snapshot(issue: Issue) -> Issue:
        """Detached copy of the record as it is now; never saved"""
        return copy.copy(issue)
