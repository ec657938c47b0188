# ============================================
# issues/selectors/issue.py
# ============================================
from typing import Optional
from django.db.models import QuerySet, Q
from issues.models import Issue, IssueHistory
from issues.repositories.issue_repository import IssueRepository


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id: int, repository: Optional[IssueRepository] = None) -> Issue:
        """Single issue with reporter and assignee; raises NotFoundError"""
        return (repository or IssueRepository()).get(issue_id)

    @staticmethod
    def get_issues_list(
        student_id: int = None,
        department: str = None,
        status: str = None,
        assigned_to: int = None,
        priority: str = None,
        category: str = None,
        search: str = None,
        repository: Optional[IssueRepository] = None,
    ) -> QuerySet:
        """
        Conjunction of the given filters; absent filters match everything.
        Insertion order, reporter and assignee joined in.
        """
        queryset = (repository or IssueRepository()).filter(
            student_id=student_id,
            department=department,
            status=status,
            assigned_to=assigned_to,
        ).select_related('student', 'assigned_to')

        if priority:
            queryset = queryset.filter(priority=priority)

        if category:
            queryset = queryset.filter(category=category)

        if search:
            queryset = queryset.filter(
                Q(title__icontains=search) |
                Q(description__icontains=search)
            )

        return queryset.order_by('id')

    @staticmethod
    def get_issue_history(issue_id: int) -> QuerySet:
        """Lifecycle log, newest first"""
        return IssueHistory.objects.filter(issue_id=issue_id).select_related('actor').order_by('-created_at', '-id')
