# ============================================
# issues/services/commands.py
# ============================================
"""Closed set of lifecycle requests; each one validates its own fields."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from django.core.exceptions import ValidationError

from issues.choices import (
    Category, Department, Priority, Status,
    DESCRIPTION_MIN_LENGTH, MAX_ATTACHMENTS, TITLE_MIN_LENGTH,
)
from issues.models import Comment, Issue


@dataclass(frozen=True)
class CreateIssue:
    title: str
    description: str
    category: str
    department: str
    priority: str = Priority.MEDIUM
    attachments: Tuple[str, ...] = ()

    def validate(self) -> None:
        errors = {}
        if len(self.title or '') < TITLE_MIN_LENGTH:
            errors['title'] = f"Title must be at least {TITLE_MIN_LENGTH} characters"
        if len(self.description or '') < DESCRIPTION_MIN_LENGTH:
            errors['description'] = f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
        if self.category not in Category.values:
            errors['category'] = "Please select a category"
        if self.department not in Department.values:
            errors['department'] = "Please select a department"
        if self.priority not in Priority.values:
            errors['priority'] = f"Priority must be one of {', '.join(Priority.values)}"
        if len(self.attachments) > MAX_ATTACHMENTS:
            errors['attachments'] = f"Maximum {MAX_ATTACHMENTS} files allowed"
        if errors:
            raise ValidationError(errors)


@dataclass(frozen=True)
class AssignIssue:
    issue_id: int
    assignee_id: int

    def validate(self) -> None:
        if not self.assignee_id:
            raise ValidationError({'assignee_id': "Assignee is required"})


@dataclass(frozen=True)
class UpdateStatus:
    issue_id: int
    status: str

    def validate(self) -> None:
        if self.status not in Status.values:
            raise ValidationError({'status': f"Unknown status '{self.status}'"})


@dataclass(frozen=True)
class AddComment:
    issue_id: int
    content: str

    def validate(self) -> None:
        if not (self.content or '').strip():
            raise ValidationError({'content': "Comment cannot be empty"})


@dataclass(frozen=True)
class SubmitFeedback:
    issue_id: int
    rating: int
    feedback: str = ''

    def validate(self) -> None:
        if not isinstance(self.rating, int) or not 1 <= self.rating <= 5:
            raise ValidationError({'rating': "Rating must be between 1 and 5"})


@dataclass(frozen=True)
class TransitionResult:
    """Record before and after a mutation; `previous` is None on creation"""
    current: Issue
    previous: Optional[Issue] = None
    changed: Tuple[str, ...] = field(default_factory=tuple)


LifecycleRequest = Union[CreateIssue, AssignIssue, UpdateStatus, AddComment, SubmitFeedback]
LifecycleResponse = Union[TransitionResult, Comment]
