# ============================================
# issues/services/issue.py
# ============================================
"""
Issue lifecycle service.

Every request goes through `IssueService.apply`, which validates the request,
checks the actor's role, applies the transition inside one transaction (row
lock on the issue), writes the history and inbox entries, and returns the
record before and after the change. Webhook delivery is queued with
`transaction.on_commit`, so it only fires once the outermost transaction
commits, and it never fails the operation.
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from issues.choices import Priority, Status
from issues.exceptions import AuthorizationError
from issues.models import Comment, Issue
from issues.repositories.issue_repository import IssueRepository
from issues.services.commands import (
    AddComment, AssignIssue, CreateIssue, SubmitFeedback, UpdateStatus,
    LifecycleRequest, LifecycleResponse, TransitionResult,
)
from issues.services.notification import NotificationService
from issues.services.transitions import (
    HANDLER_ROLES, Role, check_assignable, check_status_change, require_role,
)

logger = logging.getLogger(__name__)


class IssueService:

    def __init__(
        self,
        repository: Optional[IssueRepository] = None,
        notifications: Optional[NotificationService] = None,
    ):
        self.repository = repository or IssueRepository()
        self.notifications = notifications or NotificationService()

    # ============================
    # Dispatch
    # ============================
    def apply(self, request: LifecycleRequest, *, actor) -> LifecycleResponse:
        handlers = {
            CreateIssue: self._create,
            AssignIssue: self._assign,
            UpdateStatus: self._update_status,
            AddComment: self._add_comment,
            SubmitFeedback: self._submit_feedback,
        }
        handler = handlers.get(type(request))
        if handler is None:
            raise TypeError(f"Unsupported lifecycle request: {type(request).__name__}")
        request.validate()
        return handler(request, actor)

    # ============================
    # Keyword entry points
    # ============================
    def create_issue(
        self,
        *,
        actor,
        title: str,
        description: str,
        category: str,
        department: str,
        priority: str = Priority.MEDIUM,
        attachments: Iterable[str] = (),
    ) -> TransitionResult:
        """Create a new issue in 'pending' owned by the reporting student"""
        return self.apply(
            CreateIssue(
                title=title,
                description=description,
                category=category,
                department=department,
                priority=priority or Priority.MEDIUM,
                attachments=tuple(attachments or ()),
            ),
            actor=actor,
        )

    def assign_issue(self, *, actor, issue_id: int, assignee_id: int) -> TransitionResult:
        """Admin hands the issue to a handler; status becomes 'assigned'"""
        return self.apply(AssignIssue(issue_id=issue_id, assignee_id=assignee_id), actor=actor)

    def update_status(self, *, actor, issue_id: int, status: str) -> TransitionResult:
        """Staff/admin status change, checked against the transition table"""
        return self.apply(UpdateStatus(issue_id=issue_id, status=status), actor=actor)

    def add_comment(self, *, actor, issue_id: int, content: str) -> Comment:
        """Append a note to the issue's comment log"""
        return self.apply(AddComment(issue_id=issue_id, content=content), actor=actor)

    def submit_feedback(self, *, actor, issue_id: int, rating: int, feedback: str = '') -> TransitionResult:
        """Reporter rates the handling of a resolved issue"""
        return self.apply(SubmitFeedback(issue_id=issue_id, rating=rating, feedback=feedback), actor=actor)

    # ============================
    # Handlers
    # ============================
    def _create(self, request: CreateIssue, actor) -> TransitionResult:
        require_role(actor, Role.STUDENT)

        with transaction.atomic():
            issue = self.repository.add({
                'title': request.title,
                'description': request.description,
                'category': request.category,
                'department': request.department,
                'priority': request.priority,
                'status': Status.PENDING,
                'student': actor,
                'assigned_to': None,
                'attachments': list(request.attachments),
            })
            self.repository.log_history(
                issue=issue, actor=actor, field_name='created', old_value='', new_value=Status.PENDING
            )
            transaction.on_commit(lambda: self._publish('issue.created', issue, actor))

        logger.info("[issues] created issue_id=%s dept=%s by user_id=%s", issue.id, issue.department, actor.pk)
        return TransitionResult(current=issue, previous=None, changed=('created',))

    def _assign(self, request: AssignIssue, actor) -> TransitionResult:
        require_role(actor, Role.DSW_ADMIN)

        with transaction.atomic():
            issue = self.repository.get_for_update(request.issue_id)
            check_assignable(issue.status)
            assignee = self._get_handler(request.assignee_id)

            previous = self.repository.snapshot(issue)
            self.repository.save_fields(issue, {'assigned_to': assignee, 'status': Status.ASSIGNED})
            changed = self._log_changes(previous, issue, actor, ('assigned_to_id', 'status'))

            self.notifications.send_inapp(
                title=f"Issue #{issue.id} assigned",
                message=f"'{issue.title}' was assigned to {assignee.full_name or assignee.email}.",
                recipients=[issue.student, assignee],
                issue=issue,
            )
            transaction.on_commit(lambda: self._publish('issue.assigned', issue, actor, previous))

        logger.info(
            "[issues] assigned issue_id=%s to user_id=%s by user_id=%s (was %s)",
            issue.id, assignee.pk, actor.pk, previous.assigned_to_id,
        )
        return TransitionResult(current=issue, previous=previous, changed=changed)

    def _update_status(self, request: UpdateStatus, actor) -> TransitionResult:
        require_role(actor, *HANDLER_ROLES)

        with transaction.atomic():
            issue = self.repository.get_for_update(request.issue_id)
            check_status_change(issue.status, request.status, actor.role)

            previous = self.repository.snapshot(issue)
            patch = {'status': request.status}
            # resolved_at is stamped once and never overwritten
            if request.status == Status.RESOLVED and issue.resolved_at is None:
                patch['resolved_at'] = timezone.now()
            self.repository.save_fields(issue, patch)
            changed = self._log_changes(previous, issue, actor, ('status',))

            if changed:
                self.notifications.send_inapp(
                    title=f"Issue #{issue.id} is now {issue.get_status_display()}",
                    message=f"'{issue.title}' moved from {previous.get_status_display()} "
                            f"to {issue.get_status_display()}.",
                    recipients=[issue.student],
                    issue=issue,
                )
                transaction.on_commit(lambda: self._publish('issue.status_changed', issue, actor, previous))

        logger.info(
            "[issues] status issue_id=%s %s -> %s by user_id=%s",
            issue.id, previous.status, issue.status, actor.pk,
        )
        return TransitionResult(current=issue, previous=previous, changed=changed)

    def _add_comment(self, request: AddComment, actor) -> Comment:
        with transaction.atomic():
            issue = self.repository.get(request.issue_id)
            if getattr(actor, 'role', None) == Role.STUDENT and issue.student_id != actor.pk:
                raise AuthorizationError("Students may only comment on their own issues")
            comment = self.repository.add_comment(issue=issue, author=actor, content=request.content.strip())

        logger.info("[issues] comment_id=%s on issue_id=%s by user_id=%s", comment.id, issue.id, actor.pk)
        return comment

    def _submit_feedback(self, request: SubmitFeedback, actor) -> TransitionResult:
        require_role(actor, Role.STUDENT)

        with transaction.atomic():
            issue = self.repository.get_for_update(request.issue_id)
            if issue.student_id != actor.pk:
                raise AuthorizationError("Only the reporting student can leave feedback")
            if issue.status != Status.RESOLVED:
                raise ValidationError("Feedback can only be left on a resolved issue")

            previous = self.repository.snapshot(issue)
            self.repository.save_fields(issue, {'rating': request.rating, 'feedback': request.feedback or ''})
            changed = self._log_changes(previous, issue, actor, ('rating', 'feedback'))

        logger.info("[issues] feedback issue_id=%s rating=%s", issue.id, issue.rating)
        return TransitionResult(current=issue, previous=previous, changed=changed)

    # ============================
    # Helpers
    # ============================
    @staticmethod
    def _get_handler(user_id):
        User = get_user_model()
        try:
            return User.objects.get(id=user_id, role__in=HANDLER_ROLES, is_active=True)
        except (User.DoesNotExist, ValueError, TypeError):
            raise ValidationError({'assignee_id': "Assignee must be an active staff or admin user"})

    def _log_changes(self, previous: Issue, current: Issue, actor, fields) -> tuple:
        changed = []
        for attr in fields:
            old_value, new_value = getattr(previous, attr), getattr(current, attr)
            if old_value != new_value:
                field_name = attr[:-3] if attr.endswith('_id') else attr
                self.repository.log_history(
                    issue=current, actor=actor, field_name=field_name,
                    old_value=old_value, new_value=new_value,
                )
                changed.append(field_name)
        return tuple(changed)

    def _publish(self, event: str, issue: Issue, actor, previous: Optional[Issue] = None) -> None:
        self.notifications.publish(event, {
            'issue_id': issue.id,
            'title': issue.title,
            'department': issue.department,
            'status': issue.status,
            'previous_status': previous.status if previous is not None else None,
            'assigned_to': issue.assigned_to_id,
            'student_id': issue.student_id,
            'actor_id': actor.pk,
        })
