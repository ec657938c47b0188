from typing import Optional
from django.db.models import QuerySet
from issues.models import Notification


def notifications_for_user(user_id: int, unread_only: bool = False, limit: int = 200) -> QuerySet:
    qs = Notification.objects.filter(user_id=user_id)
    if unread_only:
        qs = qs.filter(read=False)
    return qs.order_by("-created_at", "-id")[:limit]


def unread_count(user_id: int, issue_id: Optional[int] = None) -> int:
    qs = Notification.objects.filter(user_id=user_id, read=False)
    if issue_id:
        qs = qs.filter(issue_id=issue_id)
    return qs.count()
