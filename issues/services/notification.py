# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Optional

from django.db import transaction

from issues.clients.webhook_client import WebhookClient
from issues.exceptions import NotFoundError
from issues.models import Issue, Notification

log = logging.getLogger(__name__)


class NotificationService:
    """
    Per-user inbox, independent from the lifecycle tables.
    In-app entries are always written; the webhook is best effort.
    """

    def __init__(self, webhook: Optional[WebhookClient] = None):
        self.webhook = webhook or WebhookClient()

    def send_inapp(
        self,
        *,
        title: str,
        recipients: Iterable,
        message: str = '',
        issue: Optional[Issue] = None,
    ) -> list[Notification]:
        # one entry per distinct user, in the order given
        users = {}
        for user in recipients:
            if user is not None:
                users.setdefault(user.pk, user)
        return [
            Notification.objects.create(user=user, issue=issue, title=title, message=message)
            for user in users.values()
        ]

    def publish(self, event: str, payload: Dict[str, Any]) -> bool:
        return self.webhook.post_event(event, payload)

    @staticmethod
    def mark_as_read(*, notification_id: int, user) -> Notification:
        try:
            notification = Notification.objects.get(id=notification_id, user=user)
        except (Notification.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Notification {notification_id} not found")
        if not notification.read:
            notification.read = True
            notification.save(update_fields=['read'])
        return notification

    @staticmethod
    @transaction.atomic
    def mark_all_as_read(*, user) -> int:
        updated = Notification.objects.filter(user=user, read=False).update(read=True)
        log.info("[issues.notify] user_id=%s marked %s notifications read", user.pk, updated)
        return updated
