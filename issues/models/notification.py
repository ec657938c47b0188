# ============================================
# issues/models/notification.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notifications'
    )
    title = models.CharField(max_length=200)
    message = models.TextField(blank=True, default='')
    read = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at', '-id']

    def __str__(self):
        state = "read" if self.read else "unread"
        return f"NOTI to_user={self.user_id} ({state}): {self.title}"
