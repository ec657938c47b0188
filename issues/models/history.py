# ============================================
# issues/models/history.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone


class IssueHistory(models.Model):
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='history'
    )
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='+'
    )
    field_name = models.CharField(max_length=50)
    old_value = models.TextField(blank=True)
    new_value = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'issue_history'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"#{self.issue_id} - {self.field_name} changed"
