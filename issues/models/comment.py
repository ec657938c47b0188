# ============================================
# issues/models/comment.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone


class Comment(models.Model):
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='issue_comments'
    )
    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'comments'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Comment on #{self.issue_id}"
