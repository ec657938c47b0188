# ============================================
# issues/models/issue.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone

from issues.choices import Category, Department, Priority, Status


class Issue(models.Model):
    Status = Status
    Priority = Priority

    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.CharField(max_length=64, choices=Category.choices)
    department = models.CharField(max_length=64, choices=Department.choices, db_index=True)
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='reported_issues'
    )
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='assigned_issues'
    )
    attachments = models.JSONField(default=list, blank=True)  # file names only
    feedback = models.TextField(blank=True, default='')
    rating = models.PositiveSmallIntegerField(null=True, blank=True)
    # Set explicitly by the repository so creation stamps are identical
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'issues'
        ordering = ['id']
        indexes = [
            models.Index(fields=['department', 'status'], name='issues_dept_status_idx'),
        ]

    def __str__(self):
        return f"#{self.pk} - {self.title}"

    @property
    def is_terminal(self) -> bool:
        return self.status in (Status.RESOLVED, Status.REJECTED)
