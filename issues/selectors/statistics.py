# ============================================
# issues/selectors/statistics.py
# ============================================
"""Aggregates for the admin dashboard; computed on demand, never stored."""
import math
from typing import Dict, Iterable, Optional, Tuple
from datetime import datetime

from django.db.models import Count, Q

from issues.choices import Department, Status
from issues.repositories.issue_repository import IssueRepository

SECONDS_PER_DAY = 24 * 60 * 60


def average_resolution_days(pairs: Iterable[Tuple[datetime, datetime]]) -> int:
    """
    Mean of (resolved_at - created_at) in whole days, halves rounded up.
    0 when nothing has been resolved.
    """
    durations = [(resolved_at - created_at).total_seconds() for created_at, resolved_at in pairs]
    if not durations:
        return 0
    mean_days = sum(durations) / len(durations) / SECONDS_PER_DAY
    return int(math.floor(mean_days + 0.5))


def get_issue_statistics(department: Optional[str] = None, repository: Optional[IssueRepository] = None) -> Dict:
    qs = (repository or IssueRepository()).filter(department=department).order_by()

    by_status = {value: 0 for value in Status.values}
    for row in qs.values('status').annotate(n=Count('id')):
        by_status[row['status']] = row['n']

    dept_rows = {
        row['department']: row
        for row in qs.values('department').annotate(
            issues=Count('id'),
            resolved=Count('id', filter=Q(status=Status.RESOLVED)),
        )
    }
    by_department = [
        {
            'department': dept,
            'issues': dept_rows.get(dept, {}).get('issues', 0),
            'resolved': dept_rows.get(dept, {}).get('resolved', 0),
        }
        for dept in Department.values
    ]

    resolved_pairs = qs.filter(resolved_at__isnull=False).values_list('created_at', 'resolved_at')

    return {
        'total': sum(by_status.values()),
        'pending': by_status[Status.PENDING],
        'resolved': by_status[Status.RESOLVED],
        'avg_resolution_days': average_resolution_days(resolved_pairs),
        'by_status': by_status,
        'by_department': by_department,
    }
