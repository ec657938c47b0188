from datetime import datetime, timedelta, timezone as tz

import pytest

from issues.choices import Department, Status
from issues.models import Issue
from issues.selectors.statistics import average_resolution_days, get_issue_statistics

CSE = Department.CSE
CIVIL = Department.CIVIL

T0 = datetime(2025, 1, 10, 9, 0, tzinfo=tz.utc)


def test_average_resolution_days_empty():
    assert average_resolution_days([]) == 0

def test_average_resolution_days_rounds_half_up():
    assert average_resolution_days([(T0, T0 + timedelta(hours=12))]) == 1
    assert average_resolution_days([(T0, T0 + timedelta(hours=11))]) == 0
    pairs = [(T0, T0 + timedelta(days=1)), (T0, T0 + timedelta(days=2))]
    assert average_resolution_days(pairs) == 2


@pytest.mark.django_db
def test_statistics_empty_store():
    stats = get_issue_statistics()
    assert stats["total"] == 0
    assert stats["avg_resolution_days"] == 0
    assert stats["by_status"] == {value: 0 for value in Status.values}
    assert len(stats["by_department"]) == len(Department.values)

@pytest.mark.django_db
def test_statistics_counts(service, admin, student, issue_data):
    a = service.create_issue(actor=student, **issue_data).current
    service.create_issue(actor=student, **issue_data)
    service.create_issue(actor=student, **{**issue_data, "department": CIVIL})
    service.update_status(actor=admin, issue_id=a.id, status=Issue.Status.RESOLVED)
    Issue.objects.filter(pk=a.pk).update(created_at=T0, resolved_at=T0 + timedelta(days=3))

    stats = get_issue_statistics()
    assert stats["total"] == 3
    assert stats["pending"] == 2
    assert stats["resolved"] == 1
    assert stats["avg_resolution_days"] == 3
    assert sum(stats["by_status"].values()) == stats["total"]

    by_dept = {row["department"]: row for row in stats["by_department"]}
    assert by_dept[CSE] == {"department": CSE, "issues": 2, "resolved": 1}
    assert by_dept[CIVIL]["issues"] == 1
    assert by_dept["Library"]["issues"] == 0

@pytest.mark.django_db
def test_statistics_for_one_department(service, student, issue_data):
    service.create_issue(actor=student, **issue_data)
    service.create_issue(actor=student, **{**issue_data, "department": CIVIL})

    stats = get_issue_statistics(department=CIVIL)
    assert stats["total"] == 1
    assert stats["pending"] == 1
