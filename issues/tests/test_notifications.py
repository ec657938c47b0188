from unittest.mock import MagicMock, patch

import pytest
import requests
from django.db import transaction

from issues.clients.webhook_client import WebhookClient
from issues.exceptions import NotFoundError
from issues.models import Issue, Notification
from issues.selectors.notification import notifications_for_user, unread_count
from issues.services.issue import IssueService
from issues.services.notification import NotificationService


@pytest.mark.django_db
def test_send_inapp_once_per_user(student, staff, issue):
    svc = NotificationService(webhook=WebhookClient(url=""))
    created = svc.send_inapp(title="Hello", recipients=[student, staff, student, None], issue=issue)
    assert [n.user_id for n in created] == [student.id, staff.id]

@pytest.mark.django_db
def test_mark_as_read(student, staff, issue):
    svc = NotificationService(webhook=WebhookClient(url=""))
    note = svc.send_inapp(title="Hello", recipients=[student], issue=issue)[0]
    assert unread_count(student.id) == 1

    NotificationService.mark_as_read(notification_id=note.id, user=student)
    assert unread_count(student.id) == 0
    assert unread_count(student.id, issue_id=issue.id) == 0

    with pytest.raises(NotFoundError):
        NotificationService.mark_as_read(notification_id=note.id, user=staff)

@pytest.mark.django_db
def test_mark_all_as_read(student, issue):
    svc = NotificationService(webhook=WebhookClient(url=""))
    svc.send_inapp(title="one", recipients=[student], issue=issue)
    svc.send_inapp(title="two", recipients=[student], issue=issue)

    assert NotificationService.mark_all_as_read(user=student) == 2
    assert NotificationService.mark_all_as_read(user=student) == 0
    assert notifications_for_user(student.id, unread_only=True).count() == 0
    assert Notification.objects.filter(user=student).count() == 2


def test_webhook_disabled_without_url():
    with patch("issues.clients.webhook_client.requests.post") as post:
        assert WebhookClient(url="").post_event("issue.created", {}) is False
        post.assert_not_called()

def test_webhook_posts_event():
    with patch("issues.clients.webhook_client.requests.post") as post:
        post.return_value = MagicMock(status_code=200)
        client = WebhookClient(url="https://hooks.example.test/sprs", timeout=2)
        assert client.post_event("issue.assigned", {"issue_id": 7}) is True

    post.assert_called_once_with(
        "https://hooks.example.test/sprs",
        json={"event": "issue.assigned", "data": {"issue_id": 7}},
        timeout=2,
    )

def test_webhook_failure_is_swallowed():
    with patch("issues.clients.webhook_client.requests.post", side_effect=requests.ConnectionError("down")):
        assert WebhookClient(url="https://hooks.example.test/sprs").post_event("issue.created", {}) is False

@pytest.mark.django_db
def test_service_publishes_lifecycle_events(student, admin, staff, issue_data, django_capture_on_commit_callbacks):
    service = IssueService(notifications=NotificationService(webhook=WebhookClient(url="https://hooks.example.test/sprs")))
    with patch("issues.clients.webhook_client.requests.post") as post, django_capture_on_commit_callbacks(execute=True):
        post.return_value = MagicMock(status_code=204)
        issue = service.create_issue(actor=student, **issue_data).current
        service.assign_issue(actor=admin, issue_id=issue.id, assignee_id=staff.id)

    events = [c.kwargs["json"]["event"] for c in post.call_args_list]
    assert events == ["issue.created", "issue.assigned"]
    data = post.call_args_list[1].kwargs["json"]["data"]
    assert data["previous_status"] == "pending"
    assert data["status"] == "assigned"
    assert data["assigned_to"] == staff.id

@pytest.mark.django_db
def test_webhook_outage_does_not_fail_operation(student, issue_data, django_capture_on_commit_callbacks):
    service = IssueService(notifications=NotificationService(webhook=WebhookClient(url="https://hooks.example.test/sprs")))
    with patch("issues.clients.webhook_client.requests.post", side_effect=requests.Timeout("slow")) as post, \
            django_capture_on_commit_callbacks(execute=True):
        result = service.create_issue(actor=student, **issue_data)
    assert result.current.pk is not None
    assert post.call_count == 1

@pytest.mark.django_db
def test_no_event_before_commit(student, issue_data, django_capture_on_commit_callbacks):
    service = IssueService(notifications=NotificationService(webhook=WebhookClient(url="https://hooks.example.test/sprs")))
    with patch("issues.clients.webhook_client.requests.post") as post, \
            django_capture_on_commit_callbacks(execute=False) as callbacks:
        service.create_issue(actor=student, **issue_data)
        post.assert_not_called()
    assert len(callbacks) == 1

@pytest.mark.django_db(transaction=True)
def test_rolled_back_work_is_not_published(student, issue_data):
    service = IssueService(notifications=NotificationService(webhook=WebhookClient(url="https://hooks.example.test/sprs")))
    with patch("issues.clients.webhook_client.requests.post") as post:
        with pytest.raises(RuntimeError):
            with transaction.atomic():
                service.create_issue(actor=student, **issue_data)
                raise RuntimeError("caller aborts")

    assert Issue.objects.count() == 0
    post.assert_not_called()

@pytest.mark.django_db(transaction=True)
def test_committed_work_is_published(student, issue_data):
    service = IssueService(notifications=NotificationService(webhook=WebhookClient(url="https://hooks.example.test/sprs")))
    with patch("issues.clients.webhook_client.requests.post") as post:
        post.return_value = MagicMock(status_code=200)
        with transaction.atomic():
            service.create_issue(actor=student, **issue_data)
            post.assert_not_called()

    assert post.call_count == 1
