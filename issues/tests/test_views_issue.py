import pytest
from rest_framework.test import APIClient

from issues.choices import Department
from issues.models import Issue, Notification


@pytest.fixture(autouse=True)
def no_webhook(settings):
    settings.ISSUES_WEBHOOK_URL = ""

def client_for(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client

def payload(**overrides):
    data = {
        "title": "Broken chair",
        "description": "Chair in room 204 has a cracked leg and is unsafe.",
        "category": "Facilities & Infrastructure",
        "department": Department.CSE,
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_student_reports_issue(student):
    r = client_for(student).post("/api/issues/", payload(attachments=["chair.jpg"]), format="json")
    assert r.status_code == 201, r.content
    body = r.json()
    assert body["status"] == "pending"
    assert body["priority"] == "medium"
    assert body["student_id"] == student.id
    assert body["assigned_to"] is None
    assert body["attachments"] == ["chair.jpg"]
    assert body["created_at"] == body["updated_at"]

@pytest.mark.django_db
def test_create_validation_error(student):
    r = client_for(student).post("/api/issues/", payload(title="abc"), format="json")
    assert r.status_code == 400
    assert "title" in r.json()
    assert Issue.objects.count() == 0

@pytest.mark.django_db
def test_staff_cannot_report(staff):
    r = client_for(staff).post("/api/issues/", payload(), format="json")
    assert r.status_code == 403

@pytest.mark.django_db
def test_anonymous_is_rejected():
    r = APIClient().get("/api/issues/")
    assert r.status_code in (401, 403)

@pytest.mark.django_db
def test_list_is_scoped_by_role(service, student, other_student, staff, admin, issue_data):
    mine = service.create_issue(actor=student, **issue_data).current
    theirs = service.create_issue(actor=other_student, **{**issue_data, "department": Department.CIVIL}).current

    r = client_for(student).get("/api/issues/")
    assert r.status_code == 200
    assert [i["id"] for i in r.json()["results"]] == [mine.id]

    r = client_for(staff).get("/api/issues/")
    assert [i["id"] for i in r.json()["results"]] == [mine.id]

    r = client_for(admin).get("/api/issues/")
    assert r.json()["count"] == 2

    r = client_for(admin).get("/api/issues/", {"department": Department.CIVIL})
    assert [i["id"] for i in r.json()["results"]] == [theirs.id]

@pytest.mark.django_db
def test_detail_visibility(student, other_student, issue):
    assert client_for(student).get(f"/api/issues/{issue.id}/").status_code == 200
    assert client_for(other_student).get(f"/api/issues/{issue.id}/").status_code == 403
    assert client_for(student).get(f"/api/issues/{issue.id + 100}/").status_code == 404

@pytest.mark.django_db
def test_assign_endpoint(admin, staff, issue):
    r = client_for(admin).post(f"/api/issues/{issue.id}/assign/", {"assignee_id": staff.id}, format="json")
    assert r.status_code == 200, r.content
    body = r.json()
    assert body["previous"]["status"] == "pending"
    assert body["issue"]["status"] == "assigned"
    assert body["issue"]["assigned_user"]["id"] == staff.id

@pytest.mark.django_db
def test_assign_unknown_issue_is_404(admin, staff, issue):
    r = client_for(admin).post(f"/api/issues/{issue.id + 100}/assign/", {"assignee_id": staff.id}, format="json")
    assert r.status_code == 404

@pytest.mark.django_db
def test_assign_by_staff_is_403(staff, issue):
    r = client_for(staff).post(f"/api/issues/{issue.id}/assign/", {"assignee_id": staff.id}, format="json")
    assert r.status_code == 403

@pytest.mark.django_db
def test_illegal_transition_is_409(staff, issue):
    r = client_for(staff).post(f"/api/issues/{issue.id}/status/", {"status": "resolved"}, format="json")
    assert r.status_code == 409
    assert "detail" in r.json()

@pytest.mark.django_db
def test_status_then_feedback(staff, student, issue):
    c = client_for(staff)
    assert c.post(f"/api/issues/{issue.id}/status/", {"status": "in_progress"}, format="json").status_code == 200
    r = c.post(f"/api/issues/{issue.id}/status/", {"status": "resolved"}, format="json")
    assert r.status_code == 200
    assert r.json()["issue"]["resolved_at"] is not None

    r = client_for(student).post(f"/api/issues/{issue.id}/feedback/", {"rating": 5, "feedback": "Thanks"}, format="json")
    assert r.status_code == 200, r.content
    assert r.json()["issue"]["rating"] == 5

    r = client_for(student).get(f"/api/issues/{issue.id}/history/")
    assert [h["field_name"] for h in r.json()][-1] == "created"

@pytest.mark.django_db
def test_feedback_before_resolution_is_400(student, issue):
    r = client_for(student).post(f"/api/issues/{issue.id}/feedback/", {"rating": 3}, format="json")
    assert r.status_code == 400

@pytest.mark.django_db
def test_comments_endpoint(student, staff, issue):
    r = client_for(staff).post(f"/api/issues/{issue.id}/comments/", {"content": "On it"}, format="json")
    assert r.status_code == 201, r.content
    assert r.json()["user"]["id"] == staff.id

    r = client_for(student).get(f"/api/issues/{issue.id}/comments/")
    assert r.status_code == 200
    assert [c["content"] for c in r.json()] == ["On it"]

    r = client_for(student).post(f"/api/issues/{issue.id}/comments/", {"content": ""}, format="json")
    assert r.status_code == 400

@pytest.mark.django_db
def test_statistics_endpoint(admin, student, issue):
    r = client_for(admin).get("/api/issues/statistics/")
    assert r.status_code == 200
    assert r.json()["total"] == 1
    assert r.json()["by_status"]["pending"] == 1

    assert client_for(student).get("/api/issues/statistics/").status_code == 403

@pytest.mark.django_db
def test_notification_inbox(service, admin, staff, student, issue):
    service.assign_issue(actor=admin, issue_id=issue.id, assignee_id=staff.id)
    c = client_for(student)

    r = c.get("/api/notifications/")
    assert r.status_code == 200
    assert r.json()["unread"] == 1
    note_id = r.json()["results"][0]["id"]

    r = c.post(f"/api/notifications/{note_id}/read/")
    assert r.status_code == 200
    assert r.json()["read"] is True

    assert client_for(staff).post(f"/api/notifications/{note_id}/read/").status_code == 404

    r = client_for(staff).post("/api/notifications/read-all/")
    assert r.json() == {"updated": 1}
    assert Notification.objects.filter(read=False).count() == 0

@pytest.mark.django_db
def test_other_department_cannot_change_status(staff2, issue):
    r = client_for(staff2).post(f"/api/issues/{issue.id}/status/", {"status": "in_progress"}, format="json")
    assert r.status_code == 403
    issue.refresh_from_db()
    assert issue.status == Issue.Status.PENDING

@pytest.mark.django_db
def test_other_department_cannot_comment(staff2, issue):
    r = client_for(staff2).post(f"/api/issues/{issue.id}/comments/", {"content": "Not mine"}, format="json")
    assert r.status_code == 403
    assert issue.comments.count() == 0

@pytest.mark.django_db
def test_assignee_from_other_department_can_work_issue(admin, staff2, issue):
    client_for(admin).post(f"/api/issues/{issue.id}/assign/", {"assignee_id": staff2.id}, format="json")
    c = client_for(staff2)
    assert c.post(f"/api/issues/{issue.id}/status/", {"status": "in_progress"}, format="json").status_code == 200
    assert c.post(f"/api/issues/{issue.id}/comments/", {"content": "Started"}, format="json").status_code == 201

@pytest.mark.django_db
def test_comment_on_unknown_issue_is_404(staff, issue):
    r = client_for(staff).post(f"/api/issues/{issue.id + 100}/comments/", {"content": "hello"}, format="json")
    assert r.status_code == 404

@pytest.mark.django_db
def test_list_rows_carry_user_snapshots(admin, staff, student, issue):
    client_for(admin).post(f"/api/issues/{issue.id}/assign/", {"assignee_id": staff.id}, format="json")
    row = client_for(admin).get("/api/issues/").json()["results"][0]
    assert row["student"] == {
        "id": student.id, "email": student.email, "full_name": student.full_name,
        "role": "student", "department": "",
    }
    assert row["assigned_user"]["email"] == staff.email
    assert row["assigned_user"]["department"] == Department.CSE

@pytest.mark.django_db
@pytest.mark.parametrize("title, description, expected", [
    ("Leaky", "Water leaks nonstop.", 201),
    ("Leak", "Water leaks nonstop.", 400),
    ("Leaky", "Water leaks nonstop", 400),
])
def test_create_length_limits(student, title, description, expected):
    r = client_for(student).post("/api/issues/", payload(title=title, description=description), format="json")
    assert r.status_code == expected, r.content
