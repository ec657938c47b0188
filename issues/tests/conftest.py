import pytest
from django.contrib.auth import get_user_model

from issues.choices import Department
from issues.clients.webhook_client import WebhookClient
from issues.models import Issue
from issues.services.issue import IssueService
from issues.services.notification import NotificationService

User = get_user_model()

CSE = Department.CSE
CIVIL = Department.CIVIL


@pytest.fixture
def student(db):
    return User.objects.create_user(
        email="student@uni.test", password="pass", full_name="Student One",
        role=User.Role.STUDENT, student_number="S-001",
    )

@pytest.fixture
def other_student(db):
    return User.objects.create_user(
        email="student2@uni.test", password="pass", full_name="Student Two", role=User.Role.STUDENT,
    )

@pytest.fixture
def admin(db):
    return User.objects.create_user(
        email="dsw@uni.test", password="pass", full_name="DSW Admin", role=User.Role.DSW_ADMIN,
    )

@pytest.fixture
def staff(db):
    return User.objects.create_user(
        email="cse.staff@uni.test", password="pass", full_name="CSE Staff",
        role=User.Role.DEPT_STAFF, department=CSE,
    )

@pytest.fixture
def staff2(db):
    return User.objects.create_user(
        email="civil.staff@uni.test", password="pass", full_name="Civil Staff",
        role=User.Role.DEPT_STAFF, department=CIVIL,
    )

@pytest.fixture
def service(db):
    # no webhook URL: publish is a logged no-op
    return IssueService(notifications=NotificationService(webhook=WebhookClient(url="")))

@pytest.fixture
def issue_data():
    return {
        "title": "Projector broken",
        "description": "The projector in lab 3 does not turn on at all.",
        "category": "Facilities & Infrastructure",
        "department": CSE,
        "priority": Issue.Priority.HIGH,
    }

@pytest.fixture
def issue(service, student, issue_data):
    return service.create_issue(actor=student, **issue_data).current
