import pytest
from django.core.management import call_command
from rest_framework.test import APIClient

from accounts.models import User

PASSWORD = "S3cure-pass-2025"


@pytest.fixture
def api():
    return APIClient()

@pytest.fixture
def registered(db):
    return User.objects.create_user(email="jane@uni.test", password=PASSWORD, full_name="Jane Doe")


@pytest.mark.django_db
def test_register_student(api):
    r = api.post("/api/auth/register/", {
        "email": "new@uni.test", "password": PASSWORD, "full_name": "New Student", "student_number": "011191002",
    }, format="json")
    assert r.status_code == 201, r.content
    body = r.json()
    assert body["role"] == "student"
    assert "password" not in body
    assert User.objects.get(email="new@uni.test").check_password(PASSWORD)

@pytest.mark.django_db
def test_register_duplicate_email(api, registered):
    r = api.post("/api/auth/register/", {
        "email": "jane@uni.test", "password": PASSWORD, "full_name": "Jane Again",
    }, format="json")
    assert r.status_code == 400
    assert User.objects.filter(email="jane@uni.test").count() == 1

@pytest.mark.django_db
def test_register_staff_needs_department(api):
    r = api.post("/api/auth/register/", {
        "email": "staff@uni.test", "password": PASSWORD, "full_name": "Staff", "role": "dept_staff",
    }, format="json")
    assert r.status_code == 400
    assert "department" in r.json()

@pytest.mark.django_db
def test_login_and_me(api, registered):
    r = api.post("/api/auth/login/", {"email": "jane@uni.test", "password": PASSWORD}, format="json")
    assert r.status_code == 200, r.content
    token = r.json()["token"]
    assert r.json()["user"]["email"] == "jane@uni.test"

    api.credentials(HTTP_AUTHORIZATION=f"Token {token}")
    r = api.get("/api/auth/me/")
    assert r.status_code == 200
    assert r.json()["full_name"] == "Jane Doe"

@pytest.mark.django_db
def test_login_wrong_password(api, registered):
    r = api.post("/api/auth/login/", {"email": "jane@uni.test", "password": "nope"}, format="json")
    assert r.status_code == 400

@pytest.mark.django_db
def test_seed_demo_users_is_idempotent():
    call_command("seed_demo_users", "--password", PASSWORD)
    call_command("seed_demo_users", "--password", PASSWORD)
    assert User.objects.count() == 3
    assert User.objects.filter(role=User.Role.DSW_ADMIN).count() == 1
