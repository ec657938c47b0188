import logging
from typing import Optional

from django.contrib.auth import authenticate
from django.core.exceptions import ValidationError
from django.db import transaction
from rest_framework.authtoken.models import Token

from accounts.models import User

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str,
    role: str = User.Role.STUDENT,
    department: str = "",
    student_number: str = "",
    phone: str = "",
) -> User:
    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise ValidationError("User already exists with this email")

    user = User.objects.create_user(
        email=email,
        password=password,
        full_name=full_name,
        role=role,
        department=department or "",
        student_number=student_number or "",
        phone=phone or "",
    )
    logger.info("[accounts] registered user_id=%s role=%s", user.id, user.role)
    return user


def login_user(*, request, email: str, password: str) -> tuple[User, Token]:
    user: Optional[User] = authenticate(request, email=email, password=password)
    if user is None:
        logger.info("[accounts] login failed for email=%s", email)
        raise ValidationError("Invalid credentials")
    token, _ = Token.objects.get_or_create(user=user)
    return user, token
