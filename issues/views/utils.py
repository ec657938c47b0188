"""
View helpers: OpenAPI parameter/response shorthands and the per-request
service wiring shared by the issue endpoints.
"""
from typing import Dict

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers

from accounts.models import User
from issues.exceptions import AuthorizationError
from issues.services.issue import IssueService

ErrorSerializer = inline_serializer(name="Error", fields={"detail": serializers.CharField()})

_ERROR_DESCRIPTIONS = {
    400: "Invalid input",
    403: "Role may not perform this action",
    404: "Not found",
    409: "Illegal status transition",
}


def path_int(name: str, description: str) -> OpenApiParameter:
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)


def query(name: str, description: str, kind=OpenApiTypes.STR) -> OpenApiParameter:
    return OpenApiParameter(name, kind, OpenApiParameter.QUERY, required=False, description=description)


def q_str(name: str, description: str) -> OpenApiParameter:
    return query(name, description)


def q_int(name: str, description: str) -> OpenApiParameter:
    return query(name, description, OpenApiTypes.INT)


def std_errors(*codes: int) -> Dict:
    """Error responses for `responses=`; 400/403/404 unless codes are given"""
    return {
        code: OpenApiResponse(ErrorSerializer, description=_ERROR_DESCRIPTIONS[code])
        for code in (codes or (400, 403, 404))
    }


class IssueServiceMixin:
    """One service (and repository) per request"""

    def get_service(self) -> IssueService:
        return IssueService()

    @staticmethod
    def check_visible(user, issue) -> None:
        """Students see their own issues, staff their department's or those assigned to them"""
        if user.role == User.Role.STUDENT and issue.student_id != user.pk:
            raise AuthorizationError("You can only view your own issues")
        if (
            user.role == User.Role.DEPT_STAFF
            and user.department
            and issue.department != user.department
            and issue.assigned_to_id != user.pk
        ):
            raise AuthorizationError("This issue belongs to another department")
