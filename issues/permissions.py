from rest_framework.permissions import BasePermission

from accounts.models import User


class IsDswAdmin(BasePermission):
    message = "DSW admin privilege required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == User.Role.DSW_ADMIN)
