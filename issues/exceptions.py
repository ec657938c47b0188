# ============================================
# issues/exceptions.py
# ============================================
"""
Lifecycle errors, built on Django's own exception classes:

- ValidationError     malformed input                       -> 400
- NotFoundError       unknown issue / comment / notification -> 404
- AuthorizationError  actor role may not perform the action  -> 403
- TransitionError     status move outside the transition table -> 409

Failed operations never leave a partial change behind; every mutation runs
inside one database transaction.
"""
import logging

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

__all__ = [
    'ValidationError',
    'NotFoundError',
    'AuthorizationError',
    'TransitionError',
    'api_exception_handler',
]


class NotFoundError(ObjectDoesNotExist):
    pass


class AuthorizationError(PermissionDenied):
    pass


class TransitionError(ValidationError):
    def __init__(self, current: str, target: str, message: str = ''):
        self.current = current
        self.target = target
        super().__init__(message or f"Cannot move issue from '{current}' to '{target}'")


def _validation_detail(exc: ValidationError):
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return exc.messages


def api_exception_handler(exc, context):
    """Map lifecycle errors onto DRF responses, then defer to the default handler"""
    if isinstance(exc, TransitionError):
        logger.info("[issues] rejected transition %s -> %s", exc.current, exc.target)
        return Response({'detail': exc.messages[0]}, status=status.HTTP_409_CONFLICT)

    if isinstance(exc, ValidationError):
        exc = exceptions.ValidationError(detail=_validation_detail(exc))
    elif isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or None)

    return exception_handler(exc, context)
