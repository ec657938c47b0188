# ============================================
# issues/services/transitions.py
# ============================================
"""
Issue status transition table.

    pending ──assign(admin)──> assigned ──start(staff)──> in_progress ──> resolved | rejected
       └──────────start(staff)──────────┘
    any non-terminal ──override(admin)──> resolved | rejected

Re-applying the current status is always allowed for a handler (no-op refresh).

The admin override is limited to open issues: a resolved or rejected issue
stays put, so an admin cannot turn resolved into rejected or back. This is
narrower than an "any status" override and is a product decision to revisit
with sign-off.

When ISSUES_ENFORCE_TRANSITIONS is off, handlers may move any status to any
other and admins may assign from any status.
"""
from typing import FrozenSet, Mapping

from django.conf import settings

from accounts.models import User
from issues.choices import Status, TERMINAL_STATUSES
from issues.exceptions import AuthorizationError, TransitionError

Role = User.Role

HANDLER_ROLES: FrozenSet[str] = frozenset({Role.DEPT_STAFF, Role.DSW_ADMIN})

# (from status) -> statuses a handler (staff or admin) may move to
STEPWISE: Mapping[str, FrozenSet[str]] = {
    Status.PENDING: frozenset({Status.IN_PROGRESS}),
    Status.ASSIGNED: frozenset({Status.IN_PROGRESS}),
    Status.IN_PROGRESS: frozenset({Status.RESOLVED, Status.REJECTED}),
    Status.RESOLVED: frozenset(),
    Status.REJECTED: frozenset(),
}

ADMIN_OVERRIDE_TARGETS: FrozenSet[str] = frozenset({Status.RESOLVED, Status.REJECTED})

ASSIGNABLE_FROM: FrozenSet[str] = frozenset({Status.PENDING, Status.ASSIGNED})


def enforcing() -> bool:
    return getattr(settings, 'ISSUES_ENFORCE_TRANSITIONS', True)


def require_role(actor, *roles: str) -> None:
    if getattr(actor, 'role', None) not in roles:
        raise AuthorizationError(
            f"Role '{getattr(actor, 'role', None)}' may not perform this action"
        )


def allowed_targets(current: str, role: str) -> FrozenSet[str]:
    """Statuses `role` may set on an issue currently in `current`"""
    if role not in HANDLER_ROLES:
        return frozenset()
    if not enforcing():
        return frozenset(Status.values)
    targets = set(STEPWISE.get(current, frozenset()))
    targets.add(current)
    if role == Role.DSW_ADMIN and current not in TERMINAL_STATUSES:
        targets |= ADMIN_OVERRIDE_TARGETS
    return frozenset(targets)


def check_status_change(current: str, target: str, role: str) -> None:
    if target not in Status.values:
        raise TransitionError(current, target, f"Unknown status '{target}'")
    if target not in allowed_targets(current, role):
        raise TransitionError(current, target)


def check_assignable(current: str) -> None:
    if enforcing() and current not in ASSIGNABLE_FROM:
        raise TransitionError(current, Status.ASSIGNED, f"Cannot assign an issue that is '{current}'")
