# permissions/access.py

"""
BUSINESS UNIT ACCESS GUARD

allow()
- Pure predicate over plain values. Never raises; no match simply means False.

authorize()
- Reads the identity (assignment set + primary role) and returns an
  AccessDecision carrying the denial reason.

A missing business unit id is NOT a guard concern: handlers reject it as a
bad request before calling in here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from permissions.roles import get_user_role, has_any_capability

DENIED_NOT_ASSIGNED = "not_assigned"
DENIED_CAPABILITY_MISSING = "capability_missing"


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOWED = AccessDecision(allowed=True)


def _normalize_id(value) -> str:
    return str(value or "").strip()


def allow(
    business_unit_id,
    assignments: Iterable,
    role: Optional[str] = None,
    allowed_roles: Optional[Iterable[str]] = None,
) -> bool:
    """
    True iff some assignment matches the requested business unit AND
    (no role whitelist was given, or role is in it).

    assignments are business unit ids (any str()-able value).
    """
    wanted = _normalize_id(business_unit_id)
    if not wanted:
        return False

    if not any(_normalize_id(a) == wanted for a in assignments or ()):
        return False

    if allowed_roles is None:
        return True

    return role in set(allowed_roles)


def assigned_business_unit_ids(user) -> list[str]:
    assignments = getattr(user, "assignments", None)
    if assignments is None:
        return []
    return [str(a.business_unit_id) for a in assignments.all()]


def authorize(
    user,
    business_unit_id,
    *,
    required_any_capabilities: Optional[Iterable[str]] = None,
) -> AccessDecision:
    if not allow(business_unit_id, assigned_business_unit_ids(user)):
        return AccessDecision(allowed=False, reason=DENIED_NOT_ASSIGNED)

    if required_any_capabilities and not has_any_capability(
        get_user_role(user), required_any_capabilities
    ):
        return AccessDecision(allowed=False, reason=DENIED_CAPABILITY_MISSING)

    return ALLOWED
