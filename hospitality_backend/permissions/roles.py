# permissions/roles.py

from __future__ import annotations

from typing import Iterable, Optional


# =========================================================
# ROLE CONSTANTS (STAFF JOB ROLES)
# =========================================================
# Stored on User.role and on each business-unit Assignment.
ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_ACCOUNTANT = "accountant"
ROLE_CASHIER = "cashier"

ROLE_CHOICES = [
    (ROLE_ADMIN, "Admin"),
    (ROLE_MANAGER, "Manager"),
    (ROLE_ACCOUNTANT, "Accountant"),
    (ROLE_CASHIER, "Cashier"),
]

STAFF_ROLES = {value for value, _ in ROLE_CHOICES}


# =========================================================
# CAPABILITIES
# =========================================================
# Routes declare capabilities, never raw role strings.
CAP_POS_ACCESS = "pos.access"

ALL_CAPABILITIES = {
    CAP_POS_ACCESS,
}


# =========================================================
# ROLE → CAPABILITY MAP
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_ADMIN: {
        *ALL_CAPABILITIES,
    },
    ROLE_MANAGER: set(),
    ROLE_ACCOUNTANT: set(),
    ROLE_CASHIER: {
        CAP_POS_ACCESS,
    },
}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    """
    Primary role of an identity.

    The user's own role wins; otherwise the role of their earliest
    business-unit assignment is used (see User.primary_role).
    """
    if user is None:
        return None
    return getattr(user, "primary_role", None) or getattr(user, "role", None) or None


def capabilities_for_role(role: Optional[str]) -> set[str]:
    if not role:
        return set()
    return set(ROLE_CAPABILITIES.get(role, set()))


def has_any_capability(role: Optional[str], required: Iterable[str]) -> bool:
    required = set(required or ())
    if not required:
        return True
    return bool(capabilities_for_role(role) & required)
