# common/errors.py

"""
DOMAIN ERRORS + PERSISTENCE ERROR CLASSIFIER

Handlers never inspect vendor error codes themselves. A single write is
wrapped in ``translate_persistence_errors()`` and any referential-integrity
failure surfaces as ``ConflictError``, whatever the backing store.

Recognised as "referential constraint violated":
- Django ``ProtectedError`` / ``RestrictedError`` (on_delete=PROTECT/RESTRICT)
- ``IntegrityError`` whose driver error carries SQLSTATE 23503 (Postgres)
- ``IntegrityError`` whose message names a foreign key (SQLite, MySQL)
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from django.db import IntegrityError
from django.db.models import ProtectedError, RestrictedError

FOREIGN_KEY_VIOLATION = "23503"


class DomainError(Exception):
    """Base exception for domain-level failures raised by services."""


class NotFoundError(DomainError):
    """Raised when the targeted resource does not exist in scope."""


class ConflictError(DomainError):
    """Raised when the resource's state or references forbid the operation."""


def _driver_error_code(exc: BaseException) -> Optional[str]:
    cause = exc.__cause__ or exc.__context__
    if cause is None:
        return None
    # psycopg 3 exposes ``sqlstate``; psycopg2 exposes ``pgcode``
    return getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)


def is_referential_violation(exc: BaseException) -> bool:
    if isinstance(exc, (ProtectedError, RestrictedError)):
        return True

    if isinstance(exc, IntegrityError):
        if _driver_error_code(exc) == FOREIGN_KEY_VIOLATION:
            return True
        return "foreign key" in str(exc).lower()

    return False


def classify_persistence_error(exc: BaseException) -> Optional[DomainError]:
    """
    Map a persistence exception to a domain error.

    Returns None when the exception is not one the domain understands;
    the caller should then let it propagate.
    """
    if is_referential_violation(exc):
        return ConflictError("Resource is referenced by other records.")
    return None


@contextmanager
def translate_persistence_errors() -> Iterator[None]:
    try:
        yield
    except (IntegrityError, ProtectedError, RestrictedError) as exc:
        domain_error = classify_persistence_error(exc)
        if domain_error is None:
            raise
        raise domain_error from exc
