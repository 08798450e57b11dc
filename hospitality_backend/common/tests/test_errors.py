from django.db import IntegrityError
from django.db.models import ProtectedError
from django.test import SimpleTestCase

from common.errors import (
    ConflictError,
    classify_persistence_error,
    is_referential_violation,
    translate_persistence_errors,
)


class _DriverError(Exception):
    def __init__(self, message, sqlstate):
        super().__init__(message)
        self.sqlstate = sqlstate


class _Psycopg2Error(Exception):
    def __init__(self, message, pgcode):
        super().__init__(message)
        self.pgcode = pgcode


def _integrity_error_from(cause, message="constraint failed"):
    try:
        raise IntegrityError(message) from cause
    except IntegrityError as exc:
        return exc


class PersistenceErrorClassifierTests(SimpleTestCase):
    """
    GUARANTEES:
    - Referential-integrity failures become ConflictError
    - Anything else is left for the caller to propagate
    """

    def test_protected_error_is_referential(self):
        exc = ProtectedError("protected", set())
        self.assertTrue(is_referential_violation(exc))
        self.assertIsInstance(classify_persistence_error(exc), ConflictError)

    def test_sqlstate_23503_is_referential(self):
        exc = _integrity_error_from(_DriverError("update or delete violates", "23503"))
        self.assertTrue(is_referential_violation(exc))

    def test_psycopg2_pgcode_is_referential(self):
        exc = _integrity_error_from(_Psycopg2Error("violates", "23503"))
        self.assertTrue(is_referential_violation(exc))

    def test_foreign_key_message_is_referential(self):
        exc = IntegrityError("FOREIGN KEY constraint failed")
        self.assertTrue(is_referential_violation(exc))

    def test_unique_violation_is_not_referential(self):
        exc = _integrity_error_from(_DriverError("duplicate key", "23505"), "duplicate key")
        self.assertFalse(is_referential_violation(exc))
        self.assertIsNone(classify_persistence_error(exc))

    def test_non_persistence_error_is_unclassified(self):
        self.assertIsNone(classify_persistence_error(ValueError("nope")))

    def test_context_manager_translates_referential_violation(self):
        with self.assertRaises(ConflictError) as ctx:
            with translate_persistence_errors():
                raise ProtectedError("protected", set())
        self.assertIsInstance(ctx.exception.__cause__, ProtectedError)

    def test_context_manager_reraises_unclassified_error(self):
        with self.assertRaises(IntegrityError):
            with translate_persistence_errors():
                raise IntegrityError("UNIQUE constraint failed")
