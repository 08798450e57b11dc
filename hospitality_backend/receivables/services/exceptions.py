# receivables/services/exceptions.py

"""
RECEIVABLES SERVICE ERRORS

Centralized domain errors for AR invoice operations.
"""

from common.errors import ConflictError, DomainError, NotFoundError


class ReceivablesServiceError(DomainError):
    """Base exception for all receivables service failures."""


class InvoiceNotFoundError(ReceivablesServiceError, NotFoundError):
    """Raised when the invoice does not exist in the business unit."""


class InvoiceNotDeletableError(ReceivablesServiceError):
    """Raised when the invoice's state forbids deletion."""


class ClosedInvoiceError(InvoiceNotDeletableError):
    """Raised when deleting an invoice whose status is CLOSED."""


class InvoiceHasPaymentsError(InvoiceNotDeletableError):
    """Raised when deleting an invoice that has payment applications."""


class InvoiceInUseError(ReceivablesServiceError, ConflictError):
    """Raised when the store refuses the delete because of references."""
