# receivables/services/invoice_service.py

"""
======================================================
PATH: receivables/services/invoice_service.py
======================================================
AR INVOICE SERVICE

delete_ar_invoice()
- Looks the invoice up inside the caller's business unit (with applications)
- Refuses CLOSED invoices
- Refuses invoices with payment applications
- Issues exactly one delete

No locking: two concurrent deletes both get to try; the loser sees
not-found or a PROTECT conflict from the store.
"""

from __future__ import annotations

import logging

from common.errors import ConflictError, translate_persistence_errors
from common.ids import parse_uuid
from receivables.models import ARInvoice
from receivables.services.exceptions import (
    ClosedInvoiceError,
    InvoiceHasPaymentsError,
    InvoiceInUseError,
    InvoiceNotFoundError,
)

logger = logging.getLogger(__name__)


def get_invoice_with_applications(*, business_unit_id, invoice_id) -> ARInvoice:
    bu_pk = parse_uuid(business_unit_id)
    invoice_pk = parse_uuid(invoice_id)
    if bu_pk is None or invoice_pk is None:
        raise InvoiceNotFoundError("AR invoice not found")

    invoice = (
        ARInvoice.objects
        .filter(business_unit_id=bu_pk, id=invoice_pk)
        .prefetch_related("applications")
        .first()
    )
    if invoice is None:
        raise InvoiceNotFoundError("AR invoice not found")
    return invoice


def ensure_invoice_deletable(invoice: ARInvoice) -> None:
    if invoice.is_closed:
        raise ClosedInvoiceError("Cannot delete closed invoice")

    if len(invoice.applications.all()) > 0:
        raise InvoiceHasPaymentsError("Cannot delete invoice with payments applied")


def delete_ar_invoice(*, business_unit_id, invoice_id) -> None:
    invoice = get_invoice_with_applications(
        business_unit_id=business_unit_id,
        invoice_id=invoice_id,
    )
    ensure_invoice_deletable(invoice)

    try:
        with translate_persistence_errors():
            invoice.delete()
    except ConflictError as exc:
        raise InvoiceInUseError("Cannot delete invoice with payments applied") from exc

    logger.info(
        "AR invoice deleted",
        extra={"invoice_id": str(invoice_id), "business_unit_id": str(business_unit_id)},
    )
