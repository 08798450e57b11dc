# receivables/models/invoice.py

"""
======================================================
PATH: receivables/models/invoice.py
======================================================
AR INVOICE MODEL

Accounts-receivable invoice issued by a business unit to a customer
(business partner).

Deletion guarantees (enforced in receivables.services.invoice_service):
- CLOSED invoices are never deleted
- Invoices with payment applications are never deleted
  (also backed by PROTECT on ARInvoiceApplication.invoice)
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import models

from business_units.models import BusinessUnit


class ARInvoice(models.Model):
    class Status(models.TextChoices):
        OPEN = "OPEN", "Open"
        CLOSED = "CLOSED", "Closed"
        CANCELLED = "CANCELLED", "Cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    business_unit = models.ForeignKey(
        BusinessUnit,
        on_delete=models.CASCADE,
        related_name="ar_invoices",
    )

    doc_num = models.CharField(max_length=50)

    bp_code = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Customer (business partner) code",
    )
    customer_name = models.CharField(max_length=255, blank=True)

    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.OPEN,
        db_index=True,
    )

    document_date = models.DateField()
    posting_date = models.DateField()
    due_date = models.DateField()

    total_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    remarks = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-posting_date", "-doc_num"]
        constraints = [
            models.UniqueConstraint(
                fields=["business_unit", "doc_num"],
                name="uniq_ar_invoice_doc_num_per_business_unit",
            ),
        ]
        verbose_name = "AR Invoice"
        verbose_name_plural = "AR Invoices"

    def __str__(self):
        return f"{self.doc_num} ({self.status})"

    @property
    def is_closed(self) -> bool:
        return self.status == self.Status.CLOSED
