# receivables/models/application.py

"""
PAYMENT APPLICATION

An incoming payment (or part of one) applied against an AR invoice.
"""

from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone

from .invoice import ARInvoice


class ARInvoiceApplication(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    invoice = models.ForeignKey(
        ARInvoice,
        on_delete=models.PROTECT,
        related_name="applications",
    )

    payment_reference = models.CharField(max_length=100)

    amount_applied = models.DecimalField(max_digits=14, decimal_places=2)

    applied_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["applied_at"]

    def __str__(self):
        return f"{self.payment_reference} -> {self.invoice_id} ({self.amount_applied})"
