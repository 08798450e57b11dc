"""
AR INVOICE API TESTS

Run with:
    python manage.py test receivables -v 2
"""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from common.testing import assign, create_business_unit, create_user, scope_headers
from receivables.models import ARInvoice, ARInvoiceApplication


def _create_invoice(business_unit, *, doc_num="INV-0001", status=ARInvoice.Status.OPEN,
                    bp_code="C0001", posting_date=date(2025, 1, 10)):
    return ARInvoice.objects.create(
        business_unit=business_unit,
        doc_num=doc_num,
        bp_code=bp_code,
        customer_name="Walk-in Guest",
        status=status,
        document_date=posting_date,
        posting_date=posting_date,
        due_date=posting_date,
        total_amount=Decimal("1500.00"),
    )


def _detail_url(business_unit_id, invoice_id):
    return reverse(
        "receivables:ar-invoice-detail",
        kwargs={"business_unit_id": str(business_unit_id), "invoice_id": str(invoice_id)},
    )


class ARInvoiceDeleteTests(TestCase):
    """
    GUARANTEES:
    - 401 without a session, 403 without an assignment (nothing deleted)
    - CLOSED invoices and invoices with payments are refused with 400
    - Deletable invoices answer 204 and are gone afterwards
    """

    def setUp(self):
        self.client = APIClient()
        self.bu = create_business_unit()
        self.user = create_user()
        assign(self.user, self.bu, role="accountant")
        self.invoice = _create_invoice(self.bu)

    def test_requires_authentication(self):
        res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertTrue(ARInvoice.objects.filter(id=self.invoice.id).exists())

    def test_forbidden_without_assignment(self):
        outsider = create_user(email="outsider@example.com")
        self.client.force_authenticate(user=outsider)

        res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(ARInvoice.objects.filter(id=self.invoice.id).exists())

    def test_missing_invoice_is_404(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(_detail_url(self.bu.id, uuid.uuid4()))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["message"], "AR invoice not found")

    def test_malformed_invoice_id_is_404(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(_detail_url(self.bu.id, "not-a-uuid"))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_invoice_of_other_business_unit_is_404(self):
        other_bu = create_business_unit(name="Annex")
        foreign = _create_invoice(other_bu, doc_num="INV-9999")
        self.client.force_authenticate(user=self.user)

        res = self.client.delete(_detail_url(self.bu.id, foreign.id))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(ARInvoice.objects.filter(id=foreign.id).exists())

    def test_closed_invoice_is_refused(self):
        self.invoice.status = ARInvoice.Status.CLOSED
        self.invoice.save()
        self.client.force_authenticate(user=self.user)

        res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["message"], "Cannot delete closed invoice")
        self.assertTrue(ARInvoice.objects.filter(id=self.invoice.id).exists())

    def test_invoice_with_payments_is_refused(self):
        ARInvoiceApplication.objects.create(
            invoice=self.invoice,
            payment_reference="OR-1001",
            amount_applied=Decimal("500.00"),
        )
        self.client.force_authenticate(user=self.user)

        res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            res.data["error"]["message"], "Cannot delete invoice with payments applied"
        )
        self.assertTrue(ARInvoice.objects.filter(id=self.invoice.id).exists())

    def test_deletable_invoice_is_removed(self):
        self.client.force_authenticate(user=self.user)

        res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(ARInvoice.objects.filter(id=self.invoice.id).exists())

        again = self.client.delete(_detail_url(self.bu.id, self.invoice.id))
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)

    def test_unexpected_failure_is_logged_and_generic(self):
        self.client.force_authenticate(user=self.user)

        with mock.patch(
            "receivables.views.delete_ar_invoice",
            side_effect=RuntimeError("database exploded"),
        ):
            with self.assertLogs("common.views", level="ERROR") as logs:
                res = self.client.delete(_detail_url(self.bu.id, self.invoice.id))

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data, {"detail": "Internal error"})
        self.assertIn("[AR_INVOICE_DELETE]", logs.output[0])


class ARInvoiceListTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.bu = create_business_unit()
        self.user = create_user()
        assign(self.user, self.bu)
        self.client.force_authenticate(user=self.user)

        _create_invoice(self.bu, doc_num="INV-0001", posting_date=date(2025, 1, 1))
        _create_invoice(
            self.bu,
            doc_num="INV-0002",
            bp_code="C0002",
            status=ARInvoice.Status.CLOSED,
            posting_date=date(2025, 2, 1),
        )
        _create_invoice(self.bu, doc_num="INV-0003", posting_date=date(2025, 2, 1))
        _create_invoice(create_business_unit(name="Annex"), doc_num="INV-0004")

        self.url = reverse("receivables:ar-invoice-list", kwargs={"business_unit_id": str(self.bu.id)})

    def test_header_is_required(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_lists_business_unit_invoices_newest_first(self):
        res = self.client.get(self.url, **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [row["docNum"] for row in res.data],
            ["INV-0003", "INV-0002", "INV-0001"],
        )

    def test_filter_by_customer(self):
        res = self.client.get(self.url, {"customer": "C0002"}, **scope_headers(self.bu))
        self.assertEqual([row["docNum"] for row in res.data], ["INV-0002"])

    def test_filter_by_status(self):
        res = self.client.get(self.url, {"status": "closed"}, **scope_headers(self.bu))
        self.assertEqual([row["docNum"] for row in res.data], ["INV-0002"])

    def test_unknown_status_is_ignored(self):
        res = self.client.get(self.url, {"status": "PAID"}, **scope_headers(self.bu))
        self.assertEqual(len(res.data), 3)
