"""
MIGRATION: CREATE ARInvoice + ARInvoiceApplication
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("business_units", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ARInvoice",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        primary_key=True,
                        default=uuid.uuid4,
                        editable=False,
                        serialize=False,
                    ),
                ),
                ("doc_num", models.CharField(max_length=50)),
                (
                    "bp_code",
                    models.CharField(
                        max_length=50,
                        db_index=True,
                        help_text="Customer (business partner) code",
                    ),
                ),
                ("customer_name", models.CharField(max_length=255, blank=True)),
                (
                    "status",
                    models.CharField(
                        max_length=16,
                        choices=[
                            ("OPEN", "Open"),
                            ("CLOSED", "Closed"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="OPEN",
                        db_index=True,
                    ),
                ),
                ("document_date", models.DateField()),
                ("posting_date", models.DateField()),
                ("due_date", models.DateField()),
                (
                    "total_amount",
                    models.DecimalField(
                        max_digits=14,
                        decimal_places=2,
                        default=Decimal("0.00"),
                    ),
                ),
                ("remarks", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "business_unit",
                    models.ForeignKey(
                        to="business_units.businessunit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ar_invoices",
                    ),
                ),
            ],
            options={
                "ordering": ["-posting_date", "-doc_num"],
                "verbose_name": "AR Invoice",
                "verbose_name_plural": "AR Invoices",
            },
        ),
        migrations.AddConstraint(
            model_name="arinvoice",
            constraint=models.UniqueConstraint(
                fields=("business_unit", "doc_num"),
                name="uniq_ar_invoice_doc_num_per_business_unit",
            ),
        ),
        migrations.CreateModel(
            name="ARInvoiceApplication",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        primary_key=True,
                        default=uuid.uuid4,
                        editable=False,
                        serialize=False,
                    ),
                ),
                ("payment_reference", models.CharField(max_length=100)),
                (
                    "amount_applied",
                    models.DecimalField(max_digits=14, decimal_places=2),
                ),
                (
                    "applied_at",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "invoice",
                    models.ForeignKey(
                        to="receivables.arinvoice",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="applications",
                    ),
                ),
            ],
            options={
                "ordering": ["applied_at"],
            },
        ),
    ]
