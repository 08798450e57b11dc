"""
MIGRATION: CREATE Accommodation + HotelService
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


def _uuid_pk():
    return models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        serialize=False,
    )


def _price():
    return models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("business_units", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Accommodation",
            fields=[
                ("id", _uuid_pk()),
                ("name", models.CharField(max_length=255)),
                (
                    "type",
                    models.CharField(max_length=50, help_text="room, suite, villa, ..."),
                ),
                ("description", models.TextField(blank=True)),
                ("short_description", models.CharField(max_length=500, blank=True)),
                ("capacity", models.PositiveIntegerField(default=1)),
                ("bedrooms", models.PositiveIntegerField(default=1)),
                ("bathrooms", models.PositiveIntegerField(default=1)),
                (
                    "area",
                    models.CharField(
                        max_length=50, blank=True, help_text='Display text, e.g. "45 sqm"'
                    ),
                ),
                ("price_per_night", _price()),
                ("image_url", models.URLField(max_length=500, blank=True)),
                ("gallery", models.JSONField(default=list, blank=True)),
                ("amenities", models.JSONField(default=list, blank=True)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "business_unit",
                    models.ForeignKey(
                        to="business_units.businessunit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="accommodations",
                    ),
                ),
            ],
            options={
                "ordering": ["business_unit__name", "sort_order"],
            },
        ),
        migrations.CreateModel(
            name="HotelService",
            fields=[
                ("id", _uuid_pk()),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(max_length=100, db_index=True)),
                ("base_price", _price()),
                ("currency", models.CharField(max_length=3, default="PHP")),
                ("location", models.CharField(max_length=255, blank=True)),
                ("requires_booking", models.BooleanField(default=False)),
                (
                    "duration",
                    models.PositiveIntegerField(null=True, blank=True, help_text="Minutes"),
                ),
                ("capacity", models.PositiveIntegerField(null=True, blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "business_unit",
                    models.ForeignKey(
                        to="business_units.businessunit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="hotel_services",
                    ),
                ),
            ],
            options={
                "ordering": ["category", "name"],
            },
        ),
    ]
