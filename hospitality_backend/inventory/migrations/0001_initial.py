"""
MIGRATION: CREATE UoM, InventoryCategory, InventoryItem
"""

from __future__ import annotations

import uuid

from django.db import migrations, models
import django.db.models.deletion


def _uuid_pk():
    return models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        serialize=False,
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("business_units", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="UoM",
            fields=[
                ("id", _uuid_pk()),
                ("name", models.CharField(max_length=100, unique=True)),
                ("symbol", models.CharField(max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name": "Unit of Measure",
                "verbose_name_plural": "Units of Measure",
            },
        ),
        migrations.CreateModel(
            name="InventoryCategory",
            fields=[
                ("id", _uuid_pk()),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "business_unit",
                    models.ForeignKey(
                        to="business_units.businessunit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_categories",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "Inventory categories",
            },
        ),
        migrations.AddConstraint(
            model_name="inventorycategory",
            constraint=models.UniqueConstraint(
                fields=("business_unit", "name"),
                name="uniq_inventory_category_name_per_business_unit",
            ),
        ),
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", _uuid_pk()),
                ("name", models.CharField(max_length=255, db_index=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "business_unit",
                    models.ForeignKey(
                        to="business_units.businessunit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_items",
                    ),
                ),
                (
                    "category",
                    models.ForeignKey(
                        to="inventory.inventorycategory",
                        on_delete=django.db.models.deletion.PROTECT,
                        null=True,
                        blank=True,
                        related_name="inventory_items",
                    ),
                ),
                (
                    "uom",
                    models.ForeignKey(
                        to="inventory.uom",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="inventory_items",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
    ]
