# inventory/models/item.py

import uuid

from django.db import models

from business_units.models import BusinessUnit

from .category import InventoryCategory
from .uom import UoM


class InventoryItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    business_unit = models.ForeignKey(
        BusinessUnit,
        on_delete=models.CASCADE,
        related_name="inventory_items",
    )

    category = models.ForeignKey(
        InventoryCategory,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="inventory_items",
    )

    uom = models.ForeignKey(
        UoM,
        on_delete=models.PROTECT,
        related_name="inventory_items",
    )

    name = models.CharField(max_length=255, db_index=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
