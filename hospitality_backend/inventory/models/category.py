# inventory/models/category.py

import uuid

from django.db import models

from business_units.models import BusinessUnit


class InventoryCategory(models.Model):
    """
    Grouping of inventory items within one business unit.

    itemCount is derived at read time (annotation), never stored.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    business_unit = models.ForeignKey(
        BusinessUnit,
        on_delete=models.CASCADE,
        related_name="inventory_categories",
    )

    name = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["business_unit", "name"],
                name="uniq_inventory_category_name_per_business_unit",
            ),
        ]
        verbose_name_plural = "Inventory categories"

    def __str__(self):
        return self.name
