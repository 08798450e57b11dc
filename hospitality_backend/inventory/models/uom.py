# inventory/models/uom.py

import uuid

from django.db import models


class UoM(models.Model):
    """
    Unit of measure.

    Global reference data: not partitioned by business unit.
    Items reference it with PROTECT, so an in-use UoM cannot be deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=100, unique=True)
    symbol = models.CharField(max_length=20)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name = "Unit of Measure"
        verbose_name_plural = "Units of Measure"

    def __str__(self):
        return f"{self.name} ({self.symbol})"
