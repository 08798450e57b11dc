# business_units/models.py

import uuid

from django.db import models


class BusinessUnit(models.Model):
    """
    A tenant / location scope (e.g. a hotel property).

    Most operational data and every scoped authorization check is
    partitioned by business unit.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
