# public/models.py

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from business_units.models import BusinessUnit


class Accommodation(models.Model):
    """
    Bookable room / villa / suite shown on the public site.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    business_unit = models.ForeignKey(
        BusinessUnit,
        on_delete=models.CASCADE,
        related_name="accommodations",
    )

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=50, help_text="room, suite, villa, ...")
    description = models.TextField(blank=True)
    short_description = models.CharField(max_length=500, blank=True)

    capacity = models.PositiveIntegerField(default=1)
    bedrooms = models.PositiveIntegerField(default=1)
    bathrooms = models.PositiveIntegerField(default=1)
    area = models.CharField(max_length=50, blank=True, help_text='Display text, e.g. "45 sqm"')

    price_per_night = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    image_url = models.URLField(max_length=500, blank=True)
    gallery = models.JSONField(default=list, blank=True)
    amenities = models.JSONField(default=list, blank=True)

    sort_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["business_unit__name", "sort_order"]

    def __str__(self):
        return self.name


class HotelService(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    business_unit = models.ForeignKey(
        BusinessUnit,
        on_delete=models.CASCADE,
        related_name="hotel_services",
    )

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, db_index=True)

    base_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    currency = models.CharField(max_length=3, default="PHP")
    location = models.CharField(max_length=255, blank=True)
    requires_booking = models.BooleanField(default=False)
    duration = models.PositiveIntegerField(null=True, blank=True, help_text="Minutes")
    capacity = models.PositiveIntegerField(null=True, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["category", "name"]

    def __str__(self):
        return f"{self.category}: {self.name}"
