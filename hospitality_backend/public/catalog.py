# public/catalog.py

"""
PUBLIC CATALOG QUERIES

Read-only. Only active rows are exposed; every query is a single
SELECT (business unit joined in).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from business_units.models import BusinessUnit
from public.models import Accommodation, HotelService


def list_public_business_units():
    return BusinessUnit.objects.only("id", "name").order_by("name")


def list_active_accommodations():
    return (
        Accommodation.objects.filter(is_active=True)
        .select_related("business_unit")
        .order_by("business_unit__name", "sort_order")
    )


def list_active_services():
    return (
        HotelService.objects.filter(is_active=True)
        .select_related("business_unit")
        .order_by("category", "name")
    )


def group_by_category(rows: Iterable[Mapping]) -> dict[str, list]:
    """
    {category: [row, ...]} keeping the incoming order, both for keys
    (first appearance) and within each bucket.
    """
    grouped: dict[str, list] = {}
    for row in rows:
        grouped.setdefault(row["category"], []).append(row)
    return grouped
