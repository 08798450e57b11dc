# inventory/services.py

"""
INVENTORY REFERENCE-DATA SERVICES

Deletes issue exactly one persistence call and rely on PROTECT foreign
keys for referential integrity; ConflictError means "still in use".
"""

from __future__ import annotations

import logging

from django.db.models import Count, QuerySet

from common.errors import NotFoundError, translate_persistence_errors
from common.ids import parse_uuid
from inventory.models import InventoryCategory, UoM

logger = logging.getLogger(__name__)


def categories_with_item_counts(*, business_unit_id) -> QuerySet:
    return (
        InventoryCategory.objects
        .filter(business_unit_id=business_unit_id)
        .annotate(item_count=Count("inventory_items"))
        .order_by("name")
    )


def list_uoms() -> QuerySet:
    # UoMs are global; the business unit scope only gates access
    return UoM.objects.all().order_by("name")


def delete_uom(*, uom_id) -> None:
    pk = parse_uuid(uom_id)
    if pk is None:
        raise NotFoundError("UoM not found")

    with translate_persistence_errors():
        deleted, _ = UoM.objects.filter(id=pk).delete()

    if not deleted:
        raise NotFoundError("UoM not found")

    logger.info("UoM deleted", extra={"uom_id": str(pk)})


def delete_inventory_category(*, business_unit_id, category_id) -> None:
    pk = parse_uuid(category_id)
    category = None
    if pk is not None:
        category = InventoryCategory.objects.filter(
            id=pk, business_unit_id=business_unit_id
        ).first()

    if category is None:
        raise NotFoundError("Inventory Category not found")

    with translate_persistence_errors():
        category.delete()

    logger.info(
        "Inventory category deleted",
        extra={"category_id": str(pk), "business_unit_id": str(business_unit_id)},
    )
