"""
PATH: inventory/models/__init__.py

Inventory models export surface.
"""

from .uom import UoM
from .category import InventoryCategory
from .item import InventoryItem

__all__ = [
    "UoM",
    "InventoryCategory",
    "InventoryItem",
]
