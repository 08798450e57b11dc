from .categories import InventoryCategoryDetailView, InventoryCategoryListView
from .uoms import UoMDetailView, UoMListView

__all__ = [
    "InventoryCategoryDetailView",
    "InventoryCategoryListView",
    "UoMDetailView",
    "UoMListView",
]
