from .accommodations import AccommodationListView
from .business_units import PublicBusinessUnitListView
from .services import HotelServiceListView

__all__ = [
    "AccommodationListView",
    "HotelServiceListView",
    "PublicBusinessUnitListView",
]
