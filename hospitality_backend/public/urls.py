# public/urls.py
"""
PUBLIC CATALOG URLS (AllowAny)

Mounted directly under /api/ in backend/urls.py:
- GET /api/public/business-units/
- GET /api/accommodations/
- GET /api/services/
"""

from django.urls import path

from public.views import (
    AccommodationListView,
    HotelServiceListView,
    PublicBusinessUnitListView,
)

app_name = "public"

urlpatterns = [
    path(
        "public/business-units/",
        PublicBusinessUnitListView.as_view(),
        name="business-unit-list",
    ),
    path("accommodations/", AccommodationListView.as_view(), name="accommodation-list"),
    path("services/", HotelServiceListView.as_view(), name="service-list"),
]
