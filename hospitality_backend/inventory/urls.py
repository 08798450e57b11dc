# inventory/urls.py

from django.urls import path

from inventory.views import (
    InventoryCategoryDetailView,
    InventoryCategoryListView,
    UoMDetailView,
    UoMListView,
)

app_name = "inventory"

urlpatterns = [
    path(
        "inventory-categories-management/",
        InventoryCategoryListView.as_view(),
        name="category-list",
    ),
    path(
        "inventory-categories-management/<str:category_id>/",
        InventoryCategoryDetailView.as_view(),
        name="category-detail",
    ),
    path("uoms-management/", UoMListView.as_view(), name="uom-list"),
    path("uoms-management/<str:uom_id>/", UoMDetailView.as_view(), name="uom-detail"),
]
