# pos/views.py

"""
POS MENU (CASHIER SCREENS)

GET /api/<business_unit_id>/pos/menu-items/
GET /api/<business_unit_id>/pos/menu-categories/

Scope: x-business-unit-id header.
Role gate: pos.access capability (admin, cashier).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from common.views import BUSINESS_UNIT_HEADER, BusinessUnitScopedAPIView
from permissions.roles import CAP_POS_ACCESS
from pos.models import MenuCategory, MenuItem
from pos.serializers import MenuCategorySerializer, MenuItemSerializer


class PosAPIView(BusinessUnitScopedAPIView):
    required_any_capabilities = {CAP_POS_ACCESS}
    missing_scope_message = f"Missing {BUSINESS_UNIT_HEADER} header"


class MenuItemListView(PosAPIView):
    log_tag = "POS_MENU_ITEMS_GET"

    @extend_schema(
        tags=["POS"],
        responses={
            200: MenuItemSerializer(many=True),
            400: OpenApiResponse(description="Missing business unit header"),
            403: OpenApiResponse(description="Forbidden"),
        },
        description="Active menu items of the business unit, by category order then name.",
    )
    def get(self, request, *args, **kwargs):
        items = (
            MenuItem.objects.filter(business_unit_id=self.business_unit_id, is_active=True)
            .select_related("category")
            .order_by("category__sort_order", "name")
        )
        return Response(MenuItemSerializer(items, many=True).data)


class MenuCategoryListView(PosAPIView):
    log_tag = "POS_MENU_CATEGORIES_GET"

    @extend_schema(tags=["POS"], responses={200: MenuCategorySerializer(many=True)})
    def get(self, request, *args, **kwargs):
        categories = MenuCategory.objects.filter(
            business_unit_id=self.business_unit_id
        ).order_by("sort_order")
        return Response(MenuCategorySerializer(categories, many=True).data)
