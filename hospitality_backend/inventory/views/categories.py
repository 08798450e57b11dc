# inventory/views/categories.py

"""
INVENTORY CATEGORY MANAGEMENT

GET    /api/<business_unit_id>/inventory-categories-management/
DELETE /api/<business_unit_id>/inventory-categories-management/<category_id>/

Scope: x-business-unit-id header.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response

from common.errors import ConflictError, NotFoundError
from common.views import BusinessUnitScopedAPIView, text_response
from inventory.serializers import InventoryCategoryListSerializer
from inventory.services import categories_with_item_counts, delete_inventory_category


class InventoryCategoryListView(BusinessUnitScopedAPIView):
    log_tag = "INVENTORY_CATEGORIES_GET"

    @extend_schema(
        tags=["Inventory"],
        responses={200: InventoryCategoryListSerializer(many=True)},
        description="Inventory categories of the business unit with live item counts.",
    )
    def get(self, request, *args, **kwargs):
        qs = categories_with_item_counts(business_unit_id=self.business_unit_id)
        return Response(InventoryCategoryListSerializer(qs, many=True).data)


class InventoryCategoryDetailView(BusinessUnitScopedAPIView):
    log_tag = "INVENTORY_CATEGORY_DELETE"
    missing_scope_message = "Business Unit ID and Category ID are required"

    @extend_schema(
        tags=["Inventory"],
        responses={
            200: OpenApiResponse(description="Inventory category deleted successfully"),
            404: OpenApiResponse(description="Inventory Category not found"),
            409: OpenApiResponse(description="Category in use"),
        },
    )
    def delete(self, request, *args, **kwargs):
        category_id = self.require_identifier(
            kwargs.get("category_id"), self.missing_scope_message
        )

        try:
            delete_inventory_category(
                business_unit_id=self.business_unit_id,
                category_id=category_id,
            )
        except NotFoundError as exc:
            return text_response(str(exc), http_status=status.HTTP_404_NOT_FOUND)
        except ConflictError:
            return text_response(
                "Cannot delete: This category is in use by one or more items.",
                http_status=status.HTTP_409_CONFLICT,
            )

        return text_response("Inventory category deleted successfully")
