# inventory/views/uoms.py

"""
UNIT OF MEASURE MANAGEMENT

GET    /api/<business_unit_id>/uoms-management/
DELETE /api/<business_unit_id>/uoms-management/<uom_id>/

Scope: x-business-unit-id header. The listing is NOT filtered by
business unit: UoMs are global reference data.
Delete answers in plain text (200 / 404 / 409).
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response

from common.errors import ConflictError, NotFoundError
from common.views import BusinessUnitScopedAPIView, text_response
from inventory.serializers import UoMSerializer
from inventory.services import delete_uom, list_uoms

UOM_IN_USE_MESSAGE = "Cannot delete: This UoM is currently in use by one or more items."


class UoMListView(BusinessUnitScopedAPIView):
    log_tag = "UOMS_GET"

    @extend_schema(tags=["Inventory"], responses={200: UoMSerializer(many=True)})
    def get(self, request, *args, **kwargs):
        return Response(UoMSerializer(list_uoms(), many=True).data)


class UoMDetailView(BusinessUnitScopedAPIView):
    log_tag = "UOM_DELETE"
    missing_scope_message = "Business Unit ID and UoM ID are required"

    @extend_schema(
        tags=["Inventory"],
        responses={
            200: OpenApiResponse(description="UoM deleted successfully"),
            404: OpenApiResponse(description="UoM not found"),
            409: OpenApiResponse(description="UoM in use"),
        },
    )
    def delete(self, request, *args, **kwargs):
        uom_id = self.require_identifier(kwargs.get("uom_id"), self.missing_scope_message)

        try:
            delete_uom(uom_id=uom_id)
        except NotFoundError as exc:
            return text_response(str(exc), http_status=status.HTTP_404_NOT_FOUND)
        except ConflictError:
            return text_response(UOM_IN_USE_MESSAGE, http_status=status.HTTP_409_CONFLICT)

        return text_response("UoM deleted successfully")
