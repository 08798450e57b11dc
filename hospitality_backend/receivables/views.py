# receivables/views.py

"""
AR INVOICE API

GET    /api/<business_unit_id>/ar-invoices/               (scope: x-business-unit-id)
DELETE /api/<business_unit_id>/ar-invoices/<invoice_id>/  (scope: path)

Delete rules:
- 404 when the invoice is not in the business unit
- 400 when CLOSED
- 400 when payments are applied
- 204 on success
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response

from common.views import SCOPE_PATH, BusinessUnitScopedAPIView, error_response
from receivables.filters import ARInvoiceFilter
from receivables.models import ARInvoice
from receivables.serializers import ARInvoiceSerializer
from receivables.services.exceptions import (
    ClosedInvoiceError,
    InvoiceHasPaymentsError,
    InvoiceInUseError,
    InvoiceNotFoundError,
)
from receivables.services.invoice_service import delete_ar_invoice


class ARInvoiceListView(BusinessUnitScopedAPIView):
    log_tag = "AR_INVOICES_GET"

    @extend_schema(
        tags=["Receivables"],
        parameters=[
            OpenApiParameter("customer", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("status", str, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: ARInvoiceSerializer(many=True)},
    )
    def get(self, request, *args, **kwargs):
        qs = (
            ARInvoice.objects
            .filter(business_unit_id=self.business_unit_id)
            .prefetch_related("applications")
            .order_by("-posting_date", "-doc_num")
        )
        qs = ARInvoiceFilter(request.query_params, queryset=qs).qs

        return Response(ARInvoiceSerializer(qs, many=True).data)


class ARInvoiceDetailView(BusinessUnitScopedAPIView):
    log_tag = "AR_INVOICE_DELETE"
    business_unit_source = SCOPE_PATH
    missing_scope_message = "Business Unit ID is required"

    @extend_schema(
        tags=["Receivables"],
        responses={
            204: OpenApiResponse(description="Invoice deleted"),
            400: OpenApiResponse(description="Closed invoice / payments applied"),
            404: OpenApiResponse(description="AR invoice not found"),
        },
    )
    def delete(self, request, *args, **kwargs):
        invoice_id = self.require_identifier(
            kwargs.get("invoice_id"), "Invoice ID is required"
        )

        try:
            delete_ar_invoice(
                business_unit_id=self.business_unit_id,
                invoice_id=invoice_id,
            )

        except InvoiceNotFoundError as exc:
            return error_response(
                code="AR_INVOICE_NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )

        except ClosedInvoiceError as exc:
            return error_response(
                code="INVOICE_CLOSED",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        except InvoiceHasPaymentsError as exc:
            return error_response(
                code="INVOICE_HAS_PAYMENTS",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        except InvoiceInUseError as exc:
            return error_response(
                code="INVOICE_IN_USE",
                message=str(exc),
                http_status=status.HTTP_409_CONFLICT,
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
