# public/views/business_units.py

"""
GET /api/public/business-units/

Consumed cross-origin by the marketing site: CORS headers are attached
to every response this view produces (success, throttled, 500).
"""

from __future__ import annotations

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from public.catalog import list_public_business_units
from public.serializers import PublicBusinessUnitSerializer
from public.views.base import PublicCatalogAPIView


def public_cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.PUBLIC_CORS_ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": settings.PUBLIC_CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": settings.PUBLIC_CORS_ALLOW_HEADERS,
    }


class PublicBusinessUnitListView(PublicCatalogAPIView):
    log_tag = "PUBLIC_BUSINESS_UNITS_GET"
    error_body = {"success": False, "error": "Failed to fetch business units"}

    @extend_schema(
        tags=["Public"],
        responses={
            200: OpenApiResponse(description="{success: true, data: [{id, name}]}"),
            500: OpenApiResponse(description="{success: false, error}"),
        },
        description="All business units, ordered by name.",
    )
    def get(self, request, *args, **kwargs):
        data = PublicBusinessUnitSerializer(list_public_business_units(), many=True).data
        return Response({"success": True, "data": data})

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        for header, value in public_cors_headers().items():
            response[header] = value
        return response
