# public/views/services.py

"""
GET /api/services/

Response is a mapping keyed by category:
    {"Spa": [{...}, {...}], "Tours": [{...}]}
Keys and bucket contents follow (category asc, name asc).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.response import Response

from public.catalog import group_by_category, list_active_services
from public.serializers import HotelServiceSerializer
from public.views.base import PublicCatalogAPIView


class HotelServiceListView(PublicCatalogAPIView):
    log_tag = "SERVICES_GET"
    error_body = {"error": "Failed to fetch services"}

    @extend_schema(
        tags=["Public"],
        responses={200: OpenApiResponse(description="{category: [service, ...]}")},
    )
    def get(self, request, *args, **kwargs):
        rows = HotelServiceSerializer(list_active_services(), many=True).data
        return Response(group_by_category(rows))
