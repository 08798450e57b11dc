# public/views/accommodations.py

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework.response import Response

from public.catalog import list_active_accommodations
from public.serializers import AccommodationSerializer
from public.views.base import PublicCatalogAPIView


class AccommodationListView(PublicCatalogAPIView):
    """
    GET /api/accommodations/

    Active accommodations of every business unit,
    ordered by business unit name then sort order.
    """

    log_tag = "ACCOMMODATIONS_GET"
    error_body = {"error": "Failed to fetch accommodations"}

    @extend_schema(tags=["Public"], responses={200: AccommodationSerializer(many=True)})
    def get(self, request, *args, **kwargs):
        return Response(AccommodationSerializer(list_active_accommodations(), many=True).data)
