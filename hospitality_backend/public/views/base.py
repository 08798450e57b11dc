# public/views/base.py

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from common.views import TaggedAPIView


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicCatalogAPIView(TaggedAPIView):
    """
    AllowAny, no authentication, throttled against scraping.

    Subclasses set error_body: the JSON returned on an unhandled failure.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    error_body: dict = {"error": "Internal error"}

    def internal_error_response(self):
        return Response(dict(self.error_body), status=status.HTTP_500_INTERNAL_SERVER_ERROR)
