# common/views.py

"""
SHARED API VIEW BASES

TaggedAPIView
- One exception boundary per handler.
- DRF exceptions (401/400/403/404) keep their normal rendering.
- Anything else is logged as "[<log_tag>] ..." with traceback and
  answered with a generic 500 (no exception text leaks to the caller).

BusinessUnitScopedAPIView
- Request lifecycle for tenant-scoped handlers:
    authenticate (401) -> business unit id present (400) -> access guard (403)
- Scope comes from the x-business-unit-id header (default) or the
  <business_unit_id> path segment.
- Routes may declare required_any_capabilities for role gating.
"""

from __future__ import annotations

import logging
from typing import Optional

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404, HttpResponse
from rest_framework import status
from rest_framework.exceptions import APIException, PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.access import authorize

logger = logging.getLogger(__name__)

BUSINESS_UNIT_HEADER = "x-business-unit-id"

SCOPE_HEADER = "header"
SCOPE_PATH = "path"


class MissingIdentifier(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A required identifier is missing."
    default_code = "bad_request"


# ======================================================
# RESPONSE HELPERS
# ======================================================

def error_response(*, code: str, message: str, http_status: int):
    """
    Canonical API error response.
    """
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def text_response(message: str, *, http_status: int = status.HTTP_200_OK):
    return HttpResponse(message, status=http_status, content_type="text/plain")


# ======================================================
# VIEW BASES
# ======================================================

class TaggedAPIView(APIView):
    log_tag = "API"

    def handle_exception(self, exc):
        if isinstance(exc, (APIException, Http404, DjangoPermissionDenied)):
            return super().handle_exception(exc)

        logger.exception("[%s] %s", self.log_tag, exc)
        return self.internal_error_response()

    def internal_error_response(self):
        return Response(
            {"detail": "Internal error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class BusinessUnitScopedAPIView(TaggedAPIView):
    permission_classes = [IsAuthenticated]

    business_unit_source = SCOPE_HEADER
    required_any_capabilities: Optional[set[str]] = None
    missing_scope_message = f"{BUSINESS_UNIT_HEADER} header is required"

    business_unit_id: Optional[str] = None

    def initial(self, request, *args, **kwargs):
        # authentication + IsAuthenticated run first so 401 wins over 400/403
        super().initial(request, *args, **kwargs)

        self.business_unit_id = self.resolve_business_unit_id(request, kwargs)
        self.check_business_unit_access(request, self.business_unit_id)

    def resolve_business_unit_id(self, request, view_kwargs) -> str:
        if self.business_unit_source == SCOPE_PATH:
            raw = view_kwargs.get("business_unit_id")
        else:
            raw = request.headers.get(BUSINESS_UNIT_HEADER)

        return self.require_identifier(raw, self.missing_scope_message)

    @staticmethod
    def require_identifier(value, message: str) -> str:
        cleaned = str(value or "").strip()
        if not cleaned:
            raise MissingIdentifier(message)
        return cleaned

    def check_business_unit_access(self, request, business_unit_id: str) -> None:
        decision = authorize(
            request.user,
            business_unit_id,
            required_any_capabilities=self.required_any_capabilities,
        )
        if decision.allowed:
            return

        logger.info(
            "Business unit access denied",
            extra={
                "tag": self.log_tag,
                "business_unit_id": business_unit_id,
                "user_id": str(getattr(request.user, "pk", "")),
                "reason": decision.reason,
            },
        )
        raise PermissionDenied("Forbidden")
