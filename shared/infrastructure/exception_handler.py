"""DRF exception handler rendering engine errors in the API envelope."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.errors import BookingError

logger = logging.getLogger(__name__)


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("detail", "non_field_errors"):
                return message
            return f"{field}: {message}"
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """Map ``BookingError`` kinds and DRF errors to ``{"success": false, "error": ...}``."""

    if isinstance(exc, BookingError):
        status_code = exc.kind.http_status
        logger.info(f"[{status_code}] {exc.kind.value}: {exc.message}")
        return Response(
            {"success": False, "error": exc.message, "kind": exc.kind.value},
            status=status_code,
        )

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"success": False, "error": _first_message(response.data)}
    return response
