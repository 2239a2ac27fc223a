"""DRF exception handler that renders errors in the response envelope."""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status  # type: ignore
from rest_framework.exceptions import APIException  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


class MediaUploadFailed(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Failed to upload media"
    default_code = "media_upload_failed"


def _first_message(data: Any) -> str:
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        for key, value in data.items():
            message = _first_message(value)
            if key != "non_field_errors" and isinstance(value, (list, tuple)):
                return f"{key}: {message}"
            return message
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def envelope_exception_handler(exc: Exception, context: dict) -> Response:
    """
    Wrap DRF error responses as ``{"success": false, "message", "errors"}``.

    Anything DRF does not know how to render is logged and answered with a
    generic 500 envelope.
    """

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else "unknown view"
        )
        return Response(
            {"success": False, "message": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    errors = response.data
    response.data = {
        "success": False,
        "message": _first_message(errors),
        "errors": errors,
    }
    return response
