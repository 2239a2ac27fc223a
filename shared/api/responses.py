"""Response envelope used by every endpoint.

Successful responses look like ``{"success": true, "message": ..., "data": ...}``
with optional extra top-level keys (``total`` for collections, ``token`` for
authentication responses).
"""

from __future__ import annotations

from typing import Any

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore


def envelope(
    data: Any = None,
    message: str = "",
    *,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    payload: dict[str, Any] = {"success": True, "message": message}
    payload.update(extra)
    payload["data"] = data
    return Response(payload, status=status_code)


def collection(items: list, message: str = "") -> Response:
    """Envelope for list endpoints; carries the item count as ``total``."""

    return envelope(items, message, total=len(items))
