"""Lookups shared by apps that reference locations."""

from __future__ import annotations

from rest_framework.exceptions import NotFound  # type: ignore

from .models import Location


def resolve_location(pk, kind: str) -> Location:
    """Return the location ``pk`` of level ``kind`` or raise ``NotFound``."""

    try:
        return Location.objects.get(pk=int(pk), kind=kind)
    except (Location.DoesNotExist, TypeError, ValueError):
        raise NotFound(f"{Location.Kind(kind).label} not found")


def location_names(state=None, city=None, area=None) -> dict[str, str | None]:
    """Names for whichever of ``state``, ``city`` and ``area`` were given."""

    names: dict[str, str | None] = {}
    for kind, pk in ((Location.Kind.STATE, state), (Location.Kind.CITY, city), (Location.Kind.AREA, area)):
        if pk in (None, ""):
            continue
        names[kind.value] = resolve_location(pk, kind).name
    return names
