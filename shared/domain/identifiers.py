"""
Human-readable identifiers for listings and locations.

- Horoo IDs: a family prefix plus a zero-padded counter (``HRM0001``),
  continued from the most recently created record of the family.
- Slugs: ``slugify(name)`` with ``-1``, ``-2``... appended on collision.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.text import slugify  # type: ignore

HOROO_ID_DIGITS = 4


def _suffix_number(identifier: str, prefix: str) -> int | None:
    if not identifier or not identifier.startswith(prefix):
        return None
    digits = identifier[len(prefix):]
    return int(digits) if digits.isdigit() else None


def format_horoo_id(prefix: str, number: int) -> str:
    return f"{prefix}{str(number).zfill(HOROO_ID_DIGITS)}"


def next_horoo_id(model: type[models.Model], prefix: str, field: str = "horoo_id") -> str:
    """Return the identifier following the latest record of ``model``."""

    latest = (
        model.objects.exclude(**{field: ""})
        .order_by("-created_at", "-pk")
        .values_list(field, flat=True)
        .first()
    )
    number = _suffix_number(latest, prefix) if latest else None
    if number is None:
        number = 0

    candidate = format_horoo_id(prefix, number + 1)
    # The latest record may have been edited or deleted out of order.
    while model.objects.filter(**{field: candidate}).exists():
        number += 1
        candidate = format_horoo_id(prefix, number + 1)
    return candidate


def unique_slug(
    instance: models.Model,
    source: str,
    *,
    field: str = "slug",
    fallback: str = "",
    max_length: int = 200,
) -> str:
    """Slug for ``instance`` unique within its model's table."""

    base_slug = slugify(source or "")[:max_length] or slugify(fallback)[:max_length]
    if not base_slug:
        base_slug = instance.__class__.__name__.lower()

    queryset = instance.__class__._default_manager.all()
    if instance.pk:
        queryset = queryset.exclude(pk=instance.pk)

    candidate = base_slug
    counter = 1
    while queryset.filter(**{field: candidate}).exists():
        candidate = f"{base_slug}-{counter}"
        counter += 1
    return candidate
