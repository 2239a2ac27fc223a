"""Write-side helpers for listings: required fields, locations and media."""

from __future__ import annotations

import logging
from typing import Any

from django.db.models import Q  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.locations.models import Location
from apps.locations.services import resolve_location
from shared.api.exceptions import MediaUploadFailed
from shared.infrastructure.media import MediaUploadError, get_uploader, is_remote_url

from .models import Listing
from .registry import ListingFamily

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "owner_name",
    "owner_mobile",
    "state_id",
    "city_id",
    "area_id",
    "pincode",
    "owner_price",
)
NAMED_REQUIRED_FIELDS = ("property_name", "horoo_name", "horoo_price")


def _public_name(source: str) -> str:
    return source[:-3] if source.endswith("_id") else source


def missing_fields(family: ListingFamily, attrs: dict[str, Any]) -> list[str]:
    required = REQUIRED_FIELDS + (NAMED_REQUIRED_FIELDS if family.names_required else ())
    return [_public_name(name) for name in required if attrs.get(name) in (None, "", [])]


def resolve_locations(attrs: dict[str, Any], instance: Listing | None = None) -> None:
    """Swap the ``*_id`` inputs for locations and check they nest properly."""

    state = city = area = None
    if "state_id" in attrs:
        state = resolve_location(attrs.pop("state_id"), Location.Kind.STATE)
        attrs["state"] = state
    if "city_id" in attrs:
        city = resolve_location(attrs.pop("city_id"), Location.Kind.CITY)
        attrs["city"] = city
    if "area_id" in attrs:
        area = resolve_location(attrs.pop("area_id"), Location.Kind.AREA)
        attrs["area"] = area

    state = state or (instance.state if instance else None)
    city = city or (instance.city if instance else None)
    area = area or (instance.area if instance else None)

    if state and city and city.parent_id != state.pk:
        raise serializers.ValidationError("City does not belong to the selected state.")
    if city and area and area.parent_id != city.pk:
        raise serializers.ValidationError("Area does not belong to the selected city.")


def apply_defaults(family: ListingFamily, listing: Listing) -> None:
    """Names and price fallbacks for families that may omit them."""

    if not listing.property_name:
        listing.property_name = f"{family.key} {listing.horoo_id}"
    if not listing.horoo_name:
        listing.horoo_name = listing.property_name
    if listing.horoo_price is None:
        listing.horoo_price = listing.owner_price


def store_media(
    family: ListingFamily,
    listing: Listing,
    main_image: str | None = None,
    other_images: list[str] | None = None,
) -> None:
    """Upload inline images for ``listing``; remote URLs are kept as given."""

    folder = f"{family.media_folder}/{listing.horoo_id}"
    uploader = None

    if main_image is not None:
        if main_image and not is_remote_url(main_image):
            uploader = uploader or get_uploader()
            try:
                main_image = uploader.upload_base64(main_image, folder)
            except MediaUploadError as exc:
                logger.error("Main image upload failed for %s: %s", listing.horoo_id, exc)
                raise MediaUploadFailed("Failed to upload main image")
        listing.main_image = main_image

    if other_images is not None:
        stored = []
        for image in other_images:
            if is_remote_url(image):
                stored.append(image)
                continue
            uploader = uploader or get_uploader()
            try:
                stored.append(uploader.upload_base64(image, f"{folder}/gallery"))
            except MediaUploadError as exc:
                logger.error("Gallery upload failed for %s: %s", listing.horoo_id, exc)
                raise MediaUploadFailed("Failed to upload other images")
        listing.other_images = stored


def backfill_slugs(family: ListingFamily) -> int:
    """Give a slug to every listing of ``family`` that lacks one."""

    updated = 0
    for listing in family.model.objects.filter(Q(slug__isnull=True) | Q(slug="")):
        listing.assign_slug()
        listing.save(update_fields=["slug", "updated_at"])
        updated += 1
    if updated:
        logger.info("Generated %s slugs for %s listings", updated, family.key)
    return updated
