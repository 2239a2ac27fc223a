"""Review writes that keep each listing's rating aggregate in step.

The aggregate (``average_rating``, ``total_ratings``) is updated inside the
same transaction as the review, with the listing row locked.
"""

from __future__ import annotations

import logging

from django.contrib.contenttypes.models import ContentType  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import serializers  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore

from apps.listings.models import Listing
from apps.listings.registry import ListingFamily

from .models import Review

logger = logging.getLogger(__name__)

AGGREGATE_FIELDS = ["average_rating", "total_ratings", "updated_at"]
DUPLICATE_REVIEW = "You have already reviewed this property"


def _lock_listing(model: type[Listing], pk: int) -> Listing | None:
    return model.objects.select_for_update().filter(pk=pk).first()


@transaction.atomic
def create_review(user, family: ListingFamily, property_id: int, rating: int, message: str) -> Review:
    listing = _lock_listing(family.model, property_id)
    if listing is None:
        raise NotFound("Property not found")

    content_type = ContentType.objects.get_for_model(family.model)
    if Review.objects.filter(user=user, content_type=content_type, object_id=listing.pk).exists():
        raise serializers.ValidationError(DUPLICATE_REVIEW)

    try:
        with transaction.atomic():
            review = Review.objects.create(
                user=user,
                content_type=content_type,
                object_id=listing.pk,
                rating=rating,
                message=message,
            )
    except IntegrityError:
        raise serializers.ValidationError(DUPLICATE_REVIEW)
    listing.record_rating(rating)
    listing.save(update_fields=AGGREGATE_FIELDS)
    logger.info("Review %s added to %s", review.pk, listing.horoo_id)
    return review


def _lock_review(review: Review) -> tuple[Review, Listing | None]:
    """Lock the listing and then the review, re-reading both from the database."""

    listing = _lock_listing(review.content_type.model_class(), review.object_id)
    current = Review.objects.select_for_update().filter(pk=review.pk).first()
    if current is None:
        raise NotFound("Review not found")
    return current, listing


@transaction.atomic
def change_review(review: Review, **changes) -> Review:
    """Apply ``changes`` to ``review``; a new rating moves the aggregate."""

    review, listing = _lock_review(review)
    old_rating = review.rating
    for attr, value in changes.items():
        setattr(review, attr, value)
    review.save()

    if listing is not None and review.rating != old_rating:
        listing.replace_rating(old_rating, review.rating)
        listing.save(update_fields=AGGREGATE_FIELDS)
    return review


@transaction.atomic
def delete_review(review: Review) -> None:
    review, listing = _lock_review(review)
    if listing is not None:
        listing.withdraw_rating(review.rating)
        listing.save(update_fields=AGGREGATE_FIELDS)
    logger.info("Review %s deleted", review.pk)
    review.delete()
