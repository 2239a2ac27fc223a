"""Serializers for reviews.

Provide read serializers for the public and admin views, and write
serializers for the author and for moderators. The reviewing user is
inferred from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.registry import PROPERTY_TYPE_CHOICES

from .models import Review

RATING_ERRORS = {
    "min_value": "Rating must be between 1 and 5",
    "max_value": "Rating must be between 1 and 5",
}


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer with the reviewer's public details."""

    user_id = serializers.ReadOnlyField(source="user.id")
    user_name = serializers.ReadOnlyField(source="user.name")
    user_picture = serializers.ReadOnlyField(source="user.profile_picture")
    property_type = serializers.ReadOnlyField()
    property_id = serializers.ReadOnlyField(source="object_id")

    class Meta:
        model = Review
        fields = [
            "id",
            "user_id",
            "user_name",
            "user_picture",
            "property_type",
            "property_id",
            "rating",
            "message",
            "is_approved",
            "is_active",
            "created_at",
            "updated_at",
        ]


class ReviewCreateSerializer(serializers.Serializer):
    property_type = serializers.ChoiceField(
        choices=PROPERTY_TYPE_CHOICES,
        error_messages={"invalid_choice": "Invalid property type"},
    )
    property_id = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(min_value=1, max_value=5, error_messages=RATING_ERRORS)
    message = serializers.CharField()


class ReviewUpdateSerializer(serializers.Serializer):
    """Fields the author may change."""

    rating = serializers.IntegerField(
        min_value=1, max_value=5, required=False, error_messages=RATING_ERRORS
    )
    message = serializers.CharField(required=False)


class ReviewModerationSerializer(ReviewUpdateSerializer):
    is_approved = serializers.BooleanField(required=False)
    is_active = serializers.BooleanField(required=False)
