"""Serializers for account profiles and their admin views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.enquiries.serializers import BookingRequestSerializer
from apps.listings.registry import FAMILIES

from .models import MOBILE_VALIDATOR

User = get_user_model()

ACCOUNT_FIELDS = [
    "id",
    "name",
    "email",
    "mobile",
    "role",
    "profile_picture",
    "is_active",
    "last_login",
    "created_at",
    "updated_at",
]


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ACCOUNT_FIELDS
        read_only_fields = ACCOUNT_FIELDS


class UserProfileSerializer(AccountSerializer):
    """End user profile with the booking requests they filed."""

    requests = BookingRequestSerializer(source="booking_requests", many=True, read_only=True)

    class Meta(AccountSerializer.Meta):
        fields = ACCOUNT_FIELDS + ["requests"]


class OwnerProfileSerializer(AccountSerializer):
    """Owner profile with their listings grouped by family."""

    listings = serializers.SerializerMethodField()

    class Meta(AccountSerializer.Meta):
        fields = ACCOUNT_FIELDS + [
            "is_verified_owner",
            "address",
            "state",
            "city",
            "pincode",
            "alternate_number",
            "listings",
        ]

    def get_listings(self, obj) -> dict[str, list[dict]]:
        grouped = {}
        for family in FAMILIES:
            grouped[family.url_segment] = list(
                family.model.objects.filter(owner=obj).values(
                    "id", "horoo_id", "horoo_name", "slug", "is_show"
                )
            )
        return grouped


class UserUpdateSerializer(serializers.ModelSerializer):
    """Fields an end user may change on their own profile."""

    class Meta:
        model = User
        fields = ["name", "mobile", "profile_picture"]
        extra_kwargs = {
            "name": {"required": False},
            "mobile": {"required": False},
            "profile_picture": {"required": False},
        }


class OwnerUpdateSerializer(serializers.ModelSerializer):
    """Owners cannot change their email or mobile once registered."""

    class Meta:
        model = User
        fields = ["name", "profile_picture", "address", "state", "city", "pincode", "alternate_number"]
        extra_kwargs = {field: {"required": False} for field in fields}


class CompleteProfileSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=150)
    mobile = serializers.CharField(validators=[MOBILE_VALIDATOR])

    class Meta:
        model = User
        fields = ["name", "mobile"]
