"""Serializers for booking and listing requests."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.listings.registry import find_by_horoo_id

from .models import BookingRequest, ListingRequest


class BookingRequestSerializer(serializers.ModelSerializer):
    class Meta:
        model = BookingRequest
        fields = ["id", "horoo_id", "user_name", "user_phone_no", "status", "user", "created_at", "updated_at"]
        read_only_fields = ["id", "status", "user", "created_at", "updated_at"]

    def validate_horoo_id(self, value: str) -> str:
        value = value.strip().upper()
        if find_by_horoo_id(value) is None:
            raise serializers.ValidationError("No property found with this Horoo ID")
        return value


class BookingRequestStatusSerializer(serializers.ModelSerializer):
    """Admin edits: status and the contact details."""

    class Meta:
        model = BookingRequest
        fields = ["user_name", "user_phone_no", "status"]
        extra_kwargs = {field: {"required": False} for field in fields}


class ListingRequestSerializer(serializers.ModelSerializer):
    class Meta:
        model = ListingRequest
        fields = ["id", "name", "mobile", "address", "property_type", "status", "created_at", "updated_at"]
        read_only_fields = ["id", "status", "created_at", "updated_at"]


class ListingRequestUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = ListingRequest
        fields = ["name", "mobile", "address", "property_type", "status"]
        extra_kwargs = {field: {"required": False} for field in fields}
