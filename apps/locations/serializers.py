"""Serializers for the location hierarchy."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers  # type: ignore

from .models import Location
from .services import resolve_location


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = ["id", "name", "slug", "kind", "parent", "is_active", "created_at", "updated_at"]
        read_only_fields = fields


class LocationCreateSerializer(serializers.Serializer):
    """Creates a location of ``kind`` under the parent named by ``parent_field``."""

    kind = Location.Kind.STATE
    parent_field: str | None = None

    name = serializers.CharField(max_length=255)

    def validate_name(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        if Location.objects.filter(kind=self.kind, name__iexact=value).exists():
            raise serializers.ValidationError(f"{Location.Kind(self.kind).label} already exists.")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if self.parent_field:
            attrs["parent"] = resolve_location(attrs.pop(self.parent_field), Location.PARENT_KIND[self.kind])
        return attrs

    def create(self, validated_data: dict[str, Any]) -> Location:  # type: ignore
        return Location.objects.create(kind=self.kind, **validated_data)


class StateCreateSerializer(LocationCreateSerializer):
    kind = Location.Kind.STATE


class CityCreateSerializer(LocationCreateSerializer):
    kind = Location.Kind.CITY
    parent_field = "state"

    state = serializers.IntegerField()


class AreaCreateSerializer(LocationCreateSerializer):
    kind = Location.Kind.AREA
    parent_field = "city"

    city = serializers.IntegerField()
