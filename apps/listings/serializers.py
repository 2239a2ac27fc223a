"""Serializers for listings.

Each family has an admin serializer (every field, used for writes) and a
public serializer that leaves out owner contacts and internal notes. The
public detail variant also embeds the listing's visible reviews.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.reviews.serializers import ReviewSerializer
from shared.domain.identifiers import next_horoo_id

from . import registry
from .models import Audience, RoomType, UnitType
from .services import apply_defaults, missing_fields, resolve_locations, store_media

PUBLIC_HIDDEN_FIELDS = (
    "owner_name",
    "owner_mobile",
    "owner_whatsapp",
    "another_no",
    "horoo_description",
    "is_show",
    "real_address",
    "owner",
    "property_name",
)


def tag_list(choices=None) -> serializers.ListField:
    child = serializers.ChoiceField(choices=choices) if choices else serializers.CharField()
    return serializers.ListField(child=child, required=False)


class ListingSerializer(serializers.ModelSerializer):
    """Fields and write flow shared by every family."""

    family: registry.ListingFamily

    state = serializers.IntegerField(source="state_id", required=False)
    city = serializers.IntegerField(source="city_id", required=False)
    area = serializers.IntegerField(source="area_id", required=False)
    state_name = serializers.ReadOnlyField(source="state.name")
    city_name = serializers.ReadOnlyField(source="city.name")
    area_name = serializers.ReadOnlyField(source="area.name")
    property_type = serializers.SerializerMethodField()

    # Base64 data URIs on input, URLs once stored.
    main_image = serializers.CharField(required=False, allow_blank=True)
    other_images = serializers.ListField(child=serializers.CharField(), required=False)

    nearby_areas = tag_list()
    facilities = tag_list()
    price_plans = tag_list()
    available_for = tag_list(Audience.choices)

    class Meta:
        fields = "__all__"
        read_only_fields = ("average_rating", "total_ratings", "created_at", "updated_at")
        extra_kwargs = {
            "owner_name": {"required": False, "allow_blank": True},
            "owner_mobile": {"required": False, "allow_blank": True},
            "pincode": {"required": False, "allow_blank": True},
            "owner_price": {"required": False},
        }

    def get_property_type(self, obj) -> str:
        return self.family.key

    def validate(self, attrs):  # type: ignore
        if self.instance is None:
            missing = missing_fields(self.family, attrs)
            if missing:
                raise serializers.ValidationError(
                    {"non_field_errors": ["Required fields are missing"], "missing_fields": missing}
                )
        resolve_locations(attrs, self.instance)
        return attrs

    def create(self, validated_data):  # type: ignore
        main_image = validated_data.pop("main_image", None)
        other_images = validated_data.pop("other_images", None)

        model = self.family.model
        listing = model(**validated_data)
        listing.horoo_id = next_horoo_id(model, self.family.prefix)
        apply_defaults(self.family, listing)
        store_media(self.family, listing, main_image, other_images)
        listing.save()
        return listing

    def update(self, instance, validated_data):  # type: ignore
        store_media(
            self.family,
            instance,
            validated_data.pop("main_image", None),
            validated_data.pop("other_images", None),
        )
        return super().update(instance, validated_data)


class ListingDetailMixin(serializers.Serializer):
    reviews = serializers.SerializerMethodField()

    def get_reviews(self, obj) -> list[dict]:
        reviews = (
            obj.reviews.filter(is_approved=True, is_active=True)
            .select_related("user", "content_type")
            .order_by("-created_at")
        )
        return ReviewSerializer(reviews, many=True).data


# --- Rooms ------------------------------------------------------------------
class RoomSerializer(ListingSerializer):
    family = registry.ROOM
    room_type = tag_list(RoomType.choices)

    class Meta(ListingSerializer.Meta):
        model = registry.ROOM.model


class PublicRoomSerializer(RoomSerializer):
    class Meta(RoomSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class RoomDetailSerializer(ListingDetailMixin, PublicRoomSerializer):
    pass


# --- Flats ------------------------------------------------------------------
class FlatSerializer(ListingSerializer):
    family = registry.FLAT
    room_type = tag_list(RoomType.choices)
    flat_type = tag_list(UnitType.choices)

    class Meta(ListingSerializer.Meta):
        model = registry.FLAT.model


class PublicFlatSerializer(FlatSerializer):
    class Meta(FlatSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class FlatDetailSerializer(ListingDetailMixin, PublicFlatSerializer):
    pass


# --- Hostels ----------------------------------------------------------------
class HostelSerializer(ListingSerializer):
    family = registry.HOSTEL
    room_type = tag_list(RoomType.choices)

    class Meta(ListingSerializer.Meta):
        model = registry.HOSTEL.model


class PublicHostelSerializer(HostelSerializer):
    class Meta(HostelSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class HostelDetailSerializer(ListingDetailMixin, PublicHostelSerializer):
    pass


# --- Hotel rooms ------------------------------------------------------------
class HotelRoomSerializer(ListingSerializer):
    family = registry.HOTEL_ROOM
    room_type = tag_list(RoomType.choices)

    class Meta(ListingSerializer.Meta):
        model = registry.HOTEL_ROOM.model


class PublicHotelRoomSerializer(HotelRoomSerializer):
    class Meta(HotelRoomSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class HotelRoomDetailSerializer(ListingDetailMixin, PublicHotelRoomSerializer):
    pass


# --- Houses -----------------------------------------------------------------
class HouseSerializer(ListingSerializer):
    family = registry.HOUSE
    house_type = tag_list(UnitType.choices)

    class Meta(ListingSerializer.Meta):
        model = registry.HOUSE.model


class PublicHouseSerializer(HouseSerializer):
    class Meta(HouseSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class HouseDetailSerializer(ListingDetailMixin, PublicHouseSerializer):
    pass


# --- Commercial -------------------------------------------------------------
class CommercialSerializer(ListingSerializer):
    family = registry.COMMERCIAL
    commercial_type = tag_list()
    available_for = tag_list()

    class Meta(ListingSerializer.Meta):
        model = registry.COMMERCIAL.model


class PublicCommercialSerializer(CommercialSerializer):
    class Meta(CommercialSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class CommercialDetailSerializer(ListingDetailMixin, PublicCommercialSerializer):
    pass


# --- Messes -----------------------------------------------------------------
class MessSerializer(ListingSerializer):
    family = registry.MESS

    class Meta(ListingSerializer.Meta):
        model = registry.MESS.model


class PublicMessSerializer(MessSerializer):
    class Meta(MessSerializer.Meta):
        fields = None
        exclude = PUBLIC_HIDDEN_FIELDS


class MessDetailSerializer(ListingDetailMixin, PublicMessSerializer):
    pass
