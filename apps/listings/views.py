"""Listing API views.

Every family gets the same pair of viewsets: an admin catalogue with full
CRUD and a public catalogue that only shows listings marked ``is_show``.
"""

from __future__ import annotations

import logging

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore

from apps.accounts.permissions import IsMarketplaceAdmin
from shared.api.responses import collection, envelope

from . import registry, serializers
from .filters import AdminListingFilterSet, ListingFilterSet, build_filterset
from .services import backfill_slugs

logger = logging.getLogger(__name__)


class ListingViewSetMixin:
    family: registry.ListingFamily

    def get_queryset(self):  # type: ignore
        return (
            self.family.model.objects.select_related("state", "city", "area")
            .order_by("-created_at", "-pk")
        )

    def not_found(self) -> NotFound:
        return NotFound(f"{self.family.label} not found")


class ListingAdminViewSet(ListingViewSetMixin, viewsets.GenericViewSet):
    """Admin catalogue: create, list, fetch, edit and slug maintenance."""

    permission_classes = [IsMarketplaceAdmin]

    def get_object(self):  # type: ignore
        try:
            listing = self.get_queryset().filter(pk=int(self.kwargs.get("pk"))).first()
        except (TypeError, ValueError):
            raise self.not_found()
        if listing is None:
            raise self.not_found()
        return listing

    def list(self, request):  # type: ignore
        listings = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(listings, many=True).data
        return collection(data, f"{self.family.model._meta.verbose_name_plural} fetched successfully")

    def retrieve(self, request, pk=None):  # type: ignore
        return envelope(self.get_serializer(self.get_object()).data, f"{self.family.label} fetched successfully")

    def create(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = serializer.save()
        logger.info("%s %s created", self.family.key, listing.horoo_id)
        return envelope(
            self.get_serializer(listing).data,
            f"{self.family.label} added successfully",
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None, partial=False):  # type: ignore
        listing = self.get_object()
        serializer = self.get_serializer(listing, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        listing = serializer.save()
        return envelope(self.get_serializer(listing).data, f"{self.family.label} updated successfully")

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    @action(detail=False, methods=["get"], url_path=r"horoo/(?P<horoo_id>[A-Za-z0-9]+)", url_name="by-horoo-id")
    def by_horoo_id(self, request, horoo_id=None):  # type: ignore
        listing = self.get_queryset().filter(horoo_id__iexact=horoo_id).first()
        if listing is None:
            raise self.not_found()
        return envelope(self.get_serializer(listing).data, f"{self.family.label} fetched successfully")

    @action(detail=False, methods=["post"], url_path="generate-slugs", url_name="generate-slugs")
    def generate_slugs(self, request):  # type: ignore
        updated = backfill_slugs(self.family)
        return envelope({"updated": updated}, f"Generated slugs for {updated} listings")


class ListingPublicViewSet(ListingViewSetMixin, viewsets.GenericViewSet):
    """Public catalogue; detail is looked up by slug or Horoo ID."""

    permission_classes = [permissions.AllowAny]
    lookup_field = "slug"
    lookup_value_regex = "[^/]+"
    detail_serializer_class: type[serializers.ListingSerializer]

    def get_queryset(self):  # type: ignore
        return super().get_queryset().filter(is_show=True)

    def get_serializer_class(self):  # type: ignore
        if self.action == "retrieve":
            return self.detail_serializer_class
        return self.serializer_class

    def list(self, request):  # type: ignore
        listings = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(listings, many=True).data
        return collection(data, f"{self.family.model._meta.verbose_name_plural} fetched successfully")

    def retrieve(self, request, slug=None):  # type: ignore
        queryset = self.get_queryset()
        listing = queryset.filter(slug=slug).first() or queryset.filter(horoo_id__iexact=slug).first()
        if listing is None:
            raise self.not_found()
        return envelope(self.get_serializer(listing).data, f"{self.family.label} fetched successfully")


def _viewsets_for(
    family: registry.ListingFamily,
    admin_serializer: type[serializers.ListingSerializer],
    public_serializer: type[serializers.ListingSerializer],
    detail_serializer: type[serializers.ListingSerializer],
) -> tuple[type[ListingAdminViewSet], type[ListingPublicViewSet]]:
    name = family.model.__name__
    admin = type(
        f"{name}AdminViewSet",
        (ListingAdminViewSet,),
        {
            "family": family,
            "serializer_class": admin_serializer,
            "filterset_class": build_filterset(family, AdminListingFilterSet),
        },
    )
    public = type(
        f"{name}PublicViewSet",
        (ListingPublicViewSet,),
        {
            "family": family,
            "serializer_class": public_serializer,
            "detail_serializer_class": detail_serializer,
            "filterset_class": build_filterset(family, ListingFilterSet),
        },
    )
    return admin, public


RoomAdminViewSet, RoomPublicViewSet = _viewsets_for(
    registry.ROOM, serializers.RoomSerializer, serializers.PublicRoomSerializer, serializers.RoomDetailSerializer
)
FlatAdminViewSet, FlatPublicViewSet = _viewsets_for(
    registry.FLAT, serializers.FlatSerializer, serializers.PublicFlatSerializer, serializers.FlatDetailSerializer
)
HostelAdminViewSet, HostelPublicViewSet = _viewsets_for(
    registry.HOSTEL,
    serializers.HostelSerializer,
    serializers.PublicHostelSerializer,
    serializers.HostelDetailSerializer,
)
HotelRoomAdminViewSet, HotelRoomPublicViewSet = _viewsets_for(
    registry.HOTEL_ROOM,
    serializers.HotelRoomSerializer,
    serializers.PublicHotelRoomSerializer,
    serializers.HotelRoomDetailSerializer,
)
HouseAdminViewSet, HousePublicViewSet = _viewsets_for(
    registry.HOUSE, serializers.HouseSerializer, serializers.PublicHouseSerializer, serializers.HouseDetailSerializer
)
CommercialAdminViewSet, CommercialPublicViewSet = _viewsets_for(
    registry.COMMERCIAL,
    serializers.CommercialSerializer,
    serializers.PublicCommercialSerializer,
    serializers.CommercialDetailSerializer,
)
MessAdminViewSet, MessPublicViewSet = _viewsets_for(
    registry.MESS, serializers.MessSerializer, serializers.PublicMessSerializer, serializers.MessDetailSerializer
)

VIEWSETS = {
    registry.ROOM: (RoomAdminViewSet, RoomPublicViewSet),
    registry.FLAT: (FlatAdminViewSet, FlatPublicViewSet),
    registry.HOSTEL: (HostelAdminViewSet, HostelPublicViewSet),
    registry.HOTEL_ROOM: (HotelRoomAdminViewSet, HotelRoomPublicViewSet),
    registry.HOUSE: (HouseAdminViewSet, HousePublicViewSet),
    registry.COMMERCIAL: (CommercialAdminViewSet, CommercialPublicViewSet),
    registry.MESS: (MessAdminViewSet, MessPublicViewSet),
}
