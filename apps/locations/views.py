"""Location API views."""

from __future__ import annotations

import logging

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.accounts.permissions import IsMarketplaceAdminOrReadOnly
from shared.api.responses import collection, envelope

from .models import Location
from .serializers import (
    AreaCreateSerializer,
    CityCreateSerializer,
    LocationSerializer,
    StateCreateSerializer,
)
from .services import location_names, resolve_location

logger = logging.getLogger(__name__)


class LocationLevelViewSet(viewsets.GenericViewSet):
    """List and create the locations of one level."""

    kind = Location.Kind.STATE
    create_serializer_class = StateCreateSerializer
    serializer_class = LocationSerializer
    permission_classes = [IsMarketplaceAdminOrReadOnly]

    def get_queryset(self):  # type: ignore
        return Location.objects.filter(kind=self.kind, is_active=True).order_by("name")

    def list(self, request):  # type: ignore
        data = self.get_serializer(self.get_queryset(), many=True).data
        return collection(data, f"{Location.Kind(self.kind).label} list fetched successfully")

    def create(self, request):  # type: ignore
        serializer = self.create_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        location = serializer.save()
        logger.info("Created %s %s (%s)", location.kind, location.pk, location.name)
        return envelope(
            LocationSerializer(location).data,
            f"{Location.Kind(self.kind).label} added successfully",
            status_code=status.HTTP_201_CREATED,
        )

    def _children(self, pk, child_kind: str):
        parent = resolve_location(pk, self.kind)
        children = parent.get_children().filter(kind=child_kind, is_active=True).order_by("name")
        return collection(
            LocationSerializer(children, many=True).data,
            f"{Location.Kind(child_kind).label} list fetched successfully",
        )


class StateViewSet(LocationLevelViewSet):
    kind = Location.Kind.STATE
    create_serializer_class = StateCreateSerializer

    @action(detail=True, methods=["get"], url_path="cities")
    def cities(self, request, pk=None):  # type: ignore
        return self._children(pk, Location.Kind.CITY)


class CityViewSet(LocationLevelViewSet):
    kind = Location.Kind.CITY
    create_serializer_class = CityCreateSerializer

    @action(detail=True, methods=["get"], url_path="areas")
    def areas(self, request, pk=None):  # type: ignore
        return self._children(pk, Location.Kind.AREA)


class AreaViewSet(LocationLevelViewSet):
    kind = Location.Kind.AREA
    create_serializer_class = AreaCreateSerializer


class LocationDetailsView(APIView):
    """Names of the state, city and area ids passed as query parameters."""

    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        params = request.query_params
        names = location_names(params.get("state"), params.get("city"), params.get("area"))
        return envelope(names, "Location details fetched successfully")
