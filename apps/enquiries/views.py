"""API views for booking and listing requests.

Anyone may file a request. Listing, editing and searching them is
reserved for administrators.
"""

from __future__ import annotations

import logging

from django.db.models import Q  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore

from apps.accounts.permissions import IsMarketplaceAdmin
from shared.api.responses import collection, envelope

from .models import BookingRequest, ListingRequest
from .serializers import (
    BookingRequestSerializer,
    BookingRequestStatusSerializer,
    ListingRequestSerializer,
    ListingRequestUpdateSerializer,
)

logger = logging.getLogger(__name__)


class EnquiryViewSet(viewsets.GenericViewSet):
    """Shared create/list/update/search flow for both request kinds."""

    write_serializer_class = None
    search_fields: tuple[str, ...] = ()
    label = "Request"

    def get_permissions(self):  # type: ignore
        if self.action == "create":
            return [permissions.AllowAny()]
        return [IsMarketplaceAdmin()]

    def get_serializer_class(self):  # type: ignore
        if self.action in ("update", "partial_update"):
            return self.write_serializer_class
        return self.serializer_class

    def get_object(self):  # type: ignore
        try:
            obj = self.get_queryset().filter(pk=int(self.kwargs.get("pk"))).first()
        except (TypeError, ValueError):
            raise NotFound(f"{self.label} not found")
        if obj is None:
            raise NotFound(f"{self.label} not found")
        return obj

    def perform_create(self, serializer) -> None:
        serializer.save()

    def list(self, request):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        return collection(self.get_serializer(queryset, many=True).data, f"{self.label}s fetched successfully")

    def create(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        logger.info("%s %s filed", self.label, serializer.instance.pk)
        return envelope(
            serializer.data,
            f"{self.label} submitted successfully",
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None, partial=False):  # type: ignore
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        return envelope(self.serializer_class(instance).data, f"{self.label} updated successfully")

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    @action(detail=False, methods=["get"])
    def search(self, request):  # type: ignore
        term = request.query_params.get("query", "").strip()
        queryset = self.get_queryset()
        if term:
            query = Q()
            for field in self.search_fields:
                query |= Q(**{f"{field}__icontains": term})
            queryset = queryset.filter(query)
        return collection(self.get_serializer(queryset, many=True).data, f"{self.label}s fetched successfully")


class BookingRequestViewSet(EnquiryViewSet):
    queryset = BookingRequest.objects.select_related("user").order_by("-created_at", "-pk")
    serializer_class = BookingRequestSerializer
    write_serializer_class = BookingRequestStatusSerializer
    filterset_fields = ["status", "horoo_id"]
    search_fields = ("user_name", "user_phone_no")
    label = "Request"

    def perform_create(self, serializer) -> None:
        user = self.request.user
        if user.is_authenticated and getattr(user, "is_end_user", False):
            serializer.save(user=user)
        else:
            serializer.save()


class ListingRequestViewSet(EnquiryViewSet):
    queryset = ListingRequest.objects.order_by("-created_at", "-pk")
    serializer_class = ListingRequestSerializer
    write_serializer_class = ListingRequestUpdateSerializer
    filterset_fields = ["status", "property_type"]
    search_fields = ("name", "mobile", "address")
    label = "Listing request"
