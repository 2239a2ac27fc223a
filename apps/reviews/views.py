"""API views for managing reviews."""

from __future__ import annotations

import django_filters  # type: ignore
from django.contrib.contenttypes.models import ContentType  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import PermissionDenied, ValidationError  # type: ignore

from apps.accounts.permissions import IsEndUser, IsMarketplaceAdmin
from apps.listings.registry import PROPERTY_TYPE_CHOICES, get_family
from shared.api.responses import collection, envelope

from .models import Review
from .serializers import (
    ReviewCreateSerializer,
    ReviewModerationSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)
from .services import change_review, create_review, delete_review


class IsReviewerOrAdmin(permissions.BasePermission):
    """Allow users to manage their reviews and admins to manage all."""

    message = "You can only manage your own review"

    def has_object_permission(self, request, view, obj: Review) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
            return True
        return obj.user_id == user.id


class ReviewFilterSet(django_filters.FilterSet):
    is_approved = django_filters.BooleanFilter(field_name="is_approved")
    is_active = django_filters.BooleanFilter(field_name="is_active")
    property_type = django_filters.ChoiceFilter(choices=PROPERTY_TYPE_CHOICES, method="filter_property_type")

    class Meta:
        model = Review
        fields = ["is_approved", "is_active"]

    def filter_property_type(self, queryset, name, value):  # type: ignore
        family = get_family(value)
        return queryset.filter(content_type=ContentType.objects.get_for_model(family.model))


class ReviewViewSet(viewsets.GenericViewSet):
    """
    Reviews of listings.

    Users write, edit and delete their own reviews; the public reads the
    approved and active reviews of a listing; administrators list and
    moderate everything.
    """

    queryset = Review.objects.select_related("user", "content_type").all()
    serializer_class = ReviewSerializer
    filterset_class = ReviewFilterSet

    def get_permissions(self):  # type: ignore
        if self.action == "create":
            return [IsEndUser()]
        if self.action in ("list", "moderate"):
            return [IsMarketplaceAdmin()]
        if self.action == "for_listing":
            return [permissions.AllowAny()]
        if self.action == "mine":
            return [permissions.IsAuthenticated()]
        return [permissions.IsAuthenticated(), IsReviewerOrAdmin()]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ReviewCreateSerializer
        if self.action in ("update", "partial_update"):
            return ReviewUpdateSerializer
        if self.action == "moderate":
            return ReviewModerationSerializer
        return ReviewSerializer

    def list(self, request):  # type: ignore
        reviews = self.filter_queryset(self.get_queryset())
        return collection(ReviewSerializer(reviews, many=True).data, "Reviews fetched successfully")

    def create(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = create_review(
            request.user,
            get_family(data["property_type"]),
            data["property_id"],
            data["rating"],
            data["message"],
        )
        return envelope(
            ReviewSerializer(review).data,
            "Review added successfully",
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None, partial=False):  # type: ignore
        review = self.get_object()
        if review.user_id != request.user.id:
            raise PermissionDenied("You can only edit your own review")
        return self._apply_changes(review, "Review updated successfully")

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):  # type: ignore
        review = self.get_object()
        delete_review(review)
        return envelope(None, "Review deleted successfully")

    @action(detail=True, methods=["patch", "put"], url_path="moderate")
    def moderate(self, request, pk=None):  # type: ignore
        review = self.get_object()
        return self._apply_changes(review, "Review updated by admin successfully")

    @action(detail=False, methods=["get"], url_path="mine")
    def mine(self, request):  # type: ignore
        reviews = self.get_queryset().filter(user=request.user)
        return collection(ReviewSerializer(reviews, many=True).data, "Your reviews fetched successfully")

    @action(
        detail=False,
        methods=["get"],
        url_path=r"(?P<property_type>[A-Za-z]+)/(?P<property_id>\d+)",
        url_name="for-listing",
    )
    def for_listing(self, request, property_type=None, property_id=None):  # type: ignore
        family = get_family(property_type)
        if family is None:
            raise ValidationError("Invalid property type")
        reviews = self.get_queryset().filter(
            content_type=ContentType.objects.get_for_model(family.model),
            object_id=property_id,
            is_approved=True,
            is_active=True,
        )
        return collection(ReviewSerializer(reviews, many=True).data, "Reviews fetched successfully")

    def _apply_changes(self, review: Review, message: str):
        serializer = self.get_serializer(data=self.request.data)
        serializer.is_valid(raise_exception=True)
        review = change_review(review, **serializer.validated_data)
        return envelope(ReviewSerializer(review).data, message)
