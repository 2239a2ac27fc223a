"""URL routing for enquiries."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import BookingRequestViewSet, ListingRequestViewSet

app_name = "enquiries"

router = DefaultRouter()
router.register(r"requests", BookingRequestViewSet, basename="request")
router.register(r"listing-requests", ListingRequestViewSet, basename="listing-request")

urlpatterns = [path("", include(router.urls))]
