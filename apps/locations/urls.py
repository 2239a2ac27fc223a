"""URL routing for the locations domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import AreaViewSet, CityViewSet, LocationDetailsView, StateViewSet

app_name = "locations"

router = DefaultRouter()
router.register(r"states", StateViewSet, basename="state")
router.register(r"cities", CityViewSet, basename="city")
router.register(r"areas", AreaViewSet, basename="area")

urlpatterns = [
    path("details/", LocationDetailsView.as_view(), name="location-details"),
    path("", include(router.urls)),
]
