"""URL routing for the listings domain.

``admin/<family>/`` serves the admin catalogue and ``<family>/`` the public
one, for every listing family.
"""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import VIEWSETS

app_name = "listings"

router = DefaultRouter()
for family, (admin_viewset, public_viewset) in VIEWSETS.items():
    router.register(f"admin/{family.url_segment}", admin_viewset, basename=f"admin-{family.url_segment}")
    router.register(family.url_segment, public_viewset, basename=family.url_segment)

urlpatterns = [path("", include(router.urls))]
