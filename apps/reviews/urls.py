"""URL routing for the reviews domain."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ReviewViewSet

app_name = "reviews"

router = SimpleRouter()
router.register(r"", ReviewViewSet, basename="review")

urlpatterns = [path("", include(router.urls))]
