"""URL configuration for the Horoo API.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and each app's routers.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    # Accounts
    path('api/v1/auth/', include('apps.accounts.auth_urls')),
    path('api/v1/user/', include('apps.accounts.user_urls')),
    path('api/v1/owner/', include('apps.accounts.owner_urls')),
    # Catalogue
    path('api/v1/locations/', include('apps.locations.urls')),
    path('api/v1/listings/', include('apps.listings.urls')),
    path('api/v1/reviews/', include('apps.reviews.urls')),
    # Booking and listing requests
    path('api/v1/', include('apps.enquiries.urls')),
    # OpenAPI
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
