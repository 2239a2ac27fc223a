"""URL routing for administrator authentication (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import AdminLoginView

app_name = "auth"

urlpatterns = [
    path("admin/login/", AdminLoginView.as_view(), name="admin-login"),
]
