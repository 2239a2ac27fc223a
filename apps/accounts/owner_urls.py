"""URL routing for property-owner accounts (namespace: owner)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import (
    OwnerForgotPasswordView,
    OwnerLoginView,
    OwnerRegisterView,
    OwnerResetPasswordView,
    OwnerVerifyOtpView,
)
from .views import OwnerDeactivateView, OwnerListView, OwnerProfileView, VerifyOwnerView

app_name = "owner"

urlpatterns = [
    path("register/", OwnerRegisterView.as_view(), name="register"),
    path("login/", OwnerLoginView.as_view(), name="login"),
    path("forgot-password/", OwnerForgotPasswordView.as_view(), name="forgot-password"),
    path("verify-otp/", OwnerVerifyOtpView.as_view(), name="verify-otp"),
    path("reset-password/", OwnerResetPasswordView.as_view(), name="reset-password"),
    path("profile/<int:pk>/", OwnerProfileView.as_view(), name="profile"),
    path("all/", OwnerListView.as_view(), name="list"),
    path("verify/<int:pk>/", VerifyOwnerView.as_view(), name="verify"),
    path("deactivate/<int:pk>/", OwnerDeactivateView.as_view(), name="deactivate"),
]
