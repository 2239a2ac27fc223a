"""URL routing for end-user accounts (namespace: user)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import ForgotPasswordView, LoginView, RegisterView, ResetPasswordView, VerifyOtpView
from .views import AccountListView, CompleteProfileView, DeactivateAccountView, ProfileView

app_name = "user"

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("forgot-password/", ForgotPasswordView.as_view(), name="forgot-password"),
    path("verify-otp/", VerifyOtpView.as_view(), name="verify-otp"),
    path("reset-password/", ResetPasswordView.as_view(), name="reset-password"),
    path("profile/<int:pk>/", ProfileView.as_view(), name="profile"),
    path("complete-profile/<int:pk>/", CompleteProfileView.as_view(), name="complete-profile"),
    path("all/", AccountListView.as_view(), name="list"),
    path("deactivate/<int:pk>/", DeactivateAccountView.as_view(), name="deactivate"),
]
