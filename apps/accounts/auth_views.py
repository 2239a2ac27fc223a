"""Views for authentication flows (register, login, OTP password reset).

Each view is written for end users; the owner variants only swap the role
and serializers.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.tokens import AccessToken  # type: ignore

from shared.api.responses import envelope

from .auth_serializers import (
    AdminLoginSerializer,
    ForgotPasswordSerializer,
    LoginSerializer,
    OwnerLoginSerializer,
    OwnerRegisterSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    VerifyOtpSerializer,
)
from .serializers import AccountSerializer, OwnerProfileSerializer, UserProfileSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


def _token_for(user) -> str:
    token = AccessToken.for_user(user)
    token["role"] = user.role
    return str(token)


class RegisterView(APIView):
    permission_classes = [AllowAny]
    serializer_class = RegisterSerializer
    profile_serializer_class = UserProfileSerializer

    def post(self, request):  # type: ignore
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered %s account %s", user.role, user.pk)
        return envelope(
            self.profile_serializer_class(user).data,
            f"{user.get_role_display()} registered successfully",
            status_code=status.HTTP_201_CREATED,
            token=_token_for(user),
        )


class OwnerRegisterView(RegisterView):
    serializer_class = OwnerRegisterSerializer
    profile_serializer_class = OwnerProfileSerializer


class LoginView(APIView):
    permission_classes = [AllowAny]
    serializer_class = LoginSerializer
    profile_serializer_class = UserProfileSerializer

    def post(self, request):  # type: ignore
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        user.touch_last_login()
        return envelope(
            self.profile_serializer_class(user).data,
            "Login successful",
            token=_token_for(user),
        )


class OwnerLoginView(LoginView):
    serializer_class = OwnerLoginSerializer
    profile_serializer_class = OwnerProfileSerializer


class AdminLoginView(LoginView):
    serializer_class = AdminLoginSerializer
    profile_serializer_class = AccountSerializer


class ForgotPasswordView(APIView):
    permission_classes = [AllowAny]
    role = User.RoleChoices.USER

    def post(self, request):  # type: ignore
        serializer = ForgotPasswordSerializer(data=request.data, context={"role": self.role})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope(None, "OTP sent to your email")


class VerifyOtpView(APIView):
    permission_classes = [AllowAny]
    role = User.RoleChoices.USER

    def post(self, request):  # type: ignore
        serializer = VerifyOtpSerializer(data=request.data, context={"role": self.role})
        serializer.is_valid(raise_exception=True)
        return envelope(None, "OTP verified successfully")


class ResetPasswordView(APIView):
    permission_classes = [AllowAny]
    role = User.RoleChoices.USER

    def post(self, request):  # type: ignore
        serializer = ResetPasswordSerializer(data=request.data, context={"role": self.role})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Password reset for %s account %s", user.role, user.pk)
        return envelope(None, "Password reset successfully")


class OwnerForgotPasswordView(ForgotPasswordView):
    role = User.RoleChoices.OWNER


class OwnerVerifyOtpView(VerifyOtpView):
    role = User.RoleChoices.OWNER


class OwnerResetPasswordView(ResetPasswordView):
    role = User.RoleChoices.OWNER
