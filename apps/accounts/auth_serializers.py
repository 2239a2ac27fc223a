"""Serializers for authentication flows (register, login, OTP password reset)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import exceptions, serializers  # type: ignore

from .models import MOBILE_VALIDATOR
from .tasks import send_otp_email


User = get_user_model()

INVALID_CREDENTIALS = "Invalid credentials"
DEACTIVATED = "Your account has been deactivated. Please contact support."


class RegisterSerializer(serializers.Serializer):
    """Sign-up for end users."""

    role = User.RoleChoices.USER

    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    mobile = serializers.CharField(validators=[MOBILE_VALIDATOR])
    password = serializers.CharField(min_length=6, write_only=True)
    confirm_password = serializers.CharField(write_only=True)

    def validate_email(self, value: str) -> str:
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("An account with this email already exists.")
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if attrs.get("password") != attrs.get("confirm_password"):
            raise serializers.ValidationError({"confirm_password": "Passwords do not match."})
        return attrs

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        validated_data.pop("confirm_password", None)
        try:
            with transaction.atomic():
                return User.objects.create_user(password=password, role=self.role, **validated_data)
        except IntegrityError:
            raise serializers.ValidationError(self.duplicate_account_error())

    def duplicate_account_error(self) -> dict[str, str]:
        return {"email": "An account with this email already exists."}


class OwnerRegisterSerializer(RegisterSerializer):
    """Sign-up for property owners, with optional address details."""

    role = User.RoleChoices.OWNER

    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    pincode = serializers.CharField(max_length=10, required=False, allow_blank=True)
    alternate_number = serializers.CharField(max_length=15, required=False, allow_blank=True)

    def validate_mobile(self, value: str) -> str:
        if User.objects.filter(role=self.role, mobile=value).exists():
            raise serializers.ValidationError("An owner with this mobile number already exists.")
        return value

    def duplicate_account_error(self) -> dict[str, str]:
        if User.objects.filter(role=self.role, mobile=self.validated_data["mobile"]).exists():
            return {"mobile": "An owner with this mobile number already exists."}
        return super().duplicate_account_error()


class LoginSerializer(serializers.Serializer):
    """Email and password login for end users."""

    role = User.RoleChoices.USER

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def find_account(self, attrs: dict[str, Any]):
        return User.objects.filter(role=self.role, email__iexact=attrs["email"].strip()).first()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = self.find_account(attrs)
        if user is None:
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS)

        if not user.is_active:
            raise exceptions.PermissionDenied(DEACTIVATED)
        if not user.has_usable_password():
            raise serializers.ValidationError(
                "This account has no password yet. Use forgot password to set one."
            )
        if not user.check_password(attrs["password"]):
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS)

        attrs["user"] = user
        return attrs


class OwnerLoginSerializer(LoginSerializer):
    """Owners sign in with either their email or their mobile number."""

    role = User.RoleChoices.OWNER

    email = None
    email_or_mobile = serializers.CharField()

    def find_account(self, attrs: dict[str, Any]):
        login = attrs["email_or_mobile"].strip()
        accounts = User.objects.filter(role=self.role)
        if "@" in login:
            return accounts.filter(email__iexact=login).first()
        return accounts.filter(mobile=login).first()


class AdminLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = User.objects.filter(email__iexact=attrs["email"].strip(), is_staff=True).first()
        if user is None or not user.check_password(attrs["password"]):
            raise exceptions.AuthenticationFailed(INVALID_CREDENTIALS)
        if not user.is_active:
            raise exceptions.PermissionDenied(DEACTIVATED)
        attrs["user"] = user
        return attrs


class AccountLookupMixin:
    """Resolves the ``email`` field to an account of the view's role."""

    def get_account(self, email: str):
        role = self.context["role"]
        user = User.objects.filter(role=role, email__iexact=email.strip()).first()
        if user is None:
            raise exceptions.NotFound("No account found with this email.")
        return user


class ForgotPasswordSerializer(AccountLookupMixin, serializers.Serializer):
    email = serializers.EmailField()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        attrs["user"] = self.get_account(attrs["email"])
        return attrs

    def create(self, validated_data: dict[str, Any]):  # type: ignore
        user = validated_data["user"]
        otp = user.issue_otp()
        send_otp_email.delay(user.pk, otp)
        return user


class VerifyOtpSerializer(AccountLookupMixin, serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.CharField(max_length=6)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = self.get_account(attrs["email"])
        error = user.otp_error(attrs["otp"])
        if error:
            raise serializers.ValidationError(error)
        attrs["user"] = user
        return attrs


class ResetPasswordSerializer(VerifyOtpSerializer):
    new_password = serializers.CharField(min_length=6, write_only=True)

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        user = validated_data["user"]
        user.set_password(validated_data["new_password"])
        user.clear_otp()
        user.save(update_fields=["password", "otp", "otp_expiry"])
        return user
