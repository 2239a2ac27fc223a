"""JWT authentication that reports deactivated accounts as forbidden."""

from __future__ import annotations

from rest_framework import exceptions  # type: ignore
from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore
from rest_framework_simplejwt.exceptions import InvalidToken  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore


class AccountJWTAuthentication(JWTAuthentication):
    def get_user(self, validated_token):  # type: ignore
        try:
            user_id = validated_token[api_settings.USER_ID_CLAIM]
        except KeyError:
            raise InvalidToken("Token contained no recognizable user identification")

        try:
            user = self.user_model.objects.get(**{api_settings.USER_ID_FIELD: user_id})
        except self.user_model.DoesNotExist:
            raise exceptions.AuthenticationFailed("User not found", code="user_not_found")

        if not user.is_active:
            raise exceptions.PermissionDenied("Your account has been deactivated.")
        return user
