"""Profile and account administration views."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import generics, permissions  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.api.responses import collection, envelope

from .permissions import IsMarketplaceAdmin, IsSelfOrAdmin
from .serializers import (
    CompleteProfileSerializer,
    OwnerProfileSerializer,
    OwnerUpdateSerializer,
    UserProfileSerializer,
    UserUpdateSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


class ProfileView(generics.RetrieveUpdateAPIView):
    """Read or edit an account profile; only the account itself or an admin."""

    role = User.RoleChoices.USER
    permission_classes = [permissions.IsAuthenticated, IsSelfOrAdmin]
    profile_serializer_class = UserProfileSerializer
    update_serializer_class = UserUpdateSerializer

    def get_queryset(self):  # type: ignore
        return User.objects.filter(role=self.role)

    def get_serializer_class(self):  # type: ignore
        if self.request.method in permissions.SAFE_METHODS:
            return self.profile_serializer_class
        return self.update_serializer_class

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        account = self.get_object()
        return envelope(self.profile_serializer_class(account).data, "Profile fetched successfully")

    def update(self, request, *args, **kwargs):  # type: ignore
        account = self.get_object()
        serializer = self.get_serializer(account, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope(self.profile_serializer_class(account).data, "Profile updated successfully")


class OwnerProfileView(ProfileView):
    role = User.RoleChoices.OWNER
    profile_serializer_class = OwnerProfileSerializer
    update_serializer_class = OwnerUpdateSerializer


class CompleteProfileView(ProfileView):
    """Adds the name and mobile an account was created without."""

    http_method_names = ["put", "patch", "options"]
    update_serializer_class = CompleteProfileSerializer

    def update(self, request, *args, **kwargs):  # type: ignore
        account = self.get_object()
        serializer = CompleteProfileSerializer(account, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope(self.profile_serializer_class(account).data, "Profile completed successfully")


class AccountListView(generics.ListAPIView):
    role = User.RoleChoices.USER
    permission_classes = [IsMarketplaceAdmin]
    serializer_class = UserProfileSerializer

    def get_queryset(self):  # type: ignore
        return User.objects.filter(role=self.role).order_by("-created_at")

    def list(self, request, *args, **kwargs):  # type: ignore
        data = self.get_serializer(self.get_queryset(), many=True).data
        return collection(data, "Accounts fetched successfully")


class OwnerListView(AccountListView):
    role = User.RoleChoices.OWNER
    serializer_class = OwnerProfileSerializer


class DeactivateAccountView(APIView):
    role = User.RoleChoices.USER
    permission_classes = [IsMarketplaceAdmin]
    profile_serializer_class = UserProfileSerializer

    def patch(self, request, pk: int):  # type: ignore
        account = get_object_or_404(User, pk=pk, role=self.role)
        account.is_active = False
        account.save(update_fields=["is_active", "updated_at"])
        logger.info("Deactivated %s account %s", account.role, account.pk)
        return envelope(self.profile_serializer_class(account).data, "Account deactivated successfully")


class OwnerDeactivateView(DeactivateAccountView):
    role = User.RoleChoices.OWNER
    profile_serializer_class = OwnerProfileSerializer


class VerifyOwnerView(APIView):
    permission_classes = [IsMarketplaceAdmin]

    def patch(self, request, pk: int):  # type: ignore
        owner = get_object_or_404(User, pk=pk, role=User.RoleChoices.OWNER)
        owner.is_verified_owner = True
        owner.save(update_fields=["is_verified_owner", "updated_at"])
        logger.info("Verified owner %s", owner.pk)
        return envelope(OwnerProfileSerializer(owner).data, "Owner verified successfully")
