"""Permission classes for account-scoped endpoints."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def _is_admin(user) -> bool:
    return bool(getattr(user, "is_staff", False) or getattr(user, "is_superuser", False))


class IsMarketplaceAdmin(permissions.BasePermission):
    """Staff accounts and superusers."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        return bool(user and user.is_authenticated and _is_admin(user))


class IsEndUser(permissions.BasePermission):
    """Authenticated accounts with the ``user`` role."""

    message = "Only user accounts can perform this action."

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_end_user", False))


class IsSelfOrAdmin(permissions.BasePermission):
    """Object-level permission: the account itself or an administrator."""

    message = "You can only access your own profile."

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        return obj.pk == request.user.pk or _is_admin(request.user)


class IsMarketplaceAdminOrReadOnly(permissions.BasePermission):
    """Anyone may read; only administrators may write."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        return bool(user and user.is_authenticated and _is_admin(user))
