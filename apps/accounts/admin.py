"""Admin registrations for the accounts domain."""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(BaseUserAdmin):
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (
            _("Personal info"),
            {"fields": ("name", "username", "mobile", "profile_picture")},
        ),
        (
            _("Owner details"),
            {
                "fields": (
                    "is_verified_owner",
                    "address",
                    "state",
                    "city",
                    "pincode",
                    "alternate_number",
                )
            },
        ),
        (_("Role"), {"fields": ("role",)}),
        (_("Password reset"), {"fields": ("otp", "otp_expiry")}),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "password1",
                    "password2",
                    "name",
                    "mobile",
                    "role",
                    "is_staff",
                    "is_superuser",
                ),
            },
        ),
    )
    list_display = ("email", "name", "role", "mobile", "is_active", "is_staff", "is_verified_owner")
    list_filter = ("role", "is_active", "is_staff", "is_verified_owner")
    search_fields = ("email", "mobile", "name")
    ordering = ("email",)
    readonly_fields = ("created_at", "updated_at", "date_joined")
