"""Admin registrations for the locations domain."""

from __future__ import annotations

from django.contrib import admin
from mptt.admin import MPTTModelAdmin

from .models import Location


@admin.register(Location)
class LocationAdmin(MPTTModelAdmin):
    list_display = ("name", "kind", "slug", "is_active", "created_at")
    list_filter = ("kind", "is_active")
    search_fields = ("name", "slug")
    readonly_fields = ("slug", "created_at", "updated_at")
