"""Admin registrations for listings."""

from __future__ import annotations

from django.contrib import admin

from .registry import FAMILIES


class ListingAdmin(admin.ModelAdmin):
    list_display = ("horoo_id", "horoo_name", "owner_name", "city", "owner_price", "is_show", "is_verified", "created_at")
    list_filter = ("is_show", "is_verified", "availability", "state")
    search_fields = ("horoo_id", "property_name", "horoo_name", "owner_name", "owner_mobile", "pincode")
    readonly_fields = ("horoo_id", "average_rating", "total_ratings", "created_at", "updated_at")
    raw_id_fields = ("owner", "state", "city", "area")


for family in FAMILIES:
    admin.site.register(family.model, ListingAdmin)
