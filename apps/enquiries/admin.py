"""Admin registrations for enquiries."""

from __future__ import annotations

from django.contrib import admin

from .models import BookingRequest, ListingRequest


@admin.register(BookingRequest)
class BookingRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "horoo_id", "user_name", "user_phone_no", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("horoo_id", "user_name", "user_phone_no")
    raw_id_fields = ("user",)


@admin.register(ListingRequest)
class ListingRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "mobile", "property_type", "status", "created_at")
    list_filter = ("status", "property_type")
    search_fields = ("name", "mobile", "address")
