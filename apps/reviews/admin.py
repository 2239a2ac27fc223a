"""Admin registrations for the reviews domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "content_type", "object_id", "rating", "is_approved", "is_active", "created_at")
    list_filter = ("is_approved", "is_active", "rating", "content_type")
    search_fields = ("user__email", "user__name", "message")
    readonly_fields = ("created_at", "updated_at")
