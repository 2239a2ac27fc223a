"""Models for enquiries.

- ``BookingRequest``: a visitor asking to book a listing, identified by its
  Horoo ID.
- ``ListingRequest``: a property owner asking to have a property listed.

Both are worked through by administrators via their ``status``.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.accounts.models import MOBILE_VALIDATOR


class BookingRequest(models.Model):
    class Status(models.TextChoices):
        NEW = "New", _("New")
        PENDING = "Pending", _("Pending")
        BOOKED = "Booked", _("Booked")
        NOT_BOOKED = "Not Booked", _("Not Booked")
        FRAUD = "Fraud", _("Fraud")

    horoo_id = models.CharField(_("Horoo ID"), max_length=20, db_index=True)
    user_name = models.CharField(_("Name"), max_length=150)
    user_phone_no = models.CharField(_("Phone number"), max_length=15)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.NEW)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="booking_requests",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking request")
        verbose_name_plural = _("Booking requests")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.horoo_id} / {self.user_name} ({self.status})"


class ListingRequest(models.Model):
    class PropertyType(models.TextChoices):
        ROOM = "room", _("Room")
        HOSTEL = "hostel", _("Hostel")
        FLAT = "flat", _("Flat")
        HOTEL = "hotel", _("Hotel")
        COMMERCIAL = "commercial", _("Commercial")
        HOUSE = "house", _("House")

    class Status(models.TextChoices):
        NEW = "new", _("New")
        PENDING = "pending", _("Pending")
        ON_HOLD = "on-hold", _("On hold")
        LISTED = "listed", _("Listed")
        REJECTED = "rejected", _("Rejected")
        FRAUD = "fraud", _("Fraud")
        CLOSED = "closed", _("Closed")

    name = models.CharField(max_length=150)
    mobile = models.CharField(max_length=10, validators=[MOBILE_VALIDATOR])
    address = models.TextField()
    property_type = models.CharField(max_length=20, choices=PropertyType.choices)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.NEW)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Listing request")
        verbose_name_plural = _("Listing requests")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.property_type}, {self.status})"
