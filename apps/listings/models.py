"""Listing models: the seven rentable property families.

Every family shares the :class:`Listing` shape (identity, location,
pricing, facility tags, flags, media, descriptions and the review
aggregate) and adds its own size/type attributes. Tag collections are
stored as JSON lists.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.contrib.contenttypes.fields import GenericRelation  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.identifiers import next_horoo_id, unique_slug

DEFAULT_AVERAGE_RATING = 3.5


class PriceSuffix(models.TextChoices):
    PER_MONTH = "per month", _("per month")
    PER_DAY = "per day", _("per day")
    PER_NIGHT = "per night", _("per night")
    PER_HOUR = "per hour", _("per hour")


class Audience(models.TextChoices):
    BOYS = "Boys", _("Boys")
    GIRLS = "Girls", _("Girls")
    FAMILY = "Family", _("Family")


class RoomType(models.TextChoices):
    SINGLE = "Single", _("Single")
    DOUBLE = "Double", _("Double")
    TRIPLE = "Triple", _("Triple")


class UnitType(models.TextChoices):
    ONE_BHK = "1BHK", _("1BHK")
    TWO_BHK = "2BHK", _("2BHK")
    THREE_BHK = "3BHK", _("3BHK")


class Listing(models.Model):
    """Fields and behaviour shared by every listing family."""

    HOROO_ID_PREFIX = ""

    # Identity
    horoo_id = models.CharField(_("Horoo ID"), max_length=20, unique=True, blank=True, editable=False)
    slug = models.SlugField(_("Slug"), max_length=255, unique=True, blank=True, null=True)
    property_name = models.CharField(_("Property name"), max_length=255, blank=True)
    horoo_name = models.CharField(_("Display name"), max_length=255, blank=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)s_listings",
        limit_choices_to={"role": "owner"},
    )
    owner_name = models.CharField(_("Owner name"), max_length=150)
    owner_mobile = models.CharField(_("Owner mobile"), max_length=15)
    owner_whatsapp = models.CharField(_("Owner WhatsApp"), max_length=15, blank=True)
    another_no = models.CharField(_("Another number"), max_length=15, blank=True)

    # Location
    state = models.ForeignKey("locations.Location", on_delete=models.PROTECT, related_name="+")
    city = models.ForeignKey("locations.Location", on_delete=models.PROTECT, related_name="+")
    area = models.ForeignKey("locations.Location", on_delete=models.PROTECT, related_name="+")
    pincode = models.CharField(_("Pincode"), max_length=10)
    nearby_areas = models.JSONField(_("Nearby areas"), default=list, blank=True)
    map_link = models.URLField(_("Map link"), max_length=500, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    real_address = models.TextField(_("Real address"), blank=True)
    horoo_address = models.TextField(_("Public address"), blank=True)

    # Features and pricing
    facilities = models.JSONField(_("Facilities"), default=list, blank=True)
    owner_price = models.DecimalField(_("Owner price"), max_digits=10, decimal_places=2)
    horoo_price = models.DecimalField(_("Horoo price"), max_digits=10, decimal_places=2, null=True, blank=True)
    price_suffix = models.CharField(
        _("Price suffix"),
        max_length=20,
        choices=PriceSuffix.choices,
        default=PriceSuffix.PER_MONTH,
    )
    offer_type = models.CharField(_("Offer type"), max_length=100, blank=True)
    price_plans = models.JSONField(_("Price plans"), default=list, blank=True)
    available_for = models.JSONField(_("Available for"), default=list, blank=True)

    # Availability
    quantity = models.PositiveIntegerField(default=1)
    availability = models.BooleanField(default=True)
    is_verified = models.BooleanField(default=True)
    is_show = models.BooleanField(_("Shown to users"), default=False)

    # Media
    main_image = models.URLField(_("Main image"), max_length=500, blank=True)
    other_images = models.JSONField(_("Gallery"), default=list, blank=True)
    youtube_link = models.URLField(_("YouTube link"), max_length=500, blank=True)

    # Descriptions
    description = models.TextField(blank=True)
    horoo_description = models.TextField(_("Internal description"), blank=True)

    # Review aggregate
    average_rating = models.FloatField(
        default=DEFAULT_AVERAGE_RATING,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    total_ratings = models.PositiveIntegerField(default=0)
    reviews = GenericRelation("reviews.Review")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.horoo_id} {self.display_name}".strip()

    @property
    def display_name(self) -> str:
        return self.horoo_name or self.property_name

    def save(self, *args, **kwargs):  # type: ignore
        if not self.horoo_id:
            self.horoo_id = next_horoo_id(self.__class__, self.HOROO_ID_PREFIX)
        if not self.slug:
            self.assign_slug()
        super().save(*args, **kwargs)

    def assign_slug(self) -> None:
        self.slug = unique_slug(self, self.display_name, fallback=self.horoo_id)

    # --- Review aggregate ---------------------------------------------------
    def _set_average(self, value: float) -> None:
        self.average_rating = round(min(5.0, max(0.0, value)), 4)

    def record_rating(self, rating: int) -> None:
        total = self.total_ratings
        self._set_average((self.average_rating * total + rating) / (total + 1))
        self.total_ratings = total + 1

    def replace_rating(self, old_rating: int, new_rating: int) -> None:
        if self.total_ratings <= 0 or old_rating == new_rating:
            return
        total = self.total_ratings
        self._set_average((self.average_rating * total - old_rating + new_rating) / total)

    def withdraw_rating(self, rating: int) -> None:
        if self.total_ratings <= 0:
            return
        remaining = self.total_ratings - 1
        if remaining > 0:
            self._set_average((self.average_rating * self.total_ratings - rating) / remaining)
        else:
            self.average_rating = DEFAULT_AVERAGE_RATING
        self.total_ratings = remaining


class Room(Listing):
    HOROO_ID_PREFIX = "HRM"

    room_size = models.CharField(_("Room size"), max_length=50, blank=True)
    room_type = models.JSONField(_("Room type"), default=list, blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class Flat(Listing):
    HOROO_ID_PREFIX = "HFT"

    room_size = models.CharField(_("Room size"), max_length=50, blank=True)
    room_type = models.JSONField(_("Room type"), default=list, blank=True)
    flat_type = models.JSONField(_("Flat type"), default=list, blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("Flat")
        verbose_name_plural = _("Flats")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class Hostel(Listing):
    HOROO_ID_PREFIX = "HHL"

    room_size = models.CharField(_("Room size"), max_length=50, blank=True)
    room_type = models.JSONField(_("Room type"), default=list, blank=True)
    mess_description = models.TextField(_("Mess description"), blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("Hostel")
        verbose_name_plural = _("Hostels")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class HotelRoom(Listing):
    HOROO_ID_PREFIX = "HHR"

    room_size = models.CharField(_("Room size"), max_length=50, blank=True)
    room_type = models.JSONField(_("Room type"), default=list, blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("Hotel room")
        verbose_name_plural = _("Hotel rooms")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class House(Listing):
    HOROO_ID_PREFIX = "HSE"

    house_size = models.CharField(_("House size"), max_length=50, blank=True)
    house_type = models.JSONField(_("House type"), default=list, blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("House")
        verbose_name_plural = _("Houses")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class Commercial(Listing):
    HOROO_ID_PREFIX = "HCL"

    commercial_size = models.CharField(_("Commercial size"), max_length=50, blank=True)
    commercial_type = models.JSONField(_("Commercial type"), default=list, blank=True)

    class Meta(Listing.Meta):
        verbose_name = _("Commercial property")
        verbose_name_plural = _("Commercial properties")
        indexes = [models.Index(fields=["is_show", "-created_at"])]


class Mess(Listing):
    HOROO_ID_PREFIX = "MES"

    class Meta(Listing.Meta):
        verbose_name = _("Mess")
        verbose_name_plural = _("Messes")
        indexes = [models.Index(fields=["is_show", "-created_at"])]
