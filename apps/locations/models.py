"""Location tree (state > city > area) built on MPTT."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore
from mptt.models import MPTTModel, TreeForeignKey

from shared.domain.identifiers import unique_slug


class Location(MPTTModel):
    """A state, a city inside a state, or an area inside a city."""

    class Kind(models.TextChoices):
        STATE = "state", _("State")
        CITY = "city", _("City")
        AREA = "area", _("Area")

    PARENT_KIND = {
        Kind.STATE: None,
        Kind.CITY: Kind.STATE,
        Kind.AREA: Kind.CITY,
    }

    kind = models.CharField(_("Level"), max_length=10, choices=Kind.choices)
    name = models.CharField(_("Name"), max_length=255)
    parent = TreeForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
        verbose_name=_("Parent location"),
        help_text=_("The state of a city, the city of an area; empty for states."),
    )
    slug = models.SlugField(_("Slug"), max_length=255, unique=True, blank=True)
    is_active = models.BooleanField(_("Active"), default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class MPTTMeta:
        order_insertion_by = ["name"]

    class Meta:
        verbose_name = _("Location")
        verbose_name_plural = _("Locations")
        ordering = ["tree_id", "lft"]
        constraints = [
            models.UniqueConstraint(fields=["kind", "name"], name="unique_location_name_per_level"),
        ]
        indexes = [
            models.Index(fields=["kind", "name"]),
            models.Index(fields=["parent", "name"]),
        ]

    def __str__(self) -> str:
        if self.parent_id:
            return f"{self.name}, {self.parent.name}"
        return self.name

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            source = f"{self.parent.name} {self.name}" if self.parent_id else self.name
            self.slug = unique_slug(self, source, max_length=240)
        super().save(*args, **kwargs)

