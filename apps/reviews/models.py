"""Models for the review domain.

Defines the ``Review`` entity: a 1-5 rating with a message left by an end
user on a listing of any family. The listing is referenced generically
(content type + object id). One user can leave at most one review per
listing. Moderation flags decide what the public catalogue shows.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.contrib.contenttypes.fields import GenericForeignKey  # type: ignore
from django.contrib.contenttypes.models import ContentType  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """A user's rating and message for one listing."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews"
    )
    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    listing = GenericForeignKey("content_type", "object_id")
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_("Rating from 1 to 5"),
    )
    message = models.TextField()

    # Moderation
    is_approved = models.BooleanField(default=True, help_text=_("Approved by a moderator"))
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "content_type", "object_id"],
                name="one_review_per_user_per_listing",
            ),
        ]
        indexes = [
            models.Index(fields=["content_type", "object_id", "-created_at"]),
            models.Index(fields=["user"]),
        ]

    def __str__(self) -> str:
        return f"Review by {self.user_id} for {self.content_type.model} {self.object_id} (Rating: {self.rating})"

    @property
    def property_type(self) -> str:
        from apps.listings.registry import family_for_model

        return family_for_model(self.content_type.model_class()).key
