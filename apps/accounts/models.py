"""Account models for the Horoo marketplace.

Users, owners and administrators share one table and are told apart by
``role``. Owners carry extra contact and verification attributes; both
account types keep the one-time password used for password resets.
"""

from __future__ import annotations

import secrets
from typing import Any

from django.conf import settings  # type: ignore
from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


MOBILE_VALIDATOR = RegexValidator(
    regex=r"^[0-9]{10}$",
    message=_("Mobile number must be exactly 10 digits."),
)


class CustomUserManager(BaseUserManager):
    """Manager that uses the lowercased email as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create an account.")
        email = self.normalize_email(email).lower()

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.USER)
        return self._create_user(email, password, **extra_fields)

    def create_owner(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields["role"] = CustomUser.RoleChoices.OWNER
        return self.create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Marketplace account: end user, property owner or administrator."""

    class RoleChoices(models.TextChoices):
        USER = "user", _("User")
        OWNER = "owner", _("Owner")
        ADMIN = "admin", _("Admin")

    first_name = None
    last_name = None
    username = models.CharField(
        _("Username"),
        max_length=150,
        blank=True,
        help_text=_("Optional handle, used by administrators."),
    )
    name = models.CharField(_("Name"), max_length=150)
    email = models.EmailField(_("Email"), unique=True)
    mobile = models.CharField(
        _("Mobile"),
        max_length=10,
        blank=True,
        validators=[MOBILE_VALIDATOR],
    )
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.USER,
    )
    profile_picture = models.URLField(_("Profile picture"), blank=True)

    # Password reset
    otp = models.CharField(_("One-time password"), max_length=6, blank=True)
    otp_expiry = models.DateTimeField(_("OTP expires at"), null=True, blank=True)

    # Owner attributes
    is_verified_owner = models.BooleanField(_("Verified owner"), default=False)
    address = models.CharField(_("Address"), max_length=255, blank=True)
    state = models.CharField(_("State"), max_length=100, blank=True)
    city = models.CharField(_("City"), max_length=100, blank=True)
    pincode = models.CharField(_("Pincode"), max_length=10, blank=True)
    alternate_number = models.CharField(_("Alternate number"), max_length=15, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = _("Account")
        verbose_name_plural = _("Accounts")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["mobile"],
                condition=models.Q(role="owner") & ~models.Q(mobile=""),
                name="unique_owner_mobile",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    @property
    def is_owner(self) -> bool:
        return self.role == self.RoleChoices.OWNER

    @property
    def is_end_user(self) -> bool:
        return self.role == self.RoleChoices.USER

    # --- One-time passwords -------------------------------------------------
    def issue_otp(self) -> str:
        self.otp = f"{secrets.randbelow(900000) + 100000}"
        self.otp_expiry = timezone.now() + settings.OTP_LIFETIME
        self.save(update_fields=["otp", "otp_expiry"])
        return self.otp

    def otp_error(self, code: str) -> str | None:
        """Return why ``code`` cannot be accepted, or ``None`` if it can."""

        if not self.otp or not secrets.compare_digest(self.otp.encode(), str(code).encode()):
            return "Invalid OTP"
        if self.otp_expiry is None or self.otp_expiry < timezone.now():
            return "OTP has expired. Please request a new one."
        return None

    def clear_otp(self) -> None:
        self.otp = ""
        self.otp_expiry = None

    def touch_last_login(self) -> None:
        self.last_login = timezone.now()
        self.save(update_fields=["last_login"])
