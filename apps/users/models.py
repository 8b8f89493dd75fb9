"""Profile model for AgroHire.

Every participant registers as exactly one of three roles: a farmer who
books work, a laborer who offers day labor, or a tractor owner who rents
out machinery. The role is chosen once at signup and decides which
listings a profile may publish and which side of a booking it sits on.
"""

from __future__ import annotations

import uuid
from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?\d{7,15}$",
    message=_("Invalid phone number. Use international format without spaces."),
)


class ProfileManager(BaseUserManager):
    """Profiles log in with their e-mail address."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("An e-mail address is required to create a profile.")
        email = self.normalize_email(email)

        phone = extra_fields.get("phone")
        if phone:
            extra_fields["phone"] = self.normalize_phone(phone)

        profile = self.model(email=email, **extra_fields)
        if password:
            profile.set_password(password)
        else:
            profile.set_unusable_password()
        profile.save(using=self._db)
        return profile

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", Profile.Role.FARMER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Profile.Role.FARMER)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    @staticmethod
    def normalize_phone(phone: str) -> str:
        return phone.replace(" ", "").replace("-", "")


class Profile(AbstractUser):
    """Registered marketplace participant."""

    class Role(models.TextChoices):
        FARMER = "farmer", _("Farmer")
        LABORER = "laborer", _("Laborer")
        TRACTOR_OWNER = "tractor_owner", _("Tractor owner")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(
        _("Display handle"),
        max_length=150,
        blank=True,
        help_text=_("Optional, not used for login."),
    )
    email = models.EmailField(_("Email"), unique=True)
    full_name = models.CharField(_("Full name"), max_length=255)
    phone = models.CharField(
        _("Phone"),
        max_length=20,
        blank=True,
        validators=[PHONE_VALIDATOR],
    )
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.FARMER,
    )
    location = models.CharField(_("Location"), max_length=255, blank=True)
    bio = models.TextField(_("Bio"), blank=True)
    avatar_url = models.URLField(_("Avatar URL"), blank=True)
    rc_number = models.CharField(
        _("Registration number"),
        max_length=50,
        blank=True,
        help_text=_("Vehicle registration number; required before listing a tractor."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProfileManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["full_name"]

    class Meta:
        verbose_name = _("Profile")
        verbose_name_plural = _("Profiles")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.full_name or self.email} ({self.get_role_display()})"

    def is_farmer(self) -> bool:
        return self.role == self.Role.FARMER

    def is_laborer(self) -> bool:
        return self.role == self.Role.LABORER

    def is_tractor_owner(self) -> bool:
        return self.role == self.Role.TRACTOR_OWNER

    @property
    def listing_kind(self) -> str | None:
        """Kind of listing this profile may publish, None for farmers."""
        if self.role == self.Role.LABORER:
            return "labor"
        if self.role == self.Role.TRACTOR_OWNER:
            return "tractor"
        return None

    @property
    def can_create_listing(self) -> bool:
        return self.listing_kind is not None

    @property
    def has_registration_number(self) -> bool:
        return bool(self.rc_number and self.rc_number.strip())
