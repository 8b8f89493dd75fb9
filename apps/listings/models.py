"""Listing models for AgroHire.

A listing is an offer published by a single provider: day labor by a
laborer, or machinery rental by a tractor owner. The availability flag is
set by the owner at will and decides whether the listing shows up in
search; it is not tied to the state of any booking.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ListingKind(models.TextChoices):
    LABOR = "labor", _("Labor")
    TRACTOR = "tractor", _("Tractor")


class Listing(models.Model):
    """Fields shared by both kinds of listing."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    kind: str = ""
    text_search_fields: tuple[str, ...] = ("title", "description")
    # Columns already stored lower-cased; matched against the lower-cased query.
    folded_search_fields: tuple[str, ...] = ()

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    def is_owned_by(self, profile) -> bool:
        return profile is not None and self.owner_id == profile.pk

    @property
    def is_available(self) -> bool:
        return self.availability_status == self.Availability.AVAILABLE


class LaborListing(Listing):
    """Day labor offered by a laborer."""

    class Availability(models.TextChoices):
        AVAILABLE = "available", _("Available")
        BUSY = "busy", _("Busy")
        UNAVAILABLE = "unavailable", _("Unavailable")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="labor_listings",
    )
    skills = models.JSONField(default=list, blank=True)
    skills_text = models.TextField(blank=True, default="", editable=False)
    daily_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    experience_years = models.PositiveSmallIntegerField(default=0)
    availability_status = models.CharField(
        max_length=20,
        choices=Availability.choices,
        default=Availability.AVAILABLE,
    )

    kind = ListingKind.LABOR.value
    folded_search_fields = ("skills_text",)

    class Meta(Listing.Meta):
        verbose_name = _("Labor listing")
        verbose_name_plural = _("Labor listings")
        indexes = [
            models.Index(fields=["availability_status", "-created_at"], name="labor_listing_status_idx"),
            models.Index(fields=["owner", "-created_at"], name="labor_listing_owner_idx"),
        ]

    @staticmethod
    def fold_skills(skills) -> str:
        """One lower-cased skill per line, so a query never matches across two skills."""
        return "\n".join(str(skill).lower() for skill in skills or [])

    def save(self, *args, **kwargs):
        self.skills_text = self.fold_skills(self.skills)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "skills" in update_fields:
            kwargs["update_fields"] = {*update_fields, "skills_text"}
        super().save(*args, **kwargs)


class TractorListing(Listing):
    """Machinery rented out by a tractor owner."""

    class Availability(models.TextChoices):
        AVAILABLE = "available", _("Available")
        RENTED = "rented", _("Rented")
        MAINTENANCE = "maintenance", _("Maintenance")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="tractor_listings",
    )
    tractor_model = models.CharField(max_length=255)
    horsepower = models.PositiveIntegerField(null=True, blank=True)
    year = models.PositiveSmallIntegerField(null=True, blank=True)
    hourly_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    daily_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability_status = models.CharField(
        max_length=20,
        choices=Availability.choices,
        default=Availability.AVAILABLE,
    )
    image_url = models.URLField(blank=True)

    kind = ListingKind.TRACTOR.value
    text_search_fields = ("title", "description", "tractor_model")

    class Meta(Listing.Meta):
        verbose_name = _("Tractor listing")
        verbose_name_plural = _("Tractor listings")
        indexes = [
            models.Index(fields=["availability_status", "-created_at"], name="tractor_listing_status_idx"),
            models.Index(fields=["owner", "-created_at"], name="tractor_listing_owner_idx"),
        ]


LISTING_MODELS: dict[str, type[Listing]] = {
    ListingKind.LABOR.value: LaborListing,
    ListingKind.TRACTOR.value: TractorListing,
}
