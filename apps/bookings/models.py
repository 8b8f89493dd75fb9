"""Booking models for AgroHire.

A booking is a farmer's request against one listing. The provider (the
laborer or the tractor owner) is copied from the listing at creation so
the booking keeps both parties even after the listing is deleted. Amounts
are snapshotted when the booking is made and never recomputed.
"""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import F, Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import Booking as BookingAggregate
from .domain.entities import BookingStatus


class BookingKind(models.TextChoices):
    LABOR = "labor", _("Labor")
    TRACTOR = "tractor", _("Tractor")


class BookingBase(models.Model):
    """Fields and lifecycle helpers shared by both booking kinds."""

    class Status(models.TextChoices):
        PENDING = BookingStatus.PENDING.value, _("Pending")
        CONFIRMED = BookingStatus.CONFIRMED.value, _("Confirmed")
        COMPLETED = BookingStatus.COMPLETED.value, _("Completed")
        CANCELLED = BookingStatus.CANCELLED.value, _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    farmer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="%(class)s_requests",
    )
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    kind: str = ""
    provider_field: str = ""

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    @property
    def requester_id(self):
        return self.farmer_id

    @property
    def provider_id(self):
        return getattr(self, f"{self.provider_field}_id")

    @property
    def provider(self):
        return getattr(self, self.provider_field)

    @property
    def starts(self):
        raise NotImplementedError

    @property
    def ends(self):
        raise NotImplementedError

    def to_domain(self) -> BookingAggregate:
        return BookingAggregate(
            id=self.pk,
            kind=self.kind,
            requester_id=self.requester_id,
            provider_id=self.provider_id,
            listing_id=self.listing_id,
            status=BookingStatus.parse(self.status),
        )

    def apply(self, booking: BookingAggregate) -> None:
        """Copy the aggregate's status back onto the row and save it."""
        self.status = booking.status.value
        self.save(update_fields=["status", "updated_at"])

    def party_of(self, profile):
        return self.to_domain().party_of(getattr(profile, "pk", None))

    def allowed_transitions_for(self, profile) -> list[str]:
        targets = self.to_domain().allowed_transitions_for(getattr(profile, "pk", None))
        return [target.value for target in targets]


class LaborBooking(BookingBase):
    """Booking of a laborer for a run of calendar days."""

    listing = models.ForeignKey(
        "listings.LaborListing",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    laborer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="labor_jobs",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    total_days = models.PositiveIntegerField()

    kind = BookingKind.LABOR.value
    provider_field = "laborer"

    class Meta(BookingBase.Meta):
        verbose_name = _("Labor booking")
        verbose_name_plural = _("Labor bookings")
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gte=F("start_date")),
                name="labor_booking_dates_ordered",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "status"], name="labor_booking_listing_idx"),
        ]

    def __str__(self) -> str:
        return f"Labor booking {self.pk} ({self.start_date} - {self.end_date})"

    @property
    def starts(self):
        return self.start_date

    @property
    def ends(self):
        return self.end_date


class TractorBooking(BookingBase):
    """Rental of a tractor between two timestamps."""

    listing = models.ForeignKey(
        "listings.TractorListing",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="tractor_rentals",
    )
    start_at = models.DateTimeField()
    end_at = models.DateTimeField()
    total_hours = models.PositiveIntegerField()

    kind = BookingKind.TRACTOR.value
    provider_field = "owner"

    class Meta(BookingBase.Meta):
        verbose_name = _("Tractor booking")
        verbose_name_plural = _("Tractor bookings")
        constraints = [
            models.CheckConstraint(
                condition=Q(end_at__gte=F("start_at")),
                name="tractor_booking_times_ordered",
            ),
        ]
        indexes = [
            models.Index(fields=["listing", "status"], name="tractor_booking_listing_idx"),
        ]

    def __str__(self) -> str:
        return f"Tractor booking {self.pk} ({self.start_at} - {self.end_at})"

    @property
    def starts(self):
        return self.start_at

    @property
    def ends(self):
        return self.end_at


BOOKING_MODELS: dict[str, type[BookingBase]] = {
    BookingKind.LABOR.value: LaborBooking,
    BookingKind.TRACTOR.value: TractorBooking,
}
