"""Booking engine: quote, request, move through the lifecycle, list."""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

from apps.listings.services import get_listing_model
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import AuthorizationError, NotFoundError, ValidationError
from shared.domain.value_objects import DateRange, TimeRange

from .domain import pricing
from .domain.entities import BookingStatus
from .domain.events import BookingRequested
from .models import BOOKING_MODELS, BookingBase, BookingKind, LaborBooking, TractorBooking

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


def _currency() -> str:
    return getattr(settings, "AGROHIRE_CURRENCY", "USD")


def get_booking_model(kind: str) -> type[BookingBase]:
    try:
        return BOOKING_MODELS[kind]
    except KeyError:
        raise ValidationError(f"Unknown booking kind '{kind}'.", field="kind")


# --- Quotes ---------------------------------------------------------------

def quote_labor(listing, start_date: date, end_date: date) -> pricing.LaborQuote:
    return pricing.quote_labor(start_date, end_date, listing.daily_rate, _currency())


def quote_tractor(listing, start_at: datetime, end_at: datetime) -> pricing.TractorQuote:
    return pricing.quote_tractor(start_at, end_at, listing.hourly_rate, _currency())


# --- Input parsing --------------------------------------------------------

def _parse_date(value: Any, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = None
    if isinstance(value, str):
        try:
            parsed = parse_date(value.strip())
        except ValueError:
            parsed = None
    if parsed is None:
        raise ValidationError(f"'{field}' must be a date (YYYY-MM-DD).", field=field)
    return parsed


def _parse_datetime(value: Any, field: str) -> datetime:
    parsed = value if isinstance(value, datetime) else None
    if parsed is None and isinstance(value, str):
        try:
            parsed = parse_datetime(value.strip())
        except ValueError:
            parsed = None
    if parsed is None:
        raise ValidationError(f"'{field}' must be a date and time (ISO 8601).", field=field)
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


# --- Guards ---------------------------------------------------------------

def _lock_listing(kind: str, listing_id):
    model = get_listing_model(kind)
    try:
        return model.objects.select_for_update().get(pk=listing_id)
    except (model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
        raise NotFoundError(f"{model._meta.verbose_name.capitalize()} {listing_id} not found.")


def _ensure_no_overlap(kind: str, listing, starts, ends) -> None:
    """Reject a request clashing with a pending or confirmed booking of the same listing."""

    if not getattr(settings, "AGROHIRE_PREVENT_OVERLAPPING_BOOKINGS", False):
        return

    if kind == BookingKind.LABOR:
        requested = DateRange(starts, ends)
        existing = LaborBooking.objects.filter(listing=listing, status__in=ACTIVE_STATUSES)
        clashes = any(
            requested.overlaps_with(DateRange(booking.start_date, booking.end_date))
            for booking in existing.filter(start_date__lte=ends, end_date__gte=starts)
        )
    else:
        requested = TimeRange(starts, ends)
        existing = TractorBooking.objects.filter(listing=listing, status__in=ACTIVE_STATUSES)
        clashes = any(
            requested.overlaps_with(TimeRange(booking.start_at, booking.end_at))
            for booking in existing.filter(start_at__lte=ends, end_at__gte=starts)
        )

    if clashes:
        raise ValidationError("The listing is already booked for the requested period.", field="start")


def _ensure_amount_fits(model: type[BookingBase], amount: Decimal) -> None:
    """Reject totals the ``total_amount`` column cannot hold."""

    column = model._meta.get_field("total_amount")
    limit = Decimal(10) ** (column.max_digits - column.decimal_places)
    if amount >= limit:
        raise ValidationError(
            "The booking total is too large; shorten the requested period.",
            field="total_amount",
        )


# --- Operations -----------------------------------------------------------

def create_booking(kind: str, listing_id, requester, start, end, notes: str = "") -> BookingBase:
    """Request a listing for a period; the booking starts out pending.

    The listing row is locked and its availability re-checked inside the
    transaction, so a listing switched off concurrently cannot be booked.
    """

    get_booking_model(kind)
    if requester is None or not requester.is_farmer():
        raise AuthorizationError("Only farmers can book listings.")

    if kind == BookingKind.LABOR:
        starts, ends = _parse_date(start, "start_date"), _parse_date(end, "end_date")
    else:
        starts, ends = _parse_datetime(start, "start_at"), _parse_datetime(end, "end_at")

    with DjangoUnitOfWork() as uow:
        listing = _lock_listing(kind, listing_id)
        if not listing.is_available:
            raise ValidationError("This listing is not available for booking.", field="listing")

        if kind == BookingKind.LABOR:
            quote = quote_labor(listing, starts, ends)
            _ensure_amount_fits(LaborBooking, quote.amount.amount)
            _ensure_no_overlap(kind, listing, starts, ends)
            booking = LaborBooking.objects.create(
                listing=listing,
                farmer=requester,
                laborer_id=listing.owner_id,
                start_date=starts,
                end_date=ends,
                total_days=quote.days,
                total_amount=quote.amount.amount,
                notes=notes or "",
            )
        else:
            quote = quote_tractor(listing, starts, ends)
            _ensure_amount_fits(TractorBooking, quote.amount.amount)
            _ensure_no_overlap(kind, listing, starts, ends)
            booking = TractorBooking.objects.create(
                listing=listing,
                farmer=requester,
                owner_id=listing.owner_id,
                start_at=starts,
                end_at=ends,
                total_hours=quote.hours,
                total_amount=quote.amount.amount,
                notes=notes or "",
            )

        aggregate = booking.to_domain()
        aggregate.add_event(BookingRequested(
            aggregate_id=booking.pk,
            kind=kind,
            booking_id=booking.pk,
            listing_id=listing.pk,
            requester_id=requester.pk,
            provider_id=listing.owner_id,
            starts=starts,
            ends=ends,
            total_amount=quote.amount.amount,
            currency=quote.amount.currency,
        ))
        uow.collect_events(aggregate)

    logger.info(
        "Booking %s (%s) requested by %s on listing %s for %s",
        booking.pk, kind, requester.pk, listing.pk, quote.amount,
    )
    return booking


def get_booking_for(kind: str, booking_id, viewer) -> BookingBase:
    """A booking as seen by one of its parties."""

    model = get_booking_model(kind)
    try:
        booking = model.objects.select_related("listing", "farmer", model.provider_field).get(pk=booking_id)
    except (model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
        raise NotFoundError(f"{model._meta.verbose_name.capitalize()} {booking_id} not found.")
    if booking.party_of(viewer) is None:
        raise AuthorizationError("Only the parties of a booking can view it.")
    return booking


def transition_booking(kind: str, booking_id, actor, target_status) -> BookingBase:
    """Move a booking along the lifecycle on behalf of one of its parties."""

    model = get_booking_model(kind)
    with DjangoUnitOfWork() as uow:
        try:
            row = model.objects.select_for_update().get(pk=booking_id)
        except (model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            raise NotFoundError(f"{model._meta.verbose_name.capitalize()} {booking_id} not found.")

        booking = row.to_domain()
        previous = booking.transition_to(getattr(actor, "pk", None), target_status)
        row.apply(booking)
        uow.collect_events(booking)

    logger.info(
        "Booking %s (%s) %s -> %s by %s",
        row.pk, kind, previous.value, row.status, actor.pk,
    )
    return row


def bookings_involving(kind: str, profile):
    """Bookings of one kind where the profile is requester or provider, newest first."""

    model = get_booking_model(kind)
    party_filter = Q(farmer=profile) | Q(**{model.provider_field: profile})
    return (
        model.objects.select_related("listing", "farmer", model.provider_field)
        .filter(party_filter)
        .order_by("-created_at")
    )


def bookings_for(profile, status: str | None = None) -> list[BookingBase]:
    """Bookings of both kinds involving the profile, optionally narrowed to one status."""

    if status:
        status = BookingStatus.parse(status).value

    bookings: list[BookingBase] = []
    for kind in BOOKING_MODELS:
        queryset = bookings_involving(kind, profile)
        if status:
            queryset = queryset.filter(status=status)
        bookings.extend(queryset)
    bookings.sort(key=lambda booking: booking.created_at, reverse=True)
    return bookings
