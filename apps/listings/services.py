"""Listing registry: search, publish, toggle availability, remove."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore

from shared.domain.exceptions import AuthorizationError, NotFoundError, ValidationError

from .models import LISTING_MODELS, LaborListing, Listing, ListingKind, TractorListing

logger = logging.getLogger(__name__)

MAX_RATE = Decimal("100000000")
# Upper bounds of PositiveSmallIntegerField and PositiveIntegerField
MAX_SMALL_COUNT = 32767
MAX_COUNT = 2147483647


def get_listing_model(kind: str) -> type[Listing]:
    try:
        return LISTING_MODELS[kind]
    except KeyError:
        raise ValidationError(f"Unknown listing kind '{kind}'.", field="kind")


def search_listings(
    kind: str,
    text_query: str | None = None,
    location_query: str | None = None,
) -> QuerySet:
    """Available listings of one kind, newest first, narrowed by free text and location."""

    model = get_listing_model(kind)
    queryset = model.objects.select_related("owner").filter(
        availability_status=model.Availability.AVAILABLE,
    )

    text_query = (text_query or "").strip()
    if text_query:
        text_filter = Q()
        for field_name in model.text_search_fields:
            text_filter |= Q(**{f"{field_name}__icontains": text_query})
        for field_name in model.folded_search_fields:
            text_filter |= Q(**{f"{field_name}__contains": text_query.lower()})
        queryset = queryset.filter(text_filter)

    location_query = (location_query or "").strip()
    if location_query:
        queryset = queryset.filter(location__icontains=location_query)

    return queryset.order_by("-created_at")


def get_listing(kind: str, listing_id) -> Listing:
    model = get_listing_model(kind)
    try:
        return model.objects.select_related("owner").get(pk=listing_id)
    except (model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
        raise NotFoundError(f"{model._meta.verbose_name.capitalize()} {listing_id} not found.")


def listings_owned_by(profile) -> list[Listing]:
    """Every listing of the profile, any availability, newest first."""

    listings: list[Listing] = []
    for model in LISTING_MODELS.values():
        listings.extend(model.objects.filter(owner=profile))
    listings.sort(key=lambda listing: listing.created_at, reverse=True)
    return listings


# --- Field parsing --------------------------------------------------------

def _text(fields: Mapping[str, Any], name: str, *, required: bool = True) -> str:
    value = fields.get(name)
    value = "" if value is None else str(value).strip()
    if required and not value:
        raise ValidationError(f"'{name}' is required.", field=name)
    return value


def _rate(fields: Mapping[str, Any], name: str) -> Decimal:
    raw = _text(fields, name)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"'{name}' must be a number.", field=name)
    if not value.is_finite() or value <= 0:
        raise ValidationError(f"'{name}' must be greater than zero.", field=name)
    if value >= MAX_RATE:
        raise ValidationError(f"'{name}' is too large.", field=name)
    # Stored to cents, so anything that rounds to zero is not a usable rate.
    value = value.quantize(Decimal("0.01"))
    if value <= 0:
        raise ValidationError(f"'{name}' must be at least 0.01.", field=name)
    return value


def _count(
    fields: Mapping[str, Any],
    name: str,
    *,
    default: int | None = None,
    maximum: int = MAX_SMALL_COUNT,
) -> int | None:
    raw = _text(fields, name, required=False)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"'{name}' must be a whole number.", field=name)
    if value < 0:
        raise ValidationError(f"'{name}' cannot be negative.", field=name)
    if value > maximum:
        raise ValidationError(f"'{name}' cannot exceed {maximum}.", field=name)
    return value


def _skills(fields: Mapping[str, Any]) -> list[str]:
    raw = fields.get("skills") or []
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, (list, tuple)):
        raise ValidationError("'skills' must be a list or a comma-separated string.", field="skills")
    return [str(skill).strip() for skill in raw if str(skill).strip()]


def _labor_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "title": _text(fields, "title"),
        "description": _text(fields, "description"),
        "location": _text(fields, "location"),
        "skills": _skills(fields),
        "daily_rate": _rate(fields, "daily_rate"),
        "experience_years": _count(fields, "experience_years", default=0),
    }


def _tractor_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "title": _text(fields, "title"),
        "description": _text(fields, "description"),
        "location": _text(fields, "location"),
        "tractor_model": _text(fields, "tractor_model"),
        "horsepower": _count(fields, "horsepower", maximum=MAX_COUNT),
        "year": _count(fields, "year"),
        "hourly_rate": _rate(fields, "hourly_rate"),
        "daily_rate": _rate(fields, "daily_rate"),
        "image_url": _text(fields, "image_url", required=False),
    }


# --- Mutations ------------------------------------------------------------

@transaction.atomic
def create_listing(owner, fields: Mapping[str, Any]) -> Listing:
    """Publish a listing of the kind the owner's role allows."""

    kind = getattr(owner, "listing_kind", None)
    if kind is None:
        raise AuthorizationError("Only laborers and tractor owners can create listings.")

    if kind == ListingKind.LABOR:
        listing = LaborListing.objects.create(owner=owner, **_labor_fields(fields))
    else:
        if not owner.has_registration_number:
            raise ValidationError(
                "A registration number (rc_number) on your profile is required to list a tractor.",
                field="rc_number",
            )
        listing = TractorListing.objects.create(owner=owner, **_tractor_fields(fields))

    logger.info("Listing %s (%s) created by %s", listing.pk, kind, owner.pk)
    return listing


def _owned_listing_for_update(kind: str, listing_id, requester) -> Listing:
    model = get_listing_model(kind)
    try:
        listing = model.objects.select_for_update().get(pk=listing_id)
    except (model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
        raise NotFoundError(f"{model._meta.verbose_name.capitalize()} {listing_id} not found.")
    if not listing.is_owned_by(requester):
        raise AuthorizationError("Only the owner can change this listing.")
    return listing


@transaction.atomic
def set_availability(kind: str, listing_id, requester, new_status: str) -> Listing:
    """Owner sets any of the kind's availability states, no transition rules apply."""

    listing = _owned_listing_for_update(kind, listing_id, requester)
    if new_status not in listing.Availability.values:
        allowed = ", ".join(listing.Availability.values)
        raise ValidationError(
            f"Unknown availability '{new_status}'. Expected one of: {allowed}.",
            field="availability_status",
        )

    old_status = listing.availability_status
    listing.availability_status = new_status
    listing.save(update_fields=["availability_status", "updated_at"])
    logger.info("Listing %s availability %s -> %s", listing.pk, old_status, new_status)
    return listing


@transaction.atomic
def delete_listing(kind: str, listing_id, requester) -> None:
    """Remove a listing; bookings that reference it keep their rows."""

    listing = _owned_listing_for_update(kind, listing_id, requester)
    listing_pk = listing.pk
    listing.delete()
    logger.info("Listing %s (%s) deleted by %s", listing_pk, kind, requester.pk)
