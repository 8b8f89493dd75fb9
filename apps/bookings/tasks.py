"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore

from apps.notifications.services import send_booking_requested_email, send_booking_status_email

from .models import BOOKING_MODELS

logger = logging.getLogger(__name__)


def _load_booking(kind: str, booking_id: str):
    model = BOOKING_MODELS[kind]
    try:
        return model.objects.select_related("listing", "farmer", model.provider_field).get(pk=booking_id)
    except model.DoesNotExist:
        logger.warning("Booking %s (%s) vanished before notification", booking_id, kind)
        return None


@shared_task(name="bookings.notify_booking_requested")
def notify_booking_requested(kind: str, booking_id: str) -> bool:
    """E-mail the provider about a new pending booking."""

    booking = _load_booking(kind, booking_id)
    if booking is None:
        return False
    return send_booking_requested_email(booking)


@shared_task(name="bookings.notify_booking_status_changed")
def notify_booking_status_changed(kind: str, booking_id: str, recipient_id: str, previous_status: str) -> bool:
    """E-mail the party that did not make the status change."""

    booking = _load_booking(kind, booking_id)
    if booking is None:
        return False
    try:
        recipient = get_user_model().objects.get(pk=recipient_id)
    except get_user_model().DoesNotExist:
        logger.warning("Recipient %s of booking %s no longer exists", recipient_id, booking_id)
        return False
    return send_booking_status_email(booking, recipient, previous_status)
