"""Event handlers wiring booking events to notification tasks."""

from __future__ import annotations

import logging

from shared.application.message_bus import message_bus

from .domain.events import BookingRequested, BookingStatusChanged
from .tasks import notify_booking_requested, notify_booking_status_changed

logger = logging.getLogger(__name__)


def on_booking_requested(event: BookingRequested) -> None:
    logger.info("Queueing request notification for booking %s", event.booking_id)
    notify_booking_requested.delay(event.kind, str(event.booking_id))


def on_booking_status_changed(event: BookingStatusChanged) -> None:
    logger.info(
        "Queueing status notification for booking %s (%s -> %s)",
        event.booking_id, event.previous_status, event.new_status,
    )
    notify_booking_status_changed.delay(
        event.kind,
        str(event.booking_id),
        str(event.recipient_id),
        event.previous_status,
    )


def register_handlers(bus=message_bus) -> None:
    bus.register_event_handler(BookingRequested, on_booking_requested)
    bus.register_event_handler(BookingStatusChanged, on_booking_status_changed)
