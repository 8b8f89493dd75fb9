"""Tests for the unit of work and message bus used by booking events."""

from __future__ import annotations

from uuid import uuid4

from django.test import SimpleTestCase, TestCase

from apps.bookings.domain.entities import Booking
from apps.bookings.domain.events import BookingRequested, BookingStatusChanged
from apps.bookings.handlers import on_booking_requested, on_booking_status_changed
from shared.application.message_bus import MessageBus, message_bus
from shared.application.uow import DjangoUnitOfWork


def _status_changed() -> BookingStatusChanged:
    requester_id, provider_id = uuid4(), uuid4()
    return BookingStatusChanged(
        kind="labor",
        booking_id=uuid4(),
        previous_status="pending",
        new_status="confirmed",
        actor_id=provider_id,
        requester_id=requester_id,
        provider_id=provider_id,
    )


class MessageBusTests(SimpleTestCase):
    def test_failing_handler_does_not_stop_others(self) -> None:
        bus = MessageBus()
        seen = []

        def broken(event):
            raise RuntimeError("mail server down")

        def recorder(event):
            seen.append(event)

        bus.register_event_handler(BookingStatusChanged, broken)
        bus.register_event_handler(BookingStatusChanged, recorder)
        event = _status_changed()

        with self.assertLogs("shared.application.message_bus", level="ERROR"):
            bus.publish_events([event])

        self.assertEqual(seen, [event])

    def test_registration_is_idempotent(self) -> None:
        bus = MessageBus()

        def handler(event):
            pass

        bus.register_event_handler(BookingRequested, handler)
        bus.register_event_handler(BookingRequested, handler)

        self.assertEqual(bus.handlers_for(BookingRequested), [handler])

    def test_booking_handlers_registered_on_startup(self) -> None:
        self.assertIn(on_booking_requested, message_bus.handlers_for(BookingRequested))
        self.assertIn(on_booking_status_changed, message_bus.handlers_for(BookingStatusChanged))


class UnitOfWorkTests(TestCase):
    def _aggregate(self) -> Booking:
        booking = Booking(kind="labor", requester_id=uuid4(), provider_id=uuid4())
        booking.add_event(_status_changed())
        return booking

    def test_collected_events_wait_for_commit(self) -> None:
        aggregate = self._aggregate()

        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            with DjangoUnitOfWork() as uow:
                uow.collect_events(aggregate)

        self.assertEqual(len(callbacks), 1)
        self.assertEqual(aggregate.events, [])

    def test_rollback_discards_events(self) -> None:
        aggregate = self._aggregate()

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            with self.assertRaises(RuntimeError):
                with DjangoUnitOfWork() as uow:
                    uow.collect_events(aggregate)
                    raise RuntimeError("boom")

        self.assertEqual(callbacks, [])
