"""
Unit of Work Pattern

Wraps a marketplace operation in one database transaction and makes
sure its domain events are published only after that transaction commits.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        pass

    @abstractmethod
    def rollback(self):
        pass

    @abstractmethod
    def collect_events(self, aggregate):
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            row = LaborBooking.objects.select_for_update().get(pk=booking_id)
            booking = row.to_domain()
            booking.transition_to(actor.pk, BookingStatus.CONFIRMED)
            row.apply(booking)
            uow.collect_events(booking)
        # BookingStatusChanged is published after commit
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing with transaction.on_commit() so
        handlers only ever see committed state.
        """
        logger.debug("Committing unit of work with %d events", len(self._events))

        events = self._events.copy()
        self._events.clear()

        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        logger.warning("Rolling back unit of work, discarding %d events", len(self._events))
        self._events.clear()

    def collect_events(self, aggregate):
        """Take the events recorded on an aggregate root"""
        new_events = aggregate.events
        if new_events:
            self._events.extend(new_events)
            aggregate.clear_events()
            logger.debug(
                "Collected %d events from %s (ID: %s)",
                len(new_events), aggregate.__class__.__name__, aggregate.id,
            )

    def _publish_events(self, events: List[DomainEvent]):
        from shared.application.message_bus import message_bus

        logger.info("Publishing %d domain events after commit", len(events))

        try:
            message_bus.publish_events(events)
        except Exception as e:
            # The change is already committed; publishing failures are only reported.
            logger.error("Error publishing events: %s", e, exc_info=True)
