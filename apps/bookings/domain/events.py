"""
Booking Domain Events

Published by the unit of work after the surrounding transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class BookingRequested(DomainEvent):
    """
    Event: A farmer requested a booking (status pending)

    Triggers:
    - E-mail the provider about the new request
    """
    kind: str
    booking_id: UUID
    listing_id: UUID
    requester_id: UUID
    provider_id: UUID
    starts: datetime | str
    ends: datetime | str
    total_amount: Decimal
    currency: str

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            'kind': self.kind,
            'booking_id': str(self.booking_id),
            'listing_id': str(self.listing_id),
            'requester_id': str(self.requester_id),
            'provider_id': str(self.provider_id),
            'starts': str(self.starts),
            'ends': str(self.ends),
            'total_amount': str(self.total_amount),
            'currency': self.currency,
        })
        return data


@dataclass(kw_only=True)
class BookingStatusChanged(DomainEvent):
    """
    Event: A party moved a booking to a new status

    Triggers:
    - E-mail the party that did not act
    """
    kind: str
    booking_id: UUID
    previous_status: str
    new_status: str
    actor_id: UUID
    requester_id: UUID
    provider_id: UUID

    @property
    def recipient_id(self) -> UUID:
        """The party that did not make the change"""
        return self.provider_id if self.actor_id == self.requester_id else self.requester_id

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            'kind': self.kind,
            'booking_id': str(self.booking_id),
            'previous_status': self.previous_status,
            'new_status': self.new_status,
            'actor_id': str(self.actor_id),
            'requester_id': str(self.requester_id),
            'provider_id': str(self.provider_id),
        })
        return data
