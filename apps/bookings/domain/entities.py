"""
Booking Domain Entities

- BookingStatus: lifecycle states shared by labor and tractor bookings
- Party: which side of a booking an actor sits on
- Booking: aggregate that applies status changes and records events
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from shared.domain.base import Aggregate
from shared.domain.exceptions import AuthorizationError, InvalidTransitionError, ValidationError

from .events import BookingStatusChanged


class BookingStatus(Enum):
    """
    Booking status state machine

    State transitions:
    - PENDING -> CONFIRMED (provider accepts)
    - PENDING -> CANCELLED (provider declines)
    - CONFIRMED -> COMPLETED (requester marks the work done)

    COMPLETED and CANCELLED are terminal.
    """
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    @classmethod
    def parse(cls, value) -> 'BookingStatus':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            allowed = ', '.join(status.value for status in cls)
            raise ValidationError(
                f"Unknown booking status '{value}'. Expected one of: {allowed}.",
                field='status',
            )


class Party(Enum):
    REQUESTER = 'requester'
    PROVIDER = 'provider'


# (from, to) -> the party allowed to make the move
TRANSITIONS = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED): Party.PROVIDER,
    (BookingStatus.PENDING, BookingStatus.CANCELLED): Party.PROVIDER,
    (BookingStatus.CONFIRMED, BookingStatus.COMPLETED): Party.REQUESTER,
}


def resolve_party(actor_id, requester_id, provider_id) -> Party | None:
    """Side of the booking the actor sits on, None for outsiders"""
    if actor_id is None:
        return None
    if actor_id == requester_id:
        return Party.REQUESTER
    if actor_id == provider_id:
        return Party.PROVIDER
    return None


def allowed_targets(current: BookingStatus, party: Party | None) -> list[BookingStatus]:
    """Statuses the given party may move a booking to from ``current``"""
    if party is None:
        return []
    return [
        target
        for (source, target), owner in TRANSITIONS.items()
        if source == current and owner == party
    ]


@dataclass(kw_only=True, eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    Snapshot of a labor or tractor booking for lifecycle decisions. The
    persisted row stays the source of truth; this object only decides
    whether a status change is allowed and records the resulting event.
    """
    kind: str
    requester_id: UUID
    provider_id: UUID
    listing_id: UUID | None = None
    status: BookingStatus = BookingStatus.PENDING

    def party_of(self, actor_id) -> Party | None:
        return resolve_party(actor_id, self.requester_id, self.provider_id)

    def allowed_transitions_for(self, actor_id) -> list[BookingStatus]:
        return allowed_targets(self.status, self.party_of(actor_id))

    def transition_to(self, actor_id, target) -> BookingStatus:
        """
        Move to ``target`` on behalf of ``actor_id``

        Raises:
            ValidationError: target is not a known status
            AuthorizationError: actor is not a party, or the move belongs to the other party
            InvalidTransitionError: the move is not in the transition table
        """
        target = BookingStatus.parse(target)
        party = self.party_of(actor_id)
        if party is None:
            raise AuthorizationError("Only the parties of a booking can change its status.")

        required_party = TRANSITIONS.get((self.status, target))
        if required_party is None:
            raise InvalidTransitionError(self.status.value, target.value)
        if required_party != party:
            raise AuthorizationError(
                f"Only the {required_party.value} can move a booking to '{target.value}'."
            )

        previous = self.status
        self.status = target
        self.add_event(BookingStatusChanged(
            aggregate_id=self.id,
            kind=self.kind,
            booking_id=self.id,
            previous_status=previous.value,
            new_status=target.value,
            actor_id=actor_id,
            requester_id=self.requester_id,
            provider_id=self.provider_id,
        ))
        return previous
