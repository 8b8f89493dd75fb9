"""
Common Value Objects

- Money: monetary amount with currency
- DateRange: inclusive range of calendar days (labor bookings)
- TimeRange: range of timestamps billed by the started hour (tractor bookings)
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP

from shared.domain.base import ValueObject
from shared.domain.exceptions import ValidationError

CENT = Decimal('0.01')
ONE_HOUR = timedelta(hours=1)


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Amounts are kept as Decimal and rounded to cents on construction.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        amount = Decimal(str(self.amount)).quantize(CENT, rounding=ROUND_HALF_UP)
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency:
            raise ValueError("Currency is required")
        object.__setattr__(self, 'amount', amount)

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        if self.currency != other.currency:
            raise ValueError(f"Cannot add different currencies: {self.currency} and {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor) -> 'Money':
        """Multiply money by a count of days or hours"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by an int or Decimal")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Inclusive range of calendar days

    Both ends count: 1 March to 3 March is three days, and a range may
    start and end on the same day.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValidationError("end before start", field='end_date')

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Two inclusive ranges overlap when they share at least one day,
        so ranges that touch on the same day do overlap.
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")
        return self.start_date <= other.end_date and other.start_date <= self.end_date

    def contains(self, check_date: date) -> bool:
        return self.start_date <= check_date <= self.end_date

    def __len__(self) -> int:
        """Number of days covered"""
        return (self.end_date - self.start_date).days + 1

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Range between two timestamps

    Billed by the started hour with a minimum of one hour.
    """
    start_at: datetime
    end_at: datetime

    def __post_init__(self):
        if self.end_at < self.start_at:
            raise ValidationError("end before start", field='end_at')

    @property
    def hours(self) -> int:
        return max(1, math.ceil((self.end_at - self.start_at) / ONE_HOUR))

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """Half-open comparison: a rental ending at 10:00 frees the tractor for 10:00"""
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")
        return self.start_at < other.end_at and other.start_at < self.end_at

    def __str__(self):
        return f"{self.start_at.isoformat()} - {self.end_at.isoformat()}"

    def __repr__(self):
        return f"TimeRange({self.start_at}, {self.end_at})"
