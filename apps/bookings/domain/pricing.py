"""
Booking Pricing

Quotes are computed from the listing rate at request time and stored on
the booking; later rate changes never touch existing bookings.

- Labor is billed per calendar day, both ends inclusive
- Tractors are billed per started hour, one hour minimum
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from shared.domain.value_objects import DateRange, Money, TimeRange


@dataclass(frozen=True)
class LaborQuote:
    days: int
    amount: Money


@dataclass(frozen=True)
class TractorQuote:
    hours: int
    amount: Money


def quote_labor(start_date: date, end_date: date, daily_rate: Decimal, currency: str = 'USD') -> LaborQuote:
    """1 March to 3 March at 100 a day is 3 days, 300.00"""
    days = len(DateRange(start_date, end_date))
    return LaborQuote(days=days, amount=Money(daily_rate, currency) * days)


def quote_tractor(start_at: datetime, end_at: datetime, hourly_rate: Decimal, currency: str = 'USD') -> TractorQuote:
    hours = TimeRange(start_at, end_at).hours
    return TractorQuote(hours=hours, amount=Money(hourly_rate, currency) * hours)
