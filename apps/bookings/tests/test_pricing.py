"""Tests for booking quotes."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from django.test import SimpleTestCase

from apps.bookings.domain.pricing import quote_labor, quote_tractor
from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import DateRange, Money, TimeRange


class LaborQuoteTests(SimpleTestCase):
    def test_three_inclusive_days(self) -> None:
        quote = quote_labor(date(2024, 3, 1), date(2024, 3, 3), Decimal("100"))

        self.assertEqual(quote.days, 3)
        self.assertEqual(quote.amount, Money(Decimal("300.00"), "USD"))

    def test_single_day_counts_once(self) -> None:
        quote = quote_labor(date(2024, 3, 1), date(2024, 3, 1), Decimal("450.50"))

        self.assertEqual(quote.days, 1)
        self.assertEqual(quote.amount.amount, Decimal("450.50"))

    def test_amount_is_days_times_rate(self) -> None:
        start = date(2024, 2, 20)
        for length in (0, 1, 9, 30):
            with self.subTest(length=length):
                quote = quote_labor(start, start + timedelta(days=length), Decimal("12.34"), "INR")
                self.assertGreaterEqual(quote.days, 1)
                self.assertEqual(quote.days, length + 1)
                self.assertEqual(quote.amount.amount, Decimal("12.34") * quote.days)
                self.assertEqual(quote.amount.currency, "INR")

    def test_crosses_leap_day(self) -> None:
        quote = quote_labor(date(2024, 2, 28), date(2024, 3, 1), Decimal("10"))

        self.assertEqual(quote.days, 3)

    def test_end_before_start_rejected(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            quote_labor(date(2024, 3, 3), date(2024, 3, 1), Decimal("100"))

        self.assertEqual(ctx.exception.message, "end before start")


class TractorQuoteTests(SimpleTestCase):
    def setUp(self) -> None:
        self.start = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    def test_partial_hour_rounds_up(self) -> None:
        quote = quote_tractor(self.start, self.start.replace(hour=10, minute=30), Decimal("50"))

        self.assertEqual(quote.hours, 3)
        self.assertEqual(quote.amount.amount, Decimal("150.00"))

    def test_whole_hours_not_rounded(self) -> None:
        quote = quote_tractor(self.start, self.start + timedelta(hours=4), Decimal("60"))

        self.assertEqual(quote.hours, 4)
        self.assertEqual(quote.amount.amount, Decimal("240.00"))

    def test_minimum_one_hour(self) -> None:
        for end in (self.start, self.start + timedelta(minutes=5)):
            with self.subTest(end=end):
                quote = quote_tractor(self.start, end, Decimal("50"))
                self.assertEqual(quote.hours, 1)
                self.assertEqual(quote.amount.amount, Decimal("50.00"))

    def test_end_before_start_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            quote_tractor(self.start, self.start - timedelta(minutes=1), Decimal("50"))


class ValueObjectTests(SimpleTestCase):
    def test_date_ranges_touching_on_a_day_overlap(self) -> None:
        first = DateRange(date(2024, 3, 1), date(2024, 3, 3))

        self.assertTrue(first.overlaps_with(DateRange(date(2024, 3, 3), date(2024, 3, 5))))
        self.assertFalse(first.overlaps_with(DateRange(date(2024, 3, 4), date(2024, 3, 5))))
        self.assertEqual(len(first), 3)

    def test_time_ranges_are_half_open(self) -> None:
        start = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
        morning = TimeRange(start, start + timedelta(hours=2))

        self.assertFalse(morning.overlaps_with(TimeRange(start + timedelta(hours=2), start + timedelta(hours=3))))
        self.assertTrue(morning.overlaps_with(TimeRange(start + timedelta(hours=1), start + timedelta(hours=3))))

    def test_money_rounds_to_cents_and_rejects_negative(self) -> None:
        self.assertEqual(Money(Decimal("1.005")).amount, Decimal("1.01"))
        with self.assertRaises(ValueError):
            Money(Decimal("-1"))
        with self.assertRaises(ValueError):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "INR")
