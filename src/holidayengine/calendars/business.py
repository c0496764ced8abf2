"""
Business Day Calculator

Business-day membership and date walking on top of a HolidayProvider.

A business day is a date whose weekday is not a configured weekend day
and which has no holiday for the provider's jurisdiction (plus any
subdivisions the calculator was given).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable

from ..exceptions import BusinessDayWalkError, InvalidWeekendError
from ..models import BusinessDayConvention, Weekday
from .arithmetic import last_day_of_month
from .provider import HolidayProvider

DEFAULT_WEEKENDS = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})

# Longest run of consecutive non-business days a walk will cross
MAX_NON_BUSINESS_RUN = 366


def _validate_weekends(weekdays: Iterable[int]) -> frozenset[int]:
    weekends = frozenset(int(w) for w in weekdays)
    invalid = sorted(w for w in weekends if w not in range(7))
    if invalid:
        raise InvalidWeekendError(
            message=f"Weekend days must be 0..6, got {invalid}",
            details={"invalid": invalid},
        )
    if len(weekends) == 7:
        raise InvalidWeekendError(
            message="Weekend cannot cover all seven days",
            details={"weekends": sorted(weekends)},
        )
    return weekends


@dataclass
class BusinessDayCalculator:
    """
    Business day calculations for a jurisdiction.

    Holds a reference to (does not own) a HolidayProvider; several
    calculators may share one provider.

    Usage:
        provider = HolidayProvider.for_jurisdiction("US")
        calculator = BusinessDayCalculator(provider)

        calculator.is_business_day(date(2024, 7, 4))   # False
        calculator.add_business_days(date(2024, 7, 3), 1)  # 2024-07-05

        # Friday/Saturday weekend
        calculator.set_weekends([Weekday.FRIDAY, Weekday.SATURDAY])
    """

    provider: HolidayProvider

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default_factory=lambda: DEFAULT_WEEKENDS)

    # Subdivisions whose holidays also count as non-business days
    subdivisions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        self.weekend_days = _validate_weekends(self.weekend_days)
        self.subdivisions = tuple(
            sorted(self.provider.rule_set.normalize_subdivisions(self.subdivisions))
        )

    @property
    def weekends(self) -> frozenset[int]:
        return self.weekend_days

    def set_weekends(self, weekdays: Iterable[int]) -> None:
        """
        Replace the weekend set for all subsequent queries.

        The provider's holiday cache is unaffected.

        Raises:
            InvalidWeekendError: If a value is outside 0..6 or all days are weekends
        """
        self.weekend_days = _validate_weekends(weekdays)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_holiday(self, d: date) -> bool:
        return bool(self.provider.holidays_on(d, self.subdivisions))

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a business day.

        A business day is a non-weekend day that is not a holiday.
        """
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get holiday dates within a range (inclusive)."""
        if end < start:
            return []
        holidays = self.provider.holidays_for_date_range(start, end, self.subdivisions)
        return list(holidays)

    # -------------------------------------------------------------------------
    # Walking
    # -------------------------------------------------------------------------

    def _scan(self, d: date, step: int) -> date:
        """Move from d (exclusive) in steps of one day to a business day."""
        current = d
        for _ in range(MAX_NON_BUSINESS_RUN):
            current += timedelta(days=step)
            if self.is_business_day(current):
                return current
        raise BusinessDayWalkError(
            message=f"No business day within {MAX_NON_BUSINESS_RUN} days of {d}",
            details={"date": d.isoformat(), "direction": step},
            jurisdiction=self.provider.code,
        )

    def next_business_day(self, d: date) -> date:
        """Get the first business day strictly after a date."""
        return self._scan(d, 1)

    def previous_business_day(self, d: date) -> date:
        """Get the last business day strictly before a date."""
        return self._scan(d, -1)

    def add_business_days(self, start: date, days: int) -> date:
        """
        Add business days to a date.

        The start date itself is never counted, and is not moved onto a
        business day first: adding zero days returns start unchanged.

        Args:
            start: Starting date
            days: Number of business days to add (can be negative)

        Returns:
            The resulting date after adding business days
        """
        if days == 0:
            return start

        step = 1 if days > 0 else -1
        current = start
        for _ in range(abs(days)):
            current = self._scan(current, step)
        return current

    def subtract_business_days(self, start: date, days: int) -> date:
        """Subtract business days from a date."""
        return self.add_business_days(start, -days)

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count business days between two dates.

        Both endpoints are included. Returns 0 when end is before start.
        """
        if end < start:
            return 0

        count = 0
        current = start
        while current <= end:
            if self.is_business_day(current):
                count += 1
            current += timedelta(days=1)
        return count

    def is_end_of_month(self, d: date) -> bool:
        """Check if a date is the last business day of its month."""
        if not self.is_business_day(d):
            return False
        return d == self.last_business_day_of_month(d.year, d.month)

    def last_business_day_of_month(self, year: int, month: int) -> date:
        """Get the last business day of a month."""
        return self.adjust(last_day_of_month(year, month), BusinessDayConvention.PRECEDING)

    # -------------------------------------------------------------------------
    # Adjustment
    # -------------------------------------------------------------------------

    def adjust(self, d: date, convention: BusinessDayConvention) -> date:
        """
        Adjust a date according to a business day convention.

        Business days are returned unchanged by every convention.
        """
        convention = BusinessDayConvention(convention)
        if convention == BusinessDayConvention.UNADJUSTED or self.is_business_day(d):
            return d

        if convention == BusinessDayConvention.FOLLOWING:
            return self.next_business_day(d)
        if convention == BusinessDayConvention.PRECEDING:
            return self.previous_business_day(d)
        if convention == BusinessDayConvention.MODIFIED_FOLLOWING:
            adjusted = self.next_business_day(d)
            if adjusted.month != d.month:
                adjusted = self.previous_business_day(d)
            return adjusted
        if convention == BusinessDayConvention.MODIFIED_PRECEDING:
            adjusted = self.previous_business_day(d)
            if adjusted.month != d.month:
                adjusted = self.next_business_day(d)
            return adjusted

        raise ValueError(f"Unknown business day convention: {convention}")
