"""
Holiday-Aware Scheduler

Generates recurring and month-anchored date schedules that avoid
weekends and holidays. The scheduler keeps no state between calls:
every schedule is a function of its arguments and the calculator.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Union

from ..exceptions import ScheduleError
from ..models import BusinessDayConvention, Holiday
from .arithmetic import add_months, days_in_month, last_day_of_month
from .business import BusinessDayCalculator


@dataclass(frozen=True)
class CalendarEntry:
    """A single day in a month view."""
    date: date
    is_holiday: bool
    is_weekend: bool
    is_business_day: bool
    holiday: Optional[Holiday] = None


def _interval_days(interval: Union[int, timedelta]) -> int:
    if isinstance(interval, timedelta):
        if interval.seconds or interval.microseconds:
            raise ScheduleError(
                message=f"Interval must be a whole number of days, got {interval}",
                details={"interval": str(interval)},
            )
        days = interval.days
    else:
        days = int(interval)
    if days < 1:
        raise ScheduleError(
            message=f"Interval must be at least one day, got {days}",
            details={"interval_days": days},
        )
    return days


def _check_count(count: int) -> None:
    if count < 0:
        raise ScheduleError(
            message=f"Count must be non-negative, got {count}",
            details={"count": count},
        )


@dataclass
class HolidayAwareScheduler:
    """
    Schedules that land on business days.

    Usage:
        scheduler = HolidayAwareScheduler(calculator)

        # Every 7 days from an anchor, rolled forward past non-business days
        meetings = scheduler.schedule_recurring(date(2024, 7, 4), 7, 4)

        # Last business day of each month for a year
        settlements = scheduler.schedule_monthly_end_of_month(date(2024, 1, 1), 12)
    """

    calculator: BusinessDayCalculator

    def schedule_recurring(
        self,
        anchor: date,
        interval: Union[int, timedelta],
        count: int,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> list[date]:
        """
        Schedule `count` occurrences every `interval` from `anchor`.

        Nominal dates are anchor + k * interval; adjustment of one
        occurrence never shifts the ones after it.

        Args:
            anchor: First nominal date
            interval: Days between nominal dates (int or whole-day timedelta)
            count: Number of occurrences
            convention: Adjustment for non-business days (forward by default)
        """
        step = _interval_days(interval)
        _check_count(count)
        return [
            self.calculator.adjust(anchor + timedelta(days=step * k), convention)
            for k in range(count)
        ]

    def schedule_monthly_end_of_month(self, anchor_month: date, count: int) -> list[date]:
        """
        Schedule the last business day of `count` consecutive months.

        The month-end is rolled backward so the result always stays in
        its month.

        Args:
            anchor_month: Any date in the first month
            count: Number of months
        """
        _check_count(count)
        schedule = []
        for k in range(count):
            year, month = add_months(anchor_month.year, anchor_month.month, k)
            schedule.append(
                self.calculator.adjust(
                    last_day_of_month(year, month), BusinessDayConvention.PRECEDING
                )
            )
        return schedule

    def schedule_monthly(
        self,
        anchor: date,
        count: int,
        convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
    ) -> list[date]:
        """
        Schedule the anchor's day of month for `count` consecutive months.

        Days past a month's end are clamped to its last day (31 January
        -> 29 February in a leap year).
        """
        _check_count(count)
        schedule = []
        for k in range(count):
            year, month = add_months(anchor.year, anchor.month, k)
            nominal = date(year, month, min(anchor.day, days_in_month(year, month)))
            schedule.append(self.calculator.adjust(nominal, convention))
        return schedule

    def generate_month(self, year: int, month: int) -> list[CalendarEntry]:
        """Generate one CalendarEntry per day of a month."""
        entries = []
        current = date(year, month, 1)
        for _ in range(days_in_month(year, month)):
            holidays = self.calculator.provider.holidays_on(current, self.calculator.subdivisions)
            is_weekend = self.calculator.is_weekend(current)
            entries.append(
                CalendarEntry(
                    date=current,
                    is_holiday=bool(holidays),
                    is_weekend=is_weekend,
                    is_business_day=not holidays and not is_weekend,
                    holiday=holidays[0] if holidays else None,
                )
            )
            current += timedelta(days=1)
        return entries
