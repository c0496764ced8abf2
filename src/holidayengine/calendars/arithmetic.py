"""
Calendar Arithmetic

Pure proleptic Gregorian date arithmetic used by rule evaluation and
business-day walking. No dependencies beyond the standard library.
"""
from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..exceptions import InvalidOrdinalError
from ..models.rules import LAST


def easter_sunday(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western
    Christianity (Meeus/Jones/Butcher). Exact for every Gregorian year.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def last_day_of_month(year: int, month: int) -> date:
    """Get the last calendar day of a month."""
    return date(year, month, days_in_month(year, month))


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a number of months."""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def nth_weekday_of_month(year: int, month: int, weekday: int, ordinal: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        ordinal: Which occurrence (1..5), or LAST (-1) for the last one

    Returns:
        The date of the nth weekday

    Raises:
        InvalidOrdinalError: If the ordinal is not 1..5/LAST, or the month
            has no such occurrence (e.g. a 5th Monday in a four-Monday month)
    """
    if ordinal == LAST:
        last_day = last_day_of_month(year, month)
        days_since_weekday = (last_day.weekday() - weekday) % 7
        return last_day - timedelta(days=days_since_weekday)

    if not 1 <= ordinal <= 5:
        raise InvalidOrdinalError(
            message=f"Ordinal must be 1..5 or -1 (last), got {ordinal}",
            details={"ordinal": ordinal},
        )

    first_day = date(year, month, 1)
    days_until_weekday = (weekday - first_day.weekday()) % 7
    day = 1 + days_until_weekday + 7 * (ordinal - 1)

    if day > days_in_month(year, month):
        raise InvalidOrdinalError(
            message=f"No occurrence {ordinal} of weekday {weekday} in {year}-{month:02d}",
            details={"year": year, "month": month, "weekday": weekday, "ordinal": ordinal},
        )
    return date(year, month, day)


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def weekday(d: date) -> int:
    """Day of week, 0=Monday .. 6=Sunday."""
    return d.weekday()


def days_between(a: date, b: date) -> int:
    """Signed number of days from a to b."""
    return (b - a).days
