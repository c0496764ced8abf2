"""
holidayengine Calendars

Holiday evaluation, business day calculations and scheduling.

Provides:
- Calendar arithmetic (Easter, nth weekday, day arithmetic)
- Rule set evaluation to concrete holidays
- HolidayProvider with a per-year cache
- BusinessDayCalculator for business day membership and walking
- HolidayAwareScheduler for recurring and month-end schedules

Usage:
    from holidayengine.calendars import (
        BusinessDayCalculator,
        HolidayAwareScheduler,
        HolidayProvider,
    )

    provider = HolidayProvider.for_jurisdiction("CA")
    calculator = BusinessDayCalculator(provider, subdivisions=("ON",))

    # Regulatory deadline: 15 business days from today
    deadline = calculator.add_business_days(date.today(), 15)

    # Settlement dates for the next six months
    scheduler = HolidayAwareScheduler(calculator)
    settlements = scheduler.schedule_monthly_end_of_month(date.today(), 6)
"""
from __future__ import annotations

from .arithmetic import (
    add_days,
    add_months,
    days_between,
    days_in_month,
    easter_sunday,
    is_leap_year,
    last_day_of_month,
    nth_weekday_of_month,
    weekday,
)
from .business import (
    DEFAULT_WEEKENDS,
    MAX_NON_BUSINESS_RUN,
    BusinessDayCalculator,
)
from .evaluation import evaluate_rule, evaluate_rule_set
from .provider import HolidayMap, HolidayProvider
from .scheduler import CalendarEntry, HolidayAwareScheduler

__all__ = [
    # Arithmetic
    "easter_sunday",
    "nth_weekday_of_month",
    "add_days",
    "add_months",
    "weekday",
    "days_between",
    "days_in_month",
    "is_leap_year",
    "last_day_of_month",
    # Evaluation
    "evaluate_rule",
    "evaluate_rule_set",
    # Provider
    "HolidayMap",
    "HolidayProvider",
    # Business days
    "DEFAULT_WEEKENDS",
    "MAX_NON_BUSINESS_RUN",
    "BusinessDayCalculator",
    # Scheduling
    "CalendarEntry",
    "HolidayAwareScheduler",
]
