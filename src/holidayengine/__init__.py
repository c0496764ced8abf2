"""
holidayengine - Holiday Rules, Business Days and Holiday-Aware Scheduling

holidayengine computes the public holidays of a jurisdiction for any year
and builds business-day arithmetic and scheduling on top of them.

Key Features:
- Declarative rule tables (fixed dates, nth weekday, Easter-relative)
- Subdivision-scoped holidays and historical validity windows
- Observed-date substitution as per-rule configuration (add or replace)
- Per-year cached evaluation, safe to share between threads
- Business day walking with configurable weekends
- Recurring and end-of-month schedules that avoid non-business days
- Rule packs in YAML/JSON for custom jurisdictions

Quick Start:
    from datetime import date
    from holidayengine import (
        BusinessDayCalculator, HolidayAwareScheduler, HolidayProvider,
    )

    provider = HolidayProvider.for_jurisdiction("US")
    provider.is_holiday(date(2024, 7, 4)).name        # "Independence Day"

    calculator = BusinessDayCalculator(provider)
    calculator.add_business_days(date(2024, 7, 3), 1)  # date(2024, 7, 5)

    scheduler = HolidayAwareScheduler(calculator)
    scheduler.schedule_monthly_end_of_month(date(2024, 1, 1), 12)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Models
# =============================================================================
from .models import (
    LAST,
    SAT_TO_FRI_SUN_TO_MON,
    WEEKEND_TO_MONDAY,
    BusinessDayConvention,
    Holiday,
    HolidayCategory,
    HolidayRule,
    HolidayRuleSet,
    OrdinalPolicy,
    RuleKind,
    SubdivisionCollision,
    SubstitutionMode,
    SubstitutionPolicy,
    Weekday,
    easter,
    fixed,
    nth_weekday,
)

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    BusinessDayCalculator,
    CalendarEntry,
    HolidayAwareScheduler,
    HolidayProvider,
    easter_sunday,
    evaluate_rule_set,
    nth_weekday_of_month,
)

# =============================================================================
# Jurisdictions
# =============================================================================
from .jurisdictions import (
    get_rule_set,
    register_rule_set,
    supported_jurisdictions,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    BusinessDayWalkError,
    HolidayEngineError,
    InvalidDateRangeError,
    InvalidOrdinalError,
    InvalidSubdivisionError,
    InvalidWeekendError,
    InvalidYearError,
    RuleDefinitionError,
    RuleEvaluationError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
    ScheduleError,
    UnsupportedJurisdictionError,
)

__all__ = [
    "__version__",
    # Models
    "LAST",
    "SAT_TO_FRI_SUN_TO_MON",
    "WEEKEND_TO_MONDAY",
    "BusinessDayConvention",
    "Holiday",
    "HolidayCategory",
    "HolidayRule",
    "HolidayRuleSet",
    "OrdinalPolicy",
    "RuleKind",
    "SubdivisionCollision",
    "SubstitutionMode",
    "SubstitutionPolicy",
    "Weekday",
    "easter",
    "fixed",
    "nth_weekday",
    # Calendars
    "BusinessDayCalculator",
    "CalendarEntry",
    "HolidayAwareScheduler",
    "HolidayProvider",
    "easter_sunday",
    "evaluate_rule_set",
    "nth_weekday_of_month",
    # Jurisdictions
    "get_rule_set",
    "register_rule_set",
    "supported_jurisdictions",
    # Exceptions
    "HolidayEngineError",
    "UnsupportedJurisdictionError",
    "InvalidSubdivisionError",
    "InvalidOrdinalError",
    "InvalidYearError",
    "InvalidDateRangeError",
    "RuleDefinitionError",
    "RuleEvaluationError",
    "InvalidWeekendError",
    "BusinessDayWalkError",
    "ScheduleError",
    "RulePackLoadError",
    "RulePackValidationError",
    "RulePackVersionMismatch",
]
