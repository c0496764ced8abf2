"""
holidayengine Models

Core value types: enums, Holiday occurrences, rules and rule sets.
"""
from __future__ import annotations

from .enums import (
    BusinessDayConvention,
    HolidayCategory,
    OrdinalPolicy,
    RuleKind,
    SubdivisionCollision,
    SubstitutionMode,
    Weekday,
)
from .holiday import Holiday
from .rules import (
    LAST,
    SAT_TO_FRI_SUN_TO_MON,
    VALID_ORDINALS,
    WEEKEND_TO_MONDAY,
    HolidayRule,
    HolidayRuleSet,
    SubstitutionPolicy,
    easter,
    fixed,
    nth_weekday,
)

__all__ = [
    # Enums
    "BusinessDayConvention",
    "HolidayCategory",
    "OrdinalPolicy",
    "RuleKind",
    "SubdivisionCollision",
    "SubstitutionMode",
    "Weekday",
    # Holiday
    "Holiday",
    # Rules
    "LAST",
    "VALID_ORDINALS",
    "HolidayRule",
    "HolidayRuleSet",
    "SubstitutionPolicy",
    "SAT_TO_FRI_SUN_TO_MON",
    "WEEKEND_TO_MONDAY",
    "fixed",
    "nth_weekday",
    "easter",
]
