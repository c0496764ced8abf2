"""
holidayengine Enumerations

All enumeration types used throughout holidayengine.
Organized by domain area for clarity.

String enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum, IntEnum


# =============================================================================
# Weekdays
# =============================================================================

class Weekday(IntEnum):
    """Day of week, numbered like date.weekday() (0=Monday, 6=Sunday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# =============================================================================
# Holiday Categories
# =============================================================================

class HolidayCategory(str, Enum):
    """Classification of a holiday."""
    PUBLIC = "public"
    FEDERAL = "federal"
    STATE = "state"
    BANK = "bank"
    SCHOOL = "school"
    GOVERNMENT = "government"
    RELIGIOUS = "religious"
    OPTIONAL = "optional"
    HALF_DAY = "half_day"
    ARMED_FORCES = "armed_forces"
    WORKDAY = "workday"
    OBSERVANCE = "observance"          # Widely kept, not statutory
    OBSERVED = "observed"              # Synthetic substitute for a weekend date


# =============================================================================
# Rule Kinds
# =============================================================================

class RuleKind(str, Enum):
    """
    Closed set of holiday rule variants.

    Every kind has exactly one evaluator in calendars.evaluation.
    """
    FIXED = "fixed"                    # Same month/day every year
    NTH_WEEKDAY = "nth_weekday"        # e.g. 4th Thursday of November
    EASTER = "easter"                  # Offset from Western Easter Sunday


class OrdinalPolicy(str, Enum):
    """
    What an nth-weekday rule does when its ordinal does not exist.

    Only ordinal 5 can be missing (some months have four of a weekday).
    """
    SKIP = "skip"                      # No occurrence that year (logged)
    FAIL = "fail"                      # Raise InvalidOrdinalError


# =============================================================================
# Substitution
# =============================================================================

class SubstitutionMode(str, Enum):
    """Whether an observed date adds to or replaces the actual date."""
    ADD = "add"
    REPLACE = "replace"


class SubdivisionCollision(str, Enum):
    """
    Handling of a subdivision holiday that lands on a nationwide holiday.
    """
    SEPARATE = "separate"              # Keep both entries
    MERGE = "merge"                    # Keep only the nationwide entry


# =============================================================================
# Business Day Conventions
# =============================================================================

class BusinessDayConvention(str, Enum):
    """Date adjustment conventions for non-business days."""
    UNADJUSTED = "unadjusted"
    FOLLOWING = "following"
    PRECEDING = "preceding"
    MODIFIED_FOLLOWING = "modified_following"    # Following unless month changes
    MODIFIED_PRECEDING = "modified_preceding"    # Preceding unless month changes
