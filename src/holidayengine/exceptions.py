"""
holidayengine Exception Hierarchy

Domain-specific exceptions for holiday and business-day calculations.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HE_<CATEGORY>_<SPECIFIC>

Expected "nothing found" outcomes are NOT exceptions:
- HolidayProvider.is_holiday() returns None for a regular day
- BusinessDayCalculator.business_days_between() returns 0 when end < start
- A SKIP-policy rule with a non-existent ordinal contributes no occurrence
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayEngineError(Exception):
    """
    Base exception for all holidayengine errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HE_*)
        details: Additional context about the error
        jurisdiction: Associated jurisdiction code if applicable
    """
    message: str
    code: str = "HE_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    jurisdiction: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.jurisdiction:
            parts.append(f"(jurisdiction: {self.jurisdiction})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.jurisdiction:
            result["jurisdiction"] = self.jurisdiction
        return result


# =============================================================================
# Jurisdiction Errors
# =============================================================================

@dataclass
class UnsupportedJurisdictionError(HolidayEngineError):
    """No rule set is registered for the requested jurisdiction."""
    code: str = "HE_JURISDICTION_UNSUPPORTED"


@dataclass
class InvalidSubdivisionError(HolidayEngineError):
    """A requested subdivision code is not supported by the jurisdiction."""
    code: str = "HE_SUBDIVISION_INVALID"


# =============================================================================
# Rule Errors
# =============================================================================

@dataclass
class RuleDefinitionError(HolidayEngineError):
    """Holiday rule or rule set is malformed."""
    code: str = "HE_RULE_DEFINITION_ERROR"


@dataclass
class InvalidOrdinalError(HolidayEngineError):
    """Nth-weekday ordinal does not exist in the requested month."""
    code: str = "HE_RULE_INVALID_ORDINAL"


@dataclass
class RuleEvaluationError(HolidayEngineError):
    """Rule could not be evaluated (no evaluator for its kind)."""
    code: str = "HE_RULE_EVALUATION_ERROR"


# =============================================================================
# Query Errors
# =============================================================================

@dataclass
class InvalidYearError(HolidayEngineError):
    """Year is outside the range supported by the provider."""
    code: str = "HE_QUERY_INVALID_YEAR"


@dataclass
class InvalidDateRangeError(HolidayEngineError):
    """Date range is inverted."""
    code: str = "HE_QUERY_INVALID_RANGE"


# =============================================================================
# Business Day Errors
# =============================================================================

@dataclass
class InvalidWeekendError(HolidayEngineError):
    """Weekend configuration is invalid."""
    code: str = "HE_BUSINESS_INVALID_WEEKEND"


@dataclass
class BusinessDayWalkError(HolidayEngineError):
    """No business day could be reached while walking the calendar."""
    code: str = "HE_BUSINESS_WALK_EXHAUSTED"


@dataclass
class ScheduleError(HolidayEngineError):
    """Schedule parameters are invalid."""
    code: str = "HE_SCHEDULE_ERROR"


# =============================================================================
# Rule Pack Errors
# =============================================================================

@dataclass
class RulePackLoadError(HolidayEngineError):
    """Failed to load rule pack from file."""
    code: str = "HE_PACK_LOAD_ERROR"


@dataclass
class RulePackValidationError(HolidayEngineError):
    """Rule pack schema validation failed."""
    code: str = "HE_PACK_VALIDATION_ERROR"


@dataclass
class RulePackVersionMismatch(HolidayEngineError):
    """Rule pack schema version is incompatible."""
    code: str = "HE_PACK_VERSION_MISMATCH"
