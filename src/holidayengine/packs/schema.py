"""
holidayengine Rule Pack Schemas

Pydantic models for validating rule pack YAML/JSON files.

A rule pack describes one jurisdiction's holiday rule table as data.
These schemas map to the domain models in holidayengine.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility

Example pack:

    schema_version: "1.0.0"
    code: XX
    name: Example
    subdivisions: [north, south]
    categories: [public]
    substitutions:
      weekend_to_monday:
        shifts: {saturday: 2, sunday: 1}
        roll_past_holidays: true
    rules:
      - kind: fixed
        name: New Year's Day
        month: 1
        day: 1
        substitution: weekend_to_monday
      - kind: easter
        name: Good Friday
        offset_days: -2
"""
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models import Weekday


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

RuleKindValue = Literal["fixed", "nth_weekday", "easter"]

HolidayCategoryValue = Literal[
    "public", "federal", "state", "bank", "school", "government",
    "religious", "optional", "half_day", "armed_forces", "workday",
    "observance", "observed",
]

SubstitutionModeValue = Literal["add", "replace"]

OrdinalPolicyValue = Literal["skip", "fail"]

SubdivisionCollisionValue = Literal["separate", "merge"]

_WEEKDAY_NAMES = {w.name.lower(): int(w) for w in Weekday}


def parse_weekday(value: Any) -> int:
    """Accept a weekday as 0..6 or a (case-insensitive) English name."""
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _WEEKDAY_NAMES:
            return _WEEKDAY_NAMES[key]
        if key.isdigit():
            value = int(key)
        else:
            raise ValueError(f"Unknown weekday '{value}'")
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ValueError(f"Weekday must be 0..6 or a weekday name, got {value!r}")
    return value


# =============================================================================
# Rule Schemas
# =============================================================================

class SubstitutionSchema(BaseModel):
    """Schema for an observed-date substitution policy."""
    shifts: dict[int, int] = Field(..., description="Trigger weekday -> day shift")
    mode: SubstitutionModeValue = "add"
    roll_past_holidays: bool = False
    suffix: str = " (Observed)"

    @field_validator("shifts", mode="before")
    @classmethod
    def parse_shift_weekdays(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return {parse_weekday(k): shift for k, shift in v.items()}


class RuleSchema(BaseModel):
    """
    Schema for one holiday rule.

    Required fields depend on kind:
    - fixed: month, day
    - nth_weekday: month, weekday, ordinal (1..5 or "last")
    - easter: offset_days (defaults to 0 = Easter Sunday)
    """
    kind: RuleKindValue
    name: str = Field(..., min_length=1)
    category: HolidayCategoryValue = "public"
    names: dict[str, str] = Field(default_factory=dict)

    month: Optional[int] = Field(None, ge=1, le=12)
    day: Optional[int] = Field(None, ge=1, le=31)
    weekday: Optional[int] = None
    ordinal: Optional[int] = None
    offset_days: int = 0

    subdivisions: list[str] = Field(default_factory=list)
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    # Inline policy or name of a policy in the pack's `substitutions`
    substitution: Optional[Union[str, SubstitutionSchema]] = None
    ordinal_policy: OrdinalPolicyValue = "skip"

    @field_validator("weekday", mode="before")
    @classmethod
    def parse_rule_weekday(cls, v: Any) -> Any:
        return None if v is None else parse_weekday(v)

    @field_validator("ordinal", mode="before")
    @classmethod
    def parse_ordinal(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip().lower() == "last":
            return -1
        return v

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "RuleSchema":
        """Validate required fields for the rule kind."""
        if self.kind == "fixed":
            if self.month is None or self.day is None:
                raise ValueError(f"Fixed rule '{self.name}' requires month and day")
        elif self.kind == "nth_weekday":
            if self.month is None or self.weekday is None or self.ordinal is None:
                raise ValueError(
                    f"Nth-weekday rule '{self.name}' requires month, weekday and ordinal"
                )
            if self.ordinal not in (1, 2, 3, 4, 5, -1):
                raise ValueError(
                    f"Nth-weekday rule '{self.name}' ordinal must be 1..5 or 'last'"
                )
        return self


# =============================================================================
# Rule Pack Schema
# =============================================================================

class RulePackSchema(BaseModel):
    """Top-level schema for a jurisdiction rule pack."""
    schema_version: str = SCHEMA_VERSION
    code: str = Field(..., min_length=1, description="Jurisdiction code")
    name: str = ""
    default_language: str = "en"
    subdivisions: list[str] = Field(default_factory=list)
    categories: list[HolidayCategoryValue] = Field(default_factory=lambda: ["public"])
    subdivision_collision: SubdivisionCollisionValue = "separate"
    substitutions: dict[str, SubstitutionSchema] = Field(default_factory=dict)
    rules: list[RuleSchema] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_references(self) -> "RulePackSchema":
        """Check that named substitution policies exist."""
        missing = sorted({
            rule.substitution
            for rule in self.rules
            if isinstance(rule.substitution, str) and rule.substitution not in self.substitutions
        })
        if missing:
            raise ValueError(f"Unknown substitution policies: {', '.join(missing)}")
        return self


# =============================================================================
# Validation Functions
# =============================================================================

def validate_rule_pack(data: dict[str, Any]) -> RulePackSchema:
    """
    Validate a rule pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RulePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a rule pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
