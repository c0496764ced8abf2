"""
holidayengine Rule Models

Declarative holiday rules and per-jurisdiction rule sets.

Key components:
- HolidayRule: Tagged variant over RuleKind (fixed, nth-weekday, Easter)
- SubstitutionPolicy: Weekend -> observed-date configuration
- HolidayRuleSet: A jurisdiction's rule table plus metadata
- Helper functions: fixed(), nth_weekday(), easter() for building rules

Rule tables are plain data. Evaluation lives in calendars.evaluation.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from ..exceptions import InvalidSubdivisionError, RuleDefinitionError
from .enums import (
    HolidayCategory,
    OrdinalPolicy,
    RuleKind,
    SubdivisionCollision,
    SubstitutionMode,
    Weekday,
)


# Ordinal value meaning "last occurrence in the month"
LAST = -1

VALID_ORDINALS = frozenset({1, 2, 3, 4, 5, LAST})

NameMap = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def _build_name_map(names: Optional[NameMap], rule_name: str) -> Mapping[str, str]:
    """
    Build a read-only language -> name mapping.

    Accepts a mapping or (language, name) pairs. Duplicate language
    codes in pairs are rejected rather than silently overwritten.
    """
    if names is None:
        return MappingProxyType({})
    if isinstance(names, Mapping):
        return MappingProxyType(dict(names))

    result: dict[str, str] = {}
    for language, localized in names:
        if language in result:
            raise RuleDefinitionError(
                message=f"Duplicate language code '{language}' in names of '{rule_name}'",
                details={"rule": rule_name, "language": language},
            )
        result[language] = localized
    return MappingProxyType(result)


# =============================================================================
# Substitution Policy
# =============================================================================

@dataclass(frozen=True)
class SubstitutionPolicy:
    """
    Observed-date substitution for holidays falling on trigger weekdays.

    Attributes:
        shifts: Trigger weekday -> signed number of days to move
        mode: ADD keeps the actual date, REPLACE drops it
        roll_past_holidays: Keep moving (same direction) while the shifted
            date is already a holiday or is itself a trigger weekday
        suffix: Appended to the name of the observed entry
    """
    shifts: Mapping[int, int] = field(hash=False)
    mode: SubstitutionMode = SubstitutionMode.ADD
    roll_past_holidays: bool = False
    suffix: str = " (Observed)"

    def __post_init__(self) -> None:
        for weekday, shift in self.shifts.items():
            if weekday not in range(7):
                raise RuleDefinitionError(
                    message=f"Substitution trigger weekday {weekday} outside 0..6",
                    details={"weekday": weekday},
                )
            if shift == 0:
                raise RuleDefinitionError(
                    message=f"Substitution shift for weekday {weekday} must be non-zero",
                    details={"weekday": weekday},
                )
        object.__setattr__(self, "shifts", MappingProxyType(dict(self.shifts)))

    def shift_for(self, weekday: int) -> Optional[int]:
        """Get the shift for a weekday, or None if it is not a trigger."""
        return self.shifts.get(weekday)

    @property
    def replaces_original(self) -> bool:
        return self.mode == SubstitutionMode.REPLACE


# Saturday -> Friday, Sunday -> Monday (US federal practice)
SAT_TO_FRI_SUN_TO_MON = SubstitutionPolicy(
    shifts={Weekday.SATURDAY: -1, Weekday.SUNDAY: 1},
)

# Saturday and Sunday -> following Monday, past any holiday already there
WEEKEND_TO_MONDAY = SubstitutionPolicy(
    shifts={Weekday.SATURDAY: 2, Weekday.SUNDAY: 1},
    roll_past_holidays=True,
)


# =============================================================================
# Holiday Rule
# =============================================================================

@dataclass(frozen=True)
class HolidayRule:
    """
    A single holiday rule.

    The fields used depend on `kind`:
    - FIXED: month, day
    - NTH_WEEKDAY: month, weekday, ordinal (1..5 or LAST), offset_days
    - EASTER: offset_days from Western Easter Sunday

    Attributes:
        kind: Rule variant
        name: Canonical holiday name
        category: Holiday category
        names: Language code -> localized name
        subdivisions: Region codes (empty = nationwide)
        first_year: First year the rule applies (inclusive, None = open)
        last_year: Last year the rule applies (inclusive, None = open)
        substitution: Observed-date policy, if any
        ordinal_policy: Reaction to a non-existent 5th weekday
    """
    kind: RuleKind
    name: str
    category: HolidayCategory = HolidayCategory.PUBLIC
    names: Mapping[str, str] = field(default_factory=dict, hash=False)

    # Date definition
    month: Optional[int] = None
    day: Optional[int] = None
    weekday: Optional[int] = None
    ordinal: Optional[int] = None
    offset_days: int = 0

    # Scope
    subdivisions: frozenset[str] = frozenset()
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    # Policies
    substitution: Optional[SubstitutionPolicy] = None
    ordinal_policy: OrdinalPolicy = OrdinalPolicy.SKIP

    def __post_init__(self) -> None:
        """Validate rule structure for its kind."""
        if not self.name:
            raise RuleDefinitionError(message="Holiday rule requires a name")

        object.__setattr__(self, "names", _build_name_map(self.names, self.name))
        object.__setattr__(
            self, "subdivisions", frozenset(s.upper() for s in self.subdivisions)
        )

        if self.kind in (RuleKind.FIXED, RuleKind.NTH_WEEKDAY):
            if self.month is None or not 1 <= self.month <= 12:
                self._fail(f"month must be 1..12, got {self.month}")

        if self.kind == RuleKind.FIXED:
            # Checked against a leap year so that February 29 is allowed
            if self.day is None or not 1 <= self.day <= calendar.monthrange(2000, self.month)[1]:
                self._fail(f"day {self.day} is not valid for month {self.month}")
        elif self.kind == RuleKind.NTH_WEEKDAY:
            if self.weekday is None or self.weekday not in range(7):
                self._fail(f"weekday must be 0..6, got {self.weekday}")
            if self.ordinal not in VALID_ORDINALS:
                self._fail(f"ordinal must be 1..5 or -1 (last), got {self.ordinal}")

        if (
            self.first_year is not None
            and self.last_year is not None
            and self.first_year > self.last_year
        ):
            self._fail(f"first_year {self.first_year} is after last_year {self.last_year}")

    def _fail(self, reason: str) -> None:
        raise RuleDefinitionError(
            message=f"Invalid {self.kind.value} rule '{self.name}': {reason}",
            details={"rule": self.name, "kind": self.kind.value},
        )

    def active_in(self, year: int) -> bool:
        """Check if the rule's validity window covers a year."""
        if self.first_year is not None and year < self.first_year:
            return False
        if self.last_year is not None and year > self.last_year:
            return False
        return True

    def applies_to(self, subdivisions: frozenset[str]) -> bool:
        """
        Check the rule's scope against a subdivision filter.

        Nationwide rules always apply. Scoped rules apply only when the
        filter shares at least one code with the scope.
        """
        if not self.subdivisions:
            return True
        return not self.subdivisions.isdisjoint(subdivisions)

    @property
    def is_nationwide(self) -> bool:
        return not self.subdivisions


# =============================================================================
# Rule Builders
# =============================================================================

def fixed(name: str, month: int, day: int, **kwargs: Any) -> HolidayRule:
    """Build a fixed-date rule (same month/day every year)."""
    return HolidayRule(kind=RuleKind.FIXED, name=name, month=month, day=day, **kwargs)


def nth_weekday(
    name: str,
    month: int,
    weekday: int,
    ordinal: int,
    offset_days: int = 0,
    **kwargs: Any,
) -> HolidayRule:
    """Build an nth-weekday-of-month rule (ordinal LAST for the last one)."""
    return HolidayRule(
        kind=RuleKind.NTH_WEEKDAY,
        name=name,
        month=month,
        weekday=weekday,
        ordinal=ordinal,
        offset_days=offset_days,
        **kwargs,
    )


def easter(name: str, offset_days: int = 0, **kwargs: Any) -> HolidayRule:
    """Build a rule relative to Western Easter Sunday."""
    return HolidayRule(kind=RuleKind.EASTER, name=name, offset_days=offset_days, **kwargs)


# =============================================================================
# Holiday Rule Set
# =============================================================================

@dataclass(frozen=True)
class HolidayRuleSet:
    """
    A jurisdiction's complete holiday rule table.

    Attributes:
        code: Jurisdiction code (e.g. "US")
        rules: Rules in table order (order is preserved in results)
        name: Display name of the jurisdiction
        subdivisions: Supported subdivision codes
        categories: Supported holiday categories
        default_language: Language used for names when none is requested
        subdivision_collision: Handling of subdivision holidays that fall
            on a nationwide holiday
    """
    code: str
    rules: tuple[HolidayRule, ...]
    name: str = ""
    subdivisions: frozenset[str] = frozenset()
    categories: frozenset[HolidayCategory] = frozenset({HolidayCategory.PUBLIC})
    default_language: str = "en"
    subdivision_collision: SubdivisionCollision = SubdivisionCollision.SEPARATE

    def __post_init__(self) -> None:
        if not self.code:
            raise RuleDefinitionError(message="Rule set requires a jurisdiction code")

        object.__setattr__(self, "code", self.code.upper())
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(
            self, "subdivisions", frozenset(s.upper() for s in self.subdivisions)
        )

        categories = set(self.categories)
        if any(rule.substitution is not None for rule in self.rules):
            categories.add(HolidayCategory.OBSERVED)
        object.__setattr__(self, "categories", frozenset(categories))

        errors = []
        for rule in self.rules:
            unknown = rule.subdivisions - self.subdivisions
            if unknown:
                errors.append(
                    f"Rule '{rule.name}' references unsupported subdivisions {sorted(unknown)}"
                )
            if rule.category not in self.categories:
                errors.append(
                    f"Rule '{rule.name}' uses unsupported category '{rule.category.value}'"
                )

        if errors:
            raise RuleDefinitionError(
                message=f"Rule set '{self.code}' is inconsistent: {len(errors)} errors",
                details={"errors": errors},
                jurisdiction=self.code,
            )

    def normalize_subdivisions(self, subdivisions: Iterable[str]) -> frozenset[str]:
        """
        Upper-case and validate requested subdivision codes.

        A bare string is a single code ("TX"), not a sequence of codes.

        Raises:
            InvalidSubdivisionError: If any code is not supported
        """
        if isinstance(subdivisions, str):
            subdivisions = (subdivisions,)
        requested = frozenset(s.upper() for s in subdivisions)
        unknown = requested - self.subdivisions
        if unknown:
            raise InvalidSubdivisionError(
                message=f"Unsupported subdivisions for {self.code}: {', '.join(sorted(unknown))}",
                details={"unsupported": sorted(unknown)},
                jurisdiction=self.code,
            )
        return requested
