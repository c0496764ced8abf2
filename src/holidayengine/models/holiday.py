"""
holidayengine Holiday Model

A Holiday is one concrete occurrence produced by evaluating a rule for
a year. Holidays are immutable once produced.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from .enums import HolidayCategory


def _frozen_names(names: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Return a read-only copy of a language -> name mapping."""
    return MappingProxyType(dict(names or {}))


@dataclass(frozen=True)
class Holiday:
    """
    A holiday occurrence on a civil calendar date.

    Attributes:
        date: Calendar date of the occurrence
        name: Canonical display name
        category: Holiday category (OBSERVED for substitute dates)
        names: Language code -> localized name
        subdivisions: Region codes the holiday applies to (empty = nationwide)
        observed_from: Actual date this entry substitutes for, if observed
        source_category: Category of the underlying rule
    """
    date: date
    name: str
    category: HolidayCategory = HolidayCategory.PUBLIC
    names: Mapping[str, str] = field(default_factory=dict, hash=False)
    subdivisions: frozenset[str] = frozenset()
    observed_from: Optional[date] = None
    source_category: Optional[HolidayCategory] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", _frozen_names(self.names))
        object.__setattr__(self, "subdivisions", frozenset(self.subdivisions))
        if self.source_category is None:
            object.__setattr__(self, "source_category", self.category)

    @property
    def is_observed(self) -> bool:
        """True if this entry is a substitute for a weekend date."""
        return self.observed_from is not None

    @property
    def is_nationwide(self) -> bool:
        """True if the holiday is not restricted to subdivisions."""
        return not self.subdivisions

    def localized_name(self, language: Optional[str] = None) -> str:
        """
        Get the holiday name in a language.

        Falls back to the canonical name when no translation exists.
        """
        if language is None:
            return self.name
        return self.names.get(language, self.name)

    def matches_category(self, categories: frozenset[HolidayCategory]) -> bool:
        """Check the holiday (or the holiday it substitutes for) against a filter."""
        return self.category in categories or self.source_category in categories
