"""
Holiday Provider

Evaluates a jurisdiction's rule set per year with a lazily-filled cache.

The cache is owned by the provider instance and keyed by
(year, sorted subdivision filter). Entries are never evicted: a year of
holidays is a few dozen values, and the provider's lifetime bounds the
number of years a caller can ask for.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..exceptions import InvalidDateRangeError, InvalidYearError
from ..models import Holiday, HolidayCategory, HolidayRuleSet
from .evaluation import evaluate_rule_set

logger = logging.getLogger(__name__)

# Date -> holidays on that date, in rule-table order
HolidayMap = dict[date, tuple[Holiday, ...]]

_CacheKey = tuple[int, tuple[str, ...]]


@dataclass
class HolidayProvider:
    """
    Holiday queries for one jurisdiction.

    Usage:
        provider = HolidayProvider.for_jurisdiction("US")

        holiday = provider.is_holiday(date(2024, 7, 4))
        if holiday is not None:
            print(holiday.name)  # Independence Day

        # Nationwide + Texas holidays
        texas = provider.holidays_with_subdivisions(2024, ["TX"])

    Attributes:
        rule_set: The jurisdiction's rule table
        categories: Only report holidays in these categories (None = all)
        language: Default language for get_holiday_name()
        min_year: Earliest year accepted
        max_year: Latest year accepted
    """

    rule_set: HolidayRuleSet
    categories: Optional[frozenset[HolidayCategory]] = None
    language: Optional[str] = None
    min_year: int = 1900
    max_year: int = 2200

    _cache: dict[_CacheKey, HolidayMap] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.categories is not None:
            self.categories = frozenset(HolidayCategory(c) for c in self.categories)
        if self.language is None:
            self.language = self.rule_set.default_language

    @classmethod
    def for_jurisdiction(cls, code: str, **options) -> HolidayProvider:
        """
        Create a provider from the jurisdiction registry.

        Raises:
            UnsupportedJurisdictionError: If no rule set is registered
        """
        from ..jurisdictions import get_rule_set

        return cls(rule_set=get_rule_set(code), **options)

    @property
    def code(self) -> str:
        return self.rule_set.code

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------

    def _validate_year(self, year: int) -> None:
        if not self.min_year <= year <= self.max_year:
            raise InvalidYearError(
                message=f"Year {year} is outside valid range ({self.min_year}-{self.max_year})",
                details={"year": year},
                jurisdiction=self.code,
            )

    def _get_year(self, year: int, subdivisions: frozenset[str]) -> HolidayMap:
        """Get holidays for a (year, filter) key, evaluating on first use."""
        key = (year, tuple(sorted(subdivisions)))
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        with self._lock:
            # Another thread may have filled the key while we waited
            cached = self._cache.get(key)
            if cached is None:
                self._validate_year(year)
                cached = self._build_map(evaluate_rule_set(self.rule_set, year, subdivisions))
                self._cache[key] = cached
                logger.debug("Cached %s holidays for key %s", self.code, key)
        return cached

    def _build_map(self, holidays: list[Holiday]) -> HolidayMap:
        grouped: dict[date, list[Holiday]] = {}
        for holiday in holidays:
            if self.categories is not None and not holiday.matches_category(self.categories):
                continue
            grouped.setdefault(holiday.date, []).append(holiday)
        return {d: tuple(entries) for d, entries in grouped.items()}

    def clear_cache(self) -> None:
        """Drop all cached years."""
        with self._lock:
            self._cache.clear()

    @property
    def cached_years(self) -> list[tuple[int, tuple[str, ...]]]:
        """Cached (year, subdivision filter) keys, sorted."""
        return sorted(self._cache)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def load_holidays(self, year: int) -> HolidayMap:
        """
        Get nationwide holidays for a year.

        Returns:
            A new dict of date -> holidays on that date, ordered by date
        """
        return dict(self._get_year(year, frozenset()))

    def holidays_with_subdivisions(self, year: int, subdivisions: Iterable[str]) -> HolidayMap:
        """
        Get nationwide plus subdivision-scoped holidays for a year.

        Args:
            year: Year to evaluate
            subdivisions: Subdivision codes (any order, case-insensitive)

        Raises:
            InvalidSubdivisionError: If a code is not supported
        """
        scope = self.rule_set.normalize_subdivisions(subdivisions)
        return dict(self._get_year(year, scope))

    def holidays_on(self, d: date, subdivisions: Iterable[str] = ()) -> tuple[Holiday, ...]:
        """Get every holiday on a date (empty tuple if none)."""
        scope = self.rule_set.normalize_subdivisions(subdivisions)
        return self._get_year(d.year, scope).get(d, ())

    def is_holiday(self, d: date, subdivisions: Iterable[str] = ()) -> Optional[Holiday]:
        """
        Check if a date is a holiday.

        Returns:
            The first holiday on the date (rule-table order), or None
        """
        entries = self.holidays_on(d, subdivisions)
        return entries[0] if entries else None

    def get_holiday_name(self, d: date, language: Optional[str] = None) -> Optional[str]:
        """
        Get the name of the (first) holiday on a date.

        Args:
            d: Date to check
            language: Language code (defaults to the provider language)

        Returns:
            Localized holiday name if it's a holiday, None otherwise
        """
        holiday = self.is_holiday(d)
        if holiday is None:
            return None
        return holiday.localized_name(language or self.language)

    def holidays_for_date_range(
        self,
        start: date,
        end: date,
        subdivisions: Iterable[str] = (),
    ) -> HolidayMap:
        """
        Get holidays within a date range (inclusive), across years.

        Raises:
            InvalidDateRangeError: If start is after end
        """
        if start > end:
            raise InvalidDateRangeError(
                message="start date cannot be after end date",
                details={"start": start.isoformat(), "end": end.isoformat()},
                jurisdiction=self.code,
            )

        scope = self.rule_set.normalize_subdivisions(subdivisions)
        result: HolidayMap = {}
        for year in range(start.year, end.year + 1):
            for d, entries in self._get_year(year, scope).items():
                if start <= d <= end:
                    result[d] = entries
        return result

    def holiday_count(self, year: int) -> int:
        """Count nationwide holiday entries in a year."""
        return sum(len(entries) for entries in self._get_year(year, frozenset()).values())

    def get_supported_subdivisions(self) -> frozenset[str]:
        return self.rule_set.subdivisions

    def get_supported_categories(self) -> frozenset[HolidayCategory]:
        return self.rule_set.categories
