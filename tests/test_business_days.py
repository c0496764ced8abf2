"""
Business Day Calculator Tests

Tests for weekend configuration, business day membership, walking,
counting and date adjustment conventions.
"""
from __future__ import annotations

from datetime import date

import pytest

from holidayengine import (
    BusinessDayConvention,
    BusinessDayWalkError,
    InvalidSubdivisionError,
    InvalidWeekendError,
    Weekday,
)
from holidayengine.calendars import BusinessDayCalculator, HolidayProvider


# =============================================================================
# Weekends
# =============================================================================

class TestWeekends:
    """Tests for weekend configuration."""

    def test_default_weekends(self, us_calculator):
        """Saturday and Sunday are the default weekend."""
        assert us_calculator.weekends == frozenset({Weekday.SATURDAY, Weekday.SUNDAY})
        assert us_calculator.is_weekend(date(2024, 7, 6))
        assert not us_calculator.is_weekend(date(2024, 7, 5))

    def test_set_weekends(self, us_calculator):
        """Friday/Saturday weekends make Sunday a business day."""
        us_calculator.set_weekends([Weekday.FRIDAY, Weekday.SATURDAY])
        assert us_calculator.is_business_day(date(2024, 7, 7))
        assert not us_calculator.is_business_day(date(2024, 7, 5))

    def test_empty_weekend(self, us_calculator):
        """An empty weekend is allowed."""
        us_calculator.set_weekends([])
        assert us_calculator.is_business_day(date(2024, 7, 6))

    def test_set_weekends_keeps_cache(self, us_calculator, us_provider):
        """Changing weekends does not touch the holiday cache."""
        us_calculator.is_business_day(date(2024, 7, 4))
        cached = us_provider.cached_years
        us_calculator.set_weekends([Weekday.SUNDAY])
        assert us_provider.cached_years == cached

    def test_all_days_weekend_rejected(self, us_calculator):
        """A weekend covering all seven days is rejected."""
        with pytest.raises(InvalidWeekendError):
            us_calculator.set_weekends(range(7))

    def test_invalid_weekday_rejected(self, us_calculator):
        """Weekend values must be 0..6."""
        with pytest.raises(InvalidWeekendError) as exc_info:
            us_calculator.set_weekends([5, 7])
        assert exc_info.value.details["invalid"] == [7]

    def test_invalid_weekend_at_construction(self, us_provider):
        """Weekends are validated when the calculator is built."""
        with pytest.raises(InvalidWeekendError):
            BusinessDayCalculator(us_provider, weekend_days=frozenset({-1}))


# =============================================================================
# Membership
# =============================================================================

class TestIsBusinessDay:
    """Tests for business day membership."""

    def test_holiday_is_not_business_day(self, us_calculator):
        """Independence Day 2024 (Thursday) is not a business day."""
        assert not us_calculator.is_business_day(date(2024, 7, 4))

    def test_regular_weekday(self, us_calculator):
        """A regular Friday is a business day."""
        assert us_calculator.is_business_day(date(2024, 7, 5))

    def test_weekend(self, us_calculator):
        """A Sunday is not a business day."""
        assert not us_calculator.is_business_day(date(2024, 7, 7))

    def test_observed_date_is_not_business_day(self, us_calculator):
        """Friday July 3, 2026 (observed Independence Day) is not a business day."""
        assert not us_calculator.is_business_day(date(2026, 7, 3))

    def test_subdivision_holidays(self, us_provider):
        """Calculators with subdivisions also skip those holidays."""
        texas = BusinessDayCalculator(us_provider, subdivisions=("tx",))
        national = BusinessDayCalculator(us_provider)
        # Texas Independence Day, Monday March 2, 2026
        assert not texas.is_business_day(date(2026, 3, 2))
        assert national.is_business_day(date(2026, 3, 2))
        assert texas.subdivisions == ("TX",)

    def test_unknown_subdivision(self, us_provider):
        """Unknown subdivisions are rejected at construction."""
        with pytest.raises(InvalidSubdivisionError):
            BusinessDayCalculator(us_provider, subdivisions=("XX",))

    def test_holidays_in_range(self, us_calculator):
        """get_holidays_in_range lists holiday dates, empty when inverted."""
        assert us_calculator.get_holidays_in_range(date(2024, 7, 1), date(2024, 7, 31)) == [
            date(2024, 7, 4)
        ]
        assert us_calculator.get_holidays_in_range(date(2024, 7, 31), date(2024, 7, 1)) == []


# =============================================================================
# Walking
# =============================================================================

class TestAddBusinessDays:
    """Tests for add_business_days."""

    def test_skips_holiday(self, us_calculator):
        """Adding one business day to July 3, 2024 skips July 4."""
        assert us_calculator.add_business_days(date(2024, 7, 3), 1) == date(2024, 7, 5)

    def test_skips_weekend(self, us_calculator):
        """Friday + 1 business day is Monday."""
        assert us_calculator.add_business_days(date(2024, 7, 5), 1) == date(2024, 7, 8)

    def test_zero_returns_start(self, us_calculator):
        """Adding zero days returns the start date, even on a weekend."""
        assert us_calculator.add_business_days(date(2024, 7, 6), 0) == date(2024, 7, 6)

    def test_negative(self, us_calculator):
        """Negative counts walk backwards."""
        assert us_calculator.add_business_days(date(2024, 7, 5), -1) == date(2024, 7, 3)

    def test_subtract(self, us_calculator):
        """subtract_business_days mirrors add_business_days."""
        assert us_calculator.subtract_business_days(date(2024, 7, 8), 1) == date(2024, 7, 5)

    def test_from_weekend(self, us_calculator):
        """Walking from a weekend does not count the start."""
        assert us_calculator.add_business_days(date(2024, 7, 6), 1) == date(2024, 7, 8)

    def test_across_year_boundary(self, us_calculator):
        """Walks cross year boundaries and observed dates."""
        # Dec 31, 2021 is the observed New Year's Day 2022
        assert us_calculator.add_business_days(date(2021, 12, 30), 1) == date(2022, 1, 3)

    def test_next_and_previous(self, us_calculator):
        """next/previous business day are strict."""
        assert us_calculator.next_business_day(date(2024, 7, 3)) == date(2024, 7, 5)
        assert us_calculator.previous_business_day(date(2024, 7, 5)) == date(2024, 7, 3)

    def test_walk_exhausted(self, no_holiday_calculator, monkeypatch):
        """A calendar without business days raises BusinessDayWalkError."""
        monkeypatch.setattr(no_holiday_calculator, "is_business_day", lambda d: False)
        with pytest.raises(BusinessDayWalkError):
            no_holiday_calculator.add_business_days(date(2024, 7, 1), 1)


class TestBusinessDaysBetween:
    """Tests for business_days_between."""

    def test_week_with_holiday(self, us_calculator):
        """July 1-7, 2024: five weekdays minus Independence Day."""
        assert us_calculator.business_days_between(date(2024, 7, 1), date(2024, 7, 7)) == 4

    def test_both_ends_included(self, us_calculator):
        """A single business day counts as one."""
        assert us_calculator.business_days_between(date(2024, 7, 5), date(2024, 7, 5)) == 1

    def test_end_before_start(self, us_calculator):
        """An inverted range counts zero."""
        assert us_calculator.business_days_between(date(2024, 7, 7), date(2024, 7, 1)) == 0

    def test_round_trip_includes_start(self, us_calculator):
        """Counting back over an added span includes the start: n + 1."""
        start = date(2024, 7, 1)
        end = us_calculator.add_business_days(start, 3)
        assert end == date(2024, 7, 5)
        assert us_calculator.business_days_between(start, end) == 4

    def test_full_year(self, no_holiday_calculator):
        """2024 has 262 weekdays; New Year's Day is a Monday."""
        count = no_holiday_calculator.business_days_between(date(2024, 1, 1), date(2024, 12, 31))
        assert count == 261


# =============================================================================
# End of Month and Adjustment
# =============================================================================

class TestEndOfMonth:
    """Tests for month-end helpers."""

    def test_last_business_day(self, us_calculator):
        """June 30, 2024 is a Sunday: last business day is June 28."""
        assert us_calculator.last_business_day_of_month(2024, 6) == date(2024, 6, 28)

    def test_is_end_of_month(self, us_calculator):
        """Only the last business day of a month is its end."""
        assert us_calculator.is_end_of_month(date(2024, 6, 28))
        assert not us_calculator.is_end_of_month(date(2024, 6, 27))
        assert not us_calculator.is_end_of_month(date(2024, 6, 30))


class TestAdjust:
    """Tests for business day conventions."""

    SATURDAY = date(2024, 6, 29)

    def test_business_day_unchanged(self, us_calculator):
        """Business days are never moved."""
        for convention in BusinessDayConvention:
            assert us_calculator.adjust(date(2024, 6, 28), convention) == date(2024, 6, 28)

    def test_unadjusted(self, us_calculator):
        """UNADJUSTED never moves a date."""
        assert us_calculator.adjust(self.SATURDAY, BusinessDayConvention.UNADJUSTED) == self.SATURDAY

    def test_following(self, us_calculator):
        """FOLLOWING rolls forward, even into the next month."""
        assert us_calculator.adjust(self.SATURDAY, BusinessDayConvention.FOLLOWING) == date(2024, 7, 1)

    def test_preceding(self, us_calculator):
        """PRECEDING rolls backward."""
        assert us_calculator.adjust(self.SATURDAY, BusinessDayConvention.PRECEDING) == date(2024, 6, 28)

    def test_modified_following(self, us_calculator):
        """MODIFIED_FOLLOWING rolls back when forward leaves the month."""
        adjusted = us_calculator.adjust(self.SATURDAY, BusinessDayConvention.MODIFIED_FOLLOWING)
        assert adjusted == date(2024, 6, 28)

    def test_modified_preceding(self, us_calculator):
        """MODIFIED_PRECEDING rolls forward when backward leaves the month."""
        adjusted = us_calculator.adjust(date(2024, 6, 1), BusinessDayConvention.MODIFIED_PRECEDING)
        assert adjusted == date(2024, 6, 3)

    def test_convention_by_value(self, us_calculator):
        """Conventions may be passed by value."""
        assert us_calculator.adjust(self.SATURDAY, "following") == date(2024, 7, 1)


class TestSharedProvider:
    """Tests for calculators sharing one provider."""

    def test_calculators_share_cache(self):
        """Two calculators over one provider evaluate each year once."""
        provider = HolidayProvider.for_jurisdiction("US")
        first = BusinessDayCalculator(provider)
        second = BusinessDayCalculator(provider)
        second.set_weekends([Weekday.FRIDAY, Weekday.SATURDAY])

        first.is_business_day(date(2024, 7, 4))
        second.is_business_day(date(2024, 7, 4))

        assert provider.cached_years == [(2024, ())]
        assert first.weekends != second.weekends

    def test_custom_rule_calculator(self, no_holiday_calculator):
        """A calculator over a custom rule set."""
        assert not no_holiday_calculator.is_business_day(date(2024, 1, 1))
        assert no_holiday_calculator.is_business_day(date(2024, 7, 4))
