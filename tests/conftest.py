"""
Pytest configuration and fixtures for holidayengine tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
from datetime import date

import pytest

from holidayengine.calendars import (
    BusinessDayCalculator,
    HolidayAwareScheduler,
    HolidayProvider,
)
from holidayengine.models import (
    HolidayCategory,
    HolidayRule,
    HolidayRuleSet,
    SubdivisionCollision,
    fixed,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_rule_set(
    rules: list[HolidayRule],
    code: str = "XX",
    subdivisions: frozenset[str] = frozenset({"N", "S"}),
    categories: frozenset[HolidayCategory] = frozenset({
        HolidayCategory.PUBLIC,
        HolidayCategory.OBSERVANCE,
    }),
    subdivision_collision: SubdivisionCollision = SubdivisionCollision.SEPARATE,
) -> HolidayRuleSet:
    """Create a HolidayRuleSet for a test jurisdiction."""
    return HolidayRuleSet(
        code=code,
        name="Testland",
        rules=tuple(rules),
        subdivisions=subdivisions,
        categories=categories,
        subdivision_collision=subdivision_collision,
    )


def make_provider(rules: list[HolidayRule], **kwargs) -> HolidayProvider:
    """Create a HolidayProvider over a test rule set."""
    return HolidayProvider(rule_set=make_rule_set(rules, **kwargs))


def make_calculator(rules: list[HolidayRule], **kwargs) -> BusinessDayCalculator:
    """Create a BusinessDayCalculator over a test rule set."""
    return BusinessDayCalculator(make_provider(rules, **kwargs))


def names_on(holidays: dict, d: date) -> list[str]:
    """Names of the holidays on a date in a provider result."""
    return [h.name for h in holidays.get(d, ())]


# =============================================================================
# Common Fixtures
# =============================================================================

@pytest.fixture
def us_provider():
    """US federal + state provider."""
    return HolidayProvider.for_jurisdiction("US")


@pytest.fixture
def us_calculator(us_provider):
    """US calculator with Saturday/Sunday weekends."""
    return BusinessDayCalculator(us_provider)


@pytest.fixture
def us_scheduler(us_calculator):
    """Scheduler over the US calculator."""
    return HolidayAwareScheduler(us_calculator)


@pytest.fixture
def no_holiday_calculator():
    """Calculator whose only holiday is 1 January (weekends dominate)."""
    return make_calculator([fixed("New Year's Day", 1, 1)])
