"""
Rule Evaluation Tests

Tests for evaluate_rule() and evaluate_rule_set(): validity windows,
subdivision scope, observed-date substitution and de-duplication.
"""
from __future__ import annotations

import logging
from datetime import date

import pytest

from holidayengine import InvalidOrdinalError, RuleEvaluationError
from holidayengine.calendars import evaluate_rule, evaluate_rule_set
from holidayengine.models import (
    SAT_TO_FRI_SUN_TO_MON,
    WEEKEND_TO_MONDAY,
    HolidayCategory,
    OrdinalPolicy,
    SubdivisionCollision,
    SubstitutionMode,
    SubstitutionPolicy,
    Weekday,
    easter,
    fixed,
    nth_weekday,
)
from tests.conftest import make_rule_set


def _dates(holidays):
    return [h.date for h in holidays]


def _names(holidays):
    return [h.name for h in holidays]


# =============================================================================
# Single Rules
# =============================================================================

class TestEvaluateRule:
    """Tests for evaluating one rule in one year."""

    def test_fixed(self):
        """Fixed rules land on the same month/day."""
        assert evaluate_rule(fixed("A", 7, 4), 2024) == date(2024, 7, 4)

    def test_february_29_in_common_year(self):
        """A February 29 rule has no occurrence in a common year."""
        rule = fixed("Leap Day", 2, 29)
        assert evaluate_rule(rule, 2024) == date(2024, 2, 29)
        assert evaluate_rule(rule, 2023) is None

    def test_nth_weekday_with_offset(self):
        """Offsets are applied after resolving the nth weekday."""
        # Monday before May 25: last Monday of May minus 7 days
        rule = nth_weekday("Victoria Day", 5, Weekday.MONDAY, -1, offset_days=-7)
        assert evaluate_rule(rule, 2024) == date(2024, 5, 20)

    def test_easter_offset(self):
        """Easter-relative rules apply their offset to Easter Sunday."""
        assert evaluate_rule(easter("Good Friday", -2), 2024) == date(2024, 3, 29)
        assert evaluate_rule(easter("Easter Monday", 1), 2025) == date(2025, 4, 21)

    def test_missing_ordinal_skipped(self, caplog):
        """SKIP policy: a missing 5th weekday yields no occurrence and a warning."""
        rule = nth_weekday("Fifth Monday", 2, Weekday.MONDAY, 5)
        with caplog.at_level(logging.WARNING, logger="holidayengine.calendars.evaluation"):
            assert evaluate_rule(rule, 2024) is None
        assert "Fifth Monday" in caplog.text

    def test_missing_ordinal_fails(self):
        """FAIL policy: a missing 5th weekday raises with rule context."""
        rule = nth_weekday(
            "Fifth Monday", 2, Weekday.MONDAY, 5, ordinal_policy=OrdinalPolicy.FAIL
        )
        with pytest.raises(InvalidOrdinalError) as exc_info:
            evaluate_rule(rule, 2024)
        assert exc_info.value.details["rule"] == "Fifth Monday"
        assert exc_info.value.details["year"] == 2024

    def test_unknown_kind(self):
        """A rule kind without an evaluator raises RuleEvaluationError."""
        rule = fixed("A", 1, 1)
        object.__setattr__(rule, "kind", "lunar")
        with pytest.raises(RuleEvaluationError):
            evaluate_rule(rule, 2024)


# =============================================================================
# Rule Sets
# =============================================================================

class TestEvaluateRuleSet:
    """Tests for evaluating a whole rule table."""

    def test_results_sorted_by_date(self):
        """Results are ordered by date regardless of table order."""
        rule_set = make_rule_set([
            fixed("Late", 12, 1),
            fixed("Early", 1, 15),
            easter("Easter Sunday"),
        ])
        holidays = evaluate_rule_set(rule_set, 2024)
        assert _names(holidays) == ["Early", "Easter Sunday", "Late"]

    def test_validity_window(self):
        """Rules outside their window contribute nothing."""
        rule_set = make_rule_set([
            fixed("New Day", 6, 19, first_year=2021),
            fixed("Old Day", 6, 20, last_year=2020),
        ])
        assert _names(evaluate_rule_set(rule_set, 2020)) == ["Old Day"]
        assert _names(evaluate_rule_set(rule_set, 2021)) == ["New Day"]

    def test_empty_filter_is_nationwide_only(self):
        """Without a filter, scoped rules are excluded."""
        rule_set = make_rule_set([
            fixed("National", 1, 1),
            fixed("Northern", 3, 1, subdivisions=frozenset({"N"})),
        ])
        assert _names(evaluate_rule_set(rule_set, 2024)) == ["National"]
        assert _names(evaluate_rule_set(rule_set, 2024, {"N"})) == ["National", "Northern"]
        assert _names(evaluate_rule_set(rule_set, 2024, {"S"})) == ["National"]

    def test_collisions_keep_table_order(self):
        """Different holidays on one date are kept in table order."""
        rule_set = make_rule_set([
            nth_weekday("First", 5, Weekday.MONDAY, -1, offset_days=-7),
            nth_weekday("Second", 5, Weekday.MONDAY, -1, offset_days=-7),
        ])
        holidays = evaluate_rule_set(rule_set, 2024)
        assert _dates(holidays) == [date(2024, 5, 20), date(2024, 5, 20)]
        assert _names(holidays) == ["First", "Second"]

    def test_identical_pairs_deduplicated(self):
        """Identical (date, name) pairs collapse to one entry."""
        rule_set = make_rule_set([
            fixed("Reformation Day", 10, 31, first_year=2017, last_year=2017),
            fixed("Reformation Day", 10, 31, subdivisions=frozenset({"N"})),
        ])
        holidays = evaluate_rule_set(rule_set, 2017, {"N"})
        assert len(holidays) == 1
        assert holidays[0].is_nationwide

    def test_february_29_rule_in_common_year(self):
        """A leap-day rule is silently absent in common years."""
        rule_set = make_rule_set([fixed("Leap Day", 2, 29)])
        assert evaluate_rule_set(rule_set, 2023) == []
        assert _dates(evaluate_rule_set(rule_set, 2024)) == [date(2024, 2, 29)]


# =============================================================================
# Ordinal Policies Across Years
# =============================================================================

class TestOrdinalPolicyAcrossYears:
    """Ordinal policies apply only to the year being evaluated."""

    LOGGER = "holidayengine.calendars.evaluation"

    @staticmethod
    def _tuesday_after_fifth_monday(policy: OrdinalPolicy):
        # July has five Mondays in 2023 and 2024, four in 2025
        return nth_weekday(
            "Fifth Monday Tuesday", 7, Weekday.MONDAY, 5,
            offset_days=1,
            ordinal_policy=policy,
        )

    def test_fail_rule_with_missing_neighbour_year(self):
        """A FAIL rule evaluates in 2024 although 2025 has no 5th Monday."""
        rule_set = make_rule_set([self._tuesday_after_fifth_monday(OrdinalPolicy.FAIL)])
        holidays = evaluate_rule_set(rule_set, 2024)
        assert _dates(holidays) == [date(2024, 7, 30)]

    def test_fail_rule_raises_for_queried_year(self):
        """A FAIL rule still raises when the queried year has no occurrence."""
        rule_set = make_rule_set([self._tuesday_after_fifth_monday(OrdinalPolicy.FAIL)])
        with pytest.raises(InvalidOrdinalError) as exc_info:
            evaluate_rule_set(rule_set, 2025)
        assert exc_info.value.details["year"] == 2025

    def test_skip_rule_does_not_warn_for_neighbour_year(self, caplog):
        """A SKIP rule logs nothing about a neighbouring year."""
        rule_set = make_rule_set([self._tuesday_after_fifth_monday(OrdinalPolicy.SKIP)])
        with caplog.at_level(logging.WARNING, logger=self.LOGGER):
            holidays = evaluate_rule_set(rule_set, 2024)
        assert _dates(holidays) == [date(2024, 7, 30)]
        assert caplog.records == []

    def test_skip_rule_warns_for_queried_year(self, caplog):
        """A SKIP rule warns once for the queried year it is skipped in."""
        rule_set = make_rule_set([self._tuesday_after_fifth_monday(OrdinalPolicy.SKIP)])
        with caplog.at_level(logging.WARNING, logger=self.LOGGER):
            assert evaluate_rule_set(rule_set, 2025) == []
        assert len(caplog.records) == 1
        assert "2025" in caplog.records[0].getMessage()

    def test_non_strict_evaluation(self):
        """Non-strict evaluation returns None instead of applying the policy."""
        rule = self._tuesday_after_fifth_monday(OrdinalPolicy.FAIL)
        assert evaluate_rule(rule, 2025, strict=False) is None
        assert evaluate_rule(rule, 2024, strict=False) == date(2024, 7, 30)


# =============================================================================
# Observed-Date Substitution
# =============================================================================

class TestSubstitution:
    """Tests for observed-date substitution."""

    def test_add_mode_keeps_actual(self):
        """ADD mode reports both the actual and the observed date."""
        rule_set = make_rule_set([fixed("Independence Day", 7, 4, substitution=SAT_TO_FRI_SUN_TO_MON)])
        # July 4, 2026 is a Saturday
        holidays = evaluate_rule_set(rule_set, 2026)
        assert _dates(holidays) == [date(2026, 7, 3), date(2026, 7, 4)]
        observed = holidays[0]
        assert observed.name == "Independence Day (Observed)"
        assert observed.category == HolidayCategory.OBSERVED
        assert observed.observed_from == date(2026, 7, 4)
        assert observed.source_category == HolidayCategory.PUBLIC

    def test_no_substitution_on_weekday(self):
        """Weekday holidays have no observed entry."""
        rule_set = make_rule_set([fixed("Independence Day", 7, 4, substitution=SAT_TO_FRI_SUN_TO_MON)])
        holidays = evaluate_rule_set(rule_set, 2024)
        assert _dates(holidays) == [date(2024, 7, 4)]

    def test_replace_mode_drops_actual(self):
        """REPLACE mode reports only the substitute date."""
        policy = SubstitutionPolicy(
            shifts={Weekday.SATURDAY: 2, Weekday.SUNDAY: 1},
            mode=SubstitutionMode.REPLACE,
        )
        rule_set = make_rule_set([fixed("Christmas Day", 12, 25, substitution=policy)])
        # December 25, 2022 is a Sunday
        holidays = evaluate_rule_set(rule_set, 2022)
        assert _dates(holidays) == [date(2022, 12, 26)]

    def test_roll_past_holidays(self):
        """Rolling substitution skips dates already taken by holidays."""
        rule_set = make_rule_set([
            fixed("Christmas Day", 12, 25, substitution=WEEKEND_TO_MONDAY),
            fixed("Boxing Day", 12, 26, substitution=WEEKEND_TO_MONDAY),
        ])
        # 2021: Christmas Saturday, Boxing Day Sunday
        holidays = evaluate_rule_set(rule_set, 2021)
        observed = {h.name: h.date for h in holidays if h.is_observed}
        assert observed == {
            "Christmas Day (Observed)": date(2021, 12, 27),
            "Boxing Day (Observed)": date(2021, 12, 28),
        }

    def test_roll_past_actual_holiday(self):
        """A Sunday holiday rolls past a Monday holiday to Tuesday."""
        rule_set = make_rule_set([
            fixed("Christmas Day", 12, 25, substitution=WEEKEND_TO_MONDAY),
            fixed("Boxing Day", 12, 26, substitution=WEEKEND_TO_MONDAY),
        ])
        # 2022: Christmas Sunday, Boxing Day Monday
        holidays = evaluate_rule_set(rule_set, 2022)
        assert _dates(holidays) == [date(2022, 12, 25), date(2022, 12, 26), date(2022, 12, 27)]

    def test_observed_date_in_previous_year(self):
        """Saturday January 1 is observed on December 31 of the prior year."""
        rule_set = make_rule_set([fixed("New Year's Day", 1, 1, substitution=SAT_TO_FRI_SUN_TO_MON)])
        # January 1, 2022 is a Saturday
        holidays_2021 = evaluate_rule_set(rule_set, 2021)
        holidays_2022 = evaluate_rule_set(rule_set, 2022)
        assert date(2021, 12, 31) in _dates(holidays_2021)
        assert _dates(holidays_2022) == [date(2022, 1, 1)]

    def test_localized_observed_names(self):
        """Observed entries carry the suffix in every language."""
        rule_set = make_rule_set([
            fixed(
                "Christmas Day", 12, 25,
                names={"en": "Christmas Day", "fr": "Noël"},
                substitution=SAT_TO_FRI_SUN_TO_MON,
            ),
        ])
        observed = [h for h in evaluate_rule_set(rule_set, 2022) if h.is_observed][0]
        assert observed.localized_name("fr") == "Noël (Observed)"


# =============================================================================
# Subdivision Collision
# =============================================================================

class TestSubdivisionCollision:
    """Tests for subdivision holidays sharing a date with nationwide ones."""

    RULES = [
        fixed("National Day", 6, 24),
        fixed("Regional Day", 6, 24, subdivisions=frozenset({"N"})),
    ]

    def test_separate_keeps_both(self):
        """SEPARATE reports both entries on the shared date."""
        rule_set = make_rule_set(self.RULES)
        assert _names(evaluate_rule_set(rule_set, 2024, {"N"})) == ["National Day", "Regional Day"]

    def test_merge_keeps_nationwide(self):
        """MERGE keeps only the nationwide entry on a shared date."""
        rule_set = make_rule_set(self.RULES, subdivision_collision=SubdivisionCollision.MERGE)
        assert _names(evaluate_rule_set(rule_set, 2024, {"N"})) == ["National Day"]
