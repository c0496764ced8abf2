"""
Rule Evaluation

Turns a HolidayRuleSet into concrete Holiday occurrences for one year.

Evaluation steps for (year, subdivision filter):
  1. Drop rules outside their validity window.
  2. Drop subdivision-scoped rules that do not match the filter
     (empty filter = nationwide rules only).
  3. Evaluate each surviving rule to one date.
  4. Apply observed-date substitution (add or replace, per policy).
  5. De-duplicate identical (date, name) pairs; keep other collisions.

Rules that can land outside their own year (observed shifts, offsets)
are also evaluated for the neighbouring years, so an observed date on
31 December is reported in the year it falls in.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from ..exceptions import InvalidOrdinalError, RuleEvaluationError
from ..models import (
    Holiday,
    HolidayCategory,
    HolidayRule,
    HolidayRuleSet,
    OrdinalPolicy,
    RuleKind,
    SubdivisionCollision,
)
from .arithmetic import easter_sunday, is_leap_year, nth_weekday_of_month

logger = logging.getLogger(__name__)

# Upper bound on days a substitution may roll past existing holidays
_MAX_ROLL_DAYS = 31


# =============================================================================
# Per-kind evaluators
# =============================================================================

def _evaluate_fixed(rule: HolidayRule, year: int, strict: bool) -> Optional[date]:
    if rule.month == 2 and rule.day == 29 and not is_leap_year(year):
        logger.debug("Rule '%s' has no February 29 in %d", rule.name, year)
        return None
    return date(year, rule.month, rule.day)


def _evaluate_nth_weekday(rule: HolidayRule, year: int, strict: bool) -> Optional[date]:
    try:
        base = nth_weekday_of_month(year, rule.month, rule.weekday, rule.ordinal)
    except InvalidOrdinalError as e:
        if not strict:
            return None
        if rule.ordinal_policy == OrdinalPolicy.FAIL:
            raise InvalidOrdinalError(
                message=f"Rule '{rule.name}' has no occurrence in {year}: {e.message}",
                details={"rule": rule.name, "year": year, **e.details},
            ) from e
        logger.warning("Skipping rule '%s' for %d: %s", rule.name, year, e.message)
        return None
    return base + timedelta(days=rule.offset_days)


def _evaluate_easter(rule: HolidayRule, year: int, strict: bool) -> Optional[date]:
    return easter_sunday(year) + timedelta(days=rule.offset_days)


_EVALUATORS: dict[RuleKind, Callable[[HolidayRule, int, bool], Optional[date]]] = {
    RuleKind.FIXED: _evaluate_fixed,
    RuleKind.NTH_WEEKDAY: _evaluate_nth_weekday,
    RuleKind.EASTER: _evaluate_easter,
}


def evaluate_rule(rule: HolidayRule, year: int, strict: bool = True) -> Optional[date]:
    """
    Evaluate a rule to its date in a year.

    Validity windows are NOT checked here; see evaluate_rule_set().

    Args:
        rule: Rule to evaluate
        year: Year of the occurrence
        strict: Apply the rule's ordinal policy. When False a missing
            ordinal quietly yields None (used for neighbouring years).

    Returns:
        The date, or None if the rule has no occurrence that year
        (February 29 in a common year, skipped ordinal)

    Raises:
        InvalidOrdinalError: FAIL-policy rule with a missing ordinal
        RuleEvaluationError: No evaluator for the rule kind
    """
    evaluator = _EVALUATORS.get(rule.kind)
    if evaluator is None:
        raise RuleEvaluationError(
            message=f"No evaluator for rule kind '{rule.kind}'",
            details={"rule": rule.name, "kind": str(rule.kind)},
        )
    return evaluator(rule, year, strict)


def _may_leave_year(rule: HolidayRule) -> bool:
    """Check if a rule's occurrence can fall outside the rule's year."""
    return rule.substitution is not None or rule.offset_days != 0


# =============================================================================
# Rule set evaluation
# =============================================================================

def _observed_holiday(rule: HolidayRule, actual: date, observed: date) -> Holiday:
    suffix = rule.substitution.suffix
    return Holiday(
        date=observed,
        name=f"{rule.name}{suffix}",
        category=HolidayCategory.OBSERVED,
        names={lang: f"{name}{suffix}" for lang, name in rule.names.items()},
        subdivisions=rule.subdivisions,
        observed_from=actual,
        source_category=rule.category,
    )


def _primary_holiday(rule: HolidayRule, actual: date) -> Holiday:
    return Holiday(
        date=actual,
        name=rule.name,
        category=rule.category,
        names=rule.names,
        subdivisions=rule.subdivisions,
    )


def _substitute_date(rule: HolidayRule, actual: date, occupied: set[date]) -> Optional[date]:
    """Apply a rule's substitution policy to its actual date."""
    policy = rule.substitution
    if policy is None:
        return None
    shift = policy.shift_for(actual.weekday())
    if shift is None:
        return None

    target = actual + timedelta(days=shift)
    if policy.roll_past_holidays:
        step = timedelta(days=1 if shift > 0 else -1)
        for _ in range(_MAX_ROLL_DAYS):
            if target not in occupied and policy.shift_for(target.weekday()) is None:
                break
            target += step
        else:
            raise RuleEvaluationError(
                message=f"Could not place observed date for '{rule.name}' ({actual})",
                details={"rule": rule.name, "date": actual.isoformat()},
            )
    return target


def evaluate_rule_set(
    rule_set: HolidayRuleSet,
    year: int,
    subdivisions: Iterable[str] = (),
) -> list[Holiday]:
    """
    Evaluate a rule set for a year.

    Args:
        rule_set: Jurisdiction rule table
        year: Year to evaluate
        subdivisions: Subdivision filter (already validated, upper-case);
            empty = nationwide holidays only

    Returns:
        Holidays dated in `year`, ordered by date. Entries sharing a date
        keep rule-table order, actual dates before observed dates.
    """
    scope = frozenset(subdivisions)

    # Steps 1-3: evaluate surviving rules, including neighbour years
    occurrences: list[tuple[HolidayRule, date]] = []
    for rule_year in (year - 1, year, year + 1):
        for rule in rule_set.rules:
            if rule_year != year and not _may_leave_year(rule):
                continue
            if not rule.active_in(rule_year) or not rule.applies_to(scope):
                continue
            # Ordinal policies apply to the queried year only
            actual = evaluate_rule(rule, rule_year, strict=rule_year == year)
            if actual is not None:
                occurrences.append((rule, actual))

    # Step 4: substitution
    occupied = {actual for _, actual in occurrences}
    entries: list[Holiday] = []
    observed_entries: list[Holiday] = []
    for rule, actual in occurrences:
        observed = _substitute_date(rule, actual, occupied)
        if observed is None:
            entries.append(_primary_holiday(rule, actual))
            continue
        occupied.add(observed)
        observed_entries.append(_observed_holiday(rule, actual, observed))
        if not rule.substitution.replaces_original:
            entries.append(_primary_holiday(rule, actual))

    entries.extend(observed_entries)

    # Step 5: de-duplicate (date, name), keep year, stable order by date
    seen: set[tuple[date, str]] = set()
    result: list[Holiday] = []
    for holiday in entries:
        key = (holiday.date, holiday.name)
        if holiday.date.year != year or key in seen:
            continue
        seen.add(key)
        result.append(holiday)

    if scope and rule_set.subdivision_collision == SubdivisionCollision.MERGE:
        nationwide_dates = {h.date for h in result if h.is_nationwide}
        result = [
            h for h in result
            if h.is_nationwide or h.date not in nationwide_dates
        ]

    result.sort(key=lambda h: h.date)

    logger.debug(
        "Evaluated %d holidays for %s %d (subdivisions=%s)",
        len(result), rule_set.code, year, sorted(scope),
    )
    return result
