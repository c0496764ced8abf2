"""
United Kingdom Holiday Rules

Bank holidays for England, Wales, Scotland and Northern Ireland.

Substitute days: a bank holiday falling on a weekend is moved to the
next weekday that is not already a bank holiday. The substitute day
replaces the weekend date (25/26 December on Saturday/Sunday become
Monday 27 and Tuesday 28 December).

Subdivision holidays that land on a UK-wide holiday are merged into the
UK-wide entry.
"""
from __future__ import annotations

from ..models import (
    LAST,
    HolidayCategory,
    HolidayRuleSet,
    SubdivisionCollision,
    SubstitutionMode,
    SubstitutionPolicy,
    Weekday,
    easter,
    fixed,
    nth_weekday,
)

BANK = HolidayCategory.BANK
PUBLIC = HolidayCategory.PUBLIC

GB_SUBDIVISIONS = frozenset({"ENG", "WLS", "SCT", "NIR"})

ENGLAND_WALES_NI = frozenset({"ENG", "WLS", "NIR"})

SUBSTITUTE_DAY = SubstitutionPolicy(
    shifts={Weekday.SATURDAY: 2, Weekday.SUNDAY: 1},
    mode=SubstitutionMode.REPLACE,
    roll_past_holidays=True,
    suffix=" (Substitute Day)",
)

GB_RULES = (
    fixed(
        "New Year's Day", 1, 1,
        category=BANK,
        names={"en": "New Year's Day", "cy": "Dydd Calan"},
        substitution=SUBSTITUTE_DAY,
    ),
    fixed(
        "2nd January", 1, 2,
        category=BANK,
        names={"en": "2nd January"},
        subdivisions=frozenset({"SCT"}),
        substitution=SUBSTITUTE_DAY,
    ),
    fixed(
        "St Patrick's Day", 3, 17,
        category=BANK,
        names={"en": "St Patrick's Day", "ga": "Lá Fhéile Pádraig"},
        subdivisions=frozenset({"NIR"}),
        substitution=SUBSTITUTE_DAY,
    ),
    easter(
        "Good Friday", -2,
        category=PUBLIC,
        names={"en": "Good Friday", "cy": "Dydd Gwener y Groglith"},
    ),
    easter(
        "Easter Monday", 1,
        category=BANK,
        names={"en": "Easter Monday", "cy": "Dydd Llun y Pasg"},
        subdivisions=ENGLAND_WALES_NI,
    ),
    nth_weekday(
        "Early May bank holiday", 5, Weekday.MONDAY, 1,
        category=BANK,
        names={"en": "Early May bank holiday"},
        first_year=1978,
    ),
    nth_weekday(
        "Spring bank holiday", 5, Weekday.MONDAY, LAST,
        category=BANK,
        names={"en": "Spring bank holiday"},
        first_year=1971,
    ),
    fixed(
        "Battle of the Boyne", 7, 12,
        category=BANK,
        names={"en": "Battle of the Boyne"},
        subdivisions=frozenset({"NIR"}),
        substitution=SUBSTITUTE_DAY,
    ),
    nth_weekday(
        "Summer bank holiday", 8, Weekday.MONDAY, 1,
        category=BANK,
        names={"en": "Summer bank holiday"},
        subdivisions=frozenset({"SCT"}),
    ),
    nth_weekday(
        "Summer bank holiday", 8, Weekday.MONDAY, LAST,
        category=BANK,
        names={"en": "Summer bank holiday"},
        subdivisions=ENGLAND_WALES_NI,
        first_year=1971,
    ),
    fixed(
        "St Andrew's Day", 11, 30,
        category=BANK,
        names={"en": "St Andrew's Day", "gd": "Latha Naomh Anndrais"},
        subdivisions=frozenset({"SCT"}),
        first_year=2007,
        substitution=SUBSTITUTE_DAY,
    ),
    fixed(
        "Christmas Day", 12, 25,
        category=PUBLIC,
        names={"en": "Christmas Day", "cy": "Dydd Nadolig"},
        substitution=SUBSTITUTE_DAY,
    ),
    fixed(
        "Boxing Day", 12, 26,
        category=BANK,
        names={"en": "Boxing Day", "cy": "Gŵyl San Steffan"},
        substitution=SUBSTITUTE_DAY,
    ),
)

GB_RULE_SET = HolidayRuleSet(
    code="GB",
    name="United Kingdom",
    rules=GB_RULES,
    subdivisions=GB_SUBDIVISIONS,
    categories=frozenset({BANK, PUBLIC}),
    subdivision_collision=SubdivisionCollision.MERGE,
)
