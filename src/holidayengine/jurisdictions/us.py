"""
United States Holiday Rules

Federal holidays:
- New Year's Day (January 1)
- Martin Luther King Jr. Day (3rd Monday in January) - Since 1983
- Presidents' Day (3rd Monday in February)
- Memorial Day (Last Monday in May)
- Juneteenth (June 19) - Since 2021
- Independence Day (July 4)
- Labor Day (1st Monday in September)
- Columbus Day (2nd Monday in October)
- Veterans Day (November 11)
- Thanksgiving Day (4th Thursday in November)
- Christmas Day (December 25)

State holidays: California (Cesar Chavez Day), Texas (Texas Independence
Day), Massachusetts (Patriots' Day).

Observed holidays: When a fixed-date holiday falls on Saturday, it's
observed on Friday. When it falls on Sunday, it's observed on Monday.
Both the actual and the observed date are reported.
"""
from __future__ import annotations

from ..models import (
    LAST,
    SAT_TO_FRI_SUN_TO_MON,
    HolidayCategory,
    HolidayRuleSet,
    Weekday,
    fixed,
    nth_weekday,
)

FEDERAL = HolidayCategory.FEDERAL
STATE = HolidayCategory.STATE

US_SUBDIVISIONS = frozenset({
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC", "AS", "GU", "MP", "PR", "VI",
})

US_RULES = (
    # Fixed date holidays
    fixed(
        "New Year's Day", 1, 1,
        category=FEDERAL,
        names={"en": "New Year's Day", "es": "Año Nuevo"},
        substitution=SAT_TO_FRI_SUN_TO_MON,
    ),
    fixed(
        "Juneteenth", 6, 19,
        category=FEDERAL,
        names={"en": "Juneteenth", "es": "Juneteenth"},
        first_year=2021,
        substitution=SAT_TO_FRI_SUN_TO_MON,
    ),
    fixed(
        "Independence Day", 7, 4,
        category=FEDERAL,
        names={"en": "Independence Day", "es": "Día de la Independencia"},
        substitution=SAT_TO_FRI_SUN_TO_MON,
    ),
    fixed(
        "Veterans Day", 11, 11,
        category=FEDERAL,
        names={"en": "Veterans Day", "es": "Día de los Veteranos"},
        substitution=SAT_TO_FRI_SUN_TO_MON,
    ),
    fixed(
        "Christmas Day", 12, 25,
        category=FEDERAL,
        names={"en": "Christmas Day", "es": "Navidad"},
        substitution=SAT_TO_FRI_SUN_TO_MON,
    ),
    # Variable date holidays
    nth_weekday(
        "Martin Luther King Jr. Day", 1, Weekday.MONDAY, 3,
        category=FEDERAL,
        names={"en": "Martin Luther King Jr. Day", "es": "Día de Martin Luther King Jr."},
        first_year=1983,
    ),
    nth_weekday(
        "Presidents' Day", 2, Weekday.MONDAY, 3,
        category=FEDERAL,
        names={"en": "Presidents' Day", "es": "Día de los Presidentes"},
    ),
    nth_weekday(
        "Memorial Day", 5, Weekday.MONDAY, LAST,
        category=FEDERAL,
        names={"en": "Memorial Day", "es": "Día de los Caídos"},
    ),
    nth_weekday(
        "Labor Day", 9, Weekday.MONDAY, 1,
        category=FEDERAL,
        names={"en": "Labor Day", "es": "Día del Trabajo"},
    ),
    nth_weekday(
        "Columbus Day", 10, Weekday.MONDAY, 2,
        category=FEDERAL,
        names={"en": "Columbus Day", "es": "Día de Colón"},
    ),
    nth_weekday(
        "Thanksgiving Day", 11, Weekday.THURSDAY, 4,
        category=FEDERAL,
        names={"en": "Thanksgiving Day", "es": "Día de Acción de Gracias"},
    ),
    # State holidays
    fixed(
        "Texas Independence Day", 3, 2,
        category=STATE,
        names={"en": "Texas Independence Day", "es": "Día de la Independencia de Texas"},
        subdivisions=frozenset({"TX"}),
    ),
    fixed(
        "Cesar Chavez Day", 3, 31,
        category=STATE,
        names={"en": "Cesar Chavez Day", "es": "Día de César Chávez"},
        subdivisions=frozenset({"CA"}),
    ),
    nth_weekday(
        "Patriots' Day", 4, Weekday.MONDAY, 3,
        category=STATE,
        names={"en": "Patriots' Day"},
        subdivisions=frozenset({"MA"}),
    ),
)

US_RULE_SET = HolidayRuleSet(
    code="US",
    name="United States",
    rules=US_RULES,
    subdivisions=US_SUBDIVISIONS,
    categories=frozenset({
        HolidayCategory.FEDERAL,
        HolidayCategory.STATE,
        HolidayCategory.RELIGIOUS,
        HolidayCategory.OBSERVANCE,
    }),
)
