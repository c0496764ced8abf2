"""
Canada Holiday Rules

Nationwide holidays:
- New Year's Day (January 1)
- Good Friday (Friday before Easter Sunday)
- Victoria Day (Monday before May 25)
- Canada Day (July 1)
- Labour Day (1st Monday in September)
- National Day for Truth and Reconciliation (September 30) - Since 2021
- Thanksgiving Day (2nd Monday in October)
- Remembrance Day (November 11)
- Christmas Day (December 25)
- Boxing Day (December 26)

Provincial holidays for Ontario, Quebec, British Columbia, Alberta,
Manitoba and Saskatchewan. British Columbia moved Family Day from the
2nd to the 3rd Monday of February in 2019.

Observed holidays: When a holiday falls on a weekend, the following
Monday is the observed day off. If that Monday is already a holiday
(Christmas/Boxing Day), the observed day moves to Tuesday.

Reference: Ontario Employment Standards Act, 2000
"""
from __future__ import annotations

from ..models import (
    LAST,
    WEEKEND_TO_MONDAY,
    HolidayCategory,
    HolidayRuleSet,
    Weekday,
    easter,
    fixed,
    nth_weekday,
)

PUBLIC = HolidayCategory.PUBLIC
GOVERNMENT = HolidayCategory.GOVERNMENT
OBSERVANCE = HolidayCategory.OBSERVANCE

CA_SUBDIVISIONS = frozenset({
    "AB", "BC", "MB", "NB", "NL", "NS", "NT", "NU", "ON", "PE", "QC", "SK", "YT",
})

CA_RULES = (
    fixed(
        "New Year's Day", 1, 1,
        names={"en": "New Year's Day", "fr": "Jour de l'An"},
        substitution=WEEKEND_TO_MONDAY,
    ),
    easter(
        "Good Friday", -2,
        names={"en": "Good Friday", "fr": "Vendredi saint"},
    ),
    # Monday before May 25: one week before the last Monday of May
    nth_weekday(
        "Victoria Day", 5, Weekday.MONDAY, LAST, offset_days=-7,
        names={"en": "Victoria Day", "fr": "Fête de la Reine"},
    ),
    fixed(
        "Canada Day", 7, 1,
        names={"en": "Canada Day", "fr": "Fête du Canada"},
        substitution=WEEKEND_TO_MONDAY,
    ),
    nth_weekday(
        "Labour Day", 9, Weekday.MONDAY, 1,
        names={"en": "Labour Day", "fr": "Fête du Travail"},
    ),
    fixed(
        "National Day for Truth and Reconciliation", 9, 30,
        category=GOVERNMENT,
        names={
            "en": "National Day for Truth and Reconciliation",
            "fr": "Journée nationale de la vérité et de la réconciliation",
        },
        first_year=2021,
    ),
    nth_weekday(
        "Thanksgiving Day", 10, Weekday.MONDAY, 2,
        names={"en": "Thanksgiving Day", "fr": "Action de grâce"},
    ),
    fixed(
        "Remembrance Day", 11, 11,
        category=GOVERNMENT,
        names={"en": "Remembrance Day", "fr": "Jour du Souvenir"},
    ),
    fixed(
        "Christmas Day", 12, 25,
        names={"en": "Christmas Day", "fr": "Noël"},
        substitution=WEEKEND_TO_MONDAY,
    ),
    fixed(
        "Boxing Day", 12, 26,
        names={"en": "Boxing Day", "fr": "Lendemain de Noël"},
        substitution=WEEKEND_TO_MONDAY,
    ),
    # Ontario
    nth_weekday(
        "Family Day", 2, Weekday.MONDAY, 3,
        names={"en": "Family Day", "fr": "Jour de la Famille"},
        subdivisions=frozenset({"ON"}),
        first_year=2008,
    ),
    nth_weekday(
        "Civic Holiday", 8, Weekday.MONDAY, 1,
        category=OBSERVANCE,
        names={"en": "Civic Holiday", "fr": "Congé civique"},
        subdivisions=frozenset({"ON"}),
    ),
    # Alberta
    nth_weekday(
        "Family Day", 2, Weekday.MONDAY, 3,
        names={"en": "Family Day", "fr": "Jour de la Famille"},
        subdivisions=frozenset({"AB"}),
        first_year=1990,
    ),
    # British Columbia
    nth_weekday(
        "Family Day", 2, Weekday.MONDAY, 2,
        names={"en": "Family Day", "fr": "Jour de la Famille"},
        subdivisions=frozenset({"BC"}),
        first_year=2013,
        last_year=2018,
    ),
    nth_weekday(
        "Family Day", 2, Weekday.MONDAY, 3,
        names={"en": "Family Day", "fr": "Jour de la Famille"},
        subdivisions=frozenset({"BC"}),
        first_year=2019,
    ),
    nth_weekday(
        "British Columbia Day", 8, Weekday.MONDAY, 1,
        names={"en": "British Columbia Day", "fr": "Jour de la Colombie-Britannique"},
        subdivisions=frozenset({"BC"}),
    ),
    # Manitoba
    nth_weekday(
        "Louis Riel Day", 2, Weekday.MONDAY, 3,
        names={"en": "Louis Riel Day", "fr": "Journée Louis Riel"},
        subdivisions=frozenset({"MB"}),
        first_year=2008,
    ),
    # Saskatchewan
    nth_weekday(
        "Saskatchewan Day", 8, Weekday.MONDAY, 1,
        names={"en": "Saskatchewan Day", "fr": "Fête de la Saskatchewan"},
        subdivisions=frozenset({"SK"}),
    ),
    # Quebec
    nth_weekday(
        "National Patriots' Day", 5, Weekday.MONDAY, LAST, offset_days=-7,
        names={"en": "National Patriots' Day", "fr": "Journée nationale des patriotes"},
        subdivisions=frozenset({"QC"}),
        first_year=2003,
    ),
    fixed(
        "Saint-Jean-Baptiste Day", 6, 24,
        names={"en": "Saint-Jean-Baptiste Day", "fr": "Fête nationale du Québec"},
        subdivisions=frozenset({"QC"}),
    ),
)

CA_RULE_SET = HolidayRuleSet(
    code="CA",
    name="Canada",
    rules=CA_RULES,
    subdivisions=CA_SUBDIVISIONS,
    categories=frozenset({PUBLIC, GOVERNMENT, OBSERVANCE}),
)
