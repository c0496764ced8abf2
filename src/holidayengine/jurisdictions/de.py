"""
Germany Holiday Rules

Nationwide: Neujahr, Karfreitag, Ostermontag, Tag der Arbeit, Christi
Himmelfahrt, Pfingstmontag, Tag der Deutschen Einheit (since 1990),
1. and 2. Weihnachtstag.

Länder holidays: Heilige Drei Könige, Internationaler Frauentag,
Fronleichnam, Mariä Himmelfahrt, Weltkindertag, Reformationstag,
Allerheiligen. Reformationstag was a one-off nationwide holiday in 2017
(500th anniversary of the Reformation).

Germany does not move holidays that fall on a weekend.
"""
from __future__ import annotations

from ..models import HolidayCategory, HolidayRuleSet, easter, fixed

PUBLIC = HolidayCategory.PUBLIC
RELIGIOUS = HolidayCategory.RELIGIOUS

DE_SUBDIVISIONS = frozenset({
    "BB", "BE", "BW", "BY", "HB", "HE", "HH", "MV",
    "NI", "NW", "RP", "SH", "SL", "SN", "ST", "TH",
})

REFORMATION_DAY = {"de": "Reformationstag", "en": "Reformation Day"}

DE_RULES = (
    fixed("Neujahr", 1, 1, names={"de": "Neujahr", "en": "New Year's Day"}),
    fixed(
        "Heilige Drei Könige", 1, 6,
        category=RELIGIOUS,
        names={"de": "Heilige Drei Könige", "en": "Epiphany"},
        subdivisions=frozenset({"BW", "BY", "ST"}),
    ),
    fixed(
        "Internationaler Frauentag", 3, 8,
        names={"de": "Internationaler Frauentag", "en": "International Women's Day"},
        subdivisions=frozenset({"BE"}),
        first_year=2019,
    ),
    fixed(
        "Internationaler Frauentag", 3, 8,
        names={"de": "Internationaler Frauentag", "en": "International Women's Day"},
        subdivisions=frozenset({"MV"}),
        first_year=2023,
    ),
    easter(
        "Karfreitag", -2,
        category=RELIGIOUS,
        names={"de": "Karfreitag", "en": "Good Friday"},
    ),
    easter(
        "Ostermontag", 1,
        category=RELIGIOUS,
        names={"de": "Ostermontag", "en": "Easter Monday"},
    ),
    fixed("Tag der Arbeit", 5, 1, names={"de": "Tag der Arbeit", "en": "Labour Day"}),
    easter(
        "Christi Himmelfahrt", 39,
        category=RELIGIOUS,
        names={"de": "Christi Himmelfahrt", "en": "Ascension Day"},
    ),
    easter(
        "Pfingstmontag", 50,
        category=RELIGIOUS,
        names={"de": "Pfingstmontag", "en": "Whit Monday"},
    ),
    easter(
        "Fronleichnam", 60,
        category=RELIGIOUS,
        names={"de": "Fronleichnam", "en": "Corpus Christi"},
        subdivisions=frozenset({"BW", "BY", "HE", "NW", "RP", "SL"}),
    ),
    fixed(
        "Mariä Himmelfahrt", 8, 15,
        category=RELIGIOUS,
        names={"de": "Mariä Himmelfahrt", "en": "Assumption Day"},
        subdivisions=frozenset({"SL"}),
    ),
    fixed(
        "Weltkindertag", 9, 20,
        names={"de": "Weltkindertag", "en": "World Children's Day"},
        subdivisions=frozenset({"TH"}),
        first_year=2019,
    ),
    fixed(
        "Tag der Deutschen Einheit", 10, 3,
        names={"de": "Tag der Deutschen Einheit", "en": "German Unity Day"},
        first_year=1990,
    ),
    fixed(
        "Reformationstag", 10, 31,
        category=RELIGIOUS,
        names=REFORMATION_DAY,
        first_year=2017,
        last_year=2017,
    ),
    fixed(
        "Reformationstag", 10, 31,
        category=RELIGIOUS,
        names=REFORMATION_DAY,
        subdivisions=frozenset({"BB", "MV", "SN", "ST", "TH"}),
        first_year=1990,
    ),
    fixed(
        "Reformationstag", 10, 31,
        category=RELIGIOUS,
        names=REFORMATION_DAY,
        subdivisions=frozenset({"HB", "HH", "NI", "SH"}),
        first_year=2018,
    ),
    fixed(
        "Allerheiligen", 11, 1,
        category=RELIGIOUS,
        names={"de": "Allerheiligen", "en": "All Saints' Day"},
        subdivisions=frozenset({"BW", "BY", "NW", "RP", "SL"}),
    ),
    fixed(
        "1. Weihnachtstag", 12, 25,
        category=RELIGIOUS,
        names={"de": "1. Weihnachtstag", "en": "Christmas Day"},
    ),
    fixed(
        "2. Weihnachtstag", 12, 26,
        category=RELIGIOUS,
        names={"de": "2. Weihnachtstag", "en": "Boxing Day"},
    ),
)

DE_RULE_SET = HolidayRuleSet(
    code="DE",
    name="Germany",
    rules=DE_RULES,
    subdivisions=DE_SUBDIVISIONS,
    categories=frozenset({PUBLIC, RELIGIOUS}),
    default_language="de",
)
