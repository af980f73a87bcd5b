"""Classical planet tables used by the planetary hour calculator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_cls
from typing import Dict, List


ELEMENTS = ("fire", "water", "air", "earth")


@dataclass(frozen=True)
class PlanetInfo:
    name: str
    element: str
    name_arabic: str
    element_arabic: str


PLANET_INFO: Dict[str, PlanetInfo] = {
    "Sun": PlanetInfo("Sun", "fire", "الشمس", "نار"),
    "Moon": PlanetInfo("Moon", "water", "القمر", "ماء"),
    "Mars": PlanetInfo("Mars", "fire", "المريخ", "نار"),
    "Mercury": PlanetInfo("Mercury", "air", "عطارد", "هواء"),
    "Jupiter": PlanetInfo("Jupiter", "air", "المشتري", "هواء"),
    "Venus": PlanetInfo("Venus", "earth", "الزهرة", "تراب"),
    "Saturn": PlanetInfo("Saturn", "earth", "زحل", "تراب"),
}

CHALDEAN_ORDER = ["Saturn", "Jupiter", "Mars", "Sun", "Venus", "Mercury", "Moon"]

# Sunday = 0 ... Saturday = 6
WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

WEEKDAY_RULERS = {
    "Sunday": "Sun",
    "Monday": "Moon",
    "Tuesday": "Mars",
    "Wednesday": "Mercury",
    "Thursday": "Jupiter",
    "Friday": "Venus",
    "Saturday": "Saturn",
}


def _rotation(ruler: str) -> List[str]:
    start_offset = CHALDEAN_ORDER.index(ruler)
    order = CHALDEAN_ORDER[start_offset:] + CHALDEAN_ORDER[:start_offset]
    return [order[idx % len(order)] for idx in range(24)]


# Entries 0-11 rule the day hours, 12-23 the night hours.
PLANETARY_SEQUENCES: Dict[int, List[str]] = {
    dow: _rotation(WEEKDAY_RULERS[name]) for dow, name in enumerate(WEEKDAY_NAMES)
}


def weekday_index(day: date_cls) -> int:
    """Return the weekday with Sunday as 0."""

    return (day.weekday() + 1) % 7


def sequence_for(day: date_cls) -> List[str]:
    return PLANETARY_SEQUENCES[weekday_index(day)]


def planet_element(name: str) -> str:
    return PLANET_INFO[name].element
