"""Element alignment between a user profile and a planetary hour."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .planetary_hours import PlanetaryHour
from .planets import ELEMENTS


QUALITY_ORDER = ["perfect", "strong", "moderate", "weak", "opposing"]
LOW_QUALITIES = {"weak", "opposing"}

# Tier and harmony score for every (user, hour) pair. The table is symmetric.
ALIGNMENT_TABLE: Dict[Tuple[str, str], Tuple[str, str, int]] = {
    ("fire", "fire"): ("same", "strong", 85),
    ("fire", "air"): ("complementary", "perfect", 95),
    ("fire", "earth"): ("neutral", "moderate", 60),
    ("fire", "water"): ("opposing", "opposing", 25),
    ("water", "water"): ("same", "strong", 85),
    ("water", "earth"): ("complementary", "perfect", 95),
    ("water", "air"): ("neutral", "moderate", 60),
    ("water", "fire"): ("opposing", "opposing", 25),
    ("air", "air"): ("same", "strong", 85),
    ("air", "fire"): ("complementary", "perfect", 95),
    ("air", "water"): ("neutral", "moderate", 60),
    ("air", "earth"): ("opposing", "opposing", 25),
    ("earth", "earth"): ("same", "strong", 85),
    ("earth", "water"): ("complementary", "perfect", 95),
    ("earth", "fire"): ("neutral", "moderate", 60),
    ("earth", "air"): ("opposing", "opposing", 25),
}

# Representative score per tier; ``weak`` never comes out of the table but is
# a valid tier for callers that grade their own pairs.
TIER_SCORES = {"perfect": 95, "strong": 85, "moderate": 60, "weak": 40, "opposing": 25}


@dataclass(frozen=True)
class ElementAlignment:
    user_element: str
    hour_element: str
    relation: str
    quality: str
    harmony_score: int


def normalize_element(element: str) -> str:
    value = (element or "").strip().lower()
    if value not in ELEMENTS:
        raise ValueError(f"Unknown element: {element!r}")
    return value


def align(user_element: str, hour_element: str) -> ElementAlignment:
    user = normalize_element(user_element)
    hour = normalize_element(hour_element)
    relation, quality, score = ALIGNMENT_TABLE[(user, hour)]
    return ElementAlignment(user, hour, relation, quality, score)


def quality_rank(quality: str) -> int:
    """Lower rank is better; ``perfect`` is 0."""

    return QUALITY_ORDER.index(quality)


def _rest_day_threshold() -> float:
    return float(os.getenv("REST_DAY_THRESHOLD", "0.7"))


def is_rest_day(hours: Sequence[PlanetaryHour], user_element: str, threshold: float | None = None) -> bool:
    """True when more than ``threshold`` of the hours align weak or opposing."""

    if not hours:
        return False
    limit = _rest_day_threshold() if threshold is None else threshold
    low = sum(1 for hour in hours if align(user_element, hour.planet.element).quality in LOW_QUALITIES)
    return low > len(hours) * limit


def day_alignment_summary(hours: Sequence[PlanetaryHour], user_element: str) -> Dict[str, object]:
    alignments = [align(user_element, hour.planet.element) for hour in hours]
    counts = Counter(a.quality for a in alignments)
    average = sum(a.harmony_score for a in alignments) / len(alignments) if alignments else 0.0
    return {
        "counts": {quality: counts.get(quality, 0) for quality in QUALITY_ORDER},
        "average_harmony": round(average, 1),
        "low_ratio": round(sum(counts[q] for q in LOW_QUALITIES) / len(alignments), 3) if alignments else 0.0,
    }
