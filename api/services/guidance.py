"""Map alignment quality to recommended actions."""

from __future__ import annotations

from typing import Dict, List

from ..i18n.hour_labels import (
    ENERGY_LEVELS,
    HOUR_GUIDANCE,
    PLANET_MEANINGS,
    PURPOSE_ADVICE,
    PURPOSE_TITLES,
    QUICK_ACTIONS,
    REST_DAY,
)
from ..i18n.resolve import clamp_lang, element_label, text_lang
from .alignment import ElementAlignment

PURPOSES = ["work", "prayer", "conversation", "learning", "finance", "relationships"]


def _energy_key(quality: str) -> str:
    return quality if quality in ("perfect", "strong", "moderate") else "rest"


def energy_level(quality: str, lang: str = "en") -> Dict[str, str]:
    level, description = ENERGY_LEVELS[text_lang(clamp_lang(lang))][_energy_key(quality)]
    return {"level": level, "description": description}


def quick_actions(quality: str, lang: str = "en") -> List[str]:
    return list(QUICK_ACTIONS[text_lang(clamp_lang(lang))][_energy_key(quality)])


def hour_guidance(quality: str, lang: str = "en") -> List[str]:
    if quality in ("perfect", "strong"):
        key = "active"
    elif quality == "moderate":
        key = "moderate"
    else:
        key = "rest"
    return list(HOUR_GUIDANCE[text_lang(clamp_lang(lang))][key])


def planet_meaning(planet: str, lang: str = "en") -> str:
    return PLANET_MEANINGS[text_lang(clamp_lang(lang))].get(planet, planet)


def _purpose_is_good(purpose: str, alignment: ElementAlignment) -> bool:
    good_time = alignment.quality in ("perfect", "strong")
    if purpose == "prayer":
        return True
    if purpose == "learning":
        return alignment.quality != "opposing"
    if purpose == "finance":
        return good_time and alignment.hour_element == "earth"
    if purpose == "relationships":
        return alignment.quality == "perfect" or alignment.hour_element == "water"
    return good_time


def purpose_guidance(purpose: str, alignment: ElementAlignment, lang: str = "en") -> Dict[str, object]:
    if purpose not in PURPOSES:
        raise ValueError(f"Unknown purpose: {purpose!r}")
    code = text_lang(clamp_lang(lang))
    good = _purpose_is_good(purpose, alignment)
    good_advice, other_advice = PURPOSE_ADVICE[code][purpose]
    return {
        "purpose": purpose,
        "title": PURPOSE_TITLES[code][purpose],
        "good": good,
        "advice": list(good_advice if good else other_advice),
    }


def rest_day_message(user_element: str, lang: str = "en") -> Dict[str, str]:
    code = text_lang(clamp_lang(lang))
    texts = REST_DAY[code]
    element = element_label(user_element, code)["display_name"]
    return {
        "title": texts["title"],
        "subtitle": texts["subtitle"],
        "body": texts["body"].format(element=element),
    }
