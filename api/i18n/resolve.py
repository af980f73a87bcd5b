"""Resolve planet, element and quality labels for a requested language."""

from __future__ import annotations

from typing import Dict, Mapping

from .hour_labels import ELEMENT_NAMES, PLANET_NAMES, QUALITY_LABELS

SUPPORTED_LANGS = {"en", "fr", "ar"}


def clamp_lang(lang: str | None) -> str:
    if not lang:
        return "en"
    lang = lang.lower()
    return lang if lang in SUPPORTED_LANGS else "en"


def text_lang(lang: str) -> str:
    """Guidance text is only written in English and French."""

    return "fr" if lang == "fr" else "en"


def _pick(table: Mapping[str, Mapping[str, str]], key: str, lang: str) -> Dict[str, Dict[str, str] | str]:
    aliases = {code: names[key] for code, names in table.items() if key in names}
    label = aliases.get(lang) or aliases.get("en") or key
    return {"display_name": label, "aliases": aliases}


def planet_label(name: str, lang: str) -> Dict[str, Dict[str, str] | str]:
    return _pick(PLANET_NAMES, name, clamp_lang(lang))


def element_label(element: str, lang: str) -> Dict[str, Dict[str, str] | str]:
    return _pick(ELEMENT_NAMES, element, clamp_lang(lang))


def quality_label(quality: str, lang: str) -> str:
    return QUALITY_LABELS[text_lang(clamp_lang(lang))].get(quality, quality)
