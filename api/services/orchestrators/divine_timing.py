"""Build the divine timing viewmodel.

Planetary days are cached per calendar date and rounded location; the cached
hours are immutable and ``is_current`` is re-evaluated on every read, so a
cached day stays valid until its date or location changes.
"""

from __future__ import annotations

import logging
import os
import time
from datetime import date as date_cls, datetime, timedelta, timezone
from typing import Any, Dict, Optional

from ...schemas.hours_viewmodel import (
    AlignmentVM,
    DaySummaryVM,
    DivineTimingViewModel,
    GuidanceVM,
    HeaderVM,
    HourVM,
    LabelledValue,
    LocationMeta,
    RestDayVM,
    SolarVM,
    WindowVM,
)
from ...i18n.resolve import clamp_lang, element_label, planet_label, quality_label
from ..alignment import align, day_alignment_summary, is_rest_day, normalize_element
from ..guidance import energy_level, planet_meaning, purpose_guidance, quick_actions, rest_day_message
from ..planetary_hours import (
    PlanetaryDay,
    PlanetaryHour,
    compute_day,
    compute_day_for_instant,
    refresh_current,
    resolve_current,
)
from ..planets import WEEKDAY_NAMES, weekday_index
from ..solar import SolarProvider
from ..time_window import compute_window
from ..util.place_defaults import Location, normalize_place


logger = logging.getLogger(__name__)


CACHE: Dict[str, tuple[float, PlanetaryDay]] = {}


def _ttl_seconds() -> int:
    return int(os.getenv("HOURS_CACHE_TTL_SECONDS", "3600"))


def _format_iso(dt: datetime) -> str:
    return dt.isoformat()


def _format_duration(delta: timedelta) -> str:
    seconds = int(delta.total_seconds())
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _resolve_date(date_str: Optional[str]) -> Optional[date_cls]:
    if not date_str:
        return None
    return datetime.fromisoformat(date_str).date()


def _build_cache_key(target_date: date_cls, location: Location) -> str:
    return f"hours:{target_date.isoformat()}:{location.latitude:.4f}:{location.longitude:.4f}:{location.tz}"


def _get_day(
    target_date: date_cls,
    location: Location,
    now: datetime,
    solar_provider: Optional[SolarProvider],
) -> PlanetaryDay:
    if solar_provider is not None:
        return compute_day(target_date, location.latitude, location.longitude, location.tz, now, solar_provider)

    key = _build_cache_key(target_date, location)
    cached = CACHE.get(key)
    stamp = time.time()
    if cached and cached[0] > stamp:
        return cached[1]

    day = compute_day(target_date, location.latitude, location.longitude, location.tz, now)
    CACHE[key] = (stamp + _ttl_seconds(), day)
    return day


def _day_for_instant(location: Location, now: datetime, solar_provider: Optional[SolarProvider]) -> PlanetaryDay:
    return compute_day_for_instant(
        now,
        location.latitude,
        location.longitude,
        location.tz,
        load_day=lambda target: _get_day(target, location, now, solar_provider),
    )


def _hour_vm(hour: PlanetaryHour, user_element: str, lang: str) -> HourVM:
    alignment = align(user_element, hour.planet.element)
    return HourVM(
        index=hour.index,
        planet=LabelledValue(**planet_label(hour.planet.name, lang)),
        element=LabelledValue(**element_label(hour.planet.element, lang)),
        start_ts=_format_iso(hour.start_time),
        end_ts=_format_iso(hour.end_time),
        duration_minutes=hour.duration_minutes,
        is_day_hour=hour.is_day_hour,
        is_current=hour.is_current,
        quality=alignment.quality,
        harmony_score=alignment.harmony_score,
    )


def _solar_vm(day: PlanetaryDay) -> SolarVM:
    if not day.is_accurate:
        return SolarVM()
    return SolarVM(
        sunrise=_format_iso(day.sunrise),
        sunset=_format_iso(day.sunset),
        next_sunrise=_format_iso(day.next_sunrise),
        day_length=_format_duration(day.day_length),
        night_length=_format_duration(day.night_length),
    )


def _build_notes(day: PlanetaryDay) -> list[str]:
    notes = ["Planetary day considered sunrise→next sunrise.", "Hours are ruled in Chaldean order."]
    if not day.is_accurate:
        notes.append("Solar times unavailable; showing uniform 60-minute hours.")
    return notes


def build_viewmodel(
    date_str: Optional[str],
    place: Optional[Dict[str, Any]],
    user_element: str,
    options: Optional[Dict[str, Any]] = None,
    now: Optional[datetime] = None,
    solar_provider: Optional[SolarProvider] = None,
) -> DivineTimingViewModel:
    opts = dict(options or {})
    lang = clamp_lang(opts.get("lang"))
    purpose = opts.get("purpose")
    element = normalize_element(user_element)
    moment = now or datetime.now(timezone.utc)

    location, flags = normalize_place(place)
    if flags["default_reason"]:
        logger.info(
            "hours.place.defaults",
            extra={
                "reason": flags["default_reason"],
                "lat": location.latitude,
                "lon": location.longitude,
                "tz": location.tz,
            },
        )

    target_date = _resolve_date(date_str)
    if target_date is None:
        day = _day_for_instant(location, moment, solar_provider)
    else:
        day = _get_day(target_date, location, moment, solar_provider)

    hours = refresh_current(day.hours, moment)
    current = resolve_current(hours)

    def _load_next_day() -> list[PlanetaryHour]:
        nxt = _get_day(day.date + timedelta(days=1), location, moment, solar_provider)
        return refresh_current(nxt.hours, moment)

    alignment_vm = None
    window_vm = None
    guidance_vm = None
    if current is not None:
        alignment = align(element, current.planet.element)
        alignment_vm = AlignmentVM(
            user_element=alignment.user_element,
            hour_element=alignment.hour_element,
            relation=alignment.relation,
            quality=alignment.quality,
            quality_label=quality_label(alignment.quality, lang),
            harmony_score=alignment.harmony_score,
        )
        window = compute_window(current, element, hours, moment, _load_next_day)
        window_vm = WindowVM(
            closes_in=window.closes_in,
            closes_in_minutes=window.closes_in_minutes,
            urgency=window.urgency,
            next_optimal_window=(
                _hour_vm(window.next_optimal_window, element, lang) if window.next_optimal_window else None
            ),
            next_window_in=window.next_window_in,
            next_window_in_minutes=window.next_window_in_minutes,
        )
        level = energy_level(alignment.quality, lang)
        guidance_vm = GuidanceVM(
            energy_level=level["level"],
            description=level["description"],
            planet_meaning=planet_meaning(current.planet.name, lang),
            quick_actions=quick_actions(alignment.quality, lang),
            purpose=purpose_guidance(purpose, alignment, lang) if purpose else None,
        )

    rest = is_rest_day(hours, element)
    header = HeaderVM(
        date_local=day.date.isoformat(),
        weekday=WEEKDAY_NAMES[weekday_index(day.date)],
        tz=location.tz,
        place_label=location.city_name,
        lat=location.latitude,
        lon=location.longitude,
        is_location_accurate=location.is_accurate,
        is_accurate=day.is_accurate,
        lang=lang,
        user_element=element,
        meta=LocationMeta(**flags),
    )

    return DivineTimingViewModel(
        status="ok" if current is not None else "unavailable",
        header=header,
        solar=_solar_vm(day),
        hours=[_hour_vm(hour, element, lang) for hour in hours],
        current_hour=_hour_vm(current, element, lang) if current else None,
        alignment=alignment_vm,
        window=window_vm,
        guidance=guidance_vm,
        rest_day=RestDayVM(is_rest_day=rest, message=rest_day_message(element, lang) if rest else None),
        summary=DaySummaryVM(**day_alignment_summary(hours, element)),
        notes=_build_notes(day),
    )
