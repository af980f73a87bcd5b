"""Sunrise and sunset lookup backed by the Swiss Ephemeris.

The planetary hour calculator needs two instants per civil day. This module
asks ``swe.rise_trans`` for the first rise after local midnight and the first
set after that rise, and hands back timezone-aware datetimes. A missing event,
as during polar day or night, is reported as ``None``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date as date_cls, datetime, time as time_cls, timedelta, timezone
from typing import Callable, Optional

from zoneinfo import ZoneInfo

import swisseph as swe


@dataclass(frozen=True)
class SolarTimes:
    sunrise: datetime
    sunset: datetime


SolarProvider = Callable[[date_cls, float, float, str], Optional[SolarTimes]]


def _ephemeris_flag() -> int:
    backend = os.getenv("EPHEMERIS_BACKEND", "moseph").strip().lower()
    return swe.FLG_SWIEPH if backend == "swieph" else swe.FLG_MOSEPH


def init_paths() -> None:
    """Point the Swiss Ephemeris at ``SE_EPHE_PATH`` when it exists."""

    path = os.getenv("SE_EPHE_PATH")
    if path and os.path.isdir(path):
        swe.set_ephe_path(path)


def _to_jd(moment: datetime) -> float:
    """Convert a timezone-aware datetime into Julian Day (UT)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment_utc = moment.astimezone(timezone.utc)
    return moment_utc.timestamp() / 86400.0 + 2440587.5


def _jd_to_datetime(jd: float) -> datetime:
    seconds = (jd - 2440587.5) * 86400.0
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _rise_or_set(
    search_from: datetime,
    rsmi: int,
    lat: float,
    lon: float,
    elevation: float = 0.0,
) -> Optional[datetime]:
    jd_start = _to_jd(search_from)
    geopos = (lon, lat, elevation)
    try:
        result, times = swe.rise_trans(
            jd_start, swe.SUN, rsmi | swe.BIT_DISC_CENTER, geopos, 0.0, 0.0, _ephemeris_flag()
        )
    except swe.Error:
        return None
    if result < 0 or not times or times[0] <= 0:
        return None
    event = _jd_to_datetime(times[0])
    # rise_trans searches forward without bound; nothing within a day of the
    # search start means the event does not happen (polar day or night).
    if event - search_from >= timedelta(days=1):
        return None
    return event.astimezone(search_from.tzinfo or timezone.utc)


def get_solar_times(
    day: date_cls, latitude: float, longitude: float, tz: str = "UTC"
) -> Optional[SolarTimes]:
    """Return sunrise and sunset for ``day`` at the location, or ``None``."""

    start_of_day = datetime.combine(day, time_cls(0, 0), tzinfo=ZoneInfo(tz))
    sunrise = _rise_or_set(start_of_day, swe.CALC_RISE, latitude, longitude)
    if sunrise is None:
        return None
    # Sunset can fall after local midnight at high latitudes; searching from
    # midnight would return the previous evening.
    sunset = _rise_or_set(sunrise, swe.CALC_SET, latitude, longitude)
    if sunset is None:
        return None
    return SolarTimes(sunrise=sunrise, sunset=sunset)
