"""Planetary hour calculation.

The day from sunrise to sunset and the night from sunset to the next sunrise
are each divided into twelve equal "hours". Hours are ruled in Chaldean order
starting from the planet that rules the weekday. When the solar provider cannot
supply usable times the calculator falls back to 24 uniform sixty minute hours
starting at a configurable local hour.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import date as date_cls, datetime, time as time_cls, timedelta, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from zoneinfo import ZoneInfo

from .planets import PLANET_INFO, PlanetInfo, sequence_for
from .solar import SolarProvider, get_solar_times
from .util.place_defaults import resolve_tz, validate_lat_lon


logger = logging.getLogger(__name__)


def _utc(moment: datetime) -> datetime:
    # Aware datetimes sharing a tzinfo compare by wall clock; normalise first.
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class PlanetaryHour:
    planet: PlanetInfo
    start_time: datetime
    end_time: datetime
    is_day_hour: bool
    is_current: bool
    index: int

    @property
    def duration(self) -> timedelta:
        return _utc(self.end_time) - _utc(self.start_time)

    @property
    def duration_minutes(self) -> int:
        return round(self.duration.total_seconds() / 60)

    def contains(self, moment: datetime) -> bool:
        instant = _utc(moment)
        return _utc(self.start_time) <= instant < _utc(self.end_time)


@dataclass(frozen=True)
class PlanetaryDay:
    date: date_cls
    latitude: float
    longitude: float
    tz: str
    hours: Tuple[PlanetaryHour, ...]
    is_accurate: bool
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    next_sunrise: Optional[datetime] = None

    @property
    def start(self) -> datetime:
        return self.hours[0].start_time

    @property
    def end(self) -> datetime:
        return self.hours[-1].end_time

    @property
    def day_length(self) -> timedelta:
        return _utc(self.hours[11].end_time) - _utc(self.start)

    @property
    def night_length(self) -> timedelta:
        return _utc(self.end) - _utc(self.hours[12].start_time)

    def covers(self, moment: datetime) -> bool:
        instant = _utc(moment)
        return _utc(self.start) <= instant < _utc(self.end)


def _fallback_start_hour() -> int:
    return int(os.getenv("FALLBACK_START_HOUR", "6"))


def _now_utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(timezone.utc)


def _split(start: datetime, end: datetime) -> List[Tuple[datetime, datetime]]:
    """Divide ``[start, end)`` into twelve equal, exactly contiguous spans."""

    length = end - start
    bounds = [start + length * k / 12 for k in range(13)]
    return list(zip(bounds[:-1], bounds[1:]))


def _build(
    spans: Sequence[Tuple[datetime, datetime]],
    sequence: Sequence[str],
    tz: ZoneInfo,
    now_utc: datetime,
) -> Tuple[PlanetaryHour, ...]:
    hours = []
    for idx, (start, end) in enumerate(spans):
        hours.append(
            PlanetaryHour(
                planet=PLANET_INFO[sequence[idx]],
                start_time=start.astimezone(tz),
                end_time=end.astimezone(tz),
                is_day_hour=idx < 12,
                is_current=start <= now_utc < end,
                index=idx,
            )
        )
    return tuple(hours)


def generate_fallback_hours(
    target_date: date_cls,
    tz: str = "UTC",
    now: Optional[datetime] = None,
    start_hour: Optional[int] = None,
) -> List[PlanetaryHour]:
    """Return 24 uniform sixty minute hours starting at ``start_hour`` local time."""

    zone = ZoneInfo(tz)
    hour = _fallback_start_hour() if start_hour is None else start_hour
    start = datetime.combine(target_date, time_cls(hour, 0), tzinfo=zone).astimezone(timezone.utc)
    spans = [(start + timedelta(hours=i), start + timedelta(hours=i + 1)) for i in range(24)]
    return list(_build(spans, sequence_for(target_date), zone, _now_utc(now)))


def _valid(moment: Optional[datetime]) -> bool:
    return isinstance(moment, datetime) and moment.tzinfo is not None


def compute_day(
    target_date: date_cls,
    latitude: float,
    longitude: float,
    tz: Optional[str] = None,
    now: Optional[datetime] = None,
    solar_provider: Optional[SolarProvider] = None,
) -> PlanetaryDay:
    """Compute the 24 planetary hours of ``target_date`` at the location.

    Without ``tz`` the zone is inferred from the coordinates, so the civil day
    searched for sunrise is the local one.
    """

    lat, lon = validate_lat_lon(latitude, longitude)
    tz = resolve_tz(lat, lon, tz)
    zone = ZoneInfo(tz)
    now_utc = _now_utc(now)
    provider = solar_provider or get_solar_times

    today = provider(target_date, lat, lon, tz)
    tomorrow = provider(target_date + timedelta(days=1), lat, lon, tz)

    sunrise = today.sunrise if today else None
    sunset = today.sunset if today else None
    next_sunrise = tomorrow.sunrise if tomorrow else None

    if not (_valid(sunrise) and _valid(sunset) and _valid(next_sunrise)):
        return _fallback_day(target_date, lat, lon, tz, now_utc, "missing_solar_times")

    sunrise_utc = sunrise.astimezone(timezone.utc)
    sunset_utc = sunset.astimezone(timezone.utc)
    next_sunrise_utc = next_sunrise.astimezone(timezone.utc)
    if sunset_utc <= sunrise_utc or next_sunrise_utc <= sunset_utc:
        return _fallback_day(target_date, lat, lon, tz, now_utc, "non_positive_duration")

    spans = _split(sunrise_utc, sunset_utc) + _split(sunset_utc, next_sunrise_utc)
    hours = _build(spans, sequence_for(target_date), zone, now_utc)
    return PlanetaryDay(
        date=target_date,
        latitude=lat,
        longitude=lon,
        tz=tz,
        hours=hours,
        is_accurate=True,
        sunrise=sunrise_utc.astimezone(zone),
        sunset=sunset_utc.astimezone(zone),
        next_sunrise=next_sunrise_utc.astimezone(zone),
    )


def _fallback_day(
    target_date: date_cls, lat: float, lon: float, tz: str, now_utc: datetime, reason: str
) -> PlanetaryDay:
    logger.warning(
        "hours.fallback",
        extra={"reason": reason, "date": target_date.isoformat(), "lat": lat, "lon": lon, "tz": tz},
    )
    hours = generate_fallback_hours(target_date, tz, now_utc)
    return PlanetaryDay(
        date=target_date,
        latitude=lat,
        longitude=lon,
        tz=tz,
        hours=tuple(hours),
        is_accurate=False,
    )


def compute_hours(
    target_date: date_cls,
    latitude: float,
    longitude: float,
    tz: Optional[str] = None,
    now: Optional[datetime] = None,
    solar_provider: Optional[SolarProvider] = None,
) -> List[PlanetaryHour]:
    """Return the 24 hours of ``target_date``, chronological."""

    return list(compute_day(target_date, latitude, longitude, tz, now, solar_provider).hours)


def compute_day_for_instant(
    now: datetime,
    latitude: float,
    longitude: float,
    tz: Optional[str] = None,
    solar_provider: Optional[SolarProvider] = None,
    load_day: Optional[Callable[[date_cls], PlanetaryDay]] = None,
) -> PlanetaryDay:
    """Return the planetary day whose hours contain ``now``.

    Between local midnight and sunrise the active hours still belong to the
    previous date's night, so that day is returned instead. ``load_day`` lets
    callers serve days from a cache; it defaults to ``compute_day``.
    """

    moment = _now_utc(now)
    lat, lon = validate_lat_lon(latitude, longitude)
    tz = resolve_tz(lat, lon, tz)
    loader = load_day or (lambda day: compute_day(day, lat, lon, tz, moment, solar_provider))

    local_date = moment.astimezone(ZoneInfo(tz)).date()
    day = loader(local_date)
    if moment < _utc(day.start):
        day = loader(local_date - timedelta(days=1))
    return day


def refresh_current(hours: Sequence[PlanetaryHour], now: Optional[datetime] = None) -> List[PlanetaryHour]:
    """Re-evaluate ``is_current`` against ``now``."""

    moment = _now_utc(now)
    return [replace(hour, is_current=hour.contains(moment)) for hour in hours]


def resolve_current(hours: Sequence[PlanetaryHour]) -> Optional[PlanetaryHour]:
    """Return the hour flagged current, or ``None`` when none matches."""

    for hour in hours:
        if hour.is_current:
            return hour
    return None
