"""Stateful refresh layer over the pure planetary hour functions.

``HourTracker`` keeps the last computed planetary day and, on every tick,
re-resolves the current hour from it. The day is recomputed when the local
calendar date changes, when the location changes, or when the cached hours no
longer contain the tick instant.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date as date_cls, datetime, timedelta, timezone
from typing import Callable, Iterator, List, Optional, Tuple

from zoneinfo import ZoneInfo

from .alignment import ElementAlignment, align, normalize_element
from .planetary_hours import (
    PlanetaryDay,
    PlanetaryHour,
    compute_day,
    compute_day_for_instant,
    refresh_current,
    resolve_current,
)
from .solar import SolarProvider
from .time_window import TimeWindow, compute_window
from .util.place_defaults import Location


logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60.0


@dataclass(frozen=True)
class TimingSnapshot:
    at: datetime
    day: PlanetaryDay
    hours: List[PlanetaryHour]
    current_hour: Optional[PlanetaryHour]
    alignment: Optional[ElementAlignment]
    window: Optional[TimeWindow]
    recomputed: bool

    @property
    def available(self) -> bool:
        return self.current_hour is not None


def cache_key(local_date: date_cls, location: Location) -> Tuple[date_cls, float, float, str]:
    return (local_date, round(location.latitude, 4), round(location.longitude, 4), location.tz)


class HourTracker:
    def __init__(
        self,
        location: Location,
        user_element: str,
        solar_provider: Optional[SolarProvider] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.location = location
        self.user_element = normalize_element(user_element)
        self._solar_provider = solar_provider
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._key: Optional[Tuple[date_cls, float, float, str]] = None
        self._day: Optional[PlanetaryDay] = None
        self._next_day: Optional[PlanetaryDay] = None
        self.recompute_count = 0

    @property
    def day(self) -> Optional[PlanetaryDay]:
        return self._day

    def set_location(self, location: Location) -> None:
        if location != self.location:
            self.location = location
            self._key = None
            self._day = None
            self._next_day = None

    def _recompute(self, now: datetime) -> PlanetaryDay:
        loc = self.location
        day = compute_day_for_instant(
            now, loc.latitude, loc.longitude, loc.tz, self._solar_provider
        )
        self._day = day
        self.recompute_count += 1
        logger.info(
            "hours.tracker.recompute",
            extra={
                "day": day.date.isoformat(),
                "accurate": day.is_accurate,
                "city": loc.city_name,
            },
        )
        return day

    def _next_day_hours(self, day: PlanetaryDay) -> List[PlanetaryHour]:
        following = day.date + timedelta(days=1)
        if self._next_day is None or self._next_day.date != following:
            loc = self.location
            self._next_day = compute_day(
                following,
                loc.latitude,
                loc.longitude,
                loc.tz,
                solar_provider=self._solar_provider,
            )
        return list(self._next_day.hours)

    def tick(self, now: Optional[datetime] = None) -> TimingSnapshot:
        moment = now or self._clock()
        key = cache_key(moment.astimezone(ZoneInfo(self.location.tz)).date(), self.location)

        day = self._day
        recomputed = False
        if day is None or key != self._key or not day.covers(moment):
            day = self._recompute(moment)
            self._key = key
            recomputed = True

        hours = refresh_current(day.hours, moment)
        current = resolve_current(hours)
        alignment = align(self.user_element, current.planet.element) if current else None
        window = compute_window(current, self.user_element, hours, moment, lambda: self._next_day_hours(day))
        return TimingSnapshot(
            at=moment,
            day=day,
            hours=hours,
            current_hour=current,
            alignment=alignment,
            window=window,
            recomputed=recomputed,
        )

    def run(
        self,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        count: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Iterator[TimingSnapshot]:
        """Yield a snapshot every ``interval`` seconds; stop after ``count``."""

        emitted = 0
        while count is None or emitted < count:
            yield self.tick()
            emitted += 1
            if count is None or emitted < count:
                sleep(interval)
