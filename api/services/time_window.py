"""Countdown and next-window lookup for the active planetary hour."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from .alignment import normalize_element
from .planetary_hours import PlanetaryHour


@dataclass(frozen=True)
class TimeWindow:
    closes_in: str
    closes_in_minutes: int
    urgency: str
    next_optimal_window: Optional[PlanetaryHour]
    next_window_in: Optional[str]
    next_window_in_minutes: Optional[int]


def _urgency_thresholds() -> tuple[int, int]:
    high = int(os.getenv("URGENCY_HIGH_MINUTES", "15"))
    medium = int(os.getenv("URGENCY_MEDIUM_MINUTES", "60"))
    return high, medium


def _whole_minutes(delta: timedelta) -> int:
    seconds = max(0, int(delta.total_seconds()))
    return seconds // 60


def format_duration(delta: timedelta) -> str:
    """Format as ``"Xh Ymin"`` from one hour upwards, else ``"Ymin"``."""

    minutes = _whole_minutes(delta)
    hours, mins = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {mins}min"
    return f"{mins}min"


def urgency_for(remaining_minutes: int) -> str:
    high, medium = _urgency_thresholds()
    if remaining_minutes <= high:
        return "high"
    if remaining_minutes <= medium:
        return "medium"
    return "low"


def _find_index(hours: Sequence[PlanetaryHour], current: PlanetaryHour) -> Optional[int]:
    if 0 <= current.index < len(hours) and hours[current.index].start_time == current.start_time:
        return current.index
    for idx, hour in enumerate(hours):
        if hour.start_time == current.start_time:
            return idx
    return None


def next_hour_with_element(
    hours: Sequence[PlanetaryHour], element: str, start_index: int = 0
) -> Optional[PlanetaryHour]:
    for hour in hours[start_index:]:
        if hour.planet.element == element:
            return hour
    return None


def compute_window(
    current_hour: Optional[PlanetaryHour],
    user_element: str,
    hours: Sequence[PlanetaryHour],
    now: Optional[datetime] = None,
    load_next_day: Optional[Callable[[], Sequence[PlanetaryHour]]] = None,
) -> Optional[TimeWindow]:
    """Return the countdown for ``current_hour`` and the next matching window.

    ``None`` means no hour is active, or the active hour is not part of
    ``hours``, and the window is unavailable.
    """

    if current_hour is None:
        return None
    start_index = _find_index(hours, current_hour)
    if start_index is None:
        return None

    element = normalize_element(user_element)
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)

    remaining = current_hour.end_time - moment
    remaining_minutes = _whole_minutes(remaining)

    target = next_hour_with_element(hours, element, start_index)
    if target is None and load_next_day is not None:
        target = next_hour_with_element(load_next_day(), element)

    next_in = None
    next_in_minutes = None
    if target is not None:
        gap = max(target.start_time - moment, timedelta(0))
        next_in = format_duration(gap)
        next_in_minutes = _whole_minutes(gap)

    return TimeWindow(
        closes_in=format_duration(remaining),
        closes_in_minutes=remaining_minutes,
        urgency=urgency_for(remaining_minutes),
        next_optimal_window=target,
        next_window_in=next_in,
        next_window_in_minutes=next_in_minutes,
    )
