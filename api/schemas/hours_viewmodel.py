"""Planetary hour viewmodel schemas used by the hours API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Any, Optional, List, Dict


class LabelledValue(BaseModel):
    display_name: str
    aliases: Dict[str, str]


class Span(BaseModel):
    start_ts: str
    end_ts: str


class LocationMeta(BaseModel):
    place_defaults_used: bool = False
    tz_inferred: bool = False
    default_reason: Optional[str] = None


class HeaderVM(BaseModel):
    date_local: str
    weekday: str
    tz: str
    place_label: str
    lat: float
    lon: float
    is_location_accurate: bool
    is_accurate: bool
    lang: str
    user_element: str
    meta: LocationMeta = Field(default_factory=LocationMeta)


class SolarVM(BaseModel):
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    next_sunrise: Optional[str] = None
    day_length: Optional[str] = None
    night_length: Optional[str] = None


class AlignmentVM(BaseModel):
    user_element: str
    hour_element: str
    relation: str
    quality: str
    quality_label: str
    harmony_score: int


class HourVM(Span):
    index: int
    planet: LabelledValue
    element: LabelledValue
    duration_minutes: int
    is_day_hour: bool
    is_current: bool
    quality: str
    harmony_score: int


class WindowVM(BaseModel):
    closes_in: str
    closes_in_minutes: int
    urgency: str
    next_optimal_window: Optional[HourVM] = None
    next_window_in: Optional[str] = None
    next_window_in_minutes: Optional[int] = None


class GuidanceVM(BaseModel):
    energy_level: str
    description: str
    planet_meaning: str
    quick_actions: List[str]
    purpose: Optional[Dict[str, Any]] = None


class RestDayVM(BaseModel):
    is_rest_day: bool
    message: Optional[Dict[str, str]] = None


class DaySummaryVM(BaseModel):
    counts: Dict[str, int]
    average_harmony: float
    low_ratio: float


class DivineTimingViewModel(BaseModel):
    status: str
    header: HeaderVM
    solar: SolarVM
    hours: List[HourVM]
    current_hour: Optional[HourVM] = None
    alignment: Optional[AlignmentVM] = None
    window: Optional[WindowVM] = None
    guidance: Optional[GuidanceVM] = None
    rest_day: RestDayVM
    summary: DaySummaryVM
    notes: List[str] = Field(default_factory=list)
