"""Helpers for validating and normalising location inputs."""

import math
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from timezonefinder import TimezoneFinder
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


DEF_LAT = float(os.getenv("DEFAULT_PLACE_LAT", "21.4225"))
DEF_LON = float(os.getenv("DEFAULT_PLACE_LON", "39.8262"))
DEF_TZ = os.getenv("DEFAULT_PLACE_TZ", "Asia/Riyadh")
DEF_LBL = os.getenv("DEFAULT_PLACE_LABEL", "Mecca (Fallback)")


class InvalidLocationError(ValueError):
    """Raised when latitude/longitude are missing, non-finite or out of range."""


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    tz: str
    city_name: str
    is_accurate: bool = True


def validate_lat_lon(lat: Any, lon: Any) -> Tuple[float, float]:
    """Return ``(lat, lon)`` as floats or raise ``InvalidLocationError``."""

    try:
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError) as exc:
        raise InvalidLocationError(f"Invalid coordinates: lat={lat!r}, lon={lon!r}") from exc

    if not (math.isfinite(lat_f) and math.isfinite(lon_f)):
        raise InvalidLocationError(f"Non-finite coordinates: lat={lat_f}, lon={lon_f}")
    if not -90.0 <= lat_f <= 90.0:
        raise InvalidLocationError(f"Latitude {lat_f} outside [-90, 90]")
    if not -180.0 <= lon_f <= 180.0:
        raise InvalidLocationError(f"Longitude {lon_f} outside [-180, 180]")
    return lat_f, lon_f


def validate_tz(tz: str) -> str:
    try:
        ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone: {tz}") from exc
    return tz


@lru_cache(maxsize=1)
def _finder() -> TimezoneFinder:
    return TimezoneFinder()


def infer_tz(lat: float, lon: float) -> Optional[str]:
    """Infer timezone name for a coordinate pair."""

    return _finder().timezone_at(lng=lon, lat=lat)


def resolve_tz(lat: float, lon: float, tz: Optional[str] = None) -> str:
    """Validate ``tz``, or infer it from the coordinates when omitted."""

    if tz:
        return validate_tz(tz)
    return infer_tz(lat, lon) or "UTC"


def default_location() -> Location:
    return Location(DEF_LAT, DEF_LON, DEF_TZ, DEF_LBL, is_accurate=False)


def normalize_place(place: Optional[Dict[str, Any]]) -> Tuple[Location, Dict[str, Any]]:
    """Normalise place payload and capture metadata flags."""

    flags: Dict[str, Any] = {
        "place_defaults_used": False,
        "tz_inferred": False,
        "default_reason": None,
    }

    if not place:
        flags.update({"place_defaults_used": True, "default_reason": "missing_place"})
        return default_location(), flags

    lat = place.get("lat")
    lon = place.get("lon")
    tz = place.get("tz")
    lbl = place.get("city") or place.get("query") or None

    if lat is None and lon is None:
        flags.update({"place_defaults_used": True, "default_reason": "missing_latlon"})
        fallback = default_location()
        return (
            Location(
                fallback.latitude,
                fallback.longitude,
                validate_tz(tz) if tz else fallback.tz,
                lbl or fallback.city_name,
                is_accurate=False,
            ),
            flags,
        )

    lat, lon = validate_lat_lon(lat, lon)

    if tz:
        tz = validate_tz(tz)
    else:
        tz_guess = infer_tz(lat, lon)
        if tz_guess:
            tz = tz_guess
            flags["tz_inferred"] = True
        else:
            tz = DEF_TZ
        flags["default_reason"] = "missing_tz"

    eff_lbl = lbl or f"{lat:.4f}, {lon:.4f}"
    is_accurate = bool(place.get("is_accurate", True))
    return Location(lat, lon, tz, eff_lbl, is_accurate=is_accurate), flags
