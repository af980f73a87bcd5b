from datetime import date, datetime, time, timedelta, timezone

import pytest
from zoneinfo import ZoneInfo

from api.services.planetary_hours import (
    compute_day,
    compute_day_for_instant,
    compute_hours,
    generate_fallback_hours,
    refresh_current,
    resolve_current,
)
from api.services.planets import PLANETARY_SEQUENCES, WEEKDAY_RULERS, WEEKDAY_NAMES, weekday_index
from api.services.solar import SolarTimes
from api.services.util.place_defaults import InvalidLocationError

from solar_fakes import fixed_provider


UTC = "UTC"


def _noon(day: date, tz: str = UTC) -> datetime:
    return datetime.combine(day, time(12, 0), tzinfo=ZoneInfo(tz))


def test_hours_tile_sunrise_to_next_sunrise(provider, wednesday):
    day = compute_day(wednesday, 21.4, 39.8, UTC, now=_noon(wednesday), solar_provider=provider)
    hours = day.hours

    assert len(hours) == 24
    assert day.is_accurate is True
    assert hours[0].start_time == day.sunrise
    assert hours[11].end_time == day.sunset
    assert hours[12].start_time == day.sunset
    assert hours[-1].end_time == day.next_sunrise
    for prev, nxt in zip(hours, hours[1:]):
        assert prev.end_time == nxt.start_time
        assert prev.start_time < prev.end_time


def test_day_and_night_hours_are_uniform(provider, wednesday):
    hours = compute_hours(wednesday, 21.4, 39.8, UTC, now=_noon(wednesday), solar_provider=provider)

    day_total = sum((h.duration for h in hours[:12]), timedelta())
    night_total = sum((h.duration for h in hours[12:]), timedelta())
    assert day_total == timedelta(hours=14, minutes=15)
    assert night_total == timedelta(hours=9, minutes=45)

    # 855 / 12 = 71.25 and 585 / 12 = 48.75 minutes
    assert {h.duration_minutes for h in hours[:12]} == {71}
    assert {h.duration_minutes for h in hours[12:]} == {49}
    assert abs(sum(h.duration_minutes for h in hours[:12]) - 855) <= 6
    assert [h.is_day_hour for h in hours] == [True] * 12 + [False] * 12
    assert [h.index for h in hours] == list(range(24))


@pytest.mark.parametrize("offset", range(7))
def test_first_hour_is_ruled_by_weekday_ruler(provider, offset):
    day = date(2024, 6, 2) + timedelta(days=offset)  # 2024-06-02 is a Sunday
    hours = compute_hours(day, 0.0, 0.0, UTC, now=_noon(day), solar_provider=provider)

    weekday = WEEKDAY_NAMES[weekday_index(day)]
    assert hours[0].planet.name == WEEKDAY_RULERS[weekday]
    assert [h.planet.name for h in hours] == PLANETARY_SEQUENCES[weekday_index(day)]


def test_sequence_table_matches_chaldean_rotation():
    assert PLANETARY_SEQUENCES[0][:8] == [
        "Sun", "Venus", "Mercury", "Moon", "Saturn", "Jupiter", "Mars", "Sun",
    ]
    assert PLANETARY_SEQUENCES[0][12] == "Jupiter"
    assert PLANETARY_SEQUENCES[6][12] == "Mercury"
    # The ruler of the hour after the last night hour is the next weekday's ruler.
    for dow in range(7):
        nxt = PLANETARY_SEQUENCES[dow][23]
        chain = PLANETARY_SEQUENCES[dow][:7]
        following = chain[(chain.index(nxt) + 1) % 7]
        assert following == PLANETARY_SEQUENCES[(dow + 1) % 7][0]


def test_now_on_boundary_belongs_to_later_hour(provider, wednesday):
    hours = compute_hours(wednesday, 0.0, 0.0, UTC, now=_noon(wednesday), solar_provider=provider)

    refreshed = refresh_current(hours, hours[5].start_time)
    current = resolve_current(refreshed)
    assert current is not None
    assert current.index == 5

    at_sunset = resolve_current(refresh_current(hours, hours[12].start_time))
    assert at_sunset.index == 12
    assert at_sunset.is_day_hour is False


def test_exactly_one_hour_is_current(provider, wednesday):
    hours = compute_hours(wednesday, 0.0, 0.0, UTC, now=_noon(wednesday), solar_provider=provider)
    assert sum(1 for h in hours if h.is_current) == 1
    assert resolve_current(hours).contains(_noon(wednesday))


def test_no_current_hour_outside_the_day(provider, wednesday):
    early = datetime.combine(wednesday, time(3, 0), tzinfo=timezone.utc)
    hours = compute_hours(wednesday, 0.0, 0.0, UTC, now=early, solar_provider=provider)
    assert resolve_current(hours) is None

    late = hours[-1].end_time + timedelta(minutes=1)
    assert resolve_current(refresh_current(hours, late)) is None


def test_fallback_when_provider_has_no_times(wednesday):
    day = compute_day(
        wednesday, 78.2, 15.6, UTC, now=_noon(wednesday), solar_provider=lambda *args: None
    )
    hours = day.hours

    assert day.is_accurate is False
    assert day.sunrise is None
    assert len(hours) == 24
    assert hours[0].start_time == datetime.combine(wednesday, time(6, 0), tzinfo=timezone.utc)
    assert all(h.duration == timedelta(minutes=60) for h in hours)
    assert all(h.duration_minutes == 60 for h in hours)
    for prev, nxt in zip(hours, hours[1:]):
        assert prev.end_time == nxt.start_time
    assert hours[0].planet.name == "Mercury"
    assert [h.planet.name for h in hours] == PLANETARY_SEQUENCES[3]
    assert [h.is_day_hour for h in hours] == [True] * 12 + [False] * 12
    assert resolve_current(hours).index == 6


def test_fallback_when_next_sunrise_missing(wednesday):
    good = fixed_provider()

    def provider(day, lat, lon, tz):
        return good(day, lat, lon, tz) if day == wednesday else None

    day = compute_day(wednesday, 0.0, 0.0, UTC, now=_noon(wednesday), solar_provider=provider)
    assert day.is_accurate is False
    assert all(h.duration_minutes == 60 for h in day.hours)


def test_fallback_when_sunset_precedes_sunrise(wednesday):
    provider = fixed_provider(sunrise=time(19, 0), sunset=time(6, 0))
    day = compute_day(wednesday, 0.0, 0.0, UTC, now=_noon(wednesday), solar_provider=provider)
    assert day.is_accurate is False


def test_fallback_start_hour_is_configurable(monkeypatch, wednesday):
    monkeypatch.setenv("FALLBACK_START_HOUR", "0")
    hours = generate_fallback_hours(wednesday, "Asia/Riyadh", now=_noon(wednesday))
    assert hours[0].start_time == datetime.combine(wednesday, time(0, 0), tzinfo=ZoneInfo("Asia/Riyadh"))
    assert hours[-1].end_time - hours[0].start_time == timedelta(hours=24)


@pytest.mark.parametrize("lat, lon", [(91.0, 0.0), (-90.5, 10.0), (10.0, 181.0), (float("nan"), 0.0), (None, 0.0)])
def test_invalid_location_fails_before_provider(lat, lon, wednesday):
    def provider(*args):
        raise AssertionError("solar provider must not be called")

    with pytest.raises(InvalidLocationError):
        compute_hours(wednesday, lat, lon, UTC, solar_provider=provider)


def test_naive_now_is_rejected(provider, wednesday):
    with pytest.raises(ValueError):
        compute_hours(wednesday, 0.0, 0.0, UTC, now=datetime(2024, 6, 5, 12, 0), solar_provider=provider)


def test_hours_tile_across_dst_change():
    tz = "America/New_York"
    day = date(2024, 3, 9)  # clocks jump forward at 02:00 on the 10th
    provider = fixed_provider(sunrise=time(6, 30), sunset=time(18, 0))
    planetary_day = compute_day(day, 40.7, -74.0, tz, now=_noon(day, tz), solar_provider=provider)
    hours = planetary_day.hours

    for prev, nxt in zip(hours, hours[1:]):
        assert prev.end_time == nxt.start_time
    night = {h.duration for h in hours[12:]}
    assert len(night) <= 2  # equal up to a microsecond of rounding
    # 18:00 EST -> 06:30 EDT is 11h30m of real time
    assert planetary_day.night_length == timedelta(hours=11, minutes=30)


def test_instant_before_sunrise_uses_previous_day(provider):
    tz = "Asia/Riyadh"
    after_midnight = datetime(2024, 6, 6, 1, 0, tzinfo=ZoneInfo(tz))
    day = compute_day_for_instant(after_midnight, 21.4225, 39.8262, tz, solar_provider=provider)

    assert day.date == date(2024, 6, 5)
    current = resolve_current(day.hours)
    assert current is not None
    assert current.is_day_hour is False


def test_instant_after_sunrise_uses_same_day(provider):
    tz = "Asia/Riyadh"
    morning = datetime(2024, 6, 6, 9, 0, tzinfo=ZoneInfo(tz))
    day = compute_day_for_instant(morning, 21.4225, 39.8262, tz, solar_provider=provider)
    assert day.date == date(2024, 6, 6)
    # 210 minutes after sunrise, third day hour of Thursday
    assert resolve_current(day.hours).planet.name == "Sun"


def test_provider_receives_today_and_tomorrow(wednesday):
    calls = []
    inner = fixed_provider()

    def provider(day, lat, lon, tz):
        calls.append(day)
        return inner(day, lat, lon, tz)

    compute_hours(wednesday, 10.0, 20.0, UTC, now=_noon(wednesday), solar_provider=provider)
    assert calls == [wednesday, wednesday + timedelta(days=1)]


def test_times_are_expressed_in_place_timezone(wednesday):
    tz = "Asia/Riyadh"
    provider = lambda day, lat, lon, _tz: SolarTimes(  # noqa: E731
        sunrise=datetime.combine(day, time(2, 40), tzinfo=timezone.utc),
        sunset=datetime.combine(day, time(16, 0), tzinfo=timezone.utc),
    )
    hours = compute_hours(wednesday, 21.4, 39.8, tz, now=_noon(wednesday, tz), solar_provider=provider)
    assert hours[0].start_time.utcoffset() == timedelta(hours=3)
    assert hours[0].start_time.hour == 5 and hours[0].start_time.minute == 40


def test_timezone_is_inferred_when_omitted(wednesday):
    seen = []
    inner = fixed_provider()

    def provider(day, lat, lon, tz):
        seen.append(tz)
        return inner(day, lat, lon, tz)

    day = compute_day(wednesday, 34.05, -118.25, now=_noon(wednesday), solar_provider=provider)
    assert day.tz == "America/Los_Angeles"
    assert set(seen) == {"America/Los_Angeles"}
    assert day.hours[0].start_time.utcoffset() == timedelta(hours=-7)


def test_instant_lookup_uses_given_day_loader(provider):
    tz = "Asia/Riyadh"
    requested = []

    def load_day(target):
        requested.append(target)
        return compute_day(target, 21.4225, 39.8262, tz, now=after_midnight, solar_provider=provider)

    after_midnight = datetime(2024, 6, 6, 1, 0, tzinfo=ZoneInfo(tz))
    day = compute_day_for_instant(after_midnight, 21.4225, 39.8262, tz, load_day=load_day)

    assert requested == [date(2024, 6, 6), date(2024, 6, 5)]
    assert day.date == date(2024, 6, 5)
