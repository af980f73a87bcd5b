"""Tests for the planetary hour API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.services import planetary_hours
from api.services.orchestrators import divine_timing

from solar_fakes import fixed_provider


client = TestClient(app)


@pytest.fixture(autouse=True)
def fake_sun(monkeypatch):
    monkeypatch.setattr(planetary_hours, "get_solar_times", fixed_provider())
    divine_timing.CACHE.clear()
    yield
    divine_timing.CACHE.clear()


def test_today_basic_shape() -> None:
    resp = client.get(
        "/v1/hours/today",
        params={"lat": 21.4225, "lon": 39.8262, "tz": "Asia/Riyadh", "element": "fire"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["header"]["tz"] == "Asia/Riyadh"
    assert data["header"]["is_accurate"] is True
    assert len(data["hours"]) == 24
    assert sum(1 for h in data["hours"] if h["is_current"]) == 1
    assert data["current_hour"]["is_current"] is True
    assert "display_name" in data["current_hour"]["planet"]
    assert "aliases" in data["current_hour"]["planet"]
    assert data["alignment"]["user_element"] == "fire"
    assert data["window"]["urgency"] in {"high", "medium", "low"}
    assert data["guidance"]["quick_actions"]


def test_compute_explicit_date() -> None:
    resp = client.post(
        "/v1/hours/compute",
        json={
            "date": "2024-06-05",
            "place": {"lat": 21.4225, "lon": 39.8262, "tz": "Asia/Riyadh", "city": "Mecca"},
            "element": "water",
            "options": {"lang": "fr"},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["header"]["date_local"] == "2024-06-05"
    assert data["header"]["weekday"] == "Wednesday"
    assert data["header"]["place_label"] == "Mecca"
    assert data["header"]["lang"] == "fr"
    assert data["hours"][0]["planet"]["display_name"] == "Mercure"
    assert data["hours"][0]["element"]["display_name"] == "Air"
    assert data["solar"]["day_length"] == "14:15:00"
    assert data["solar"]["night_length"] == "09:45:00"
    assert data["hours"][0]["start_ts"].startswith("2024-06-05T05:30:00")
    assert data["summary"]["counts"]["opposing"] == 6
    assert data["rest_day"]["is_rest_day"] is False
    # the date is in the past, so no hour is active now
    assert data["status"] == "unavailable"
    assert data["current_hour"] is None
    assert data["window"] is None


def test_compute_without_place_uses_fallback_location() -> None:
    resp = client.post("/v1/hours/compute", json={"date": "2024-06-05", "element": "air"})
    assert resp.status_code == 200
    header = resp.json()["header"]
    assert header["meta"]["place_defaults_used"] is True
    assert header["meta"]["default_reason"] == "missing_place"
    assert header["is_location_accurate"] is False
    assert header["tz"] == "Asia/Riyadh"


def test_compute_with_purpose_guidance() -> None:
    resp = client.get(
        "/v1/hours/today",
        params={"lat": 21.4225, "lon": 39.8262, "tz": "Asia/Riyadh", "element": "earth", "purpose": "prayer"},
    )
    assert resp.status_code == 200
    purpose = resp.json()["guidance"]["purpose"]
    assert purpose["purpose"] == "prayer"
    assert purpose["good"] is True


def test_unknown_purpose_is_rejected() -> None:
    resp = client.get(
        "/v1/hours/today",
        params={"lat": 21.4, "lon": 39.8, "tz": "Asia/Riyadh", "element": "fire", "purpose": "gambling"},
    )
    assert resp.status_code == 422


@pytest.mark.parametrize("lat, lon", [(95.0, 10.0), (10.0, -200.0)])
def test_invalid_coordinates_are_rejected(lat, lon) -> None:
    resp = client.post(
        "/v1/hours/compute",
        json={"date": "2024-06-05", "place": {"lat": lat, "lon": lon, "tz": "UTC"}, "element": "fire"},
    )
    assert resp.status_code == 422


def test_invalid_timezone_is_rejected() -> None:
    resp = client.post(
        "/v1/hours/compute",
        json={"date": "2024-06-05", "place": {"lat": 10.0, "lon": 10.0, "tz": "Mars/Olympus"}, "element": "fire"},
    )
    assert resp.status_code == 422


def test_unknown_element_is_rejected() -> None:
    resp = client.get("/v1/hours/today", params={"lat": 21.4, "lon": 39.8, "element": "metal"})
    assert resp.status_code == 422


def test_alignment_endpoint() -> None:
    resp = client.get("/v1/hours/alignment", params={"user_element": "fire", "hour_element": "water"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["quality"] == "opposing"
    assert data["relation"] == "opposing"
    assert 20 <= data["harmony_score"] <= 35
    assert data["quality_label"] == "Rest Time"


def test_health() -> None:
    resp = client.get("/__health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
