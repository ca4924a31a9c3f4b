"""Conversion, planning and estimation endpoints."""

from __future__ import annotations

import pytest

from wplace_tools.geo.urls import parse_wplace_url

_ROAD_URL = "https://wplace.live/?lat=24.8&lng=137.8&zoom=15"


def test_pixel(client):
    resp = client.get("/api/pixel", params={"lat": 0.0, "lng": 0.0})
    assert resp.status_code == 200
    data = resp.json()
    assert data["world_x"] == pytest.approx(1_024_000)
    assert data["chunk"] == {"chunk_x": 256, "chunk_y": 256, "x": 0, "y": 0}
    assert data["tile"] == {"chunk_x": 1024, "chunk_y": 1024, "x": 0, "y": 0}
    assert data["map"] == "(0.000, 0.000)"
    assert data["url"].endswith("&zoom=18")


def test_pixel_pole_returns_422(client):
    resp = client.get("/api/pixel", params={"lat": 90.0, "lng": 0.0})
    assert resp.status_code == 422


def test_pixel_latitude_rounding_to_pole_returns_422(client):
    resp = client.get("/api/pixel", params={"lat": 89.99999999999999, "lng": 0.0})
    assert resp.status_code == 422
    assert "pole" in resp.json()["detail"]


def test_road_to_wplace_default_zoom(client):
    resp = client.post("/api/road-to-wplace", json={"url": _ROAD_URL})
    assert resp.status_code == 200
    assert resp.json()["url"].endswith("&zoom=15")


def test_road_to_wplace_env_zoom(client, monkeypatch):
    monkeypatch.setenv("WPLACE_OUT_ZOOM", "11")
    resp = client.post("/api/road-to-wplace", json={"url": _ROAD_URL})
    assert resp.json()["url"].endswith("&zoom=11")


def test_road_to_wplace_outside_returns_422(client):
    resp = client.post(
        "/api/road-to-wplace",
        json={"url": "https://wplace.live/?lat=35.0&lng=139.0"},
    )
    assert resp.status_code == 422
    assert "outside" in resp.json()["detail"]


def test_road_round_trip(client):
    world = client.post("/api/road-to-wplace", json={"url": _ROAD_URL, "zoom": 18}).json()
    resp = client.post("/api/wplace-to-road", json={"url": world["url"]})
    assert resp.status_code == 200
    urls = resp.json()["urls"]
    assert len(urls) == 1
    back = parse_wplace_url(urls[0])
    assert back.lat == pytest.approx(24.8, abs=1e-3)
    assert back.lng == pytest.approx(137.8, abs=1e-3)


def test_wplace_to_road_no_counterpart_returns_422(client):
    resp = client.post(
        "/api/wplace-to-road",
        json={"url": "https://wplace.live/?lat=-80&lng=0"},
    )
    assert resp.status_code == 422


def test_wplace_to_road_missing_url_returns_422(client):
    resp = client.post("/api/wplace-to-road", json={"zoom": 15})
    assert resp.status_code == 422


def test_polyline(client):
    resp = client.post(
        "/api/polyline",
        json={"start": {"x": 0, "y": 0}, "end": {"x": 100, "y": 250}},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert (data["a_label"], data["b_label"]) == ("2", "3")
    assert (data["na"], data["nb"]) == (50, 50)
    assert data["bend"] == {"x": 50, "y": 100}
    assert len(data["polyline_local"]) == 3
    assert data["error_dx"] == 0 and data["error_dy"] == 0
    assert "<bend>" in data["debug_text"]


def test_polyline_vertical(client):
    resp = client.post(
        "/api/polyline",
        json={"start": {"x": 5, "y": 0}, "end": {"x": 5, "y": 100}},
    )
    data = resp.json()
    assert data["a"] is None and data["bend"] is None
    assert data["a_label"] == "—"
    assert data["debug_text"] == ""


def test_polyline_unrounded_fractional_split(client):
    resp = client.post(
        "/api/polyline",
        json={"start": {"x": 0, "y": 0}, "end": {"x": 2.5, "y": 1}, "round_to_int": False},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["na"] == pytest.approx(1.5)
    assert data["nb"] == 1


def test_polyline_bad_order_returns_422(client):
    resp = client.post(
        "/api/polyline",
        json={"start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 1}, "order": "zigzag"},
    )
    assert resp.status_code == 422


def test_finish_with_formatted_counts(client):
    resp = client.post(
        "/api/finish",
        json={
            "dt1": "2026-01-01T00:00",
            "rem1": "1,000",
            "dt2": "2026-01-01T01:00",
            "rem2": 940,
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["rate_per_min"] == pytest.approx(1.0)
    assert data["people"] == pytest.approx(0.45)
    assert data["finish_date"] == "2026-01-01T16:40"
    assert data["finish_date_text"] == "2026/01/01 16:40"


def test_finish_identical_dates_returns_422(client):
    resp = client.post(
        "/api/finish",
        json={
            "dt1": "2026-01-01T00:00",
            "rem1": 100,
            "dt2": "2026-01-01T00:00",
            "rem2": 50,
        },
    )
    assert resp.status_code == 422
    assert "identical" in resp.json()["detail"]


def test_finish_too_far_in_future_returns_422(client):
    resp = client.post(
        "/api/finish",
        json={
            "dt1": "2025-01-01T00:00",
            "rem1": 1_000_001,
            "dt2": "2026-01-01T00:00",
            "rem2": 1_000_000,
        },
    )
    assert resp.status_code == 422
    assert "too far" in resp.json()["detail"]


def test_finish_bad_count_string_returns_422(client):
    resp = client.post(
        "/api/finish",
        json={
            "dt1": "2026-01-01T00:00",
            "rem1": "lots",
            "dt2": "2026-01-01T01:00",
            "rem2": 50,
        },
    )
    assert resp.status_code == 422
