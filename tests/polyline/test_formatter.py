"""Tests for plain-text plan and point summaries."""

from __future__ import annotations

import pytest

from wplace_tools.geo.projection import llz_to_world_pixel
from wplace_tools.polyline.formatter import (
    build_debug_text,
    summarize_map,
    summarize_point_detailed,
)
from wplace_tools.polyline.models import Point
from wplace_tools.polyline.planner import plan_polyline_world


def test_debug_text_lists_split_and_vertices():
    plan = plan_polyline_world(Point(3990, 0), Point(4090, 250))
    text = build_debug_text(plan)
    assert "distance along x at slope a: 50" in text
    assert "distance along x at slope b: 50" in text
    for label in ("<start>", "<bend>", "<end>"):
        assert label in text
    assert "chunk: [1, 0] (40, 100)" in text
    assert "tile:  [4, 0] (40, 100)" in text
    assert text.endswith("end error (x: 0, y: 0)")


def test_debug_text_reports_rounded_error():
    plan = plan_polyline_world(Point(0, 0), Point(3, 100))
    assert build_debug_text(plan).endswith("end error (x: 0, y: -40)")


def test_debug_text_rejects_vertical_plan():
    plan = plan_polyline_world(Point(5, 0), Point(5, 100))
    with pytest.raises(ValueError):
        build_debug_text(plan)


def test_summarize_map_at_chunk_origin():
    assert summarize_map(llz_to_world_pixel(0.0, 0.0)) == "(0.000, 0.000)"


def test_summarize_point_detailed():
    text = summarize_point_detailed("centre", llz_to_world_pixel(0.0, 0.0))
    assert text.splitlines() == [
        "<centre>",
        "world(px): (1024000, 1024000)",
        "chunk: [256, 256] (0, 0)",
        "tile:  [1024, 1024] (0, 0)",
        "map: (0.000, 0.000)",
    ]
