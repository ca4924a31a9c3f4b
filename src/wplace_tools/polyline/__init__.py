"""Slope-restricted line planning."""

from wplace_tools.polyline.formatter import (
    build_debug_text,
    summarize_map,
    summarize_point_detailed,
)
from wplace_tools.polyline.models import PixelError, Point, PolylinePlan
from wplace_tools.polyline.planner import plan_polyline_world
from wplace_tools.polyline.slopes import (
    SLOPE_SET,
    choose_slopes,
    format_slope_signed,
    slope_to_fraction,
)

__all__ = [
    "SLOPE_SET",
    "PixelError",
    "Point",
    "PolylinePlan",
    "build_debug_text",
    "choose_slopes",
    "format_slope_signed",
    "plan_polyline_world",
    "slope_to_fraction",
    "summarize_map",
    "summarize_point_detailed",
]
