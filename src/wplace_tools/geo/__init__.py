"""Projection, chunk/tile addressing and road-map conversion."""

from wplace_tools.geo.models import LatLng, LocalCoord, PixelInfo
from wplace_tools.geo.projection import llz_to_world_pixel, to_local, world_to_lat_lng
from wplace_tools.geo.roadmap import (
    is_within_road_map_bounds,
    road_url_to_wplace_url,
    wplace_url_to_road_urls,
)
from wplace_tools.geo.urls import build_wplace_url, parse_wplace_url, to_wplace_url

__all__ = [
    "LatLng",
    "LocalCoord",
    "PixelInfo",
    "build_wplace_url",
    "is_within_road_map_bounds",
    "llz_to_world_pixel",
    "parse_wplace_url",
    "road_url_to_wplace_url",
    "to_local",
    "to_wplace_url",
    "world_to_lat_lng",
    "wplace_url_to_road_urls",
]
