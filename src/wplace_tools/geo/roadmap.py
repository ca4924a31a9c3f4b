"""Conversion between road-map URLs and wplace world URLs.

The road map is a small lat/lng rectangle near 25°N 137°E whose pixels are
scaled up by :data:`~wplace_tools.geo.constants.ROAD_MAP_RATIO` to cover the
whole wplace world.  The map is anchored at :data:`ORIGIN`; the part of the
map west of the origin wraps around to the east edge of the world.  Near the
wrap seam (between :data:`WEST_INDIA_X` and :data:`EAST_INDIA_X`) one world
position has two possible road-map preimages.
"""

from __future__ import annotations

import logging
import math

from wplace_tools.errors import DomainViolationError
from wplace_tools.geo.constants import (
    EAST_INDIA_LNG,
    MAP_BOTTOM_RIGHT,
    MAP_SCALE,
    MAP_TOP_LEFT,
    ORIGIN_LAT,
    ORIGIN_LNG,
    ROAD_MAP_RATIO,
    SCALE,
    WEST_INDIA_LNG,
)
from wplace_tools.geo.models import LatLng
from wplace_tools.geo.projection import llz_to_world_pixel, world_to_lat_lng
from wplace_tools.geo.urls import build_wplace_url, parse_wplace_url

_logger = logging.getLogger(__name__)

ORIGIN = llz_to_world_pixel(ORIGIN_LAT, ORIGIN_LNG)
"""World pixel of the road map's top-left anchor."""

WEST_INDIA_X = llz_to_world_pixel(0.0, WEST_INDIA_LNG).world_x
EAST_INDIA_X = llz_to_world_pixel(0.0, EAST_INDIA_LNG).world_x

_TOP_LAT, _LEFT_LNG = MAP_TOP_LEFT
_BOTTOM_LAT, _RIGHT_LNG = MAP_BOTTOM_RIGHT


def _within_bounds(pos: LatLng) -> bool:
    within_lat = _BOTTOM_LAT <= pos.lat <= _TOP_LAT
    within_lng = _LEFT_LNG <= pos.lng <= _RIGHT_LNG
    return within_lat and within_lng


def is_within_road_map_bounds(url: str) -> bool:
    """Return True if the lat/lng in *url* lies inside the road-map rectangle.

    Raises:
        MalformedInputError: If *url* does not carry a usable lat/lng.
    """
    return _within_bounds(parse_wplace_url(url))


def road_url_to_wplace_url(road_url: str, out_zoom: int = 15) -> str:
    """Map a point on the road map to the wplace world location it stands for.

    Raises:
        MalformedInputError: If *road_url* has no usable lat/lng.
        DomainViolationError: If the point is outside the road-map rectangle.
    """
    pos = parse_wplace_url(road_url)
    if not _within_bounds(pos):
        raise DomainViolationError("URL is outside the road map area")

    px = llz_to_world_pixel(pos.lat, pos.lng)

    # West of the anchor the map continues past the east edge of the world.
    shifted_x = px.world_x
    if shifted_x < ORIGIN.world_x:
        shifted_x += MAP_SCALE

    # +0.5 targets the centre of the scaled-up road-map pixel.
    world_x = (shifted_x - ORIGIN.world_x + 0.5) * ROAD_MAP_RATIO
    world_y = (px.world_y - ORIGIN.world_y + 0.5) * ROAD_MAP_RATIO

    out = world_to_lat_lng(world_x, world_y)
    _logger.debug(
        "road (%.6f, %.6f) -> world (%.1f, %.1f) -> (%.6f, %.6f)",
        pos.lat, pos.lng, world_x, world_y, out.lat, out.lng,
    )
    return build_wplace_url(out.lat, out.lng, out_zoom)


def _candidate_offsets(world_x: float, bx: int) -> list[int]:
    """Road-map x offsets that could have produced *world_x*."""
    if world_x < WEST_INDIA_X:
        return [bx]
    if world_x < EAST_INDIA_X:
        return [bx, bx - MAP_SCALE]
    return [bx - MAP_SCALE]


def wplace_url_to_road_urls(url: str, out_zoom: int = 15) -> list[str]:
    """Map a wplace world location back to the road-map point(s) for it.

    Returns one URL, or two when the location falls inside the wrap seam and
    both preimages lie within the road map's latitude band.

    Raises:
        MalformedInputError: If *url* has no usable lat/lng.
        DomainViolationError: If no candidate lands on the road map.
    """
    pos = parse_wplace_url(url)
    px = llz_to_world_pixel(pos.lat, pos.lng)

    bx = math.floor(px.world_x * MAP_SCALE / SCALE)
    by = math.floor(px.world_y * MAP_SCALE / SCALE)

    results: list[str] = []
    for cx in _candidate_offsets(px.world_x, bx):
        road = world_to_lat_lng(ORIGIN.world_x + cx, ORIGIN.world_y + by)
        if road.lat > _TOP_LAT or road.lat < _BOTTOM_LAT:
            _logger.debug("candidate x=%d rejected: lat %.6f off the map", cx, road.lat)
            continue
        results.append(build_wplace_url(road.lat, road.lng, out_zoom))

    if not results:
        raise DomainViolationError("Coordinate has no counterpart on the road map")
    return results
