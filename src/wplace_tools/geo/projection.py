"""Web-Mercator projection between lat/lng and the fixed-zoom world-pixel plane."""

from __future__ import annotations

import math

from wplace_tools.errors import DomainViolationError
from wplace_tools.geo.constants import MOD_CHUNK, MOD_TILE, SCALE
from wplace_tools.geo.models import LatLng, LocalCoord, PixelInfo


def to_local(px: float, py: float, mod_size: int = MOD_CHUNK) -> LocalCoord:
    """Split world pixel ``(px, py)`` into a cell index and an in-cell offset.

    Uses floor division, so negative coordinates land in negative cells with a
    non-negative offset.
    """
    chunk_x = math.floor(px / mod_size)
    chunk_y = math.floor(py / mod_size)
    # % with a positive modulus already yields a residue in [0, mod_size)
    local_x = px % mod_size
    local_y = py % mod_size
    return LocalCoord(
        chunk_x=chunk_x,
        chunk_y=chunk_y,
        x=math.floor(local_x),
        y=math.floor(local_y),
    )


def llz_to_world_pixel(lat: float, lng: float) -> PixelInfo:
    """Project ``(lat, lng)`` onto the world-pixel plane.

    Raises:
        DomainViolationError: If either value is non-finite or the latitude is
            at (or rounds to) a pole, where the Mercator y coordinate diverges.
    """
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise DomainViolationError(f"Coordinate must be finite: lat={lat}, lng={lng}")
    if abs(lat) >= 90.0:
        raise DomainViolationError(f"Latitude {lat} cannot be projected (pole)")

    sin_lat = math.sin(math.radians(lat))
    # latitudes within ~1e-14 of a pole still give sin == ±1.0
    if abs(sin_lat) >= 1.0:
        raise DomainViolationError(f"Latitude {lat} cannot be projected (pole)")

    world_x = (lng + 180.0) / 360.0 * SCALE
    world_y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * SCALE

    return PixelInfo(
        world_x=world_x,
        world_y=world_y,
        chunk=to_local(world_x, world_y, MOD_CHUNK),
        tile=to_local(world_x, world_y, MOD_TILE),
    )


def world_to_lat_lng(world_x: float, world_y: float) -> LatLng:
    """Inverse projection of a world pixel back to lat/lng.

    The longitude is brought back into ``[-180, 180]`` with a single ±360
    correction; inputs more than one world width outside the plane are not
    fully normalised.
    """
    lng = world_x / SCALE * 360.0 - 180.0
    n = math.pi - 2 * math.pi * (world_y / SCALE)
    lat = math.degrees(math.atan(math.sinh(n)))

    if lng > 180.0:
        lng -= 360.0
    elif lng < -180.0:
        lng += 360.0

    return LatLng(lat=lat, lng=lng)
