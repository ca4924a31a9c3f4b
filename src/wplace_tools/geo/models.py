"""Geographic and pixel-space value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LatLng:
    """A WGS84 coordinate in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class LocalCoord:
    """A world pixel split into a cell index and an offset inside the cell.

    ``chunk_x * mod + x == floor(world_x)`` for the modulus the coordinate was
    built with; ``x`` and ``y`` are always in ``[0, mod)``.
    """

    chunk_x: int
    chunk_y: int
    x: int
    y: int


@dataclass(frozen=True)
class PixelInfo:
    """A world pixel together with its chunk (mod 4000) and tile (mod 1000) addresses."""

    world_x: float
    world_y: float
    chunk: LocalCoord
    tile: LocalCoord
