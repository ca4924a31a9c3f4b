"""Polyline planning data structures."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wplace_tools.geo.models import LocalCoord


@dataclass(frozen=True)
class Point:
    """A point in world-pixel space."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelError:
    """Offset of the planned end point from the requested end point."""

    dx: float
    dy: float

    @property
    def magnitude(self) -> float:
        """Euclidean length of the offset in pixels."""
        return math.hypot(self.dx, self.dy)


@dataclass
class PolylinePlan:
    """A path of at most two straight segments drawn with slopes from a fixed set.

    Layout (``sgn`` is the sign of the vertical direction)::

        start ──[Na steps at slope a]── bend ──[Nb steps at slope b]── planned_end

    or with the two segments swapped when ``b`` is drawn first.  For a
    vertical request (no horizontal travel) ``a``, ``b`` and ``bend`` are
    ``None`` and the path is the straight start-to-end segment.
    """

    a: float | None
    """Shallower slope magnitude (``a <= b``)."""

    b: float | None
    """Steeper slope magnitude."""

    na: float
    """Horizontal pixels travelled at slope ``a`` (an int when points are snapped)."""

    nb: float
    """Horizontal pixels travelled at slope ``b``.  ``na + nb == |dx|``."""

    bend: Point | None
    """Interior vertex of the polyline."""

    bend_local: LocalCoord | None
    """Chunk-local address of :attr:`bend`."""

    planned_end: Point
    """Where the two segments actually finish."""

    polyline_world: list[Point]
    """Vertices in world pixels (2 or 3 points)."""

    polyline_local: list[LocalCoord]
    """Vertices as chunk-local addresses, parallel to :attr:`polyline_world`."""

    error_px: PixelError
    """``planned_end - target end``."""

    @property
    def is_vertical(self) -> bool:
        return self.bend is None
