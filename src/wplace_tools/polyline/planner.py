"""Two-segment line planning over a restricted slope set.

The drawing tool only draws straight lines at the slopes in
:data:`~wplace_tools.polyline.slopes.SLOPE_SET`.  An arbitrary line from
``start`` to ``end`` is approximated by walking ``Na`` pixels to the right at
slope ``a`` and ``Nb`` pixels at slope ``b``, where ``a <= m <= b`` bracket
the true slope ``m``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from wplace_tools.geo.constants import MOD_CHUNK
from wplace_tools.geo.projection import to_local
from wplace_tools.polyline.models import PixelError, Point, PolylinePlan
from wplace_tools.polyline.slopes import SLOPE_SET, choose_slopes

Order = Literal["auto", "a-first", "b-first"]

_ORDERS = ("auto", "a-first", "b-first")


def round_half_up(v: float) -> int:
    """Round to the nearest integer with .5 going towards +inf."""
    return math.floor(v + 0.5)


def _split(dx: float, dy: float, a: float, b: float) -> tuple[float, float]:
    """Return ``(Na, Nb)`` so that ``a*Na + b*Nb`` is as close to *dy* as possible."""
    if abs(b - a) < 1e-9:
        nb = 0
    else:
        nb = round_half_up((dy - a * dx) / (b - a))
    nb = max(0, min(dx, nb))
    return dx - nb, nb


def plan_polyline_world(
    start: Point,
    end: Point,
    slope_set: Sequence[float] = SLOPE_SET,
    *,
    order: Order = "auto",
    round_to_int: bool = True,
) -> PolylinePlan:
    """Plan the best two-segment approximation of the line ``start → end``.

    Args:
        start: Start point in world pixels.
        end: Requested end point in world pixels.
        slope_set: Ascending table of permitted slope magnitudes.
        order: ``"a-first"`` / ``"b-first"`` force which slope is drawn first;
            ``"auto"`` picks the ordering whose end lands closer to *end*
            (``a-first`` on a tie).
        round_to_int: Snap both points to the pixel lattice first.

    Returns:
        A :class:`PolylinePlan`.  ``error_px`` is measured against the
        (snapped) requested end point.

    Raises:
        ValueError: If *order* is not one of the accepted values.
    """
    if order not in _ORDERS:
        raise ValueError(f"order must be one of {_ORDERS}, got {order!r}")

    if round_to_int:
        x0, y0 = round_half_up(start.x), round_half_up(start.y)
        x1, y1 = round_half_up(end.x), round_half_up(end.y)
    else:
        x0, y0, x1, y1 = start.x, start.y, end.x, end.y

    start_w = Point(x0, y0)
    target = Point(x1, y1)

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)

    if dx == 0:
        return PolylinePlan(
            a=None,
            b=None,
            na=0,
            nb=0,
            bend=None,
            bend_local=None,
            planned_end=target,
            polyline_world=[start_w, target],
            polyline_local=[
                to_local(start_w.x, start_w.y, MOD_CHUNK),
                to_local(target.x, target.y, MOD_CHUNK),
            ],
            error_px=PixelError(0.0, 0.0),
        )

    # Slopes and the split work on magnitudes; sx/sy carry the direction.
    sx = 1 if x1 >= x0 else -1
    sy = 1 if y1 >= y0 else -1

    a, b = choose_slopes(dy / dx, slope_set)
    na, nb = _split(dx, dy, a, b)
    a_first = (
        Point(x0 + sx * na, y0 + sy * (a * na)),
        Point(x0 + sx * (na + nb), y0 + sy * (a * na + b * nb)),
    )
    b_first = (
        Point(x0 + sx * nb, y0 + sy * (b * nb)),
        Point(x0 + sx * (na + nb), y0 + sy * (b * nb + a * na)),
    )

    if order == "a-first":
        bend, end_w = a_first
    elif order == "b-first":
        bend, end_w = b_first
    else:
        err_a = math.hypot(a_first[1].x - target.x, a_first[1].y - target.y)
        err_b = math.hypot(b_first[1].x - target.x, b_first[1].y - target.y)
        bend, end_w = a_first if err_a <= err_b else b_first

    return PolylinePlan(
        a=a,
        b=b,
        na=na,
        nb=nb,
        bend=bend,
        bend_local=to_local(bend.x, bend.y, MOD_CHUNK),
        planned_end=end_w,
        polyline_world=[start_w, bend, end_w],
        polyline_local=[
            to_local(start_w.x, start_w.y, MOD_CHUNK),
            to_local(bend.x, bend.y, MOD_CHUNK),
            to_local(end_w.x, end_w.y, MOD_CHUNK),
        ],
        error_px=PixelError(end_w.x - target.x, end_w.y - target.y),
    )
