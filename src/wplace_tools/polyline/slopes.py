"""The fixed slope table and slope lookups."""

from __future__ import annotations

import math
from collections.abc import Sequence

SLOPE_SET: tuple[float, ...] = tuple(
    [1 / d for d in range(20, 1, -1)] + [float(n) for n in range(1, 21)]
)
"""Permitted line slopes in ascending order: 1/20 … 1/2, 1, 2 … 20."""

_EXACT_TOL = 1e-9


def choose_slopes(m: float, slope_set: Sequence[float] = SLOPE_SET) -> tuple[float, float]:
    """Return the tightest ``(a, b)`` from *slope_set* with ``a <= m <= b``.

    An exact match (within 1e-9) returns that slope twice.  Values below the
    smallest or above the largest entry clamp to that entry for both ``a`` and
    ``b``.  *slope_set* must be sorted ascending.
    """
    closest = min(slope_set, key=lambda s: abs(s - m))
    if abs(closest - m) < _EXACT_TOL:
        return closest, closest

    below = [s for s in slope_set if s <= m]
    above = [s for s in slope_set if s >= m]
    a = below[-1] if below else slope_set[0]
    b = above[0] if above else slope_set[-1]
    return (a, b) if a <= b else (b, a)


def slope_to_fraction(m: float, slope_set: Sequence[float] = SLOPE_SET) -> tuple[int, int]:
    """Return ``(numerator, denominator)`` of the set entry nearest ``|m|``.

    Entries ``>= 1`` come back as ``(n, 1)``, entries below 1 as ``(1, d)``.
    Ties go to the earlier (smaller) entry.
    """
    target = abs(m)
    best = min(slope_set, key=lambda s: abs(target - s))
    if best >= 1:
        return round(best), 1
    return 1, round(1 / best)


def format_slope_signed(m: float, slope_set: Sequence[float] = SLOPE_SET) -> str:
    """Render *m* as ``"3"``, ``"-1/4"`` etc.; ``"—"`` when *m* is not finite."""
    if not math.isfinite(m):
        return "—"
    sign = "-" if m < 0 else ""
    n, d = slope_to_fraction(m, slope_set)
    return f"{sign}{n}" if d == 1 else f"{sign}{n}/{d}"
