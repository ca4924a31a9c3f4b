"""Plan a two-segment line between two world pixels.

Usage:
    uv run python scripts/plan_line.py 1000 2000 1100 2037
    uv run python scripts/plan_line.py 1000 2000 1100 2037 --order b-first
"""

from __future__ import annotations

import argparse

from wplace_tools.polyline.formatter import build_debug_text
from wplace_tools.polyline.models import Point
from wplace_tools.polyline.planner import plan_polyline_world
from wplace_tools.polyline.slopes import format_slope_signed


def main() -> None:
    ap = argparse.ArgumentParser(description="Plan a line using the permitted slopes")
    ap.add_argument("x0", type=float, help="Start world x")
    ap.add_argument("y0", type=float, help="Start world y")
    ap.add_argument("x1", type=float, help="End world x")
    ap.add_argument("y1", type=float, help="End world y")
    ap.add_argument(
        "--order",
        choices=("auto", "a-first", "b-first"),
        default="auto",
        help="Which slope to draw first",
    )
    ap.add_argument("--no-round", action="store_true", help="Do not snap points to pixels")
    args = ap.parse_args()

    plan = plan_polyline_world(
        Point(args.x0, args.y0),
        Point(args.x1, args.y1),
        order=args.order,
        round_to_int=not args.no_round,
    )

    if plan.is_vertical:
        start, end = plan.polyline_world
        print(f"vertical line: ({start.x}, {start.y}) -> ({end.x}, {end.y})")
        return

    # a/b are magnitudes; show them with the direction of travel
    sign = -1 if (args.y1 - args.y0) * (args.x1 - args.x0) < 0 else 1
    print(f"slope a: {format_slope_signed(sign * plan.a)}")
    print(f"slope b: {format_slope_signed(sign * plan.b)}")
    print()
    print(build_debug_text(plan))


if __name__ == "__main__":
    main()
