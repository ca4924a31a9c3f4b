"""Estimate when a painting finishes from two progress observations.

Usage:
    uv run python scripts/estimate_finish.py 2026-01-01T00:00 "350,000" 2026-01-01T06:00 "340,000"
"""

from __future__ import annotations

import argparse
import sys

from wplace_tools.progress.estimator import (
    calc_finish_from_two_points,
    format_datetime_ymdhm,
    read_int_like,
)


def main() -> None:
    ap = argparse.ArgumentParser(description="Estimate painting finish time")
    ap.add_argument("dt1", help="First observation time (YYYY-MM-DDTHH:MM)")
    ap.add_argument("rem1", help="Pixels remaining at the first observation")
    ap.add_argument("dt2", help="Second observation time (YYYY-MM-DDTHH:MM)")
    ap.add_argument("rem2", help="Pixels remaining at the second observation")
    args = ap.parse_args()

    try:
        est = calc_finish_from_two_points(
            args.dt1, read_int_like(args.rem1), args.dt2, read_int_like(args.rem2)
        )
    except ValueError as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Observations : {format_datetime_ymdhm(est.t1)} ({est.rem1:,.0f} left)")
    print(f"               {format_datetime_ymdhm(est.t2)} ({est.rem2:,.0f} left)")
    print(f"Elapsed      : {est.minutes:.0f} min, {est.delta_remaining:,.0f} px painted")
    print(f"Rate         : {est.rate_per_min:.2f} px/min (~{est.people:.2f} people)")
    print(f"Finish       : {format_datetime_ymdhm(est.finish_date)}")


if __name__ == "__main__":
    main()
