"""Convert between road-map URLs and wplace world URLs.

Usage:
    uv run python scripts/convert_url.py road "https://wplace.live/?lat=24.8&lng=137.8&zoom=15"
    uv run python scripts/convert_url.py world "https://wplace.live/?lat=35.6&lng=139.7&zoom=15"
    uv run python scripts/convert_url.py pixel "https://wplace.live/?lat=35.6&lng=139.7"
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from wplace_tools.config import Settings  # noqa: E402
from wplace_tools.geo.projection import llz_to_world_pixel  # noqa: E402
from wplace_tools.geo.roadmap import (  # noqa: E402
    road_url_to_wplace_url,
    wplace_url_to_road_urls,
)
from wplace_tools.geo.urls import parse_wplace_url  # noqa: E402
from wplace_tools.polyline.formatter import summarize_point_detailed  # noqa: E402


def main() -> None:
    settings = Settings.from_env(dotenv=False)

    ap = argparse.ArgumentParser(description="Convert wplace / road-map URLs")
    ap.add_argument(
        "direction",
        choices=("road", "world", "pixel"),
        help="road: road map -> world; world: world -> road map; pixel: show pixel address",
    )
    ap.add_argument("url", help="URL with lat and lng query parameters")
    ap.add_argument("--zoom", type=int, default=settings.out_zoom, help="Zoom of output URLs")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log conversion details")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    try:
        if args.direction == "road":
            print(road_url_to_wplace_url(args.url, args.zoom))
        elif args.direction == "world":
            for url in wplace_url_to_road_urls(args.url, args.zoom):
                print(url)
        else:
            pos = parse_wplace_url(args.url)
            print(summarize_point_detailed("point", llz_to_world_pixel(pos.lat, pos.lng)))
    except ValueError as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
