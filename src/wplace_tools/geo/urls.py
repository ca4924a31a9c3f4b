"""wplace.live URL parsing and construction."""

from __future__ import annotations

import math
import re
from urllib.parse import parse_qs, urlsplit

from wplace_tools.errors import MalformedInputError
from wplace_tools.geo.constants import WPLACE_BASE_URL
from wplace_tools.geo.models import LatLng
from wplace_tools.geo.projection import world_to_lat_lng

# Leading decimal number; trailing garbage such as "25.1abc" is ignored.
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _query_float(params: dict[str, list[str]], key: str) -> float:
    values = params.get(key)
    if not values:
        return math.nan
    match = _NUMBER_PREFIX.match(values[0])
    if match is None:
        return math.nan
    return float(match.group(0))


def parse_wplace_url(url: str) -> LatLng:
    """Extract ``lat``/``lng`` query parameters from an absolute URL.

    Raises:
        MalformedInputError: If *url* is not an absolute URL, or ``lat`` /
            ``lng`` is missing or not a finite number.
    """
    try:
        parts = urlsplit(str(url).strip())
    except ValueError as exc:
        raise MalformedInputError(f"Invalid URL: {url!r}") from exc
    if not parts.scheme or not parts.netloc:
        raise MalformedInputError(f"Invalid URL: {url!r}")

    params = parse_qs(parts.query)
    lat = _query_float(params, "lat")
    lng = _query_float(params, "lng")
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise MalformedInputError("lat / lng not found in URL")
    return LatLng(lat=lat, lng=lng)


def build_wplace_url(lat: float, lng: float, zoom: int) -> str:
    """Return ``https://wplace.live/?lat=..&lng=..&zoom=..`` for the given point."""
    return f"{WPLACE_BASE_URL}?lat={lat!r}&lng={lng!r}&zoom={int(zoom)}"


def to_wplace_url(world_x: float, world_y: float, zoom: int = 18) -> str:
    """Return the wplace URL pointing at world pixel ``(world_x, world_y)``."""
    pos = world_to_lat_lng(world_x, world_y)
    return build_wplace_url(pos.lat, pos.lng, zoom)
