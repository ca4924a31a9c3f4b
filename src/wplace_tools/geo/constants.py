"""Fixed geometry of the wplace pixel plane and the road-map overlay."""

from __future__ import annotations

MOD_CHUNK = 4000
"""Chunk edge length in world pixels."""

MOD_TILE = 1000
"""Tile edge length in world pixels."""

ZOOM_BASE = 9
"""Zoom level at which the world-pixel plane is defined."""

SCALE = MOD_CHUNK * 2 ** ZOOM_BASE  # 2_048_000
"""Side length of the world-pixel plane."""

MAP_CHUNK = 13
"""Edge length of one road-map chunk, in road-map units."""

MAP_SCALE = MAP_CHUNK * 2 ** ZOOM_BASE  # 6656
"""Width of the whole road map expressed in world pixels."""

ROAD_MAP_RATIO = SCALE / MAP_SCALE  # ~307.69
"""World pixels per road-map pixel."""

# Top-left corner of the road map (the point mapped to world pixel 0, 0).
ORIGIN_LAT = 25.170344214459675
ORIGIN_LNG = 137.55629849677734

# Bounding box of the road map in lat/lng.
MAP_TOP_LEFT = (25.1662077952603, 137.17010709052732)
MAP_BOTTOM_RIGHT = (24.34669656479751, 138.43133755927732)

# Longitudes bracketing the strip where the road map wraps around.
WEST_INDIA_LNG = 61.171962559277304
EAST_INDIA_LNG = 89.29696255927732

WPLACE_BASE_URL = "https://wplace.live/"
