"""Coordinate tools for wplace pixel art: projection, road-map conversion,
slope-restricted line planning and finish-time estimation."""

__version__ = "0.1.0"
