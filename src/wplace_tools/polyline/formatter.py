"""Plain-text summaries of plans and pixel positions."""

from __future__ import annotations

from wplace_tools.geo.constants import MAP_CHUNK, MOD_CHUNK, MOD_TILE
from wplace_tools.geo.models import PixelInfo
from wplace_tools.geo.projection import to_local
from wplace_tools.polyline.models import Point, PolylinePlan
from wplace_tools.polyline.planner import round_half_up


def _map_coords(world_x: float, world_y: float) -> str:
    c = to_local(world_x, world_y, MOD_CHUNK)
    map_x = c.x * MAP_CHUNK / MOD_CHUNK
    map_y = c.y * MAP_CHUNK / MOD_CHUNK
    return f"({map_x:.3f}, {map_y:.3f})"


def _format_vertex(label: str, pt: Point) -> list[str]:
    c = to_local(pt.x, pt.y, MOD_CHUNK)
    t = to_local(pt.x, pt.y, MOD_TILE)
    return [
        f"<{label}>",
        f"world: ({pt.x}, {pt.y})",
        f"chunk: [{c.chunk_x}, {c.chunk_y}] ({c.x}, {c.y})",
        f"tile:  [{t.chunk_x}, {t.chunk_y}] ({t.x}, {t.y})",
    ]


def build_debug_text(plan: PolylinePlan) -> str:
    """Describe a two-segment plan: split lengths, vertices and end error."""
    if plan.bend is None:
        raise ValueError("Vertical plans have no bend point to describe")

    start, bend, end = plan.polyline_world
    lines = [
        f"distance along x at slope a: {plan.na}",
        f"distance along x at slope b: {plan.nb}",
        "",
        *_format_vertex("start", start),
        "",
        *_format_vertex("bend", bend),
        "",
        *_format_vertex("end", end),
        "",
        f"end error (x: {round_half_up(plan.error_px.dx)}, y: {round_half_up(plan.error_px.dy)})",
    ]
    return "\n".join(lines)


def summarize_map(info: PixelInfo) -> str:
    """Road-map coordinate of *info* inside its chunk, three decimals."""
    return _map_coords(info.world_x, info.world_y)


def summarize_point_detailed(label: str, info: PixelInfo) -> str:
    """Multi-line world / chunk / tile / road-map description of one point."""
    c = info.chunk
    t = info.tile
    return "\n".join([
        f"<{label}>",
        f"world(px): ({round_half_up(info.world_x)}, {round_half_up(info.world_y)})",
        f"chunk: [{c.chunk_x}, {c.chunk_y}] ({c.x}, {c.y})",
        f"tile:  [{t.chunk_x}, {t.chunk_y}] ({t.x}, {t.y})",
        f"map: {_map_coords(info.world_x, info.world_y)}",
    ])
