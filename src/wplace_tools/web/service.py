"""ToolService: adapts the coordinate tools to Web API schemas."""

from __future__ import annotations

import logging
from dataclasses import asdict

from wplace_tools.config import Settings
from wplace_tools.geo.models import LocalCoord
from wplace_tools.geo.projection import llz_to_world_pixel
from wplace_tools.geo.roadmap import road_url_to_wplace_url, wplace_url_to_road_urls
from wplace_tools.geo.urls import build_wplace_url
from wplace_tools.polyline.formatter import build_debug_text, summarize_map
from wplace_tools.polyline.models import Point
from wplace_tools.polyline.planner import plan_polyline_world
from wplace_tools.polyline.slopes import format_slope_signed
from wplace_tools.progress.estimator import (
    calc_finish_from_two_points,
    format_datetime_ymdhm,
    read_int_like,
)
from wplace_tools.web.schemas import (
    ConvertManyResponse,
    ConvertRequest,
    ConvertResponse,
    FinishRequest,
    FinishResponse,
    LocalCoordModel,
    PixelResponse,
    PointModel,
    PolylineRequest,
    PolylineResponse,
)

_logger = logging.getLogger(__name__)


def _local(c: LocalCoord) -> LocalCoordModel:
    return LocalCoordModel(**asdict(c))


def _point(p: Point) -> PointModel:
    return PointModel(x=p.x, y=p.y)


def _count(value: int | str) -> int:
    return value if isinstance(value, int) else read_int_like(value)


class ToolService:
    """Runs the tools on behalf of the HTTP endpoints.

    Parameters
    ----------
    settings:
        Zoom defaults.  Loaded from the environment when omitted.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings.from_env()

    def pixel(self, lat: float, lng: float) -> PixelResponse:
        info = llz_to_world_pixel(lat, lng)
        return PixelResponse(
            lat=lat,
            lng=lng,
            world_x=info.world_x,
            world_y=info.world_y,
            chunk=_local(info.chunk),
            tile=_local(info.tile),
            map=summarize_map(info),
            url=build_wplace_url(lat, lng, self._settings.detail_zoom),
        )

    def road_to_wplace(self, req: ConvertRequest) -> ConvertResponse:
        zoom = req.zoom if req.zoom is not None else self._settings.out_zoom
        url = road_url_to_wplace_url(req.url, zoom)
        _logger.info("Converted road URL to %s", url)
        return ConvertResponse(url=url)

    def wplace_to_road(self, req: ConvertRequest) -> ConvertManyResponse:
        zoom = req.zoom if req.zoom is not None else self._settings.out_zoom
        urls = wplace_url_to_road_urls(req.url, zoom)
        _logger.info("Found %d road-map candidate(s)", len(urls))
        return ConvertManyResponse(urls=urls)

    def polyline(self, req: PolylineRequest) -> PolylineResponse:
        plan = plan_polyline_world(
            Point(req.start.x, req.start.y),
            Point(req.end.x, req.end.y),
            order=req.order,
            round_to_int=req.round_to_int,
        )
        nan = float("nan")
        return PolylineResponse(
            a=plan.a,
            b=plan.b,
            a_label=format_slope_signed(plan.a if plan.a is not None else nan),
            b_label=format_slope_signed(plan.b if plan.b is not None else nan),
            na=plan.na,
            nb=plan.nb,
            bend=_point(plan.bend) if plan.bend is not None else None,
            planned_end=_point(plan.planned_end),
            polyline_world=[_point(p) for p in plan.polyline_world],
            polyline_local=[_local(c) for c in plan.polyline_local],
            error_dx=plan.error_px.dx,
            error_dy=plan.error_px.dy,
            debug_text="" if plan.is_vertical else build_debug_text(plan),
        )

    def finish(self, req: FinishRequest) -> FinishResponse:
        est = calc_finish_from_two_points(
            req.dt1, _count(req.rem1), req.dt2, _count(req.rem2)
        )
        _logger.info(
            "Estimated %.3f px/min, finish at %s", est.rate_per_min, est.finish_date
        )
        return FinishResponse(
            t1=est.t1.isoformat(timespec="minutes"),
            t2=est.t2.isoformat(timespec="minutes"),
            rem1=est.rem1,
            rem2=est.rem2,
            minutes=est.minutes,
            delta_remaining=est.delta_remaining,
            rate_per_min=est.rate_per_min,
            minutes_to_finish=est.minutes_to_finish,
            people=est.people,
            finish_date=est.finish_date.isoformat(timespec="minutes"),
            finish_date_text=format_datetime_ymdhm(est.finish_date),
        )
