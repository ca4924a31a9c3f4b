"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class LocalCoordModel(BaseModel):
    chunk_x: int
    chunk_y: int
    x: int
    y: int


class PixelResponse(BaseModel):
    lat: float
    lng: float
    world_x: float
    world_y: float
    chunk: LocalCoordModel
    tile: LocalCoordModel
    map: str
    url: str


class ConvertRequest(BaseModel):
    url: str
    zoom: int | None = None


class ConvertResponse(BaseModel):
    url: str


class ConvertManyResponse(BaseModel):
    urls: list[str]


class PointModel(BaseModel):
    x: float
    y: float


class PolylineRequest(BaseModel):
    start: PointModel
    end: PointModel
    order: Literal["auto", "a-first", "b-first"] = "auto"
    round_to_int: bool = True


class PolylineResponse(BaseModel):
    a: float | None
    b: float | None
    a_label: str
    b_label: str
    na: float
    nb: float
    bend: PointModel | None
    planned_end: PointModel
    polyline_world: list[PointModel]
    polyline_local: list[LocalCoordModel]
    error_dx: float
    error_dy: float
    debug_text: str


class FinishRequest(BaseModel):
    dt1: str
    rem1: int | str
    dt2: str
    rem2: int | str


class FinishResponse(BaseModel):
    t1: str
    t2: str
    rem1: float
    rem2: float
    minutes: float
    delta_remaining: float
    rate_per_min: float
    minutes_to_finish: float
    people: float
    finish_date: str
    finish_date_text: str
