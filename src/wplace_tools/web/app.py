"""FastAPI Web application.

Run with ``uvicorn wplace_tools.web.app:app``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from wplace_tools import __version__
from wplace_tools.config import Settings
from wplace_tools.web.schemas import (
    ConvertManyResponse,
    ConvertRequest,
    ConvertResponse,
    FinishRequest,
    FinishResponse,
    HealthResponse,
    PixelResponse,
    PolylineRequest,
    PolylineResponse,
)
from wplace_tools.web.service import ToolService

load_dotenv()  # must run before Settings.from_env() reads WPLACE_* variables

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

_HERE = Path(__file__).parent

app = FastAPI(title="wplace tools", version=__version__)

templates = Jinja2Templates(directory=str(_HERE / "templates"))


def _service() -> ToolService:
    return ToolService(Settings.from_env(dotenv=False))


def _reject(exc: ValueError) -> HTTPException:
    _logger.warning("Rejected request: %s", exc)
    return HTTPException(status_code=422, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    """Render the landing page listing the available tools."""
    settings = Settings.from_env(dotenv=False)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"version": __version__, "out_zoom": settings.out_zoom},
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/pixel", response_model=PixelResponse)
def pixel(lat: float, lng: float) -> PixelResponse:
    """World pixel, chunk and tile address of a lat/lng."""
    try:
        return _service().pixel(lat, lng)
    except ValueError as exc:
        raise _reject(exc) from exc


@app.post("/api/road-to-wplace", response_model=ConvertResponse)
def road_to_wplace(req: ConvertRequest) -> ConvertResponse:
    try:
        return _service().road_to_wplace(req)
    except ValueError as exc:
        raise _reject(exc) from exc


@app.post("/api/wplace-to-road", response_model=ConvertManyResponse)
def wplace_to_road(req: ConvertRequest) -> ConvertManyResponse:
    try:
        return _service().wplace_to_road(req)
    except ValueError as exc:
        raise _reject(exc) from exc


@app.post("/api/polyline", response_model=PolylineResponse)
def polyline(req: PolylineRequest) -> PolylineResponse:
    """Plan a two-segment line between two world pixels."""
    try:
        return _service().polyline(req)
    except ValueError as exc:
        raise _reject(exc) from exc


@app.post("/api/finish", response_model=FinishResponse)
def finish(req: FinishRequest) -> FinishResponse:
    """Estimate the finish time from two progress observations."""
    try:
        return _service().finish(req)
    except ValueError as exc:
        raise _reject(exc) from exc
