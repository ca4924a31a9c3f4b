"""Runtime settings read from the environment (and ``.env`` via python-dotenv)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

_DEFAULT_OUT_ZOOM = 15
_DEFAULT_DETAIL_ZOOM = 18
_DEFAULT_LOG_LEVEL = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    """Tunable values that are not part of the coordinate geometry.

    Attributes
    ----------
    out_zoom:
        Zoom level written into URLs produced by the road-map conversions.
    detail_zoom:
        Zoom level for URLs built directly from world pixels.
    log_level:
        Logging level name used by the command-line scripts.
    """

    out_zoom: int = _DEFAULT_OUT_ZOOM
    detail_zoom: int = _DEFAULT_DETAIL_ZOOM
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> Settings:
        """Build settings from ``WPLACE_*`` environment variables.

        Args:
            dotenv: Load ``.env`` from the working directory first.
        """
        if dotenv:
            load_dotenv()
        return cls(
            out_zoom=_env_int("WPLACE_OUT_ZOOM", _DEFAULT_OUT_ZOOM),
            detail_zoom=_env_int("WPLACE_DETAIL_ZOOM", _DEFAULT_DETAIL_ZOOM),
            log_level=os.environ.get("WPLACE_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper(),
        )
