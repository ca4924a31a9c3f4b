"""Finish-time estimation."""

from wplace_tools.progress.estimator import (
    ONE_PERSON_RATE,
    calc_finish_from_two_points,
    format_datetime_ymdhm,
    parse_datetime_local,
    read_int_like,
)
from wplace_tools.progress.models import FinishEstimate

__all__ = [
    "ONE_PERSON_RATE",
    "FinishEstimate",
    "calc_finish_from_two_points",
    "format_datetime_ymdhm",
    "parse_datetime_local",
    "read_int_like",
]
