"""Finish-time estimate data structure."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FinishEstimate:
    """Linear extrapolation from two (time, remaining) observations.

    ``(t1, rem1)`` is always the earlier observation.
    """

    t1: datetime
    t2: datetime
    rem1: float
    rem2: float

    minutes: float
    """Elapsed minutes between the observations (> 0)."""

    delta_remaining: float
    """Pixels painted between the observations (``rem1 - rem2`` > 0)."""

    rate_per_min: float
    """Paint rate in pixels per minute."""

    minutes_to_finish: float
    """Minutes after ``t2`` until nothing remains."""

    one_person_rate: float
    """Reference rate of a single painter in pixels per minute."""

    people: float
    """``rate_per_min`` expressed as a number of single painters."""

    finish_date: datetime
