"""Finish-time estimation from two progress observations."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from wplace_tools.errors import DomainViolationError, MalformedInputError
from wplace_tools.progress.models import FinishEstimate

ONE_PERSON_RATE = 20 / 9
"""Pixels per minute one painter sustains (one pixel every 27 s)."""

_DATETIME_LOCAL = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})$")
_DIGITS = re.compile(r"^\d+$")


def parse_datetime_local(value: str) -> datetime:
    """Parse an HTML ``datetime-local`` value (``YYYY-MM-DDTHH:MM``) as naive local time.

    Raises:
        MalformedInputError: On a wrong shape or a date that does not exist.
    """
    m = _DATETIME_LOCAL.match(str(value).strip())
    if not m:
        raise MalformedInputError("Date is missing or not in YYYY-MM-DDTHH:MM form")
    year, month, day, hour, minute = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError as exc:
        raise MalformedInputError(f"Date does not exist: {value!r}") from exc


def read_int_like(value: str) -> int:
    """Parse ``"350,000"`` or ``"350000"`` into an int.

    Raises:
        MalformedInputError: If anything other than digits and commas is present.
    """
    s = str(value).replace(",", "").strip()
    if not _DIGITS.match(s):
        raise MalformedInputError(f"Not a whole number: {value!r}")
    return int(s)


def format_datetime_ymdhm(dt: datetime) -> str:
    """Render *dt* as ``YYYY/MM/DD HH:MM``."""
    return dt.strftime("%Y/%m/%d %H:%M")


def _as_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            raise MalformedInputError(f"Only naive local times are accepted: {value!r}")
        return value
    return parse_datetime_local(value)


def _check_remaining(value: float, which: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInputError(f"Remaining count {which} is invalid: {value!r}")
    if not math.isfinite(value) or value < 0:
        raise MalformedInputError(f"Remaining count {which} is invalid: {value!r}")
    return value


def calc_finish_from_two_points(
    dt1: datetime | str,
    rem1: float,
    dt2: datetime | str,
    rem2: float,
) -> FinishEstimate:
    """Estimate when painting finishes from two (time, remaining) observations.

    The observations may be passed in either order.  Timestamps are
    naive ``datetime`` objects or ``datetime-local`` strings; both are treated
    as local times.

    Raises:
        MalformedInputError: A count is negative/non-finite, a date is malformed,
            or a timezone-aware ``datetime`` is passed.
        DomainViolationError: The timestamps are equal, the remaining count
            went up, it did not change, or the finish date is past year 9999.
    """
    rem1 = _check_remaining(rem1, 1)
    rem2 = _check_remaining(rem2, 2)
    ta = _as_datetime(dt1)
    tb = _as_datetime(dt2)

    # Keep each count paired with its own timestamp.
    if tb < ta:
        t1, r1, t2, r2 = tb, rem2, ta, rem1
    else:
        t1, r1, t2, r2 = ta, rem1, tb, rem2

    minutes = (t2 - t1).total_seconds() / 60
    if minutes <= 0:
        raise DomainViolationError("The two dates are identical (0 minutes apart)")

    delta_remaining = r1 - r2
    if delta_remaining < 0:
        raise DomainViolationError(
            "Remaining count increased (the later observation has more left); check the input"
        )
    if delta_remaining == 0:
        raise DomainViolationError("No progress: the remaining count did not change")

    rate_per_min = delta_remaining / minutes
    minutes_to_finish = r2 / rate_per_min
    try:
        finish_date = t2 + timedelta(minutes=minutes_to_finish)
    except OverflowError as exc:
        raise DomainViolationError("Finish date is too far in the future") from exc

    return FinishEstimate(
        t1=t1,
        t2=t2,
        rem1=r1,
        rem2=r2,
        minutes=minutes,
        delta_remaining=delta_remaining,
        rate_per_min=rate_per_min,
        minutes_to_finish=minutes_to_finish,
        one_person_rate=ONE_PERSON_RATE,
        people=rate_per_min / ONE_PERSON_RATE,
        finish_date=finish_date,
    )
