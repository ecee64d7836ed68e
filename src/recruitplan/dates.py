"""Local-calendar date helpers.

Dates are always handled as calendar days in the local calendar. An ISO string
such as ``"2025-11-01"`` is November 1st no matter which timezone the process
runs in; nothing here converts through UTC.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional

MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_ISO_DATE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")


@dataclass(frozen=True)
class YearMonth:
    """A calendar month; ``month`` is 0-based (0 = January)."""

    year: int
    month: int


def _today(today: Optional[date]) -> date:
    return today if today is not None else date.today()


def parse_local_date(value: Any) -> date:
    """
    Parse a date-like value into a local calendar ``date``.

    Accepts ``date``, ``datetime`` (time part dropped) or a string starting with
    ``YYYY-MM-DD``; anything after the date part is ignored.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        match = _ISO_DATE.match(value)
        if match is None:
            raise ValueError(f"Invalid ISO date string: {value!r}")
        year, month, day = (int(g) for g in match.groups())
        return date(year, month, day)
    raise TypeError(f"Expected a date, datetime or ISO string; got {type(value)!r}")


def safe_date(value: Any, today: Optional[date] = None) -> date:
    """Like ``parse_local_date`` but falls back to today for malformed input."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            # epoch milliseconds, read in local time
            return datetime.fromtimestamp(value / 1000).date()
        except (OverflowError, OSError, ValueError):
            return _today(today)
    try:
        return parse_local_date(value)
    except (TypeError, ValueError):
        return _today(today)


def safe_iso(value: Any, today: Optional[date] = None) -> str:
    """Return ``YYYY-MM-DD`` for ``value``, substituting today when it is malformed."""
    return safe_date(value, today).isoformat()


def format_date(value: Any, today: Optional[date] = None) -> str:
    """Short display label, e.g. ``"Nov 1"``; malformed input shows today."""
    d = safe_date(value, today)
    return f"{MONTH_ABBR[d.month - 1]} {d.day}"


def format_month(year: int, month: int) -> str:
    """Month header label, e.g. ``"November 2025"``; ``month`` is 0-based."""
    ym = roll_month(year, month, 0)
    return f"{MONTH_NAMES[ym.month]} {ym.year}"


def roll_month(year: int, month: int, delta: int) -> YearMonth:
    """Move ``delta`` months from (year, 0-based month), rolling over years."""
    total = year * 12 + month + delta
    return YearMonth(year=total // 12, month=total % 12)


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def monday_of(offset_weeks: int = 0, today: Optional[date] = None) -> date:
    """Monday of the current week shifted by ``offset_weeks``."""
    now = _today(today)
    return now - timedelta(days=now.weekday()) + timedelta(weeks=offset_weeks)


def week_offset_for(target: Any, today: Optional[date] = None) -> int:
    """Week offset (relative to the current week) of the week containing ``target``."""
    target_monday = monday_of(0, safe_date(target, today))
    base_monday = monday_of(0, today)
    return (target_monday - base_monday).days // 7


def days_in_range(start: Any, end: Any, today: Optional[date] = None) -> int:
    """
    Inclusive day count between two dates, never less than 1. Malformed
    bounds count as today; an end before the start gives a single day.
    """
    s = safe_date(start, today)
    e = safe_date(end, today)
    return max(1, max(0, (e - s).days) + 1)
