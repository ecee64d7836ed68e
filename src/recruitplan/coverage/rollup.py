from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional

from recruitplan.config import Config
from recruitplan.dates import roll_month

from .matrix import CoverageMatrix
from .severity import Bucket, cell_bucket

CellKind = Literal["empty", "closed", "stripe"]

CALENDAR_CELLS = 42  # 6 Monday-first weeks


@dataclass(frozen=True)
class WeekdayCounts:
    """Open half-hours of one weekday split by good/ok/bad bucket."""

    green: int = 0
    yellow: int = 0
    red: int = 0
    open: int = 0

    def percentages(self) -> tuple[float, float, float]:
        total = self.green + self.yellow + self.red
        if not total:
            return (0.0, 0.0, 0.0)
        return (
            100.0 * self.green / total,
            100.0 * self.yellow / total,
            100.0 * self.red / total,
        )


@dataclass(frozen=True)
class CalendarCell:
    kind: CellKind
    day: Optional[int] = None
    date: Optional[date] = None
    green_pct: float = 0.0
    yellow_pct: float = 0.0
    red_pct: float = 0.0

    @property
    def label(self) -> str:
        return str(self.day) if self.day is not None else ""


def weekday_counts(
    matrix: CoverageMatrix, config: Optional[Config] = None
) -> list[WeekdayCounts]:
    """Count each weekday's open slots per bucket."""
    out: list[WeekdayCounts] = []
    for row in matrix:
        green = yellow = red = n_open = 0
        for cell in row:
            bucket = cell_bucket(cell, config)
            if bucket is None:
                continue
            n_open += 1
            if bucket is Bucket.GREEN:
                green += 1
            elif bucket is Bucket.RED:
                red += 1
            else:
                yellow += 1
        out.append(WeekdayCounts(green=green, yellow=yellow, red=red, open=n_open))
    return out


def _month_cells(
    counts: list[WeekdayCounts], year: int, month: int
) -> list[CalendarCell]:
    # out-of-range months roll into the neighbouring years
    ym = roll_month(year, month, 0)
    year, month = ym.year, ym.month + 1
    first_weekday, last_day = calendar.monthrange(year, month)
    cells: list[CalendarCell] = []
    for idx in range(CALENDAR_CELLS):
        day_num = idx - first_weekday + 1
        if day_num < 1 or day_num > last_day:
            cells.append(CalendarCell(kind="empty"))
            continue
        dt = date(year, month, day_num)
        c = counts[dt.weekday()] if dt.weekday() < len(counts) else None
        if c is None or c.open == 0:
            cells.append(CalendarCell(kind="closed", day=day_num, date=dt))
            continue
        g, y, r = c.percentages()
        cells.append(
            CalendarCell(
                kind="stripe",
                day=day_num,
                date=dt,
                green_pct=g,
                yellow_pct=y,
                red_pct=r,
            )
        )
    return cells


def month_grid(
    matrix: CoverageMatrix, year: int, month: int, config: Optional[Config] = None
) -> list[CalendarCell]:
    """
    Month view as 42 Monday-first calendar cells. ``month`` is 0-based and
    rolls over, so ``(2025, 12)`` is January 2026.

    The model is weekday-periodic, so every date shares its weekday's stripe.
    """
    return _month_cells(weekday_counts(matrix, config), year, month)


def year_grid(
    matrix: CoverageMatrix, year: int, config: Optional[Config] = None
) -> list[list[CalendarCell]]:
    counts = weekday_counts(matrix, config)
    return [_month_cells(counts, year, m) for m in range(12)]
