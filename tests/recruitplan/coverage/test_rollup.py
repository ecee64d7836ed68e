from __future__ import annotations

from datetime import date

import pytest

from recruitplan.coverage.matrix import CLOSED_CELL, CoverageCell, CoverageMatrix
from recruitplan.coverage.rollup import (
    CALENDAR_CELLS,
    WeekdayCounts,
    month_grid,
    weekday_counts,
    year_grid,
)


def make_matrix(closed_days: tuple[int, ...] = ()) -> CoverageMatrix:
    """Each open day: 4 green, 3 yellow and 3 red half-hours, rest closed."""
    pattern = (
        [CoverageCell(demand=10, supply=12)] * 4
        + [CoverageCell(demand=10, supply=10)] * 3
        + [CoverageCell(demand=10, supply=8)] * 3
    )
    matrix: CoverageMatrix = []
    for d in range(7):
        if d in closed_days:
            matrix.append([CLOSED_CELL] * 48)
        else:
            matrix.append(pattern + [CLOSED_CELL] * (48 - len(pattern)))
    return matrix


def test_weekday_counts_split_open_slots_by_bucket():
    counts = weekday_counts(make_matrix(closed_days=(6,)))
    assert counts[0] == WeekdayCounts(green=4, yellow=3, red=3, open=10)
    assert counts[6] == WeekdayCounts(green=0, yellow=0, red=0, open=0)


def test_percentages_sum_to_hundred():
    g, y, r = WeekdayCounts(green=4, yellow=3, red=3, open=10).percentages()
    assert (g, y, r) == pytest.approx((40.0, 30.0, 30.0))
    assert g + y + r == pytest.approx(100.0)
    assert WeekdayCounts().percentages() == (0.0, 0.0, 0.0)


def test_month_grid_layout_november_2025():
    # Nov 1st 2025 is a Saturday -> five leading empty cells
    cells = month_grid(make_matrix(), 2025, 10)
    assert len(cells) == CALENDAR_CELLS
    assert [c.kind for c in cells[:5]] == ["empty"] * 5
    assert cells[5].day == 1 and cells[5].date == date(2025, 11, 1)
    assert cells[5 + 29].day == 30
    assert all(c.kind == "empty" for c in cells[5 + 30 :])
    stripes = [c for c in cells if c.kind == "stripe"]
    assert len(stripes) == 30
    for c in stripes:
        assert c.green_pct + c.yellow_pct + c.red_pct == pytest.approx(100.0)


def test_month_grid_marks_closed_weekdays():
    cells = month_grid(make_matrix(closed_days=(6,)), 2025, 10)
    sundays = [c for c in cells if c.date is not None and c.date.weekday() == 6]
    assert sundays and all(c.kind == "closed" for c in sundays)
    assert all(c.label for c in sundays)


def test_same_weekday_dates_share_a_stripe():
    cells = month_grid(make_matrix(), 2025, 10)
    mondays = {
        (c.green_pct, c.yellow_pct, c.red_pct)
        for c in cells
        if c.date is not None and c.date.weekday() == 0
    }
    assert len(mondays) == 1


def test_year_grid_has_twelve_months():
    grid = year_grid(make_matrix(), 2024)
    assert len(grid) == 12
    # 2024 is a leap year
    feb_days = [c.day for c in grid[1] if c.kind != "empty"]
    assert feb_days[-1] == 29
    assert grid[0][0].kind == "stripe"  # Jan 1st 2024 is a Monday


def test_month_grid_rolls_over_year_boundaries():
    m = make_matrix()
    assert month_grid(m, 2025, 12) == month_grid(m, 2026, 0)
    assert month_grid(m, 2025, -1) == month_grid(m, 2024, 11)
    cells = month_grid(m, 2025, 12)
    assert cells[3].date == date(2026, 1, 1)  # Thursday
    assert [c.kind for c in cells[:3]] == ["empty"] * 3
