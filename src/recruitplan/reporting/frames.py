from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from recruitplan.config import Config
from recruitplan.coverage.matrix import CoverageMatrix
from recruitplan.coverage.rollup import WeekdayCounts
from recruitplan.coverage.severity import (
    SEVERITY_ORDER,
    Severity,
    cell_bucket,
    cell_severity,
)
from recruitplan.projection import DailyProjection
from recruitplan.timeranges import DAY_NAMES, slot_to_time

MATRIX_COLUMNS = [
    "day",
    "weekday",
    "slot",
    "time",
    "demand",
    "supply",
    "closed",
    "severity",
    "bucket",
]


def matrix_to_frame(
    matrix: CoverageMatrix, config: Optional[Config] = None
) -> pd.DataFrame:
    """Long table with one row per (day, slot) cell."""
    rows = []
    for d, row in enumerate(matrix):
        for s, cell in enumerate(row):
            bucket = cell_bucket(cell, config)
            severity = (
                Severity.CLOSED
                if cell.closed
                else cell_severity(cell.demand, cell.supply, config)
            )
            rows.append(
                {
                    "day": d,
                    "weekday": DAY_NAMES[d],
                    "slot": s,
                    "time": slot_to_time(s),
                    "demand": cell.demand,
                    "supply": cell.supply,
                    "closed": cell.closed,
                    "severity": severity.value,
                    "bucket": bucket.value if bucket is not None else None,
                }
            )
    return pd.DataFrame(rows, columns=MATRIX_COLUMNS)


def severity_codes(
    matrix: CoverageMatrix, config: Optional[Config] = None
) -> np.ndarray:
    """
    (slots, days) array of indices into SEVERITY_ORDER, NaN for closed cells.
    Laid out slot-major so it renders with time running down the y-axis.
    """
    days = len(matrix)
    slots = len(matrix[0]) if days else 0
    codes = np.full((slots, days), np.nan, dtype=float)
    index = {sev: i for i, sev in enumerate(SEVERITY_ORDER)}
    for d, row in enumerate(matrix):
        for s, cell in enumerate(row):
            if cell.closed:
                continue
            sev = cell_severity(cell.demand, cell.supply, config)
            if sev is not Severity.CLOSED:
                codes[s, d] = index[sev]
    return codes


def weekday_counts_frame(counts: Sequence[WeekdayCounts]) -> pd.DataFrame:
    rows = []
    for d, c in enumerate(counts):
        g, y, r = c.percentages()
        rows.append(
            {
                "weekday": DAY_NAMES[d],
                "open": c.open,
                "green": c.green,
                "yellow": c.yellow,
                "red": c.red,
                "green_pct": g,
                "yellow_pct": y,
                "red_pct": r,
            }
        )
    return pd.DataFrame(rows)


def projection_to_frame(series: Iterable[DailyProjection]) -> pd.DataFrame:
    """Wide table: ``date`` + one column per source + ``total``."""
    rows = []
    for day in series:
        row: dict[str, object] = {"date": pd.Timestamp(day.date)}
        row.update(day.by_source)
        row["total"] = day.total
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=["date", "total"])
    df = pd.DataFrame(rows)
    source_cols = [c for c in df.columns if c not in ("date", "total")]
    df[source_cols] = df[source_cols].fillna(0.0)
    return df
