from __future__ import annotations

from .matrix import (
    CLOSED_CELL,
    CoverageCell,
    CoverageMatrix,
    aggregate_matrices,
    generate_coverage_matrix,
    is_open,
    noise,
    supply_factor,
)
from .rollup import CalendarCell, WeekdayCounts, month_grid, weekday_counts, year_grid
from .severity import (
    Bucket,
    Severity,
    bucket_color,
    cell_bucket,
    cell_severity,
    classify_delta,
    relative_gap,
    severity_color,
)
from .suggest import (
    Suggestion,
    all_times_suggestion,
    priority_range_options,
    suggest_priority_ranges,
)

__all__ = [
    "CLOSED_CELL",
    "CoverageCell",
    "CoverageMatrix",
    "aggregate_matrices",
    "generate_coverage_matrix",
    "is_open",
    "noise",
    "supply_factor",
    "CalendarCell",
    "WeekdayCounts",
    "month_grid",
    "weekday_counts",
    "year_grid",
    "Bucket",
    "Severity",
    "bucket_color",
    "cell_bucket",
    "cell_severity",
    "classify_delta",
    "relative_gap",
    "severity_color",
    "Suggestion",
    "all_times_suggestion",
    "priority_range_options",
    "suggest_priority_ranges",
]
