from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

from recruitplan.config import Config, cfg
from recruitplan.timeranges import DAY_NAMES, TimeRange, slot_to_time

from .matrix import CoverageMatrix
from .severity import Bucket, classify_delta, relative_gap

WEEKDAYS = (0, 1, 2, 3, 4)
WEEKEND = (5, 6)
ALL_DAYS = (0, 1, 2, 3, 4, 5, 6)


@dataclass(frozen=True)
class Suggestion:
    """A suggested priority recruiting window."""

    start: str
    end: str
    days: tuple[int, ...]
    label: str
    severity: Optional[float]  # mean under-staffing magnitude; None if unranked

    def to_time_range(self) -> TimeRange:
        return TimeRange(start=self.start, end=self.end, days=self.days)


def label_days(days: tuple[int, ...]) -> str:
    if days == ALL_DAYS:
        return "All Week"
    if days == WEEKDAYS:
        return "Mon-Fri"
    if days == WEEKEND:
        return "Weekend"
    consecutive = all(b == a + 1 for a, b in zip(days, days[1:]))
    if len(days) > 1 and consecutive:
        return f"{DAY_NAMES[days[0]]}-{DAY_NAMES[days[-1]]}"
    return ", ".join(DAY_NAMES[d] for d in days)


def all_times_suggestion(config: Optional[Config] = None) -> Suggestion:
    C = config or cfg
    return Suggestion(
        start=C.ALL_TIMES_START,
        end=C.ALL_TIMES_END,
        days=ALL_DAYS,
        label="All Times",
        severity=None,
    )


def _close_run(
    day: int, run: list[tuple[int, float]], min_slots: int
) -> Optional[tuple[int, int, int, float]]:
    """(day, first, last, mean) for a finished run, or None if it is too short."""
    if len(run) < min_slots:
        return None
    mean = sum(sev for _, sev in run) / len(run)
    return (day, run[0][0], run[-1][0], mean)


def _under_runs(
    matrix: CoverageMatrix, C: Config
) -> list[tuple[int, int, int, float]]:
    """Per day, gap-free runs of under-staffed slots as (day, first, last, mean)."""
    runs: list[tuple[int, int, int, float]] = []
    for d, row in enumerate(matrix):
        current: list[tuple[int, float]] = []
        for s, cell in enumerate(row):
            delta = None if cell.closed else relative_gap(cell.demand, cell.supply)
            if delta is not None and classify_delta(delta, C) is Bucket.RED:
                current.append((s, -delta))
                continue
            run = _close_run(d, current, C.MIN_SUGGESTION_SLOTS)
            if run is not None:
                runs.append(run)
            current = []
        run = _close_run(d, current, C.MIN_SUGGESTION_SLOTS)
        if run is not None:
            runs.append(run)
    return runs


def suggest_priority_ranges(
    matrix: CoverageMatrix,
    max_suggestions: Optional[int] = None,
    config: Optional[Config] = None,
) -> list[Suggestion]:
    """
    Rank the most under-staffed recurring windows of at least
    ``MIN_SUGGESTION_SLOTS`` half-hours.

    Runs with identical bounds on different days merge into one suggestion
    whose severity is the mean of the merged runs' means.
    """
    C = config or cfg
    limit = C.MAX_SUGGESTIONS if max_suggestions is None else max_suggestions
    if limit <= 0:
        return []

    merged: dict[tuple[int, int], list[tuple[int, float]]] = defaultdict(list)
    for day, first, last, mean in _under_runs(matrix, C):
        merged[(first, last)].append((day, mean))

    suggestions: list[Suggestion] = []
    for (first, last), entries in merged.items():
        days = tuple(sorted({d for d, _ in entries}))
        severity = sum(m for _, m in entries) / len(entries)
        start, end = slot_to_time(first), slot_to_time(last + 1)
        suggestions.append(
            Suggestion(
                start=start,
                end=end,
                days=days,
                label=f"{label_days(days)} {start}-{end}",
                severity=severity,
            )
        )

    suggestions.sort(key=lambda x: (-(x.severity or 0.0), x.start, x.days))
    return suggestions[:limit]


def priority_range_options(
    matrix: CoverageMatrix,
    max_suggestions: Optional[int] = None,
    config: Optional[Config] = None,
) -> list[Suggestion]:
    """Ranked suggestions followed by the constant "All Times" option."""
    ranked = suggest_priority_ranges(matrix, max_suggestions, config)
    return ranked + [all_times_suggestion(config)]
