from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Iterable, Optional, Sequence

from recruitplan.config import Config, cfg
from recruitplan.dates import days_in_range, safe_date


@dataclass
class Source:
    """
    One acquisition channel: a daily budget ceiling, a daily applicant ceiling
    (0 = unlimited) and a cost per applicant. Negative values clamp to zero.
    """

    key: str
    enabled: bool = True
    daily_cap: float = 0.0
    daily_budget: float = 0.0
    cpa: float = 0.0

    def __post_init__(self) -> None:
        self.daily_cap = max(0.0, float(self.daily_cap))
        self.daily_budget = max(0.0, float(self.daily_budget))
        self.cpa = max(0.0, float(self.cpa))

    @property
    def contributes(self) -> bool:
        return self.enabled and self.cpa > 0 and self.daily_budget > 0


def default_sources() -> list[Source]:
    """Fresh copies of the demo source table."""
    return [
        Source("indeed", enabled=True, daily_cap=40, daily_budget=300, cpa=18.43),
        Source("facebook", enabled=True, daily_cap=35, daily_budget=250, cpa=23.12),
        Source("craigslist", enabled=True, daily_cap=14, daily_budget=65, cpa=12.40),
        Source("referrals", enabled=True, daily_cap=12, daily_budget=55, cpa=6.25),
        Source("qr_posters", enabled=False, daily_cap=0, daily_budget=0, cpa=0.0),
    ]


DEFAULT_SOURCES: tuple[Source, ...] = tuple(default_sources())


@dataclass(frozen=True)
class DailyProjection:
    date: date
    by_source: dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return sum(self.by_source.values())


def round2(x: float) -> float:
    return math.floor(x * 100 + 0.5) / 100


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def applicants_per_day(source: Source) -> float:
    """Flat daily applicant rate: budget / cpa, limited by the cap when set."""
    if not source.contributes:
        return 0.0
    est = source.daily_budget / source.cpa
    return min(est, source.daily_cap) if source.daily_cap > 0 else est


def crest(i: int, n: int, k: int, config: Optional[Config] = None) -> float:
    """
    Seasonal multiplier for day ``i`` of ``n``: a single hump over the window
    plus a small wobble phase-shifted by ``k``.
    """
    C = config or cfg
    t = 0.0 if n <= 1 else i / (n - 1)
    base = C.CREST_BASE + C.CREST_HUMP * math.sin(math.pi * t)
    wobble = C.CREST_WOBBLE * math.sin(2 * math.pi * (t + k * C.CREST_PHASE_STEP))
    return max(C.CREST_MIN, min(C.CREST_MAX, base + wobble))


def phase_indices(
    sources: Sequence[Source], config: Optional[Config] = None
) -> list[int]:
    """Per-source crest phase: fixed for known keys, list position otherwise."""
    C = config or cfg
    return [C.SOURCE_PHASE_INDEX.get(s.key, pos) for pos, s in enumerate(sources)]


def project_daily_applicants(
    sources: Iterable[Source],
    start_date: Any,
    end_date: Any,
    config: Optional[Config] = None,
) -> list[DailyProjection]:
    """
    Project applicants per day and per source over ``[start_date, end_date]``.

    Dates may be ``date``/``datetime`` objects or ISO strings; malformed input
    falls back to today. An end before the start yields a single day.
    """
    srcs = list(sources)
    start = safe_date(start_date)
    n = days_in_range(start, end_date)
    rates = [applicants_per_day(s) for s in srcs]
    phases = phase_indices(srcs, config)

    series: list[DailyProjection] = []
    for i in range(n):
        by_source: dict[str, float] = {}
        for src, rate, k in zip(srcs, rates, phases):
            by_source[src.key] = round2(rate * crest(i, n, k, config))
        series.append(DailyProjection(date=start + timedelta(days=i), by_source=by_source))
    return series


def sum_projection(series: Iterable[DailyProjection]) -> int:
    """Grand total over the series, rounded to the nearest applicant."""
    return _round_half_up(sum(day.total for day in series))


def source_totals(series: Iterable[DailyProjection]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for day in series:
        for key, value in day.by_source.items():
            totals[key] = totals.get(key, 0.0) + value
    return totals


def enabled_sources(sources: Iterable[Source]) -> list[Source]:
    """Sources that actually contribute applicants."""
    return [s for s in sources if s.contributes]
