from __future__ import annotations

from datetime import date

import pytest

from recruitplan.config import Config
from recruitplan.projection import (
    DailyProjection,
    Source,
    applicants_per_day,
    crest,
    default_sources,
    enabled_sources,
    project_daily_applicants,
    source_totals,
    sum_projection,
)


@pytest.mark.parametrize(
    "source",
    [
        Source("off", enabled=False, daily_budget=100, cpa=10),
        Source("free", enabled=True, daily_budget=100, cpa=0),
        Source("broke", enabled=True, daily_budget=0, cpa=10),
    ],
)
def test_non_contributing_sources_project_zero(source):
    series = project_daily_applicants([source], "2025-11-01", "2025-11-30")
    assert all(day.by_source[source.key] == 0 for day in series)


def test_negative_inputs_clamp_to_zero():
    src = Source("neg", daily_cap=-1, daily_budget=-5, cpa=-2)
    assert (src.daily_cap, src.daily_budget, src.cpa) == (0.0, 0.0, 0.0)
    assert applicants_per_day(src) == 0.0


def test_cap_limits_the_daily_rate():
    assert applicants_per_day(Source("a", daily_budget=300, cpa=10)) == 30
    assert applicants_per_day(Source("a", daily_cap=12, daily_budget=300, cpa=10)) == 12


def test_series_length_is_inclusive():
    sources = default_sources()
    assert len(project_daily_applicants(sources, "2025-11-01", "2025-11-01")) == 1
    week = project_daily_applicants(sources, "2025-11-01", "2025-11-07")
    assert len(week) == 7
    assert week[0].date == date(2025, 11, 1)
    assert week[-1].date == date(2025, 11, 7)


def test_end_before_start_yields_one_day():
    series = project_daily_applicants(default_sources(), "2025-11-10", "2025-11-01")
    assert len(series) == 1


def test_every_source_is_reported():
    series = project_daily_applicants(default_sources(), "2025-11-01", "2025-11-03")
    keys = {s.key for s in default_sources()}
    assert all(set(day.by_source) == keys for day in series)
    assert all(day.by_source["qr_posters"] == 0 for day in series)


def test_more_budget_never_projects_fewer_applicants():
    low = project_daily_applicants(
        [Source("x", daily_budget=100, cpa=10)], "2025-11-01", "2025-11-30"
    )
    high = project_daily_applicants(
        [Source("x", daily_budget=150, cpa=10)], "2025-11-01", "2025-11-30"
    )
    for a, b in zip(low, high):
        assert b.by_source["x"] >= a.by_source["x"]


def test_crest_stays_within_bounds():
    c = Config()
    for n in (1, 2, 7, 30, 90):
        for k in range(5):
            for i in range(n):
                assert c.CREST_MIN <= crest(i, n, k, c) <= c.CREST_MAX


def test_crest_peaks_mid_window():
    assert crest(15, 31, 0) > crest(0, 31, 0)
    assert crest(15, 31, 0) > crest(30, 31, 0)


def test_values_are_rounded_to_cents():
    series = project_daily_applicants(default_sources(), "2025-11-01", "2025-11-07")
    for day in series:
        for value in day.by_source.values():
            assert round(value, 2) == value


def test_sum_projection_rounds_grand_total():
    series = [
        DailyProjection(date(2025, 11, 1), {"a": 1.25, "b": 0.5}),
        DailyProjection(date(2025, 11, 2), {"a": 0.75}),
    ]
    assert sum_projection(series) == 3
    assert sum_projection([]) == 0
    assert source_totals(series) == {"a": 2.0, "b": 0.5}


def test_enabled_sources_filters_non_contributors():
    keys = [s.key for s in enabled_sources(default_sources())]
    assert keys == ["indeed", "facebook", "craigslist", "referrals"]
