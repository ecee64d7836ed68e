from __future__ import annotations

from typing import Optional

from recruitplan.campaign import Campaign, demo_campaigns, sort_newest_first
from recruitplan.config import Config, cfg
from recruitplan.coverage import generate_coverage_matrix, suggest_priority_ranges
from recruitplan.projection import sum_projection
from recruitplan.reporting import Reporter
from recruitplan.result_types import DashboardResult


def run_dashboard(
    config: Config | None = None,
    role: Optional[str] = None,
    week_offset: int = 0,
    location: Optional[str] = None,
    campaign: Campaign | None = None,
    reporter: Reporter | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
) -> DashboardResult:
    """
    Compute the planning view for one role/location/week and, optionally, the
    applicant projection for a campaign.

    Parameters
    ----------
    config:
        The configuration for the run. Defaults to `recruitplan.config.cfg`.
    role:
        Role to plan for; `None` aggregates across every role in the catalog.
    week_offset:
        Signed offset from the current week.
    location:
        Optional location code used to bias supply towards its targets.
    campaign:
        Campaign whose sources and window drive the projection. Its time
        ranges (if any) are drawn on the heatmap.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and none is
        given, the default `Reporter` is used.
    validate_config:
        Toggle to run `Config.validate()` first.
    enable_reporting:
        When False, skips text/plot/CSV/PDF output entirely.

    Returns
    -------
    DashboardResult
        Matrix, ranked suggestions and (when a campaign is given) the daily
        projection with its rounded grand total.
    """
    cfg_obj = config or cfg
    if validate_config:
        cfg_obj.validate()

    matrix = generate_coverage_matrix(role, week_offset, location, cfg_obj)
    suggestions = suggest_priority_ranges(matrix, config=cfg_obj)

    result = DashboardResult(
        role=role,
        week_offset=week_offset,
        location=location,
        matrix=matrix,
        suggestions=suggestions,
        campaign=campaign,
    )
    if campaign is not None:
        result.projection = campaign.projection(config=cfg_obj)
        result.total_applicants = sum_projection(result.projection)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)
    if active_reporter is not None:
        active_reporter.report(result)

    return result


def main() -> DashboardResult:
    """Demo run: default role, newest demo campaign."""
    campaign = sort_newest_first(demo_campaigns())[0]
    location = campaign.locations[0] if campaign.locations else None
    return run_dashboard(
        config=cfg,
        role=cfg.DEFAULT_ROLE,
        location=location,
        campaign=campaign,
        reporter=Reporter(cfg),
    )


if __name__ == "__main__":
    main()
