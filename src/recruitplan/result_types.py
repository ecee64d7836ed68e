# recruitplan/result_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from recruitplan.campaign import Campaign
from recruitplan.coverage.matrix import CoverageMatrix
from recruitplan.coverage.suggest import Suggestion
from recruitplan.projection import DailyProjection


@dataclass
class DashboardResult:
    """Structured output of one dashboard run."""

    role: Optional[str]
    week_offset: int
    location: Optional[str]
    matrix: CoverageMatrix
    suggestions: list[Suggestion]
    campaign: Optional[Campaign] = None
    projection: list[DailyProjection] = field(default_factory=list)
    total_applicants: int = 0
