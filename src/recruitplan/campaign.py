from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Iterable, Optional

from recruitplan.config import Config, cfg
from recruitplan.dates import add_days, format_date, parse_local_date, safe_date
from recruitplan.projection import (
    DailyProjection,
    Source,
    default_sources,
    project_daily_applicants,
)
from recruitplan.timeranges import TimeRange


class CampaignStatus(Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"


class EndMode(Enum):
    DATE = "date"
    BUDGET = "budget"
    HIRES = "hires"


class InvalidTransitionError(ValueError):
    """Raised for a status change the campaign lifecycle does not allow."""


_id_counter = itertools.count()


def new_campaign_id() -> str:
    return f"c{int(time.time() * 1000)}{next(_id_counter)}"


@dataclass
class Campaign:
    """
    A recruiting campaign. Created as a draft; launched/suspended any number of
    times; archiving is terminal.
    """

    id: str
    name: str
    start_date: date
    created_at: date = field(default_factory=date.today)
    sources: list[Source] = field(default_factory=default_sources)
    status: CampaignStatus = CampaignStatus.DRAFT
    locations: list[str] = field(default_factory=list)
    jobs: list[str] = field(default_factory=list)
    end_mode: EndMode = EndMode.DATE
    end_date: Optional[date] = None
    end_budget: Optional[int] = None
    end_hires: Optional[int] = None
    time_ranges: list[TimeRange] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.start_date = safe_date(self.start_date)
        self.created_at = safe_date(self.created_at)
        if self.end_date is not None:
            self.end_date = safe_date(self.end_date)
        self.status = CampaignStatus(self.status)
        self.end_mode = EndMode(self.end_mode)
        if self.end_budget is not None:
            self.end_budget = max(0, int(self.end_budget))
        if self.end_hires is not None:
            self.end_hires = max(0, int(self.end_hires))

    # ---------- lifecycle ----------

    def _require_not_archived(self) -> None:
        if self.status is CampaignStatus.ARCHIVED:
            raise InvalidTransitionError(f"Campaign {self.id!r} is archived.")

    def launch(self) -> None:
        self._require_not_archived()
        self.status = CampaignStatus.ACTIVE

    def suspend(self) -> None:
        self._require_not_archived()
        if self.status is not CampaignStatus.ACTIVE:
            raise InvalidTransitionError(
                f"Only active campaigns can be suspended; {self.id!r} is "
                f"{self.status.value}."
            )
        self.status = CampaignStatus.SUSPENDED

    def toggle(self) -> CampaignStatus:
        """Launch/suspend button: active -> suspended, anything else -> active."""
        if self.status is CampaignStatus.ACTIVE:
            self.suspend()
        else:
            self.launch()
        return self.status

    def archive(self) -> None:
        self._require_not_archived()
        self.status = CampaignStatus.ARCHIVED

    def copy(self, today: Optional[date] = None) -> "Campaign":
        """New draft with the same settings and a fresh id."""
        return replace(
            self,
            id=new_campaign_id(),
            name=f"{self.name} (Copy)",
            status=CampaignStatus.DRAFT,
            created_at=today or date.today(),
            sources=[replace(s) for s in self.sources],
            locations=list(self.locations),
            jobs=list(self.jobs),
            time_ranges=list(self.time_ranges),
        )

    # ---------- display ----------

    def preview_label(self) -> str:
        if self.end_mode is EndMode.DATE and self.end_date:
            return f"{format_date(self.start_date)} - {format_date(self.end_date)}"
        if self.end_mode is EndMode.HIRES and self.end_hires:
            return f"Target: {self.end_hires} hires"
        if self.end_mode is EndMode.BUDGET and self.end_budget:
            return f"Budget: $ {self.end_budget:,}"
        return ""

    # ---------- projection ----------

    def window(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        config: Optional[Config] = None,
    ) -> tuple[date, date]:
        C = config or cfg
        s = start or self.start_date
        if end is not None:
            return s, end
        if self.end_mode is EndMode.DATE and self.end_date is not None:
            return s, self.end_date
        return s, add_days(s, C.DEFAULT_WINDOW_DAYS)

    def projection(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        config: Optional[Config] = None,
    ) -> list[DailyProjection]:
        s, e = self.window(start, end, config)
        return project_daily_applicants(self.sources, s, e, config)


def sort_newest_first(campaigns: Iterable[Campaign]) -> list[Campaign]:
    return sorted(campaigns, key=lambda c: c.created_at, reverse=True)


def demo_campaigns() -> list[Campaign]:
    """Demo campaign table used by the dashboard when no backend is attached."""
    A, S = CampaignStatus.ACTIVE, CampaignStatus.SUSPENDED
    rows = [
        ("c7", "Summer Hiring Blitz", "2025-11-01", A, ["BOS", "LGA"], ["Server", "Host"], EndMode.DATE, "2025-12-15", None, None),
        ("c6", "Q4 Expansion", "2025-10-25", S, ["DCA"], ["Cook", "Server"], EndMode.BUDGET, None, 5000, None),
        ("c5", "Weekend Warriors", "2025-10-18", A, ["BOS"], ["Bartender", "Server"], EndMode.HIRES, None, None, 15),
        ("c4", "New Menu Launch", "2025-10-15", A, ["LGA", "DCA"], ["Cook"], EndMode.DATE, "2025-11-30", None, None),
        ("c3", "New Location Opening", "2025-10-14", A, ["ORD"], ["Cook", "Server", "Host"], EndMode.DATE, "2025-12-01", None, None),
        ("c2", "Weekend Staffing", "2025-09-28", S, ["BOS", "LGA"], ["Server"], EndMode.BUDGET, None, 3000, None),
        ("c1", "Holiday Surge", "2025-08-31", A, ["BOS"], ["Cook", "Server", "Bartender"], EndMode.DATE, "2025-12-25", None, None),
    ]  # fmt: skip
    return [
        Campaign(
            id=cid,
            name=name,
            start_date=parse_local_date(start),
            created_at=parse_local_date(start),
            status=status,
            locations=locs,
            jobs=jobs,
            end_mode=mode,
            end_date=parse_local_date(end) if end else None,
            end_budget=budget,
            end_hires=hires,
        )
        for cid, name, start, status, locs, jobs, mode, end, budget, hires in rows
    ]
