from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from recruitplan.config import Config, cfg

if TYPE_CHECKING:
    from .matrix import CoverageCell


class Severity(Enum):
    """Seven-shade supply vs. demand classification (plus CLOSED)."""

    STRONG_UNDER = "strong_under"
    UNDER = "under"
    UNDER_LIGHT = "under_light"
    BALANCED = "balanced"
    OVER_LIGHT = "over_light"
    OVER = "over"
    STRONG_OVER = "strong_over"
    CLOSED = "closed"


class Bucket(Enum):
    """Simplified good/ok/bad classification used by rollups and suggestions."""

    GREEN = "good"
    YELLOW = "ok"
    RED = "bad"


SEVERITY_COLORS: dict[Severity, str] = {
    Severity.STRONG_OVER: "#065f46",
    Severity.OVER: "#047857",
    Severity.OVER_LIGHT: "#10b981",
    Severity.BALANCED: "#fde047",
    Severity.UNDER_LIGHT: "#ef4444",
    Severity.UNDER: "#b91c1c",
    Severity.STRONG_UNDER: "#7f1d1d",
    Severity.CLOSED: "#e5e7eb",
}

BUCKET_COLORS: dict[Bucket, str] = {
    Bucket.GREEN: "#10b981",
    Bucket.YELLOW: "#fde047",
    Bucket.RED: "#ef4444",
}

# Heatmap/legend order, most under-staffed first
SEVERITY_ORDER: tuple[Severity, ...] = (
    Severity.STRONG_UNDER,
    Severity.UNDER,
    Severity.UNDER_LIGHT,
    Severity.BALANCED,
    Severity.OVER_LIGHT,
    Severity.OVER,
    Severity.STRONG_OVER,
)


def relative_gap(demand: float, supply: float) -> float:
    """(supply - demand) relative to demand, with demand floored at 1."""
    return (supply - max(0, demand)) / max(1, demand)


def classify_delta(delta: float, config: Optional[Config] = None) -> Bucket:
    """Three-bucket classification; exactly +/-threshold goes to GREEN/RED."""
    threshold = (config or cfg).BUCKET_THRESHOLD
    if delta >= threshold:
        return Bucket.GREEN
    if delta <= -threshold:
        return Bucket.RED
    return Bucket.YELLOW


def cell_severity(
    demand: float, supply: float, config: Optional[Config] = None
) -> Severity:
    if demand <= 0 and supply <= 0:
        return Severity.CLOSED
    light, mid, strong = (config or cfg).SEVERITY_THRESHOLDS
    delta = relative_gap(demand, supply)
    if delta >= strong:
        return Severity.STRONG_OVER
    if delta >= mid:
        return Severity.OVER
    if delta >= light:
        return Severity.OVER_LIGHT
    if delta <= -strong:
        return Severity.STRONG_UNDER
    if delta <= -mid:
        return Severity.UNDER
    if delta <= -light:
        return Severity.UNDER_LIGHT
    return Severity.BALANCED


def cell_bucket(cell: "CoverageCell", config: Optional[Config] = None) -> Optional[Bucket]:
    """Bucket for an open cell; ``None`` for closed cells."""
    if cell.closed:
        return None
    return classify_delta(relative_gap(cell.demand, cell.supply), config)


def severity_color(severity: Severity) -> str:
    return SEVERITY_COLORS[severity]


def bucket_color(bucket: Optional[Bucket]) -> str:
    if bucket is None:
        return SEVERITY_COLORS[Severity.CLOSED]
    return BUCKET_COLORS[bucket]
