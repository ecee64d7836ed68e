from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch

from recruitplan.config import Config
from recruitplan.coverage.matrix import CoverageMatrix
from recruitplan.coverage.rollup import weekday_counts
from recruitplan.coverage.severity import (
    BUCKET_COLORS,
    SEVERITY_COLORS,
    SEVERITY_ORDER,
    Bucket,
    Severity,
)
from recruitplan.projection import DailyProjection
from recruitplan.timeranges import DAY_NAMES, TimeRange

from .frames import projection_to_frame, severity_codes
from .text_report import get_active_report

SOURCE_COLORS: dict[str, str] = {
    "indeed": "#2563eb",
    "facebook": "#16a34a",
    "craigslist": "#f59e0b",
    "referrals": "#7c3aed",
    "qr_posters": "#dc2626",
}


def _save_and_show(fig: plt.Figure, filename: str) -> None:
    """Persist the plot under outputs/ and show it."""
    out_dir = Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    plt.show()


def _attach(fig: plt.Figure) -> None:
    report = get_active_report()
    if report is not None:
        report.add_figure(fig)


def show_coverage_heatmap(
    matrix: CoverageMatrix,
    title: str = "Coverage by half-hour",
    selected: Optional[Sequence[TimeRange]] = None,
    enable_plot: bool = True,
    config: Optional[Config] = None,
) -> None:
    """Seven-shade heatmap, days across and time down, closed cells in grey."""
    if not enable_plot or not matrix:
        return

    codes = severity_codes(matrix, config)
    cmap = ListedColormap([SEVERITY_COLORS[s] for s in SEVERITY_ORDER])
    cmap.set_bad(SEVERITY_COLORS[Severity.CLOSED])

    fig, ax = plt.subplots(figsize=(6, 8), dpi=150)
    ax.set_title(title, pad=35)
    ax.imshow(
        codes,
        cmap=cmap,
        vmin=-0.5,
        vmax=len(SEVERITY_ORDER) - 0.5,
        aspect="auto",
        interpolation="nearest",
    )
    n_slots = codes.shape[0]
    ax.set_xticks(range(len(matrix)), DAY_NAMES[: len(matrix)])
    ax.set_yticks(
        range(0, n_slots, 4), [f"{s // 2:02d}:00" for s in range(0, n_slots, 4)]
    )
    ax.xaxis.tick_top()
    for spine in ax.spines.values():
        spine.set_visible(False)

    for r in selected or []:
        for d in r.active_days():
            ax.add_patch(
                plt.Rectangle(
                    (d - 0.5, r.start_slot - 0.5),
                    1.0,
                    r.end_slot - r.start_slot,
                    fill=False,
                    edgecolor="#2563eb",
                    linewidth=1.5,
                )
            )

    handles = [
        Patch(facecolor=SEVERITY_COLORS[s], label=s.value.replace("_", " "))
        for s in SEVERITY_ORDER
    ]
    ax.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, -0.02),
        ncol=4,
        frameon=False,
        fontsize=7,
    )
    fig.tight_layout()
    _save_and_show(fig, "coverage_heatmap.png")
    _attach(fig)


def show_weekday_stripes(
    matrix: CoverageMatrix,
    enable_plot: bool = True,
    config: Optional[Config] = None,
) -> None:
    """Horizontal good/ok/bad stripes per weekday (the month-view cell ratio)."""
    if not enable_plot or not matrix:
        return

    counts = weekday_counts(matrix, config)
    pcts = [c.percentages() for c in counts]
    labels = list(DAY_NAMES[: len(counts)])

    fig, ax = plt.subplots(figsize=(7.5, 3), dpi=150)
    ax.set_title("Weekday coverage mix", pad=25)
    left = [0.0] * len(labels)
    for i, bucket in enumerate((Bucket.GREEN, Bucket.YELLOW, Bucket.RED)):
        vals = [p[i] for p in pcts]
        ax.barh(
            labels,
            vals,
            left=left,
            color=BUCKET_COLORS[bucket],
            label=bucket.value,
            edgecolor="none",
        )
        left = [a + b for a, b in zip(left, vals)]
    ax.set_xlim(0, 100)
    ax.invert_yaxis()
    ax.set_xlabel("% of open half-hours")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, 1.2), ncol=3, frameon=False)
    fig.tight_layout()
    _save_and_show(fig, "weekday_stripes.png")
    _attach(fig)


def show_projection_chart(
    series: Sequence[DailyProjection], enable_plot: bool = True
) -> None:
    """Stacked area of projected applicants per source over the window."""
    if not enable_plot or not series:
        return

    df = projection_to_frame(series)
    keys = [c for c in df.columns if c not in ("date", "total") and df[c].sum() > 0]
    if not keys:
        return

    fig, ax = plt.subplots(figsize=(7.5, 4), dpi=150)
    ax.set_title("Projected applicants per day", pad=35)
    ax.stackplot(
        df["date"],
        [df[k] for k in keys],
        labels=[k.replace("_", " ") for k in keys],
        colors=[SOURCE_COLORS.get(k, "#94a3b8") for k in keys],
        alpha=0.8,
    )
    ax.plot(df["date"], df["total"], color="black", linewidth=1, label="Total")
    ax.set_ylim(0, max(1.0, float(df["total"].max())) * 1.05)
    ax.set_xmargin(0.0)
    ax.set_ylabel("Applicants")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(
        ncol=len(keys) + 1,
        loc="upper center",
        bbox_to_anchor=(0.5, 1.15),
        borderaxespad=0.3,
        frameon=False,
    )
    fig.autofmt_xdate()
    fig.tight_layout(rect=(0, 0, 1, 0.92))
    _save_and_show(fig, "applicant_projection.png")
    _attach(fig)
