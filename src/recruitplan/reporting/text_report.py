from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.backends.backend_pdf import PdfPages

from recruitplan.config import Config
from recruitplan.coverage.matrix import CoverageMatrix
from recruitplan.coverage.rollup import weekday_counts
from recruitplan.coverage.suggest import Suggestion
from recruitplan.projection import DailyProjection, Source, sum_projection
from recruitplan.timeranges import TimeRange, format_range

from .frames import projection_to_frame, weekday_counts_frame


class ReportDocument:
    """
    Printed report lines plus charts, written to one PDF.

    Text pages come first, A4 portrait in a monospace font so the printed
    DataFrame tables keep their columns; every chart then gets its own page.
    """

    LINES_PER_PAGE = 80

    def __init__(self, path: Path, title: str = "Recruiting plan") -> None:
        self.path = path
        self.title = title
        self.lines: list[str] = []
        self.figures: list[plt.Figure] = []

    def add_text(self, text: str) -> None:
        self.lines.append(text)

    def add_figure(self, fig: plt.Figure) -> None:
        self.figures.append(fig)

    def text_pages(self) -> list[list[str]]:
        rows = "\n".join(self.lines).splitlines()
        n = self.LINES_PER_PAGE
        return [rows[i : i + n] for i in range(0, len(rows), n)]

    def write(self) -> None:
        """Write the PDF; an empty document writes nothing."""
        pages = self.text_pages()
        if not pages and not self.figures:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with PdfPages(self.path) as pdf:
            for i, rows in enumerate(pages, start=1):
                fig, ax = plt.subplots(figsize=(8.27, 11.69))
                ax.axis("off")
                ax.set_title(
                    f"{self.title} ({i}/{len(pages)})", loc="left", fontsize=10
                )
                ax.text(
                    0.0,
                    1.0,
                    "\n".join(rows),
                    ha="left",
                    va="top",
                    fontsize=7,
                    family="monospace",
                    transform=ax.transAxes,
                )
                pdf.savefig(fig)
                plt.close(fig)
            for fig in self.figures:
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)


_ACTIVE_REPORT: Optional[ReportDocument] = None


def set_active_report(doc: Optional[ReportDocument]) -> None:
    global _ACTIVE_REPORT
    _ACTIVE_REPORT = doc


def get_active_report() -> Optional[ReportDocument]:
    return _ACTIVE_REPORT


def _log_print(*args: object, sep: str = " ") -> None:
    """print() that also records the line in the active report, if any."""
    text = sep.join(str(a) for a in args)
    print(text)
    if _ACTIVE_REPORT is not None:
        _ACTIVE_REPORT.add_text(text)


def _fmt_pct(x: float, nd: int = 1) -> str:
    return f"{x:.{nd}f}%"


def render_coverage_report(
    matrix: CoverageMatrix,
    suggestions: Sequence[Suggestion],
    *,
    title: str = "Coverage",
    config: Optional[Config] = None,
) -> None:
    """Print the weekday good/ok/bad rollup and the ranked priority windows."""
    _log_print(f"\n=== {title} ===")
    if not matrix:
        _log_print("Coverage: (no data)")
        return

    counts = weekday_counts(matrix, config)
    df = weekday_counts_frame(counts)
    n_open = int(df["open"].sum())
    if n_open == 0:
        _log_print("Coverage: every slot is closed.")
    else:
        _log_print(
            f"Open half-hours: {n_open}  |  good "
            f"{_fmt_pct(100.0 * df['green'].sum() / n_open)}  |  ok "
            f"{_fmt_pct(100.0 * df['yellow'].sum() / n_open)}  |  bad "
            f"{_fmt_pct(100.0 * df['red'].sum() / n_open)}"
        )
        _log_print("\nWeekday rollup:")
        shown = df[["weekday", "open", "green", "yellow", "red"]]
        _log_print(shown.to_string(index=False))

    if not suggestions:
        _log_print("\nNo under-staffed windows long enough to suggest.")
        return
    _log_print("\nSuggested priority windows:")
    for i, sug in enumerate(suggestions, start=1):
        sev = "n/a" if sug.severity is None else _fmt_pct(100.0 * sug.severity)
        _log_print(f"  {i}. {sug.label:<32} short by {sev}")


def render_time_ranges(ranges: Sequence[TimeRange]) -> None:
    if not ranges:
        _log_print("No priority time ranges selected.")
        return
    _log_print("Priority time ranges:")
    for r in ranges:
        _log_print(f"  {format_range(r)}")


def render_projection_report(
    series: Sequence[DailyProjection],
    sources: Sequence[Source],
    *,
    title: str = "Applicant projection",
    num_print_examples: int = 7,
) -> None:
    """Print per-source totals, the first few days and the grand total."""
    _log_print(f"\n=== {title} ===")
    if not series:
        _log_print("Projection: (no data)")
        return

    df = projection_to_frame(series)
    first, last = series[0].date, series[-1].date
    _log_print(f"Window: {first.isoformat()} -> {last.isoformat()} ({len(series)} days)")

    per_source = pd.DataFrame(
        [
            {
                "source": s.key,
                "enabled": s.enabled,
                "cpa": s.cpa,
                "daily_budget": s.daily_budget,
                "daily_cap": s.daily_cap,
                "applicants": float(df[s.key].sum()) if s.key in df else 0.0,
            }
            for s in sources
        ]
    )
    if not per_source.empty:
        _log_print("\nPer-source totals:")
        _log_print(per_source.round(2).to_string(index=False))

    if num_print_examples > 0:
        _log_print(f"\nFirst {min(num_print_examples, len(df))} days:")
        head = df.head(num_print_examples).copy()
        head["date"] = head["date"].dt.strftime("%m-%d")
        _log_print(head.round(2).to_string(index=False))

    _log_print(f"\nProjected applicants: {sum_projection(series):,}")
