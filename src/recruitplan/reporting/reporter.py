from __future__ import annotations

from pathlib import Path
from typing import Any

from recruitplan.reporting.frames import matrix_to_frame, projection_to_frame
from recruitplan.reporting.plots import (
    show_coverage_heatmap,
    show_projection_chart,
    show_weekday_stripes,
)
from recruitplan.reporting.text_report import (
    ReportDocument,
    render_coverage_report,
    render_projection_report,
    render_time_ranges,
    set_active_report,
)
from recruitplan.result_types import DashboardResult


class Reporter:
    """High-level orchestrator: renders text, charts, CSV exports and the PDF."""

    def __init__(
        self,
        cfg: Any,
        num_print_examples: int = 7,
        enable_plots: bool = True,
        export_csv: bool = True,
        out_dir: Path | str = "outputs",
    ) -> None:
        self.cfg = cfg
        self.num_print_examples = num_print_examples
        self.enable_plots = enable_plots
        self.export_csv = export_csv
        self.out_dir = Path(out_dir)

    def _title(self, res: DashboardResult) -> str:
        role = res.role or "All roles"
        where = f" @ {res.location}" if res.location else ""
        return f"{role}{where}, week {res.week_offset:+d}"

    def render_text_report(self, res: DashboardResult) -> None:
        """Public entry point for callers that want text reporting only."""
        render_coverage_report(
            res.matrix, res.suggestions, title=self._title(res), config=self.cfg
        )
        if res.campaign is None:
            return
        print_title = f"{res.campaign.name} ({res.campaign.status.value})"
        render_time_ranges(res.campaign.time_ranges)
        render_projection_report(
            res.projection,
            res.campaign.sources,
            title=print_title,
            num_print_examples=self.num_print_examples,
        )

    def export(self, res: DashboardResult) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        matrix_to_frame(res.matrix, self.cfg).to_csv(
            self.out_dir / "coverage_matrix.csv", index=False
        )
        if res.projection:
            projection_to_frame(res.projection).to_csv(
                self.out_dir / "applicant_projection.csv", index=False
            )

    def report(self, res: DashboardResult) -> None:
        """Render textual report (and optional plots) for a dashboard run."""
        report_doc = ReportDocument(
            self.out_dir / "report.pdf", title=self._title(res)
        )
        set_active_report(report_doc)
        try:
            self.render_text_report(res)
            if self.export_csv:
                self.export(res)
            if not self.enable_plots:
                return
            selected = res.campaign.time_ranges if res.campaign else None
            show_coverage_heatmap(
                res.matrix,
                title=self._title(res),
                selected=selected,
                config=self.cfg,
            )
            show_weekday_stripes(res.matrix, config=self.cfg)
            show_projection_chart(res.projection)
        finally:
            set_active_report(None)
            report_doc.write()
