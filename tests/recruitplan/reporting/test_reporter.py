from __future__ import annotations

from pathlib import Path

import matplotlib
import pandas as pd

matplotlib.use("Agg", force=True)

from recruitplan.campaign import demo_campaigns
from recruitplan.config import Config
from recruitplan.main import run_dashboard
from recruitplan.reporting.reporter import Reporter


def test_report_writes_csvs_and_pdf(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr(
        "recruitplan.reporting.plots._save_and_show", lambda fig, name: None
    )
    cfg = Config()
    reporter = Reporter(cfg, out_dir=tmp_path)
    campaign = demo_campaigns()[0]
    res = run_dashboard(cfg, role="Cook", campaign=campaign, reporter=reporter)

    coverage = pd.read_csv(tmp_path / "coverage_matrix.csv")
    assert len(coverage) == cfg.DAYS * cfg.SLOTS_PER_DAY
    projection = pd.read_csv(tmp_path / "applicant_projection.csv")
    assert len(projection) == len(res.projection)
    assert (tmp_path / "report.pdf").exists()

    out = capsys.readouterr().out
    assert "Summer Hiring Blitz (active)" in out
    assert f"Projected applicants: {res.total_applicants:,}" in out


def test_text_only_reporter(tmp_path: Path, capsys):
    cfg = Config()
    reporter = Reporter(cfg, enable_plots=False, export_csv=False, out_dir=tmp_path)
    run_dashboard(cfg, role="Host", location="BOS", reporter=reporter)
    assert not (tmp_path / "coverage_matrix.csv").exists()
    assert (tmp_path / "report.pdf").exists()
    assert "Host @ BOS, week +0" in capsys.readouterr().out
