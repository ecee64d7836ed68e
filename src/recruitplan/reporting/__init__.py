from __future__ import annotations

from .frames import matrix_to_frame, projection_to_frame, weekday_counts_frame
from .reporter import Reporter
from .text_report import ReportDocument

__all__ = [
    "Reporter",
    "ReportDocument",
    "matrix_to_frame",
    "projection_to_frame",
    "weekday_counts_frame",
]
