from .config import Config, cfg
from .coverage import (
    cell_severity,
    classify_delta,
    generate_coverage_matrix,
    suggest_priority_ranges,
)
from .projection import Source, project_daily_applicants, sum_projection
from .timeranges import TimeRange, decode_ranges_to_slots, encode_slots_to_ranges
from .main import run_dashboard

__all__ = [
    "Config",
    "cfg",
    "cell_severity",
    "classify_delta",
    "generate_coverage_matrix",
    "suggest_priority_ranges",
    "Source",
    "project_daily_applicants",
    "sum_projection",
    "TimeRange",
    "decode_ranges_to_slots",
    "encode_slots_to_ranges",
    "run_dashboard",
]
