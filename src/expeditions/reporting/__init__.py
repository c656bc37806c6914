from __future__ import annotations

from .frames import counts_by_map, results_to_dataframe, status_counts
from .reporter import Reporter
from .text_report import render_text_report

__all__ = [
    "Reporter",
    "render_text_report",
    "results_to_dataframe",
    "status_counts",
    "counts_by_map",
]
