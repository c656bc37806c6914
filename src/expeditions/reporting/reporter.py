from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from expeditions.expedition import Expedition
from expeditions.precheck import precheck_catalog
from expeditions.reporting.frames import results_to_dataframe
from expeditions.reporting.plots import show_event_coverage, show_status_counts
from expeditions.reporting.text_report import render_text_report
from expeditions.result_types import FeasibilityResult
from expeditions.staff import StaffMember

log = logging.getLogger(__name__)


class Reporter:
    """High-level orchestrator: roster pre-check before the run, reports after it."""

    def __init__(
        self,
        cfg: Any,
        num_print_examples: Optional[int] = None,
        enable_plots: Optional[bool] = None,
        stream=None,
    ) -> None:
        """
        cfg must expose:
          - OUTPUT_DIR (None disables file output)
          - NUM_PRINT_EXAMPLES / ENABLE_PLOTS (used when not overridden here)
        """
        self.cfg = cfg
        self.num_print_examples = (
            cfg.NUM_PRINT_EXAMPLES if num_print_examples is None else num_print_examples
        )
        self.enable_plots = cfg.ENABLE_PLOTS if enable_plots is None else enable_plots
        self.stream = stream or sys.stdout

    @property
    def out_dir(self) -> Optional[Path]:
        out = getattr(self.cfg, "OUTPUT_DIR", None)
        return Path(out) if out is not None else None

    def pre_run(
        self, roster: Sequence[StaffMember], expeditions: Sequence[Expedition]
    ) -> dict[str, tuple[list[str], list[str]]]:
        """Print which expeditions the roster as a whole cannot cover."""
        return precheck_catalog(roster, expeditions, verbose=True, stream=self.stream)

    def post_run(self, results: Sequence[FeasibilityResult]) -> None:
        """Render the text report, export the results table and optional plots."""
        render_text_report(
            results, num_print_examples=self.num_print_examples, stream=self.stream
        )

        out_dir = self.out_dir
        if out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)
            path = out_dir / "feasibility.csv"
            results_to_dataframe(results).to_csv(path, index=False)
            log.info("Wrote %d row(s) to %s", len(results), path)

        if not self.enable_plots:
            return
        show_status_counts(results, out_dir=out_dir, enable_plot=True)
        show_event_coverage(results, out_dir=out_dir, enable_plot=True)
