from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import MaxNLocator

from expeditions.result_types import FeasibilityResult

from .frames import STATUS_ORDER, status_counts

_STATUS_COLORS = {"possible": "#2f9e44", "partial": "#f59f00", "impossible": "#dc3545"}


def _save_and_show(fig: plt.Figure, out_dir: Optional[Path], filename: str) -> None:
    """Persist the plot under `out_dir` (when given) and show it."""
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    plt.show()


def show_status_counts(
    results: Sequence[FeasibilityResult],
    *,
    out_dir: Optional[Path] = None,
    enable_plot: bool = True,
) -> Optional[plt.Figure]:
    """Bar chart of how many expeditions land in each feasibility status."""
    if not enable_plot or not results:
        return None

    counts = status_counts(results)
    x = np.arange(len(STATUS_ORDER))
    fig, ax = plt.subplots(figsize=(6, 3.5), dpi=150)
    bars = ax.bar(
        x,
        counts.to_numpy(),
        color=[_STATUS_COLORS[s] for s in STATUS_ORDER],
        width=0.6,
        edgecolor="none",
    )
    ax.bar_label(bars, padding=2)
    ax.set_xticks(x, [s.capitalize() for s in STATUS_ORDER])
    ax.set_ylabel("Expeditions")
    ax.set_title("Expedition feasibility")
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    fig.tight_layout()
    _save_and_show(fig, out_dir, "feasibility_status.png")
    return fig


def show_event_coverage(
    results: Sequence[FeasibilityResult],
    *,
    out_dir: Optional[Path] = None,
    enable_plot: bool = True,
) -> Optional[plt.Figure]:
    """Horizontal bars of the satisfied-event ratio per expedition that has events."""
    rows = [r for r in results if r.total_events > 0]
    if not enable_plot or not rows:
        return None

    ratios = np.array([r.satisfied_events / r.total_events for r in rows])
    y = np.arange(len(rows))[::-1]
    fig, ax = plt.subplots(figsize=(7, 1.5 + 0.3 * len(rows)), dpi=150)
    ax.barh(
        y,
        ratios,
        color=[_STATUS_COLORS.get(r.status, "#94a3b8") for r in rows],
        height=0.7,
    )
    ax.set_yticks(y, [r.expedition.name for r in rows])
    ax.set_xlim(0, 1)
    ax.set_xlabel("Share of events satisfied by the chosen team")
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    fig.tight_layout()
    _save_and_show(fig, out_dir, "event_coverage.png")
    return fig
