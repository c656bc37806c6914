from __future__ import annotations

import sys
from typing import Optional, Sequence

from expeditions.result_types import FeasibilityResult

from .frames import status_counts

_MARKERS = {"possible": "✅", "partial": "⚠️ ", "impossible": "❌"}


def _fmt_ratio(result: FeasibilityResult) -> str:
    if result.total_events == 0:
        return "no events"
    return f"{result.satisfied_events}/{result.total_events} events"


def _team_names(result: FeasibilityResult) -> str:
    return ", ".join(f"{m.name} ({m.type})" for m in result.team) or "(none)"


def render_text_report(
    results: Sequence[FeasibilityResult],
    *,
    num_print_examples: int = 6,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    counts = status_counts(results)
    print(
        f"\nExpeditions: {len(results)} | possible={counts['possible']} | "
        f"partial={counts['partial']} | impossible={counts['impossible']}",
        file=stream,
    )
    if not results:
        print("No expeditions to report.", file=stream)
        return

    for r in results:
        marker = _MARKERS.get(r.status, "?")
        line = f"{marker} {r.expedition.name}: {r.status}"
        if r.team:
            line += f" | {_fmt_ratio(r)} | team: {_team_names(r)}"
        if r.truncated:
            line += " | search truncated"
        print(line, file=stream)
        _print_gaps("missing staff", r.missing_staff, num_print_examples, stream)
        _print_gaps("missing skills", r.missing_skills, num_print_examples, stream)

    truncated = [r.expedition.name for r in results if r.truncated]
    if truncated:
        print(
            f"\n⚠️  {len(truncated)} search(es) hit the candidate/time budget; "
            "their teams are the best found, not proven optimal.",
            file=stream,
        )


def _print_gaps(
    label: str, gaps: Sequence[str], limit: int, stream
) -> None:
    if not gaps:
        return
    shown = ", ".join(gaps[:limit])
    more = f", +{len(gaps) - limit} more" if len(gaps) > limit else ""
    print(f"    {label}: {shown}{more}", file=stream)
