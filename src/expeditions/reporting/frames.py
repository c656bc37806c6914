from __future__ import annotations

from typing import Sequence

import pandas as pd

from expeditions.result_types import FeasibilityResult

STATUS_ORDER: tuple[str, ...] = ("possible", "partial", "impossible")

RESULT_COLUMNS: list[str] = [
    "expedition",
    "map",
    "status",
    "satisfied_events",
    "total_events",
    "event_ratio",
    "team",
    "missing_staff",
    "missing_skills",
    "truncated",
]


def results_to_dataframe(results: Sequence[FeasibilityResult]) -> pd.DataFrame:
    """One row per expedition; list-valued gaps are joined with '; '."""
    rows = []
    for r in results:
        rows.append(
            {
                "expedition": r.expedition.name,
                "map": r.expedition.map,
                "status": r.status,
                "satisfied_events": r.satisfied_events,
                "total_events": r.total_events,
                "event_ratio": r.event_ratio,
                "team": ", ".join(m.name for m in r.team),
                "missing_staff": "; ".join(r.missing_staff),
                "missing_skills": "; ".join(r.missing_skills),
                "truncated": r.truncated,
            }
        )
    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    df["status"] = pd.Categorical(df["status"], categories=list(STATUS_ORDER))
    return df


def status_counts(results: Sequence[FeasibilityResult]) -> pd.Series:
    """Counts per status, always indexed possible/partial/impossible."""
    counts = pd.Series([r.status for r in results], dtype="object").value_counts()
    return counts.reindex(list(STATUS_ORDER), fill_value=0).astype(int)


def counts_by_map(results: Sequence[FeasibilityResult]) -> pd.DataFrame:
    """Map x status table of expedition counts."""
    df = results_to_dataframe(results)
    if df.empty:
        return pd.DataFrame(columns=list(STATUS_ORDER))
    table = pd.crosstab(df["map"], df["status"], dropna=False)
    return table.reindex(columns=list(STATUS_ORDER), fill_value=0)
