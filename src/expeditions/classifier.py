# expeditions/classifier.py
from __future__ import annotations

import logging
from collections import Counter
from typing import AbstractSet, List, Optional, Sequence

from expeditions.config import Config
from expeditions.expedition import Expedition
from expeditions.precheck import roster_shortfalls
from expeditions.result_types import (
    IMPOSSIBLE,
    PARTIAL,
    POSSIBLE,
    FeasibilityResult,
    FeasibilityStatus,
)
from expeditions.solver import solve_assignment
from expeditions.staff import StaffMember

log = logging.getLogger(__name__)


def _status_without_team(
    expedition: Expedition, staff_gaps: List[str], skill_gaps: List[str]
) -> FeasibilityStatus:
    """
    `impossible` only when every kind of baseline requirement the expedition
    carries is short across the whole roster. When both staff and skill
    requirements exist, one failing kind alone is `partial`.
    """
    has_staff = bool(expedition.staff_requirements)
    has_skills = bool(expedition.skill_requirements)
    if has_staff and has_skills:
        failed = bool(staff_gaps) and bool(skill_gaps)
    else:
        failed = bool(staff_gaps) or bool(skill_gaps)
    return IMPOSSIBLE if failed else PARTIAL


def _status_with_team(satisfied: int, total: int) -> FeasibilityStatus:
    if satisfied == total:
        return POSSIBLE
    if satisfied == 0:
        return IMPOSSIBLE
    return PARTIAL


def classify(
    roster: Sequence[StaffMember],
    expedition: Expedition,
    available_items: AbstractSet[str] = frozenset(),
    config: Optional[Config] = None,
) -> FeasibilityResult:
    """
    Single-expedition evaluation: solve for the best team, then label the
    expedition possible / partial / impossible. Gap descriptions always come
    from re-checking the baseline against the whole roster.

    When `truncated` is set the status is not proven. A search stopped by
    MAX_CANDIDATES, or a CP-SAT run that hit its time limit, may end before any
    team passes the baseline; the result then reads `partial` or `impossible`
    with an empty team even though a valid team might exist.
    """
    outcome = solve_assignment(roster, expedition, available_items, config)
    total = len(expedition.events)

    if outcome.team is None:
        staff_gaps, skill_gaps = roster_shortfalls(roster, expedition)
        return FeasibilityResult(
            expedition=expedition,
            status=_status_without_team(expedition, staff_gaps, skill_gaps),
            missing_staff=staff_gaps,
            missing_skills=skill_gaps,
            total_events=total,
            truncated=outcome.truncated,
        )

    return FeasibilityResult(
        expedition=expedition,
        status=_status_with_team(outcome.score, total),
        team=outcome.team,
        satisfied_events=outcome.score,
        total_events=total,
        truncated=outcome.truncated,
    )


def classify_all(
    roster: Sequence[StaffMember],
    expeditions: Sequence[Expedition],
    available_items: AbstractSet[str] = frozenset(),
    config: Optional[Config] = None,
) -> List[FeasibilityResult]:
    """Batch form of `classify`; order-preserving and independent per expedition."""
    results = [classify(roster, exp, available_items, config) for exp in expeditions]
    counts = Counter(r.status for r in results)
    log.info(
        "Classified %d expedition(s): %d possible, %d partial, %d impossible",
        len(results),
        counts[POSSIBLE],
        counts[PARTIAL],
        counts[IMPOSSIBLE],
    )
    return results
