# expeditions/search.py
from __future__ import annotations

import logging
from itertools import combinations
from typing import AbstractSet, Iterator, Optional, Sequence

from expeditions.evaluator import count_satisfied_events, meets_skill_requirements
from expeditions.expedition import Expedition
from expeditions.result_types import SolveOutcome
from expeditions.staff import StaffMember

log = logging.getLogger(__name__)

Combo = tuple[StaffMember, ...]


def combination_options(
    pools: Sequence[Sequence[StaffMember]], counts: Sequence[int]
) -> list[list[Combo]]:
    """Every size-`count` combination of each pool, in lexicographic pool order."""
    return [list(combinations(pool, k)) for pool, k in zip(pools, counts)]


def _first_conflict(options: Sequence[Sequence[Combo]], idx: list[int]) -> Optional[int]:
    """Lowest position whose combination reuses a member chosen earlier."""
    seen: set[str] = set()
    for pos, choice in enumerate(idx):
        ids = [m.id for m in options[pos][choice]]
        if seen.intersection(ids):
            return pos
        seen.update(ids)
    return None


def iter_teams(options: Sequence[Sequence[Combo]]) -> Iterator[Combo]:
    """
    Walk the cartesian product of per-requirement combinations with an
    index-vector odometer, yielding concatenated teams in lexicographic order.
    A position that reuses a member advances directly, skipping every
    completion of that prefix.
    """
    n = len(options)
    if n == 0:
        yield ()
        return
    if any(len(o) == 0 for o in options):
        return

    idx = [0] * n
    while True:
        conflict = _first_conflict(options, idx)
        if conflict is None:
            yield tuple(m for pos in range(n) for m in options[pos][idx[pos]])
            conflict = n - 1

        pos = conflict
        while pos >= 0:
            idx[pos] += 1
            if idx[pos] < len(options[pos]):
                break
            idx[pos] = 0
            pos -= 1
        if pos < 0:
            return
        for k in range(pos + 1, n):
            idx[k] = 0


def exhaustive_search(
    expedition: Expedition,
    options: Sequence[Sequence[Combo]],
    available_items: AbstractSet[str],
    max_candidates: Optional[int] = None,
    stop_at_full_coverage: bool = True,
) -> SolveOutcome:
    """
    Score every team that passes the baseline skill filter by the number of
    fully satisfied events. Ties keep the first team in enumeration order.
    """
    events = expedition.events
    best: Optional[Combo] = None
    best_score = -1
    examined = 0
    truncated = False

    for team in iter_teams(options):
        if max_candidates is not None and examined >= max_candidates:
            truncated = True
            log.warning(
                "%s: stopped after %d candidate teams (MAX_CANDIDATES); "
                "returning best team so far.",
                expedition.name,
                examined,
            )
            break
        examined += 1

        if not meets_skill_requirements(team, expedition.skill_requirements):
            continue
        score = count_satisfied_events(events, team, available_items)
        if score > best_score:
            best, best_score = team, score
            if stop_at_full_coverage and best_score == len(events):
                break

    log.debug(
        "%s: examined %d candidate teams, best score %s",
        expedition.name,
        examined,
        best_score if best is not None else "n/a",
    )
    return SolveOutcome(
        team=best,
        score=max(best_score, 0),
        candidates_examined=examined,
        truncated=truncated,
    )
