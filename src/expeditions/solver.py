# expeditions/solver.py
from __future__ import annotations

import logging
from typing import AbstractSet, Optional, Sequence

from expeditions.config import Config, cfg
from expeditions.cpsat import cpsat_search
from expeditions.expedition import Expedition
from expeditions.resolver import resolve_pool
from expeditions.result_types import SolveOutcome
from expeditions.search import combination_options, exhaustive_search
from expeditions.staff import StaffMember

log = logging.getLogger(__name__)


def solve_assignment(
    roster: Sequence[StaffMember],
    expedition: Expedition,
    available_items: AbstractSet[str] = frozenset(),
    config: Optional[Config] = None,
) -> SolveOutcome:
    """
    Find the team that meets every staff and skill requirement and satisfies
    the most events. Returns an outcome with `team=None` when no team exists;
    `undersized` lists requirements whose eligible pool is smaller than the
    count (the search is skipped entirely in that case).
    """
    cfg_obj = config or cfg

    pools = [resolve_pool(req.type, roster) for req in expedition.staff_requirements]
    undersized = [
        req
        for req, pool in zip(expedition.staff_requirements, pools)
        if len(pool) < req.count
    ]
    if undersized:
        log.debug(
            "%s: undersized pools for %s",
            expedition.name,
            ", ".join(req.type for req in undersized),
        )
        return SolveOutcome(
            team=None, undersized=undersized, backend=cfg_obj.SOLVER_BACKEND
        )

    if cfg_obj.SOLVER_BACKEND == "cpsat":
        return cpsat_search(expedition, pools, available_items, cfg_obj)

    options = combination_options(
        pools, [req.count for req in expedition.staff_requirements]
    )
    return exhaustive_search(
        expedition,
        options,
        available_items,
        max_candidates=cfg_obj.MAX_CANDIDATES,
        stop_at_full_coverage=cfg_obj.STOP_AT_FULL_COVERAGE,
    )
