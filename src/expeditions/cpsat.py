# expeditions/cpsat.py
from __future__ import annotations

import logging
from typing import AbstractSet, Sequence

from ortools.sat.python import cp_model

from expeditions.config import Config
from expeditions.evaluator import count_satisfied_events
from expeditions.expedition import Event, Expedition
from expeditions.requirements import ItemReq, RankReq, SkillReq, StatReq
from expeditions.result_types import SolveOutcome
from expeditions.staff import StaffMember
from expeditions.validation import ValidationError

log = logging.getLogger(__name__)


def setup_solver(cfg: Config) -> cp_model.CpSolver:
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = cfg.TIME_LIMIT_SEC
    solver.parameters.num_search_workers = cfg.NUM_PARALLEL_WORKERS
    solver.parameters.log_search_progress = False
    return solver


class AssignmentModel:
    """
    CP-SAT formulation of the team search:
      x[r, m]   member m fills one of requirement r's seats
      used[m]   member m is on the team (each member at most once)
      sat[e]    event e is fully satisfied by the team (maximised)
    """

    def __init__(
        self,
        expedition: Expedition,
        pools: Sequence[Sequence[StaffMember]],
        available_items: AbstractSet[str],
    ) -> None:
        self.expedition = expedition
        self.pools = pools
        self.available_items = available_items
        self.m = cp_model.CpModel()

        self.members: dict[str, StaffMember] = {}
        for pool in pools:
            for member in pool:
                self.members.setdefault(member.id, member)

        self.x: dict[tuple[int, str], cp_model.IntVar] = {}
        self.used: dict[str, cp_model.IntVar] = {}
        self.sat: dict[int, cp_model.IntVar] = {}
        self.feasible_by_construction = True

    def build(self) -> "AssignmentModel":
        self._declare_seats()
        self._add_baseline_skills()
        self._add_events()
        if self.sat:
            self.m.Maximize(sum(self.sat.values()))
        return self

    # ---------- hard ----------
    def _declare_seats(self) -> None:
        for mid in self.members:
            self.used[mid] = self.m.NewBoolVar(f"used_{mid}")

        for r, (req, pool) in enumerate(
            zip(self.expedition.staff_requirements, self.pools)
        ):
            seats = []
            for member in pool:
                var = self.m.NewBoolVar(f"x_r{r}_{member.id}")
                self.x[(r, member.id)] = var
                seats.append(var)
            self.m.Add(sum(seats) == req.count)

        for mid, used in self.used.items():
            seats = [v for (_, m_id), v in self.x.items() if m_id == mid]
            self.m.Add(sum(seats) == used)

    def _qualified(self, skill: str, level: int) -> list[cp_model.IntVar]:
        return [
            self.used[mid]
            for mid, member in self.members.items()
            if member.skill_level(skill) >= level
        ]

    def _add_baseline_skills(self) -> None:
        for sr in self.expedition.skill_requirements:
            qualified = self._qualified(sr.skill, sr.level)
            if not qualified:
                self.feasible_by_construction = False
                return
            self.m.AddBoolOr(qualified)

    # ---------- objective ----------
    def _add_events(self) -> None:
        for e_idx, event in enumerate(self.expedition.events):
            sat = self.m.NewBoolVar(f"sat_e{e_idx}")
            self.sat[e_idx] = sat
            if not self._constrain_event(event, sat):
                self.m.Add(sat == 0)

    def _constrain_event(self, event: Event, sat: cp_model.IntVar) -> bool:
        """Link `sat` to the event's requirements; False if it can never hold."""
        for req in event.requirements:
            if isinstance(req, SkillReq):
                qualified = self._qualified(req.name, req.level)
                if not qualified:
                    return False
                self.m.AddBoolOr(qualified).OnlyEnforceIf(sat)
            elif isinstance(req, StatReq):
                terms = [
                    (member.attribute(req.name), self.used[mid])
                    for mid, member in self.members.items()
                ]
                if not self._at_least(terms, req.level, sat):
                    return False
            elif isinstance(req, RankReq):
                terms = [
                    (member.level, self.used[mid])
                    for mid, member in self.members.items()
                ]
                if not self._at_least(terms, req.level, sat):
                    return False
            elif isinstance(req, ItemReq):
                if req.name not in self.available_items:
                    return False
            else:
                raise ValidationError(
                    f"Unrecognised requirement kind {type(req).__name__}."
                )
        return True

    def _at_least(
        self,
        terms: list[tuple[int, cp_model.IntVar]],
        threshold: int,
        enforce: cp_model.IntVar,
    ) -> bool:
        weighted = [(coef, var) for coef, var in terms if coef > 0]
        if threshold <= 0:
            return True
        if not weighted:
            return False
        self.m.Add(sum(coef * var for coef, var in weighted) >= threshold).OnlyEnforceIf(
            enforce
        )
        return True

    # ---------- extraction ----------
    def team(self, solver: cp_model.CpSolver) -> tuple[StaffMember, ...]:
        """Chosen members grouped by requirement, each group in roster order."""
        out: list[StaffMember] = []
        for r, pool in enumerate(self.pools):
            for member in pool:
                if solver.Value(self.x[(r, member.id)]):
                    out.append(member)
        return tuple(out)


def cpsat_search(
    expedition: Expedition,
    pools: Sequence[Sequence[StaffMember]],
    available_items: AbstractSet[str],
    cfg: Config,
) -> SolveOutcome:
    model = AssignmentModel(expedition, pools, available_items).build()
    if not model.feasible_by_construction:
        return SolveOutcome(team=None, backend="cpsat")

    solver = setup_solver(cfg)
    status = solver.Solve(model.m)
    status_name = solver.StatusName(status)
    log.debug("%s: CP-SAT status %s", expedition.name, status_name)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        truncated = status == cp_model.UNKNOWN
        if truncated:
            log.warning(
                "%s: CP-SAT hit the time limit without a team.", expedition.name
            )
        return SolveOutcome(team=None, truncated=truncated, backend="cpsat")

    team = model.team(solver)
    score = count_satisfied_events(expedition.events, team, available_items)
    return SolveOutcome(
        team=team,
        score=score,
        candidates_examined=1,
        truncated=status == cp_model.FEASIBLE,
        backend="cpsat",
    )
