from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, Sequence

from expeditions.expedition import Event
from expeditions.requirements import (
    ItemReq,
    RankReq,
    Requirement,
    SkillReq,
    SkillRequirement,
    StatReq,
)
from expeditions.result_types import AccumulatedRequirements
from expeditions.staff import StaffMember
from expeditions.validation import ValidationError


def best_skill_level(team: Iterable[StaffMember], skill: str) -> int:
    return max((m.skill_level(skill) for m in team), default=0)


def total_attribute(team: Iterable[StaffMember], stat: str) -> int:
    return sum(m.attribute(stat) for m in team)


def total_rank(team: Iterable[StaffMember]) -> int:
    return sum(m.level for m in team)


def is_satisfied(
    req: Requirement,
    team: Sequence[StaffMember],
    available_items: AbstractSet[str],
) -> bool:
    """
    Skill: best single member meets the level.
    Stat: summed attribute across the team meets the level.
    Rank: summed staff levels meet the threshold.
    Item: the item is in the caller's availability set.
    """
    if isinstance(req, SkillReq):
        return best_skill_level(team, req.name) >= req.level
    if isinstance(req, StatReq):
        return total_attribute(team, req.name) >= req.level
    if isinstance(req, RankReq):
        return total_rank(team) >= req.level
    if isinstance(req, ItemReq):
        return req.name in available_items
    raise ValidationError(f"Unrecognised requirement kind {type(req).__name__}.")


def meets_skill_requirements(
    team: Sequence[StaffMember], skill_requirements: Iterable[SkillRequirement]
) -> bool:
    return all(
        best_skill_level(team, sr.skill) >= sr.level for sr in skill_requirements
    )


def event_satisfied(
    event: Event, team: Sequence[StaffMember], available_items: AbstractSet[str]
) -> bool:
    """An event counts only when the same team satisfies all of its requirements."""
    return all(is_satisfied(r, team, available_items) for r in event.requirements)


def count_satisfied_events(
    events: Iterable[Event],
    team: Sequence[StaffMember],
    available_items: AbstractSet[str],
) -> int:
    return sum(1 for e in events if event_satisfied(e, team, available_items))


# ----------------------------
# Roster-wide badge check
# ----------------------------
@dataclass(frozen=True)
class Shortfall:
    name: str
    required: int
    available: int


@dataclass
class RequirementCheckResult:
    can_fulfill: bool = True
    missing_skills: list[Shortfall] = field(default_factory=list)
    missing_items: list[str] = field(default_factory=list)
    missing_ranks: list[str] = field(default_factory=list)
    missing_stats: list[Shortfall] = field(default_factory=list)


def check_requirements_fulfillment(
    roster: Sequence[StaffMember],
    requirements: AccumulatedRequirements,
    available_items: AbstractSet[str] = frozenset(),
) -> RequirementCheckResult:
    """Compare consolidated requirements against the whole roster."""
    result = RequirementCheckResult()

    for skill in requirements.skills:
        have = best_skill_level(roster, skill.name)
        if have < skill.level:
            result.missing_skills.append(Shortfall(skill.name, skill.level, have))

    for item in requirements.items:
        if item not in available_items:
            result.missing_items.append(item)

    have_rank = total_rank(roster)
    for rank in requirements.ranks:
        if have_rank < rank.level:
            result.missing_ranks.append(rank.name)

    for stat in requirements.stats:
        have = total_attribute(roster, stat.name)
        if have < stat.level:
            result.missing_stats.append(Shortfall(stat.name, stat.level, have))

    result.can_fulfill = not (
        result.missing_skills
        or result.missing_items
        or result.missing_ranks
        or result.missing_stats
    )
    return result
