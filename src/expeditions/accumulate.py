from __future__ import annotations

from typing import AbstractSet, Iterable, Optional

from expeditions.expedition import Event, Expedition
from expeditions.requirements import ItemReq, RankReq, SkillReq, StatReq
from expeditions.result_types import AccumulatedRequirements, NamedThreshold


def filter_events(
    events: Iterable[Event],
    type_filter: Optional[AbstractSet[str]] = None,
    subtype_filter: Optional[AbstractSet[str]] = None,
) -> list[Event]:
    """
    Keep events whose type is in `type_filter` and whose subtype is in
    `subtype_filter`. An empty/None filter includes everything, and an event
    without a subtype is never excluded by the subtype filter.
    """
    out: list[Event] = []
    for event in events:
        if type_filter and event.type not in type_filter:
            continue
        if subtype_filter and event.subtype and event.subtype not in subtype_filter:
            continue
        out.append(event)
    return out


def _fold_max(levels: dict[str, int], name: str, level: int) -> None:
    levels[name] = max(levels.get(name, 0), level)


def _sorted(levels: dict[str, int]) -> tuple[NamedThreshold, ...]:
    return tuple(NamedThreshold(name, levels[name]) for name in sorted(levels))


def accumulate(
    expedition: Expedition,
    type_filter: Optional[AbstractSet[str]] = None,
    subtype_filter: Optional[AbstractSet[str]] = None,
) -> AccumulatedRequirements:
    """
    Merge baseline skill requirements with the requirements of the filtered
    events. Repeated names keep the maximum level; baseline skills are always
    present regardless of the filters.
    """
    skills: dict[str, int] = {}
    stats: dict[str, int] = {}
    ranks: dict[str, int] = {}
    items: set[str] = set()

    for sr in expedition.skill_requirements:
        _fold_max(skills, sr.skill, sr.level)

    for event in filter_events(expedition.events, type_filter, subtype_filter):
        for req in event.requirements:
            if isinstance(req, SkillReq):
                _fold_max(skills, req.name, req.level)
            elif isinstance(req, StatReq):
                _fold_max(stats, req.name, req.level)
            elif isinstance(req, RankReq):
                _fold_max(ranks, req.name, req.level)
            elif isinstance(req, ItemReq):
                items.add(req.name)

    return AccumulatedRequirements(
        skills=_sorted(skills),
        items=tuple(sorted(items)),
        ranks=_sorted(ranks),
        stats=_sorted(stats),
    )
