from __future__ import annotations

from expeditions.accumulate import accumulate, filter_events
from expeditions.expedition import Event, Expedition
from expeditions.requirements import (
    ItemReq,
    RankReq,
    SkillReq,
    SkillRequirement,
    StatReq,
)
from expeditions.result_types import NamedThreshold


def _expedition() -> Expedition:
    return Expedition(
        name="Jungle Run",
        skill_requirements=[
            SkillRequirement("Survival Skills", 1),
            SkillRequirement("Analysis", 2),
        ],
        events=[
            Event(
                id=1,
                name="Vines",
                type="Hazard",
                subtype="Barbarian",
                requirements=[SkillReq("Survival Skills", 3), StatReq("str", 10)],
            ),
            Event(
                id=2,
                name="Temple",
                type="Puzzle",
                subtype="Wizard",
                requirements=[SkillReq("Analysis", 1), StatReq("strength", 4),
                              ItemReq("Torch")],
            ),
            Event(
                id=3,
                name="Idol",
                type="Treasure",
                requirements=[RankReq(15), RankReq(9), ItemReq("Torch")],
            ),
        ],
    )


def test_accumulate_keeps_max_per_name_and_sorts() -> None:
    acc = accumulate(_expedition())
    assert acc.skills == (
        NamedThreshold("Analysis", 2),
        NamedThreshold("Survival Skills", 3),
    )
    assert acc.stats == (NamedThreshold("strength", 10),)
    assert acc.ranks == (NamedThreshold("Rank 15", 15), NamedThreshold("Rank 9", 9))
    assert acc.items == ("Torch",)


def test_accumulate_is_idempotent() -> None:
    exp = _expedition()
    assert accumulate(exp) == accumulate(exp)


def test_type_filter_keeps_baseline() -> None:
    acc = accumulate(_expedition(), type_filter={"Puzzle"})
    assert acc.skills == (
        NamedThreshold("Analysis", 2),
        NamedThreshold("Survival Skills", 1),
    )
    assert acc.stats == (NamedThreshold("strength", 4),)
    assert acc.ranks == ()


def test_subtype_filter_never_drops_events_without_subtype() -> None:
    kept = filter_events(_expedition().events, subtype_filter={"Wizard"})
    assert [e.name for e in kept] == ["Temple", "Idol"]


def test_filter_excluding_everything_leaves_only_baseline() -> None:
    acc = accumulate(_expedition(), type_filter={"Nothing"})
    assert [s.name for s in acc.skills] == ["Analysis", "Survival Skills"]
    assert acc.items == () and acc.stats == () and acc.ranks == ()


def test_accumulate_ignores_event_order() -> None:
    forward = _expedition()
    backward = Expedition(
        name=forward.name,
        skill_requirements=list(forward.skill_requirements),
        events=list(reversed(forward.events)),
    )
    assert accumulate(forward) == accumulate(backward)
    assert accumulate(forward, subtype_filter={"Barbarian"}) == accumulate(
        backward, subtype_filter={"Barbarian"}
    )
