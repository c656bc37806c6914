from __future__ import annotations

import logging

import pytest

from expeditions.classifier import classify, classify_all
from expeditions.config import Config
from expeditions.expedition import Event, Expedition
from expeditions.requirements import (
    ItemReq,
    SkillReq,
    SkillRequirement,
    StaffRequirement,
    StatReq,
)

LOCKED_SKILLS = {"Animal Analysis": 2, "Macro-Zoology": 2, "Micro-Zoology": 1}


def _locked_expedition() -> Expedition:
    return Expedition(
        name="Savannah Census",
        skill_requirements=[
            SkillRequirement("Animal Analysis", 2),
            SkillRequirement("Macro-Zoology", 2),
            SkillRequirement("Micro-Zoology", 1),
            SkillRequirement("Fish Whispering", 2),
        ],
        staff_requirements=[
            StaffRequirement("Wildlife Expert", 1),
            StaffRequirement("Marine Life Expert", 1),
        ],
    )


def _locked_roster(make_staff, skills=LOCKED_SKILLS):
    return [
        make_staff("Wildlife Expert", level=20, skills=dict(skills)),
        make_staff("Marine Life Expert", level=20, skills={"Fish Whispering": 2}),
    ]


def test_forced_composition_is_possible(make_staff) -> None:
    roster = _locked_roster(make_staff)
    assert roster[0].remaining_slots == 0

    result = classify(roster, _locked_expedition())
    assert result.status == "possible"
    assert [m.id for m in result.team] == ["s1", "s2"]
    assert result.missing_skills == []
    assert result.event_ratio is None


@pytest.mark.parametrize("dropped", sorted(LOCKED_SKILLS))
def test_forced_composition_breaks_when_a_skill_is_removed(
    make_staff, dropped: str
) -> None:
    roster = _locked_roster(make_staff)
    roster[0].remove_skill(dropped)

    result = classify(roster, _locked_expedition())
    assert result.status != "possible"
    assert result.status == "partial"
    assert result.team == ()
    assert result.missing_staff == []
    assert result.missing_skills == [f"{dropped} (level {LOCKED_SKILLS[dropped]})"]


def test_empty_roster_is_impossible_and_lists_every_gap() -> None:
    result = classify([], _locked_expedition(), set())
    assert result.status == "impossible"
    assert result.missing_staff == [
        "1 Wildlife Expert (have 0)",
        "1 Marine Life Expert (have 0)",
    ]
    assert len(result.missing_skills) == 4


def test_empty_roster_with_staff_only_requirement_is_impossible() -> None:
    exp = Expedition(name="Crowd", staff_requirements=[StaffRequirement("ANY Staff", 1)])
    assert classify([], exp).status == "impossible"


def test_one_failure_kind_alone_is_partial(make_staff) -> None:
    exp = Expedition(
        name="Fantasy Trip",
        skill_requirements=[SkillRequirement("Potion Master", 1)],
        staff_requirements=[StaffRequirement("Fantasy Expert", 2)],
    )
    roster = [make_staff("Wizard", skills={"Potion Master": 1})]
    result = classify(roster, exp)
    assert result.status == "partial"
    assert result.missing_staff == ["2 Fantasy Expert (have 1)"]
    assert result.missing_skills == []


def test_subtypes_fill_a_parent_requirement(make_staff) -> None:
    exp = Expedition(
        name="Tavern",
        staff_requirements=[StaffRequirement("Fantasy Expert", 2)],
    )
    roster = [make_staff("Bard"), make_staff("Rogue")]
    assert classify(roster, exp).status == "possible"


def test_any_expert_excludes_non_experts(make_staff) -> None:
    exp = Expedition(name="Lab", staff_requirements=[StaffRequirement("ANY Expert", 1)])
    result = classify([make_staff("Janitor"), make_staff("Assistant")], exp)
    assert result.status == "impossible"
    assert result.missing_staff == ["1 ANY Expert (have 0)"]


def _evented(events) -> Expedition:
    return Expedition(
        name="Evented",
        staff_requirements=[StaffRequirement("ANY Staff", 2)],
        events=events,
    )


@pytest.fixture
def adventurers(make_staff):
    return [
        make_staff("Barbarian", level=10, attributes={"str": 8}),
        make_staff("Rogue", level=10, attributes={"dex": 6, "str": 2}),
    ]


def test_event_ratio_statuses(adventurers) -> None:
    strong = Event(id=1, name="Lift", requirements=[StatReq("str", 10)])
    nimble = Event(id=2, name="Sneak", requirements=[StatReq("dex", 9)])
    lamp = Event(id=3, name="Dark", requirements=[ItemReq("Lamp")])

    full = classify(adventurers, _evented([strong]))
    assert full.status == "possible"
    assert (full.satisfied_events, full.total_events) == (1, 1)

    half = classify(adventurers, _evented([strong, nimble]))
    assert half.status == "partial"
    assert half.event_ratio == pytest.approx(0.5)

    none = classify(adventurers, _evented([nimble, lamp]))
    assert none.status == "impossible"
    assert none.team != ()
    assert none.satisfied_events == 0


def test_unrelated_item_does_not_change_outcome(adventurers) -> None:
    exp = _evented([Event(id=1, name="Dark", requirements=[ItemReq("Lamp")])])
    base = classify(adventurers, exp, {"Lamp"})
    toggled = classify(adventurers, exp, {"Lamp", "Rope"})
    assert base.status == toggled.status == "possible"
    assert classify(adventurers, exp, {"Rope"}).status == "impossible"


def test_superset_of_events_never_scores_lower(make_staff) -> None:
    roster = [
        make_staff("Botany Expert", skills={"Analysis": 1}),
        make_staff("Botany Expert", skills={"Analysis": 3}),
    ]
    base_events = [Event(id=1, name="a", requirements=[SkillReq("Analysis", 2)])]
    extra = base_events + [
        Event(id=2, name="b", requirements=[SkillReq("Analysis", 3)])
    ]

    def _exp(events):
        return Expedition(
            name="Greenhouse",
            staff_requirements=[StaffRequirement("Botany Expert", 1)],
            events=events,
        )

    first = classify(roster, _exp(base_events))
    second = classify(roster, _exp(extra))
    assert second.satisfied_events >= first.satisfied_events


@pytest.mark.parametrize("backend", ["exhaustive", "cpsat"])
def test_classify_all_preserves_order_and_logs(
    make_staff, caplog, backend: str
) -> None:
    roster = _locked_roster(make_staff)
    catalog = [
        _locked_expedition(),
        Expedition(name="Nobody", staff_requirements=[StaffRequirement("Janitor", 1)]),
    ]
    with caplog.at_level(logging.INFO, logger="expeditions.classifier"):
        results = classify_all(roster, catalog, config=Config(SOLVER_BACKEND=backend))
    assert [r.expedition.name for r in results] == ["Savannah Census", "Nobody"]
    assert [r.status for r in results] == ["possible", "impossible"]
    assert "1 possible, 0 partial, 1 impossible" in caplog.text


def test_classify_does_not_mutate_roster(make_staff) -> None:
    roster = _locked_roster(make_staff)
    before = [(m.id, dict(m.skills), m.level) for m in roster]
    classify(roster, _locked_expedition())
    assert [(m.id, dict(m.skills), m.level) for m in roster] == before
