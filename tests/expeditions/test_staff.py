from __future__ import annotations

import json
from pathlib import Path

import pytest

from expeditions.staff import (
    Roster,
    StaffMember,
    staff_from_json,
    staff_to_dataframe,
)
from expeditions.validation import ValidationError


def test_member_slot_accounting() -> None:
    m = StaffMember(
        id="a",
        name="Ada",
        type="Science Expert",
        level=10,
        skills={"Analysis": 2, "Survey Skills": 1},
    )
    assert m.used_slots == 3
    assert m.available_slots == 3
    assert m.remaining_slots == 0
    assert m.skill_level("Analysis") == 2
    assert m.skill_level("Pilot Wings") == 0


def test_member_rejects_over_allocation() -> None:
    with pytest.raises(ValidationError, match="skill slots"):
        StaffMember(id="a", name="Ada", type="Science Expert", level=4,
                    skills={"Analysis": 2})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"type": "Chef"},
        {"type": "Janitor", "level": 0},
        {"type": "Janitor", "level": 21},
        {"type": "Janitor", "skills": {"Analysis": 1}},
        {"type": "Janitor", "skills": {"Mechanics": 4}},
        {"type": "Janitor", "skills": {"Juggling": 1}},
        {"type": "Janitor", "attributes": {"str": 3}},
    ],
)
def test_member_rejects_invalid_fields(kwargs) -> None:
    with pytest.raises(ValidationError):
        StaffMember(id="x", name="X", **kwargs)


def test_attributes_are_normalised_for_subtypes() -> None:
    m = StaffMember(id="w", name="Wiz", type="Wizard", attributes={"INT": 9, "luck": 2})
    assert m.attributes == {"intelligence": 9, "luck": 2}
    assert m.attribute("int") == 9
    assert m.attribute("strength") == 0


def test_edits_revalidate_capacity() -> None:
    m = StaffMember(id="a", name="Ada", type="Botany Expert", level=5,
                    skills={"Analysis": 2})
    with pytest.raises(ValidationError):
        m.set_skill("Survey Skills", 1)
    with pytest.raises(ValidationError):
        m.set_level(4)
    assert m.level == 5

    m.set_level(10)
    m.set_skill("Survey Skills", 1)
    assert m.used_slots == 3

    m.remove_skill("Analysis")
    m.remove_skill("Analysis")
    assert m.skills == {"Survey Skills": 1}


def test_roster_hire_dismiss_get() -> None:
    roster = Roster()
    a = roster.hire(StaffMember(id="a", name="A", type="Janitor"))
    roster.hire(StaffMember(id="b", name="B", type="Assistant"))
    assert len(roster) == 2
    assert roster[0] is a
    assert roster.get("b").name == "B"
    assert roster.get("zzz") is None

    with pytest.raises(ValidationError, match="already on the roster"):
        roster.hire(StaffMember(id="a", name="A2", type="Janitor"))

    roster.dismiss("a")
    assert [m.id for m in roster] == ["b"]
    with pytest.raises(KeyError):
        roster.dismiss("a")


def test_staff_to_dataframe_columns() -> None:
    df = staff_to_dataframe(
        [StaffMember(id="a", name="A", type="Janitor", level=5, skills={"Mechanics": 1})]
    )
    assert list(df.columns)[:4] == ["id", "name", "type", "level"]
    assert df.loc[0, "remaining_slots"] == 1


def test_staff_from_json_accepts_wrapped_list(tmp_path: Path) -> None:
    path = tmp_path / "staff.json"
    path.write_text(
        json.dumps(
            {
                "staff": [
                    {"id": 1, "name": "A", "type": "Janitor", "level": "5",
                     "skills": {"Mechanics": 2}},
                    {"id": 2, "name": "B", "type": "Rogue", "attributes": {"dex": 4}},
                ]
            }
        )
    )
    roster = staff_from_json(path)
    assert [m.id for m in roster] == ["1", "2"]
    assert roster[0].level == 5
    assert roster[1].attribute("dexterity") == 4


def test_staff_from_json_errors(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        staff_from_json(tmp_path / "staff.txt")
    with pytest.raises(FileNotFoundError):
        staff_from_json(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        staff_from_json(bad)

    missing_type = tmp_path / "missing_type.json"
    missing_type.write_text(json.dumps([{"id": "a"}]))
    with pytest.raises(ValueError, match="type"):
        staff_from_json(missing_type)


def test_bundled_example_staff_loads(project_root: Path) -> None:
    roster = staff_from_json(project_root / "src" / "example_staff.json")
    assert len(roster) == 6


def test_set_attributes_merges_and_validates() -> None:
    m = StaffMember(id="r", name="Rogue", type="Rogue", attributes={"dex": 5})
    m.set_attributes(STR=3, dex=7)
    assert m.attributes == {"dexterity": 7, "strength": 3}

    with pytest.raises(ValidationError, match="non-negative"):
        m.set_attributes(luck=-1)
    assert m.attribute("luck") == 0

    janitor = StaffMember(id="j", name="Jan", type="Janitor")
    with pytest.raises(ValidationError, match="only tracked for subtypes"):
        janitor.set_attributes(str=4)
    assert janitor.attributes is None
