from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, overload

import pandas as pd

from expeditions.catalog import ATTRIBUTES, can_have_skill, is_subtype
from expeditions.slots import available_slots, remaining_slots, used_slots
from expeditions.validation import (
    ValidationError,
    normalize_stat_name,
    validate_skill,
    validate_skill_level,
    validate_staff_level,
    validate_staff_type,
)

DEFAULT_STAFF_JSON = Path(__file__).resolve().parents[1] / "example_staff.json"


@dataclass(slots=True)
class StaffMember:
    """
    A hired resource. Skills map skill name -> level (1-3); the summed levels
    must fit inside the slot capacity of the member's level.
    """

    id: str
    name: str
    type: str
    level: int = 1
    skills: dict[str, int] = field(default_factory=dict)
    attributes: Optional[dict[str, int]] = None

    def __post_init__(self) -> None:
        validate_staff_type(self.type)
        self.level = validate_staff_level(self.level)
        self.skills = {
            skill: self._checked_skill(skill, lvl) for skill, lvl in self.skills.items()
        }
        if self.attributes is not None:
            self.attributes = self._checked_attributes(self.attributes)
        self._check_capacity(self.skills, self.level)

    def __repr__(self) -> str:
        skills = ", ".join(f"{s}={lvl}" for s, lvl in self.skills.items())
        return (
            f"StaffMember(id='{self.id}', name='{self.name}', type='{self.type}', "
            f"level={self.level}, slots={self.used_slots}/{self.available_slots}, "
            f"skills=[{skills}])"
        )

    # ---------- derived ----------
    @property
    def used_slots(self) -> int:
        return used_slots(self.skills)

    @property
    def available_slots(self) -> int:
        return available_slots(self.level)

    @property
    def remaining_slots(self) -> int:
        return remaining_slots(self.skills, self.level)

    def skill_level(self, skill: str) -> int:
        return self.skills.get(skill, 0)

    def attribute(self, name: str) -> int:
        if not self.attributes:
            return 0
        return self.attributes.get(normalize_stat_name(name), 0)

    # ---------- edits ----------
    def set_level(self, level: int) -> None:
        lvl = validate_staff_level(level)
        self._check_capacity(self.skills, lvl)
        self.level = lvl

    def set_skill(self, skill: str, level: int) -> None:
        lvl = self._checked_skill(skill, level)
        updated = {**self.skills, skill: lvl}
        self._check_capacity(updated, self.level)
        self.skills = updated

    def remove_skill(self, skill: str) -> None:
        self.skills.pop(skill, None)

    def set_attributes(self, **scores: int) -> None:
        merged = dict(self.attributes or {})
        merged.update(self._checked_attributes(scores))
        self.attributes = merged

    # ---------- checks ----------
    def _checked_skill(self, skill: str, level: Any) -> int:
        validate_skill(skill)
        if not can_have_skill(self.type, skill):
            raise ValidationError(f"{self.type} cannot learn {skill}.")
        return validate_skill_level(level, skill)

    def _checked_attributes(self, scores: Mapping[str, Any]) -> dict[str, int]:
        if not is_subtype(self.type):
            raise ValidationError(
                f"Attribute scores are only tracked for subtypes, not {self.type}."
            )
        out: dict[str, int] = {}
        for name, value in scores.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"Attribute {name} must be an integer.")
            if value < 0:
                raise ValidationError(
                    f"Attribute {name} must be non-negative, got {value}."
                )
            out[normalize_stat_name(name)] = value
        return out

    def _check_capacity(self, skills: Mapping[str, int], level: int) -> None:
        used = used_slots(skills)
        cap = available_slots(level)
        if used > cap:
            raise ValidationError(
                f"{self.name} would use {used} skill slots but level {level} "
                f"only provides {cap}."
            )


class Roster(Sequence):
    """Ordered collection of hired staff; ids are unique."""

    def __init__(self, members: Optional[list[StaffMember]] = None) -> None:
        self._members: list[StaffMember] = []
        for member in members or []:
            self.hire(member)

    @overload
    def __getitem__(self, index: int) -> StaffMember: ...

    @overload
    def __getitem__(self, index: slice) -> list[StaffMember]: ...

    def __getitem__(self, index):
        return self._members[index]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[StaffMember]:
        return iter(self._members)

    def hire(self, member: StaffMember) -> StaffMember:
        if any(m.id == member.id for m in self._members):
            raise ValidationError(f"Staff id {member.id!r} is already on the roster.")
        self._members.append(member)
        return member

    def dismiss(self, staff_id: str) -> StaffMember:
        for idx, member in enumerate(self._members):
            if member.id == staff_id:
                return self._members.pop(idx)
        raise KeyError(staff_id)

    def get(self, staff_id: str) -> Optional[StaffMember]:
        return next((m for m in self._members if m.id == staff_id), None)


def staff_to_dataframe(staff: Sequence[StaffMember]) -> pd.DataFrame:
    rows = []
    for s in staff:
        rows.append(
            {
                "id": s.id,
                "name": s.name,
                "type": s.type,
                "level": s.level,
                "used_slots": s.used_slots,
                "available_slots": s.available_slots,
                "remaining_slots": s.remaining_slots,
                "skills": dict(s.skills),
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "id",
            "name",
            "type",
            "level",
            "used_slots",
            "available_slots",
            "remaining_slots",
            "skills",
        ],
    )


def staff_from_json(path: str | Path | None = None) -> Roster:
    """
    Load a roster from a JSON file on disk.

    If `path` is omitted, the loader reads from `src/example_staff.json`. Files
    may contain either a list of staff objects or an object with a top-level
    `staff` array. Skills are an object of skill name -> level.
    """

    file_path = Path(path) if path is not None else DEFAULT_STAFF_JSON
    file_path = file_path.expanduser()

    if file_path.suffix.lower() != ".json":
        raise ValueError("staff_from_json expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Staff JSON file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    if isinstance(data, Mapping):
        entries = data.get("staff")
        if entries is None:
            raise ValueError("JSON file must contain a list or a 'staff' key.")
    elif isinstance(data, list):
        entries = data
    else:
        raise TypeError("JSON file must contain a list of staff objects.")

    roster = Roster()
    for raw in entries:
        if not isinstance(raw, Mapping):
            raise TypeError("Each staff entry must be an object/dict.")
        skills_raw = raw.get("skills") or {}
        if not isinstance(skills_raw, Mapping):
            raise TypeError("'skills' must be an object of skill name -> level.")
        attributes = raw.get("attributes")
        roster.hire(
            StaffMember(
                id=str(_required(raw, "id")),
                name=str(raw.get("name", "")),
                type=str(_required(raw, "type")),
                level=_to_int(raw.get("level", 1), "level"),
                skills={str(k): _to_int(v, str(k)) for k, v in skills_raw.items()},
                attributes=(
                    {str(k): _to_int(v, str(k)) for k, v in attributes.items()}
                    if attributes
                    else None
                ),
            )
        )
    return roster


def _required(raw: Mapping[str, Any], key: str) -> Any:
    value = raw.get(key)
    if value in (None, ""):
        raise ValueError(f"Staff entry missing '{key}'.")
    return value


def _to_int(value: Any, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid integer for '{field}': {value!r}") from exc
