from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from expeditions.validation import (
    ValidationError,
    normalize_stat_name,
    validate_count,
    validate_skill,
    validate_skill_level,
    validate_threshold,
    validate_type_token,
)


@dataclass(frozen=True)
class SkillRequirement:
    """Baseline (skill, minimum level) pair attached to an expedition."""

    skill: str
    level: int

    def __post_init__(self) -> None:
        validate_skill(self.skill)
        validate_skill_level(self.level, self.skill)

    def describe(self) -> str:
        return f"{self.skill} (level {self.level})"


@dataclass(frozen=True)
class StaffRequirement:
    """Baseline (type token, count) pair; the token may be a wildcard."""

    type: str
    count: int

    def __post_init__(self) -> None:
        validate_type_token(self.type)
        validate_count(self.count, self.type)

    def describe(self, available: int) -> str:
        return f"{self.count} {self.type} (have {available})"


# ----------------------------
# Event requirement union
# ----------------------------
@dataclass(frozen=True)
class SkillReq:
    kind: ClassVar[str] = "Skill"

    name: str
    level: int

    def __post_init__(self) -> None:
        validate_skill(self.name)
        validate_skill_level(self.level, self.name)


@dataclass(frozen=True)
class StatReq:
    """Summed attribute threshold; `name` is stored in canonical long form."""

    kind: ClassVar[str] = "Stat"

    name: str
    level: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_stat_name(self.name))
        validate_threshold(self.level, f"Stat level for {self.name}")


@dataclass(frozen=True)
class RankReq:
    kind: ClassVar[str] = "Rank"

    level: int

    def __post_init__(self) -> None:
        validate_threshold(self.level, "Rank")

    @property
    def name(self) -> str:
        return f"Rank {self.level}"


@dataclass(frozen=True)
class ItemReq:
    kind: ClassVar[str] = "Item"

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Item requirement needs a name.")


Requirement = Union[SkillReq, StatReq, RankReq, ItemReq]
REQUIREMENT_TYPES: tuple[type, ...] = (SkillReq, StatReq, RankReq, ItemReq)


def ensure_requirement(req: object) -> Requirement:
    if not isinstance(req, REQUIREMENT_TYPES):
        raise ValidationError(
            f"Unrecognised requirement kind {type(req).__name__}; expected one of "
            "Skill, Stat, Rank, Item."
        )
    return req  # type: ignore[return-value]


@dataclass(frozen=True)
class EventCounter:
    """
    Raw counter record of an event as it arrives from the tabular data.
    Any subset of the fields may be present.
    """

    skill: Optional[str] = None
    skill_level: Optional[int] = None
    rank: Optional[int] = None
    stat: Optional[str] = None
    stat_level: Optional[int] = None
    item: Optional[str] = None

    def to_requirements(self) -> list[Requirement]:
        """Normalise the counter; absent fields contribute no requirement."""
        out: list[Requirement] = []
        if self.skill:
            if self.skill_level is None:
                raise ValidationError(f"Skill counter {self.skill!r} has no level.")
            out.append(SkillReq(self.skill, self.skill_level))
        if self.stat:
            if self.stat_level is None:
                raise ValidationError(f"Stat counter {self.stat!r} has no level.")
            out.append(StatReq(self.stat, self.stat_level))
        if self.rank:
            out.append(RankReq(self.rank))
        if self.item:
            out.append(ItemReq(self.item))
        return out
