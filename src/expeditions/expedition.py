from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from expeditions.requirements import (
    EventCounter,
    Requirement,
    SkillRequirement,
    StaffRequirement,
    ensure_requirement,
)
from expeditions.validation import ValidationError


@dataclass(frozen=True)
class Reward:
    name: str
    type: str = ""
    subtype: str = ""


@dataclass
class Event:
    """
    Optional sub-scenario of an expedition. `type`/`subtype` are free-form and
    only used for filtering; an empty subtype is never filtered out.
    """

    id: int
    name: str
    type: str = ""
    subtype: str = ""
    description: str = ""
    unlock_description: str = ""
    requirements: list[Requirement] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.requirements = [ensure_requirement(r) for r in self.requirements]

    @classmethod
    def from_counter(
        cls,
        id: int,
        name: str,
        counter: EventCounter,
        type: str = "",
        subtype: str = "",
        description: str = "",
        unlock_description: str = "",
    ) -> "Event":
        return cls(
            id=id,
            name=name,
            type=type,
            subtype=subtype,
            description=description,
            unlock_description=unlock_description,
            requirements=counter.to_requirements(),
        )


@dataclass
class Expedition:
    """A task: baseline staff/skill requirements plus optional events."""

    name: str
    map: str = ""
    skill_requirements: list[SkillRequirement] = field(default_factory=list)
    staff_requirements: list[StaffRequirement] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    rewards: list[Reward] = field(default_factory=list)

    def __post_init__(self) -> None:
        for req in self.skill_requirements:
            if not isinstance(req, SkillRequirement):
                raise ValidationError(
                    f"{self.name}: skill requirements must be SkillRequirement, "
                    f"got {type(req).__name__}."
                )
        for sreq in self.staff_requirements:
            if not isinstance(sreq, StaffRequirement):
                raise ValidationError(
                    f"{self.name}: staff requirements must be StaffRequirement, "
                    f"got {type(sreq).__name__}."
                )

    def event(self, event_id: int) -> Optional[Event]:
        return next((e for e in self.events if e.id == event_id), None)
