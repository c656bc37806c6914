# expeditions/result_types.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from expeditions.expedition import Expedition
from expeditions.requirements import StaffRequirement
from expeditions.staff import StaffMember

FeasibilityStatus = Literal["possible", "partial", "impossible"]
POSSIBLE: FeasibilityStatus = "possible"
PARTIAL: FeasibilityStatus = "partial"
IMPOSSIBLE: FeasibilityStatus = "impossible"


@dataclass(frozen=True)
class NamedThreshold:
    name: str
    level: int


@dataclass(frozen=True)
class AccumulatedRequirements:
    """Consolidated requirements, one entry per name, sorted by name."""

    skills: tuple[NamedThreshold, ...] = ()
    items: tuple[str, ...] = ()
    ranks: tuple[NamedThreshold, ...] = ()
    stats: tuple[NamedThreshold, ...] = ()


@dataclass
class SolveOutcome:
    """Raw output of an assignment search."""

    team: Optional[tuple[StaffMember, ...]]
    score: int = 0
    candidates_examined: int = 0
    truncated: bool = False
    undersized: list[StaffRequirement] = field(default_factory=list)
    backend: str = "exhaustive"

    @property
    def found(self) -> bool:
        return self.team is not None


@dataclass
class FeasibilityResult:
    """Classification of one expedition against the roster."""

    expedition: Expedition
    status: FeasibilityStatus
    missing_staff: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    team: tuple[StaffMember, ...] = ()
    satisfied_events: int = 0
    total_events: int = 0
    truncated: bool = False

    @property
    def event_ratio(self) -> Optional[float]:
        """n/m of events the chosen team satisfies; None when there are no events."""
        if self.total_events == 0:
            return None
        return self.satisfied_events / self.total_events
