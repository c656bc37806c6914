from __future__ import annotations

import math
from typing import Mapping

from expeditions.catalog import MAX_STAFF_LEVEL, MIN_STAFF_LEVEL

# Staff level at which each additional skill slot unlocks.
SLOT_THRESHOLDS: tuple[int, ...] = (5, 10, 15, 20)


def used_slots(skills: Mapping[str, int]) -> int:
    """A skill at level L consumes L slots."""
    return sum(int(level) for level in skills.values())


def available_slots(level: int) -> int:
    """
    Skill capacity for a staff level:
      1 slot below 5, 2 below 10, 3 below 15, 4 below 20, 5 from 20 up.
    """
    return 1 + sum(1 for threshold in SLOT_THRESHOLDS if level >= threshold)


def remaining_slots(skills: Mapping[str, int], level: int) -> int:
    """Unclamped: negative means the caller let the member over-allocate."""
    return available_slots(level) - used_slots(skills)


def constrain_level(level: float) -> int:
    """Round and clamp a raw level into the valid staff range."""
    return max(MIN_STAFF_LEVEL, min(MAX_STAFF_LEVEL, math.floor(level + 0.5)))
