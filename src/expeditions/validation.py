from __future__ import annotations

from typing import Any

from expeditions.catalog import (
    MAX_SKILL_LEVEL,
    MAX_STAFF_LEVEL,
    MIN_SKILL_LEVEL,
    MIN_STAFF_LEVEL,
    SKILLS,
    STAFF_TYPES,
    STAT_ALIASES,
    WILDCARDS,
)


class ValidationError(ValueError):
    """Raised when malformed input reaches a construction boundary."""


def _require_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer, got {value!r}.")
    return value


def validate_staff_type(staff_type: str) -> str:
    if staff_type not in STAFF_TYPES:
        raise ValidationError(
            f"Unknown staff type {staff_type!r}. Valid types: {', '.join(STAFF_TYPES)}"
        )
    return staff_type


def validate_type_token(token: str) -> str:
    """Accept a concrete staff type or one of the wildcard tokens."""
    if token in WILDCARDS:
        return token
    return validate_staff_type(token)


def validate_skill(skill: str) -> str:
    if skill not in SKILLS:
        raise ValidationError(
            f"Unknown skill {skill!r}. Valid skills: {', '.join(SKILLS)}"
        )
    return skill


def validate_skill_level(level: Any, skill: str = "skill") -> int:
    lvl = _require_int(level, f"Level of {skill}")
    if not (MIN_SKILL_LEVEL <= lvl <= MAX_SKILL_LEVEL):
        raise ValidationError(
            f"Invalid level {lvl} for {skill}. "
            f"Must be {MIN_SKILL_LEVEL}-{MAX_SKILL_LEVEL}."
        )
    return lvl


def validate_staff_level(level: Any) -> int:
    lvl = _require_int(level, "Staff level")
    if not (MIN_STAFF_LEVEL <= lvl <= MAX_STAFF_LEVEL):
        raise ValidationError(
            f"Invalid staff level {lvl}. Must be {MIN_STAFF_LEVEL}-{MAX_STAFF_LEVEL}."
        )
    return lvl


def validate_count(count: Any, token: str) -> int:
    n = _require_int(count, f"Count for {token}")
    if n <= 0:
        raise ValidationError(f"Invalid staff count {n} for {token}. Must be >= 1.")
    return n


def validate_threshold(level: Any, what: str) -> int:
    n = _require_int(level, what)
    if n < 0:
        raise ValidationError(f"{what} must be non-negative, got {n}.")
    return n


def normalize_stat_name(name: str) -> str:
    """Map a stat name or abbreviation (any case) to its canonical attribute."""
    key = str(name).strip().lower()
    if key not in STAT_ALIASES:
        raise ValidationError(
            f"Unknown stat {name!r}. Valid stats: STR, DEX, INT, LUCK "
            "(or strength, dexterity, intelligence, luck)."
        )
    return STAT_ALIASES[key]
