from __future__ import annotations

from typing import Optional

# Game limits
MIN_STAFF_LEVEL = 1
MAX_STAFF_LEVEL = 20
MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 3
MAX_SKILL_SLOTS = 5

# Wildcard staff-requirement tokens
ANY_STAFF = "ANY Staff"
ANY_EXPERT = "ANY Expert"
WILDCARDS: frozenset[str] = frozenset({ANY_STAFF, ANY_EXPERT})

EXPERT_TYPES: tuple[str, ...] = (
    "Prehistory Expert",
    "Botany Expert",
    "Fantasy Expert",
    "Marine Life Expert",
    "Wildlife Expert",
    "Digital Expert",
    "Supernatural Expert",
    "Science Expert",
    "Space Expert",
)

# Subtypes are hired as distinct options but match their parent for requirements.
SUBTYPE_PARENTS: dict[str, str] = {
    "Barbarian": "Fantasy Expert",
    "Bard": "Fantasy Expert",
    "Rogue": "Fantasy Expert",
    "Wizard": "Fantasy Expert",
}

STAFF_TYPES: tuple[str, ...] = (
    "General Staff",
    *EXPERT_TYPES,
    "Assistant",
    "Janitor",
    "Security Guard",
    *SUBTYPE_PARENTS.keys(),
)

UNIVERSAL_SKILLS: tuple[str, ...] = ("Aerodynamics", "Happy Thoughts", "Pilot Wings")

EXPERT_SKILLS: tuple[str, ...] = (
    "Analysis",
    "Rapid Restoration",
    "Survey Skills",
    "Survival Skills",
    "Tour Guidelines",
)

TYPE_EXCLUSIVE_SKILLS: dict[str, tuple[str, ...]] = {
    "Fantasy Expert": ("Potion Master",),
    "Marine Life Expert": ("Fish Whispering",),
    "Wildlife Expert": ("Animal Analysis", "Macro-Zoology", "Micro-Zoology"),
    "Digital Expert": ("Button Master",),
    "Supernatural Expert": ("Spirit Whispering",),
    "Assistant": ("Accomplished Admission", "Customer Service", "Marketing"),
    "Janitor": ("Fire-Resistance", "Ghost Capture", "Mechanics", "Workshop"),
    "Security Guard": ("Camera Room", "Strolling Surveillance"),
}

SKILLS: tuple[str, ...] = (
    *UNIVERSAL_SKILLS,
    *EXPERT_SKILLS,
    *(s for skills in TYPE_EXCLUSIVE_SKILLS.values() for s in skills),
)

# Attribute scores carried by subtype members, keyed by canonical name.
ATTRIBUTES: tuple[str, ...] = ("strength", "dexterity", "intelligence", "luck")

STAT_ALIASES: dict[str, str] = {
    "str": "strength",
    "strength": "strength",
    "dex": "dexterity",
    "dexterity": "dexterity",
    "int": "intelligence",
    "intelligence": "intelligence",
    "luck": "luck",
}


def parent_type(staff_type: str) -> Optional[str]:
    """Declared parent of a subtype, or None for top-level types."""
    return SUBTYPE_PARENTS.get(staff_type)


def is_subtype(staff_type: str) -> bool:
    return staff_type in SUBTYPE_PARENTS


def is_expert(staff_type: str) -> bool:
    """
    Expert-class flag. A subtype inherits the flag from its parent, so the
    adventurer subtypes count as experts through Fantasy Expert.
    """
    if "Expert" in staff_type:
        return True
    parent = parent_type(staff_type)
    return parent is not None and "Expert" in parent


def available_skills(staff_type: str) -> list[str]:
    """Skills a staff type is allowed to learn, in catalog order."""
    lookup = parent_type(staff_type) or staff_type
    allowed: list[str] = list(UNIVERSAL_SKILLS)
    if is_expert(staff_type):
        allowed.extend(EXPERT_SKILLS)
    allowed.extend(TYPE_EXCLUSIVE_SKILLS.get(lookup, ()))
    return allowed


def can_have_skill(staff_type: str, skill: str) -> bool:
    return skill in available_skills(staff_type)
