from __future__ import annotations

from typing import Sequence

from expeditions.catalog import ANY_EXPERT, ANY_STAFF, is_expert, parent_type
from expeditions.staff import StaffMember
from expeditions.validation import validate_type_token


def _matches(token: str, member: StaffMember) -> bool:
    if token == ANY_STAFF:
        return True
    if token == ANY_EXPERT:
        return is_expert(member.type)
    # Subtype grouping is one level deep: a subtype matches its declared parent.
    return member.type == token or parent_type(member.type) == token


def resolve_pool(token: str, roster: Sequence[StaffMember]) -> list[StaffMember]:
    """
    Concrete staff eligible for a requirement token, in roster order and
    without duplicate ids.
    """
    validate_type_token(token)
    seen: set[str] = set()
    pool: list[StaffMember] = []
    for member in roster:
        if member.id in seen or not _matches(token, member):
            continue
        seen.add(member.id)
        pool.append(member)
    return pool
