# expeditions/precheck.py
from __future__ import annotations

import sys
from typing import Dict, List, Sequence, Tuple

from expeditions.evaluator import best_skill_level
from expeditions.expedition import Expedition
from expeditions.resolver import resolve_pool
from expeditions.staff import StaffMember


def missing_staff(roster: Sequence[StaffMember], expedition: Expedition) -> List[str]:
    """Staff requirements whose eligible pool in the whole roster is too small."""
    out: List[str] = []
    for req in expedition.staff_requirements:
        have = len(resolve_pool(req.type, roster))
        if have < req.count:
            out.append(req.describe(have))
    return out


def missing_skills(roster: Sequence[StaffMember], expedition: Expedition) -> List[str]:
    """Baseline skills no member of the whole roster reaches."""
    return [
        sr.describe()
        for sr in expedition.skill_requirements
        if best_skill_level(roster, sr.skill) < sr.level
    ]


def roster_shortfalls(
    roster: Sequence[StaffMember], expedition: Expedition
) -> Tuple[List[str], List[str]]:
    return missing_staff(roster, expedition), missing_skills(roster, expedition)


def precheck_catalog(
    roster: Sequence[StaffMember],
    expeditions: Sequence[Expedition],
    *,
    verbose: bool = True,
    stream=None,
) -> Dict[str, Tuple[List[str], List[str]]]:
    """
    Returns:
      gaps[expedition name] = (missing staff descriptions, missing skill descriptions)
      for every expedition whose baseline cannot be met by the roster as a whole.
    A clean precheck does not guarantee a team exists: one member cannot fill two
    seats, and the skills may sit on staff outside the eligible pools.
    """
    stream = stream or sys.stdout
    gaps: Dict[str, Tuple[List[str], List[str]]] = {}
    for exp in expeditions:
        staff_gaps, skill_gaps = roster_shortfalls(roster, exp)
        if staff_gaps or skill_gaps:
            gaps[exp.name] = (staff_gaps, skill_gaps)

    if verbose:
        print_precheck(len(roster), len(expeditions), gaps, stream=stream)
    return gaps


def print_precheck(
    n_staff: int,
    n_expeditions: int,
    gaps: Dict[str, Tuple[List[str], List[str]]],
    *,
    stream=sys.stdout,
) -> None:
    print("\nPre-check:\n", file=stream)
    ok = n_expeditions - len(gaps)
    print(
        f"ℹ️  Roster of {n_staff} staff covers the baseline of {ok}/{n_expeditions} "
        "expedition(s).",
        file=stream,
    )
    for name in sorted(gaps):
        staff_gaps, skill_gaps = gaps[name]
        parts = []
        if staff_gaps:
            parts.append("staff: " + ", ".join(staff_gaps))
        if skill_gaps:
            parts.append("skills: " + ", ".join(skill_gaps))
        print(f"❌ {name}: " + " | ".join(parts), file=stream)
