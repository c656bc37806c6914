from __future__ import annotations

import logging
from typing import AbstractSet, Sequence

from expeditions.classifier import classify_all
from expeditions.config import Config, cfg
from expeditions.expedition import Event, Expedition, Reward
from expeditions.reporting import Reporter
from expeditions.requirements import (
    EventCounter,
    SkillRequirement,
    StaffRequirement,
)
from expeditions.result_types import FeasibilityResult
from expeditions.staff import Roster, StaffMember, staff_from_json

log = logging.getLogger(__name__)


def run_feasibility(
    roster: Sequence[StaffMember],
    expeditions: Sequence[Expedition],
    available_items: AbstractSet[str] = frozenset(),
    config: Config | None = None,
    reporter: Reporter | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
) -> list[FeasibilityResult]:
    """
    Classify every expedition against the roster and optionally report on it.

    Parameters
    ----------
    roster:
        Hired staff. Order matters: among equally good teams, the one made of
        earlier members wins.
    expeditions:
        The catalog to evaluate. Results come back in the same order.
    available_items:
        Names of items the player currently owns (for Item event requirements).
    config:
        The configuration for the run. Defaults to `expeditions.config.cfg`.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no
        reporter is provided, the default `Reporter` is used.
    validate_config:
        Toggle to run `Config.validate()` before classifying.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.

    Returns
    -------
    list[FeasibilityResult]
        One classification per expedition.
    """
    cfg_obj = config or cfg
    if validate_config:
        cfg_obj.validate()

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)

    if active_reporter is not None:
        active_reporter.pre_run(roster, expeditions)

    log.info(
        "Classifying %d expedition(s) against %d staff with the %s backend",
        len(expeditions),
        len(roster),
        cfg_obj.SOLVER_BACKEND,
    )
    results = classify_all(roster, expeditions, available_items, cfg_obj)

    if active_reporter is not None:
        active_reporter.post_run(results)
    return results


def demo_catalog() -> list[Expedition]:
    """A small hand-written catalog covering each outcome."""
    return [
        Expedition(
            name="Darkest Depths",
            map="Blue Coral Cove",
            skill_requirements=[
                SkillRequirement("Fish Whispering", 2),
                SkillRequirement("Survey Skills", 1),
            ],
            staff_requirements=[
                StaffRequirement("Marine Life Expert", 1),
                StaffRequirement("ANY Expert", 1),
            ],
            events=[
                Event.from_counter(
                    1,
                    "Glowing Shoal",
                    EventCounter(skill="Fish Whispering", skill_level=3),
                    type="Discovery",
                ),
                Event.from_counter(
                    2,
                    "Sunken Chest",
                    EventCounter(item="Diving Bell"),
                    type="Treasure",
                ),
            ],
            rewards=[Reward("Anglerfish Lamp", type="Scenery")],
        ),
        Expedition(
            name="Enchanted Ruins",
            map="Fantasy Isle",
            skill_requirements=[SkillRequirement("Potion Master", 1)],
            staff_requirements=[
                StaffRequirement("Fantasy Expert", 2),
                StaffRequirement("ANY Staff", 1),
            ],
            events=[
                Event.from_counter(
                    1,
                    "Dragon's Riddle",
                    EventCounter(stat="int", stat_level=12),
                    type="Challenge",
                    subtype="Wizard",
                ),
                Event.from_counter(
                    2,
                    "Ogre Bridge",
                    EventCounter(stat="str", stat_level=15, rank=10),
                    type="Challenge",
                    subtype="Barbarian",
                ),
            ],
        ),
        Expedition(
            name="Haunted Manor",
            map="Spooky Hollow",
            skill_requirements=[SkillRequirement("Spirit Whispering", 2)],
            staff_requirements=[StaffRequirement("Supernatural Expert", 2)],
        ),
    ]


def demo_roster() -> Roster:
    return Roster(
        [
            StaffMember(
                id="s1",
                name="Marina",
                type="Marine Life Expert",
                level=10,
                skills={"Fish Whispering": 3},
            ),
            StaffMember(
                id="s2",
                name="Sol",
                type="Science Expert",
                level=5,
                skills={"Survey Skills": 1},
            ),
            StaffMember(
                id="s3",
                name="Merlin",
                type="Wizard",
                level=8,
                skills={"Potion Master": 2},
                attributes={"int": 14, "str": 3},
            ),
            StaffMember(
                id="s4",
                name="Grok",
                type="Barbarian",
                level=6,
                skills={"Survival Skills": 1},
                attributes={"str": 11, "int": 2},
            ),
            StaffMember(id="s5", name="Pat", type="Janitor", level=2),
        ]
    )


def main(use_json: bool = False) -> list[FeasibilityResult]:
    """CLI entry point: run the demo catalog against the demo (or JSON) roster."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    roster = staff_from_json() if use_json else demo_roster()
    return run_feasibility(roster, demo_catalog(), available_items={"Diving Bell"})


if __name__ == "__main__":
    main()
