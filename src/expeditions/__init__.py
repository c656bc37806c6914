from .accumulate import accumulate, filter_events
from .classifier import classify, classify_all
from .config import Config, cfg
from .evaluator import check_requirements_fulfillment
from .expedition import Event, Expedition, Reward
from .main import run_feasibility
from .requirements import (
    EventCounter,
    ItemReq,
    RankReq,
    SkillReq,
    SkillRequirement,
    StaffRequirement,
    StatReq,
)
from .result_types import AccumulatedRequirements, FeasibilityResult
from .staff import Roster, StaffMember, staff_from_json
from .validation import ValidationError

__all__ = [
    "Config",
    "cfg",
    "accumulate",
    "filter_events",
    "classify",
    "classify_all",
    "check_requirements_fulfillment",
    "run_feasibility",
    "Event",
    "Expedition",
    "Reward",
    "EventCounter",
    "SkillReq",
    "StatReq",
    "RankReq",
    "ItemReq",
    "SkillRequirement",
    "StaffRequirement",
    "AccumulatedRequirements",
    "FeasibilityResult",
    "Roster",
    "StaffMember",
    "staff_from_json",
    "ValidationError",
]
