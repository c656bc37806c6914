# tests/conftest.py
from __future__ import annotations

import os
import random
from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from expeditions.config import Config  # noqa: E402
from expeditions.staff import StaffMember  # noqa: E402


# -----------------------------
# Global, deterministic seeding
# -----------------------------
@pytest.fixture(autouse=True, scope="session")
def _seed_everything() -> None:
    """
    Make tests deterministic across runs. If you need a different seed in a test,
    override locally.
    """
    seed = int(os.environ.get("PYTEST_SEED", "1234"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Domain helpers
# -----------------------------
@pytest.fixture
def make_staff():
    """Factory with sequential ids so roster order is easy to reason about."""
    counter = {"n": 0}

    def _make(staff_type: str, level: int = 20, name: str | None = None, **kwargs):
        counter["n"] += 1
        sid = kwargs.pop("id", f"s{counter['n']}")
        return StaffMember(
            id=sid, name=name or sid, type=staff_type, level=level, **kwargs
        )

    return _make


@pytest.fixture
def quiet_cfg(tmp_path: Path) -> Config:
    """Config that writes into a temp dir and never plots."""
    return Config(OUTPUT_DIR=str(tmp_path / "outputs"), ENABLE_PLOTS=False)
