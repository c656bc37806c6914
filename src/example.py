"""
Module with example code for running the expedition feasibility checker.

There are three ways to run the code:

1. Run the bundled demo catalog against the demo roster defined in code.
2. Run the demo catalog against staff pre-defined in a JSON file.
3. Same as 2, but search with the CP-SAT backend and plot the results.

Usage via cli:
    python3 src/example.py --option 2
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from expeditions import Config, run_feasibility, staff_from_json
from expeditions.main import demo_catalog, demo_roster
from expeditions.reporting import Reporter

cfg = Config(
    SOLVER_BACKEND="exhaustive",
    MAX_CANDIDATES=100_000,
    OUTPUT_DIR="outputs",
    NUM_PRINT_EXAMPLES=4,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run expedition feasibility examples.")
    parser.add_argument(
        "--option",
        type=int,
        default=2,
        choices=(1, 2, 3),
        help="Example scenario to run (default: 2).",
    )
    parser.add_argument(
        "--items",
        nargs="*",
        default=["Diving Bell"],
        help="Items the player owns, for Item event requirements.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def run_option(option: int, items: set[str]) -> None:
    print(f"Running example code with option {option}")

    # Demo roster defined via code.
    if option == 1:
        run_feasibility(demo_roster(), demo_catalog(), items, config=cfg)

    # Staff from JSON. Typical production use.
    elif option == 2:
        roster = staff_from_json(Path("src/example_staff.json"))
        run_feasibility(roster, demo_catalog(), items, config=cfg)

    elif option == 3:
        roster = staff_from_json(Path("src/example_staff.json"))
        cfg.SOLVER_BACKEND = "cpsat"
        cfg.TIME_LIMIT_SEC = 5.0
        cfg.NUM_PARALLEL_WORKERS = 4
        run_feasibility(
            roster,
            demo_catalog(),
            items,
            config=cfg,
            reporter=Reporter(cfg, enable_plots=True),
        )
    else:
        raise SystemExit(f"Unknown option {option}")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_option(args.option, set(args.items))


if __name__ == "__main__":
    main()
