from dataclasses import dataclass
from typing import Literal, Optional

SolverBackend = Literal["exhaustive", "cpsat"]
BACKENDS: tuple[str, ...] = ("exhaustive", "cpsat")


@dataclass
class Config:

    ### SOLVER SETUP ###

    # "exhaustive" enumerates every valid team; "cpsat" models the same search in CP-SAT
    SOLVER_BACKEND: SolverBackend = "exhaustive"

    # Cap on complete teams scored per expedition (None = unbounded)
    MAX_CANDIDATES: Optional[int] = None

    # Stop enumerating once a team satisfies every event
    STOP_AT_FULL_COVERAGE: bool = True

    # CP-SAT only
    TIME_LIMIT_SEC: float = 10.0
    NUM_PARALLEL_WORKERS: int = 1

    ### REPORTING ###

    OUTPUT_DIR: Optional[str] = "outputs"  # None = do not write files
    ENABLE_PLOTS: bool = False
    NUM_PRINT_EXAMPLES: int = 6

    def validate(self):
        """
        Validate the Config object has sensible values before solving.
        """
        if self.SOLVER_BACKEND not in BACKENDS:
            raise ValueError(f"SOLVER_BACKEND must be one of {BACKENDS}.")
        if self.MAX_CANDIDATES is not None and self.MAX_CANDIDATES <= 0:
            raise ValueError("MAX_CANDIDATES must be > 0 or None.")
        if self.TIME_LIMIT_SEC <= 0.0:
            raise ValueError("TIME_LIMIT_SEC must be > 0.")
        if self.NUM_PARALLEL_WORKERS <= 0:
            raise ValueError("NUM_PARALLEL_WORKERS must be > 0.")
        if self.NUM_PRINT_EXAMPLES < 0:
            raise ValueError("NUM_PRINT_EXAMPLES must be non-negative.")


cfg = Config()
