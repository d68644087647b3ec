from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Undo log depth; the oldest snapshot is dropped once exceeded.
HISTORY_LIMIT: int = 100

# Deadband for 2-opt gains. Anything at or below this is treated as noise.
MIN_IMPROVEMENT: float = 0.1

# Suspension delays (seconds) between committed heuristic steps.
NN_STEP_DELAY: float = 0.5
RANDOM_STEP_DELAY: float = 0.25
TWO_OPT_HIGHLIGHT_DELAY: float = 1.0

# Number of candidate edges shown from the current end of the tour.
CANDIDATE_COUNT: int = 3

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "demo": 4242,
    "data": 5150,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "HISTORY_LIMIT",
    "MIN_IMPROVEMENT",
    "NN_STEP_DELAY",
    "RANDOM_STEP_DELAY",
    "TWO_OPT_HIGHLIGHT_DELAY",
    "CANDIDATE_COUNT",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
