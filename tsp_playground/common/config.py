"""Engine configuration bundle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from tsp_playground.common.constants import (
    HISTORY_LIMIT,
    MIN_IMPROVEMENT,
    NN_STEP_DELAY,
    RANDOM_STEP_DELAY,
    TWO_OPT_HIGHLIGHT_DELAY,
)


@dataclass(frozen=True)
class EngineConfig:
    """Tunable knobs for a :class:`~tsp_playground.engine.TourEngine`.

    ``random_seed`` seeds the private RNG used by the random completion; when
    ``None`` the completion is not reproducible across runs.
    """

    history_limit: int = HISTORY_LIMIT
    min_improvement: float = MIN_IMPROVEMENT
    nn_step_delay: float = NN_STEP_DELAY
    random_step_delay: float = RANDOM_STEP_DELAY
    two_opt_highlight_delay: float = TWO_OPT_HIGHLIGHT_DELAY
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        if not math.isfinite(self.min_improvement) or self.min_improvement < 0.0:
            raise ValueError("min_improvement must be finite and non-negative")
        for name in ("nn_step_delay", "random_step_delay", "two_opt_highlight_delay"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"{name} must be finite and non-negative")

    def scaled(self, speed: float) -> "EngineConfig":
        """Return a copy whose delays are divided by ``speed``."""
        if not math.isfinite(speed) or speed <= 0.0:
            raise ValueError("speed must be positive")
        return EngineConfig(
            history_limit=self.history_limit,
            min_improvement=self.min_improvement,
            nn_step_delay=self.nn_step_delay / speed,
            random_step_delay=self.random_step_delay / speed,
            two_opt_highlight_delay=self.two_opt_highlight_delay / speed,
            random_seed=self.random_seed,
        )


__all__ = ["EngineConfig"]
