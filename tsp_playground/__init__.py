# Geometry
from .algs.geometry import Point, distance, path_length

# Heuristics
from .algs.heuristics import (
    best_two_opt_move,
    has_improving_swap,
    nearest_neighbor_completion,
    random_completion,
    two_opt_improvement,
)

# Configuration & errors
from .common.config import EngineConfig
from .common.constants import (
    DEFAULT_SEED,
    HISTORY_LIMIT,
    MIN_IMPROVEMENT,
    RNG_SEEDS,
    seed_everywhere,
)
from .common.log import configure_logging
from .errors import (
    DuplicateIndex,
    EmptyHistory,
    EmptyTour,
    InvalidIndex,
    NothingToUndo,
    PreconditionNotMet,
    TourComplete,
    TourError,
)

# State, session and facade
from .engine import TourEngine
from .session import ManualScheduler, Scheduler, Session
from .state import History, Tour, TourSnapshot

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # geometry
    "Point",
    "distance",
    "path_length",
    # heuristics
    "best_two_opt_move",
    "has_improving_swap",
    "nearest_neighbor_completion",
    "random_completion",
    "two_opt_improvement",
    # config
    "EngineConfig",
    "DEFAULT_SEED",
    "HISTORY_LIMIT",
    "MIN_IMPROVEMENT",
    "RNG_SEEDS",
    "seed_everywhere",
    "configure_logging",
    # errors
    "TourError",
    "InvalidIndex",
    "DuplicateIndex",
    "TourComplete",
    "EmptyTour",
    "EmptyHistory",
    "NothingToUndo",
    "PreconditionNotMet",
    # state & session
    "Tour",
    "TourSnapshot",
    "History",
    "Session",
    "Scheduler",
    "ManualScheduler",
    "TourEngine",
]
