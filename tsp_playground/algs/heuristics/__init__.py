"""Cancellable, steppable tour heuristics."""

from __future__ import annotations

from tsp_playground.algs.heuristics.base import (
    Process,
    ProcessContext,
    Suspend,
    commit_append,
    run_to_completion,
)
from tsp_playground.algs.heuristics.completion import (
    complete_tour,
    nearest_neighbor_completion,
    nearest_unvisited,
    random_completion,
)
from tsp_playground.algs.heuristics.two_opt import (
    TwoOptMove,
    best_two_opt_move,
    candidate_pairs,
    has_improving_swap,
    two_opt_improvement,
)

__all__ = [
    "Process",
    "ProcessContext",
    "Suspend",
    "commit_append",
    "run_to_completion",
    "complete_tour",
    "nearest_neighbor_completion",
    "nearest_unvisited",
    "random_completion",
    "TwoOptMove",
    "best_two_opt_move",
    "candidate_pairs",
    "has_improving_swap",
    "two_opt_improvement",
]
