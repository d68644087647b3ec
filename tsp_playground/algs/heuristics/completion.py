"""Greedy tour completions: nearest neighbour and uniform random."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional

from tsp_playground.algs.geometry import distance
from tsp_playground.algs.heuristics.base import Process, ProcessContext, Suspend, commit_append
from tsp_playground.common.constants import NN_STEP_DELAY, RANDOM_STEP_DELAY
from tsp_playground.state.tour import Tour
from tsp_playground.visualization.events import Source

Chooser = Callable[[Tour], Optional[int]]


def nearest_unvisited(tour: Tour) -> Optional[int]:
    """Closest unvisited point to the tour's last point; the lowest index wins ties."""
    current = tour.last
    if current is None:
        return None
    points = tour.points
    best_idx: Optional[int] = None
    best_dist = math.inf
    for idx in range(tour.n):
        if idx in tour:
            continue
        dist = distance(points[current], points[idx])
        if dist < best_dist:
            best_dist = dist
            best_idx = idx
    return best_idx


def random_unvisited(rng: random.Random) -> Chooser:
    def choose(tour: Tour) -> Optional[int]:
        unvisited = tour.unvisited()
        if not unvisited:
            return None
        return unvisited[rng.randrange(len(unvisited))]

    return choose


def complete_tour(
    ctx: ProcessContext,
    choose: Chooser,
    *,
    delay: float,
    source: Source,
) -> Process:
    """Extend an open, non-empty tour with ``choose`` until it is closed."""
    if len(ctx.tour) == 0 or ctx.tour.is_closed():
        raise ValueError("completion needs an open, non-empty tour")
    return _complete(ctx, choose, delay, source)


def _complete(ctx: ProcessContext, choose: Chooser, delay: float, source: Source) -> Process:
    tour = ctx.tour
    while tour.visited_count() < tour.n:
        if ctx.should_stop():
            return
        nxt = choose(tour)
        if nxt is None:
            break
        commit_append(ctx, nxt, source)
        yield Suspend(delay)
        if ctx.should_stop():
            return

    if tour.can_close():
        commit_append(ctx, tour[0], source)
        yield Suspend(delay, "close")


def nearest_neighbor_completion(ctx: ProcessContext, *, delay: float = NN_STEP_DELAY) -> Process:
    return complete_tour(ctx, nearest_unvisited, delay=delay, source="nearest_neighbor")


def random_completion(
    ctx: ProcessContext,
    rng: Optional[random.Random] = None,
    *,
    delay: float = RANDOM_STEP_DELAY,
) -> Process:
    chooser = random_unvisited(rng if rng is not None else random.Random())
    return complete_tour(ctx, chooser, delay=delay, source="random")


__all__ = [
    "Chooser",
    "nearest_unvisited",
    "random_unvisited",
    "complete_tour",
    "nearest_neighbor_completion",
    "random_completion",
]
