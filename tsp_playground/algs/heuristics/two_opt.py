"""Best-improvement 2-opt over a closed tour, one swap per step."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from tsp_playground.algs.geometry import Point, two_opt_gain
from tsp_playground.algs.heuristics.base import Process, ProcessContext, Suspend
from tsp_playground.common.constants import MIN_IMPROVEMENT, TWO_OPT_HIGHLIGHT_DELAY
from tsp_playground.visualization.events import (
    ClearHighlightsEvent,
    SwapEvent,
    SwapPreviewEvent,
    SwapResultEvent,
    swap_edges,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoOptMove:
    i: int
    j: int
    gain: float

    @property
    def segment(self) -> Tuple[int, int]:
        return self.i + 1, self.j


def candidate_pairs(indices: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Position pairs ``(i, j)`` whose edges a 2-opt move may exchange.

    On a closed tour the last entry repeats the first, so ``j`` stops at
    ``k - 2`` and the pair ``(0, k - 2)`` is skipped: its two edges meet at the
    start point and swapping them only reverses the direction of travel.
    """
    k = len(indices)
    closed = k > 1 and indices[0] == indices[-1]
    last = k - 2 if closed else k - 1
    for i in range(last - 1):
        for j in range(i + 2, last + 1):
            if closed and i == 0 and j == k - 2:
                continue
            yield i, j


def has_improving_swap(
    points: Sequence[Point],
    indices: Sequence[int],
    min_improvement: float = MIN_IMPROVEMENT,
) -> bool:
    for i, j in candidate_pairs(indices):
        if two_opt_gain(points, indices, i, j) > min_improvement:
            return True
    return False


def best_two_opt_move(
    points: Sequence[Point],
    indices: Sequence[int],
    min_improvement: float = MIN_IMPROVEMENT,
) -> Optional[TwoOptMove]:
    """Full scan for the largest gain; the first pair found wins ties.

    Returns ``None`` when no gain exceeds ``min_improvement``, i.e. the tour
    is 2-opt locally optimal up to the deadband.
    """
    best: Optional[TwoOptMove] = None
    best_gain = 0.0
    for i, j in candidate_pairs(indices):
        gain = two_opt_gain(points, indices, i, j)
        if gain > best_gain:
            best_gain = gain
            best = TwoOptMove(i=i, j=j, gain=gain)
    if best is None or best.gain <= min_improvement:
        return None
    return best


def two_opt_improvement(
    ctx: ProcessContext,
    *,
    delay: float = TWO_OPT_HIGHLIGHT_DELAY,
    min_improvement: float = MIN_IMPROVEMENT,
) -> Process:
    tour = ctx.tour
    if not tour.is_closed() or len(tour) < 4:
        raise ValueError("2-opt needs a closed tour over at least three points")
    return _improve(ctx, delay, min_improvement)


def _improve(ctx: ProcessContext, delay: float, min_improvement: float) -> Process:
    tour = ctx.tour
    swaps = 0
    try:
        while True:
            if ctx.should_stop():
                return
            indices = tour.indices
            move = best_two_opt_move(tour.points, indices, min_improvement)
            if move is None:
                logger.info("2-opt converged after %d swaps (length %.3f)", swaps, tour.route_length())
                return

            removed_ab, removed_cd, added_ac, added_bd = swap_edges(indices, move.i, move.j)
            ctx.emit_highlight(
                SwapPreviewEvent(
                    type="swap_preview",
                    remove=[removed_ab, removed_cd],
                    add=[added_ac, added_bd],
                    gain=float(move.gain),
                )
            )
            yield Suspend(delay, "swap_preview")
            if ctx.should_stop():
                return

            start, end = move.segment
            snapshot = tour.snapshot()
            tour.reverse_segment(start, end)
            ctx.history.push(snapshot)
            swaps += 1
            logger.debug("2-opt swap %d: reversed [%d, %d], gain %.3f", swaps, start, end, move.gain)
            ctx.emit_step(SwapEvent(type="swap", start=start, end=end, source="two_opt"))

            result = tour.indices
            ctx.emit_highlight(
                SwapResultEvent(
                    type="swap_result",
                    edges=[[result[move.i], result[move.i + 1]], [result[move.j], result[(move.j + 1) % len(result)]]],
                )
            )
            yield Suspend(delay, "swap_result")
    finally:
        ctx.emit_highlight(ClearHighlightsEvent(type="clear_highlights"))


__all__ = ["TwoOptMove", "candidate_pairs", "has_improving_swap", "best_two_opt_move", "two_opt_improvement"]
