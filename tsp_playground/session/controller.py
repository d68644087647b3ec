"""Single-step user commands: clicking points and undo."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from tsp_playground.algs.geometry import distance
from tsp_playground.algs.heuristics.base import ProcessContext, commit_append
from tsp_playground.algs.heuristics.two_opt import has_improving_swap
from tsp_playground.common.constants import CANDIDATE_COUNT, MIN_IMPROVEMENT
from tsp_playground.errors import InvalidIndex, NothingToUndo, PreconditionNotMet
from tsp_playground.session.coordinator import SessionCoordinator
from tsp_playground.session.signals import Signal
from tsp_playground.state.history import History
from tsp_playground.state.tour import Tour
from tsp_playground.visualization.events import EventDict, RefreshEvent

logger = logging.getLogger(__name__)

HINTS = {
    0: "Click on a point to start building your route!",
    1: "Add another point to the route by clicking it.",
    2: "Right-click anywhere to undo the last step.",
}


class InteractionController:
    def __init__(
        self,
        tour: Tour,
        history: History,
        coordinator: SessionCoordinator,
        step_signal: Signal,
        *,
        min_improvement: float = MIN_IMPROVEMENT,
    ) -> None:
        self.tour = tour
        self.history = history
        self.coordinator = coordinator
        self.step_signal = step_signal
        self.min_improvement = min_improvement

    # ------------------------------------------------------------------ commands
    def select_point(self, idx: int) -> EventDict:
        """Append ``idx`` as one undoable step; raises ``TourError`` on rejection."""
        if self.coordinator.is_running():
            raise PreconditionNotMet("a heuristic is running")
        ctx = ProcessContext(tour=self.tour, history=self.history, emit_step=self.step_signal.emit)
        return commit_append(ctx, idx, "manual")

    def undo_or_interrupt(self) -> str:
        """Interrupt the running process, else undo one step.

        Returns ``"interrupted"``, ``"restored"`` (a snapshot was popped) or
        ``"popped"`` (no snapshot; the last point was removed directly).
        """
        if self.coordinator.request_interrupt():
            return "interrupted"
        snapshot = self.history.pop()
        if snapshot is not None:
            self.tour.restore(snapshot)
            logger.debug("restored tour of length %d", len(snapshot.indices))
            self._refresh()
            return "restored"
        if len(self.tour) == 0:
            raise NothingToUndo()
        idx = self.tour.pop_last()
        logger.debug("removed point %d without a snapshot", idx)
        self._refresh()
        return "popped"

    def _refresh(self) -> None:
        self.coordinator.session_signal.emit(RefreshEvent(type="refresh"))

    # ------------------------------------------------------------------ predicates
    def _can_complete(self) -> bool:
        return len(self.tour) >= 1 and not self.tour.is_closed() and not self.coordinator.is_running()

    def can_run_nearest_neighbor(self) -> bool:
        return self._can_complete()

    def can_run_random(self) -> bool:
        return self._can_complete()

    def can_run_two_opt(self) -> bool:
        if not self.tour.is_closed() or len(self.tour) < 4 or self.coordinator.is_running():
            return False
        return has_improving_swap(self.tour.points, self.tour.indices, self.min_improvement)

    # ------------------------------------------------------------------ queries
    def nearest_candidates(self, count: int = CANDIDATE_COUNT) -> List[Tuple[int, float]]:
        current = self.tour.last
        if current is None or self.tour.is_closed():
            return []
        points = self.tour.points
        candidates = [
            (idx, distance(points[current], points[idx])) for idx in self.tour.unvisited()
        ]
        candidates.sort(key=lambda item: (item[1], item[0]))
        return candidates[:count]

    def hover_distance(self, idx: int) -> Optional[float]:
        if not 0 <= idx < self.tour.n:
            raise InvalidIndex(idx, self.tour.n)
        current = self.tour.last
        if current is None or idx in self.tour:
            return None
        return distance(self.tour.points[current], self.tour.points[idx])

    def closing_index(self) -> Optional[int]:
        return self.tour[0] if self.tour.can_close() else None

    def hint(self) -> Optional[str]:
        return HINTS.get(len(self.tour))


__all__ = ["HINTS", "InteractionController"]
