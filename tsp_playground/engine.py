"""Facade over tour state, undo log, session and heuristics.

The rendering layer talks only to :class:`TourEngine`: it issues commands,
subscribes to step, highlight and session events, and polls
:meth:`TourEngine.get_snapshot` for a full-state read.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from tsp_playground.algs.geometry import Point, as_points
from tsp_playground.algs.heuristics.base import ProcessContext
from tsp_playground.algs.heuristics.completion import nearest_neighbor_completion, random_completion
from tsp_playground.algs.heuristics.two_opt import two_opt_improvement
from tsp_playground.common.config import EngineConfig
from tsp_playground.errors import PreconditionNotMet
from tsp_playground.session.controller import InteractionController
from tsp_playground.session.coordinator import SessionCoordinator
from tsp_playground.session.scheduler import ManualScheduler, Scheduler
from tsp_playground.session.signals import Listener, Signal
from tsp_playground.state.history import History
from tsp_playground.state.tour import Tour
from tsp_playground.visualization.events import EventDict, RefreshEvent, SnapshotDict

logger = logging.getLogger(__name__)


class TourEngine:
    def __init__(
        self,
        points: Iterable[Sequence[float]],
        *,
        config: Optional[EngineConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.points: List[Point] = as_points(points)
        self.config = config if config is not None else EngineConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.rng = random.Random(self.config.random_seed)

        self.step_signal = Signal()
        self.highlight_signal = Signal()
        self.session_signal = Signal()

        self.tour = Tour(self.points)
        self.history = History(self.config.history_limit)
        self.coordinator = SessionCoordinator(self.scheduler, self.session_signal)
        self.controller = InteractionController(
            self.tour,
            self.history,
            self.coordinator,
            self.step_signal,
            min_improvement=self.config.min_improvement,
        )

    @property
    def n(self) -> int:
        return len(self.points)

    # ------------------------------------------------------------------ subscriptions
    def on_step(self, listener: Listener) -> Callable[[], None]:
        return self.step_signal.connect(listener)

    def on_highlight(self, listener: Listener) -> Callable[[], None]:
        return self.highlight_signal.connect(listener)

    def on_session(self, listener: Listener) -> Callable[[], None]:
        return self.session_signal.connect(listener)

    # ------------------------------------------------------------------ reads
    def get_snapshot(self) -> SnapshotDict:
        return SnapshotDict(
            tour=list(self.tour.indices),
            closed=self.tour.is_closed(),
            route_length=float(self.tour.route_length()),
            running=self.coordinator.is_running(),
            can_close=self.tour.can_close(),
        )

    def is_running(self) -> bool:
        return self.coordinator.is_running()

    def can_run_nearest_neighbor(self) -> bool:
        return self.controller.can_run_nearest_neighbor()

    def can_run_random(self) -> bool:
        return self.controller.can_run_random()

    def can_run_two_opt(self) -> bool:
        return self.controller.can_run_two_opt()

    def nearest_candidates(self, count: Optional[int] = None) -> List[Tuple[int, float]]:
        if count is None:
            return self.controller.nearest_candidates()
        return self.controller.nearest_candidates(count)

    def hover_distance(self, idx: int) -> Optional[float]:
        return self.controller.hover_distance(idx)

    def closing_index(self) -> Optional[int]:
        return self.controller.closing_index()

    def hint(self) -> Optional[str]:
        return self.controller.hint()

    # ------------------------------------------------------------------ commands
    def select_point(self, idx: int) -> EventDict:
        return self.controller.select_point(idx)

    def undo_or_interrupt(self) -> str:
        return self.controller.undo_or_interrupt()

    def _context(self) -> ProcessContext:
        return ProcessContext(
            tour=self.tour,
            history=self.history,
            emit_step=self.step_signal.emit,
            emit_highlight=self.highlight_signal.emit,
            should_stop=self.coordinator.should_stop,
        )

    def start_nearest_neighbor(self) -> None:
        if not self.can_run_nearest_neighbor():
            raise PreconditionNotMet("nearest neighbour needs an open, non-empty tour and an idle session")
        process = nearest_neighbor_completion(self._context(), delay=self.config.nn_step_delay)
        self.coordinator.start("nearest_neighbor", process)

    def start_random(self) -> None:
        if not self.can_run_random():
            raise PreconditionNotMet("random completion needs an open, non-empty tour and an idle session")
        process = random_completion(self._context(), self.rng, delay=self.config.random_step_delay)
        self.coordinator.start("random", process)

    def start_two_opt(self) -> None:
        if not self.can_run_two_opt():
            raise PreconditionNotMet("2-opt needs a closed tour with an improving swap and an idle session")
        process = two_opt_improvement(
            self._context(),
            delay=self.config.two_opt_highlight_delay,
            min_improvement=self.config.min_improvement,
        )
        self.coordinator.start("two_opt", process)

    def reset(self) -> None:
        """Clear tour and history."""
        if self.coordinator.is_running():
            raise PreconditionNotMet("cannot reset while a heuristic is running")
        self.tour.clear()
        self.history.clear()
        logger.debug("tour reset")
        self.session_signal.emit(RefreshEvent(type="refresh"))

    # ------------------------------------------------------------------ driving
    def run_until_idle(self, max_callbacks: int = 1_000_000) -> int:
        """Drain a :class:`ManualScheduler` (headless runs and tests)."""
        if not isinstance(self.scheduler, ManualScheduler):
            raise TypeError("run_until_idle needs a ManualScheduler")
        return self.scheduler.run_until_idle(max_callbacks)


__all__ = ["TourEngine"]
