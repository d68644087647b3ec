"""Runs at most one heuristic process at a time.

The coordinator owns the :class:`Session` flags. Starting a process only
marks the session running and schedules the first resume, so no step is
committed before control returns to the caller. Each resume first looks at
``interrupted``; once it is set the generator is closed and no further step
starts. Committed steps are never rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tsp_playground.algs.heuristics.base import Process
from tsp_playground.errors import PreconditionNotMet
from tsp_playground.session.scheduler import Scheduler
from tsp_playground.session.signals import Signal
from tsp_playground.visualization.events import ProcessEndEvent, ProcessStartEvent

logger = logging.getLogger(__name__)


@dataclass
class Session:
    running: bool = False
    interrupted: bool = False
    name: Optional[str] = None

    def reset(self) -> None:
        self.running = False
        self.interrupted = False
        self.name = None


class SessionCoordinator:
    def __init__(self, scheduler: Scheduler, session_signal: Optional[Signal] = None) -> None:
        self.scheduler = scheduler
        self.session = Session()
        self.session_signal = session_signal if session_signal is not None else Signal()
        self._process: Optional[Process] = None
        self._steps = 0

    def is_running(self) -> bool:
        return self.session.running

    def should_stop(self) -> bool:
        return self.session.interrupted

    def start(self, name: str, process: Process) -> None:
        if self.session.running:
            process.close()
            raise PreconditionNotMet(f"cannot start {name}: {self.session.name} is running")
        self.session.running = True
        self.session.interrupted = False
        self.session.name = name
        self._process = process
        self._steps = 0
        logger.info("started %s", name)
        self.session_signal.emit(ProcessStartEvent(type="process_start", name=name))
        self.scheduler.call_later(0.0, self._resume)

    def request_interrupt(self) -> bool:
        """Flag the running process to stop at its next check; False when idle."""
        if not self.session.running:
            return False
        if not self.session.interrupted:
            logger.info("interrupt requested for %s", self.session.name)
        self.session.interrupted = True
        return True

    def _resume(self) -> None:
        process = self._process
        if process is None:
            return
        if self.session.interrupted:
            self._finish("interrupted")
            return
        try:
            suspend = next(process)
        except StopIteration:
            self._finish("interrupted" if self.session.interrupted else "completed")
            return
        except Exception:
            # Steps committed before the failure stay on the tour.
            logger.exception("%s failed after %d suspensions", self.session.name, self._steps)
            self._finish("error")
            return
        self._steps += 1
        self.scheduler.call_later(suspend.delay, self._resume)

    def _finish(self, reason: str) -> None:
        process, self._process = self._process, None
        name = self.session.name or "unknown"
        if process is not None:
            process.close()
        self.session.reset()
        logger.info("%s ended (%s) after %d suspensions", name, reason, self._steps)
        self.session_signal.emit(ProcessEndEvent(type="process_end", name=name, reason=reason))  # type: ignore[typeddict-item]


__all__ = ["Session", "SessionCoordinator"]
