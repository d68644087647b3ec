"""Plumbing shared by the stepwise heuristic processes.

A process is a generator. Each committed step pushes the pre-mutation
snapshot, mutates the tour and emits exactly one step event; the generator
then yields a :class:`Suspend` so the driver can hand control back to the
host loop before the next step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generator

from tsp_playground.state.history import History
from tsp_playground.state.tour import Tour
from tsp_playground.visualization.events import EventDict, Source, append_event

logger = logging.getLogger(__name__)

Emit = Callable[[EventDict], None]


@dataclass(frozen=True)
class Suspend:
    delay: float
    reason: str = "step"


Process = Generator[Suspend, None, None]


def _never() -> bool:
    return False


def _discard(event: EventDict) -> None:
    return None


@dataclass
class ProcessContext:
    tour: Tour
    history: History
    emit_step: Emit = _discard
    emit_highlight: Emit = _discard
    should_stop: Callable[[], bool] = _never


def commit_append(ctx: ProcessContext, idx: int, source: Source) -> EventDict:
    """Append ``idx`` as one undoable step and emit its event."""
    snapshot = ctx.tour.snapshot()
    position = ctx.tour.append(idx)
    ctx.history.push(snapshot)
    event = append_event(idx, position, source, closed=ctx.tour.is_closed())
    logger.debug("%s: %s %d at position %d", source, event["type"], idx, position)
    ctx.emit_step(event)
    return event


def run_to_completion(process: Process) -> int:
    """Drive ``process`` without waiting; return the number of suspensions."""
    count = 0
    for _ in process:
        count += 1
    return count


__all__ = [
    "Emit",
    "Suspend",
    "Process",
    "ProcessContext",
    "commit_append",
    "run_to_completion",
]
