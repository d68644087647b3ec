from __future__ import annotations

import pytest

from tsp_playground.algs.heuristics.base import Suspend
from tsp_playground.data.gen_instances import random_points
from tsp_playground.errors import PreconditionNotMet
from tsp_playground.session.coordinator import SessionCoordinator
from tsp_playground.session.scheduler import ManualScheduler
from tests.test_utils import EventLog, assert_valid_tour


# ---------------------------------------------------------------------------
#  Scheduler
# ---------------------------------------------------------------------------
def test_manual_scheduler_orders_by_due_time_then_insertion() -> None:
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(1.0, lambda: calls.append("late"))
    scheduler.call_later(0.5, lambda: calls.append("a"))
    scheduler.call_later(0.5, lambda: calls.append("b"))
    assert scheduler.pending() == 3
    assert scheduler.advance(0.75) == 2
    assert calls == ["a", "b"]
    assert scheduler.now() == pytest.approx(0.75)
    scheduler.run_until_idle()
    assert calls == ["a", "b", "late"]
    assert scheduler.now() == pytest.approx(1.0)


def test_manual_scheduler_runs_callbacks_scheduled_inside_window() -> None:
    scheduler = ManualScheduler()
    calls = []

    def first() -> None:
        calls.append(scheduler.now())
        scheduler.call_later(0.25, lambda: calls.append(scheduler.now()))

    scheduler.call_later(0.25, first)
    scheduler.advance(1.0)
    assert calls == [0.25, 0.5]


def test_manual_scheduler_rejects_bad_delays() -> None:
    scheduler = ManualScheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1.0, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.5)


def test_run_until_idle_budget() -> None:
    scheduler = ManualScheduler()

    def forever() -> None:
        scheduler.call_later(1.0, forever)

    scheduler.call_later(0.0, forever)
    with pytest.raises(RuntimeError):
        scheduler.run_until_idle(max_callbacks=50)


# ---------------------------------------------------------------------------
#  Coordinator
# ---------------------------------------------------------------------------
def _ticker(count: int, log: list):
    for i in range(count):
        log.append(i)
        yield Suspend(0.1)


def test_coordinator_runs_process_to_completion() -> None:
    scheduler = ManualScheduler()
    coordinator = SessionCoordinator(scheduler)
    seen: list = []
    ends = []
    coordinator.session_signal.connect(ends.append)
    coordinator.start("ticker", _ticker(3, seen))
    assert coordinator.is_running()
    assert seen == []
    scheduler.run_until_idle()
    assert seen == [0, 1, 2]
    assert not coordinator.is_running()
    assert ends[-1] == {"type": "process_end", "name": "ticker", "reason": "completed"}


def test_coordinator_rejects_second_process() -> None:
    scheduler = ManualScheduler()
    coordinator = SessionCoordinator(scheduler)
    first: list = []
    second: list = []
    coordinator.start("first", _ticker(2, first))
    with pytest.raises(PreconditionNotMet):
        coordinator.start("second", _ticker(2, second))
    scheduler.run_until_idle()
    assert first == [0, 1]
    assert second == []


def test_request_interrupt_when_idle_is_false() -> None:
    coordinator = SessionCoordinator(ManualScheduler())
    assert coordinator.request_interrupt() is False
    assert coordinator.session.interrupted is False


def test_process_error_resets_session() -> None:
    scheduler = ManualScheduler()
    coordinator = SessionCoordinator(scheduler)

    def broken():
        yield Suspend(0.0)
        raise RuntimeError("boom")

    events = []
    coordinator.session_signal.connect(events.append)
    coordinator.start("broken", broken())
    scheduler.run_until_idle()
    assert not coordinator.is_running()
    assert not coordinator.session.interrupted
    assert events[-1] == {"type": "process_end", "name": "broken", "reason": "error"}
    assert scheduler.pending() == 0


# ---------------------------------------------------------------------------
#  Interruption through the engine
# ---------------------------------------------------------------------------
def test_immediate_interrupt_commits_no_step(make_engine) -> None:
    engine = make_engine(random_points(10, seed=11))
    engine.select_point(0)
    log = EventLog(engine)
    engine.start_nearest_neighbor()
    assert engine.undo_or_interrupt() == "interrupted"
    assert engine.get_snapshot()["tour"] == [0]
    engine.run_until_idle()
    assert len(log.steps) <= 1
    assert not engine.is_running()
    assert engine.coordinator.session.interrupted is False
    assert log.ends()[0]["reason"] == "interrupted"


def test_interrupt_mid_run_keeps_committed_steps(make_engine) -> None:
    engine = make_engine(random_points(10, seed=5), nn_step_delay=0.5)
    engine.select_point(0)
    log = EventLog(engine)
    engine.start_nearest_neighbor()
    engine.scheduler.advance(1.25)
    committed = len(log.steps)
    assert committed == 3
    assert engine.undo_or_interrupt() == "interrupted"
    assert engine.undo_or_interrupt() == "interrupted"
    engine.run_until_idle()
    snap = engine.get_snapshot()
    assert len(snap["tour"]) == 1 + committed
    assert_valid_tour(snap["tour"], 10)
    assert not snap["running"]
    assert not snap["closed"]
    # Idle again: the next call undoes one committed step.
    assert engine.undo_or_interrupt() == "restored"
    assert len(engine.get_snapshot()["tour"]) == committed


def test_interrupted_two_opt_clears_highlights(make_engine, crossed_points) -> None:
    engine = make_engine(crossed_points)
    for idx in (0, 2, 1, 3, 0):
        engine.select_point(idx)
    log = EventLog(engine)
    engine.start_two_opt()
    engine.scheduler.advance(0.0)
    assert [ev["type"] for ev in log.highlights] == ["swap_preview"]
    engine.undo_or_interrupt()
    engine.run_until_idle()
    assert log.steps == []
    assert log.highlights[-1]["type"] == "clear_highlights"
    assert engine.get_snapshot()["tour"] == [0, 2, 1, 3, 0]
    assert engine.can_run_two_opt()


def test_select_point_rejected_while_running(make_engine, square_points) -> None:
    engine = make_engine(square_points)
    engine.select_point(0)
    engine.start_nearest_neighbor()
    with pytest.raises(PreconditionNotMet):
        engine.select_point(3)
    with pytest.raises(PreconditionNotMet):
        engine.start_random()
    with pytest.raises(PreconditionNotMet):
        engine.reset()
    engine.run_until_idle()
    assert engine.get_snapshot()["tour"] == [0, 1, 2, 3, 0]
