"""Interactive pygame front-end driving a :class:`TourEngine`."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import pygame

from tsp_playground.engine import TourEngine
from tsp_playground.errors import TourError
from tsp_playground.session.scheduler import ManualScheduler
from tsp_playground.visualization.events import EventDict
from tsp_playground.visualization.render.base_scene import (
    CANDIDATE_EDGE_COLOR,
    HOVER_EDGE_COLOR,
    SWAP_ADD_COLOR,
    SWAP_REMOVE_COLOR,
    SWAP_RESULT_COLOR,
    BaseScene,
    EdgeHighlight,
)

logger = logging.getLogger(__name__)


class PygameViewer:
    """Click points to build a tour; keys start the heuristics.

    Left click selects, right click or Backspace undoes (or interrupts a
    running heuristic), ``N``/``R``/``O`` start nearest neighbour, random
    completion and 2-opt, ``C`` clears, ``Esc``/``Q`` quits.
    """

    SPEED_LEVELS = [0.5, 1.0, 2.0, 4.0, 8.0]

    def __init__(self, engine: TourEngine, width: int = 1000, height: int = 1000, fps: int = 60) -> None:
        if not isinstance(engine.scheduler, ManualScheduler):
            raise TypeError("the viewer drives the engine through a ManualScheduler")
        self.engine = engine
        self.scheduler: ManualScheduler = engine.scheduler
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.small_font = pygame.font.SysFont("consolas", 14)
        self.scene = BaseScene(width, height)
        self.scene.set_points(engine.points)
        self.speed_index = 1
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.hover_idx: Optional[int] = None
        self.highlights: List[EdgeHighlight] = []
        self.status = ""
        self.step_count = 0
        self.last_event_type: Optional[str] = None
        self.queue: List[Tuple[str, EventDict]] = []

        self._disconnect = [
            engine.on_step(lambda ev: self.queue.append(("step", ev))),
            engine.on_highlight(lambda ev: self.queue.append(("highlight", ev))),
            engine.on_session(lambda ev: self.queue.append(("session", ev))),
        ]

    # ------------------------------------------------------------------ public API
    def run(self) -> None:
        pygame.display.init()
        pygame.display.set_caption("TSP Playground")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()
            self.process_frame(dt)
            self._draw_frame()

        pygame.display.quit()

    def close(self) -> None:
        for disconnect in self._disconnect:
            disconnect()
        self._disconnect = []

    def process_frame(self, dt: float) -> None:
        """Advance the engine clock and apply queued events (usable without a window)."""
        self.scheduler.advance(dt * self.SPEED_LEVELS[self.speed_index])
        self._drain_queue()

    def click(self, pos: Tuple[int, int]) -> None:
        idx = self.scene.pick_point(pos)
        if idx is None:
            return
        self._command(self.engine.select_point, idx)

    def undo(self) -> None:
        self._command(self.engine.undo_or_interrupt)

    def start(self, name: str) -> None:
        starters = {
            "nearest_neighbor": self.engine.start_nearest_neighbor,
            "random": self.engine.start_random,
            "two_opt": self.engine.start_two_opt,
        }
        self._command(starters[name])

    def hover(self, pos: Tuple[int, int]) -> None:
        self.hover_idx = self.scene.pick_point(pos)

    # ------------------------------------------------------------------ internals
    def _command(self, func, *args) -> None:
        try:
            result = func(*args)
        except TourError as exc:
            # Rejected commands are UI no-ops.
            logger.debug("ignored command %s: %s", getattr(func, "__name__", func), exc)
            return
        if isinstance(result, str):
            self.status = result
        self._drain_queue()

    def _drain_queue(self) -> None:
        pending, self.queue = self.queue, []
        for channel, event in pending:
            self.last_event_type = str(event.get("type"))
            if channel == "step":
                self.step_count += 1
            elif channel == "highlight":
                self._apply_highlight(event)
            elif channel == "session":
                self._apply_session(event)

    def _apply_highlight(self, event: EventDict) -> None:
        event_type = event.get("type")
        if event_type == "swap_preview":
            self.highlights = [EdgeHighlight(a, b, SWAP_REMOVE_COLOR, 4) for a, b in event["remove"]]  # type: ignore[union-attr]
            self.highlights += [EdgeHighlight(a, b, SWAP_ADD_COLOR, 4) for a, b in event["add"]]  # type: ignore[union-attr]
        elif event_type == "swap_result":
            self.highlights = [EdgeHighlight(a, b, SWAP_RESULT_COLOR, 4) for a, b in event["edges"]]  # type: ignore[union-attr]
        elif event_type == "clear_highlights":
            self.highlights = []
        else:
            logger.warning("unhandled highlight event: %s", event_type)

    def _apply_session(self, event: EventDict) -> None:
        event_type = event.get("type")
        if event_type == "process_start":
            self.status = f"running {event.get('name')}"
        elif event_type == "process_end":
            self.status = f"{event.get('name')} {event.get('reason')}"
        elif event_type == "refresh":
            self.highlights = []

    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.MOUSEMOTION:
                self.hover(py_event.pos)
            elif py_event.type == pygame.MOUSEBUTTONDOWN:
                if py_event.button == 1:
                    self.click(py_event.pos)
                elif py_event.button == 3:
                    self.undo()
            elif py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_BACKSPACE:
                    self.undo()
                elif py_event.key == pygame.K_n:
                    self.start("nearest_neighbor")
                elif py_event.key == pygame.K_r:
                    self.start("random")
                elif py_event.key == pygame.K_o:
                    self.start("two_opt")
                elif py_event.key == pygame.K_c:
                    self._command(self.engine.reset)
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)

    # ------------------------------------------------------------------ drawing
    def _draw_frame(self) -> None:
        assert self.screen is not None
        snapshot = self.engine.get_snapshot()
        tour = snapshot["tour"]
        self.scene.draw_background(self.screen)

        if tour and not snapshot["running"]:
            for idx, dist in self.engine.nearest_candidates():
                self.scene.draw_edge(self.screen, tour[-1], idx, CANDIDATE_EDGE_COLOR, 1)
                self.scene.draw_distance_label(self.screen, self.small_font, tour[-1], idx, dist)

        self.scene.draw_tour(self.screen, tour)
        self.scene.draw_highlights(self.screen, self.highlights)

        if self.hover_idx is not None and not snapshot["running"]:
            hover_dist = self.engine.hover_distance(self.hover_idx)
            if hover_dist is not None:
                self.scene.draw_edge(self.screen, tour[-1], self.hover_idx, HOVER_EDGE_COLOR, 2)
                self.scene.draw_distance_label(self.screen, self.font, tour[-1], self.hover_idx, hover_dist)

        self.scene.draw_points(self.screen, tour, closing=self.engine.closing_index())
        self._draw_hud(self.screen, snapshot)
        pygame.display.flip()

    def _draw_hud(self, surface: "pygame.Surface", snapshot: Dict[str, object]) -> None:
        lines = [
            f"Route length: {snapshot['route_length']:.1f}" if snapshot["tour"] else "",
            f"Points: {len(snapshot['tour'])}/{self.engine.n}{' (closed)' if snapshot['closed'] else ''}",
            f"Speed x{self.SPEED_LEVELS[self.speed_index]:.1f}",
            "[N] nearest  [R] random  [O] 2-opt  [C] clear  [right click] undo",
        ]
        hint = self.engine.hint()
        if hint:
            lines.append(hint)
        if self.status:
            lines.append(f"Status: {self.status}")

        x = 10
        y = 10
        for line in lines:
            if not line:
                continue
            text_surface = self.font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameViewer"]
