"""Utility primitives for pygame visualization scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import pygame

from tsp_playground.algs.geometry import Point, distance

Color = Tuple[int, int, int]

BACKGROUND_COLOR = (18, 18, 24)
POINT_COLOR = (200, 200, 210)
POINT_SELECTED_COLOR = (90, 200, 255)
POINT_CLOSING_COLOR = (255, 215, 0)
TOUR_EDGE_COLOR = (120, 200, 255)
CANDIDATE_EDGE_COLOR = (110, 110, 130)
HOVER_EDGE_COLOR = (230, 230, 230)
SWAP_REMOVE_COLOR = (220, 70, 70)
SWAP_ADD_COLOR = (70, 200, 110)
SWAP_RESULT_COLOR = (90, 160, 255)
LABEL_COLOR = (230, 230, 230)

POINT_RADIUS = 10
MARGIN_RATIO = 0.05


@dataclass
class EdgeHighlight:
    a: int
    b: int
    color: Color
    width: int = 3


class BaseScene:
    """Coordinate transforms and basic draw helpers for the pygame viewer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.margin = int(min(width, height) * MARGIN_RATIO) + POINT_RADIUS
        self.points: Sequence[Point] = ()
        self.x_min = 0.0
        self.y_min = 0.0
        self.scale = 1.0

    # ------------------------------------------------------------------ transforms
    def set_points(self, points: Sequence[Point]) -> None:
        self.points = points
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        self.x_min, x_max = min(xs), max(xs)
        self.y_min, y_max = min(ys), max(ys)
        span_x = max(x_max - self.x_min, 1e-6)
        span_y = max(y_max - self.y_min, 1e-6)
        usable_w = self.width - 2 * self.margin
        usable_h = self.height - 2 * self.margin
        self.scale = min(usable_w / span_x, usable_h / span_y)

    def world_to_screen(self, point: Point) -> Tuple[int, int]:
        px = self.margin + int((point.x - self.x_min) * self.scale)
        # Screen y grows downwards; flip so larger y is drawn higher.
        py = self.height - self.margin - int((point.y - self.y_min) * self.scale)
        return px, py

    def pick_point(self, pos: Tuple[int, int], radius: float = POINT_RADIUS) -> Optional[int]:
        """Index of the point drawn under ``pos``; the closest wins when several overlap."""
        best: Optional[int] = None
        best_dist = float(radius)
        for idx, point in enumerate(self.points):
            dist = distance(self.world_to_screen(point), pos)
            if dist <= best_dist:
                best_dist = dist
                best = idx
        return best

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)

    def draw_points(
        self,
        surface: "pygame.Surface",
        visited: Iterable[int],
        closing: Optional[int] = None,
    ) -> None:
        visited_set = set(visited)
        for idx, point in enumerate(self.points):
            color = POINT_SELECTED_COLOR if idx in visited_set else POINT_COLOR
            if idx == closing:
                color = POINT_CLOSING_COLOR
            pygame.draw.circle(surface, color, self.world_to_screen(point), POINT_RADIUS)

    def draw_edge(self, surface: "pygame.Surface", a: int, b: int, color: Color, width: int = 2) -> None:
        pygame.draw.line(
            surface,
            color,
            self.world_to_screen(self.points[a]),
            self.world_to_screen(self.points[b]),
            width,
        )

    def draw_tour(self, surface: "pygame.Surface", indices: Sequence[int]) -> None:
        for pos in range(len(indices) - 1):
            self.draw_edge(surface, indices[pos], indices[pos + 1], TOUR_EDGE_COLOR, 3)

    def draw_highlights(self, surface: "pygame.Surface", highlights: Iterable[EdgeHighlight]) -> None:
        for item in highlights:
            self.draw_edge(surface, item.a, item.b, item.color, item.width)

    def draw_distance_label(
        self,
        surface: "pygame.Surface",
        font: "pygame.font.Font",
        a: int,
        b: int,
        dist: float,
    ) -> None:
        ax, ay = self.world_to_screen(self.points[a])
        bx, by = self.world_to_screen(self.points[b])
        text = font.render(f"{dist:.1f}", True, LABEL_COLOR)
        rect = text.get_rect(center=((ax + bx) // 2, (ay + by) // 2 - 8))
        surface.blit(text, rect)


__all__ = [
    "BaseScene",
    "EdgeHighlight",
    "BACKGROUND_COLOR",
    "POINT_COLOR",
    "POINT_SELECTED_COLOR",
    "POINT_CLOSING_COLOR",
    "TOUR_EDGE_COLOR",
    "CANDIDATE_EDGE_COLOR",
    "HOVER_EDGE_COLOR",
    "SWAP_REMOVE_COLOR",
    "SWAP_ADD_COLOR",
    "SWAP_RESULT_COLOR",
    "POINT_RADIUS",
]
