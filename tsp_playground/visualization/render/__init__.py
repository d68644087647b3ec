"""Pygame rendering for the tour engine."""

from .base_scene import BaseScene
from .pygame_renderer import PygameViewer

__all__ = ["BaseScene", "PygameViewer"]
