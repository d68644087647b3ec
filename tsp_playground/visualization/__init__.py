"""Visualization subsystem package."""

from .events import EventDict, SnapshotDict

__version__ = "0.1"

__all__ = ["__version__", "EventDict", "SnapshotDict"]
