"""Tour state and its undo log."""

from .history import History
from .tour import Tour, TourSnapshot

__all__ = ["History", "Tour", "TourSnapshot"]
