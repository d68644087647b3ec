"""Session coordination, scheduling and user commands."""

from .controller import InteractionController
from .coordinator import Session, SessionCoordinator
from .scheduler import ManualScheduler, Scheduler
from .signals import Signal

__all__ = [
    "InteractionController",
    "ManualScheduler",
    "Scheduler",
    "Session",
    "SessionCoordinator",
    "Signal",
]
