"""Focus mode - Pomodoro timer system for Pomotask CLI."""

from .clock import SecondClock
from .engine import TimerEngine
from .keyboard import InputRouter, KeyboardHandler
from .state import Snapshot, SnapshotGateway, TimerSession
from .ui import TimerDisplay

__all__ = [
    "SecondClock",
    "TimerEngine",
    "TimerSession",
    "Snapshot",
    "SnapshotGateway",
    "TimerDisplay",
    "KeyboardHandler",
    "InputRouter",
]
