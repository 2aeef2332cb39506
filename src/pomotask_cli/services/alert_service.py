"""Completion cue played when a timer period ends."""

from __future__ import annotations

from rich.console import Console

from pomotask_cli.models.focus.cycling import MODE_LABELS, TimerMode
from pomotask_cli.utils.logger import get_logger
from pomotask_cli.utils.ui.console import get_console


class AlertPlayer:
    """Rings the terminal bell. Never lets a playback failure escape."""

    def __init__(self, console: Console | None = None, enabled: bool = True):
        self.console = console or get_console()
        self.enabled = enabled

    def play(self, finished: TimerMode, upcoming: TimerMode) -> bool:
        """Play the cue. Returns True if it was played."""
        if not self.enabled:
            return False
        try:
            self.console.bell()
        except Exception as e:
            get_logger().warning(
                "alert cue failed after %s -> %s: %s",
                MODE_LABELS[finished],
                MODE_LABELS[upcoming],
                e,
            )
            return False
        return True
