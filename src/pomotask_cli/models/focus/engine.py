"""Pomodoro timer state machine.

The engine owns no clock. Whoever drives it calls ``tick()`` once per second
while the session is running; the engine only does the arithmetic and the
mode transitions.
"""

from collections.abc import Callable

from pomotask_cli.utils.logger import get_logger

from .cycling import TimerMode, duration_for, next_mode
from .state import TimerSession

CompletionListener = Callable[[TimerMode, TimerMode], None]


class TimerEngine:
    """Countdown plus focus/short-break/long-break cycling."""

    def __init__(
        self,
        session: TimerSession | None = None,
        on_complete: CompletionListener | None = None,
    ):
        self._session = session.copy() if session is not None else TimerSession()
        self.on_complete = on_complete

    @property
    def session(self) -> TimerSession:
        return self._session

    def snapshot(self) -> TimerSession:
        """Return an independent copy of the current session."""
        return self._session.copy()

    def toggle_running(self) -> bool:
        """Start or pause the countdown. Returns the new running flag."""
        self._session.is_running = not self._session.is_running
        return self._session.is_running

    def tick(self) -> bool:
        """
        Advance the countdown by one second.

        Returns True if this tick finished the current period.
        """
        s = self._session
        if not s.is_running or s.remaining_seconds <= 0:
            return False

        s.remaining_seconds = max(0, s.remaining_seconds - 1)
        if s.remaining_seconds == 0:
            return self.on_reach_zero()
        return False

    def on_reach_zero(self) -> bool:
        """Apply the completion transition for a countdown sitting at zero.

        Returns False without touching anything when the countdown is not at
        zero, so a crossing can only ever be handled once.
        """
        s = self._session
        if s.remaining_seconds != 0:
            return False

        finished = s.mode
        if finished == "focus":
            s.pomodoros_completed += 1
        target = next_mode(finished, s.pomodoros_completed)
        if target == "long_break":
            s.cycles_completed += 1

        s.mode = target
        s.remaining_seconds = duration_for(target)
        s.is_running = False

        self._emit_complete(finished, target)
        return True

    def switch_mode(self, target: TimerMode) -> None:
        """Jump to *target*, stopping the timer. Counters are left alone."""
        duration = duration_for(target)
        self._session.mode = target
        self._session.remaining_seconds = duration
        self._session.is_running = False

    def reset_all(self) -> None:
        """Restore the default session."""
        self._session = TimerSession()

    def _emit_complete(self, finished: TimerMode, target: TimerMode) -> None:
        if self.on_complete is None:
            return
        try:
            self.on_complete(finished, target)
        except Exception:
            get_logger().exception("completion listener failed (%s -> %s)", finished, target)
