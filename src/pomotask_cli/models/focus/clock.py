"""One-second boundary clock with an explicit start/cancel pair."""

import time
from collections.abc import Callable


class SecondClock:
    """Reports how many one-second ticks are due while armed.

    The clock never calls anything by itself; the owner polls ``due()`` from
    its event loop and fires that many ticks.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._anchor: float | None = None

    @property
    def active(self) -> bool:
        return self._anchor is not None

    def start(self, now: float | None = None) -> None:
        """Arm the clock. No-op when already armed."""
        if self._anchor is not None:
            return
        self._anchor = self._time_source() if now is None else now

    def cancel(self) -> None:
        """Disarm the clock and drop any pending ticks."""
        self._anchor = None

    def due(self, now: float | None = None) -> int:
        """Number of whole seconds elapsed since the last reported tick."""
        if self._anchor is None:
            return 0

        now = self._time_source() if now is None else now
        elapsed = int(now - self._anchor)
        if elapsed <= 0:
            return 0

        self._anchor += elapsed
        return elapsed
