"""Session controller - the single owner of timer and task state.

Every user action and every clock tick goes through one method here. Each
method applies its mutation in full, re-couples the one-second clock to the
running flag, and then writes the snapshot through to the gateway.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pomotask_cli.config import ConfigManager, get_config_manager
from pomotask_cli.models.focus.clock import SecondClock
from pomotask_cli.models.focus.cycling import MODE_LABELS, TimerMode
from pomotask_cli.models.focus.engine import TimerEngine
from pomotask_cli.models.focus.state import SnapshotGateway, TimerSession
from pomotask_cli.models.task import Task
from pomotask_cli.services.alert_service import AlertPlayer
from pomotask_cli.services.task_store import TaskStore
from pomotask_cli.utils.logger import get_logger


class SessionController:
    """Owns the engine, the task store and the clock for one process."""

    def __init__(
        self,
        gateway: SnapshotGateway,
        alert: AlertPlayer | None = None,
        clock: SecondClock | None = None,
    ):
        self.gateway = gateway
        self.alert = alert
        self.clock = clock or SecondClock()
        self.logger = get_logger()
        self._discarded = False

        snapshot = gateway.load()
        if snapshot is None:
            self.logger.info("no saved session, starting from defaults")
            self.engine = TimerEngine(on_complete=self._on_complete)
            self.task_store = TaskStore()
        else:
            self.engine = TimerEngine(snapshot.session, on_complete=self._on_complete)
            self.task_store = TaskStore(snapshot.tasks)

        if self.session.remaining_seconds == 0:
            # A period that ended while nobody was watching.
            self.engine.on_reach_zero()
            self._commit()
        else:
            self._sync_clock()

    @property
    def session(self) -> TimerSession:
        return self.engine.session

    @property
    def tasks(self) -> list[Task]:
        return self.task_store.tasks

    # ------------------------------------------------------------------
    # Timer commands
    # ------------------------------------------------------------------

    def toggle_running(self) -> bool:
        running = self.engine.toggle_running()
        self.logger.info("timer %s", "started" if running else "paused")
        self._commit()
        return running

    def tick(self) -> bool:
        completed = self.engine.tick()
        self._commit()
        return completed

    def switch_mode(self, target: TimerMode) -> None:
        self.engine.switch_mode(target)
        self.logger.info("switched to %s", MODE_LABELS[target])
        self._commit()

    def reset_all(self) -> None:
        self.engine.reset_all()
        self.logger.info("timer reset")
        self._commit()

    def pump(self, now: float | None = None) -> int:
        """Fire the clock ticks that are due. Returns how many ran."""
        fired = 0
        for _ in range(self.clock.due(now)):
            if not self.session.is_running:
                break
            self.tick()
            fired += 1
        return fired

    # ------------------------------------------------------------------
    # Task commands
    # ------------------------------------------------------------------

    def add_task(self, text: str) -> Task | None:
        """Add a task. Returns the new task, or None if the text was rejected."""
        before = len(self.task_store.tasks)
        tasks = self.task_store.add(text)
        if len(tasks) == before:
            self.logger.info("rejected blank task text")
            return None
        self._commit()
        return tasks[-1]

    def toggle_task(self, task_id: str) -> list[Task]:
        tasks = self.task_store.toggle(task_id)
        self._commit()
        return tasks

    def edit_task(self, task_id: str, new_text: str) -> list[Task]:
        tasks = self.task_store.edit(task_id, new_text)
        self._commit()
        return tasks

    def delete_task(self, task_id: str) -> list[Task]:
        tasks = self.task_store.delete(task_id)
        self._commit()
        return tasks

    def start_editing(self, task_id: str) -> Task | None:
        return self.task_store.start_editing(task_id)

    def cancel_editing(self) -> None:
        self.task_store.cancel_editing()

    def submit_task_text(self, text: str) -> bool:
        """Submit the task input field. Returns False when the text was blank."""
        if not text or not text.strip():
            self.logger.info("rejected blank task text")
            return False
        self.task_store.submit(text)
        self._commit()
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Stop periodic work and persist the final state."""
        self.clock.cancel()
        if not self._discarded:
            self.gateway.save(self.session, self.task_store.tasks)

    def discard(self) -> None:
        """Reset everything and delete the saved snapshot."""
        self.clock.cancel()
        self.engine.reset_all()
        self.task_store = TaskStore()
        self.gateway.clear()
        self._discarded = True
        self.logger.info("saved session discarded")

    def _sync_clock(self) -> None:
        if self.session.is_running:
            self.clock.start()
        else:
            self.clock.cancel()

    def _commit(self) -> None:
        self._discarded = False
        self._sync_clock()
        self.gateway.save(self.session, self.task_store.tasks)

    def _on_complete(self, finished: TimerMode, upcoming: TimerMode) -> None:
        self.logger.info(
            "%s complete -> %s (pomodoros=%d, cycles=%d)",
            MODE_LABELS[finished],
            MODE_LABELS[upcoming],
            self.session.pomodoros_completed,
            self.session.cycles_completed,
        )
        if self.alert is not None:
            self.alert.play(finished, upcoming)


def build_session_controller(
    config_manager: ConfigManager | None = None,
    state_dir: Path | None = None,
) -> SessionController:
    """Create a controller wired from the user's configuration."""
    config = (config_manager or get_config_manager()).config
    if state_dir is None and config.storage.state_dir:
        state_dir = Path(config.storage.state_dir).expanduser()

    return SessionController(
        gateway=SnapshotGateway(state_dir),
        alert=AlertPlayer(enabled=config.timer.alert_enabled),
    )


@contextmanager
def open_session(config_manager: ConfigManager | None = None) -> Iterator[SessionController]:
    """Load the saved session for one command and close it afterwards."""
    controller = build_session_controller(config_manager)
    try:
        yield controller
    finally:
        controller.close()
