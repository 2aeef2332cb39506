"""Timer session state and the persisted snapshot slot."""

import os
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pomotask_cli.models.task import Task
from pomotask_cli.utils.logger import get_logger

from .cycling import FOCUS_SECONDS, TimerMode, duration_for

SLOT_NAME = "pomodoro_state"


@dataclass
class TimerSession:
    """Countdown state owned by the timer engine."""

    remaining_seconds: int = FOCUS_SECONDS
    mode: TimerMode = "focus"
    is_running: bool = False
    pomodoros_completed: int = 0
    cycles_completed: int = 0

    @property
    def is_break(self) -> bool:
        return self.mode != "focus"

    def copy(self) -> "TimerSession":
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class Snapshot:
    """Everything restored at startup: one session plus the ordered tasks."""

    session: TimerSession = field(default_factory=TimerSession)
    tasks: list[Task] = field(default_factory=list)


class SnapshotRecord(BaseModel):
    """Wire shape of the slot. Unknown keys are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")

    remaining_seconds: int = Field(ge=0)
    mode: TimerMode
    is_running: bool
    pomodoros_completed: int = Field(ge=0)
    cycles_completed: int = Field(ge=0)
    tasks: list[Task] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_consistency(self) -> "SnapshotRecord":
        if self.remaining_seconds > duration_for(self.mode):
            raise ValueError("remaining_seconds exceeds the mode duration")
        ids = [task.id for task in self.tasks]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate task ids")
        return self

    @classmethod
    def from_state(cls, session: TimerSession, tasks: list[Task]) -> "SnapshotRecord":
        return cls.model_validate({**session.to_dict(), "tasks": list(tasks)}, strict=False)

    def to_snapshot(self) -> Snapshot:
        session = TimerSession(
            remaining_seconds=self.remaining_seconds,
            mode=self.mode,
            is_running=self.is_running,
            pomodoros_completed=self.pomodoros_completed,
            cycles_completed=self.cycles_completed,
        )
        return Snapshot(session=session, tasks=list(self.tasks))


class SnapshotGateway:
    """Saves and restores the combined timer + task snapshot."""

    def __init__(self, state_dir: Path | None = None):
        """Initialize the gateway."""
        if state_dir is None:
            from platformdirs import user_data_dir

            state_dir = Path(user_data_dir("pomotask", "pomotask")) / "state"

        self.state_dir = Path(state_dir)
        self.state_dir.mkdir(parents=True, exist_ok=True)
        self.state_file = self.state_dir / f"{SLOT_NAME}.json"

    def save(self, session: TimerSession, tasks: list[Task]) -> None:
        """Write the full snapshot to the slot."""
        record = SnapshotRecord.from_state(session, tasks)
        tmp_file = self.state_file.with_suffix(".json.tmp")
        with open(tmp_file, "w", encoding="utf-8") as f:
            f.write(record.model_dump_json(indent=2))

        # Set secure permissions
        tmp_file.chmod(0o600)
        os.replace(tmp_file, self.state_file)

    def load(self) -> Snapshot | None:
        """Load the snapshot. Returns None if the slot is empty or unreadable."""
        if not self.state_file.exists():
            return None

        try:
            with open(self.state_file, encoding="utf-8") as f:
                raw = f.read()
            return SnapshotRecord.model_validate_json(raw).to_snapshot()
        except ValidationError as e:
            get_logger().warning(
                "ignoring malformed snapshot %s: %d error(s)",
                self.state_file,
                e.error_count(),
            )
            return None
        except (OSError, ValueError) as e:
            get_logger().warning("ignoring unreadable snapshot %s: %s", self.state_file, e)
            return None

    def clear(self) -> None:
        """Delete the slot."""
        if self.state_file.exists():
            self.state_file.unlink()
