"""Keyboard input for the live timer: raw key reading and key routing."""

from __future__ import annotations

import select
import sys
from typing import TYPE_CHECKING, Optional

from .cycling import TimerMode

if TYPE_CHECKING:
    from pomotask_cli.services.session_service import SessionController

ENTER_KEYS = ("\n", "\r")
BACKSPACE_KEYS = ("\x7f", "\b")
ESCAPE_KEY = "\x1b"

MODE_KEYS: dict[str, TimerMode] = {"1": "focus", "2": "short_break", "3": "long_break"}


class KeyboardHandler:
    """Non-blocking keyboard input handler (POSIX terminals only)."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Setup terminal for non-blocking input."""
        import termios
        import tty

        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError):
            # Not a TTY
            self.old_settings = None

    def _pending(self) -> bool:
        return bool(select.select([sys.stdin], [], [], 0)[0])

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key, or None if no key was pressed. Escape sequences sent
        by arrows, Delete and function keys come back as one string.
        """
        try:
            if not self._pending():
                return None
            key = sys.stdin.read(1)
            if key == ESCAPE_KEY:
                while self._pending():
                    ch = sys.stdin.read(1)
                    if not ch:
                        break
                    key += ch
            return key or None
        except (OSError, ValueError):
            return None

    def stop(self):
        """Restore terminal settings."""
        import termios

        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except (termios.error, OSError):
                pass


class InputRouter:
    """Maps single keys to controller commands.

    While the task text field is open every printable key, space included,
    is typed into the field instead of triggering a shortcut.
    """

    def __init__(self, controller: "SessionController"):
        self.controller = controller
        self.buffer: str | None = None
        self.selected = 0

    @property
    def in_text_field(self) -> bool:
        return self.buffer is not None

    @property
    def selected_task_id(self) -> str | None:
        tasks = self.controller.tasks
        if not tasks:
            return None
        self.selected = min(self.selected, len(tasks) - 1)
        return tasks[self.selected].id

    def open_text_field(self, initial: str = "") -> None:
        self.buffer = initial

    def close_text_field(self) -> None:
        self.buffer = None
        self.controller.cancel_editing()

    def handle(self, key: str | None) -> bool:
        """Route one key. Returns False when the user asked to quit."""
        if not key:
            return True
        if len(key) > 1:
            # Unbound escape sequence (arrows, Delete, function keys)
            return True
        if self.in_text_field:
            self._handle_text(key)
            return True
        return self._handle_command(key)

    def _handle_text(self, key: str) -> None:
        if key in ENTER_KEYS:
            if self.controller.submit_task_text(self.buffer or ""):
                self.buffer = None
        elif key == ESCAPE_KEY:
            self.close_text_field()
        elif key in BACKSPACE_KEYS:
            self.buffer = (self.buffer or "")[:-1]
        elif key.isprintable():
            self.buffer = (self.buffer or "") + key

    def _handle_command(self, key: str) -> bool:
        c = self.controller
        if key == " ":
            c.toggle_running()
        elif key in MODE_KEYS:
            c.switch_mode(MODE_KEYS[key])
        elif key == "x":
            c.reset_all()
        elif key == "a":
            c.cancel_editing()
            self.open_text_field()
        elif key == "j":
            self.selected = min(self.selected + 1, max(len(c.tasks) - 1, 0))
        elif key == "k":
            self.selected = max(self.selected - 1, 0)
        elif key in ("t", "d", "e"):
            task_id = self.selected_task_id
            if task_id is None:
                return True
            if key == "t":
                c.toggle_task(task_id)
            elif key == "d":
                c.delete_task(task_id)
            else:
                task = c.start_editing(task_id)
                if task is not None:
                    self.open_text_field(task.text)
        elif key == "q":
            return False
        return True
