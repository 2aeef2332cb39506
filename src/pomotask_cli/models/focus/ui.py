"""Full-screen timer UI for the live session."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .cycling import (
    MODE_LABELS,
    MODES,
    duration_for,
    format_time,
    get_emoji,
    get_motivation,
    get_progress_dots,
    get_prompt,
)
from .keyboard import InputRouter, KeyboardHandler

if TYPE_CHECKING:
    from pomotask_cli.services.session_service import SessionController

FOCUS_COLOR = "red"
BREAK_COLOR = "cyan"


class TimerDisplay:
    """Manages the fullscreen timer display."""

    def __init__(self, console: Console | None = None, refresh_per_second: int = 4):
        self.console = console or Console()
        self.refresh_per_second = refresh_per_second

    def create_layout(self, controller: "SessionController", router: InputRouter) -> Layout:
        """Create the timer layout with all components."""
        session = controller.session
        color = BREAK_COLOR if session.is_break else FOCUS_COLOR

        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body", size=13),
            Layout(name="tasks"),
            Layout(name="footer", size=3),
        )

        layout["header"].update(Align.center(self._create_tabs(controller), vertical="middle"))
        layout["body"].update(
            Panel(
                Align.center(self._create_body_content(controller), vertical="middle"),
                border_style=color,
            )
        )
        layout["tasks"].update(self._create_tasks_panel(controller, router))
        layout["footer"].update(
            Align.center(self._create_footer_text(controller, router), vertical="middle")
        )
        return layout

    def _create_tabs(self, controller: "SessionController") -> Text:
        tabs = Text(justify="center")
        for mode in MODES:
            label = f" {MODE_LABELS[mode]} "
            if mode == controller.session.mode:
                tabs.append(label, style="bold reverse")
            else:
                tabs.append(label, style="dim")
            tabs.append("  ")
        return tabs

    def _create_body_content(self, controller: "SessionController") -> Group:
        """Create the main body content."""
        session = controller.session
        color = BREAK_COLOR if session.is_break else FOCUS_COLOR
        components = []

        timer_text = Text(justify="center")
        timer_text.append(f"{get_emoji(session.mode)}  ")
        timer_text.append(format_time(session.remaining_seconds), style=f"bold {color}")
        timer_text.append("   ▶ RUNNING" if session.is_running else "   ⏸ PAUSED", style="dim")
        components.append(timer_text)
        components.append(Text(""))

        # Progress bar
        total_seconds = duration_for(session.mode)
        elapsed = total_seconds - session.remaining_seconds
        progress_pct = min(100, int((elapsed / total_seconds) * 100)) if total_seconds > 0 else 0
        bar_width = 40
        filled = int(bar_width * progress_pct / 100)
        progress_text = Text(justify="center")
        progress_text.append("▓" * filled + "░" * (bar_width - filled) + f"  {progress_pct}%", style="dim")
        components.append(progress_text)
        components.append(Text(""))

        components.append(
            Text(f"#{session.cycles_completed + 1}", style="bold white", justify="center")
        )
        components.append(Text(get_prompt(session.mode), justify="center"))
        components.append(
            Text(get_progress_dots(session.pomodoros_completed, session.mode), justify="center")
        )
        components.append(
            Text(f"Pomodoros Completed: {session.pomodoros_completed}", justify="center")
        )
        components.append(Text(get_motivation(session.mode), style="italic", justify="center"))

        return Group(*components)

    def _create_tasks_panel(self, controller: "SessionController", router: InputRouter) -> Panel:
        lines = []
        tasks = controller.tasks
        selected_id = router.selected_task_id
        editing_id = controller.task_store.editing_id

        if router.in_text_field:
            prompt = "Update task" if editing_id else "Add a new task"
            lines.append(f"[bold]{prompt}:[/bold] {escape(router.buffer or '')}█")
            lines.append("")

        if not tasks:
            lines.append("[dim]No tasks yet. Press 'a' to add one.[/dim]")

        for task in tasks:
            pointer = "›" if task.id == selected_id else " "
            mark = "[green]✓[/green]" if task.completed else "○"
            text = escape(task.text)
            if task.completed:
                text = f"[strike]{text}[/strike]"
            if task.id == editing_id:
                text = f"[yellow]{text}[/yellow]"
            lines.append(f"{pointer} {mark} {text}")

        return Panel("\n".join(lines), title="Tasks", border_style="white")

    def _create_footer_text(self, controller: "SessionController", router: InputRouter) -> Text:
        """Create footer with keyboard hints."""
        if router.in_text_field:
            hints = "Type the task  •  Enter to save  •  Esc to cancel"
        else:
            action = "pause" if controller.session.is_running else "start"
            hints = (
                f"Space {action}  •  1/2/3 mode  •  x restart  •  "
                "a add  •  j/k select  •  t toggle  •  e edit  •  d delete  •  q quit"
            )
        return Text(hints, style="dim", justify="center")

    def run(
        self,
        controller: "SessionController",
        keyboard: KeyboardHandler | None = None,
    ) -> str:
        """
        Run the fullscreen timer until the user quits.

        Returns 'quit' or 'interrupted'.
        """
        router = InputRouter(controller)
        delay = 1 / self.refresh_per_second

        try:
            keyboard = keyboard or KeyboardHandler()
            with Live(
                self.create_layout(controller, router),
                console=self.console,
                refresh_per_second=self.refresh_per_second,
                screen=True,
            ) as live:
                while True:
                    if not router.handle(keyboard.get_key()):
                        return "quit"

                    controller.pump()
                    live.update(self.create_layout(controller, router))
                    time.sleep(delay)

        except KeyboardInterrupt:
            return "interrupted"
        finally:
            if keyboard is not None:
                keyboard.stop()
            controller.close()
