"""Pomodoro timer commands for Pomotask CLI."""

import typer
from rich.panel import Panel

from pomotask_cli.config import get_config_manager
from pomotask_cli.models.focus.cycling import (
    MODE_LABELS,
    MODES,
    format_time,
    get_emoji,
    get_progress_dots,
    get_prompt,
    is_valid_mode,
)
from pomotask_cli.models.focus.state import TimerSession
from pomotask_cli.models.focus.ui import TimerDisplay
from pomotask_cli.services.session_service import build_session_controller, open_session
from pomotask_cli.utils.exit_codes import ERROR_INVALID_ARGS, SUCCESS
from pomotask_cli.utils.typer_helpers import SuggestingGroup
from pomotask_cli.utils.ui.console import get_console
from pomotask_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(cls=SuggestingGroup, help="Pomodoro timer")


def session_to_dict(session: TimerSession) -> dict:
    """Flatten a session for json/yaml/table output."""
    return {
        "mode": session.mode,
        "remaining": format_time(session.remaining_seconds),
        "remaining_seconds": session.remaining_seconds,
        "is_running": session.is_running,
        "pomodoros_completed": session.pomodoros_completed,
        "cycles_completed": session.cycles_completed,
    }


def _print_session(session: TimerSession) -> None:
    state = "[green]running[/green]" if session.is_running else "[yellow]paused[/yellow]"
    body = (
        f"[bold]{format_time(session.remaining_seconds)}[/bold]  {state}\n\n"
        f"Cycle #{session.cycles_completed + 1}  {get_progress_dots(session.pomodoros_completed, session.mode)}\n"
        f"{get_prompt(session.mode)}\n"
        f"Pomodoros Completed: {session.pomodoros_completed}"
    )
    console.print(
        Panel(
            body,
            title=f"{get_emoji(session.mode)} {MODE_LABELS[session.mode]}",
            border_style="cyan" if session.is_break else "red",
            padding=(1, 2),
        )
    )


@app.command("status")
@command_wrapper
def status(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (table, json, yaml)"
    ),
) -> None:
    """Show the current timer state."""
    output = output or get_config_manager().config.output.format
    with open_session() as controller:
        session = controller.engine.snapshot()

    if output in ("json", "yaml"):
        format_output(session_to_dict(session), output)
    else:
        _print_session(session)


@app.command("toggle")
@command_wrapper
def toggle() -> None:
    """Start or pause the timer."""
    with open_session() as controller:
        running = controller.toggle_running()
        remaining = format_time(controller.session.remaining_seconds)

    if running:
        format_success(f"Timer started ({remaining} left)")
        format_info("The countdown only advances while 'pomotask run' is open.")
    else:
        format_success(f"Timer paused at {remaining}")


@app.command("mode")
@command_wrapper
def mode(
    target: str = typer.Argument(..., help="focus, short_break or long_break"),
) -> None:
    """Switch to another mode. Stops the timer; counters are kept."""
    target = target.lower().replace("-", "_")
    if not is_valid_mode(target):
        raise AppError(
            f"Invalid mode '{target}'. Must be one of: {', '.join(MODES)}",
            exit_code=ERROR_INVALID_ARGS,
        )

    with open_session() as controller:
        controller.switch_mode(target)
        remaining = format_time(controller.session.remaining_seconds)

    format_success(f"Switched to {MODE_LABELS[target]} ({remaining})")


@app.command("reset")
@command_wrapper
def reset(
    hard: bool = typer.Option(
        False, "--hard", help="Also delete the saved session, including tasks"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Restart from the first focus period with zero counters."""
    if hard and not yes:
        if not typer.confirm("Delete the saved session and all tasks?", default=False):
            format_info("Reset cancelled.")
            raise typer.Exit(code=SUCCESS)

    with open_session() as controller:
        if hard:
            controller.discard()
        else:
            controller.reset_all()

    format_success("Saved session deleted" if hard else "Timer reset to Pomodoro (25:00)")


@app.command("run")
@command_wrapper
def run() -> None:
    """Open the full-screen live timer."""
    config = get_config_manager().config
    controller = build_session_controller()
    display = TimerDisplay(console, refresh_per_second=config.timer.refresh_per_second)

    display.run(controller)

    session = controller.session
    console.print(
        f"{get_emoji(session.mode)} {MODE_LABELS[session.mode]} "
        f"{format_time(session.remaining_seconds)} - "
        f"Pomodoros Completed: {session.pomodoros_completed}"
    )
