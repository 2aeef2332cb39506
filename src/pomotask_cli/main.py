"""Main entry point for Pomotask CLI."""

import typer

from pomotask_cli import __version__
from pomotask_cli.commands import config, tasks, timer
from pomotask_cli.utils.typer_helpers import SuggestingGroup
from pomotask_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="pomotask",
    cls=SuggestingGroup,
    help="A Pomodoro timer with a to-do list, right in your terminal",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(timer.app, name="timer", help="Pomodoro timer commands")
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


# Add top-level commands
@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomotask CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def run() -> None:
    """Open the full-screen live timer (same as 'timer run')."""
    timer.run()


@app.command()
def add(
    text: str = typer.Argument(..., help="Task text"),
) -> None:
    """Quick add a task (same as 'tasks add')."""
    tasks.add_task(text=text)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
