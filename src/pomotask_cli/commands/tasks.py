"""Task management commands."""

import typer

from pomotask_cli.config import get_config_manager
from pomotask_cli.services.session_service import SessionController, open_session
from pomotask_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from pomotask_cli.utils.typer_helpers import SuggestingGroup
from pomotask_cli.utils.ui.formatters import (
    format_output,
    format_success,
    format_tasks_table,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


def _resolve(controller: SessionController, id_or_suffix: str) -> str:
    try:
        return controller.task_store.resolve_id(id_or_suffix)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e


@app.command("list")
@command_wrapper
def list_tasks(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (table, json, yaml)"
    ),
) -> None:
    """List tasks in the order they were added."""
    output = output or get_config_manager().config.output.format
    with open_session() as controller:
        tasks = [task.model_dump() for task in controller.tasks]

    if output in ("json", "yaml"):
        format_output(tasks, output)
    else:
        format_tasks_table(tasks)


@app.command("add")
@command_wrapper
def add_task(
    text: str = typer.Argument(..., help="Task text"),
) -> None:
    """Add a task."""
    with open_session() as controller:
        task = controller.add_task(text)

    if task is None:
        raise AppError("Task text cannot be empty", exit_code=ERROR_INVALID_ARGS)
    format_success(f"Added task: {task.text} (#{task.id[-6:]})")


@app.command("toggle")
@command_wrapper
def toggle_task(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Mark a task done, or not done again."""
    with open_session() as controller:
        resolved = _resolve(controller, task_id)
        controller.toggle_task(resolved)
        task = controller.task_store.get(resolved)

    state = "completed" if task.completed else "reopened"
    format_success(f"Task {state}: {task.text}")


@app.command("edit")
@command_wrapper
def edit_task(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    text: str = typer.Argument(..., help="New task text"),
) -> None:
    """Change a task's text."""
    if not text.strip():
        raise AppError("Task text cannot be empty", exit_code=ERROR_INVALID_ARGS)

    with open_session() as controller:
        resolved = _resolve(controller, task_id)
        controller.edit_task(resolved, text)
        task = controller.task_store.get(resolved)

    format_success(f"Task updated: {task.text}")


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Delete a task."""
    with open_session() as controller:
        resolved = _resolve(controller, task_id)
        text = controller.task_store.get(resolved).text
        controller.delete_task(resolved)

    format_success(f"Deleted task: {text}")
