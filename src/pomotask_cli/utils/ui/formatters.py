"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def short_ids(task_ids: list[str], min_length: int = 4) -> dict[str, str]:
    """Map each ID to the shortest unique suffix (at least *min_length* chars)."""
    lengths = calculate_unique_suffixes(task_ids)
    return {tid: tid[-max(min_length, n):] for tid, n in lengths.items()}


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def format_tasks_table(tasks: list[dict]) -> None:
    """Render the task list with short IDs and strike-through for done items."""
    if not tasks:
        console.print("[yellow]No tasks yet. Add one with 'pomotask tasks add'.[/yellow]")
        return

    ids = short_ids([t["id"] for t in tasks])
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("")
    table.add_column("Task")

    for task in tasks:
        text = escape(task["text"])
        if task["completed"]:
            text = f"[strike]{text}[/strike]"
        mark = "[green]✓[/green]" if task["completed"] else "○"
        table.add_row(ids[task["id"]], mark, text)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
