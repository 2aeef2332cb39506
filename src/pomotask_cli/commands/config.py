"""Configuration management commands."""

from typing import Optional

import typer

from pomotask_cli.config import get_config_manager
from pomotask_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND, SUCCESS
from pomotask_cli.utils.ui.console import get_console
from pomotask_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | None:
    """Try to convert a command-line value to an appropriate type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if value.lower() in ("none", "null"):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager()
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.alert_enabled)"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager()
    if not config_manager.has_key(key):
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    console.print(config_manager.get(key))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., timer.alert_enabled)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager()
    parsed_value = _parse_value(value)
    try:
        config_manager.set(key, parsed_value)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    config_manager = get_config_manager()
    if key is not None and not config_manager.has_key(key):
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)

    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not typer.confirm(f"Reset {target} to defaults?", default=False):
            format_info("Reset cancelled.")
            raise typer.Exit(code=SUCCESS)

    config_manager.reset(key)
    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
