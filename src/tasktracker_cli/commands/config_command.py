"""Configuration management commands."""

import typer
from pydantic import ValidationError
from rich.markup import escape

from tasktracker_cli.config import get_config_manager
from tasktracker_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasktracker_cli.utils.typer_helpers import SuggestingGroup
from tasktracker_cli.utils.ui.console import get_console
from tasktracker_cli.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
)

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("view")
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager()
    format_output(config_manager.config.model_dump(), output)
    console.print(f"[dim]Config file: {escape(str(config_manager.config_file))}[/dim]")
    console.print(f"[dim]Task file: {escape(str(config_manager.tasks_file()))}[/dim]")


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.file)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)
    console.print(escape(str(value)))


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.file)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_manager().set(key, value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    except ValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager().reset(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
