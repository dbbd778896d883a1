"""List command - Show tasks, optionally filtered by status."""

import typer

from tasktracker_cli.config import get_config_manager
from tasktracker_cli.models import TaskStatus, TaskTrackerError
from tasktracker_cli.services.task_service import get_task_service
from tasktracker_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasktracker_cli.utils.ui.formatters import OUTPUT_FORMATS, format_output

from .decorators import command_wrapper


@command_wrapper
def list_tasks(
    status: TaskStatus | None = typer.Argument(
        None, help="Only show tasks with this status"
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format (json/pretty/table/yaml); defaults to output.format",
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List all tasks, or only those with the given status."""
    if json_opt:
        output = "json"
    if output is None:
        output = get_config_manager().config.output.format
    if output not in OUTPUT_FORMATS:
        raise TaskTrackerError(
            f"Unknown output format '{output}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})",
            exit_code=ERROR_INVALID_ARGS,
        )

    tasks = get_task_service().list_tasks(status)
    format_output([t.to_record() for t in tasks], output)
