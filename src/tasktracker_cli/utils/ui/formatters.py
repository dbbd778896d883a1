"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tasktracker_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("json", "yaml", "table", "pretty")

# Status Icons & Colors
STATUS_ICONS = {
    "todo": "⬜",
    "in-progress": "🔄",
    "done": "✅",
}

STATUS_COLORS = {
    "todo": "white",
    "in-progress": "bold yellow",
    "done": "green",
}

STATUS_TITLES = {
    "todo": "TO DO",
    "in-progress": "IN PROGRESS",
    "done": "DONE",
}


def format_output(data: Any, output_format: str = "json") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
    elif output_format == "table":
        format_table(data)
    elif output_format == "pretty":
        format_pretty(data)
    else:
        raise ValueError(
            f"Unknown output format '{output_format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )


def format_table(data: Any) -> None:
    """Format data as a table."""
    if isinstance(data, list):
        if not data:
            console.print("[yellow]No tasks found[/yellow]")
            return
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(_column_title(col))

    for item in items:
        row = []
        for col in columns:
            value = item.get(col, "")
            if value is None:
                value = "-"
            elif col == "status":
                color = STATUS_COLORS.get(value, "white")
                value = f"[{color}]{value}[/{color}]"
            elif col in ("createdAt", "updatedAt"):
                value = format_timestamp(value)
            else:
                value = escape(str(value))
            row.append(value)
        table.add_row(*row)

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_value = "-" if value is None else escape(str(value))
        table.add_row(_column_title(key), formatted_value)

    console.print(table)


def format_pretty(data: Any) -> None:
    """Format tasks grouped by status, in insertion order within each group."""
    if not isinstance(data, list) or (data and not isinstance(data[0], dict)):
        console.print(data)
        return
    if not data:
        console.print("[yellow]No tasks found[/yellow]")
        return

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    done = sum(1 for t in data if t.get("status") == "done")
    header.append(f"({len(data)} total, {done} done)", style="dim")
    console.print(header)

    for status, title in STATUS_TITLES.items():
        group = [t for t in data if t.get("status") == status]
        if not group:
            continue
        console.print()
        console.print(f"[{STATUS_COLORS[status]}]{title}[/{STATUS_COLORS[status]}]")
        for task in group:
            line = Text()
            line.append(f"  {STATUS_ICONS[status]} ")
            line.append(f"{task.get('id')}. ", style="bold cyan")
            line.append(str(task.get("name", "")))
            line.append(
                f"  (updated {format_timestamp(task.get('updatedAt'))})", style="dim"
            )
            console.print(line)


def format_timestamp(value: Any) -> str:
    """Render an ISO-8601 timestamp as ``YYYY-MM-DD HH:MM``."""
    if not value:
        return "-"
    try:
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return dt.strftime("%Y-%m-%d %H:%M")


def _column_title(key: str) -> str:
    if key == "id":
        return "ID"
    if key in ("createdAt", "updatedAt"):
        return key[:-2].title() + " At"
    return key.replace("_", " ").title()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
