"""Output formatters for different formats."""

import json
from typing import Any

import typer
import yaml
from rich.markup import escape
from rich.table import Table

from user_management.utils.ui.console import get_console

OUTPUT_FORMATS = ("table", "json", "yaml", "quiet")


def validate_output_format(value: str) -> str:
    """Typer callback rejecting unknown --output values."""
    if value not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"must be one of: {', '.join(OUTPUT_FORMATS)}")
    return value


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "quiet":
        format_quiet(data)
    else:
        # Default to table
        format_table(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    console = get_console()
    if data is None or data == {}:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if not data:
            console.print("[yellow]No items found[/yellow]")
            return

        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            # Simple list
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*[_format_value(item.get(col)) for col in columns])

    get_console().print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _format_value(value))

    get_console().print(table)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs, or bare values for plain lists)."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict):
                if "id" in item:
                    print(item["id"])
            else:
                print(item)
    elif isinstance(data, dict):
        if "id" in data:
            print(data["id"])
    elif data is not None:
        print(data)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
