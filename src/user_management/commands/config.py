"""Configuration management commands."""

import typer
from pydantic import ValidationError

from user_management.services.config_service import get_config_service
from user_management.utils.exit_codes import ERROR_INVALID_ARGS
from user_management.utils.ui.console import get_console
from user_management.utils.ui.formatters import (
    format_output,
    format_success,
    validate_output_format,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management", no_args_is_help=True)
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option(
        "yaml", "--output", "-o", help="Output format", callback=validate_output_format
    ),
) -> None:
    """Show the current configuration."""
    format_output(get_config_service().config.model_dump(mode="json"), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. storage.backend"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. storage.backend"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for {key}: {value}", exit_code=ERROR_INVALID_ARGS
        ) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Key to reset (all if omitted)"),
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Reset {key or 'configuration'}")
