"""User management commands."""

import typer

from user_management.services.config_service import get_user_controller
from user_management.utils.exit_codes import ERROR_NOT_FOUND, ERROR_REJECTED
from user_management.utils.ui.console import get_console
from user_management.utils.ui.formatters import (
    format_output,
    format_success,
    validate_output_format,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="User management commands", no_args_is_help=True)
console = get_console()


@app.command("show")
@command_wrapper
def show_user(
    user_id: int = typer.Argument(..., help="User ID"),
) -> None:
    """Show a user's display name."""
    controller = get_user_controller()
    console.print(controller.get_user_display_name(user_id), markup=False)


@app.command("create")
@command_wrapper
def create_user(
    name: str = typer.Argument(..., help="User name"),
    email: str = typer.Argument(..., help="Email address"),
) -> None:
    """Create a new active user."""
    controller = get_user_controller()
    if not controller.create_user(name, email):
        raise AppError(f"User not created: {email}", exit_code=ERROR_REJECTED)
    format_success(f"User created: {email}")


@app.command("update")
@command_wrapper
def update_user(
    user_id: int = typer.Argument(..., help="User ID"),
    name: str | None = typer.Option(None, "--name", help="New name"),
    email: str | None = typer.Option(None, "--email", help="New email address"),
    active: bool | None = typer.Option(
        None, "--active/--inactive", help="Set the active flag"
    ),
) -> None:
    """Update a user's fields."""
    controller = get_user_controller()
    user = controller.user_service.get_user(user_id)
    if user is None:
        raise AppError(f"User not found: {user_id}", exit_code=ERROR_NOT_FOUND)

    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if active is not None:
        user.is_active = active

    if not controller.update_user(user):
        raise AppError(f"User not updated: {user_id}", exit_code=ERROR_REJECTED)
    format_success(f"User updated: {user_id}")


@app.command("deactivate")
@command_wrapper
def deactivate_user(
    user_id: int = typer.Argument(..., help="User ID"),
) -> None:
    """Deactivate a user."""
    controller = get_user_controller()
    if not controller.deactivate_user(user_id):
        raise AppError(
            f"User not found or not saved: {user_id}", exit_code=ERROR_NOT_FOUND
        )
    format_success(f"User deactivated: {user_id}")


@app.command("list")
@command_wrapper
def list_active_users(
    output: str = typer.Option(
        "table", "--output", "-o", help="Output format", callback=validate_output_format
    ),
) -> None:
    """List the names of active users."""
    controller = get_user_controller()
    format_output(list(controller.get_active_user_names()), output)


@app.command("find")
@command_wrapper
def find_user(
    email: str = typer.Argument(..., help="Email address"),
    output: str = typer.Option(
        "table", "--output", "-o", help="Output format", callback=validate_output_format
    ),
) -> None:
    """Find a user by email address."""
    controller = get_user_controller()
    user = controller.find_user_by_email(email)
    if user is None:
        raise AppError(f"User not found: {email}", exit_code=ERROR_NOT_FOUND)
    format_output(user.model_dump(mode="json"), output)
