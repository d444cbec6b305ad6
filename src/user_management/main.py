"""Main entry point for the usermgmt CLI."""

import typer

from user_management import __version__
from user_management.commands import config, users
from user_management.utils.ui.console import get_console

app = typer.Typer(
    name="usermgmt",
    help="Command-line interface for user management",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(users.app, name="users", help="User management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]usermgmt[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
