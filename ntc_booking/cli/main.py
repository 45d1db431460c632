"""
NTC Booking CLI Application.

Typer application exposing one command per booking service operation.
Built with Typer for commands and Rich for formatted output.

Usage:
    ntc-booking --help
    ntc-booking register "Ann Perera" ann@example.com secret Admin
    ntc-booking login ann@example.com secret
    ntc-booking view-routes
    ntc-booking add-note "Bring the ticket"

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version         Show the application version
"""

import structlog
import typer

from ntc_booking.cli.commands import register_commands
from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import err_console, print_message
from ntc_booking.core.config import get_app_config
from ntc_booking.core.logging import setup_logging

app = typer.Typer(
    name="ntc-booking",
    help="NTC Booking CLI - register, log in, manage routes, buses and schedules, and book seats.",
    no_args_is_help=True,
    add_completion=False,
)

register_commands(app)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        version = get_app_config().application.version
    except (RuntimeError, FileNotFoundError, ValueError):
        version = "unknown"
    print_message(version)
    raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the application version and exit",
    ),
) -> None:
    """
    NTC Booking CLI.

    Client for the NTC bus booking service. Log in once; the session is
    kept locally and used by later commands.
    """
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = None

    try:
        setup_logging(level=log_level)
        if ctx.obj is None:
            ctx.obj = AppContext.from_config()
    except (RuntimeError, FileNotFoundError, ValueError) as e:
        err_console.print(f"Error: Could not load configuration: {e}", style="red")
        raise typer.Exit(1)

    structlog.contextvars.bind_contextvars(source="cli", command=ctx.invoked_subcommand)
