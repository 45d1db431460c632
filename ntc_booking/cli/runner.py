"""
Command Runner.

Runs one command's async implementation and turns any ApplicationError
into a console message. This is the only place failures are caught.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import print_failure
from ntc_booking.core.exceptions import ApplicationError
from ntc_booking.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def run_command(
    ctx: typer.Context,
    label: str,
    operation: Callable[..., Awaitable[None]],
    *args: Any,
) -> None:
    """
    Execute ``operation(app_context, *args)`` to completion.

    Args:
        ctx: Typer context carrying the AppContext
        label: Failure prefix, e.g. "Error adding route"
        operation: Async command implementation
        *args: Command arguments passed through to ``operation``

    Raises:
        typer.Exit: With code 1 on failure, unless disabled in application.yaml
    """
    app: AppContext = ctx.obj

    try:
        asyncio.run(operation(app, *args))
    except ApplicationError as e:
        log_with_source(
            logger,
            "cli",
            "info",
            "Command failed",
            code=e.code,
            error=e.message,
        )
        print_failure(label, e)
        if app.exit_nonzero_on_error:
            raise typer.Exit(1)
