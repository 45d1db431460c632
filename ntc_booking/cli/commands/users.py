"""
User Commands.

Registration and login. Login stores the returned session locally.
"""

import typer
from pydantic import ValidationError

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import print_result
from ntc_booking.cli.runner import run_command
from ntc_booking.core.exceptions import ExternalServiceError
from ntc_booking.schemas import Session, UserLogin, UserRegister, build_request


def register(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Full name"),
    email: str = typer.Argument(..., help="Login email"),
    password: str = typer.Argument(..., help="Password"),
    role: str = typer.Argument(..., help="Admin, Operator or Commuter"),
) -> None:
    """
    Register a new user.

    Examples:
        ntc-booking register "Ann Perera" ann@example.com secret Commuter
    """
    run_command(ctx, "Error registering user", _register, name, email, password, role)


async def _register(app: AppContext, name: str, email: str, password: str, role: str) -> None:
    data = build_request(UserRegister, name=name, email=email, password=password, role=role)
    async with app.service() as service:
        result = await service.register(data)
    print_result("User registered successfully", result)


def login(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Login email"),
    password: str = typer.Argument(..., help="Password"),
) -> None:
    """
    Login with a user.

    The returned session replaces any previously stored one.
    """
    run_command(ctx, "Error logging in", _login, email, password)


async def _login(app: AppContext, email: str, password: str) -> None:
    data = build_request(UserLogin, email=email, password=password)
    async with app.service() as service:
        result = await service.login(data)

    try:
        session = Session.model_validate(result)
    except ValidationError as e:
        raise ExternalServiceError("Login response did not contain a session token") from e

    app.save_session(session)
    print_result("User logged in successfully", result)
