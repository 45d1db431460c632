"""
Schedule Commands.

Operator schedule management addressed by schedule token, plus the
public schedule listing. Managing schedules needs a logged-in session;
the role is left to the service to enforce.
"""

import typer

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import print_result
from ntc_booking.cli.runner import run_command
from ntc_booking.schemas import ScheduleCreate, ScheduleUpdate, build_request


def add_schedule(
    ctx: typer.Context,
    route_number: str = typer.Argument(..., help="Route identifier"),
    route_name: str = typer.Argument(..., help="Route name"),
    registration_number: str = typer.Argument(..., help="Bus registration"),
    operator_name: str = typer.Argument(..., help="Operating company"),
    bus_type: str = typer.Argument(..., help="Bus type"),
    ticket_price: str = typer.Argument(..., help="Ticket price"),
    capacity: str = typer.Argument(..., help="Total seats"),
    available_seats: str = typer.Argument(..., help="Seats still available"),
    departure_point: str = typer.Argument(..., help="Departure stop"),
    departure_time: str = typer.Argument(..., help="Departure time"),
    arrival_point: str = typer.Argument(..., help="Arrival stop"),
    arrival_time: str = typer.Argument(..., help="Arrival time"),
    stops: str = typer.Argument(..., help="Comma-separated stops, in order"),
    start_date: str = typer.Argument(..., help="First day the schedule is valid"),
    end_date: str = typer.Argument(..., help="Last day the schedule is valid"),
    schedule_token: str = typer.Argument(..., help="Schedule identifier"),
    is_active: str = typer.Argument(..., help="'true' to activate, anything else leaves it inactive"),
) -> None:
    """
    Add a new bus schedule.

    Examples:
        ntc-booking add-schedule R1 Colombo-Kandy WP-1234 SLTB Luxury 450 50 50 \\
            Colombo 08:00 Kandy 11:30 "Kadawatha,Kegalle" 2024-01-01 2024-12-31 SCH-1 true
    """
    run_command(
        ctx,
        "Error adding bus schedule",
        _add_schedule,
        dict(
            route=dict(route_number=route_number, route_name=route_name),
            bus=dict(
                registration_number=registration_number,
                operator_name=operator_name,
                bus_type=bus_type,
                ticket_price=ticket_price,
                capacity=capacity,
                available_seats=available_seats,
            ),
            departure_point=departure_point,
            departure_time=departure_time,
            arrival_point=arrival_point,
            arrival_time=arrival_time,
            stops=stops,
            schedule_valid=dict(start_date=start_date, end_date=end_date),
            schedule_token=schedule_token,
            is_active=is_active,
        ),
    )


async def _add_schedule(app: AppContext, fields: dict) -> None:
    session = app.require_session("add a bus schedule")
    data = build_request(ScheduleCreate, **fields)
    async with app.service(session) as service:
        result = await service.create_schedule(data)
    print_result("Bus schedule added successfully", result)


def update_schedule(
    ctx: typer.Context,
    schedule_token: str = typer.Argument(..., help="Schedule identifier"),
    departure_point: str = typer.Argument(..., help="Departure stop"),
    departure_time: str = typer.Argument(..., help="Departure time"),
    arrival_point: str = typer.Argument(..., help="Arrival stop"),
    arrival_time: str = typer.Argument(..., help="Arrival time"),
    stops: str = typer.Argument(..., help="Comma-separated stops, in order"),
) -> None:
    """Update a bus schedule using the schedule token."""
    run_command(
        ctx,
        "Error updating bus schedule",
        _update_schedule,
        schedule_token,
        dict(
            departure_point=departure_point,
            departure_time=departure_time,
            arrival_point=arrival_point,
            arrival_time=arrival_time,
            stops=stops,
        ),
    )


async def _update_schedule(app: AppContext, schedule_token: str, fields: dict[str, str]) -> None:
    session = app.require_session("update a bus schedule")
    data = build_request(ScheduleUpdate, **fields)
    async with app.service(session) as service:
        result = await service.update_schedule(schedule_token, data)
    print_result("Bus schedule updated successfully", result)


def delete_schedule(
    ctx: typer.Context,
    schedule_token: str = typer.Argument(..., help="Schedule identifier"),
) -> None:
    """Delete a bus schedule using the schedule token."""
    run_command(ctx, "Error deleting bus schedule", _delete_schedule, schedule_token)


async def _delete_schedule(app: AppContext, schedule_token: str) -> None:
    session = app.require_session("delete a bus schedule")
    async with app.service(session) as service:
        result = await service.delete_schedule(schedule_token)
    print_result("Bus schedule deleted successfully", result)


def view_schedules(ctx: typer.Context) -> None:
    """View bus schedules."""
    run_command(ctx, "Error viewing schedules", _view_schedules)


async def _view_schedules(app: AppContext) -> None:
    async with app.service(app.session) as service:
        result = await service.list_schedules()
    print_result("Available schedules", result)
