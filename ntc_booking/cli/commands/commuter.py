"""
Commuter Commands.

Bus search and seat booking. Both need a logged-in session of any role.
"""

from typing import Any

import typer

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import field, print_enumerated, print_result
from ntc_booking.cli.runner import run_command
from ntc_booking.schemas import BookingCreate, BusSearch, build_request


def view_available_buses(
    ctx: typer.Context,
    departure_point: str = typer.Argument(..., help="Where the journey starts"),
    arrival_point: str = typer.Argument(..., help="Where the journey ends"),
    date: str = typer.Argument(..., help="Travel date"),
) -> None:
    """View available buses based on departure point, arrival point, and date."""
    run_command(
        ctx,
        "Error fetching available buses",
        _view_available_buses,
        departure_point,
        arrival_point,
        date,
    )


async def _view_available_buses(app: AppContext, departure_point: str, arrival_point: str, date: str) -> None:
    session = app.require_session("view available buses")
    query = build_request(BusSearch, departure_point=departure_point, arrival_point=arrival_point, date=date)
    async with app.service(session) as service:
        buses = await service.search_buses(query)
    print_enumerated(
        f"Available Buses from {departure_point} to {arrival_point} on {date}:",
        buses,
        describe_available_bus,
    )


def describe_available_bus(bus: Any) -> str:
    return (
        f"Bus Number: {field(bus, 'busNumber')}, "
        f"Driver: {field(bus, 'driverName')}, "
        f"Conductor: {field(bus, 'conductorName')}, "
        f"Type: {field(bus, 'bustype')}, "
        f"Capacity: {field(bus, 'capacity')}, "
        f"Price: {field(bus, 'price')}, "
        f"Available Seats: {field(bus, 'availableSeats')}, "
        f"Registration Number: {field(bus, 'registrationNumber')}, "
        f"Departure Time: {field(bus, 'departureTime')}"
    )


def book_bus(
    ctx: typer.Context,
    booking_number: str = typer.Argument(..., help="Booking reference"),
    user_name: str = typer.Argument(..., help="Passenger name"),
    seat_count: str = typer.Argument(..., help="Number of seats"),
    booking_date: str = typer.Argument(..., help="Date of travel"),
    schedule_token: str = typer.Argument(..., help="Schedule to book on"),
    booking_token: str = typer.Argument(..., help="Booking identifier"),
) -> None:
    """Book a bus."""
    run_command(
        ctx,
        "Error booking bus",
        _book_bus,
        dict(
            booking_number=booking_number,
            user_name=user_name,
            seat_count=seat_count,
            booking_date=booking_date,
            schedule_token=schedule_token,
            booking_token=booking_token,
        ),
    )


async def _book_bus(app: AppContext, fields: dict[str, str]) -> None:
    session = app.require_session("book a bus")
    data = build_request(BookingCreate, **fields)
    async with app.service(session) as service:
        result = await service.book_bus(data)
    print_result("Bus booked successfully", result)
