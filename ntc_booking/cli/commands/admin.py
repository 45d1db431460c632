"""
Admin Commands.

Route and bus administration. Every command here requires a stored
session whose role is exactly "Admin".
"""

from typing import Any

import typer

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import field, print_enumerated, print_result
from ntc_booking.cli.runner import run_command
from ntc_booking.schemas import BusCreate, RouteCreate, build_request


def add_route(
    ctx: typer.Context,
    route_number: str = typer.Argument(..., help="Unique route identifier"),
    route_name: str = typer.Argument(..., help="Route name"),
    starting_point: str = typer.Argument(..., help="First stop"),
    ending_point: str = typer.Argument(..., help="Last stop"),
    distance: str = typer.Argument(..., help="Route length"),
) -> None:
    """Add a new transport route (Admin only)."""
    run_command(
        ctx,
        "Error adding route",
        _add_route,
        route_number,
        route_name,
        starting_point,
        ending_point,
        distance,
    )


async def _add_route(
    app: AppContext,
    route_number: str,
    route_name: str,
    starting_point: str,
    ending_point: str,
    distance: str,
) -> None:
    session = app.require_admin("add a transport route")
    data = build_request(
        RouteCreate,
        route_number=route_number,
        route_name=route_name,
        starting_point=starting_point,
        ending_point=ending_point,
        distance=distance,
    )
    async with app.service(session) as service:
        result = await service.create_route(data)
    print_result("Transport route added successfully", result)


def view_routes(ctx: typer.Context) -> None:
    """View all bus routes (Admin only)."""
    run_command(ctx, "Error fetching routes", _view_routes)


async def _view_routes(app: AppContext) -> None:
    session = app.require_admin("view bus routes")
    async with app.service(session) as service:
        routes = await service.list_routes()
    print_enumerated("Bus Routes Schedule:", routes, describe_route)


def describe_route(route: Any) -> str:
    return (
        f"Route Number: {field(route, 'routeNumber')}, "
        f"Name: {field(route, 'routeName')}, "
        f"Start: {field(route, 'startingPoint')}, "
        f"End: {field(route, 'endingPoint')}, "
        f"Distance: {field(route, 'distance')}"
    )


def add_bus(
    ctx: typer.Context,
    bus_number: str = typer.Argument(..., help="Fleet number"),
    driver_name: str = typer.Argument(..., help="Driver"),
    conductor_name: str = typer.Argument(..., help="Conductor"),
    operator_name: str = typer.Argument(..., help="Operating company"),
    bustype: str = typer.Argument(..., help="Bus type, e.g. Luxury or Normal"),
    capacity: str = typer.Argument(..., help="Total seats"),
    price: str = typer.Argument(..., help="Ticket price"),
    available_seats: str = typer.Argument(..., help="Seats still available"),
    registration_number: str = typer.Argument(..., help="Vehicle registration"),
    route_number: str = typer.Argument(..., help="Route the bus runs on"),
) -> None:
    """Add a new bus (Admin only)."""
    run_command(
        ctx,
        "Error adding bus",
        _add_bus,
        dict(
            bus_number=bus_number,
            driver_name=driver_name,
            conductor_name=conductor_name,
            operator_name=operator_name,
            bustype=bustype,
            capacity=capacity,
            price=price,
            available_seats=available_seats,
            registration_number=registration_number,
            route_number=route_number,
        ),
    )


async def _add_bus(app: AppContext, fields: dict[str, str]) -> None:
    session = app.require_admin("add a bus")
    data = build_request(BusCreate, **fields)
    async with app.service(session) as service:
        result = await service.create_bus(data)
    print_result("Bus added successfully", result)


def view_buses(ctx: typer.Context) -> None:
    """View all buses with their assigned routes (Admin only)."""
    run_command(ctx, "Error fetching buses with routes", _view_buses)


async def _view_buses(app: AppContext) -> None:
    session = app.require_admin("view buses and their routes")
    async with app.service(session) as service:
        buses = await service.list_buses()
    print_enumerated("Buses with Assigned Routes:", buses, describe_bus)


def describe_bus(bus: Any) -> str:
    route = bus.get("route") if isinstance(bus, dict) else None
    route_name = field(route, "routeName") if route else "Unassigned"
    return (
        f"Bus Number: {field(bus, 'busNumber')}, "
        f"Driver: {field(bus, 'driverName')}, "
        f"Conductor: {field(bus, 'conductorName')}, "
        f"Operator: {field(bus, 'operatorName')}, "
        f"Type: {field(bus, 'bustype')}, "
        f"Capacity: {field(bus, 'capacity')}, "
        f"Price: {field(bus, 'price')}, "
        f"Available Seats: {field(bus, 'availableSeats')}, "
        f"Registration Number: {field(bus, 'registrationNumber')}, "
        f"Route: {route_name}"
    )
