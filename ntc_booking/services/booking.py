"""
Booking Service.

One method per endpoint of the remote booking service. Each method issues
exactly one request through the API client and returns the decoded
response body. Role checks happen before these methods are called.

Usage:
    service = BookingService(APIClient(token=session.token))
    routes = await service.list_routes()
"""

from typing import Any
from urllib.parse import quote

from ntc_booking.cli.client import APIClient
from ntc_booking.core.logging import get_logger
from ntc_booking.schemas import (
    BookingCreate,
    BusCreate,
    BusSearch,
    RouteCreate,
    ScheduleCreate,
    ScheduleUpdate,
    UserLogin,
    UserRegister,
)


class BookingService:
    """
    Calls against the booking service REST API.

    Provides:
    - User registration and login
    - Route and bus administration
    - Bus search and booking
    - Schedule management
    """

    def __init__(self, client: APIClient) -> None:
        self._client = client
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    async def register(self, data: UserRegister) -> Any:
        self._log_operation("Registering user", email=data.email, role=data.role)
        return await self._client.call("POST", "/users/register", json=data.to_payload())

    async def login(self, data: UserLogin) -> Any:
        """Authenticate; the response body carries the session token."""
        self._log_operation("Logging in", email=data.email)
        return await self._client.call("POST", "/users/login", json=data.to_payload())

    # -------------------------------------------------------------------------
    # Admin: routes and buses
    # -------------------------------------------------------------------------

    async def create_route(self, data: RouteCreate) -> Any:
        self._log_operation("Adding route", route_number=data.route_number)
        return await self._client.call("POST", "/admin/routes", json=data.to_payload())

    async def list_routes(self) -> Any:
        return await self._client.call("GET", "/admin/routes")

    async def create_bus(self, data: BusCreate) -> Any:
        self._log_operation("Adding bus", bus_number=data.bus_number, route_number=data.route_number)
        return await self._client.call("POST", "/admin/buses", json=data.to_payload())

    async def list_buses(self) -> Any:
        return await self._client.call("GET", "/admin/buses")

    # -------------------------------------------------------------------------
    # Commuter: search and booking
    # -------------------------------------------------------------------------

    async def search_buses(self, query: BusSearch) -> Any:
        return await self._client.call("GET", "/commuter/searchbus", params=query.to_payload())

    async def book_bus(self, data: BookingCreate) -> Any:
        self._log_operation("Booking bus", booking_number=data.booking_number, schedule_token=data.schedule_token)
        return await self._client.call("POST", "/commuter/bookbus", json=data.to_payload())

    # -------------------------------------------------------------------------
    # Schedules
    # -------------------------------------------------------------------------

    async def create_schedule(self, data: ScheduleCreate) -> Any:
        self._log_operation("Adding schedule", schedule_token=data.schedule_token)
        return await self._client.call("POST", "/operator/schedules", json=data.to_payload())

    async def update_schedule(self, schedule_token: str, data: ScheduleUpdate) -> Any:
        self._log_operation("Updating schedule", schedule_token=schedule_token)
        return await self._client.call(
            "PUT",
            f"/operator/schedules/{quote(schedule_token, safe='')}",
            json=data.to_payload(),
        )

    async def delete_schedule(self, schedule_token: str) -> Any:
        self._log_operation("Deleting schedule", schedule_token=schedule_token)
        return await self._client.call("DELETE", f"/operator/schedules/{quote(schedule_token, safe='')}")

    async def list_schedules(self) -> Any:
        return await self._client.call("GET", "/schedules")
