"""
Schedule Schemas.

Pydantic schemas for creating and updating bus schedules. Stops arrive
as one comma-separated argument and are sent as an ordered list.
"""

from pydantic import Field

from ntc_booking.schemas.base import Flag, Number, RequestModel, Stops


class ScheduleRoute(RequestModel):
    route_number: str
    route_name: str


class ScheduleBus(RequestModel):
    registration_number: str
    operator_name: str
    bus_type: str
    ticket_price: Number
    capacity: int
    available_seats: int


class ScheduleValidity(RequestModel):
    start_date: str
    end_date: str


class ScheduleCreate(RequestModel):
    """Body of POST /operator/schedules."""

    route: ScheduleRoute
    bus: ScheduleBus
    departure_point: str
    departure_time: str
    arrival_point: str
    arrival_time: str
    stops: Stops
    schedule_valid: ScheduleValidity
    schedule_token: str = Field(description="Identifier used by update and delete")
    is_active: Flag


class ScheduleUpdate(RequestModel):
    """Body of PUT /operator/schedules/{scheduleToken}."""

    departure_point: str
    departure_time: str
    arrival_point: str
    arrival_time: str
    stops: Stops
