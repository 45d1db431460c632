"""
Bus Schemas.

Pydantic schemas for bus creation and availability search.
"""

from pydantic import Field

from ntc_booking.schemas.base import Number, RequestModel


class BusCreate(RequestModel):
    """Body of POST /admin/buses."""

    bus_number: str
    driver_name: str
    conductor_name: str
    operator_name: str
    bustype: str = Field(description="Bus category, sent as 'bustype'")
    capacity: int
    price: Number
    available_seats: int
    registration_number: str
    route_number: str = Field(description="Route the bus is assigned to")


class BusSearch(RequestModel):
    """Query string of GET /commuter/searchbus."""

    departure_point: str
    arrival_point: str
    date: str
