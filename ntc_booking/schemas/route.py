"""
Route Schemas.
"""

from pydantic import Field

from ntc_booking.schemas.base import Number, RequestModel


class RouteCreate(RequestModel):
    """Body of POST /admin/routes."""

    route_number: str = Field(description="Unique route identifier")
    route_name: str
    starting_point: str
    ending_point: str
    distance: Number
