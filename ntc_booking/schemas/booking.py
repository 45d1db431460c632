"""
Booking Schemas.
"""

from ntc_booking.schemas.base import RequestModel


class BookingCreate(RequestModel):
    """Body of POST /commuter/bookbus."""

    booking_number: str
    user_name: str
    seat_count: int
    booking_date: str
    schedule_token: str
    booking_token: str
