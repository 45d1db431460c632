"""
User Schemas.
"""

from ntc_booking.schemas.base import RequestModel


class UserRegister(RequestModel):
    """Body of POST /users/register."""

    name: str
    email: str
    password: str
    role: str


class UserLogin(RequestModel):
    """Body of POST /users/login."""

    email: str
    password: str
