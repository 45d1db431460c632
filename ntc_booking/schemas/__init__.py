# Pydantic schemas package
from ntc_booking.schemas.base import RequestModel, build_request
from ntc_booking.schemas.booking import BookingCreate
from ntc_booking.schemas.bus import BusCreate, BusSearch
from ntc_booking.schemas.route import RouteCreate
from ntc_booking.schemas.schedule import (
    ScheduleBus,
    ScheduleCreate,
    ScheduleRoute,
    ScheduleUpdate,
    ScheduleValidity,
)
from ntc_booking.schemas.session import ADMIN_ROLE, Session
from ntc_booking.schemas.user import UserLogin, UserRegister

__all__ = [
    "ADMIN_ROLE",
    "BookingCreate",
    "BusCreate",
    "BusSearch",
    "RequestModel",
    "RouteCreate",
    "ScheduleBus",
    "ScheduleCreate",
    "ScheduleRoute",
    "ScheduleUpdate",
    "ScheduleValidity",
    "Session",
    "UserLogin",
    "UserRegister",
    "build_request",
]
