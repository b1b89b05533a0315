"""Pydantic v2 schemas for the dashboard statistics endpoint."""

from pydantic import Field

from hoteldesk.schemas.booking import BookingResponse
from hoteldesk.schemas.common import CamelModel


class RoomCounts(CamelModel):
    total: int = 0
    available: int = 0
    booked: int = 0
    maintenance: int = 0


class BookingCounts(CamelModel):
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    checked_in: int = 0
    checked_out: int = 0
    cancelled: int = 0


class DashboardStats(CamelModel):
    """Point-in-time counts across rooms, bookings, users and payments."""

    rooms: RoomCounts
    bookings: BookingCounts
    total_guests: int
    total_revenue: float
    recent_bookings: list[BookingResponse] = Field(default_factory=list)
