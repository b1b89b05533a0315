"""Dashboard statistics computed in memory from full table scans.

Every call loads all rooms, bookings, users and payments. That is fine for a
single hotel; larger installations would need aggregate queries instead.
"""

from collections import Counter
from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.models import Booking, Payment, Room, User
from hoteldesk.models.enums import BookingStatus, Role, RoomStatus
from hoteldesk.schemas.booking import BookingResponse
from hoteldesk.schemas.dashboard import BookingCounts, DashboardStats, RoomCounts

RECENT_BOOKINGS_LIMIT = 10


def summarize(
    rooms: Sequence[Room],
    bookings: Sequence[Booking],
    users: Sequence[User],
    payments: Sequence[Payment],
    recent_limit: int = RECENT_BOOKINGS_LIMIT,
) -> DashboardStats:
    room_status = Counter(room.status for room in rooms)
    booking_status = Counter(booking.status for booking in bookings)

    customers = {user.id for user in users if user.role == Role.CUSTOMER}
    revenue = sum((Decimal(payment.amount or 0) for payment in payments), Decimal("0"))

    recent = sorted(bookings, key=lambda b: (b.created_at, b.id), reverse=True)[:recent_limit]

    return DashboardStats(
        rooms=RoomCounts(
            total=len(rooms),
            available=room_status[RoomStatus.AVAILABLE],
            booked=room_status[RoomStatus.BOOKED],
            maintenance=room_status[RoomStatus.MAINTENANCE],
        ),
        bookings=BookingCounts(
            total=len(bookings),
            pending=booking_status[BookingStatus.PENDING],
            confirmed=booking_status[BookingStatus.CONFIRMED],
            checked_in=booking_status[BookingStatus.CHECKED_IN],
            checked_out=booking_status[BookingStatus.CHECKED_OUT],
            cancelled=booking_status[BookingStatus.CANCELLED],
        ),
        total_guests=len(customers),
        total_revenue=float(revenue),
        recent_bookings=[BookingResponse.model_validate(b) for b in recent],
    )


async def collect_dashboard_stats(db: AsyncSession) -> DashboardStats:
    """Load every row of the four tables and summarize them."""
    rooms = (await db.execute(select(Room))).scalars().all()
    bookings = (await db.execute(select(Booking))).scalars().all()
    users = (await db.execute(select(User))).scalars().all()
    payments = (await db.execute(select(Payment))).scalars().all()
    return summarize(rooms, bookings, users, payments)
