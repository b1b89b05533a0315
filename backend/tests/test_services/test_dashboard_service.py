"""Unit tests for dashboard aggregation (no database)."""

from datetime import datetime, timedelta
from decimal import Decimal

from hoteldesk.models import Booking, Payment, Room, User
from hoteldesk.services.dashboard_service import summarize

_BASE = datetime(2024, 1, 1, 12, 0, 0)


def _room(room_id: int, status: str) -> Room:
    return Room(
        id=room_id,
        room_number=str(room_id),
        type="SINGLE",
        price=Decimal("80"),
        status=status,
        occupancy=1,
        created_at=_BASE,
        updated_at=_BASE,
    )


def _booking(booking_id: int, status: str, created_offset: int) -> Booking:
    created = _BASE + timedelta(minutes=created_offset)
    return Booking(
        id=booking_id,
        booking_id=f"BK{booking_id}-AAAAAAAAA",
        room_id=1,
        guest_name="Guest",
        guest_email="guest@x.com",
        guest_phone="555",
        check_in=datetime(2024, 2, 1),
        check_out=datetime(2024, 2, 3),
        number_of_guests=1,
        total_amount=Decimal("160"),
        status=status,
        created_at=created,
        updated_at=created,
    )


def _user(user_id: int, role: str) -> User:
    return User(id=user_id, name=f"U{user_id}", email=f"u{user_id}@x.com", password="hash", role=role)


def _payment(amount: str) -> Payment:
    return Payment(booking_id=1, amount=Decimal(amount), method="CASH")


class TestSummarize:
    """Test in-memory dashboard statistics."""

    def test_empty(self):
        stats = summarize([], [], [], [])
        assert stats.rooms.total == 0
        assert stats.bookings.total == 0
        assert stats.total_guests == 0
        assert stats.total_revenue == 0
        assert stats.recent_bookings == []

    def test_counts_by_status(self):
        rooms = [_room(1, "AVAILABLE"), _room(2, "BOOKED"), _room(3, "BOOKED"), _room(4, "MAINTENANCE")]
        bookings = [
            _booking(1, "PENDING", 0),
            _booking(2, "CONFIRMED", 1),
            _booking(3, "CHECKED_IN", 2),
            _booking(4, "CHECKED_OUT", 3),
            _booking(5, "CANCELLED", 4),
            _booking(6, "CANCELLED", 5),
        ]
        stats = summarize(rooms, bookings, [], [])

        assert (stats.rooms.total, stats.rooms.available, stats.rooms.booked, stats.rooms.maintenance) == (4, 1, 2, 1)
        assert stats.bookings.total == 6
        assert stats.bookings.pending == 1
        assert stats.bookings.confirmed == 1
        assert stats.bookings.checked_in == 1
        assert stats.bookings.checked_out == 1
        assert stats.bookings.cancelled == 2

    def test_guests_are_customers_only(self):
        users = [_user(1, "ADMIN"), _user(2, "RECEPTIONIST"), _user(3, "CUSTOMER"), _user(4, "CUSTOMER")]
        assert summarize([], [], users, []).total_guests == 2

    def test_revenue_is_sum_of_payments(self):
        stats = summarize([], [], [], [_payment("100.10"), _payment("0.20"), _payment("59.70")])
        assert stats.total_revenue == 160.0

    def test_recent_bookings_newest_first_and_limited(self):
        bookings = [_booking(i, "PENDING", created_offset=i) for i in range(1, 13)]
        stats = summarize([], bookings, [], [], recent_limit=10)
        assert [b.id for b in stats.recent_bookings] == list(range(12, 2, -1))

    def test_recent_bookings_tie_broken_by_id(self):
        bookings = [_booking(1, "PENDING", 0), _booking(2, "PENDING", 0)]
        stats = summarize([], bookings, [], [])
        assert [b.id for b in stats.recent_bookings] == [2, 1]
