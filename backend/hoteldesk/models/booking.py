"""Booking model — tracks room reservations."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base, IntegerPrimaryKeyMixin, TimestampMixin


class Booking(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    """A reservation of a room for a guest between two dates.

    ``user_id`` is optional so that guests can book without an account.
    Nothing prevents two bookings of the same room from overlapping.
    """

    __tablename__ = "bookings"

    booking_id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id"), nullable=False, index=True)
    guest_name: Mapped[str] = mapped_column(Text, nullable=False)
    guest_email: Mapped[str] = mapped_column(Text, nullable=False)
    guest_phone: Mapped[str] = mapped_column(Text, nullable=False)
    check_in: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    check_out: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="PENDING",
        index=True,
    )  # PENDING, CONFIRMED, CHECKED_IN, CHECKED_OUT, CANCELLED

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, booking_id={self.booking_id!r}, room_id={self.room_id}, status={self.status})>"
