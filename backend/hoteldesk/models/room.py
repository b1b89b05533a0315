"""Room model — bookable hotel rooms."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base, IntegerPrimaryKeyMixin, TimestampMixin


class Room(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    """A physical room identified by its room number."""

    __tablename__ = "rooms"

    room_number: Mapped[str] = mapped_column(Text, unique=True, index=True, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # SINGLE, DOUBLE, SUITE, DELUXE
    price: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="AVAILABLE",
        index=True,
    )  # AVAILABLE, BOOKED, MAINTENANCE
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amenities: Mapped[str | None] = mapped_column(Text, nullable=True)  # comma-separated
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    occupancy: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, room_number={self.room_number!r}, status={self.status!r})>"
