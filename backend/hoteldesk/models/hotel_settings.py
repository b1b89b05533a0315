"""Hotel settings model — name and contact details shown to guests."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base, IntegerPrimaryKeyMixin, TimestampMixin


class HotelSettings(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    """General-purpose settings record. Several rows may exist."""

    __tablename__ = "hotel_settings"

    hotel_name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<HotelSettings(id={self.id}, hotel_name={self.hotel_name!r})>"
