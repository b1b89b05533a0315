"""Staff model — employment record, optionally linked to a user account."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base, IntegerPrimaryKeyMixin, TimestampMixin


class Staff(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "staff"

    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    department: Mapped[str] = mapped_column(String(20), nullable=False)  # MANAGEMENT, RECEPTION, HOUSEKEEPING
    salary: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Staff(id={self.id}, user_id={self.user_id}, department={self.department!r})>"
