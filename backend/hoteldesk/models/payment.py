"""Payment model — money received against a booking."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from hoteldesk.database import Base, IntegerPrimaryKeyMixin, TimestampMixin


class Payment(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "payments"

    booking_id: Mapped[int] = mapped_column(ForeignKey("bookings.id"), nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False)  # CASH, CARD, UPI, ONLINE
    transaction_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    payment_date: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), index=True)

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, booking_id={self.booking_id}, amount={self.amount}, method={self.method})>"
