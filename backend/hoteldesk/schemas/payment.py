"""Pydantic v2 request/response schemas for payment endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.models.enums import PaymentMethod
from hoteldesk.schemas.common import CamelModel
from hoteldesk.schemas.validators import one_of, optional_text, positive_decimal, reference_id, require_fields

Amount = Annotated[Decimal | None, BeforeValidator(positive_decimal("INVALID_AMOUNT", "Amount must be a positive number"))]
Method = Annotated[str | None, BeforeValidator(one_of(PaymentMethod.values(), "INVALID_METHOD", "payment method"))]
BookingRef = Annotated[
    int | None,
    BeforeValidator(reference_id("INVALID_BOOKING_ID", "Valid booking ID is required")),
]
TransactionId = Annotated[
    str | None,
    BeforeValidator(optional_text("INVALID_TRANSACTION_ID", "Transaction ID must be text")),
]


class PaymentCreate(CamelModel):
    """Schema for recording a payment against an existing booking."""

    amount: Amount
    method: Method
    booking_id: BookingRef
    transaction_id: TransactionId = None

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(data, ["amount"], "MISSING_AMOUNT", "Amount is required")
        require_fields(data, ["method"], "MISSING_METHOD", "Payment method is required")
        require_fields(data, ["bookingId"], "MISSING_BOOKING_ID", "Booking ID is required")
        return data


class PaymentUpdate(CamelModel):
    """Schema for partially updating a payment. ``transactionId`` may be cleared with null."""

    amount: Amount = None
    method: Method = None
    transaction_id: TransactionId = None
    booking_id: BookingRef = None


class PaymentResponse(CamelModel):
    id: int
    booking_id: int
    amount: float
    method: str
    transaction_id: str | None = None
    payment_date: datetime
    created_at: datetime
    updated_at: datetime


class PaymentDeleteResponse(CamelModel):
    message: str
    payment: PaymentResponse
