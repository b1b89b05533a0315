"""Pydantic v2 request/response schemas for booking endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.models.enums import BookingStatus
from hoteldesk.schemas.common import CamelModel, drop_blank
from hoteldesk.schemas.validators import (
    email,
    fail,
    lookup,
    nullable,
    one_of,
    parse_timestamp,
    positive_decimal,
    positive_int,
    reference_id,
    require_fields,
    text,
    timestamp,
)

GuestText = Annotated[str | None, BeforeValidator(text("INVALID_GUEST_INFO", "Guest name, email, and phone must be text"))]
GuestEmail = Annotated[
    str | None,
    BeforeValidator(email("INVALID_GUEST_INFO", "Guest email must be text", check_format=False)),
]
StayDate = Annotated[datetime | None, BeforeValidator(timestamp("INVALID_DATE", "Dates must be valid ISO-8601 dates"))]
NumberOfGuests = Annotated[
    int | None,
    BeforeValidator(positive_int("INVALID_NUMBER_OF_GUESTS", "Number of guests must be positive")),
]
TotalAmount = Annotated[
    Decimal | None,
    BeforeValidator(positive_decimal("INVALID_TOTAL_AMOUNT", "Total amount must be positive")),
]
RoomId = Annotated[int | None, BeforeValidator(reference_id("INVALID_ROOM_ID", "Valid roomId is required"))]
UserId = Annotated[int | None, BeforeValidator(nullable(reference_id("INVALID_USER_ID", "Valid userId is required")))]
Status = Annotated[str | None, BeforeValidator(one_of(BookingStatus.values(), "INVALID_STATUS", "status"))]


def check_date_order(data: Any) -> None:
    """Reject ``checkOut <= checkIn`` when both dates are present and parseable."""
    if not isinstance(data, dict):
        return
    check_in = parse_timestamp(lookup(data, "checkIn"))
    check_out = parse_timestamp(lookup(data, "checkOut"))
    if check_in is not None and check_out is not None and check_out <= check_in:
        fail("INVALID_DATE_RANGE", "Check-out date must be after check-in date")


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class BookingCreate(CamelModel):
    """Schema for creating a new booking.

    ``bookingId`` is generated server-side; the room's status is not touched.
    """

    guest_name: GuestText
    guest_email: GuestEmail
    guest_phone: GuestText
    check_in: StayDate
    check_out: StayDate
    number_of_guests: NumberOfGuests
    total_amount: TotalAmount
    room_id: RoomId
    user_id: UserId = None
    status: Status = BookingStatus.PENDING.value

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(
            data,
            ["guestName", "guestEmail", "guestPhone"],
            "MISSING_GUEST_INFO",
            "Guest name, email, and phone are required",
        )
        require_fields(data, ["checkIn", "checkOut"], "MISSING_DATES", "Check-in and check-out dates are required")
        require_fields(
            data,
            ["numberOfGuests", "totalAmount", "roomId"],
            "MISSING_REQUIRED_FIELDS",
            "Number of guests, total amount, and room ID are required",
        )
        check_date_order(data)
        return drop_blank(data, "status", "userId")


class BookingUpdate(CamelModel):
    """Schema for partially updating a booking. All fields optional.

    The date order is only checked when both dates are supplied together;
    a single date is not compared against the stored counterpart.
    """

    guest_name: GuestText = None
    guest_email: GuestEmail = None
    guest_phone: GuestText = None
    check_in: StayDate = None
    check_out: StayDate = None
    number_of_guests: NumberOfGuests = None
    total_amount: TotalAmount = None
    status: Status = None
    user_id: UserId = None
    room_id: RoomId = None

    @model_validator(mode="before")
    @classmethod
    def check_dates(cls, data: Any) -> Any:
        check_date_order(data)
        return data


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingResponse(CamelModel):
    """Booking snapshot returned from the API."""

    id: int
    booking_id: str
    user_id: int | None = None
    room_id: int
    guest_name: str
    guest_email: str
    guest_phone: str
    check_in: datetime
    check_out: datetime
    number_of_guests: int
    total_amount: float
    status: str
    created_at: datetime
    updated_at: datetime


class BookingDeleteResponse(CamelModel):
    message: str
    booking: BookingResponse


class BookingQuoteResponse(CamelModel):
    """Price of a stay computed from the room's nightly rate."""

    room_id: int
    check_in: datetime
    check_out: datetime
    nights: int
    price_per_night: float
    total_amount: float
