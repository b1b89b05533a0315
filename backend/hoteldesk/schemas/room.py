"""Pydantic v2 request/response schemas for room endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.models.enums import RoomStatus, RoomType
from hoteldesk.schemas.common import CamelModel, drop_blank
from hoteldesk.schemas.validators import (
    one_of,
    optional_text,
    positive_decimal,
    positive_int,
    require_fields,
    text,
)

RoomNumber = Annotated[str | None, BeforeValidator(text("INVALID_ROOM_NUMBER", "Room number cannot be empty"))]
RoomTypeValue = Annotated[
    str | None,
    BeforeValidator(one_of(RoomType.values(), "INVALID_ROOM_TYPE", "room type", case_insensitive=True)),
]
RoomStatusValue = Annotated[
    str | None,
    BeforeValidator(one_of(RoomStatus.values(), "INVALID_STATUS", "status", case_insensitive=True)),
]
Price = Annotated[Decimal | None, BeforeValidator(positive_decimal("INVALID_PRICE", "Price must be a positive number"))]
Occupancy = Annotated[
    int | None,
    BeforeValidator(positive_int("INVALID_OCCUPANCY", "Occupancy must be a positive integer")),
]
Description = Annotated[str | None, BeforeValidator(optional_text("INVALID_DESCRIPTION", "Description must be text"))]
Amenities = Annotated[
    str | None,
    BeforeValidator(optional_text("INVALID_AMENITIES", "Amenities must be text or a list of text")),
]
Image = Annotated[str | None, BeforeValidator(optional_text("INVALID_IMAGE", "Image must be a URL string"))]

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RoomCreate(CamelModel):
    """Schema for creating a new room."""

    room_number: RoomNumber
    type: RoomTypeValue
    status: RoomStatusValue = RoomStatus.AVAILABLE.value
    price: Price
    occupancy: Occupancy
    description: Description = None
    amenities: Amenities = None
    image: Image = None

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(data, ["roomNumber"], "MISSING_ROOM_NUMBER", "Room number is required")
        require_fields(data, ["type"], "MISSING_ROOM_TYPE", "Room type is required")
        require_fields(data, ["price"], "MISSING_PRICE", "Price is required")
        require_fields(data, ["occupancy"], "MISSING_OCCUPANCY", "Occupancy is required")
        return drop_blank(data, "status")


class RoomUpdate(CamelModel):
    """Schema for partially updating a room. All fields optional.

    ``description``, ``amenities`` and ``image`` may be sent as null to clear them.
    """

    room_number: RoomNumber = None
    type: RoomTypeValue = None
    price: Price = None
    status: RoomStatusValue = None
    occupancy: Occupancy = None
    description: Description = None
    amenities: Amenities = None
    image: Image = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RoomResponse(CamelModel):
    """Room snapshot returned from the API."""

    id: int
    room_number: str
    type: str
    price: float
    status: str
    description: str | None = None
    amenities: str | None = None
    image: str | None = None
    occupancy: int
    created_at: datetime
    updated_at: datetime


class RoomDeleteResponse(CamelModel):
    message: str
    room: RoomResponse
