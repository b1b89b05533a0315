"""Pydantic v2 request/response schemas for hotel settings endpoints."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.schemas.common import CamelModel
from hoteldesk.schemas.validators import email, optional_text, require_fields, text

HotelName = Annotated[str | None, BeforeValidator(text("INVALID_HOTEL_NAME", "Hotel name cannot be empty"))]
Address = Annotated[str | None, BeforeValidator(text("INVALID_ADDRESS", "Address cannot be empty"))]
Phone = Annotated[str | None, BeforeValidator(text("INVALID_PHONE", "Phone cannot be empty"))]
Email = Annotated[str | None, BeforeValidator(email("INVALID_EMAIL_FORMAT", "Invalid email format"))]
Logo = Annotated[str | None, BeforeValidator(optional_text("INVALID_LOGO", "Logo must be a URL string"))]


class HotelSettingsCreate(CamelModel):
    hotel_name: HotelName
    address: Address
    phone: Phone
    email: Email
    logo: Logo = None

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(data, ["hotelName"], "MISSING_HOTEL_NAME", "Hotel name is required")
        require_fields(data, ["address"], "MISSING_ADDRESS", "Address is required")
        require_fields(data, ["phone"], "MISSING_PHONE", "Phone is required")
        require_fields(data, ["email"], "MISSING_EMAIL", "Email is required")
        return data


class HotelSettingsUpdate(CamelModel):
    hotel_name: HotelName = None
    address: Address = None
    phone: Phone = None
    email: Email = None
    logo: Logo = None


class HotelSettingsResponse(CamelModel):
    id: int
    hotel_name: str
    address: str
    phone: str
    email: str
    logo: str | None = None
    created_at: datetime
    updated_at: datetime


class HotelSettingsDeleteResponse(CamelModel):
    message: str
    deleted: HotelSettingsResponse
