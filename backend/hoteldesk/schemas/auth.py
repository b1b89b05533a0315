"""Pydantic v2 request/response schemas for session authentication endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from hoteldesk.schemas.common import CamelModel
from hoteldesk.schemas.user import Email, Name, Password, Phone
from hoteldesk.schemas.validators import require_fields

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RegisterRequest(CamelModel):
    """Self-service registration. Accounts are always created as CUSTOMER."""

    name: Name
    email: Email
    password: Password
    phone: Phone = None

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(
            data,
            ["name", "email", "password"],
            "MISSING_REQUIRED_FIELDS",
            "Name, email, and password are required",
        )
        return data


class LoginRequest(CamelModel):
    email: Email
    password: Password

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(data, ["email", "password"], "MISSING_CREDENTIALS", "Email and password are required")
        return data


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class SessionUser(BaseModel):
    """Authenticated identity carried by the session cookie."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    role: str


class SessionResponse(BaseModel):
    user: SessionUser | None = None


class AuthResponse(BaseModel):
    """Returned on register/login once the session cookie is set."""

    success: bool = True
    user: SessionUser


class LogoutResponse(BaseModel):
    success: bool = True
