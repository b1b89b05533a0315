"""Pydantic v2 request/response schemas for user management endpoints.

``UserResponse`` has no password field, so hashes never leave the service.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.models.enums import Role
from hoteldesk.schemas.common import CamelModel
from hoteldesk.schemas.validators import email, one_of, optional_text, password, require_fields, text

Name = Annotated[str | None, BeforeValidator(text("INVALID_NAME", "Name cannot be empty"))]
Email = Annotated[str | None, BeforeValidator(email("INVALID_EMAIL_FORMAT", "Invalid email format"))]
Password = Annotated[str | None, BeforeValidator(password("INVALID_PASSWORD", "Password cannot be empty"))]
Phone = Annotated[str | None, BeforeValidator(optional_text("INVALID_PHONE", "Phone must be text"))]
RoleValue = Annotated[str | None, BeforeValidator(one_of(Role.values(), "INVALID_ROLE", "role"))]


class UserCreate(CamelModel):
    """Schema for an administrator creating an account with an explicit role."""

    name: Name
    email: Email
    password: Password
    role: RoleValue
    phone: Phone = None

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(
            data,
            ["name", "email", "password", "role"],
            "MISSING_REQUIRED_FIELDS",
            "Missing required fields: name, email, password, role",
        )
        return data


class UserUpdate(CamelModel):
    """Partial update. ``password`` is re-hashed; ``phone`` may be cleared with null."""

    name: Name = None
    email: Email = None
    password: Password = None
    phone: Phone = None
    role: RoleValue = None


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    role: str
    created_at: datetime
    updated_at: datetime


class UserDeleteResponse(CamelModel):
    message: str
    user: UserResponse
