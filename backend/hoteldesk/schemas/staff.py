"""Pydantic v2 request/response schemas for staff endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, model_validator

from hoteldesk.models.enums import Department
from hoteldesk.schemas.common import CamelModel
from hoteldesk.schemas.validators import (
    calendar_date,
    nullable,
    one_of,
    positive_decimal,
    reference_id,
    require_fields,
)

DepartmentValue = Annotated[
    str | None,
    BeforeValidator(one_of(Department.values(), "INVALID_DEPARTMENT", "department")),
]
Salary = Annotated[
    Decimal | None,
    BeforeValidator(nullable(positive_decimal("INVALID_SALARY", "Salary must be a positive number"))),
]
UserId = Annotated[int | None, BeforeValidator(nullable(reference_id("INVALID_USER_ID", "Valid userId is required")))]
JoiningDate = Annotated[
    date | None,
    BeforeValidator(calendar_date("INVALID_JOINING_DATE", "Joining date must be a valid date string (YYYY-MM-DD)")),
]


class StaffCreate(CamelModel):
    department: DepartmentValue
    salary: Salary = None
    user_id: UserId = None
    joining_date: JoiningDate

    @model_validator(mode="before")
    @classmethod
    def check_required(cls, data: Any) -> Any:
        require_fields(data, ["department"], "MISSING_DEPARTMENT", "Department is required")
        require_fields(data, ["joiningDate"], "MISSING_JOINING_DATE", "Joining date is required")
        return data


class StaffUpdate(CamelModel):
    """Partial update. A null ``salary`` leaves the stored salary untouched; a null ``userId`` unlinks the user."""

    department: DepartmentValue = None
    salary: Salary = None
    user_id: UserId = None
    joining_date: JoiningDate = None


class StaffResponse(CamelModel):
    id: int
    user_id: int | None = None
    department: str
    salary: float | None = None
    joining_date: date
    created_at: datetime
    updated_at: datetime


class StaffDeleteResponse(CamelModel):
    message: str
    staff: StaffResponse
