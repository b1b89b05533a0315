"""Staff CRUD API router."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.common import DEFAULT_LIMIT, get_or_404, page_bounds, parse_id, parse_optional_id
from hoteldesk.api.deps import get_db
from hoteldesk.errors import BadRequestError
from hoteldesk.models.enums import Department
from hoteldesk.models.staff import Staff
from hoteldesk.models.user import User
from hoteldesk.schemas.staff import StaffCreate, StaffDeleteResponse, StaffResponse, StaffUpdate

router = APIRouter(prefix="/api/staff", tags=["staff"])


async def _get_staff_or_404(db: AsyncSession, raw_id: str | None) -> Staff:
    return await get_or_404(db, Staff, parse_id(raw_id), "STAFF_NOT_FOUND", "Staff member not found")


async def _ensure_user_exists(db: AsyncSession, user_id: int) -> None:
    await get_or_404(db, User, user_id, "USER_NOT_FOUND", "User not found")


@router.get(
    "",
    response_model=StaffResponse | list[StaffResponse],
    summary="Get a staff member by ID or list staff",
)
async def get_staff(
    staff_id: str | None = Query(None, alias="id", description="Fetch a single staff member"),
    department: str | None = Query(None, description="MANAGEMENT, RECEPTION or HOUSEKEEPING"),
    user_id: str | None = Query(None, alias="userId"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, capped at 100"),
    offset: int = Query(0, description="Pagination offset"),
    db: AsyncSession = Depends(get_db),
) -> StaffResponse | list[StaffResponse]:
    if staff_id is not None:
        return StaffResponse.model_validate(await _get_staff_or_404(db, staff_id))

    filters = []
    if department:
        if department not in Department.values():
            raise BadRequestError(
                f"Invalid department. Must be one of: {', '.join(Department.values())}",
                "INVALID_DEPARTMENT",
            )
        filters.append(Staff.department == department)

    user_filter = parse_optional_id(user_id, "INVALID_USER_ID", "Valid userId is required")
    if user_filter is not None:
        filters.append(Staff.user_id == user_filter)

    page_limit, page_offset = page_bounds(limit, offset)
    query = select(Staff).where(*filters).order_by(Staff.id).offset(page_offset).limit(page_limit)
    result = await db.execute(query)
    return [StaffResponse.model_validate(member) for member in result.scalars().all()]


@router.post(
    "",
    response_model=StaffResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a staff record",
)
async def create_staff(
    body: StaffCreate,
    db: AsyncSession = Depends(get_db),
) -> StaffResponse:
    if body.user_id is not None:
        await _ensure_user_exists(db, body.user_id)

    member = Staff(**body.model_dump())
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return StaffResponse.model_validate(member)


@router.put(
    "",
    response_model=StaffResponse,
    summary="Update a staff record",
)
async def update_staff(
    body: StaffUpdate,
    staff_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> StaffResponse:
    """Partially update a staff record.

    A null ``salary`` is ignored, so a salary can be changed but never cleared
    through this endpoint. A null ``userId`` unlinks the account.
    """
    member = await _get_staff_or_404(db, staff_id)

    update_data = body.model_dump(exclude_unset=True)
    if update_data.get("salary", 0) is None:
        del update_data["salary"]
    if update_data.get("user_id") is not None:
        await _ensure_user_exists(db, update_data["user_id"])

    for field, value in update_data.items():
        setattr(member, field, value)

    await db.flush()
    await db.refresh(member)
    return StaffResponse.model_validate(member)


@router.delete(
    "",
    response_model=StaffDeleteResponse,
    summary="Delete a staff record",
)
async def delete_staff(
    staff_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> StaffDeleteResponse:
    member = await _get_staff_or_404(db, staff_id)
    snapshot = StaffResponse.model_validate(member)

    await db.delete(member)
    await db.flush()
    return StaffDeleteResponse(message="Staff member deleted successfully", staff=snapshot)
