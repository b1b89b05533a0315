"""User management API router.

Passwords are hashed with bcrypt before storage and never included in a
response. Emails are lowercased by the request schemas, so uniqueness is
case-insensitive.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.common import DEFAULT_LIMIT, get_or_404, page_bounds, parse_id
from hoteldesk.api.deps import get_db
from hoteldesk.auth.passwords import hash_password
from hoteldesk.models.enums import Role
from hoteldesk.models.user import User
from hoteldesk.schemas.user import UserCreate, UserDeleteResponse, UserResponse, UserUpdate
from hoteldesk.services.user_service import create_account, ensure_email_free, flush_user

router = APIRouter(prefix="/api/users", tags=["users"])


async def _get_user_or_404(db: AsyncSession, raw_id: str | None) -> User:
    return await get_or_404(db, User, parse_id(raw_id), "USER_NOT_FOUND", "User not found")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=UserResponse | list[UserResponse],
    summary="Get a user by ID or list users",
)
async def get_users(
    user_id: str | None = Query(None, alias="id", description="Fetch a single user"),
    search: str | None = Query(None, description="Substring of name or email"),
    role: str | None = Query(None, description="ADMIN, RECEPTIONIST or CUSTOMER"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, capped at 100"),
    offset: int = Query(0, description="Pagination offset"),
    db: AsyncSession = Depends(get_db),
) -> UserResponse | list[UserResponse]:
    """Return one user when ``id`` is given, otherwise users ordered by id.

    An unknown ``role`` value is ignored.
    """
    if user_id is not None:
        return UserResponse.model_validate(await _get_user_or_404(db, user_id))

    filters = []
    if search:
        pattern = f"%{search}%"
        filters.append(or_(User.name.ilike(pattern), User.email.ilike(pattern)))
    if role and role in Role.values():
        filters.append(User.role == role)

    page_limit, page_offset = page_bounds(limit, offset)
    query = select(User).where(*filters).order_by(User.id).offset(page_offset).limit(page_limit)
    result = await db.execute(query)
    return [UserResponse.model_validate(user) for user in result.scalars().all()]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = await create_account(db, **body.model_dump())
    return UserResponse.model_validate(user)


@router.put(
    "",
    response_model=UserResponse,
    summary="Update a user",
)
async def update_user(
    body: UserUpdate,
    user_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Partially update a user. A new password is re-hashed; null ``phone`` clears it."""
    user = await _get_user_or_404(db, user_id)

    update_data = body.model_dump(exclude_unset=True)
    if "email" in update_data:
        await ensure_email_free(db, update_data["email"], exclude_id=user.id)
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])

    for field, value in update_data.items():
        setattr(user, field, value)

    await flush_user(db)
    await db.refresh(user)
    return UserResponse.model_validate(user)


@router.delete(
    "",
    response_model=UserDeleteResponse,
    summary="Delete a user",
)
async def delete_user(
    user_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> UserDeleteResponse:
    user = await _get_user_or_404(db, user_id)
    snapshot = UserResponse.model_validate(user)

    await db.delete(user)
    await db.flush()
    return UserDeleteResponse(message="User deleted successfully", user=snapshot)
