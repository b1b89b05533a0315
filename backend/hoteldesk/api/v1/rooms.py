"""Rooms CRUD API router.

A single collection path serves both list and detail reads: ``GET
/api/rooms?id=7`` returns one room, any other ``GET`` returns a filtered
page. Updates and deletes address the room with the same ``?id=`` parameter.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.common import DEFAULT_LIMIT, get_or_404, page_bounds, parse_id
from hoteldesk.api.deps import get_db
from hoteldesk.errors import BadRequestError
from hoteldesk.models.enums import RoomStatus, RoomType
from hoteldesk.models.room import Room
from hoteldesk.schemas.room import RoomCreate, RoomDeleteResponse, RoomResponse, RoomUpdate

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _duplicate_room_number() -> BadRequestError:
    return BadRequestError("Room number already exists", "DUPLICATE_ROOM_NUMBER")


async def _ensure_room_number_free(db: AsyncSession, room_number: str, exclude_id: int | None = None) -> None:
    """Raise 400 if another room already uses ``room_number``."""
    query = select(Room.id).where(Room.room_number == room_number)
    if exclude_id is not None:
        query = query.where(Room.id != exclude_id)
    result = await db.execute(query.limit(1))
    if result.scalar_one_or_none() is not None:
        raise _duplicate_room_number()


async def _flush_room(db: AsyncSession) -> None:
    """Flush pending changes; a concurrent insert of the same number still maps to 400."""
    try:
        await db.flush()
    except IntegrityError as exc:
        raise _duplicate_room_number() from exc


def _parse_price(raw: str | None) -> float | None:
    """Lenient price filter: unparseable values are ignored."""
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=RoomResponse | list[RoomResponse],
    summary="Get a room by ID or list rooms",
)
async def get_rooms(
    room_id: str | None = Query(None, alias="id", description="Fetch a single room"),
    search: str | None = Query(None, description="Substring of room number or description"),
    type_filter: str | None = Query(None, alias="type", description="SINGLE, DOUBLE, SUITE or DELUXE"),
    status_filter: str | None = Query(None, alias="status", description="AVAILABLE, BOOKED or MAINTENANCE"),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, capped at 100"),
    offset: int = Query(0, description="Pagination offset"),
    db: AsyncSession = Depends(get_db),
) -> RoomResponse | list[RoomResponse]:
    """Return one room when ``id`` is given, otherwise newest rooms first.

    Unknown ``type``/``status`` values and unparseable prices are ignored
    rather than rejected.
    """
    if room_id is not None:
        room = await get_or_404(db, Room, parse_id(room_id), "ROOM_NOT_FOUND", "Room not found")
        return RoomResponse.model_validate(room)

    filters = []
    if search:
        pattern = f"%{search}%"
        filters.append(or_(Room.room_number.ilike(pattern), Room.description.ilike(pattern)))
    if type_filter and type_filter.upper() in RoomType.values():
        filters.append(Room.type == type_filter.upper())
    if status_filter and status_filter.upper() in RoomStatus.values():
        filters.append(Room.status == status_filter.upper())
    if (low := _parse_price(min_price)) is not None:
        filters.append(Room.price >= low)
    if (high := _parse_price(max_price)) is not None:
        filters.append(Room.price <= high)

    page_limit, page_offset = page_bounds(limit, offset)
    query = (
        select(Room)
        .where(*filters)
        .order_by(Room.created_at.desc(), Room.id.desc())
        .offset(page_offset)
        .limit(page_limit)
    )
    result = await db.execute(query)
    return [RoomResponse.model_validate(room) for room in result.scalars().all()]


@router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new room",
)
async def create_room(
    body: RoomCreate,
    db: AsyncSession = Depends(get_db),
) -> RoomResponse:
    """Create a room. New rooms are AVAILABLE unless a status is supplied."""
    await _ensure_room_number_free(db, body.room_number)

    room = Room(**body.model_dump())
    db.add(room)
    await _flush_room(db)
    await db.refresh(room)
    return RoomResponse.model_validate(room)


@router.put(
    "",
    response_model=RoomResponse,
    summary="Update a room",
)
async def update_room(
    body: RoomUpdate,
    room_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> RoomResponse:
    """Partially update a room. Only explicitly sent fields are changed.

    This is also how a booking flow marks its room ``BOOKED`` and how staff
    return a room to ``AVAILABLE``.
    """
    room = await get_or_404(db, Room, parse_id(room_id), "ROOM_NOT_FOUND", "Room not found")

    update_data = body.model_dump(exclude_unset=True)
    if "room_number" in update_data:
        await _ensure_room_number_free(db, update_data["room_number"], exclude_id=room.id)

    for field, value in update_data.items():
        setattr(room, field, value)

    await _flush_room(db)
    await db.refresh(room)
    return RoomResponse.model_validate(room)


@router.delete(
    "",
    response_model=RoomDeleteResponse,
    summary="Delete a room",
)
async def delete_room(
    room_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> RoomDeleteResponse:
    room = await get_or_404(db, Room, parse_id(room_id), "ROOM_NOT_FOUND", "Room not found")
    snapshot = RoomResponse.model_validate(room)

    await db.delete(room)
    await db.flush()
    return RoomDeleteResponse(message="Room deleted successfully", room=snapshot)
