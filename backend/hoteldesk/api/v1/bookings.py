"""Bookings CRUD API router.

Creating a booking never changes the room's status. The booking flow's caller
marks the room ``BOOKED`` with a follow-up ``PUT /api/rooms`` and staff set it
back to ``AVAILABLE`` after check-out. Overlapping stays are accepted.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.common import (
    DEFAULT_LIMIT,
    get_or_404,
    page_bounds,
    parse_date_filter,
    parse_id,
    parse_optional_id,
)
from hoteldesk.api.deps import get_db
from hoteldesk.errors import BadRequestError
from hoteldesk.models.booking import Booking
from hoteldesk.models.enums import BookingStatus
from hoteldesk.models.room import Room
from hoteldesk.models.user import User
from hoteldesk.schemas.booking import (
    BookingCreate,
    BookingDeleteResponse,
    BookingQuoteResponse,
    BookingResponse,
    BookingUpdate,
)
from hoteldesk.services.booking_service import calculate_total_amount, count_nights, generate_booking_id

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _get_booking_or_404(db: AsyncSession, raw_id: str | None) -> Booking:
    return await get_or_404(db, Booking, parse_id(raw_id), "BOOKING_NOT_FOUND", "Booking not found")


async def _get_room_or_404(db: AsyncSession, room_id: int) -> Room:
    return await get_or_404(db, Room, room_id, "ROOM_NOT_FOUND", "Room not found")


async def _ensure_user_exists(db: AsyncSession, user_id: int) -> None:
    await get_or_404(db, User, user_id, "USER_NOT_FOUND", "User not found")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=BookingResponse | list[BookingResponse],
    summary="Get a booking by ID or list bookings",
)
async def get_bookings(
    booking_id: str | None = Query(None, alias="id", description="Fetch a single booking"),
    search: str | None = Query(None, description="Substring of booking ID, guest name or guest email"),
    status_filter: str | None = Query(None, alias="status"),
    user_id: str | None = Query(None, alias="userId"),
    room_id: str | None = Query(None, alias="roomId"),
    from_date: str | None = Query(None, alias="fromDate", description="Earliest check-in"),
    to_date: str | None = Query(None, alias="toDate", description="Latest check-in"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, capped at 100"),
    offset: int = Query(0, description="Pagination offset"),
    db: AsyncSession = Depends(get_db),
) -> BookingResponse | list[BookingResponse]:
    """Return one booking when ``id`` is given, otherwise newest bookings first."""
    if booking_id is not None:
        return BookingResponse.model_validate(await _get_booking_or_404(db, booking_id))

    filters = []
    if search:
        pattern = f"%{search}%"
        filters.append(
            or_(
                Booking.booking_id.ilike(pattern),
                Booking.guest_name.ilike(pattern),
                Booking.guest_email.ilike(pattern),
            )
        )
    if status_filter:
        if status_filter not in BookingStatus.values():
            raise BadRequestError(
                f"Invalid status. Must be one of: {', '.join(BookingStatus.values())}",
                "INVALID_STATUS",
            )
        filters.append(Booking.status == status_filter)

    user_filter = parse_optional_id(user_id, "INVALID_USER_ID", "Valid userId is required")
    if user_filter is not None:
        filters.append(Booking.user_id == user_filter)
    room_filter = parse_optional_id(room_id, "INVALID_ROOM_ID", "Valid roomId is required")
    if room_filter is not None:
        filters.append(Booking.room_id == room_filter)

    if (start := parse_date_filter(from_date)) is not None:
        filters.append(Booking.check_in >= start)
    if (end := parse_date_filter(to_date)) is not None:
        filters.append(Booking.check_in <= end)

    page_limit, page_offset = page_bounds(limit, offset)
    query = (
        select(Booking)
        .where(*filters)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
        .offset(page_offset)
        .limit(page_limit)
    )
    result = await db.execute(query)
    return [BookingResponse.model_validate(booking) for booking in result.scalars().all()]


@router.get(
    "/quote",
    response_model=BookingQuoteResponse,
    summary="Price a stay in a room",
)
async def quote_booking(
    room_id: str | None = Query(None, alias="roomId"),
    check_in: str | None = Query(None, alias="checkIn"),
    check_out: str | None = Query(None, alias="checkOut"),
    db: AsyncSession = Depends(get_db),
) -> BookingQuoteResponse:
    """Compute ``nights * price`` for a stay without creating a booking.

    Partial days count as a full night. A check-out on or before check-in
    quotes zero rather than failing.
    """
    start = parse_date_filter(check_in)
    end = parse_date_filter(check_out)
    if start is None or end is None:
        raise BadRequestError("Check-in and check-out dates are required", "MISSING_DATES")

    room = await _get_room_or_404(db, parse_id(room_id, "INVALID_ROOM_ID", "Valid roomId is required"))
    nights = max(count_nights(start, end), 0)
    return BookingQuoteResponse(
        room_id=room.id,
        check_in=start,
        check_out=end,
        nights=nights,
        price_per_night=float(room.price),
        total_amount=float(calculate_total_amount(room.price, start, end)),
    )


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
) -> BookingResponse:
    """Create a booking with a generated ``bookingId``.

    The room (and the user, when linked) must exist. The booking starts as
    PENDING unless a status is supplied.
    """
    await _get_room_or_404(db, body.room_id)
    if body.user_id is not None:
        await _ensure_user_exists(db, body.user_id)

    booking = Booking(booking_id=generate_booking_id(), **body.model_dump())
    db.add(booking)
    await db.flush()
    await db.refresh(booking)
    return BookingResponse.model_validate(booking)


@router.put(
    "",
    response_model=BookingResponse,
    summary="Update a booking",
)
async def update_booking(
    body: BookingUpdate,
    booking_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> BookingResponse:
    """Partially update a booking.

    Any status may be set, in any order. A null ``userId`` unlinks the user.
    """
    booking = await _get_booking_or_404(db, booking_id)

    update_data = body.model_dump(exclude_unset=True)
    if "room_id" in update_data:
        await _get_room_or_404(db, update_data["room_id"])
    if update_data.get("user_id") is not None:
        await _ensure_user_exists(db, update_data["user_id"])

    for field, value in update_data.items():
        setattr(booking, field, value)

    await db.flush()
    await db.refresh(booking)
    return BookingResponse.model_validate(booking)


@router.delete(
    "",
    response_model=BookingDeleteResponse,
    summary="Delete a booking",
)
async def delete_booking(
    booking_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> BookingDeleteResponse:
    booking = await _get_booking_or_404(db, booking_id)
    snapshot = BookingResponse.model_validate(booking)

    await db.delete(booking)
    await db.flush()
    return BookingDeleteResponse(message="Booking deleted successfully", booking=snapshot)
