"""Payments CRUD API router. Every payment belongs to an existing booking."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
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
from hoteldesk.models.enums import PaymentMethod
from hoteldesk.models.payment import Payment
from hoteldesk.schemas.payment import PaymentCreate, PaymentDeleteResponse, PaymentResponse, PaymentUpdate

router = APIRouter(prefix="/api/payments", tags=["payments"])


async def _get_payment_or_404(db: AsyncSession, raw_id: str | None) -> Payment:
    return await get_or_404(db, Payment, parse_id(raw_id), "PAYMENT_NOT_FOUND", "Payment not found")


async def _ensure_booking_exists(db: AsyncSession, booking_id: int) -> None:
    await get_or_404(db, Booking, booking_id, "BOOKING_NOT_FOUND", "Booking not found")


@router.get(
    "",
    response_model=PaymentResponse | list[PaymentResponse],
    summary="Get a payment by ID or list payments",
)
async def get_payments(
    payment_id: str | None = Query(None, alias="id", description="Fetch a single payment"),
    method: str | None = Query(None, description="CASH, CARD, UPI or ONLINE"),
    booking_id: str | None = Query(None, alias="bookingId"),
    from_date: str | None = Query(None, alias="fromDate", description="Earliest payment date"),
    to_date: str | None = Query(None, alias="toDate", description="Latest payment date"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, capped at 100"),
    offset: int = Query(0, description="Pagination offset"),
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse | list[PaymentResponse]:
    """Return one payment when ``id`` is given, otherwise the latest payments first."""
    if payment_id is not None:
        return PaymentResponse.model_validate(await _get_payment_or_404(db, payment_id))

    filters = []
    if method:
        if method not in PaymentMethod.values():
            raise BadRequestError(
                f"Invalid payment method. Must be one of: {', '.join(PaymentMethod.values())}",
                "INVALID_METHOD",
            )
        filters.append(Payment.method == method)

    booking_filter = parse_optional_id(booking_id, "INVALID_BOOKING_ID", "Valid booking ID is required")
    if booking_filter is not None:
        filters.append(Payment.booking_id == booking_filter)

    if (start := parse_date_filter(from_date)) is not None:
        filters.append(Payment.payment_date >= start)
    if (end := parse_date_filter(to_date)) is not None:
        filters.append(Payment.payment_date <= end)

    page_limit, page_offset = page_bounds(limit, offset)
    query = (
        select(Payment)
        .where(*filters)
        .order_by(Payment.payment_date.desc(), Payment.id.desc())
        .offset(page_offset)
        .limit(page_limit)
    )
    result = await db.execute(query)
    return [PaymentResponse.model_validate(payment) for payment in result.scalars().all()]


@router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a payment",
)
async def create_payment(
    body: PaymentCreate,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Record a payment. The payment date is set by the database."""
    await _ensure_booking_exists(db, body.booking_id)

    payment = Payment(**body.model_dump())
    db.add(payment)
    await db.flush()
    await db.refresh(payment)
    return PaymentResponse.model_validate(payment)


@router.put(
    "",
    response_model=PaymentResponse,
    summary="Update a payment",
)
async def update_payment(
    body: PaymentUpdate,
    payment_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    payment = await _get_payment_or_404(db, payment_id)

    update_data = body.model_dump(exclude_unset=True)
    if "booking_id" in update_data:
        await _ensure_booking_exists(db, update_data["booking_id"])

    for field, value in update_data.items():
        setattr(payment, field, value)

    await db.flush()
    await db.refresh(payment)
    return PaymentResponse.model_validate(payment)


@router.delete(
    "",
    response_model=PaymentDeleteResponse,
    summary="Delete a payment",
)
async def delete_payment(
    payment_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> PaymentDeleteResponse:
    payment = await _get_payment_or_404(db, payment_id)
    snapshot = PaymentResponse.model_validate(payment)

    await db.delete(payment)
    await db.flush()
    return PaymentDeleteResponse(message="Payment deleted successfully", payment=snapshot)
