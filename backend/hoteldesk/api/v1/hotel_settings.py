"""Hotel settings API router. Several settings rows may exist; none is special."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.common import get_or_404, parse_id
from hoteldesk.api.deps import get_db
from hoteldesk.models.hotel_settings import HotelSettings
from hoteldesk.schemas.hotel_settings import (
    HotelSettingsCreate,
    HotelSettingsDeleteResponse,
    HotelSettingsResponse,
    HotelSettingsUpdate,
)

router = APIRouter(prefix="/api/hotel-settings", tags=["hotel-settings"])


async def _get_settings_or_404(db: AsyncSession, raw_id: str | None) -> HotelSettings:
    return await get_or_404(db, HotelSettings, parse_id(raw_id), "SETTING_NOT_FOUND", "Setting not found")


@router.get(
    "",
    response_model=HotelSettingsResponse | list[HotelSettingsResponse],
    summary="Get a settings row by ID or list all settings",
)
async def get_hotel_settings(
    setting_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> HotelSettingsResponse | list[HotelSettingsResponse]:
    """Return one row when ``id`` is given, otherwise every row, newest first (unpaginated)."""
    if setting_id is not None:
        return HotelSettingsResponse.model_validate(await _get_settings_or_404(db, setting_id))

    query = select(HotelSettings).order_by(HotelSettings.created_at.desc(), HotelSettings.id.desc())
    result = await db.execute(query)
    return [HotelSettingsResponse.model_validate(row) for row in result.scalars().all()]


@router.post(
    "",
    response_model=HotelSettingsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a settings row",
)
async def create_hotel_settings(
    body: HotelSettingsCreate,
    db: AsyncSession = Depends(get_db),
) -> HotelSettingsResponse:
    row = HotelSettings(**body.model_dump())
    db.add(row)
    await db.flush()
    await db.refresh(row)
    return HotelSettingsResponse.model_validate(row)


@router.put(
    "",
    response_model=HotelSettingsResponse,
    summary="Update a settings row",
)
async def update_hotel_settings(
    body: HotelSettingsUpdate,
    setting_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> HotelSettingsResponse:
    row = await _get_settings_or_404(db, setting_id)

    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(row, field, value)

    await db.flush()
    await db.refresh(row)
    return HotelSettingsResponse.model_validate(row)


@router.delete(
    "",
    response_model=HotelSettingsDeleteResponse,
    summary="Delete a settings row",
)
async def delete_hotel_settings(
    setting_id: str | None = Query(None, alias="id"),
    db: AsyncSession = Depends(get_db),
) -> HotelSettingsDeleteResponse:
    row = await _get_settings_or_404(db, setting_id)
    snapshot = HotelSettingsResponse.model_validate(row)

    await db.delete(row)
    await db.flush()
    return HotelSettingsDeleteResponse(message="Setting deleted successfully", deleted=snapshot)
