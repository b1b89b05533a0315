"""Dashboard statistics router (staff only)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.deps import get_db, require_staff
from hoteldesk.schemas.auth import SessionUser
from hoteldesk.schemas.dashboard import DashboardStats
from hoteldesk.services.dashboard_service import collect_dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Room, booking, guest and revenue totals",
)
async def get_dashboard_stats(
    _user: SessionUser = Depends(require_staff),
    db: AsyncSession = Depends(get_db),
) -> DashboardStats:
    """Counts by status, number of customers, total revenue and the 10 newest bookings.

    Requires an ADMIN or RECEPTIONIST session; anyone else gets 401.
    """
    return await collect_dashboard_stats(db)
