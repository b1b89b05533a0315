"""FastAPI session dependencies for route protection.

Handlers receive the caller's identity as an immutable ``SessionUser`` value
instead of reading the session themselves.
"""

from fastapi import Depends, Request

from hoteldesk.auth.session import read_session
from hoteldesk.errors import UnauthorizedError
from hoteldesk.models.enums import STAFF_ROLES
from hoteldesk.schemas.auth import SessionUser


async def get_session_user(request: Request) -> SessionUser | None:
    """Return the logged-in identity, or ``None`` for anonymous requests."""
    return read_session(request)


async def require_staff(user: SessionUser | None = Depends(get_session_user)) -> SessionUser:
    """Require a session whose role is ADMIN or RECEPTIONIST.

    Raises:
        UnauthorizedError: If no one is logged in or the role is not a staff role.
    """
    if user is None or user.role not in STAFF_ROLES:
        raise UnauthorizedError()
    return user
