"""Shared API dependencies — single import point for all routers.

Re-exports database session and session-auth dependencies so that router
modules can import everything they need from one place::

    from hoteldesk.api.deps import get_db, require_staff
"""

from hoteldesk.auth.dependencies import (
    get_session_user,
    require_staff,
)
from hoteldesk.database import get_db

__all__ = [
    "get_db",
    "get_session_user",
    "require_staff",
]
