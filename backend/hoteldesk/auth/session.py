"""Signed-cookie session storage.

The cookie itself is managed by Starlette's ``SessionMiddleware``; this module
only decides what goes in it. The stored payload mirrors the identity fields
of the user plus an ``isLoggedIn`` flag.
"""

from fastapi import Request
from pydantic import ValidationError

from hoteldesk.models.user import User
from hoteldesk.schemas.auth import SessionUser


def start_session(request: Request, user: User) -> SessionUser:
    """Store the user's identity in the session cookie and return it."""
    identity = SessionUser(id=user.id, name=user.name, email=user.email, role=user.role)
    request.session.clear()
    request.session.update(
        {
            "userId": identity.id,
            "name": identity.name,
            "email": identity.email,
            "role": identity.role,
            "isLoggedIn": True,
        }
    )
    return identity


def end_session(request: Request) -> None:
    request.session.clear()


def read_session(request: Request) -> SessionUser | None:
    """Return the identity stored in the session, or ``None`` when logged out."""
    data = request.session
    if not data.get("isLoggedIn"):
        return None
    try:
        return SessionUser(
            id=data.get("userId"),
            name=data.get("name"),
            email=data.get("email"),
            role=data.get("role"),
        )
    except ValidationError:
        # Signed but stale or hand-edited payload: treat as logged out.
        return None
