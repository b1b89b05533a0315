"""Auth API router: session lookup, register, login, logout.

Identity lives in a signed session cookie (Starlette ``SessionMiddleware``),
so there are no tokens to refresh.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.api.deps import get_db, get_session_user
from hoteldesk.auth.passwords import verify_password
from hoteldesk.auth.session import end_session, start_session
from hoteldesk.errors import UnauthorizedError
from hoteldesk.models.enums import Role
from hoteldesk.models.user import User
from hoteldesk.schemas.auth import (
    AuthResponse,
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    SessionResponse,
    SessionUser,
)
from hoteldesk.services.user_service import create_account

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ---------------------------------------------------------------------------
# GET /session
# ---------------------------------------------------------------------------


@router.get("/session", response_model=SessionResponse)
async def session(user: SessionUser | None = Depends(get_session_user)) -> SessionResponse:
    """Return the logged-in identity, or ``{"user": null}``."""
    return SessionResponse(user=user)


# ---------------------------------------------------------------------------
# POST /register
# ---------------------------------------------------------------------------


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_200_OK)
async def register(
    body: RegisterRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Create a CUSTOMER account and log it in.

    Any ``role`` sent in the body is ignored, so self-registration never
    grants staff access. Staff accounts are created through ``POST /api/users``.
    """
    user = await create_account(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        phone=body.phone,
        role=Role.CUSTOMER.value,
    )
    logger.info("Registered user %s (id=%s)", user.email, user.id)

    return AuthResponse(user=start_session(request, user))


# ---------------------------------------------------------------------------
# POST /login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Authenticate with email and password and start a session."""
    result = await db.execute(select(User).where(User.email == body.email))
    user = result.scalar_one_or_none()

    if user is None or not verify_password(body.password, user.password):
        logger.warning("Failed login attempt for %s", body.email)
        raise UnauthorizedError("Invalid email or password", "INVALID_CREDENTIALS")

    return AuthResponse(user=start_session(request, user))


# ---------------------------------------------------------------------------
# POST /logout
# ---------------------------------------------------------------------------


@router.post("/logout", response_model=LogoutResponse)
async def logout(request: Request) -> LogoutResponse:
    end_session(request)
    return LogoutResponse()
