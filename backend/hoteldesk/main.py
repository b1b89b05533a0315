"""HotelDesk — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from hoteldesk.api.v1.auth import router as auth_router
from hoteldesk.api.v1.bookings import router as bookings_router
from hoteldesk.api.v1.dashboard import router as dashboard_router
from hoteldesk.api.v1.hotel_settings import router as hotel_settings_router
from hoteldesk.api.v1.payments import router as payments_router
from hoteldesk.api.v1.rooms import router as rooms_router
from hoteldesk.api.v1.staff import router as staff_router
from hoteldesk.api.v1.users import router as users_router
from hoteldesk.config import settings
from hoteldesk.errors import register_exception_handlers

# Configure root logger so all hoteldesk.* loggers output to stderr (captured by Docker).
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    from hoteldesk.database import create_tables, engine

    # Startup
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")
    yield
    # Shutdown — dispose engine connections
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Back-office API for a single hotel: rooms, bookings, payments, staff and users.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Middleware — added in reverse execution order (last added runs first on request).
# SessionMiddleware is added BEFORE CORS so that CORS headers are always present.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age,
    https_only=settings.is_production,
)

register_exception_handlers(app)

# Routers
app.include_router(auth_router)
app.include_router(rooms_router)
app.include_router(bookings_router)
app.include_router(payments_router)
app.include_router(staff_router)
app.include_router(users_router)
app.include_router(hotel_settings_router)
app.include_router(dashboard_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
