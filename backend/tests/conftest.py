"""Shared test configuration and fixtures.

Each test gets a fresh database: in-memory SQLite (aiosqlite) by default, or
whatever async URL ``TEST_DATABASE_URL`` points at. Tables are created before
the test, the test runs inside one transaction that always rolls back, and
the schema is dropped afterwards.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from hoteldesk.auth.passwords import hash_password
from hoteldesk.database import Base, get_db
from hoteldesk.main import app
from hoteldesk.models.user import User

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

ADMIN_PASSWORD = "admin-pass-123"
RECEPTIONIST_PASSWORD = "desk-pass-123"
CUSTOMER_PASSWORD = "guest-pass-123"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite leaves foreign key enforcement off unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _make_engine() -> AsyncEngine:
    if _test_db_url.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees an empty in-memory database.
        engine = create_async_engine(
            _test_db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_async_engine(_test_db_url, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Per-test database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: accounts and logged-in clients
# ---------------------------------------------------------------------------


async def _create_user(db_session: AsyncSession, *, name: str, email: str, password: str, role: str) -> User:
    user = User(name=name, email=email, password=hash_password(password), role=role)
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await _create_user(
        db_session, name="Ada Admin", email="admin@test.com", password=ADMIN_PASSWORD, role="ADMIN"
    )


@pytest_asyncio.fixture
async def receptionist_user(db_session: AsyncSession) -> User:
    return await _create_user(
        db_session, name="Rita Desk", email="desk@test.com", password=RECEPTIONIST_PASSWORD, role="RECEPTIONIST"
    )


@pytest_asyncio.fixture
async def customer_user(db_session: AsyncSession) -> User:
    return await _create_user(
        db_session, name="Carl Guest", email="guest@test.com", password=CUSTOMER_PASSWORD, role="CUSTOMER"
    )


async def _login(client: AsyncClient, email: str, password: str) -> AsyncClient:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return client


@pytest_asyncio.fixture
async def admin_client(client: AsyncClient, admin_user: User) -> AsyncClient:
    """The shared client, logged in as ADMIN (session cookie stored on the client)."""
    return await _login(client, admin_user.email, ADMIN_PASSWORD)


@pytest_asyncio.fixture
async def receptionist_client(client: AsyncClient, receptionist_user: User) -> AsyncClient:
    return await _login(client, receptionist_user.email, RECEPTIONIST_PASSWORD)


@pytest_asyncio.fixture
async def customer_client(client: AsyncClient, customer_user: User) -> AsyncClient:
    return await _login(client, customer_user.email, CUSTOMER_PASSWORD)


@pytest_asyncio.fixture
async def test_room(client: AsyncClient) -> dict:
    """Create a room through the API and return its JSON."""
    response = await client.post(
        "/api/rooms",
        json={"roomNumber": "101", "type": "SINGLE", "price": 80, "occupancy": 1},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest_asyncio.fixture
async def test_booking(client: AsyncClient, test_room: dict) -> dict:
    response = await client.post(
        "/api/bookings",
        json={
            "guestName": "Jane",
            "guestEmail": "jane@x.com",
            "guestPhone": "555",
            "checkIn": "2024-01-10",
            "checkOut": "2024-01-12",
            "numberOfGuests": 2,
            "totalAmount": 160,
            "roomId": test_room["id"],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()
