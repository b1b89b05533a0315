"""Seed the database with staff accounts, a room inventory and hotel settings.

Safe to run repeatedly: accounts are matched by email, rooms by room number
and the settings row by hotel name; anything that already exists is skipped.

Run from the ``backend`` directory:
    python -m scripts.seed_data
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from hoteldesk.auth.passwords import hash_password
from hoteldesk.database import async_session_factory, create_tables, engine
from hoteldesk.models.enums import Role, RoomStatus, RoomType
from hoteldesk.models.hotel_settings import HotelSettings
from hoteldesk.models.room import Room
from hoteldesk.models.user import User

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

ACCOUNTS = [
    {
        "name": "Hotel Admin",
        "email": "admin@hoteldesk.io",
        "password": "admin1234",
        "phone": "+1 555 0100",
        "role": Role.ADMIN.value,
    },
    {
        "name": "Front Desk",
        "email": "reception@hoteldesk.io",
        "password": "reception1234",
        "phone": "+1 555 0101",
        "role": Role.RECEPTIONIST.value,
    },
]

ROOMS = [
    {
        "room_number": "101",
        "type": RoomType.SINGLE.value,
        "price": Decimal("80.00"),
        "occupancy": 1,
        "description": "Quiet single room overlooking the courtyard.",
        "amenities": "wifi,ac,tv",
    },
    {
        "room_number": "102",
        "type": RoomType.SINGLE.value,
        "price": Decimal("85.00"),
        "occupancy": 1,
        "description": "Single room with a work desk.",
        "amenities": "wifi,ac,desk",
    },
    {
        "room_number": "201",
        "type": RoomType.DOUBLE.value,
        "price": Decimal("120.00"),
        "occupancy": 2,
        "description": "Double room with a queen bed and city view.",
        "amenities": "wifi,ac,tv,minibar",
    },
    {
        "room_number": "202",
        "type": RoomType.DOUBLE.value,
        "price": Decimal("125.00"),
        "occupancy": 3,
        "description": "Double room with an extra sofa bed.",
        "amenities": "wifi,ac,tv,sofa_bed",
    },
    {
        "room_number": "301",
        "type": RoomType.SUITE.value,
        "price": Decimal("220.00"),
        "occupancy": 4,
        "description": "Suite with separate living area and balcony.",
        "amenities": "wifi,ac,tv,minibar,balcony,bathtub",
    },
    {
        "room_number": "401",
        "type": RoomType.DELUXE.value,
        "price": Decimal("310.00"),
        "occupancy": 2,
        "description": "Top-floor deluxe room with panoramic view.",
        "amenities": "wifi,ac,tv,minibar,balcony,jacuzzi",
        "status": RoomStatus.MAINTENANCE.value,
    },
]

HOTEL_SETTINGS = {
    "hotel_name": "HotelDesk Demo Hotel",
    "address": "1 Harbour Road, Springfield",
    "phone": "+1 555 0199",
    "email": "info@hoteldesk.io",
    "logo": None,
}


async def seed() -> None:
    """Create missing accounts, rooms and the settings row."""
    await create_tables()

    async with async_session_factory() as session:
        # ------------------------------------------------------------------
        # 1. Staff accounts
        # ------------------------------------------------------------------
        created_accounts = 0
        for account in ACCOUNTS:
            result = await session.execute(select(User.id).where(User.email == account["email"]))
            if result.scalar_one_or_none() is not None:
                print(f"⚠️  Account '{account['email']}' already exists, skipping")
                continue
            session.add(User(**{**account, "password": hash_password(account["password"])}))
            created_accounts += 1
        await session.flush()

        # ------------------------------------------------------------------
        # 2. Rooms
        # ------------------------------------------------------------------
        created_rooms = 0
        for room_data in ROOMS:
            result = await session.execute(select(Room.id).where(Room.room_number == room_data["room_number"]))
            if result.scalar_one_or_none() is not None:
                continue
            session.add(Room(**room_data))
            created_rooms += 1
            print(f"   🛏️  Room {room_data['room_number']} — {room_data['type']} (${room_data['price']}/night)")
        await session.flush()

        # ------------------------------------------------------------------
        # 3. Hotel settings
        # ------------------------------------------------------------------
        result = await session.execute(
            select(HotelSettings.id).where(HotelSettings.hotel_name == HOTEL_SETTINGS["hotel_name"])
        )
        created_settings = 0
        if result.scalar_one_or_none() is None:
            session.add(HotelSettings(**HOTEL_SETTINGS))
            created_settings = 1

        await session.commit()

    await engine.dispose()

    print()
    print("=" * 60)
    print("📊 Seed Summary")
    print("=" * 60)
    print(f"   Accounts:       {created_accounts} created")
    for account in ACCOUNTS:
        print(f"                   {account['email']} / {account['password']} ({account['role']})")
    print(f"   Rooms:          {created_rooms} created")
    print(f"   Hotel settings: {created_settings} created")
    print("=" * 60)
    print("🎉 Done! Log in with POST /api/auth/login")


if __name__ == "__main__":
    asyncio.run(seed())
