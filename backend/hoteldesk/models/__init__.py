"""SQLAlchemy models for HotelDesk.

All models are imported here so that ``Base.metadata.create_all`` can discover
them. If you add a new model, import it in this file.
"""

from hoteldesk.models.booking import Booking
from hoteldesk.models.hotel_settings import HotelSettings
from hoteldesk.models.payment import Payment
from hoteldesk.models.room import Room
from hoteldesk.models.staff import Staff
from hoteldesk.models.user import User

__all__ = [
    "Booking",
    "HotelSettings",
    "Payment",
    "Room",
    "Staff",
    "User",
]
