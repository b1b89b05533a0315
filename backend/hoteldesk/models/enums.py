"""Allowed values for the string-typed enum columns."""

from enum import StrEnum


class _Choices(StrEnum):
    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class Role(_Choices):
    ADMIN = "ADMIN"
    RECEPTIONIST = "RECEPTIONIST"
    CUSTOMER = "CUSTOMER"


class RoomType(_Choices):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    SUITE = "SUITE"
    DELUXE = "DELUXE"


class RoomStatus(_Choices):
    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"
    MAINTENANCE = "MAINTENANCE"


class BookingStatus(_Choices):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    CANCELLED = "CANCELLED"


class PaymentMethod(_Choices):
    CASH = "CASH"
    CARD = "CARD"
    UPI = "UPI"
    ONLINE = "ONLINE"


class Department(_Choices):
    MANAGEMENT = "MANAGEMENT"
    RECEPTION = "RECEPTION"
    HOUSEKEEPING = "HOUSEKEEPING"


# Roles allowed to use the staff dashboard.
STAFF_ROLES = frozenset({Role.ADMIN, Role.RECEPTIONIST})
