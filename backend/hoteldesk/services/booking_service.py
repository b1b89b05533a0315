"""Booking and room coordination rules.

Room status is *not* derived from booking status. The booking flow's caller
marks a room ``BOOKED`` with a separate room update, and staff return rooms
to ``AVAILABLE``. Checking out or cancelling a booking leaves the room's
status as it is.
"""

import math
import re
import secrets
import string
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

BOOKING_ID_PREFIX = "BK"
BOOKING_ID_SUFFIX_LENGTH = 9
BOOKING_ID_PATTERN = re.compile(rf"^{BOOKING_ID_PREFIX}\d+-[0-9A-Z]{{{BOOKING_ID_SUFFIX_LENGTH}}}$")

_BASE36_ALPHABET = string.digits + string.ascii_uppercase
_ONE_DAY = timedelta(days=1)
_CENTS = Decimal("0.01")


def generate_booking_id(now: datetime | None = None) -> str:
    """Return ``BK<epoch millis>-<9 random base36 chars>``.

    Uniqueness is probabilistic; the unique column on ``bookings.booking_id``
    is the only hard guarantee and a collision fails the insert.
    """
    moment = now or datetime.now(timezone.utc)
    millis = int(moment.timestamp() * 1000)
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(BOOKING_ID_SUFFIX_LENGTH))
    return f"{BOOKING_ID_PREFIX}{millis}-{suffix}"


def count_nights(check_in: datetime, check_out: datetime) -> int:
    """Number of nights between two instants, partial days rounded up.

    Returns zero or a negative number when ``check_out`` is not after ``check_in``.
    """
    return math.ceil((check_out - check_in) / _ONE_DAY)


def calculate_total_amount(price_per_night: Decimal, check_in: datetime, check_out: datetime) -> Decimal:
    """Price of a stay: ``nights * price``, or zero when there are no nights."""
    nights = count_nights(check_in, check_out)
    if nights <= 0:
        return Decimal("0.00")
    return (Decimal(price_per_night) * nights).quantize(_CENTS, rounding=ROUND_HALF_UP)
