"""Reusable field validators for request schemas.

Each factory returns a callable suitable for ``BeforeValidator``. Failures are
raised as ``PydanticCustomError`` whose error *type* is the machine-readable
code returned to the client (see ``hoteldesk.errors``), e.g.::

    Price = Annotated[Decimal | None, BeforeValidator(positive_decimal("INVALID_PRICE", "..."))]
"""

import math
import re
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, NoReturn

from email_validator import EmailNotValidError, validate_email
from pydantic.alias_generators import to_snake
from pydantic_core import PydanticCustomError

ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

# Largest value an INTEGER primary key column can hold.
MAX_ID = 2**31 - 1


def fail(code: str, message: str) -> NoReturn:
    raise PydanticCustomError(code, message)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def parse_id_text(value: str) -> int | None:
    """Parse a plain ASCII decimal identifier, or ``None`` if it is not one."""
    cleaned = value.strip()
    if not (cleaned.isascii() and cleaned.isdecimal()):
        return None
    parsed = int(cleaned)
    return parsed if parsed <= MAX_ID else None


# ---------------------------------------------------------------------------
# Presence checks (model-level, mode="before")
# ---------------------------------------------------------------------------


def lookup(data: Mapping[str, Any], alias: str) -> Any:
    """Read a raw input value by its camelCase alias or snake_case name."""
    if alias in data:
        return data[alias]
    return data.get(to_snake(alias))


def require_fields(data: Any, aliases: Iterable[str], code: str, message: str) -> None:
    """Fail with ``code`` when any of ``aliases`` is absent, null or blank."""
    if not isinstance(data, Mapping):
        return
    if any(is_blank(lookup(data, alias)) for alias in aliases):
        fail(code, message)


# ---------------------------------------------------------------------------
# Field validator factories
# ---------------------------------------------------------------------------


def text(code: str, message: str) -> Callable[[Any], str]:
    """Non-empty string, trimmed."""

    def validate(value: Any) -> str:
        if not isinstance(value, str) or value.strip() == "":
            fail(code, message)
        return value.strip()

    return validate


def optional_text(code: str, message: str) -> Callable[[Any], str | None]:
    """Trimmed string; null or blank clears the value.

    Lists of strings are joined with commas so amenities can be sent either way.
    """

    def validate(value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            value = ",".join(item.strip() for item in value if item.strip())
        if not isinstance(value, str):
            fail(code, message)
        return value.strip() or None

    return validate


def email(code: str, message: str, *, check_format: bool = True) -> Callable[[Any], str]:
    """Trimmed, lowercased email address."""
    as_text = text(code, message)

    def validate(value: Any) -> str:
        cleaned = as_text(value).lower()
        if check_format:
            try:
                validate_email(cleaned, check_deliverability=False)
            except EmailNotValidError:
                fail("INVALID_EMAIL_FORMAT", "Invalid email format")
        return cleaned

    return validate


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else Decimal(str(value))
    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None
    return None


def positive_decimal(code: str, message: str) -> Callable[[Any], Decimal]:
    """Number (or numeric string) strictly greater than zero."""

    def validate(value: Any) -> Decimal:
        parsed = _to_decimal(value)
        if parsed is None or parsed <= 0:
            fail(code, message)
        return parsed

    return validate


def positive_int(code: str, message: str) -> Callable[[Any], int]:
    """Whole number (or numeric string) strictly greater than zero."""

    def validate(value: Any) -> int:
        parsed = _to_decimal(value)
        if parsed is None or parsed != parsed.to_integral_value() or parsed <= 0:
            fail(code, message)
        return int(parsed)

    return validate


def one_of(
    allowed: Iterable[str],
    code: str,
    label: str,
    *,
    case_insensitive: bool = False,
) -> Callable[[Any], str]:
    """Member of a fixed set of uppercase values."""
    choices = tuple(allowed)
    message = f"Invalid {label}. Must be one of: {', '.join(choices)}"

    def validate(value: Any) -> str:
        if not isinstance(value, str):
            fail(code, message)
        candidate = value.strip()
        if case_insensitive:
            candidate = candidate.upper()
        if candidate not in choices:
            fail(code, message)
        return candidate

    return validate


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 date or date-time into a naive UTC ``datetime``."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def timestamp(code: str, message: str) -> Callable[[Any], datetime]:
    def validate(value: Any) -> datetime:
        parsed = parse_timestamp(value)
        if parsed is None:
            fail(code, message)
        return parsed

    return validate


def calendar_date(code: str, message: str) -> Callable[[Any], date]:
    """``YYYY-MM-DD`` string; anything after the date part is ignored."""

    def validate(value: Any) -> date:
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not ISO_DATE_PREFIX.match(value.strip()):
            fail(code, message)
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            fail(code, message)

    return validate


def reference_id(code: str, message: str) -> Callable[[Any], int]:
    """Integer identifier of another row."""

    def validate(value: Any) -> int:
        if isinstance(value, bool):
            fail(code, message)
        if isinstance(value, int) and 0 <= value <= MAX_ID:
            return value
        if isinstance(value, str):
            parsed = parse_id_text(value)
            if parsed is not None:
                return parsed
        fail(code, message)

    return validate


def password(code: str, message: str) -> Callable[[Any], str]:
    """Non-empty password within bcrypt's 72-byte input limit. Not trimmed."""

    def validate(value: Any) -> str:
        if not isinstance(value, str) or value == "":
            fail(code, message)
        if len(value.encode("utf-8")) > 72:
            fail(code, "Password must be at most 72 bytes long")
        return value

    return validate


def nullable(validate: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Let an explicit null through instead of validating it."""

    def wrapper(value: Any) -> Any:
        return None if value is None else validate(value)

    return wrapper
