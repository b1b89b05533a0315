"""Helpers shared by the resource routers: ids, pagination and lookups."""

from datetime import datetime
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.database import Base
from hoteldesk.errors import BadRequestError, NotFoundError
from hoteldesk.schemas.validators import parse_id_text, parse_timestamp

ModelT = TypeVar("ModelT", bound=Base)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def parse_id(raw: str | None, code: str = "INVALID_ID", message: str = "Valid ID is required") -> int:
    """Parse an integer identifier from a query parameter."""
    parsed = None if raw is None else parse_id_text(raw)
    if parsed is None:
        raise BadRequestError(message, code)
    return parsed


def parse_optional_id(raw: str | None, code: str, message: str) -> int | None:
    """Like :func:`parse_id`, but an absent or empty parameter means no filter."""
    if raw is None or raw.strip() == "":
        return None
    return parse_id(raw, code, message)


def parse_date_filter(raw: str | None) -> datetime | None:
    """Parse an optional ISO-8601 date bound; an empty parameter means no bound."""
    if raw is None or raw.strip() == "":
        return None
    parsed = parse_timestamp(raw)
    if parsed is None:
        raise BadRequestError("Dates must be valid ISO-8601 dates", "INVALID_DATE")
    return parsed


def page_bounds(limit: int, offset: int) -> tuple[int, int]:
    """Clamp caller-supplied pagination to ``0 <= limit <= MAX_LIMIT`` and ``offset >= 0``."""
    return max(min(limit, MAX_LIMIT), 0), max(offset, 0)


async def get_or_404(
    db: AsyncSession,
    model: type[ModelT],
    entity_id: int,
    code: str,
    message: str,
) -> ModelT:
    """Fetch a row by primary key or raise ``NotFoundError``."""
    result = await db.execute(select(model).where(model.id == entity_id))  # type: ignore[attr-defined]
    entity = result.scalar_one_or_none()
    if entity is None:
        raise NotFoundError(message, code)
    return entity
