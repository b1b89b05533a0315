"""Account helpers shared by the user management and auth routers.

Emails are lowercased by the request schemas before they get here, so an
exact comparison is a case-insensitive uniqueness check.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.auth.passwords import hash_password
from hoteldesk.errors import BadRequestError
from hoteldesk.models.user import User


def email_taken() -> BadRequestError:
    return BadRequestError("User with this email already exists", "EMAIL_ALREADY_EXISTS")


async def ensure_email_free(db: AsyncSession, email: str, exclude_id: int | None = None) -> None:
    """Raise ``EMAIL_ALREADY_EXISTS`` if another account uses ``email``."""
    query = select(User.id).where(User.email == email)
    if exclude_id is not None:
        query = query.where(User.id != exclude_id)
    result = await db.execute(query.limit(1))
    if result.scalar_one_or_none() is not None:
        raise email_taken()


async def flush_user(db: AsyncSession) -> None:
    """Flush pending user changes; a lost race on the unique email maps to the same error."""
    try:
        await db.flush()
    except IntegrityError as exc:
        raise email_taken() from exc


async def create_account(
    db: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    role: str,
    phone: str | None = None,
) -> User:
    """Insert a user with a hashed password and return the refreshed row."""
    await ensure_email_free(db, email)

    user = User(name=name, email=email, password=hash_password(password), role=role, phone=phone)
    db.add(user)
    await flush_user(db)
    await db.refresh(user)
    return user
