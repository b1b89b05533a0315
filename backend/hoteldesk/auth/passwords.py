"""Password hashing and verification using bcrypt directly.

Uses bcrypt directly instead of passlib to avoid compatibility issues
between passlib and bcrypt 4.x+ on Python 3.13.
"""

import bcrypt

from hoteldesk.config import settings


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt.

    Args:
        password: The plain-text password to hash (at most 72 bytes).

    Returns:
        The bcrypt hash string, cost factor taken from ``settings.bcrypt_rounds``.
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash.

    Malformed hashes count as a mismatch rather than an error.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
