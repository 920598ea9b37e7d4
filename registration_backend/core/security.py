# Standard library imports
import asyncio
import logging
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from ..domain.exceptions import HashingError
from .config import get_settings

logger = logging.getLogger(__name__)


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt

    A fresh salt is generated on every call, so hashing the same password
    twice yields two different digests. The digest embeds salt and cost
    factor, which is all verify_password needs.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor (defaults to settings.bcrypt_rounds)

    Returns:
        Hashed password string

    Raises:
        HashingError: If the input is not text or salt/hash generation fails
    """
    if not isinstance(plain_password, str):
        raise HashingError(
            f"Password must be a string, got {type(plain_password).__name__}"
        )

    if rounds is None:
        rounds = get_settings().bcrypt_rounds

    try:
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    except Exception as e:
        raise HashingError(f"Failed to hash password: {str(e)}") from e
    return hashed.decode("utf-8")


async def hash_password_async(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password without blocking the event loop.

    bcrypt is CPU-bound, so the work runs in a worker thread.
    """
    return await asyncio.to_thread(hash_password, plain_password, rounds)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Password verification failed: {e}")
        return False
