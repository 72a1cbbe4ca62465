"""
Password hashing
"""

import bcrypt

from .config import settings


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with a freshly generated bcrypt salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor, defaults to ``settings.password_salt_rounds``

    Returns:
        The bcrypt digest as a string (salt embedded)
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.password_salt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
