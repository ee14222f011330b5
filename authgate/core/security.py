# File: authgate/core/security.py

"""
Password hashing helpers (bcrypt).

bcrypt only looks at the first 72 bytes of a password. Both helpers cut the
UTF-8 encoding there themselves so hashing and checking always agree,
whatever the installed bcrypt release does with longer input.
"""

from typing import Optional

import bcrypt

from authgate.core.config import settings

BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: Optional[int] = None) -> str:
    """
    Return a salted bcrypt hash such as ``$2b$10$...``.

    ``rounds`` defaults to the configured cost factor.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    Compare ``plain`` against a stored bcrypt hash.

    Raises ValueError when ``hashed`` is not a bcrypt hash.
    """
    return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
