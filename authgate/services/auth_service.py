# File: authgate/services/auth_service.py

"""
Registration and login.

  - Presence check on username / password before any database access
  - bcrypt hash on registration, bcrypt check on login
  - Failures mapped onto the errors in authgate.core.errors

Every server-side failure is logged with its traceback; the caller only
gets the generic message of the raised error.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from authgate.core.errors import (
    AuthenticationError,
    CreationError,
    UserLookupError,
    ValidationError,
)
from authgate.core.security import hash_password, verify_password
from authgate.models.user import User
from authgate.services.user_store import find_user_by_username, insert_user

logger = logging.getLogger(__name__)


def _require_credentials(username: Optional[str], password: Optional[str]) -> None:
    if not username or not password:
        raise ValidationError()


def register_user(
    db: Session,
    *,
    username: Optional[str],
    password: Optional[str],
) -> User:
    _require_credentials(username, password)

    try:
        hashed = hash_password(password)
        user = insert_user(db, username, hashed)
    except Exception as exc:
        db.rollback()
        logger.exception("Registration failed for %r", username)
        raise CreationError() from exc

    logger.info("Registered user %r", username)
    return user


def authenticate_user(
    db: Session,
    *,
    username: Optional[str],
    password: Optional[str],
) -> User:
    """
    Return the matching user or raise.

    An unknown username and a wrong password raise the same
    AuthenticationError so responses cannot be used to probe for names.
    """
    _require_credentials(username, password)

    try:
        user = find_user_by_username(db, username)
    except Exception as exc:
        logger.exception("User lookup failed for %r", username)
        raise UserLookupError() from exc

    if user is None:
        logger.info("Login rejected for %r", username)
        raise AuthenticationError()

    try:
        matched = verify_password(password, user.password)
    except Exception as exc:
        logger.exception("Stored password for %r could not be checked", username)
        raise UserLookupError() from exc

    if not matched:
        logger.info("Login rejected for %r", username)
        raise AuthenticationError()

    return user
