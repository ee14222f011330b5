# File: authgate/services/user_store.py

"""
Credential store access.

Both queries go through SQLAlchemy, so the username and hash always travel
as bound parameters. Database errors propagate to the caller unchanged.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from authgate.models.user import User


def insert_user(db: Session, username: str, password_hash: str) -> User:
    user = User(username=username, password=password_hash)
    db.add(user)
    db.commit()
    return user


def find_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.execute(
        select(User).where(User.username == username)
    ).scalars().first()
