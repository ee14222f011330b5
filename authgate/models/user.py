# File: authgate/models/user.py

"""
User credential record.

``username`` is the primary key, so the database itself rejects a second
row with the same name (case handling follows the column collation).
``password`` holds the bcrypt hash, never the plaintext.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from authgate.models.base import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(username={self.username!r})"
