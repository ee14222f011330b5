# File: authgate/models/base.py

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# pk_users, uq_users_<column>, ix_users_<column>
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for the credential store tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
