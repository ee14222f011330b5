"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from authgate.db.session import engine
from authgate.models.base import Base
from authgate.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind=None) -> None:
    """
    Create missing tables. Existing tables are left untouched.
    """
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Ensured tables: %s", ", ".join(sorted(Base.metadata.tables)))
