# File: authgate/db/session.py

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from authgate.core.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.database_url

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    pool_pre_ping=True,
    hide_parameters=True,
    connect_args=(
        {"check_same_thread": False}
        if make_url(SQLALCHEMY_DATABASE_URL).get_backend_name() == "sqlite"
        else {}
    ),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(bind=None) -> bool:
    """
    Try one round-trip to the database and log the outcome.

    Never raises: a bad configuration only shows up in the log, the
    server keeps starting.
    """
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.error("Unable to connect to the database", exc_info=True)
        return False
    logger.info("Connected to the database")
    return True


def get_db() -> Generator[Session, None, None]:
    """
    Per-request session: checks a connection out of the pool on first
    query and hands it back on close, whatever the request outcome.
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
