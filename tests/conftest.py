import os

# Must be set before authgate is imported: settings and the engine are built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from authgate.db.session import get_db
from authgate.main import app
from authgate.models.base import Base
from authgate.models import user  # noqa: F401


@pytest.fixture()
def engine():
    """
    In-memory SQLite shared by every session of one test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def client_with_session():
    """
    Client factory whose requests all get the given session object.
    """
    def _make(session):
        def override_get_db():
            yield session

        app.dependency_overrides[get_db] = override_get_db
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
