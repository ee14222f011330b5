# File: tests/test_user_store.py

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.schema import CreateTable

import authgate.db.session as session_module
from authgate.db.init_db import init_db
from authgate.db.session import check_connection
from authgate.models.user import User
from authgate.services.user_store import find_user_by_username, insert_user


def test_insert_then_find(db_session):
    insert_user(db_session, "alice", "$2b$04$hash")

    user = find_user_by_username(db_session, "alice")
    assert user is not None
    assert user.username == "alice"
    assert user.password == "$2b$04$hash"


def test_find_unknown_returns_none(db_session):
    assert find_user_by_username(db_session, "bob") is None


def test_find_is_exact_match(db_session):
    insert_user(db_session, "alice", "$2b$04$hash")

    assert find_user_by_username(db_session, "alice ") is None
    assert find_user_by_username(db_session, "al%") is None


def test_duplicate_insert_raises_integrity_error(db_session):
    insert_user(db_session, "alice", "$2b$04$hash")

    with pytest.raises(IntegrityError):
        insert_user(db_session, "alice", "$2b$04$other")


def test_init_db_creates_users_table():
    engine = create_engine("sqlite://")
    init_db(bind=engine)
    init_db(bind=engine)

    columns = {c["name"] for c in inspect(engine).get_columns("users")}
    assert columns == {"username", "password"}


def test_check_connection(tmp_path, caplog):
    assert check_connection(create_engine("sqlite://")) is True

    broken = create_engine(f"sqlite:///{tmp_path / 'missing' / 'app.db'}")
    assert check_connection(broken) is False
    assert "Unable to connect to the database" in caplog.text


def test_users_primary_key_is_named(engine):
    ddl = str(CreateTable(User.__table__).compile(engine))
    assert "CONSTRAINT pk_users PRIMARY KEY (username)" in ddl


def test_get_db_closes_session(monkeypatch):
    closed = []

    class FakeSession:
        def close(self):
            closed.append(True)

    monkeypatch.setattr(session_module, "SessionLocal", FakeSession)
    gen = session_module.get_db()
    assert isinstance(next(gen), FakeSession)
    gen.close()
    assert closed == [True]
