# tests/test_sa/test_database.py
import pytest
from sqlalchemy import inspect
from lending.sa.database import Database, DATABASE_URL_ENV, DEFAULT_DATABASE_URL
from lending.sa.models import User

@pytest.fixture
def memory_db():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.close()

def test_connection_string_from_environment(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'env.db'}"
    monkeypatch.setenv(DATABASE_URL_ENV, url)
    db = Database()
    try:
        assert db.connection_string == url
        assert db.is_sqlite
    finally:
        db.close()

def test_default_connection_string(monkeypatch):
    monkeypatch.delenv(DATABASE_URL_ENV, raising=False)
    db = Database()
    try:
        assert db.connection_string == DEFAULT_DATABASE_URL
    finally:
        db.close()

def test_init_db_creates_tables(memory_db):
    tables = set(inspect(memory_db.engine).get_table_names())
    assert {"book", "copy", "publisher", "user", "borrowing", "librarian"} <= tables

def test_memory_database_shared_between_sessions(memory_db):
    with memory_db.get_db() as session:
        session.add(User(name="Alice", email="alice@example.com"))

    with memory_db.get_db() as session:
        assert session.query(User).filter_by(email="alice@example.com").count() == 1

def test_get_db_rolls_back_on_error(memory_db):
    with pytest.raises(RuntimeError):
        with memory_db.get_db() as session:
            session.add(User(name="Bob", email="bob@example.com"))
            session.flush()
            raise RuntimeError("boom")

    with memory_db.get_db() as session:
        assert session.query(User).count() == 0

def test_close_is_final():
    db = Database("sqlite://")
    with db:
        db.init_db()
        assert not db.closed
    assert db.closed
    with pytest.raises(RuntimeError):
        db.get_session()
    # Closing twice is harmless
    db.close()
