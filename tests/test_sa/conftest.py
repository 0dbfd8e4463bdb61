# tests/test_sa/conftest.py
import os
import pytest
from datetime import date

from sqlalchemy.orm import Session
from lending.sa.database import Database
from lending.sa.models import (
    Base, Publisher, Book, Copy, CopyStatus, User, Borrowing, Librarian
)

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_library.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()

    yield db

    db.close()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Children before parents
    for table in reversed(Base.metadata.sorted_tables):
        db_session.execute(table.delete())
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_publisher(db_session):
    """Create a sample publisher for testing."""
    publisher = Publisher(name="Test Publisher", address="1 Press Lane", contact="555-0100")
    db_session.add(publisher)
    db_session.commit()
    return publisher

@pytest.fixture
def sample_book(db_session):
    """Create a sample book for testing."""
    book = Book(
        title="Test Title",
        author="Test Author",
        publisher="Test Publisher",
        publication_year=2021,
        isbn="ISBN123"
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_copy(db_session, sample_book):
    """Create an Available copy of the sample book."""
    copy = Copy(book_id=sample_book.id, copy_number=1, status=CopyStatus.AVAILABLE)
    db_session.add(copy)
    db_session.commit()
    return copy

@pytest.fixture
def sample_user(db_session):
    """Create a sample user for testing."""
    user = User(name="Test User", email="user@test.com", phone_number="1234567890", address="Test Address")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def open_borrowing(db_session, sample_user, sample_copy):
    """Lend the sample copy to the sample user the way a caller would."""
    borrowing = Borrowing(user_id=sample_user.id, copy_id=sample_copy.id, borrow_date=date(2024, 1, 5))
    db_session.add(borrowing)
    sample_copy.status = CopyStatus.BORROWED
    db_session.commit()
    return borrowing

@pytest.fixture
def sample_librarian(db_session, sample_user):
    librarian = Librarian(user_id=sample_user.id, hire_date=date(2023, 5, 10), position="Senior Librarian")
    db_session.add(librarian)
    db_session.commit()
    return librarian
