# lending/seed.py
from datetime import date
from typing import Any, Dict
import logging

from sqlalchemy.orm import Session

from lending.sa.models import Publisher, Book, Copy, CopyStatus, User, Borrowing, Librarian
from lending.sa.repositories import (
    PublisherRepository,
    BookRepository,
    CopyRepository,
    UserRepository,
    BorrowingRepository,
    LibrarianRepository,
)

logger = logging.getLogger(__name__)

def seed_sample_data(session: Session) -> Dict[str, Any]:
    """Populate an empty catalog with a small, consistent sample set.

    Returns:
        The created records keyed by kind ('users', 'publishers', 'books',
        'copies', 'borrowings', 'librarians')
    """
    users_repo = UserRepository(session)
    publishers_repo = PublisherRepository(session)
    books_repo = BookRepository(session)
    copies_repo = CopyRepository(session)
    borrowings_repo = BorrowingRepository(session)
    librarians_repo = LibrarianRepository(session)

    users = [
        users_repo.create(User(name="Vitalii", email="vitalii@example.com", phone_number="575 422 555", address="Zlote Terasy")),
        users_repo.create(User(name="Artem", email="artem@example.com", phone_number="095 911 40 26", address="Apollo")),
        users_repo.create(User(name="Slava", email="slava@example.com", phone_number="050 058 04 55", address="Dublin")),
    ]

    penguin = publishers_repo.create(Publisher(name="Penguin Books", address="123 Book St", contact="123-456-789"))
    harper = publishers_repo.create(Publisher(name="HarperCollins", address="456 Novel Ave", contact="987-654-321"))

    books = [
        books_repo.create(Book(title="The Great Gatsby", author="F. Scott Fitzgerald", publisher=penguin.name,
                               publication_year=1925, isbn="9780141182636", publisher_id=penguin.id)),
        books_repo.create(Book(title="1984", author="George Orwell", publisher=penguin.name,
                               publication_year=1949, isbn="9780141036144", publisher_id=penguin.id)),
        books_repo.create(Book(title="To Kill a Mockingbird", author="Harper Lee", publisher=harper.name,
                               publication_year=1960, isbn="9780060935467", publisher_id=harper.id)),
    ]

    copies = [
        copies_repo.create(Copy(book_id=books[0].id, copy_number=1, status=CopyStatus.AVAILABLE)),
        copies_repo.create(Copy(book_id=books[1].id, copy_number=1, status=CopyStatus.AVAILABLE)),
        copies_repo.create(Copy(book_id=books[2].id, copy_number=1, status=CopyStatus.AVAILABLE)),
        copies_repo.create(Copy(book_id=books[2].id, copy_number=2, status=CopyStatus.AVAILABLE)),
    ]

    # One returned loan and one still open; only the open one keeps its copy out
    borrowings = [
        borrowings_repo.create(Borrowing(user_id=users[0].id, copy_id=copies[0].id,
                                         borrow_date=date(2024, 1, 1), return_date=date(2024, 1, 15))),
        borrowings_repo.create(Borrowing(user_id=users[1].id, copy_id=copies[2].id,
                                         borrow_date=date(2024, 1, 5), return_date=None)),
    ]
    copies[2].lend()
    copies_repo.update(copies[2])

    librarians = [
        librarians_repo.create(Librarian(user_id=users[2].id, hire_date=date(2023, 5, 10), position="Senior Librarian")),
    ]

    logger.info("Seeded %d users, %d books, %d copies", len(users), len(books), len(copies))
    return {
        'users': users,
        'publishers': [penguin, harper],
        'books': books,
        'copies': copies,
        'borrowings': borrowings,
        'librarians': librarians,
    }
