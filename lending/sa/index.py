# lending/sa/index.py
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from lending.sa.models import Book, Copy, CopyStatus, Borrowing, Librarian

class RelationshipIndex:
    """Reverse lookups over the one-directional foreign keys.

    Every query runs against the session on demand, so results always
    reflect the latest committed state.
    """

    def __init__(self, session: Session):
        self.session = session

    def copies_of_book(self, book_id: int) -> List[Copy]:
        """Get all copies owned by a book, ordered by copy number."""
        return (
            self.session.query(Copy)
            .filter(Copy.book_id == book_id)
            .order_by(Copy.copy_number)
            .all()
        )

    def available_copies_of_book(self, book_id: int) -> List[Copy]:
        return (
            self.session.query(Copy)
            .filter(Copy.book_id == book_id, Copy.status == CopyStatus.AVAILABLE)
            .order_by(Copy.copy_number)
            .all()
        )

    def next_copy_number(self, book_id: int) -> int:
        """Copy number to give the next copy added to a book."""
        highest = (
            self.session.query(func.max(Copy.copy_number))
            .filter(Copy.book_id == book_id)
            .scalar()
        )
        return (highest or 0) + 1

    def borrowings_of_user(self, user_id: int) -> List[Borrowing]:
        """Get every borrowing (open or returned) owned by a user."""
        return (
            self.session.query(Borrowing)
            .filter(Borrowing.user_id == user_id)
            .order_by(Borrowing.borrow_date, Borrowing.id)
            .all()
        )

    def open_borrowings_of_user(self, user_id: int) -> List[Borrowing]:
        return (
            self.session.query(Borrowing)
            .filter(Borrowing.user_id == user_id, Borrowing.return_date.is_(None))
            .order_by(Borrowing.borrow_date, Borrowing.id)
            .all()
        )

    def books_of_publisher(self, publisher_id: int) -> List[Book]:
        return (
            self.session.query(Book)
            .filter(Book.publisher_id == publisher_id)
            .order_by(Book.id)
            .all()
        )

    def count_books_of_publisher(self, publisher_id: int) -> int:
        return (
            self.session.query(func.count(Book.id))
            .filter(Book.publisher_id == publisher_id)
            .scalar()
        )

    def borrowings_of_copy(self, copy_id: int) -> List[Borrowing]:
        return (
            self.session.query(Borrowing)
            .filter(Borrowing.copy_id == copy_id)
            .order_by(Borrowing.id)
            .all()
        )

    def borrowing_of_copy(self, copy_id: int) -> Optional[Borrowing]:
        """Get the open borrowing of a copy, if there is one.

        Nothing at the storage level stops two open borrowings existing for
        one copy; the oldest is returned in that case.
        """
        return (
            self.session.query(Borrowing)
            .filter(Borrowing.copy_id == copy_id, Borrowing.return_date.is_(None))
            .order_by(Borrowing.id)
            .first()
        )

    def librarians_of_user(self, user_id: int) -> List[Librarian]:
        return (
            self.session.query(Librarian)
            .filter(Librarian.user_id == user_id)
            .order_by(Librarian.id)
            .all()
        )
