# lending/services/circulation.py
from datetime import date
from typing import Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lending.errors import NotFound, ConstraintViolation, PreconditionViolation
from lending.rules import ConsistencyRules
from lending.sa.index import RelationshipIndex
from lending.sa.models import Book, Copy, CopyStatus, Borrowing, User
from lending.sa.repositories import (
    BookRepository,
    CopyRepository,
    BorrowingRepository,
    UserRepository,
)
from lending.sa.repositories.base import commit

logger = logging.getLogger(__name__)

class CirculationService:
    """Lending workflows spanning several records.

    Each workflow stages all of its changes on the session and commits them
    once, so a failure leaves nothing half-applied. Unlike the plain
    repositories, lending refuses a copy that is not Available or that
    already has an open borrowing.
    """

    def __init__(self, session: Session, rules: Optional[ConsistencyRules] = None):
        self.session = session
        self.index = RelationshipIndex(session)
        self.books = BookRepository(session, rules)
        self.copies = CopyRepository(session, rules)
        self.borrowings = BorrowingRepository(session, rules)
        self.users = UserRepository(session, rules)

    # catalog
    def add_book_with_copies(self, book: Book, copies: int = 1) -> Book:
        """Create a book together with ``copies`` Available copies numbered from 1."""
        if copies < 1:
            raise ConstraintViolation("Book", "number of copies must be greater than 0")

        self.session.add(book)
        try:
            # Flush to get the book id before numbering its copies
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            raise ConstraintViolation("Book", str(e.orig)) from e
        for number in range(1, copies + 1):
            self.session.add(Copy(book_id=book.id, copy_number=number, status=CopyStatus.AVAILABLE))
        commit(self.session, "Book")
        logger.debug("Created book %s with %d copies", book.id, copies)
        return book

    def add_copy(self, book_id: int, status: CopyStatus = CopyStatus.AVAILABLE) -> Copy:
        """Add one more copy to an existing book."""
        if self.books.find_by_id(book_id) is None:
            raise NotFound("Book", book_id)
        copy = Copy(book_id=book_id, copy_number=self.index.next_copy_number(book_id), status=status)
        return self.copies.create(copy)

    def available_titles(self) -> List[Book]:
        return self.books.get_books_with_available_copies()

    def book_summary(self, book_id: int) -> Dict[str, int]:
        """Total and available copy counts for a book."""
        if self.books.find_by_id(book_id) is None:
            raise NotFound("Book", book_id)
        copies = self.index.copies_of_book(book_id)
        return {
            'total': len(copies),
            'available': sum(1 for c in copies if c.is_available),
            'borrowed': sum(1 for c in copies if c.is_borrowed),
        }

    # lending
    def lend(
        self,
        user_id: int,
        book_id: int,
        borrow_date: Optional[date] = None,
        return_date: Optional[date] = None,
    ) -> Borrowing:
        """Lend the first free copy of a book to a user.

        Raises:
            NotFound: If the user or the book does not exist
            PreconditionViolation: If the book has no lendable copy
        """
        user = self._require_user(user_id)
        if self.books.find_by_id(book_id) is None:
            raise NotFound("Book", book_id)

        for copy in self.index.available_copies_of_book(book_id):
            if self.index.borrowing_of_copy(copy.id) is None:
                return self._open_borrowing(user, copy, borrow_date, return_date)

        raise PreconditionViolation(
            "no_available_copy", "Book", book_id,
            f"No available copies for Book {book_id}",
        )

    def lend_copy(self, user_id: int, copy_id: int, borrow_date: Optional[date] = None) -> Borrowing:
        """Lend one specific copy to a user."""
        user = self._require_user(user_id)
        copy = self.copies.find_by_id(copy_id)
        if copy is None:
            raise NotFound("Copy", copy_id)
        if not copy.is_available or self.index.borrowing_of_copy(copy.id) is not None:
            raise PreconditionViolation(
                "copy_not_available", "Copy", copy_id,
                f"Copy {copy_id} is {copy.status.value} and cannot be lent",
            )
        return self._open_borrowing(user, copy, borrow_date, None)

    def return_borrowing(self, borrowing_id: int, return_date: Optional[date] = None) -> Borrowing:
        """Close a borrowing and put its copy back on the shelf.

        Raises:
            NotFound: If the borrowing does not exist
            PreconditionViolation: If the borrowing was already returned
        """
        borrowing = self.borrowings.find_by_id(borrowing_id)
        if borrowing is None:
            raise NotFound("Borrowing", borrowing_id)
        if not borrowing.is_open:
            raise PreconditionViolation(
                "borrowing_closed", "Borrowing", borrowing_id,
                f"Borrowing {borrowing_id} was already returned on {borrowing.return_date}",
            )

        borrowing.mark_returned(return_date)
        copy = self.session.get(Copy, borrowing.copy_id)
        if copy is not None:
            copy.release()
        commit(self.session, "Borrowing")
        logger.debug("Borrowing %s returned", borrowing.id)
        return borrowing

    def borrowing_history(self, user_id: int) -> List[Borrowing]:
        self._require_user(user_id)
        return self.index.borrowings_of_user(user_id)

    def status_drift(self) -> List[Copy]:
        """Copies whose status disagrees with their open borrowings.

        A copy is drifting when it is Borrowed without an open borrowing, or
        has an open borrowing while not Borrowed.
        """
        drifting = []
        for copy in self.copies.find_all():
            has_open = self.index.borrowing_of_copy(copy.id) is not None
            if has_open != copy.is_borrowed:
                drifting.append(copy)
        return drifting

    def _require_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    def _open_borrowing(
        self,
        user: User,
        copy: Copy,
        borrow_date: Optional[date],
        return_date: Optional[date],
    ) -> Borrowing:
        borrowing = Borrowing(
            user_id=user.id,
            copy_id=copy.id,
            borrow_date=borrow_date or date.today(),
            return_date=return_date,
        )
        self.session.add(borrowing)
        # A loan recorded with a return date is already closed
        if return_date is None:
            copy.lend()
        commit(self.session, "Borrowing")
        logger.debug("Copy %s lent to user %s (borrowing %s)", copy.id, user.id, borrowing.id)
        return borrowing
