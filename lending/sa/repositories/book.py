# lending/sa/repositories/book.py
from typing import Optional, List
from lending.sa.models import Book, Copy, CopyStatus
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    model = Book

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by its ISBN"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def search_books(self, query: str, limit: int = 20) -> List[Book]:
        """Search books whose title or author matches the query (case-insensitive).

        Args:
            query: Search query string
            limit: Maximum number of results to return

        Returns:
            List of matching Book objects
        """
        pattern = f"%{query}%"
        return (
            self.session.query(Book)
            .filter(Book.title.ilike(pattern) | Book.author.ilike(pattern))
            .order_by(Book.title)
            .limit(limit)
            .all()
        )

    def get_books_with_available_copies(self) -> List[Book]:
        """Get books that have at least one Available copy"""
        return (
            self.session.query(Book)
            .join(Copy, Copy.book_id == Book.id)
            .filter(Copy.status == CopyStatus.AVAILABLE)
            .distinct()
            .order_by(Book.id)
            .all()
        )
