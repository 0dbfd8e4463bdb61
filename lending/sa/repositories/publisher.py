# lending/sa/repositories/publisher.py
from typing import Optional
from lending.errors import NotFound
from lending.sa.models import Publisher, Book
from .base import BaseRepository

class PublisherRepository(BaseRepository[Publisher]):
    model = Publisher

    def get_by_name(self, name: str) -> Optional[Publisher]:
        return self.session.query(Publisher).filter(Publisher.name == name).first()

    def assign_book(self, book_id: int, publisher_id: Optional[int]) -> Book:
        """Point a book at a publisher, or detach it when publisher_id is None.

        The free-text publisher name on the book follows the new publisher.

        Raises:
            NotFound: If the book or the publisher does not exist
        """
        book = self.session.get(Book, book_id)
        if book is None:
            raise NotFound("Book", book_id)

        if publisher_id is None:
            book.publisher_id = None
        else:
            publisher = self.find_by_id(publisher_id)
            if publisher is None:
                raise NotFound(self.kind, publisher_id)
            book.publisher_id = publisher.id
            book.publisher = publisher.name

        self._commit()
        return book
