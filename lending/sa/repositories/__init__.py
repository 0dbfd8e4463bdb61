# lending/sa/repositories/__init__.py
from .base import BaseRepository
from .book import BookRepository
from .copy import CopyRepository
from .publisher import PublisherRepository
from .user import UserRepository
from .borrowing import BorrowingRepository
from .librarian import LibrarianRepository

__all__ = [
    'BaseRepository',
    'BookRepository',
    'CopyRepository',
    'PublisherRepository',
    'UserRepository',
    'BorrowingRepository',
    'LibrarianRepository'
]
