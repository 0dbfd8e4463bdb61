# lending/sa/models/__init__.py
from .base import Base
from .publisher import Publisher
from .book import Book
from .copy import Copy, CopyStatus
from .user import User
from .borrowing import Borrowing
from .librarian import Librarian

__all__ = [
    'Base',
    'Publisher',
    'Book',
    'Copy',
    'CopyStatus',
    'User',
    'Borrowing',
    'Librarian'
]
