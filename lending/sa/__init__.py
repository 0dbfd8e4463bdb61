# lending/sa/__init__.py
from .database import Database
from .models import (
    Base, Publisher, Book, Copy, CopyStatus,
    User, Borrowing, Librarian
)

__all__ = [
    'Database',
    'Base',
    'Publisher',
    'Book',
    'Copy',
    'CopyStatus',
    'User',
    'Borrowing',
    'Librarian'
]
