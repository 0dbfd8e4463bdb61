# lending/sa/repositories/librarian.py
from lending.sa.models import Librarian
from .base import BaseRepository

class LibrarianRepository(BaseRepository[Librarian]):
    model = Librarian
