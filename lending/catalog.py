# lending/catalog.py
from typing import Optional
import logging

from sqlalchemy.orm import Session

from lending.rules import ConsistencyRules
from lending.sa.database import Database
from lending.sa.index import RelationshipIndex
from lending.sa.repositories import (
    BookRepository,
    CopyRepository,
    PublisherRepository,
    UserRepository,
    BorrowingRepository,
    LibrarianRepository,
)
from lending.services.circulation import CirculationService

logger = logging.getLogger(__name__)

class LendingCatalog:
    """One open session wired to every repository.

    Usage:
        with LendingCatalog.open("sqlite:///library.db") as catalog:
            catalog.books.find_all()
    """

    def __init__(self, database: Database, rules: Optional[ConsistencyRules] = None, owns_database: bool = False):
        self.database = database
        self.rules = rules or ConsistencyRules.default()
        self._owns_database = owns_database
        self.session: Optional[Session] = database.get_session()

        self.index = RelationshipIndex(self.session)
        self.books = BookRepository(self.session, self.rules)
        self.copies = CopyRepository(self.session, self.rules)
        self.publishers = PublisherRepository(self.session, self.rules)
        self.users = UserRepository(self.session, self.rules)
        self.borrowings = BorrowingRepository(self.session, self.rules)
        self.librarians = LibrarianRepository(self.session, self.rules)
        self.circulation = CirculationService(self.session, self.rules)

    @classmethod
    def open(cls, connection_string: Optional[str] = None, create_tables: bool = True, **engine_kwargs) -> "LendingCatalog":
        """Open a database and a catalog session that owns it."""
        database = Database(connection_string, **engine_kwargs)
        if create_tables:
            database.init_db()
        return cls(database, owns_database=True)

    @property
    def closed(self) -> bool:
        return self.session is None

    def close(self) -> None:
        """Close the session, and the database too if this catalog opened it."""
        if self.session is not None:
            self.session.close()
            self.session = None
        if self._owns_database:
            self.database.close()

    def __enter__(self) -> "LendingCatalog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
