# lending/sa/repositories/borrowing.py
from typing import List
from lending.sa.models import Borrowing
from .base import BaseRepository

class BorrowingRepository(BaseRepository[Borrowing]):
    """Borrowings. Deleting one releases the copy it references."""
    model = Borrowing

    def get_open(self) -> List[Borrowing]:
        return (
            self.session.query(Borrowing)
            .filter(Borrowing.return_date.is_(None))
            .order_by(Borrowing.borrow_date, Borrowing.id)
            .all()
        )
