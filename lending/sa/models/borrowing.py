# lending/sa/models/borrowing.py
from datetime import date
from sqlalchemy import Integer, Date, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Borrowing(Base):
    """A loan of one Copy to one User. Open while return_date is unset."""
    __tablename__ = 'borrowing'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    copy_id: Mapped[int] = mapped_column(ForeignKey('copy.id'), nullable=False)
    borrow_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    user = relationship('User')
    copy = relationship('Copy')

    __table_args__ = (
        Index('idx_borrowing_user_id', 'user_id'),
        Index('idx_borrowing_copy_id', 'copy_id'),
    )

    @property
    def is_open(self) -> bool:
        return self.return_date is None

    def mark_returned(self, when: date | None = None) -> None:
        self.return_date = when or date.today()
