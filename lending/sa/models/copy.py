# lending/sa/models/copy.py
from enum import Enum
from sqlalchemy import Integer, ForeignKey, UniqueConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class CopyStatus(str, Enum):
    AVAILABLE = "Available"   # On the shelf, can be lent
    BORROWED = "Borrowed"     # Out on loan
    WITHDRAWN = "Withdrawn"   # Taken out of circulation by an operator

class Copy(Base):
    __tablename__ = 'copy'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False, index=True)
    copy_number: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[CopyStatus] = mapped_column(
        SAEnum(
            CopyStatus,
            name='copy_status',
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=CopyStatus.AVAILABLE,
    )

    # Relationships
    book = relationship('Book')

    __table_args__ = (
        UniqueConstraint('book_id', 'copy_number', name='uix_copy_book_number'),
    )

    # Status transitions. None of these are guarded: the circulation
    # workflow decides which requests are legal.
    def lend(self) -> None:
        self.status = CopyStatus.BORROWED

    def release(self) -> None:
        self.status = CopyStatus.AVAILABLE

    def withdraw(self) -> None:
        self.status = CopyStatus.WITHDRAWN

    def restore(self) -> None:
        self.status = CopyStatus.AVAILABLE

    @property
    def is_borrowed(self) -> bool:
        return self.status == CopyStatus.BORROWED

    @property
    def is_available(self) -> bool:
        return self.status == CopyStatus.AVAILABLE
