# lending/sa/models/book.py
from sqlalchemy import String, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Book(Base):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-text publisher name, kept alongside the optional publisher reference
    publisher: Mapped[str | None] = mapped_column(String(255), nullable=True)
    publication_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    isbn: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    publisher_id: Mapped[int | None] = mapped_column(ForeignKey('publisher.id'), nullable=True)

    # Relationships
    publisher_entity = relationship('Publisher')

    __table_args__ = (
        Index('idx_book_title', 'title'),
        Index('idx_book_publisher_id', 'publisher_id'),
    )
