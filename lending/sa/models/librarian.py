# lending/sa/models/librarian.py
from datetime import date
from sqlalchemy import Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Librarian(Base):
    __tablename__ = 'librarian'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False, index=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    user = relationship('User')
