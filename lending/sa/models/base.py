# lending/sa/models/base.py
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models"""

    def to_dict(self) -> dict:
        """Column values keyed by attribute name"""
        return {attr.key: getattr(self, attr.key) for attr in self.__mapper__.column_attrs}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)}>"
