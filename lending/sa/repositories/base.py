# lending/sa/repositories/base.py
from typing import TypeVar, Generic, Optional, List, Type
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lending.errors import NotFound, ConstraintViolation, PreconditionViolation
from lending.rules import ConsistencyRules
from lending.sa.index import RelationshipIndex
from lending.sa.models import Base

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)

class BaseRepository(Generic[T]):
    """Create/find/update/delete for one model class.

    Every mutating call is its own transaction on the session: it either
    commits completely or is rolled back and raises.
    """

    model: Type[T]

    def __init__(self, session: Session, rules: Optional[ConsistencyRules] = None):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
            rules: Delete rules to enforce (default: ConsistencyRules.default())
        """
        self.session = session
        self.rules = rules or ConsistencyRules.default()
        self.index = RelationshipIndex(session)

    @property
    def kind(self) -> str:
        return self.model.__name__

    def create(self, entity: T) -> T:
        """Persist a new record.

        Returns:
            The same object with its generated id populated

        Raises:
            ConstraintViolation: If a uniqueness or required field rule is broken
        """
        self.session.add(entity)
        self._commit()
        logger.debug("Created %s %s", self.kind, entity.id)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Get a record by its id, None if there is none."""
        if entity_id is None:
            return None
        return self.session.get(self.model, entity_id)

    def find_all(self) -> List[T]:
        """Get every record in insertion order."""
        return self.session.query(self.model).order_by(self.model.id).all()

    def count(self) -> int:
        return self.session.query(self.model).count()

    def update(self, entity: T) -> T:
        """Replace the stored attributes of an existing record.

        ``entity`` may be the stored object itself or any instance carrying
        the id of one; column values are copied onto the stored row.

        Raises:
            NotFound: If no record has the entity's id
            ConstraintViolation: If a uniqueness or required field rule is broken
        """
        stored = self.find_by_id(entity.id)
        if stored is None:
            raise NotFound(self.kind, entity.id)

        if stored is not entity:
            for attr in self.model.__mapper__.column_attrs:
                if attr.key != 'id':
                    setattr(stored, attr.key, getattr(entity, attr.key))

        self._commit()
        logger.debug("Updated %s %s", self.kind, stored.id)
        return stored

    def delete(self, entity_id: int) -> bool:
        """Delete a record once the consistency rules allow it.

        Returns:
            True if the record was deleted, False if it did not exist

        Raises:
            PreconditionViolation: If a rule blocks the delete; nothing is changed
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False

        try:
            self.rules.check_delete(self.index, entity)
        except PreconditionViolation as e:
            logger.info("Refused to delete %s %s (%s)", self.kind, entity_id, e.rule)
            raise

        try:
            self.rules.apply_side_effects(self.session, self.index, entity)
            self.session.delete(entity)
        except Exception:
            self.session.rollback()
            raise
        self._commit()
        logger.debug("Deleted %s %s", self.kind, entity_id)
        return True

    def _commit(self) -> None:
        commit(self.session, self.kind)

def commit(session: Session, kind: str) -> None:
    """Commit the session, turning integrity errors into ConstraintViolation.

    The session is rolled back on any failure so it stays usable.
    """
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning("Constraint violation on %s: %s", kind, e.orig)
        raise ConstraintViolation(kind, str(e.orig)) from e
    except Exception:
        session.rollback()
        raise
