# lending/rules.py
"""Cross-entity rules evaluated when a record is deleted.

Each model class can carry any number of preconditions (a delete is refused
when one of them is blocked) and side effects (changes staged in the same
session as the delete, so they commit or roll back together with it).
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type
import logging

from sqlalchemy.orm import Session

from lending.errors import PreconditionViolation
from lending.sa.index import RelationshipIndex
from lending.sa.models import Book, Copy, Publisher, User, Borrowing

logger = logging.getLogger(__name__)

SideEffect = Callable[[Session, RelationshipIndex, Any], None]

@dataclass(frozen=True)
class DeleteRule:
    """A precondition a delete has to satisfy.

    ``blocks`` returns True when the record must not be deleted.
    """
    name: str
    message: str
    blocks: Callable[[RelationshipIndex, Any], bool]

    def describe(self, entity: Any) -> str:
        return self.message.format(kind=type(entity).__name__, id=entity.id)

class ConsistencyRules:
    """Registry of delete preconditions and side effects per model class."""

    def __init__(self):
        self._preconditions: Dict[Type, List[DeleteRule]] = {}
        self._side_effects: Dict[Type, List[SideEffect]] = {}

    @classmethod
    def default(cls) -> "ConsistencyRules":
        """The standard rule set for the lending catalog."""
        rules = cls()
        rules.add_precondition(Book, DeleteRule(
            name="book_has_copies",
            message="Cannot delete {kind} {id} that still has Copies",
            blocks=lambda index, book: bool(index.copies_of_book(book.id)),
        ))
        rules.add_precondition(Copy, DeleteRule(
            name="copy_is_borrowed",
            message="Cannot delete {kind} {id} that is currently Borrowed",
            blocks=lambda index, copy: copy.is_borrowed,
        ))
        rules.add_precondition(Publisher, DeleteRule(
            name="publisher_has_books",
            message="Cannot delete {kind} {id} that still has Books",
            blocks=lambda index, publisher: index.count_books_of_publisher(publisher.id) > 0,
        ))
        rules.add_precondition(User, DeleteRule(
            name="user_has_borrowings",
            message="Cannot delete {kind} {id} with existing Borrowings",
            blocks=lambda index, user: bool(index.borrowings_of_user(user.id)),
        ))
        rules.add_side_effect(Borrowing, release_borrowed_copy)
        return rules

    def add_precondition(self, model: Type, rule: DeleteRule) -> None:
        self._preconditions.setdefault(model, []).append(rule)

    def add_side_effect(self, model: Type, effect: SideEffect) -> None:
        self._side_effects.setdefault(model, []).append(effect)

    def rules_for(self, model: Type) -> List[DeleteRule]:
        return list(self._preconditions.get(model, []))

    def side_effects_for(self, model: Type) -> List[SideEffect]:
        return list(self._side_effects.get(model, []))

    def blocking_rule(self, index: RelationshipIndex, entity: Any) -> Optional[DeleteRule]:
        """First precondition that blocks deleting ``entity``, or None."""
        for rule in self._preconditions.get(type(entity), []):
            if rule.blocks(index, entity):
                return rule
        return None

    def check_delete(self, index: RelationshipIndex, entity: Any) -> None:
        """Raise PreconditionViolation if ``entity`` may not be deleted."""
        rule = self.blocking_rule(index, entity)
        if rule is not None:
            raise PreconditionViolation(
                rule.name,
                type(entity).__name__,
                entity.id,
                rule.describe(entity),
            )

    def apply_side_effects(self, session: Session, index: RelationshipIndex, entity: Any) -> None:
        """Stage the side effects of deleting ``entity``. The caller commits."""
        for effect in self._side_effects.get(type(entity), []):
            effect(session, index, entity)

def release_borrowed_copy(session: Session, index: RelationshipIndex, borrowing: Borrowing) -> None:
    """Put the copy referenced by a deleted borrowing back to Available."""
    copy = session.get(Copy, borrowing.copy_id)
    if copy is None:
        logger.warning("Borrowing %s references missing copy %s", borrowing.id, borrowing.copy_id)
        return
    copy.release()
    logger.debug("Copy %s released by deletion of borrowing %s", copy.id, borrowing.id)
