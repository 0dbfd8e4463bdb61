# lending/errors.py
from typing import Any, Optional


class LendingError(Exception):
    """Base class for every error raised by the lending catalog."""


class NotFound(LendingError, LookupError):
    """An operation referenced an identifier with no stored record."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id!r} not found")


class ConstraintViolation(LendingError, ValueError):
    """A uniqueness or required-field rule was broken on create/update."""

    def __init__(self, entity: str, detail: str):
        self.entity = entity
        self.detail = detail
        super().__init__(f"{entity} violates a storage constraint: {detail}")


class PreconditionViolation(LendingError):
    """A relationship rule blocked the requested change.

    Attributes:
        rule: Name of the rule that failed (e.g. ``book_has_copies``)
        entity: Kind of the record the change was aimed at
        entity_id: Identifier of that record
    """

    def __init__(self, rule: str, entity: str, entity_id: Any, message: Optional[str] = None):
        self.rule = rule
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"Cannot change {entity} {entity_id}: rule '{rule}' failed")
