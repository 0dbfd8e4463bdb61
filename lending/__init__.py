"""Lending catalog: books, copies, borrowers and the rules that keep them consistent."""
from .errors import LendingError, NotFound, ConstraintViolation, PreconditionViolation
from .rules import ConsistencyRules, DeleteRule
from .catalog import LendingCatalog

__all__ = [
    'LendingError',
    'NotFound',
    'ConstraintViolation',
    'PreconditionViolation',
    'ConsistencyRules',
    'DeleteRule',
    'LendingCatalog'
]
