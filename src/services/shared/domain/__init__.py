from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    ConflictError,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from .repository import Repository
from .value_object import Currency, IsoDateTime, Money

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "ConflictError",
    "Currency",
    "Money",
    "IsoDateTime",
]
