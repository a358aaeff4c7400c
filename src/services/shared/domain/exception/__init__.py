from .exceptions import (
    BusinessRuleViolationException,
    ConflictError,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "ConflictError",
]
