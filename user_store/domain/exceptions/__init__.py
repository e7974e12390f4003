"""Domain exceptions - entity invariants and missing records."""

from user_store.domain.exceptions.domain_exceptions import (
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    InvalidEntityStateException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "BusinessRuleViolationException",
    "EntityNotFoundException",
]
