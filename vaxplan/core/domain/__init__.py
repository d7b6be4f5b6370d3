"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from vaxplan.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from vaxplan.core.domain.value_objects import (
    Email,
    PhoneNumber,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Value Objects
    "ValueObject",
    "Email",
    "PhoneNumber",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
]
