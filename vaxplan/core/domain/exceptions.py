"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate HTTP responses in the API layer.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for invalid patient records, travel plans, reminder preferences, etc.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when a named entity is not found (e.g. an unknown vaccine name).
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )
