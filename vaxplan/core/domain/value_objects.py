"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self

from vaxplan.core.domain.exceptions import ValidationException


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity

    Example:
        ```python
        @dataclass(frozen=True)
        class TravelPlan(ValueObject):
            destination: str
            departure_date: date

            def _validate(self) -> None:
                if not self.destination:
                    raise ValidationException("Destination is required", field="destination")
        ```
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates and normalizes email addresses.
    """

    address: str

    def _validate(self) -> None:
        if not self.address or "@" not in self.address:
            raise ValidationException(f"Invalid email address: {self.address}", field="email_address")
        # Normalize to lowercase
        object.__setattr__(self, "address", self.address.lower().strip())

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """
    Phone number value object.

    Normalizes and validates phone numbers. Keeps digits and a leading "+".
    """

    number: str

    def _validate(self) -> None:
        cleaned = "".join(c for c in self.number if c.isdigit() or c == "+")
        if len(cleaned.lstrip("+")) < 8:
            raise ValidationException(f"Invalid phone number: {self.number}", field="phone_number")
        object.__setattr__(self, "number", cleaned)

    def __str__(self) -> str:
        return self.number


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValidationException(f"Invalid {cls.__name__}: {value}")
