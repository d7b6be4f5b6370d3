"""
Patient Entity for Vaccination Domain

Represents the patient profile evaluated by the vaccination pipeline.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import uuid4

from vaxplan.core.domain import ValidationException, ValueObject


@dataclass(frozen=True)
class TravelPlan(ValueObject):
    """Planned trip. An absent return date means an open-ended trip."""

    destination: str
    departure_date: date
    return_date: date | None = None

    def _validate(self) -> None:
        if not self.destination or not self.destination.strip():
            raise ValidationException("Travel destination is required", field="destination")
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValidationException(
                f"Return date {self.return_date} precedes departure date {self.departure_date}",
                field="return_date",
            )

    def days_until_departure(self, today: date) -> int:
        """Whole days from ``today`` to departure (negative once departed)."""
        return (self.departure_date - today).days

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "destination": self.destination,
            "departure_date": self.departure_date.isoformat(),
            "return_date": self.return_date.isoformat() if self.return_date else None,
        }


@dataclass(frozen=True)
class PreviousVaccination(ValueObject):
    """Record of a dose the patient already received."""

    vaccine: str
    administered_on: date
    next_due: date | None = None

    def matches(self, vaccine_name: str) -> bool:
        """Check if this record refers to ``vaccine_name`` (case-insensitive containment)."""
        return vaccine_name.lower() in self.vaccine.lower()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "vaccine": self.vaccine,
            "administered_on": self.administered_on.isoformat(),
            "next_due": self.next_due.isoformat() if self.next_due else None,
        }


@dataclass(frozen=True)
class Patient(ValueObject):
    """
    Patient profile for vaccination planning.

    Immutable: any profile change produces a new Patient and every derived
    result (recommendations, risk, schedule, reminders) is recomputed.

    Example:
        ```python
        patient = Patient(
            name="Ana Torres",
            age=70,
            health_conditions=("Heart Disease",),
            travel_plans=(TravelPlan("Sub-Saharan Africa", date(2025, 3, 1)),),
        )
        patient.has_condition("heart disease")  # True
        ```
    """

    name: str = ""
    age: int = 0
    date_of_birth: date | None = None
    health_conditions: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()
    travel_plans: tuple[TravelPlan, ...] = ()
    previous_vaccinations: tuple[PreviousVaccination, ...] = ()
    id: str = field(default_factory=lambda: str(uuid4()))

    def _validate(self) -> None:
        """Validate patient after initialization."""
        if self.age < 0:
            raise ValidationException(f"Patient age cannot be negative: {self.age}", field="age")

        # Accept any iterable, store tuples
        object.__setattr__(self, "health_conditions", tuple(self.health_conditions))
        object.__setattr__(self, "allergies", tuple(self.allergies))
        object.__setattr__(self, "travel_plans", tuple(self.travel_plans))
        object.__setattr__(self, "previous_vaccinations", tuple(self.previous_vaccinations))

    @staticmethod
    def age_on(date_of_birth: date, today: date) -> int:
        """Calculate age in whole years from date of birth."""
        age = today.year - date_of_birth.year
        if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
            age -= 1
        return max(age, 0)

    def has_condition(self, condition: str) -> bool:
        """Check if patient has a specific health condition."""
        return condition.lower() in [c.lower() for c in self.health_conditions]

    def find_previous_vaccination(self, vaccine_name: str) -> PreviousVaccination | None:
        """First previous-dose record that refers to ``vaccine_name``."""
        for record in self.previous_vaccinations:
            if record.matches(vaccine_name):
                return record
        return None

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Convert to full dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "health_conditions": list(self.health_conditions),
            "allergies": list(self.allergies),
            "travel_plans": [t.to_dict() for t in self.travel_plans],
            "previous_vaccinations": [v.to_dict() for v in self.previous_vaccinations],
        }
