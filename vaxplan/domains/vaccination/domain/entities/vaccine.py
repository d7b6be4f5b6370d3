"""
Vaccine Definition

Catalog entry describing who may receive a vaccine and how often.
"""

from dataclasses import dataclass
from typing import Any

from vaxplan.core.domain import ValidationException, ValueObject

from ..value_objects.age_group import AgeGroupRule
from ..value_objects.vaccination_types import VaccinePriorityClass


@dataclass(frozen=True)
class VaccineDefinition(ValueObject):
    """
    Immutable vaccine catalog entry.

    ``interval_days`` is the re-dose interval; 0 means a single lifetime dose.
    """

    name: str
    description: str
    age_groups: tuple[AgeGroupRule, ...]
    contraindications: tuple[str, ...]
    interval_days: int
    booster_required: bool
    travel_regions: tuple[str, ...]
    priority_class: VaccinePriorityClass
    diseases: tuple[str, ...]

    def _validate(self) -> None:
        if not self.name:
            raise ValidationException("Vaccine name is required", field="name")
        if self.interval_days < 0:
            raise ValidationException("Dosing interval cannot be negative", field="interval_days")

    @property
    def is_single_dose(self) -> bool:
        """Single lifetime dose (no re-dose interval)."""
        return self.interval_days == 0

    @property
    def is_travel_vaccine(self) -> bool:
        """Travel vaccine gated on specific destinations."""
        return self.priority_class == VaccinePriorityClass.TRAVEL and bool(self.travel_regions)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on name, description or covered disease."""
        needle = term.lower()
        return (
            needle in self.name.lower()
            or needle in self.description.lower()
            or any(needle in disease.lower() for disease in self.diseases)
        )

    def describe_interval(self) -> str:
        """Human-readable dosing interval (e.g. "5 years 0 months")."""
        if self.is_single_dose:
            return "Single dose"
        return f"{self.interval_days // 365} years {(self.interval_days % 365) // 30} months"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "age_groups": [str(rule) for rule in self.age_groups],
            "contraindications": list(self.contraindications),
            "interval_days": self.interval_days,
            "interval": self.describe_interval(),
            "booster_required": self.booster_required,
            "travel_regions": list(self.travel_regions),
            "priority_class": self.priority_class.value,
            "diseases": list(self.diseases),
        }
