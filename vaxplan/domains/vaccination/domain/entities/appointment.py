"""
Scheduled Appointment

One vaccination visit produced by the schedule optimizer.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from vaxplan.core.domain import ValueObject

from .recommendation import VaccineRecommendation


@dataclass(frozen=True)
class ScheduledAppointment(ValueObject):
    """
    Appointment built by a single optimization run.

    Not incrementally updatable: a changed input regenerates the whole schedule.
    """

    date: date
    vaccines: tuple[VaccineRecommendation, ...]
    conflicts: tuple[str, ...] = ()
    notes: str = ""

    def _validate(self) -> None:
        object.__setattr__(self, "vaccines", tuple(self.vaccines))
        object.__setattr__(self, "conflicts", tuple(self.conflicts))

    @property
    def vaccine_names(self) -> list[str]:
        return [rec.vaccine for rec in self.vaccines]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def days_from(self, other: date) -> int:
        """Absolute distance in days between this appointment and ``other``."""
        return abs((self.date - other).days)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "date": self.date.isoformat(),
            "vaccines": [rec.to_dict() for rec in self.vaccines],
            "conflicts": list(self.conflicts),
            "notes": self.notes,
        }
