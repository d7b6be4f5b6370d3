"""
Vaccine Recommendation

Output of the recommendation generator for one eligible vaccine.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from vaxplan.core.domain import ValidationException, ValueObject

from ..value_objects.vaccination_types import RecommendationPriority


@dataclass(frozen=True)
class VaccineRecommendation(ValueObject):
    """
    Recommendation to administer a vaccine.

    Produced fresh per evaluation and replaced, never merged, when the
    patient changes.
    """

    vaccine: str
    priority: RecommendationPriority
    due_date: date
    reason: str
    risk_score: int
    interactions: tuple[str, ...] = ()

    def _validate(self) -> None:
        if not 0 <= self.risk_score <= 100:
            raise ValidationException(
                f"Risk score must be between 0 and 100, got {self.risk_score}",
                field="risk_score",
            )
        object.__setattr__(self, "interactions", tuple(self.interactions))

    @property
    def is_high_priority(self) -> bool:
        return self.priority == RecommendationPriority.HIGH

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "vaccine": self.vaccine,
            "priority": self.priority.value,
            "due_date": self.due_date.isoformat(),
            "reason": self.reason,
            "risk_score": self.risk_score,
            "interactions": list(self.interactions),
        }
