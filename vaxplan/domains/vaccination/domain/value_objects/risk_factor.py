"""
Risk Factor Value Object

One contribution to a patient's overall vaccination risk score.
"""

from dataclasses import dataclass
from typing import Any

from vaxplan.core.domain import ValidationException, ValueObject

from .vaccination_types import RiskLevel


@dataclass(frozen=True)
class RiskFactor(ValueObject):
    """
    Risk factor produced by the risk scorer.

    Recomputed on every evaluation, never stored.
    """

    category: str
    factor: str
    risk_level: RiskLevel
    impact: int
    description: str

    def _validate(self) -> None:
        if self.impact < 0:
            raise ValidationException("Risk factor impact cannot be negative", field="impact")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "category": self.category,
            "factor": self.factor,
            "risk_level": self.risk_level.value,
            "impact": self.impact,
            "description": self.description,
        }
