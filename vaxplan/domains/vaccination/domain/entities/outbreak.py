"""
Outbreak

Disease outbreak record shown alongside the risk assessment.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from vaxplan.core.domain import ValueObject

from ..value_objects.vaccination_types import OutbreakTrend, RiskLevel


@dataclass(frozen=True)
class Outbreak(ValueObject):
    """Outbreak snapshot. Severity reuses the low/medium/high risk scale."""

    disease: str
    location: str
    severity: RiskLevel
    cases: int
    trend: OutbreakTrend
    last_updated: date

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "disease": self.disease,
            "location": self.location,
            "severity": self.severity.value,
            "cases": self.cases,
            "trend": self.trend.value,
            "last_updated": self.last_updated.isoformat(),
        }
