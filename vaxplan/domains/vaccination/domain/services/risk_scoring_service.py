"""
Risk Scoring Domain Service

Aggregates demographic, clinical, travel and vaccination-gap risk factors
into one 0-100 score.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..data import rule_tables as rules
from ..data.outbreaks import OUTBREAK_FIXTURE
from ..entities.outbreak import Outbreak
from ..entities.patient import Patient, TravelPlan
from ..entities.recommendation import VaccineRecommendation
from ..value_objects.risk_factor import RiskFactor
from ..value_objects.vaccination_types import RiskLevel

logger = logging.getLogger(__name__)


def _in_lookup(label: str, lookup: Iterable[str]) -> bool:
    return label.lower() in {item.lower() for item in lookup}


@dataclass
class RiskAssessment:
    """Result of risk assessment."""

    risk_factors: list[RiskFactor]
    overall_score: int
    level: str
    high_priority_count: int
    requires_consultation: bool
    outbreak_focus: str
    outbreaks: list[Outbreak] = field(default_factory=list)

    def factors_by_category(self) -> dict[str, list[RiskFactor]]:
        """Group factors by category, keeping first-seen category order."""
        grouped: dict[str, list[RiskFactor]] = {}
        for factor in self.risk_factors:
            grouped.setdefault(factor.category, []).append(factor)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "overall_score": self.overall_score,
            "level": self.level,
            "high_priority_count": self.high_priority_count,
            "requires_consultation": self.requires_consultation,
            "risk_factors": [f.to_dict() for f in self.risk_factors],
            "outbreak_focus": self.outbreak_focus,
            "outbreaks": [o.to_dict() for o in self.outbreaks],
        }


class RiskScoringService:
    """
    Domain service for vaccination risk scoring.

    Score = min(100, 20 baseline + sum of factor impacts). Every impact is
    non-negative, so only the upper clamp is needed.

    Example:
        ```python
        service = RiskScoringService()

        factors, score = service.score(patient, recommendations)
        assessment = service.assess(patient, recommendations)

        print(f"{assessment.level}: {assessment.overall_score}")
        ```
    """

    def __init__(self, outbreaks: Sequence[Outbreak] = OUTBREAK_FIXTURE):
        """
        Initialize risk scoring service.

        Args:
            outbreaks: Outbreak snapshot reported with each assessment
        """
        self.outbreaks = list(outbreaks)

    def score(
        self,
        patient: Patient,
        recommendations: Sequence[VaccineRecommendation],
    ) -> tuple[list[RiskFactor], int]:
        """
        Compute risk factors and the overall score.

        Args:
            patient: Patient profile
            recommendations: Recommendations generated for the patient

        Returns:
            Tuple of (risk factors, overall score in [0, 100])
        """
        factors: list[RiskFactor] = []
        factors.extend(self._age_factors(patient))
        factors.extend(self._condition_factors(patient))
        factors.extend(self._travel_factors(patient))
        factors.extend(self._vaccination_gap_factors(recommendations))

        total_impact = sum(factor.impact for factor in factors)
        overall = min(rules.MAX_RISK_SCORE, rules.BASELINE_RISK + total_impact)

        logger.debug(f"Risk score {overall} for patient {patient.id} from {len(factors)} factors")
        return factors, overall

    def assess(
        self,
        patient: Patient,
        recommendations: Sequence[VaccineRecommendation],
    ) -> RiskAssessment:
        """
        Full risk assessment: score, level, consultation flag and outbreak advisory.
        """
        factors, overall = self.score(patient, recommendations)
        high_priority_count = sum(1 for rec in recommendations if rec.is_high_priority)

        return RiskAssessment(
            risk_factors=factors,
            overall_score=overall,
            level=self.level_for(overall),
            high_priority_count=high_priority_count,
            requires_consultation=overall >= rules.HIGH_RISK_LEVEL_THRESHOLD,
            outbreak_focus=self.outbreak_focus(patient),
            outbreaks=list(self.outbreaks),
        )

    @staticmethod
    def level_for(score: int) -> str:
        """Convert score to an overall risk label."""
        if score >= rules.HIGH_RISK_LEVEL_THRESHOLD:
            return "High Risk"
        elif score >= rules.MEDIUM_RISK_LEVEL_THRESHOLD:
            return "Medium Risk"
        else:
            return "Low Risk"

    @staticmethod
    def outbreak_focus(patient: Patient) -> str:
        """Advisory on which vaccines current outbreaks make more important."""
        focus = "travel-related vaccines" if patient.travel_plans else "routine immunizations"
        return (
            f"Current outbreak patterns suggest increased importance for {focus} "
            f"to maintain herd immunity and individual protection."
        )

    def _age_factors(self, patient: Patient) -> list[RiskFactor]:
        if patient.age >= rules.ADVANCED_AGE_THRESHOLD:
            return [
                RiskFactor(
                    category="Demographics",
                    factor="Advanced Age (65+)",
                    risk_level=RiskLevel.HIGH,
                    impact=rules.ADVANCED_AGE_IMPACT,
                    description=(
                        "Older adults have higher risk for severe complications "
                        "from vaccine-preventable diseases"
                    ),
                )
            ]
        if patient.age <= rules.YOUNG_AGE_THRESHOLD:
            return [
                RiskFactor(
                    category="Demographics",
                    factor="Young Age (<2 years)",
                    risk_level=RiskLevel.HIGH,
                    impact=rules.YOUNG_AGE_IMPACT,
                    description="Young children have immature immune systems and higher risk of complications",
                )
            ]
        return []

    def _condition_factors(self, patient: Patient) -> list[RiskFactor]:
        factors: list[RiskFactor] = []
        for condition in patient.health_conditions:
            if _in_lookup(condition, rules.HIGH_RISK_CONDITIONS):
                factors.append(
                    RiskFactor(
                        category="Health Conditions",
                        factor=condition,
                        risk_level=RiskLevel.HIGH,
                        impact=rules.HIGH_RISK_CONDITION_IMPACT,
                        description=f"{condition} increases risk of severe complications from infectious diseases",
                    )
                )
            elif _in_lookup(condition, rules.MEDIUM_RISK_CONDITIONS):
                factors.append(
                    RiskFactor(
                        category="Health Conditions",
                        factor=condition,
                        risk_level=RiskLevel.MEDIUM,
                        impact=rules.MEDIUM_RISK_CONDITION_IMPACT,
                        description=f"{condition} may increase risk of complications from certain diseases",
                    )
                )
        return factors

    def _travel_factors(self, patient: Patient) -> list[RiskFactor]:
        factors: list[RiskFactor] = []
        for trip in patient.travel_plans:
            if self._destination_in(trip, rules.HIGH_RISK_REGIONS):
                factors.append(
                    RiskFactor(
                        category="Travel",
                        factor=f"High-risk travel to {trip.destination}",
                        risk_level=RiskLevel.HIGH,
                        impact=rules.HIGH_RISK_TRAVEL_IMPACT,
                        description=(
                            f"Travel to {trip.destination} requires additional vaccinations "
                            f"due to endemic diseases"
                        ),
                    )
                )
            elif self._destination_in(trip, rules.MEDIUM_RISK_REGIONS):
                factors.append(
                    RiskFactor(
                        category="Travel",
                        factor=f"Medium-risk travel to {trip.destination}",
                        risk_level=RiskLevel.MEDIUM,
                        impact=rules.MEDIUM_RISK_TRAVEL_IMPACT,
                        description=f"Travel to {trip.destination} may require additional precautions",
                    )
                )
        return factors

    def _vaccination_gap_factors(self, recommendations: Sequence[VaccineRecommendation]) -> list[RiskFactor]:
        high_priority = sum(1 for rec in recommendations if rec.is_high_priority)
        if high_priority == 0:
            return []
        return [
            RiskFactor(
                category="Vaccination Status",
                factor=f"{high_priority} high-priority vaccines needed",
                risk_level=RiskLevel.HIGH,
                impact=high_priority * rules.MISSING_HIGH_PRIORITY_IMPACT,
                description="Missing high-priority vaccinations increases disease susceptibility",
            )
        ]

    @staticmethod
    def _destination_in(trip: TravelPlan, regions: Iterable[str]) -> bool:
        destination = trip.destination.lower()
        return any(region.lower() in destination for region in regions)
