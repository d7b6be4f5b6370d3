"""
Recommendation Service for Vaccination Domain

Turns eligible catalog entries into prioritized recommendations.
"""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from ..data import rule_tables as rules
from ..entities.patient import Patient
from ..entities.recommendation import VaccineRecommendation
from ..entities.vaccine import VaccineDefinition
from ..value_objects.vaccination_types import RecommendationPriority, VaccinePriorityClass
from .eligibility_service import EligibilityService

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Domain service for vaccine recommendations.

    Priority, due date and risk score come from the vaccine's priority class:

    | class     | priority        | risk   | due            |
    |-----------|-----------------|--------|----------------|
    | routine   | medium          | 60     | today          |
    | high-risk | high (or drop)  | 85     | today          |
    | travel    | high / medium   | 80/65  | +7 / +14 days  |

    A recent previous dose overrides all of it with a low-priority
    recommendation due on the next-dose date.

    Example:
        ```python
        service = RecommendationService()
        recommendations = service.generate(VACCINE_CATALOG, patient, today=date.today())
        ```
    """

    def __init__(self, eligibility_service: EligibilityService | None = None):
        """
        Initialize recommendation service.

        Args:
            eligibility_service: Eligibility gate (default instance if not provided)
        """
        self.eligibility_service = eligibility_service or EligibilityService()

    def generate(
        self,
        catalog: Iterable[VaccineDefinition],
        patient: Patient,
        today: date | None = None,
    ) -> list[VaccineRecommendation]:
        """
        Generate recommendations for every eligible vaccine.

        Args:
            catalog: Vaccine definitions, iterated in order
            patient: Patient profile
            today: Reference date (defaults to the current date)

        Returns:
            Recommendations sorted by priority (high first); ties keep catalog order
        """
        today = today or date.today()
        recommendations: list[VaccineRecommendation] = []

        for vaccine in catalog:
            if not self.eligibility_service.is_eligible(vaccine, patient):
                continue

            recommendation = self.recommend(vaccine, patient, today)
            if recommendation is not None:
                recommendations.append(recommendation)

        # sorted() is stable: equal priorities keep catalog order
        recommendations = sorted(recommendations, key=lambda r: r.priority.weight, reverse=True)

        logger.info(
            f"Generated {len(recommendations)} recommendations for patient {patient.id} "
            f"({sum(1 for r in recommendations if r.is_high_priority)} high priority)"
        )
        return recommendations

    def recommend(
        self,
        vaccine: VaccineDefinition,
        patient: Patient,
        today: date,
    ) -> VaccineRecommendation | None:
        """
        Build the recommendation for a single eligible vaccine.

        Returns:
            The recommendation, or None when a high-risk vaccine does not apply
        """
        due_date = today
        priority = RecommendationPriority.MEDIUM
        reason = ""
        risk_score = 50

        if vaccine.priority_class == VaccinePriorityClass.ROUTINE:
            priority = RecommendationPriority.MEDIUM
            reason = "Routine vaccination recommended for age group"
            risk_score = 60

        elif vaccine.priority_class == VaccinePriorityClass.HIGH_RISK:
            if not self.is_high_risk_patient(patient):
                return None
            priority = RecommendationPriority.HIGH
            reason = "High-risk patient - priority vaccination"
            risk_score = 85

        elif vaccine.priority_class == VaccinePriorityClass.TRAVEL:
            if self.has_urgent_travel(patient, today):
                priority = RecommendationPriority.HIGH
                reason = "Urgent travel vaccination needed"
                risk_score = 80
                due_date = today + timedelta(days=rules.URGENT_TRAVEL_DUE_DAYS)
            else:
                priority = RecommendationPriority.MEDIUM
                reason = "Travel vaccination recommended"
                risk_score = 65
                due_date = today + timedelta(days=rules.STANDARD_TRAVEL_DUE_DAYS)

        # A recent previous dose always wins
        next_dose = self.next_dose_date(vaccine, patient, today)
        if next_dose is not None:
            due_date = next_dose
            priority = RecommendationPriority.LOW
            reason = "Next dose due based on previous vaccination"
            risk_score = 30

        return VaccineRecommendation(
            vaccine=vaccine.name,
            priority=priority,
            due_date=due_date,
            reason=reason,
            risk_score=risk_score,
            interactions=vaccine.contraindications,
        )

    def is_high_risk_patient(self, patient: Patient) -> bool:
        """Qualifying chronic condition or age 65+."""
        has_risk_condition = any(
            patient.has_condition(condition) for condition in rules.HIGH_RISK_QUALIFYING_CONDITIONS
        )
        return has_risk_condition or patient.age >= rules.HIGH_RISK_AGE_THRESHOLD

    def has_urgent_travel(self, patient: Patient, today: date) -> bool:
        """Any trip departing within the urgent window (already departed trips count)."""
        return any(
            trip.days_until_departure(today) <= rules.URGENT_TRAVEL_WINDOW_DAYS
            for trip in patient.travel_plans
        )

    def next_dose_date(self, vaccine: VaccineDefinition, patient: Patient, today: date) -> date | None:
        """
        Next-dose date from a previous vaccination, if it is still ahead.

        Returns:
            ``dose date + interval`` when the interval has not elapsed and that
            date is after ``today``; otherwise None
        """
        previous = patient.find_previous_vaccination(vaccine.name)
        if previous is None:
            return None

        days_since_last = (today - previous.administered_on).days
        if days_since_last >= vaccine.interval_days:
            return None

        next_due = previous.administered_on + timedelta(days=vaccine.interval_days)
        if next_due <= today:
            return None
        return next_due
