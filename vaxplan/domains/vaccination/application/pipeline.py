"""
Vaccination Pipeline

In-process entry points for each pipeline stage. Every function is pure:
it reads immutable inputs and returns new records, so callers re-run the
stages whenever the patient record changes.

    Patient -> compute_eligibility -> generate_recommendations
            -> {assess_risk, optimize_schedule} -> plan_reminders
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from vaxplan.domains.vaccination.domain.data import OUTBREAK_FIXTURE, VACCINE_CATALOG
from vaxplan.domains.vaccination.domain.entities import (
    Outbreak,
    Patient,
    ReminderPreferences,
    ScheduledAppointment,
    VaccineDefinition,
    VaccineRecommendation,
)
from vaxplan.domains.vaccination.domain.services import (
    EligibilityService,
    RecommendationService,
    ReminderPlan,
    ReminderPlanner,
    RiskAssessment,
    RiskScoringService,
    ScheduleOptimizer,
)

# Services hold no mutable state, so module-level instances are shared
_eligibility = EligibilityService()
_recommendations = RecommendationService(_eligibility)
_optimizer = ScheduleOptimizer()
_reminders = ReminderPlanner()


def compute_eligibility(
    patient: Patient,
    catalog: Iterable[VaccineDefinition] = VACCINE_CATALOG,
) -> dict[str, bool]:
    """Eligibility of every catalog entry for the patient, in catalog order."""
    return _eligibility.evaluate(catalog, patient)


def generate_recommendations(
    patient: Patient,
    catalog: Iterable[VaccineDefinition] = VACCINE_CATALOG,
    today: date | None = None,
) -> list[VaccineRecommendation]:
    """Prioritized recommendations for every eligible vaccine."""
    return _recommendations.generate(catalog, patient, today=today)


def assess_risk(
    patient: Patient,
    recommendations: Sequence[VaccineRecommendation],
    outbreaks: Sequence[Outbreak] = OUTBREAK_FIXTURE,
) -> RiskAssessment:
    """Risk factors, overall score and level."""
    return RiskScoringService(outbreaks).assess(patient, recommendations)


def optimize_schedule(
    recommendations: Sequence[VaccineRecommendation],
    patient: Patient,
    today: date | None = None,
) -> list[ScheduledAppointment]:
    """Conflict-checked appointment schedule."""
    return _optimizer.optimize(recommendations, patient, today=today)


def plan_reminders(
    recommendations: Sequence[VaccineRecommendation],
    preferences: ReminderPreferences,
    now: datetime | None = None,
) -> ReminderPlan:
    """Reminders for each recommendation on every enabled channel."""
    return _reminders.plan(recommendations, preferences, now=now)


__all__ = [
    "compute_eligibility",
    "generate_recommendations",
    "assess_risk",
    "optimize_schedule",
    "plan_reminders",
]
