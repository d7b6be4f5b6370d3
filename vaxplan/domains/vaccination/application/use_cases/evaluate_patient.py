"""
Evaluate Patient Use Case

Runs the whole vaccination pipeline for one patient record.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from vaxplan.core.domain import DomainException
from vaxplan.domains.vaccination.application.pipeline import (
    assess_risk,
    compute_eligibility,
    generate_recommendations,
    optimize_schedule,
    plan_reminders,
)
from vaxplan.domains.vaccination.application.ports import IVaccineCatalog
from vaxplan.domains.vaccination.domain.entities import (
    Patient,
    ReminderPreferences,
    ScheduledAppointment,
    VaccineRecommendation,
)
from vaxplan.domains.vaccination.domain.services import (
    ReminderPlan,
    RiskAssessment,
    ScheduleOptimizer,
)
from vaxplan.domains.vaccination.domain.value_objects import ScheduleTimeframe

logger = logging.getLogger(__name__)


@dataclass
class EvaluatePatientRequest:
    """Request for a full patient evaluation."""

    patient: Patient
    reminder_preferences: ReminderPreferences | None = None
    timeframe: ScheduleTimeframe | None = None
    today: date | None = None
    now: datetime | None = None


@dataclass
class EvaluatePatientResponse:
    """Everything derived from one patient record."""

    patient: Patient
    eligibility: dict[str, bool]
    recommendations: list[VaccineRecommendation]
    risk_assessment: RiskAssessment
    appointments: list[ScheduledAppointment]
    protection_score: int
    reminder_plan: ReminderPlan | None = None
    evaluated_on: date = field(default_factory=date.today)


class EvaluatePatientUseCase:
    """
    Use case for patient evaluation.

    Eligibility, recommendations, risk assessment and schedule are always
    computed; reminders only when preferences are supplied. A timeframe
    narrows the returned schedule without affecting how it is built.
    """

    def __init__(self, catalog: IVaccineCatalog):
        """
        Initialize use case.

        Args:
            catalog: Vaccine catalog and outbreak source
        """
        self.catalog = catalog

    def execute(self, request: EvaluatePatientRequest) -> EvaluatePatientResponse:
        """
        Execute patient evaluation.

        Args:
            request: Evaluation request

        Returns:
            Evaluation response

        Raises:
            DomainException: If a derived record violates a domain invariant
        """
        today = request.today or (request.now.date() if request.now else date.today())
        patient = request.patient

        try:
            vaccines = self.catalog.list_all()

            eligibility = compute_eligibility(patient, vaccines)
            recommendations = generate_recommendations(patient, vaccines, today=today)
            risk = assess_risk(patient, recommendations, self.catalog.list_outbreaks())
            appointments = optimize_schedule(recommendations, patient, today=today)

            if request.timeframe is not None:
                appointments = ScheduleOptimizer.within_timeframe(appointments, request.timeframe, today)

            reminder_plan = None
            if request.reminder_preferences is not None:
                reminder_plan = plan_reminders(recommendations, request.reminder_preferences, now=request.now)

            logger.info(
                f"Evaluated patient {patient.id}: {len(recommendations)} recommendations, "
                f"{len(appointments)} appointments, risk={risk.overall_score} ({risk.level})"
            )

            return EvaluatePatientResponse(
                patient=patient,
                eligibility=eligibility,
                recommendations=recommendations,
                risk_assessment=risk,
                appointments=appointments,
                protection_score=ScheduleOptimizer.protection_score(recommendations),
                reminder_plan=reminder_plan,
                evaluated_on=today,
            )

        except DomainException as e:
            logger.warning(f"Domain error evaluating patient {patient.id}: {e}")
            raise
        except Exception as e:
            logger.error(f"Error evaluating patient {patient.id}: {e}", exc_info=True)
            raise
