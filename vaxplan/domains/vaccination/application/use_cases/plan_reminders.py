"""
Plan Reminders Use Case

Plans notification reminders for a patient's recommendations.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from vaxplan.core.domain import DomainException
from vaxplan.domains.vaccination.application.pipeline import (
    generate_recommendations,
    plan_reminders,
)
from vaxplan.domains.vaccination.application.ports import IVaccineCatalog
from vaxplan.domains.vaccination.domain.entities import Patient, ReminderPreferences
from vaxplan.domains.vaccination.domain.services import ReminderPlan

logger = logging.getLogger(__name__)


@dataclass
class PlanRemindersRequest:
    """Request for reminder planning."""

    patient: Patient
    preferences: ReminderPreferences
    now: datetime | None = None


@dataclass
class PlanRemindersResponse:
    """Reminders planned for the patient."""

    plan: ReminderPlan
    recommendation_count: int


class PlanRemindersUseCase:
    """
    Use case for reminder planning.

    Reminders follow recommendation due dates, not optimized appointment
    dates, so the schedule optimizer is not involved.
    """

    def __init__(self, catalog: IVaccineCatalog):
        self.catalog = catalog

    def execute(self, request: PlanRemindersRequest) -> PlanRemindersResponse:
        """
        Execute reminder planning.

        Args:
            request: Planning request

        Returns:
            Reminder plan with summary counts
        """
        now = request.now or datetime.now()

        try:
            recommendations = generate_recommendations(
                request.patient,
                self.catalog.list_all(),
                today=now.date(),
            )
            plan = plan_reminders(recommendations, request.preferences, now=now)

            logger.info(
                f"Planned {len(plan.reminders)} reminders for patient {request.patient.id} "
                f"({plan.scheduled_count} scheduled, {plan.sent_count} sent)"
            )
            return PlanRemindersResponse(plan=plan, recommendation_count=len(recommendations))

        except DomainException as e:
            logger.warning(f"Domain error planning reminders: {e}")
            raise
