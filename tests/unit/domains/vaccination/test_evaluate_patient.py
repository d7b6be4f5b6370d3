"""
Tests for the pipeline functions and the patient evaluation use cases.
"""

from unittest.mock import MagicMock

import pytest

from vaxplan.core.domain import ValidationException
from vaxplan.domains.vaccination.application import pipeline
from vaxplan.domains.vaccination.application.ports import IVaccineCatalog
from vaxplan.domains.vaccination.application.use_cases import (
    EvaluatePatientRequest,
    EvaluatePatientUseCase,
    PlanRemindersRequest,
    PlanRemindersUseCase,
)
from vaxplan.domains.vaccination.domain.entities import ReminderPreferences
from vaxplan.domains.vaccination.domain.value_objects import RecommendationPriority, ScheduleTimeframe
from vaxplan.domains.vaccination.infrastructure.repositories import StaticVaccineCatalog

from tests.utils import NOW, TODAY

AFRICA_HIGH_PRIORITY = ["Hepatitis A", "Yellow Fever", "Typhoid"]
ROUTINE_ADULT = ["COVID-19 (mRNA)", "Influenza (Flu)", "Tetanus-Diphtheria (Td)", "Hepatitis B"]


@pytest.fixture
def evaluate_use_case() -> EvaluatePatientUseCase:
    return EvaluatePatientUseCase(catalog=StaticVaccineCatalog())


@pytest.mark.unit
class TestPipelineFunctions:
    """Tests for the stateless pipeline entry points."""

    def test_compute_eligibility(self, africa_traveler):
        eligibility = pipeline.compute_eligibility(africa_traveler)

        assert eligibility["Yellow Fever"] is True
        assert eligibility["Japanese Encephalitis"] is False
        assert len(eligibility) == 10

    def test_generate_recommendations(self, africa_traveler):
        recs = pipeline.generate_recommendations(africa_traveler, today=TODAY)

        assert [r.vaccine for r in recs] == AFRICA_HIGH_PRIORITY + ROUTINE_ADULT
        assert all(r.due_date == TODAY.replace(day=22) for r in recs[:3])

    def test_assess_risk(self, africa_traveler):
        recs = pipeline.generate_recommendations(africa_traveler, today=TODAY)
        assessment = pipeline.assess_risk(africa_traveler, recs)

        # baseline 20 + high-risk travel 15 + three high-priority vaccines 15
        assert assessment.overall_score == 50
        assert assessment.level == "Medium Risk"

    def test_pipeline_is_deterministic(self, africa_traveler):
        """Should produce identical output for identical input."""
        first = pipeline.generate_recommendations(africa_traveler, today=TODAY)
        second = pipeline.generate_recommendations(africa_traveler, today=TODAY)
        assert first == second

        assert pipeline.optimize_schedule(first, africa_traveler, today=TODAY) == pipeline.optimize_schedule(
            second, africa_traveler, today=TODAY
        )

    def test_plan_reminders(self, healthy_adult):
        recs = pipeline.generate_recommendations(healthy_adult, today=TODAY)
        plan = pipeline.plan_reminders(recs, ReminderPreferences(), now=NOW)

        assert len(plan.reminders) == len(recs)


@pytest.mark.unit
class TestEvaluatePatientUseCase:
    """Tests for EvaluatePatientUseCase."""

    def test_full_evaluation(self, evaluate_use_case, africa_traveler):
        result = evaluate_use_case.execute(EvaluatePatientRequest(patient=africa_traveler, today=TODAY))

        assert result.evaluated_on == TODAY
        assert result.eligibility["Japanese Encephalitis"] is False
        assert len(result.recommendations) == 7
        assert result.risk_assessment.overall_score == 50
        assert sorted(n for a in result.appointments for n in a.vaccine_names) == sorted(
            AFRICA_HIGH_PRIORITY + ROUTINE_ADULT
        )
        # 100 - 7 * 10 - 20
        assert result.protection_score == 10
        assert result.reminder_plan is None

    def test_timeframe_filters_schedule(self, evaluate_use_case, africa_traveler):
        full = evaluate_use_case.execute(EvaluatePatientRequest(patient=africa_traveler, today=TODAY))
        limited = evaluate_use_case.execute(
            EvaluatePatientRequest(patient=africa_traveler, today=TODAY, timeframe=ScheduleTimeframe.THREE_MONTHS)
        )

        assert limited.appointments == full.appointments
        assert limited.recommendations == full.recommendations

    def test_reminders_with_preferences(self, evaluate_use_case, africa_traveler):
        """Should plan reminders from the recommendation due dates."""
        result = evaluate_use_case.execute(
            EvaluatePatientRequest(
                patient=africa_traveler,
                reminder_preferences=ReminderPreferences(),
                now=NOW,
            )
        )
        plan = result.reminder_plan

        assert result.evaluated_on == TODAY
        # 7 push reminders plus 3 final reminders for high priority
        assert len(plan.reminders) == 10
        assert plan.high_priority_count == 6
        assert plan.sent_count == 7
        assert plan.scheduled_count == 3

    def test_senior_patient_recommendations(self, evaluate_use_case, senior_cardiac_patient):
        result = evaluate_use_case.execute(EvaluatePatientRequest(patient=senior_cardiac_patient, today=TODAY))
        high = [r.vaccine for r in result.recommendations if r.priority == RecommendationPriority.HIGH]

        assert high == ["Meningococcal ACWY", "Pneumococcal (PPSV23)"]
        assert result.risk_assessment.requires_consultation is True

    def test_unexpected_error_is_reraised(self, healthy_adult):
        """Should log and propagate catalog failures."""
        catalog = MagicMock(spec=IVaccineCatalog)
        catalog.list_all.side_effect = RuntimeError("catalog unavailable")

        with pytest.raises(RuntimeError, match="catalog unavailable"):
            EvaluatePatientUseCase(catalog=catalog).execute(EvaluatePatientRequest(patient=healthy_adult))

    def test_domain_error_is_reraised(self, healthy_adult):
        catalog = MagicMock(spec=IVaccineCatalog)
        catalog.list_all.side_effect = ValidationException("broken catalog entry")

        with pytest.raises(ValidationException):
            EvaluatePatientUseCase(catalog=catalog).execute(EvaluatePatientRequest(patient=healthy_adult))


@pytest.mark.unit
class TestPlanRemindersUseCase:
    """Tests for PlanRemindersUseCase."""

    def test_plan_reminders(self, healthy_adult):
        use_case = PlanRemindersUseCase(catalog=StaticVaccineCatalog())
        result = use_case.execute(
            PlanRemindersRequest(patient=healthy_adult, preferences=ReminderPreferences(), now=NOW)
        )

        assert result.recommendation_count == 4
        assert len(result.plan.reminders) == 4
        # Routine vaccines are due today, so their base reminders already fired
        assert result.plan.sent_count == 4
