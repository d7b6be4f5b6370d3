"""
Vaccination API Routes

FastAPI router for vaccination planning endpoints. Every POST carries the
full patient profile; nothing is stored between requests.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from vaxplan.domains.vaccination.api.dependencies import (
    SettingsDep,
    get_evaluate_patient_use_case,
    get_list_outbreaks_use_case,
    get_plan_reminders_use_case,
    get_search_vaccine_catalog_use_case,
    get_vaccine_use_case,
)
from vaxplan.domains.vaccination.api.schemas import (
    AppointmentResponse,
    EligibilityResponse,
    OutbreakListResponse,
    OutbreakResponse,
    PatientEvaluationRequest,
    RecommendationListResponse,
    RecommendationResponse,
    ReminderPlanRequest,
    ReminderPlanResponse,
    RiskAssessmentResponse,
    ScheduleResponse,
    VaccinationPlanRequest,
    VaccinationPlanResponse,
    VaccineListResponse,
    VaccineResponse,
)
from vaxplan.domains.vaccination.application.use_cases import (
    EvaluatePatientRequest,
    EvaluatePatientResponse,
    EvaluatePatientUseCase,
    GetVaccineUseCase,
    ListOutbreaksUseCase,
    PlanRemindersRequest,
    PlanRemindersUseCase,
    SearchVaccineCatalogRequest,
    SearchVaccineCatalogUseCase,
)
from vaxplan.domains.vaccination.domain.value_objects import ScheduleTimeframe

router = APIRouter(prefix="/vaccination", tags=["Vaccination"])

# Type aliases for use case dependencies
EvaluatePatientUseCaseDep = Annotated[EvaluatePatientUseCase, Depends(get_evaluate_patient_use_case)]
PlanRemindersUseCaseDep = Annotated[PlanRemindersUseCase, Depends(get_plan_reminders_use_case)]
SearchVaccineCatalogUseCaseDep = Annotated[SearchVaccineCatalogUseCase, Depends(get_search_vaccine_catalog_use_case)]
GetVaccineUseCaseDep = Annotated[GetVaccineUseCase, Depends(get_vaccine_use_case)]
ListOutbreaksUseCaseDep = Annotated[ListOutbreaksUseCase, Depends(get_list_outbreaks_use_case)]


def _evaluate(
    use_case: EvaluatePatientUseCase,
    request: PatientEvaluationRequest,
    timeframe: ScheduleTimeframe | None = None,
) -> EvaluatePatientResponse:
    patient = request.patient.to_domain(request.today)
    return use_case.execute(
        EvaluatePatientRequest(patient=patient, timeframe=timeframe, today=request.today, now=request.now)
    )


def _schedule_response(result: EvaluatePatientResponse, timeframe: ScheduleTimeframe | None) -> ScheduleResponse:
    return ScheduleResponse(
        patient_id=result.patient.id,
        timeframe=timeframe.value if timeframe else None,
        appointments=[AppointmentResponse.from_domain(a) for a in result.appointments],
        total_vaccines=sum(len(a.vaccines) for a in result.appointments),
        protection_score=result.protection_score,
    )


@router.get("/vaccines", response_model=VaccineListResponse)
async def list_vaccines(
    use_case: SearchVaccineCatalogUseCaseDep,
    search: Annotated[str, Query(description="Match on name, description or disease")] = "",
):
    """List the vaccine catalog, optionally filtered by a search term."""
    result = use_case.execute(SearchVaccineCatalogRequest(query=search))
    return VaccineListResponse(
        vaccines=[VaccineResponse.from_domain(v) for v in result.vaccines],
        total=result.total,
    )


@router.get("/vaccines/{name}", response_model=VaccineResponse)
async def get_vaccine(name: str, use_case: GetVaccineUseCaseDep):
    """Get one vaccine by name."""
    return VaccineResponse.from_domain(use_case.execute(name))


@router.get("/outbreaks", response_model=OutbreakListResponse)
async def list_outbreaks(use_case: ListOutbreaksUseCaseDep):
    """Current outbreak snapshot."""
    outbreaks = use_case.execute()
    return OutbreakListResponse(
        outbreaks=[OutbreakResponse.from_domain(o) for o in outbreaks],
        total=len(outbreaks),
    )


@router.post("/eligibility", response_model=EligibilityResponse)
async def check_eligibility(request: PatientEvaluationRequest, use_case: EvaluatePatientUseCaseDep):
    """Eligibility of every catalog vaccine for the patient."""
    result = _evaluate(use_case, request)
    return EligibilityResponse(
        patient_id=result.patient.id,
        eligibility=result.eligibility,
        eligible_count=sum(result.eligibility.values()),
    )


@router.post("/recommendations", response_model=RecommendationListResponse)
async def get_recommendations(request: PatientEvaluationRequest, use_case: EvaluatePatientUseCaseDep):
    """Prioritized vaccine recommendations."""
    result = _evaluate(use_case, request)
    return RecommendationListResponse(
        patient_id=result.patient.id,
        recommendations=[RecommendationResponse.from_domain(r) for r in result.recommendations],
        high_priority_count=sum(1 for r in result.recommendations if r.is_high_priority),
    )


@router.post("/risk-assessment", response_model=RiskAssessmentResponse)
async def assess_risk(request: PatientEvaluationRequest, use_case: EvaluatePatientUseCaseDep):
    """Risk factors, overall score and level."""
    result = _evaluate(use_case, request)
    return RiskAssessmentResponse.from_domain(result.patient.id, result.risk_assessment)


@router.post("/schedule", response_model=ScheduleResponse)
async def optimize_schedule(
    request: PatientEvaluationRequest,
    use_case: EvaluatePatientUseCaseDep,
    timeframe: ScheduleTimeframe | None = None,
):
    """Conflict-checked appointment schedule, optionally limited to a timeframe."""
    result = _evaluate(use_case, request, timeframe)
    return _schedule_response(result, timeframe)


@router.post("/reminders", response_model=ReminderPlanResponse)
async def plan_reminders(
    request: ReminderPlanRequest,
    use_case: PlanRemindersUseCaseDep,
    settings: SettingsDep,
):
    """Reminders for each recommendation on every enabled channel."""
    result = use_case.execute(
        PlanRemindersRequest(
            patient=request.patient.to_domain(request.today),
            preferences=request.preferences.to_domain(settings),
            now=request.now,
        )
    )
    return ReminderPlanResponse.from_domain(result.plan)


@router.post("/plan", response_model=VaccinationPlanResponse)
async def create_vaccination_plan(
    request: VaccinationPlanRequest,
    use_case: EvaluatePatientUseCaseDep,
    settings: SettingsDep,
    timeframe: ScheduleTimeframe | None = None,
):
    """Run the whole pipeline and return every derived result."""
    preferences = request.preferences.to_domain(settings) if request.preferences else None

    result = use_case.execute(
        EvaluatePatientRequest(
            patient=request.patient.to_domain(request.today),
            reminder_preferences=preferences,
            timeframe=timeframe,
            today=request.today,
            now=request.now,
        )
    )

    return VaccinationPlanResponse(
        patient=result.patient.to_dict(),
        evaluated_on=result.evaluated_on,
        eligibility=result.eligibility,
        recommendations=[RecommendationResponse.from_domain(r) for r in result.recommendations],
        risk_assessment=RiskAssessmentResponse.from_domain(result.patient.id, result.risk_assessment),
        schedule=_schedule_response(result, timeframe),
        reminders=ReminderPlanResponse.from_domain(result.reminder_plan) if result.reminder_plan else None,
    )


__all__ = ["router"]
