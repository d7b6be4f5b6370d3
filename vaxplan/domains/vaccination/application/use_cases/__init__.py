"""
Vaccination Use Cases

Application use cases for the vaccination domain.
"""

from vaxplan.domains.vaccination.application.use_cases.evaluate_patient import (
    EvaluatePatientRequest,
    EvaluatePatientResponse,
    EvaluatePatientUseCase,
)
from vaxplan.domains.vaccination.application.use_cases.plan_reminders import (
    PlanRemindersRequest,
    PlanRemindersResponse,
    PlanRemindersUseCase,
)
from vaxplan.domains.vaccination.application.use_cases.search_vaccine_catalog import (
    GetVaccineUseCase,
    ListOutbreaksUseCase,
    SearchVaccineCatalogRequest,
    SearchVaccineCatalogResponse,
    SearchVaccineCatalogUseCase,
)

__all__ = [
    "EvaluatePatientUseCase",
    "EvaluatePatientRequest",
    "EvaluatePatientResponse",
    "PlanRemindersUseCase",
    "PlanRemindersRequest",
    "PlanRemindersResponse",
    "SearchVaccineCatalogUseCase",
    "SearchVaccineCatalogRequest",
    "SearchVaccineCatalogResponse",
    "GetVaccineUseCase",
    "ListOutbreaksUseCase",
]
