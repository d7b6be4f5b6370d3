"""
Vaccination API Dependencies

FastAPI dependencies for the vaccination domain.
"""

from typing import Annotated

from fastapi import Depends

from vaxplan.config.settings import Settings, get_settings
from vaxplan.core.container import get_container
from vaxplan.domains.vaccination.application.use_cases import (
    EvaluatePatientUseCase,
    GetVaccineUseCase,
    ListOutbreaksUseCase,
    PlanRemindersUseCase,
    SearchVaccineCatalogUseCase,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_evaluate_patient_use_case() -> EvaluatePatientUseCase:
    """Get EvaluatePatientUseCase instance."""
    return get_container().create_evaluate_patient_use_case()


def get_plan_reminders_use_case() -> PlanRemindersUseCase:
    """Get PlanRemindersUseCase instance."""
    return get_container().create_plan_reminders_use_case()


def get_search_vaccine_catalog_use_case() -> SearchVaccineCatalogUseCase:
    """Get SearchVaccineCatalogUseCase instance."""
    return get_container().create_search_vaccine_catalog_use_case()


def get_vaccine_use_case() -> GetVaccineUseCase:
    """Get GetVaccineUseCase instance."""
    return get_container().create_get_vaccine_use_case()


def get_list_outbreaks_use_case() -> ListOutbreaksUseCase:
    """Get ListOutbreaksUseCase instance."""
    return get_container().create_list_outbreaks_use_case()


__all__ = [
    "SettingsDep",
    "get_evaluate_patient_use_case",
    "get_plan_reminders_use_case",
    "get_search_vaccine_catalog_use_case",
    "get_vaccine_use_case",
    "get_list_outbreaks_use_case",
]
