"""
Dependency Injection Container.

Wires concrete implementations to the ports the use cases depend on.
"""

import logging

from vaxplan.config.settings import Settings, get_settings
from vaxplan.domains.vaccination.application.ports import IVaccineCatalog
from vaxplan.domains.vaccination.application.use_cases import (
    EvaluatePatientUseCase,
    GetVaccineUseCase,
    ListOutbreaksUseCase,
    PlanRemindersUseCase,
    SearchVaccineCatalogUseCase,
)
from vaxplan.domains.vaccination.infrastructure.repositories import StaticVaccineCatalog

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container.

    The catalog is a process-wide singleton; use cases are cheap and created
    per request.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize container.

        Args:
            settings: Application settings (uses default if not provided)
        """
        self.settings = settings or get_settings()
        self._catalog: IVaccineCatalog | None = None

        logger.info("DependencyContainer initialized")

    # ==================== SINGLETONS ====================

    def get_vaccine_catalog(self) -> IVaccineCatalog:
        """Get vaccine catalog (singleton)."""
        if self._catalog is None:
            self._catalog = StaticVaccineCatalog()
        return self._catalog

    # ==================== USE CASES ====================

    def create_evaluate_patient_use_case(self) -> EvaluatePatientUseCase:
        return EvaluatePatientUseCase(catalog=self.get_vaccine_catalog())

    def create_plan_reminders_use_case(self) -> PlanRemindersUseCase:
        return PlanRemindersUseCase(catalog=self.get_vaccine_catalog())

    def create_search_vaccine_catalog_use_case(self) -> SearchVaccineCatalogUseCase:
        return SearchVaccineCatalogUseCase(catalog=self.get_vaccine_catalog())

    def create_get_vaccine_use_case(self) -> GetVaccineUseCase:
        return GetVaccineUseCase(catalog=self.get_vaccine_catalog())

    def create_list_outbreaks_use_case(self) -> ListOutbreaksUseCase:
        return ListOutbreaksUseCase(catalog=self.get_vaccine_catalog())


_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        settings: Optional settings (only used on first call)

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(settings)
    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None
