"""
Vaccine Catalog Use Cases

Read-only queries over the vaccine catalog and outbreak snapshot.
"""

import logging
from dataclasses import dataclass

from vaxplan.core.domain import EntityNotFoundException
from vaxplan.domains.vaccination.application.ports import IVaccineCatalog
from vaxplan.domains.vaccination.domain.entities import Outbreak, VaccineDefinition

logger = logging.getLogger(__name__)


@dataclass
class SearchVaccineCatalogRequest:
    """Catalog search request (empty query lists everything)."""

    query: str = ""


@dataclass
class SearchVaccineCatalogResponse:
    """Catalog search results."""

    vaccines: list[VaccineDefinition]
    total: int


class SearchVaccineCatalogUseCase:
    """Search vaccines by name, description or covered disease."""

    def __init__(self, catalog: IVaccineCatalog):
        self.catalog = catalog

    def execute(self, request: SearchVaccineCatalogRequest) -> SearchVaccineCatalogResponse:
        vaccines = self.catalog.search(request.query)
        logger.info(f"Catalog search '{request.query}': {len(vaccines)} results")
        return SearchVaccineCatalogResponse(vaccines=vaccines, total=len(vaccines))


class GetVaccineUseCase:
    """Look up one vaccine by name."""

    def __init__(self, catalog: IVaccineCatalog):
        self.catalog = catalog

    def execute(self, name: str) -> VaccineDefinition:
        """
        Get vaccine definition.

        Args:
            name: Vaccine name (case-insensitive)

        Returns:
            The vaccine definition

        Raises:
            EntityNotFoundException: If no vaccine has that name
        """
        vaccine = self.catalog.find_by_name(name)
        if vaccine is None:
            logger.warning(f"Vaccine not found: {name}")
            raise EntityNotFoundException(
                entity_type="Vaccine",
                entity_id=name,
                message=f"Vaccine '{name}' not found",
            )
        return vaccine


class ListOutbreaksUseCase:
    """Current outbreak snapshot."""

    def __init__(self, catalog: IVaccineCatalog):
        self.catalog = catalog

    def execute(self) -> list[Outbreak]:
        return self.catalog.list_outbreaks()
