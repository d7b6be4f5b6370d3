"""
Static Vaccine Catalog

In-memory implementation of IVaccineCatalog backed by the bundled reference data.
"""

import logging
from collections.abc import Sequence

from vaxplan.domains.vaccination.application.ports.vaccine_catalog import IVaccineCatalog
from vaxplan.domains.vaccination.domain.data import OUTBREAK_FIXTURE, VACCINE_CATALOG
from vaxplan.domains.vaccination.domain.entities.outbreak import Outbreak
from vaxplan.domains.vaccination.domain.entities.vaccine import VaccineDefinition

logger = logging.getLogger(__name__)


class StaticVaccineCatalog(IVaccineCatalog):
    """
    Static implementation of the vaccine catalog.

    Holds immutable tuples only, so one instance can be shared across requests.
    """

    def __init__(
        self,
        vaccines: Sequence[VaccineDefinition] = VACCINE_CATALOG,
        outbreaks: Sequence[Outbreak] = OUTBREAK_FIXTURE,
    ):
        """
        Initialize catalog.

        Args:
            vaccines: Vaccine definitions (names must be unique)
            outbreaks: Outbreak snapshot
        """
        self._vaccines = tuple(vaccines)
        self._outbreaks = tuple(outbreaks)

    def list_all(self) -> list[VaccineDefinition]:
        """All vaccine definitions in catalog order."""
        return list(self._vaccines)

    def find_by_name(self, name: str) -> VaccineDefinition | None:
        """Find vaccine by exact name (case-insensitive)."""
        needle = name.strip().lower()
        for vaccine in self._vaccines:
            if vaccine.name.lower() == needle:
                return vaccine
        return None

    def search(self, query: str) -> list[VaccineDefinition]:
        """Search vaccines by name, description or covered disease."""
        term = query.strip()
        if not term:
            return self.list_all()

        results = [vaccine for vaccine in self._vaccines if vaccine.matches_search(term)]
        logger.debug(f"Catalog search '{term}' matched {len(results)} vaccines")
        return results

    def list_outbreaks(self) -> list[Outbreak]:
        """Current outbreak snapshot, most recently updated first."""
        return sorted(self._outbreaks, key=lambda o: o.last_updated, reverse=True)
