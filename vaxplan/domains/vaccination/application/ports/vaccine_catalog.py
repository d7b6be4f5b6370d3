"""
Vaccine Catalog Port

Interface for read-only access to vaccine definitions and outbreak data.
"""

from typing import Protocol, runtime_checkable

from vaxplan.domains.vaccination.domain.entities.outbreak import Outbreak
from vaxplan.domains.vaccination.domain.entities.vaccine import VaccineDefinition


@runtime_checkable
class IVaccineCatalog(Protocol):
    """
    Vaccine catalog interface.

    The catalog is immutable for the life of the process, so every method is
    synchronous and side-effect free.

    Example:
        ```python
        class StaticVaccineCatalog(IVaccineCatalog):
            def list_all(self) -> list[VaccineDefinition]:
                return list(VACCINE_CATALOG)
        ```
    """

    def list_all(self) -> list[VaccineDefinition]:
        """
        All vaccine definitions in catalog order.

        Returns:
            List of vaccine definitions
        """
        ...

    def find_by_name(self, name: str) -> VaccineDefinition | None:
        """
        Find vaccine by exact name (case-insensitive).

        Args:
            name: Vaccine name

        Returns:
            VaccineDefinition if found, None otherwise
        """
        ...

    def search(self, query: str) -> list[VaccineDefinition]:
        """
        Search vaccines by name, description or covered disease.

        Args:
            query: Search term (empty returns the whole catalog)

        Returns:
            Matching definitions in catalog order
        """
        ...

    def list_outbreaks(self) -> list[Outbreak]:
        """
        Current outbreak snapshot.

        Returns:
            List of outbreaks, most recently updated first
        """
        ...
