"""
Eligibility Service for Vaccination Domain

Domain service that decides whether a patient may receive a vaccine.
"""

import logging
from collections.abc import Iterable

from ..entities.patient import Patient
from ..entities.vaccine import VaccineDefinition

logger = logging.getLogger(__name__)


def _overlaps(left: str, right: str) -> bool:
    """Case-insensitive containment in either direction. Blank labels never match."""
    a, b = left.strip().lower(), right.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


class EligibilityService:
    """
    Domain service for vaccine eligibility.

    A vaccine is eligible when all of these pass:
    - Age: at least one age-group rule matches
    - Contraindication: no contraindication overlaps an allergy or condition
    - Travel: travel vaccines with trigger regions need a matching destination

    Matching is a bidirectional, case-insensitive substring check. It is
    deliberately noisy; a partial overlap counts as a contraindication.

    Example:
        ```python
        service = EligibilityService()
        if service.is_eligible(vaccine, patient):
            ...
        eligibility = service.evaluate(VACCINE_CATALOG, patient)
        ```
    """

    def is_eligible(self, vaccine: VaccineDefinition, patient: Patient) -> bool:
        """
        Check all eligibility gates for one vaccine.

        Args:
            vaccine: Catalog entry
            patient: Patient profile

        Returns:
            True if the patient may receive the vaccine
        """
        if not self.is_age_eligible(vaccine, patient):
            return False

        if self.has_contraindication(vaccine, patient):
            return False

        if vaccine.is_travel_vaccine and not self.needs_for_travel(vaccine, patient):
            return False

        return True

    def is_age_eligible(self, vaccine: VaccineDefinition, patient: Patient) -> bool:
        """Patient age satisfies at least one of the vaccine's age groups."""
        return any(rule.matches(patient.age) for rule in vaccine.age_groups)

    def has_contraindication(self, vaccine: VaccineDefinition, patient: Patient) -> bool:
        """Any contraindication overlaps a patient allergy or health condition."""
        labels = [*patient.allergies, *patient.health_conditions]
        return any(
            _overlaps(contraindication, label)
            for contraindication in vaccine.contraindications
            for label in labels
        )

    def needs_for_travel(self, vaccine: VaccineDefinition, patient: Patient) -> bool:
        """Any travel destination overlaps one of the vaccine's trigger regions."""
        return any(
            _overlaps(trip.destination, region)
            for trip in patient.travel_plans
            for region in vaccine.travel_regions
        )

    def evaluate(self, catalog: Iterable[VaccineDefinition], patient: Patient) -> dict[str, bool]:
        """
        Eligibility for every catalog entry, in catalog order.

        Args:
            catalog: Vaccine definitions to evaluate
            patient: Patient profile

        Returns:
            Mapping of vaccine name to eligibility
        """
        eligibility = {vaccine.name: self.is_eligible(vaccine, patient) for vaccine in catalog}
        logger.debug(
            f"Eligibility for patient {patient.id}: "
            f"{sum(eligibility.values())}/{len(eligibility)} vaccines eligible"
        )
        return eligibility
