"""
Vaccination Reference Data

Vaccine catalog, outbreak fixture and rule tables.
"""

from vaxplan.domains.vaccination.domain.data.catalog import VACCINE_CATALOG
from vaxplan.domains.vaccination.domain.data.outbreaks import OUTBREAK_FIXTURE

__all__ = [
    "VACCINE_CATALOG",
    "OUTBREAK_FIXTURE",
]
