"""
Vaccination Infrastructure Repositories

Repository implementations for the vaccination domain.
"""

from vaxplan.domains.vaccination.infrastructure.repositories.static_vaccine_catalog import (
    StaticVaccineCatalog,
)

__all__ = [
    "StaticVaccineCatalog",
]
