"""
Vaccination Domain Ports

Interfaces (ports) for the vaccination domain following Clean Architecture.
"""

from vaxplan.domains.vaccination.application.ports.vaccine_catalog import IVaccineCatalog

__all__ = [
    "IVaccineCatalog",
]
