"""
Vaccination Domain Entities

Immutable records flowing through the vaccination pipeline.
"""

from vaxplan.domains.vaccination.domain.entities.appointment import ScheduledAppointment
from vaxplan.domains.vaccination.domain.entities.outbreak import Outbreak
from vaxplan.domains.vaccination.domain.entities.patient import (
    Patient,
    PreviousVaccination,
    TravelPlan,
)
from vaxplan.domains.vaccination.domain.entities.recommendation import VaccineRecommendation
from vaxplan.domains.vaccination.domain.entities.reminder import (
    ReminderPreferences,
    ScheduledReminder,
)
from vaxplan.domains.vaccination.domain.entities.vaccine import VaccineDefinition

__all__ = [
    "Patient",
    "TravelPlan",
    "PreviousVaccination",
    "VaccineDefinition",
    "VaccineRecommendation",
    "ScheduledAppointment",
    "ReminderPreferences",
    "ScheduledReminder",
    "Outbreak",
]
