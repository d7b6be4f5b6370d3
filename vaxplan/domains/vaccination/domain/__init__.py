"""
Vaccination Domain Layer

Core business logic for the vaccination planning bounded context.

Components:
- Entities: Patient, VaccineDefinition, VaccineRecommendation, ScheduledAppointment
- Value Objects: AgeGroupRule, RiskFactor, priority/status enums
- Domain Services: eligibility, recommendations, risk scoring, schedule
  optimization, reminder planning
"""

from vaxplan.domains.vaccination.domain.entities import (
    Outbreak,
    Patient,
    PreviousVaccination,
    ReminderPreferences,
    ScheduledAppointment,
    ScheduledReminder,
    TravelPlan,
    VaccineDefinition,
    VaccineRecommendation,
)
from vaxplan.domains.vaccination.domain.services import (
    EligibilityService,
    RecommendationService,
    ReminderPlan,
    ReminderPlanner,
    RiskAssessment,
    RiskScoringService,
    ScheduleOptimizer,
)
from vaxplan.domains.vaccination.domain.value_objects import (
    AgeGroupRule,
    OutbreakTrend,
    RecommendationPriority,
    ReminderChannel,
    ReminderStatus,
    RiskFactor,
    RiskLevel,
    ScheduleTimeframe,
    VaccinePriorityClass,
)

__all__ = [
    # Entities
    "Patient",
    "TravelPlan",
    "PreviousVaccination",
    "VaccineDefinition",
    "VaccineRecommendation",
    "ScheduledAppointment",
    "ReminderPreferences",
    "ScheduledReminder",
    "Outbreak",
    # Value Objects
    "AgeGroupRule",
    "RiskFactor",
    "OutbreakTrend",
    "RecommendationPriority",
    "ReminderChannel",
    "ReminderStatus",
    "RiskLevel",
    "ScheduleTimeframe",
    "VaccinePriorityClass",
    # Services
    "EligibilityService",
    "RecommendationService",
    "RiskScoringService",
    "RiskAssessment",
    "ScheduleOptimizer",
    "ReminderPlanner",
    "ReminderPlan",
]
