"""
Vaccination Domain Value Objects

Immutable value objects for the vaccination domain.
"""

from vaxplan.domains.vaccination.domain.value_objects.age_group import AgeGroupRule
from vaxplan.domains.vaccination.domain.value_objects.risk_factor import RiskFactor
from vaxplan.domains.vaccination.domain.value_objects.vaccination_types import (
    OutbreakTrend,
    RecommendationPriority,
    ReminderChannel,
    ReminderStatus,
    RiskLevel,
    ScheduleTimeframe,
    VaccinePriorityClass,
)

__all__ = [
    "AgeGroupRule",
    "RiskFactor",
    "OutbreakTrend",
    "RecommendationPriority",
    "ReminderChannel",
    "ReminderStatus",
    "RiskLevel",
    "ScheduleTimeframe",
    "VaccinePriorityClass",
]
