"""
Vaccination Domain Services

Domain services that encapsulate the vaccination planning pipeline.
"""

from vaxplan.domains.vaccination.domain.services.eligibility_service import EligibilityService
from vaxplan.domains.vaccination.domain.services.recommendation_service import RecommendationService
from vaxplan.domains.vaccination.domain.services.reminder_planner import (
    ReminderPlan,
    ReminderPlanner,
)
from vaxplan.domains.vaccination.domain.services.risk_scoring_service import (
    RiskAssessment,
    RiskScoringService,
)
from vaxplan.domains.vaccination.domain.services.schedule_optimizer import ScheduleOptimizer

__all__ = [
    "EligibilityService",
    "RecommendationService",
    "RiskScoringService",
    "RiskAssessment",
    "ScheduleOptimizer",
    "ReminderPlanner",
    "ReminderPlan",
]
