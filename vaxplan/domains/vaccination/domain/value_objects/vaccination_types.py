"""
Vaccination Domain Value Objects

Status enums shared by the vaccination pipeline.
"""

from vaxplan.core.domain import StatusEnum


class VaccinePriorityClass(StatusEnum):
    """Catalog-level categorization that drives default recommendation logic."""

    ROUTINE = "routine"
    HIGH_RISK = "high-risk"
    TRAVEL = "travel"
    OUTBREAK = "outbreak"


class RecommendationPriority(StatusEnum):
    """
    Priority of a single recommendation.

    Weights order recommendations and schedule slots (higher first).
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        """Sort weight: high=3, medium=2, low=1."""
        weights = {
            "high": 3,
            "medium": 2,
            "low": 1,
        }
        return weights[self.value]


class RiskLevel(StatusEnum):
    """Risk level of an individual risk factor."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReminderChannel(StatusEnum):
    """Notification channel for a reminder."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class ReminderStatus(StatusEnum):
    """
    Reminder status.

    SCHEDULED and SENT are derived from the clock. FAILED is reserved for the
    delivery transport to report back.
    """

    SCHEDULED = "scheduled"
    SENT = "sent"
    FAILED = "failed"


class OutbreakTrend(StatusEnum):
    """Direction of case counts for an outbreak."""

    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class ScheduleTimeframe(StatusEnum):
    """Planning horizon used to filter an optimized schedule."""

    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"

    @property
    def days(self) -> int:
        """Number of days covered by the timeframe."""
        horizon = {
            "3months": 90,
            "6months": 182,
            "1year": 365,
        }
        return horizon[self.value]
