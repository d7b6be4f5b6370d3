"""
Factories for creating vaccination test objects quickly.

All dates are relative to a fixed reference date so tests never depend on
the real clock.
"""

from datetime import date, datetime, timedelta

from vaxplan.domains.vaccination.domain.entities import TravelPlan, VaccineRecommendation
from vaxplan.domains.vaccination.domain.value_objects import RecommendationPriority

TODAY = date(2025, 1, 15)
NOW = datetime(2025, 1, 15, 12, 0)


def create_trip(destination: str, departs_in_days: int = 60, days_away: int | None = None) -> TravelPlan:
    """
    Create a travel plan departing relative to TODAY.

    Args:
        destination: Free-text destination
        departs_in_days: Days from TODAY to departure (negative for past trips)
        days_away: Trip length; open-ended when omitted

    Returns:
        TravelPlan
    """
    departure = TODAY + timedelta(days=departs_in_days)
    return TravelPlan(
        destination=destination,
        departure_date=departure,
        return_date=departure + timedelta(days=days_away) if days_away is not None else None,
    )


def create_recommendation(
    vaccine: str,
    priority: RecommendationPriority = RecommendationPriority.MEDIUM,
    due_in_days: int = 0,
    reason: str = "Routine vaccination recommended for age group",
    risk_score: int = 60,
    interactions: tuple[str, ...] = (),
) -> VaccineRecommendation:
    """Create a recommendation due relative to TODAY."""
    return VaccineRecommendation(
        vaccine=vaccine,
        priority=priority,
        due_date=TODAY + timedelta(days=due_in_days),
        reason=reason,
        risk_score=risk_score,
        interactions=interactions,
    )
