"""
Reminder Planner for Vaccination Domain

Derives notification events from recommendation due dates and the user's
notification preferences. Delivery is left to an external transport.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from ..data import rule_tables as rules
from ..entities.recommendation import VaccineRecommendation
from ..entities.reminder import ReminderPreferences, ScheduledReminder
from ..value_objects.vaccination_types import RecommendationPriority, ReminderChannel, ReminderStatus

logger = logging.getLogger(__name__)


@dataclass
class ReminderPlan:
    """Planned reminders plus summary counts."""

    reminders: list[ScheduledReminder]

    @property
    def scheduled_count(self) -> int:
        return sum(1 for r in self.reminders if r.status == ReminderStatus.SCHEDULED)

    @property
    def sent_count(self) -> int:
        return sum(1 for r in self.reminders if r.status == ReminderStatus.SENT)

    @property
    def high_priority_count(self) -> int:
        return sum(1 for r in self.reminders if r.priority == RecommendationPriority.HIGH)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "reminders": [r.to_dict() for r in self.reminders],
            "summary": {
                "total": len(self.reminders),
                "scheduled": self.scheduled_count,
                "sent": self.sent_count,
                "high_priority": self.high_priority_count,
            },
        }


class ReminderPlanner:
    """
    Domain service for reminder planning.

    For every recommendation and enabled channel:
    - a base reminder ``advance_days`` before the due date
    - for high priority, a "(Final Reminder)" one day before the due date

    Example:
        ```python
        planner = ReminderPlanner()
        plan = planner.plan(recommendations, ReminderPreferences(advance_days=3))
        print(plan.scheduled_count, plan.sent_count)
        ```
    """

    def plan(
        self,
        recommendations: Sequence[VaccineRecommendation],
        preferences: ReminderPreferences,
        now: datetime | None = None,
    ) -> ReminderPlan:
        """
        Plan reminders for a set of recommendations.

        Args:
            recommendations: Recommendations in their current order (the
                position becomes part of each reminder id)
            preferences: Channel toggles, advance days and send time
            now: Reference moment for status derivation

        Returns:
            ReminderPlan with reminders sorted by fire date (stable)
        """
        now = now or datetime.now()
        channels = preferences.enabled_channels()
        reminders: list[ScheduledReminder] = []

        if not channels:
            logger.warning("No reminder channel is enabled, nothing to plan")

        for index, rec in enumerate(recommendations):
            base_date = rec.due_date - timedelta(days=preferences.advance_days)
            for channel in channels:
                reminders.append(
                    self._build(
                        reminder_id=f"{rec.vaccine}-{channel.value}-{index}",
                        label=rec.vaccine,
                        rec=rec,
                        reminder_date=base_date,
                        channel=channel,
                        preferences=preferences,
                        now=now,
                    )
                )

            if rec.is_high_priority:
                final_date = rec.due_date - timedelta(days=rules.FINAL_REMINDER_DAYS_BEFORE)
                for channel in channels:
                    reminders.append(
                        self._build(
                            reminder_id=f"{rec.vaccine}-{channel.value}-followup-{index}",
                            label=f"{rec.vaccine} (Final Reminder)",
                            rec=rec,
                            reminder_date=final_date,
                            channel=channel,
                            preferences=preferences,
                            now=now,
                        )
                    )

        reminders.sort(key=lambda r: r.reminder_date)
        logger.info(f"Planned {len(reminders)} reminders over {len(channels)} channels")
        return ReminderPlan(reminders=reminders)

    @staticmethod
    def _build(
        reminder_id: str,
        label: str,
        rec: VaccineRecommendation,
        reminder_date: date,
        channel: ReminderChannel,
        preferences: ReminderPreferences,
        now: datetime,
    ) -> ScheduledReminder:
        fire_at = datetime.combine(reminder_date, preferences.preferred_time)
        return ScheduledReminder(
            id=reminder_id,
            vaccine=label,
            appointment_date=rec.due_date,
            reminder_date=reminder_date,
            channel=channel,
            status=ScheduledReminder.status_for(fire_at, now),
            priority=rec.priority,
            send_time=preferences.preferred_time,
        )
