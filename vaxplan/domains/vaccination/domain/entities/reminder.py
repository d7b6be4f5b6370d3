"""
Reminder Entities

User notification preferences and the reminders planned from them.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from vaxplan.core.domain import Email, PhoneNumber, ValidationException, ValueObject

from ..value_objects.vaccination_types import (
    RecommendationPriority,
    ReminderChannel,
    ReminderStatus,
)


@dataclass(frozen=True)
class ReminderPreferences(ValueObject):
    """
    Notification preferences.

    Email needs an address and SMS needs a phone number to be active;
    push needs nothing.
    """

    email: bool = True
    sms: bool = False
    push: bool = True
    advance_days: int = 7
    preferred_time: time = time(9, 0)
    email_address: Email | None = None
    phone_number: PhoneNumber | None = None

    def _validate(self) -> None:
        if self.advance_days < 0:
            raise ValidationException("Advance days cannot be negative", field="advance_days")

    def enabled_channels(self) -> list[ReminderChannel]:
        """Channels that can actually deliver, in email/sms/push order."""
        channels: list[ReminderChannel] = []
        if self.email and self.email_address:
            channels.append(ReminderChannel.EMAIL)
        if self.sms and self.phone_number:
            channels.append(ReminderChannel.SMS)
        if self.push:
            channels.append(ReminderChannel.PUSH)
        return channels


@dataclass(frozen=True)
class ScheduledReminder(ValueObject):
    """
    Reminder planned for one recommendation on one channel.

    ``status`` is derived at planning time from the fire moment versus the
    clock; the planner never produces FAILED.
    """

    id: str
    vaccine: str
    appointment_date: date
    reminder_date: date
    channel: ReminderChannel
    status: ReminderStatus
    priority: RecommendationPriority
    send_time: time = time(9, 0)

    @property
    def fire_at(self) -> datetime:
        """Moment the reminder fires."""
        return datetime.combine(self.reminder_date, self.send_time)

    @staticmethod
    def status_for(fire_at: datetime, now: datetime) -> ReminderStatus:
        """SENT once the fire moment is strictly in the past, otherwise SCHEDULED."""
        return ReminderStatus.SENT if fire_at < now else ReminderStatus.SCHEDULED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "vaccine": self.vaccine,
            "appointment_date": self.appointment_date.isoformat(),
            "reminder_date": self.reminder_date.isoformat(),
            "send_time": self.send_time.strftime("%H:%M"),
            "channel": self.channel.value,
            "status": self.status.value,
            "priority": self.priority.value,
        }
