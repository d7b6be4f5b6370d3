"""
Tests for ReminderPlanner.
"""

import logging
from datetime import datetime, time, timedelta

import pytest

from vaxplan.core.domain import Email, PhoneNumber, ValidationException
from vaxplan.domains.vaccination.domain.entities import ReminderPreferences
from vaxplan.domains.vaccination.domain.services import ReminderPlanner
from vaxplan.domains.vaccination.domain.value_objects import (
    RecommendationPriority,
    ReminderChannel,
    ReminderStatus,
)

from tests.utils import NOW, TODAY, create_recommendation

HIGH = RecommendationPriority.HIGH


@pytest.fixture
def planner() -> ReminderPlanner:
    return ReminderPlanner()


@pytest.fixture
def email_and_push() -> ReminderPreferences:
    return ReminderPreferences(email_address=Email("pat@example.com"), advance_days=7)


@pytest.mark.unit
class TestReminderPreferences:
    """Tests for channel resolution and validation."""

    def test_email_needs_address(self):
        """Should drop email when no address is set."""
        assert ReminderPreferences().enabled_channels() == [ReminderChannel.PUSH]

    def test_all_channels(self):
        prefs = ReminderPreferences(
            sms=True,
            email_address=Email("Pat@Example.com"),
            phone_number=PhoneNumber("+1 555 123 4567"),
        )

        assert prefs.enabled_channels() == [ReminderChannel.EMAIL, ReminderChannel.SMS, ReminderChannel.PUSH]
        assert str(prefs.email_address) == "pat@example.com"
        assert str(prefs.phone_number) == "+15551234567"

    def test_negative_advance_days(self):
        with pytest.raises(ValidationException) as exc_info:
            ReminderPreferences(advance_days=-1)

        assert exc_info.value.field == "advance_days"

    def test_invalid_email(self):
        with pytest.raises(ValidationException):
            Email("not-an-address")


@pytest.mark.unit
class TestPlan:
    """Tests for ReminderPlanner.plan()."""

    def test_high_priority_gets_final_reminder(self, planner, email_and_push):
        """Should add a final reminder per channel the day before the due date."""
        rec = create_recommendation("Yellow Fever", HIGH, due_in_days=15)
        plan = planner.plan([rec], email_and_push, now=NOW)

        assert [r.id for r in plan.reminders] == [
            "Yellow Fever-email-0",
            "Yellow Fever-push-0",
            "Yellow Fever-email-followup-0",
            "Yellow Fever-push-followup-0",
        ]
        assert [r.reminder_date for r in plan.reminders] == [
            TODAY + timedelta(days=8),
            TODAY + timedelta(days=8),
            TODAY + timedelta(days=14),
            TODAY + timedelta(days=14),
        ]
        assert plan.reminders[2].vaccine == "Yellow Fever (Final Reminder)"
        assert all(r.appointment_date == rec.due_date for r in plan.reminders)
        assert plan.scheduled_count == 4
        assert plan.high_priority_count == 4

    def test_medium_priority_has_no_final_reminder(self, planner, email_and_push):
        rec = create_recommendation("Influenza (Flu)", due_in_days=15)
        plan = planner.plan([rec], email_and_push, now=NOW)

        assert len(plan.reminders) == 2
        assert plan.high_priority_count == 0

    def test_past_reminders_are_sent(self, planner, email_and_push):
        """Should mark reminders whose fire moment has passed as sent."""
        rec = create_recommendation("Typhoid", HIGH, due_in_days=1)
        plan = planner.plan([rec], email_and_push, now=NOW)

        # Final reminder fires today at 09:00, before NOW (12:00)
        assert {r.status for r in plan.reminders} == {ReminderStatus.SENT}
        assert plan.sent_count == 4
        assert plan.scheduled_count == 0

    def test_fire_moment_equal_to_now_is_scheduled(self, planner):
        rec = create_recommendation("Influenza (Flu)", due_in_days=7)
        prefs = ReminderPreferences(advance_days=7, preferred_time=time(12, 0))
        plan = planner.plan([rec], prefs, now=NOW)

        assert plan.reminders[0].fire_at == NOW
        assert plan.reminders[0].status == ReminderStatus.SCHEDULED

    def test_sorted_by_reminder_date(self, planner, email_and_push):
        """Should sort across recommendations while keeping ties in input order."""
        recs = [
            create_recommendation("Influenza (Flu)", due_in_days=30),
            create_recommendation("Typhoid", HIGH, due_in_days=10),
        ]
        plan = planner.plan(recs, email_and_push, now=NOW)
        dates = [r.reminder_date for r in plan.reminders]

        assert dates == sorted(dates)
        assert plan.reminders[0].id == "Typhoid-email-1"
        assert plan.reminders[-1].id == "Influenza (Flu)-push-0"

    def test_zero_advance_days(self, planner):
        rec = create_recommendation("Influenza (Flu)", due_in_days=3)
        plan = planner.plan([rec], ReminderPreferences(advance_days=0), now=NOW)

        assert plan.reminders[0].reminder_date == rec.due_date

    def test_no_enabled_channel(self, planner, caplog):
        """Should plan nothing and warn when every channel is off."""
        prefs = ReminderPreferences(email=True, sms=True, push=False)
        rec = create_recommendation("Influenza (Flu)", due_in_days=3)

        with caplog.at_level(logging.WARNING):
            plan = planner.plan([rec], prefs, now=NOW)

        assert plan.reminders == []
        assert "No reminder channel" in caplog.text

    def test_to_dict(self, planner, email_and_push):
        rec = create_recommendation("Typhoid", HIGH, due_in_days=1)
        data = planner.plan([rec], email_and_push, now=datetime(2025, 1, 15, 8, 0)).to_dict()

        assert data["summary"] == {"total": 4, "scheduled": 2, "sent": 2, "high_priority": 4}
        assert data["reminders"][0]["send_time"] == "09:00"
        assert data["reminders"][0]["channel"] == "email"
