"""
Tests for vaccination entities and shared value objects.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, time, timedelta

import pytest

from vaxplan.core.domain import Email, PhoneNumber, ValidationException
from vaxplan.domains.vaccination.domain.entities import (
    Patient,
    PreviousVaccination,
    ReminderPreferences,
    ScheduledAppointment,
    ScheduledReminder,
    TravelPlan,
    VaccineRecommendation,
)
from vaxplan.domains.vaccination.domain.value_objects import (
    RecommendationPriority,
    ReminderChannel,
    ReminderStatus,
    ScheduleTimeframe,
)


@pytest.mark.unit
class TestPatient:
    """Tests for Patient entity."""

    def test_negative_age_is_rejected(self):
        """Should raise ValidationException for negative age."""
        with pytest.raises(ValidationException) as exc_info:
            Patient(age=-1)

        assert exc_info.value.field == "age"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_lists_are_stored_as_tuples(self):
        """Should freeze list inputs into tuples."""
        patient = Patient(age=30, health_conditions=["Asthma"], allergies=["Eggs"])

        assert patient.health_conditions == ("Asthma",)
        assert patient.allergies == ("Eggs",)

    def test_patient_is_immutable(self):
        """Should not allow attribute assignment."""
        patient = Patient(age=30)

        with pytest.raises(FrozenInstanceError):
            patient.age = 31

    def test_generates_id_when_missing(self):
        """Should assign a distinct id to each patient."""
        assert Patient().id != Patient().id

    def test_has_condition_is_case_insensitive(self):
        """Should match condition labels regardless of case."""
        patient = Patient(age=50, health_conditions=("Diabetes",))

        assert patient.has_condition("diabetes") is True
        assert patient.has_condition("Asthma") is False

    def test_age_on_birthday_boundary(self):
        """Should count a year only once the birthday has passed."""
        dob = date(1990, 6, 15)

        assert Patient.age_on(dob, date(2025, 6, 14)) == 34
        assert Patient.age_on(dob, date(2025, 6, 15)) == 35

    def test_find_previous_vaccination_by_containment(self):
        """Should match a record whose name contains the catalog name."""
        record = PreviousVaccination(vaccine="Influenza (Flu) - 2024 season", administered_on=date(2024, 10, 1))
        patient = Patient(age=40, previous_vaccinations=(record,))

        assert patient.find_previous_vaccination("Influenza (Flu)") is record
        assert patient.find_previous_vaccination("Typhoid") is None


@pytest.mark.unit
class TestTravelPlan:
    """Tests for TravelPlan value object."""

    def test_return_before_departure_is_rejected(self):
        """Should raise ValidationException when return precedes departure."""
        with pytest.raises(ValidationException) as exc_info:
            TravelPlan("India", departure_date=date(2025, 3, 10), return_date=date(2025, 3, 1))

        assert exc_info.value.field == "return_date"

    def test_same_day_return_is_allowed(self):
        """Should accept a return on the departure date."""
        plan = TravelPlan("India", departure_date=date(2025, 3, 10), return_date=date(2025, 3, 10))
        assert plan.return_date == plan.departure_date

    def test_blank_destination_is_rejected(self):
        """Should require a destination."""
        with pytest.raises(ValidationException):
            TravelPlan("  ", departure_date=date(2025, 3, 10))

    def test_days_until_departure(self):
        """Should count negative days once departed."""
        plan = TravelPlan("Japan", departure_date=date(2025, 1, 10))

        assert plan.days_until_departure(date(2025, 1, 1)) == 9
        assert plan.days_until_departure(date(2025, 1, 12)) == -2


@pytest.mark.unit
class TestVaccineDefinition:
    """Tests for VaccineDefinition."""

    def test_describe_interval(self, vaccine_by_name):
        """Should describe dosing intervals in years and months."""
        assert vaccine_by_name("Yellow Fever").describe_interval() == "Single dose"
        assert vaccine_by_name("Tetanus-Diphtheria (Td)").describe_interval() == "10 years 0 months"
        assert vaccine_by_name("Hepatitis A").describe_interval() == "0 years 6 months"

    def test_is_travel_vaccine(self, vaccine_by_name):
        """Should flag travel-class vaccines with trigger regions only."""
        assert vaccine_by_name("Yellow Fever").is_travel_vaccine is True
        # Routine class, regions notwithstanding
        assert vaccine_by_name("Hepatitis B").is_travel_vaccine is False

    def test_matches_search_on_disease(self, vaccine_by_name):
        """Should match the covered disease list."""
        assert vaccine_by_name("Typhoid").matches_search("typhoid fever") is True
        assert vaccine_by_name("Typhoid").matches_search("measles") is False

    def test_to_dict_renders_age_groups_as_labels(self, vaccine_by_name):
        """Should serialize age-group rules as their labels."""
        data = vaccine_by_name("Pneumococcal (PPSV23)").to_dict()

        assert data["age_groups"] == ["65+ years", "2-64 years (high-risk)"]
        assert data["priority_class"] == "high-risk"


@pytest.mark.unit
class TestVaccineRecommendation:
    """Tests for VaccineRecommendation."""

    def test_risk_score_out_of_range_is_rejected(self):
        """Should reject risk scores outside 0-100."""
        with pytest.raises(ValidationException):
            VaccineRecommendation(
                vaccine="Typhoid",
                priority=RecommendationPriority.LOW,
                due_date=date(2025, 1, 1),
                reason="",
                risk_score=101,
            )

    def test_to_dict(self, make_recommendation):
        """Should serialize enum values and ISO dates."""
        rec = make_recommendation("Typhoid", RecommendationPriority.HIGH, interactions=("Immunocompromised",))

        assert rec.to_dict() == {
            "vaccine": "Typhoid",
            "priority": "high",
            "due_date": "2025-01-15",
            "reason": "Routine vaccination recommended for age group",
            "risk_score": 60,
            "interactions": ["Immunocompromised"],
        }


@pytest.mark.unit
class TestScheduledAppointment:
    """Tests for ScheduledAppointment."""

    def test_vaccine_names_and_conflicts(self, make_recommendation):
        """Should expose vaccine names and the conflict flag."""
        appointment = ScheduledAppointment(
            date=date(2025, 2, 1),
            vaccines=[make_recommendation("Typhoid"), make_recommendation("Hepatitis A")],
            conflicts=["Different hepatitis vaccines - consider combination vaccine"],
        )

        assert appointment.vaccine_names == ["Typhoid", "Hepatitis A"]
        assert appointment.has_conflicts is True
        assert appointment.days_from(date(2025, 2, 8)) == 7


@pytest.mark.unit
class TestReminderPreferences:
    """Tests for ReminderPreferences."""

    def test_defaults(self):
        """Should default to email+push, 7 days ahead at 09:00."""
        prefs = ReminderPreferences()

        assert prefs.advance_days == 7
        assert prefs.preferred_time == time(9, 0)

    def test_email_requires_address(self):
        """Should drop email when no address is configured."""
        prefs = ReminderPreferences(email=True, push=True)
        assert prefs.enabled_channels() == [ReminderChannel.PUSH]

    def test_all_channels_in_order(self):
        """Should list channels as email, sms, push."""
        prefs = ReminderPreferences(
            email=True,
            sms=True,
            push=True,
            email_address=Email("Patient@Example.com"),
            phone_number=PhoneNumber("+54 9 11 5500-1234"),
        )

        assert prefs.enabled_channels() == [ReminderChannel.EMAIL, ReminderChannel.SMS, ReminderChannel.PUSH]

    def test_negative_advance_days_is_rejected(self):
        """Should reject negative advance days."""
        with pytest.raises(ValidationException):
            ReminderPreferences(advance_days=-1)


@pytest.mark.unit
class TestScheduledReminder:
    """Tests for ScheduledReminder status derivation."""

    def test_status_for_past_fire_moment(self):
        """Should be SENT when the fire moment is strictly in the past."""
        now = datetime(2025, 1, 15, 12, 0)
        assert ScheduledReminder.status_for(now - timedelta(minutes=1), now) == ReminderStatus.SENT

    def test_status_for_exact_now_is_scheduled(self):
        """Should stay SCHEDULED when the fire moment equals now."""
        now = datetime(2025, 1, 15, 12, 0)
        assert ScheduledReminder.status_for(now, now) == ReminderStatus.SCHEDULED


@pytest.mark.unit
class TestContactValueObjects:
    """Tests for Email and PhoneNumber."""

    def test_email_is_normalized(self):
        """Should lowercase the address."""
        assert str(Email("Patient@Example.COM")) == "patient@example.com"

    def test_invalid_email_is_rejected(self):
        """Should reject an address without @."""
        with pytest.raises(ValidationException) as exc_info:
            Email("not-an-email")

        assert exc_info.value.field == "email_address"

    def test_phone_number_keeps_digits(self):
        """Should strip separators but keep the leading plus."""
        assert str(PhoneNumber("+1 (555) 010-9999")) == "+15550109999"

    def test_short_phone_number_is_rejected(self):
        """Should reject numbers with fewer than 8 digits."""
        with pytest.raises(ValidationException):
            PhoneNumber("12345")


@pytest.mark.unit
class TestStatusEnums:
    """Tests for vaccination status enums."""

    def test_priority_weights(self):
        """Should weight high > medium > low."""
        assert RecommendationPriority.HIGH.weight == 3
        assert RecommendationPriority.MEDIUM.weight == 2
        assert RecommendationPriority.LOW.weight == 1

    def test_timeframe_days(self):
        """Should map timeframes to day horizons."""
        assert ScheduleTimeframe.THREE_MONTHS.days == 90
        assert ScheduleTimeframe.SIX_MONTHS.days == 182
        assert ScheduleTimeframe.ONE_YEAR.days == 365

    def test_from_string_is_case_insensitive(self):
        """Should parse values regardless of case."""
        assert ScheduleTimeframe.from_string("1YEAR") == ScheduleTimeframe.ONE_YEAR

    def test_from_string_rejects_unknown(self):
        """Should raise ValidationException for unknown values."""
        with pytest.raises(ValidationException):
            ReminderChannel.from_string("fax")
