"""
Vaccination API Schemas

Pydantic schemas for API request/response validation and their mapping to
domain records.
"""

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, Field, field_validator

from vaxplan.config.settings import Settings
from vaxplan.core.domain import Email, PhoneNumber
from vaxplan.domains.vaccination.domain.entities import (
    Outbreak,
    Patient,
    PreviousVaccination,
    ReminderPreferences,
    ScheduledAppointment,
    TravelPlan,
    VaccineDefinition,
    VaccineRecommendation,
)
from vaxplan.domains.vaccination.domain.services import ReminderPlan, RiskAssessment
from vaxplan.domains.vaccination.domain.value_objects import RiskFactor

# ==================== REQUESTS ====================

# Latest reference moment the pipeline can add due-date offsets and dose intervals to
LATEST_SUPPORTED_DATE = date(9000, 12, 31)


def _to_naive_local(value: datetime) -> datetime:
    """Aware datetimes become naive local time; naive ones are returned unchanged."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _check_supported(value: date, field_name: str) -> None:
    if value > LATEST_SUPPORTED_DATE:
        raise ValueError(f"{field_name} must not be later than {LATEST_SUPPORTED_DATE.isoformat()}")


class TravelPlanSchema(BaseModel):
    """Travel plan request schema."""

    destination: str
    departure_date: date
    return_date: date | None = None

    def to_domain(self) -> TravelPlan:
        return TravelPlan(
            destination=self.destination,
            departure_date=self.departure_date,
            return_date=self.return_date,
        )


class PreviousVaccinationSchema(BaseModel):
    """Previous vaccination request schema."""

    vaccine: str
    date: date
    next_due: date | None = None

    @field_validator("date")
    @classmethod
    def check_date_supported(cls, value):
        _check_supported(value, "date")
        return value

    def to_domain(self) -> PreviousVaccination:
        return PreviousVaccination(vaccine=self.vaccine, administered_on=self.date, next_due=self.next_due)


class PatientSchema(BaseModel):
    """
    Patient profile request schema.

    ``health_conditions`` and ``allergies`` accept a list or a single
    comma-separated string. A missing age is derived from the date of birth.
    """

    id: str | None = None
    name: str = ""
    age: int | None = Field(default=None, ge=0, le=150)
    date_of_birth: date | None = None
    health_conditions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    travel_plans: list[TravelPlanSchema] = Field(default_factory=list)
    previous_vaccinations: list[PreviousVaccinationSchema] = Field(default_factory=list)

    @field_validator("health_conditions", "allergies", mode="before")
    @classmethod
    def split_comma_separated(cls, value):
        if isinstance(value, str):
            return value.split(",")
        return value

    @field_validator("health_conditions", "allergies")
    @classmethod
    def drop_blank_labels(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item.strip()]

    def resolve_age(self, today: date) -> int:
        """Explicit age, else age from date of birth, else 0."""
        if self.age is not None:
            return self.age
        if self.date_of_birth is not None:
            return Patient.age_on(self.date_of_birth, today)
        return 0

    def to_domain(self, today: date | None = None) -> Patient:
        """
        Build the domain Patient.

        Raises:
            ValidationException: If a travel plan or the profile is invalid
        """
        fields: dict[str, Any] = {
            "name": self.name,
            "age": self.resolve_age(today or date.today()),
            "date_of_birth": self.date_of_birth,
            "health_conditions": self.health_conditions,
            "allergies": self.allergies,
            "travel_plans": [plan.to_domain() for plan in self.travel_plans],
            "previous_vaccinations": [record.to_domain() for record in self.previous_vaccinations],
        }
        if self.id:
            fields["id"] = self.id
        return Patient(**fields)


class ReminderPreferencesSchema(BaseModel):
    """Reminder preferences request schema. Omitted values fall back to settings."""

    email: bool = True
    sms: bool = False
    push: bool = True
    advance_days: int | None = Field(default=None, ge=0, le=365)
    preferred_time: time | None = None
    email_address: str | None = None
    phone_number: str | None = None

    @field_validator("preferred_time")
    @classmethod
    def drop_time_offset(cls, value: time | None) -> time | None:
        """A send time with an offset becomes the equivalent local wall-clock time."""
        if value is None or value.tzinfo is None:
            return value
        return _to_naive_local(datetime.combine(date.today(), value)).time()

    def to_domain(self, settings: Settings) -> ReminderPreferences:
        """
        Build domain preferences.

        Raises:
            ValidationException: If a non-empty email address or phone number is invalid
        """
        return ReminderPreferences(
            email=self.email,
            sms=self.sms,
            push=self.push,
            advance_days=(
                self.advance_days if self.advance_days is not None else settings.REMINDER_DEFAULT_ADVANCE_DAYS
            ),
            preferred_time=self.preferred_time or settings.REMINDER_DEFAULT_SEND_TIME,
            email_address=Email(self.email_address) if self.email_address else None,
            phone_number=PhoneNumber(self.phone_number) if self.phone_number else None,
        )


class ClockedRequest(BaseModel):
    """
    Base for requests evaluated against a reference moment.

    ``now`` defaults to the server clock. Values carrying an offset are
    converted to naive local time before they reach the pipeline.
    """

    patient: PatientSchema
    now: datetime | None = Field(default=None, description="Evaluate as of this moment (defaults to now)")

    @field_validator("now")
    @classmethod
    def normalize_now(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        _check_supported(value.date(), "now")
        return _to_naive_local(value)

    @property
    def today(self) -> date | None:
        return self.now.date() if self.now else None


class PatientEvaluationRequest(ClockedRequest):
    """Patient evaluation request schema."""


class ReminderPlanRequest(ClockedRequest):
    """Reminder planning request schema."""

    preferences: ReminderPreferencesSchema = Field(default_factory=ReminderPreferencesSchema)


class VaccinationPlanRequest(ClockedRequest):
    """Full vaccination plan request schema."""

    preferences: ReminderPreferencesSchema | None = None


# ==================== RESPONSES ====================


class VaccineResponse(BaseModel):
    """Vaccine catalog entry response schema."""

    name: str
    description: str
    age_groups: list[str]
    contraindications: list[str]
    interval_days: int
    interval: str
    booster_required: bool
    travel_regions: list[str]
    priority_class: str
    diseases: list[str]

    @classmethod
    def from_domain(cls, vaccine: VaccineDefinition) -> "VaccineResponse":
        return cls.model_validate(vaccine.to_dict())


class VaccineListResponse(BaseModel):
    """Vaccine list response schema."""

    vaccines: list[VaccineResponse]
    total: int


class OutbreakResponse(BaseModel):
    """Outbreak response schema."""

    disease: str
    location: str
    severity: str
    cases: int
    trend: str
    last_updated: date

    @classmethod
    def from_domain(cls, outbreak: Outbreak) -> "OutbreakResponse":
        return cls.model_validate(outbreak.to_dict())


class OutbreakListResponse(BaseModel):
    """Outbreak list response schema."""

    outbreaks: list[OutbreakResponse]
    total: int


class EligibilityResponse(BaseModel):
    """Eligibility map response schema."""

    patient_id: str
    eligibility: dict[str, bool]
    eligible_count: int


class RecommendationResponse(BaseModel):
    """Vaccine recommendation response schema."""

    vaccine: str
    priority: str
    due_date: date
    reason: str
    risk_score: int
    interactions: list[str]

    @classmethod
    def from_domain(cls, rec: VaccineRecommendation) -> "RecommendationResponse":
        return cls.model_validate(rec.to_dict())


class RecommendationListResponse(BaseModel):
    """Recommendation list response schema."""

    patient_id: str
    recommendations: list[RecommendationResponse]
    high_priority_count: int


class RiskFactorResponse(BaseModel):
    """Risk factor response schema."""

    category: str
    factor: str
    risk_level: str
    impact: int
    description: str

    @classmethod
    def from_domain(cls, factor: RiskFactor) -> "RiskFactorResponse":
        return cls.model_validate(factor.to_dict())


class RiskAssessmentResponse(BaseModel):
    """Risk assessment response schema."""

    patient_id: str
    overall_score: int
    level: str
    high_priority_count: int
    requires_consultation: bool
    risk_factors: list[RiskFactorResponse]
    factors_by_category: dict[str, list[RiskFactorResponse]]
    outbreak_focus: str
    outbreaks: list[OutbreakResponse]

    @classmethod
    def from_domain(cls, patient_id: str, assessment: RiskAssessment) -> "RiskAssessmentResponse":
        return cls(
            patient_id=patient_id,
            overall_score=assessment.overall_score,
            level=assessment.level,
            high_priority_count=assessment.high_priority_count,
            requires_consultation=assessment.requires_consultation,
            risk_factors=[RiskFactorResponse.from_domain(f) for f in assessment.risk_factors],
            factors_by_category={
                category: [RiskFactorResponse.from_domain(f) for f in factors]
                for category, factors in assessment.factors_by_category().items()
            },
            outbreak_focus=assessment.outbreak_focus,
            outbreaks=[OutbreakResponse.from_domain(o) for o in assessment.outbreaks],
        )


class AppointmentResponse(BaseModel):
    """Scheduled appointment response schema."""

    date: date
    vaccines: list[RecommendationResponse]
    conflicts: list[str]
    notes: str

    @classmethod
    def from_domain(cls, appointment: ScheduledAppointment) -> "AppointmentResponse":
        return cls.model_validate(appointment.to_dict())


class ScheduleResponse(BaseModel):
    """Optimized schedule response schema."""

    patient_id: str
    timeframe: str | None = None
    appointments: list[AppointmentResponse]
    total_vaccines: int
    protection_score: int


class ReminderResponse(BaseModel):
    """Scheduled reminder response schema."""

    id: str
    vaccine: str
    appointment_date: date
    reminder_date: date
    send_time: str
    channel: str
    status: str
    priority: str


class ReminderSummaryResponse(BaseModel):
    """Reminder counts."""

    total: int
    scheduled: int
    sent: int
    high_priority: int


class ReminderPlanResponse(BaseModel):
    """Reminder plan response schema."""

    reminders: list[ReminderResponse]
    summary: ReminderSummaryResponse

    @classmethod
    def from_domain(cls, plan: ReminderPlan) -> "ReminderPlanResponse":
        return cls.model_validate(plan.to_dict())


class VaccinationPlanResponse(BaseModel):
    """Full vaccination plan response schema."""

    patient: dict[str, Any]
    evaluated_on: date
    eligibility: dict[str, bool]
    recommendations: list[RecommendationResponse]
    risk_assessment: RiskAssessmentResponse
    schedule: ScheduleResponse
    reminders: ReminderPlanResponse | None = None


__all__ = [
    "TravelPlanSchema",
    "PreviousVaccinationSchema",
    "PatientSchema",
    "ReminderPreferencesSchema",
    "ClockedRequest",
    "PatientEvaluationRequest",
    "ReminderPlanRequest",
    "VaccinationPlanRequest",
    "VaccineResponse",
    "VaccineListResponse",
    "OutbreakResponse",
    "OutbreakListResponse",
    "EligibilityResponse",
    "RecommendationResponse",
    "RecommendationListResponse",
    "RiskFactorResponse",
    "RiskAssessmentResponse",
    "AppointmentResponse",
    "ScheduleResponse",
    "ReminderResponse",
    "ReminderSummaryResponse",
    "ReminderPlanResponse",
    "VaccinationPlanResponse",
]
