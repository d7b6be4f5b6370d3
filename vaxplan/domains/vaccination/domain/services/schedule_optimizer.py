"""
Schedule Optimizer for Vaccination Domain

Domain service that sequences recommendations into appointments, merging
compatible vaccines and deferring interacting ones.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta

from ..data import rule_tables as rules
from ..entities.appointment import ScheduledAppointment
from ..entities.patient import Patient
from ..entities.recommendation import VaccineRecommendation
from ..value_objects.vaccination_types import ScheduleTimeframe

logger = logging.getLogger(__name__)

RESCHEDULED_NOTE = "Rescheduled due to vaccine interactions."
LIVE_VACCINE_CONFLICT = "Multiple live vaccines scheduled - requires 4-week separation"
HEPATITIS_CONFLICT = "Different hepatitis vaccines - consider combination vaccine"
DEFAULT_NOTE = "Routine vaccination as recommended."


def _is_live(vaccine_name: str) -> bool:
    return any(live in vaccine_name for live in rules.LIVE_VACCINES)


@dataclass
class _AppointmentDraft:
    """Appointment under construction during a single optimization run."""

    date: date
    vaccines: list[VaccineRecommendation]
    conflicts: list[str] = field(default_factory=list)
    notes: str = ""

    def freeze(self) -> ScheduledAppointment:
        return ScheduledAppointment(
            date=self.date,
            vaccines=tuple(self.vaccines),
            conflicts=tuple(self.conflicts),
            notes=self.notes,
        )


class ScheduleOptimizer:
    """
    Domain service for vaccination schedule optimization.

    Handles:
    - Ordering by priority, then due date
    - Merging same-day vaccines into one appointment
    - Conflict detection (live vaccines, different hepatitis vaccines)
    - Deferring conflicting vaccines by a week

    Example:
        ```python
        optimizer = ScheduleOptimizer()
        appointments = optimizer.optimize(recommendations, patient, today=date.today())
        for appointment in appointments:
            print(appointment.date, appointment.vaccine_names, appointment.conflicts)
        ```
    """

    def __init__(self, separation_days: int = rules.CONFLICT_SEPARATION_DAYS):
        """
        Initialize schedule optimizer.

        Args:
            separation_days: Minimum distance between appointments holding an
                interacting pair, and the deferral step for conflicts
        """
        self.separation_days = separation_days

    def optimize(
        self,
        recommendations: Sequence[VaccineRecommendation],
        patient: Patient,
        today: date | None = None,
    ) -> list[ScheduledAppointment]:
        """
        Build the appointment schedule.

        Args:
            recommendations: Recommendations to schedule (any order)
            patient: Patient profile (used for travel notes)
            today: Reference date and initial scheduling cursor

        Returns:
            Appointments sorted by date; each vaccine appears at most once
        """
        today = today or date.today()
        ordered = sorted(recommendations, key=lambda r: (-r.priority.weight, r.due_date))

        drafts: list[_AppointmentDraft] = []
        processed: set[str] = set()
        cursor = today

        for rec in ordered:
            # First occurrence wins
            if rec.vaccine in processed:
                continue

            candidate = max(cursor, rec.due_date)
            same_day = self._find_same_day(drafts, candidate)
            conflicts = self.check_conflicts(rec, self._vaccines_near(drafts, candidate))
            notes = self.scheduling_notes(rec, patient, today)

            if conflicts:
                deferred = self._conflict_free_date(rec, drafts, candidate)
                drafts.append(
                    _AppointmentDraft(
                        date=deferred,
                        vaccines=[rec],
                        conflicts=conflicts,
                        notes=f"{notes} {RESCHEDULED_NOTE}",
                    )
                )
                logger.info(f"Deferred {rec.vaccine} to {deferred.isoformat()}: {'; '.join(conflicts)}")
            elif same_day is not None:
                same_day.vaccines.append(rec)
                same_day.notes += f" {notes}"
            else:
                drafts.append(_AppointmentDraft(date=candidate, vaccines=[rec], notes=notes))

            processed.add(rec.vaccine)
            cursor = candidate + timedelta(days=1)

        appointments = sorted((draft.freeze() for draft in drafts), key=lambda a: a.date)
        logger.info(
            f"Optimized schedule for patient {patient.id}: "
            f"{len(processed)} vaccines in {len(appointments)} appointments"
        )
        return appointments

    def check_conflicts(
        self,
        new_vaccine: VaccineRecommendation,
        existing_vaccines: Iterable[VaccineRecommendation],
    ) -> list[str]:
        """
        Detect interactions between a vaccine and already scheduled ones.

        Args:
            new_vaccine: Vaccine being scheduled
            existing_vaccines: Vaccines already near the candidate date

        Returns:
            Conflict descriptions (empty when compatible)
        """
        existing = list(existing_vaccines)
        conflicts: list[str] = []

        if _is_live(new_vaccine.vaccine) and any(_is_live(v.vaccine) for v in existing):
            conflicts.append(LIVE_VACCINE_CONFLICT)

        if rules.HEPATITIS_MARKER in new_vaccine.vaccine and any(
            rules.HEPATITIS_MARKER in v.vaccine and v.vaccine != new_vaccine.vaccine for v in existing
        ):
            conflicts.append(HEPATITIS_CONFLICT)

        return conflicts

    def scheduling_notes(self, rec: VaccineRecommendation, patient: Patient, today: date) -> str:
        """Free-text scheduling notes for one recommendation."""
        notes: list[str] = []

        if rec.is_high_priority:
            notes.append("High priority - schedule as soon as possible.")

        if "travel" in rec.vaccine.lower() or "travel" in rec.reason.lower():
            upcoming = next(
                (
                    trip
                    for trip in patient.travel_plans
                    if 0 < trip.days_until_departure(today) <= rules.TRAVEL_NOTE_WINDOW_DAYS
                ),
                None,
            )
            if upcoming is not None:
                notes.append(
                    f"Required for travel to {upcoming.destination} on {upcoming.departure_date.isoformat()}."
                )

        if rec.interactions:
            notes.append(f"Monitor for: {', '.join(rec.interactions[: rules.MAX_NOTED_INTERACTIONS])}.")

        return " ".join(notes) or DEFAULT_NOTE

    @staticmethod
    def protection_score(recommendations: Sequence[VaccineRecommendation]) -> int:
        """
        Rough coverage indicator: 100 minus 10 per outstanding recommendation,
        minus 20 more if any is high priority, clamped to [0, 100].
        """
        if not recommendations:
            return 0
        completed = max(0, 100 - len(recommendations) * 10)
        penalty = 20 if any(rec.is_high_priority for rec in recommendations) else 0
        return max(0, min(100, completed - penalty))

    @staticmethod
    def within_timeframe(
        appointments: Iterable[ScheduledAppointment],
        timeframe: ScheduleTimeframe,
        today: date | None = None,
    ) -> list[ScheduledAppointment]:
        """Appointments dated no later than ``today`` plus the timeframe horizon."""
        horizon = (today or date.today()) + timedelta(days=timeframe.days)
        return [appointment for appointment in appointments if appointment.date <= horizon]

    def _find_same_day(self, drafts: list[_AppointmentDraft], candidate: date) -> _AppointmentDraft | None:
        """Existing appointment within 24 hours of the candidate date."""
        for draft in drafts:
            if abs((draft.date - candidate).days) < 1:
                return draft
        return None

    def _vaccines_near(self, drafts: list[_AppointmentDraft], target: date) -> list[VaccineRecommendation]:
        """Vaccines on appointments closer than the separation window to ``target``."""
        return [
            rec
            for draft in drafts
            if abs((draft.date - target).days) < self.separation_days
            for rec in draft.vaccines
        ]

    def _conflict_free_date(
        self,
        rec: VaccineRecommendation,
        drafts: list[_AppointmentDraft],
        candidate: date,
    ) -> date:
        """
        Deferred date for a conflicting vaccine.

        One separation step after the candidate; further steps only while the
        deferred date still sits inside the window of an interacting vaccine.
        """
        step = timedelta(days=self.separation_days)
        deferred = candidate + step
        while self.check_conflicts(rec, self._vaccines_near(drafts, deferred)):
            deferred += step
        return deferred
