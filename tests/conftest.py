"""
Shared pytest fixtures for all tests.

Every test runs against a fixed reference date so due dates, travel
urgency and reminder statuses are deterministic.
"""

import os
from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

from tests.utils import NOW, TODAY, create_recommendation, create_trip  # noqa: E402
from vaxplan.core.container import reset_container  # noqa: E402
from vaxplan.domains.vaccination.domain.data import VACCINE_CATALOG  # noqa: E402
from vaxplan.domains.vaccination.domain.entities import Patient, PreviousVaccination  # noqa: E402

# ============================================================================
# REFERENCE DATA
# ============================================================================


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def catalog():
    return VACCINE_CATALOG


@pytest.fixture
def vaccine_by_name(catalog):
    """Look up a catalog entry by exact name."""

    def _lookup(name: str):
        return next(v for v in catalog if v.name == name)

    return _lookup


# ============================================================================
# PATIENT FIXTURES
# ============================================================================


@pytest.fixture
def healthy_adult() -> Patient:
    """30-year-old with no conditions, allergies or travel."""
    return Patient(id="healthy-adult", name="Alex Rivera", age=30)


@pytest.fixture
def senior_cardiac_patient() -> Patient:
    """70-year-old with heart disease, no allergies, no travel."""
    return Patient(
        id="senior-cardiac",
        name="Morgan Lee",
        age=70,
        health_conditions=("Heart Disease",),
    )


@pytest.fixture
def africa_traveler() -> Patient:
    """30-year-old departing for Sub-Saharan Africa in 10 days."""
    return Patient(
        id="africa-traveler",
        name="Sam Okafor",
        age=30,
        travel_plans=(create_trip("Sub-Saharan Africa", departs_in_days=10, days_away=20),),
    )


@pytest.fixture
def recent_hepatitis_b_patient() -> Patient:
    """Adult who received a Hepatitis B dose 10 days ago."""
    return Patient(
        id="recent-hep-b",
        name="Jordan Kim",
        age=40,
        previous_vaccinations=(
            PreviousVaccination(vaccine="Hepatitis B", administered_on=TODAY - timedelta(days=10)),
        ),
    )


@pytest.fixture
def make_recommendation():
    """Factory fixture for recommendations due relative to TODAY."""
    return create_recommendation


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def fastapi_app():
    """Create FastAPI app for testing."""
    from vaxplan.core.app_factory import create_app

    reset_container()
    yield create_app()
    reset_container()


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create test client for API testing."""
    return TestClient(fastapi_app)
