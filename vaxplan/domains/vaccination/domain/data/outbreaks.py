"""
Outbreak Fixture

Static outbreak snapshot. There is no live epidemiological feed.
"""

from datetime import date

from ..entities.outbreak import Outbreak
from ..value_objects.vaccination_types import OutbreakTrend, RiskLevel

OUTBREAK_FIXTURE: tuple[Outbreak, ...] = (
    Outbreak(
        disease="Influenza A (H3N2)",
        location="United States",
        severity=RiskLevel.MEDIUM,
        cases=15420,
        trend=OutbreakTrend.INCREASING,
        last_updated=date(2024, 1, 15),
    ),
    Outbreak(
        disease="COVID-19",
        location="Global",
        severity=RiskLevel.MEDIUM,
        cases=1250000,
        trend=OutbreakTrend.STABLE,
        last_updated=date(2024, 1, 14),
    ),
    Outbreak(
        disease="Hepatitis A",
        location="Southeast Asia",
        severity=RiskLevel.HIGH,
        cases=892,
        trend=OutbreakTrend.INCREASING,
        last_updated=date(2024, 1, 12),
    ),
    Outbreak(
        disease="Yellow Fever",
        location="West Africa",
        severity=RiskLevel.HIGH,
        cases=234,
        trend=OutbreakTrend.STABLE,
        last_updated=date(2024, 1, 10),
    ),
    Outbreak(
        disease="Japanese Encephalitis",
        location="Eastern Asia",
        severity=RiskLevel.MEDIUM,
        cases=156,
        trend=OutbreakTrend.DECREASING,
        last_updated=date(2024, 1, 8),
    ),
)
