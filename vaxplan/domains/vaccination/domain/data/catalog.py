"""
Vaccine Catalog

Immutable, process-wide table of vaccine definitions. Illustrative data,
not clinically validated.
"""

from ..entities.vaccine import VaccineDefinition
from ..value_objects.age_group import AgeGroupRule
from ..value_objects.vaccination_types import VaccinePriorityClass


def _ages(*labels: str) -> tuple[AgeGroupRule, ...]:
    return tuple(AgeGroupRule(label) for label in labels)


VACCINE_CATALOG: tuple[VaccineDefinition, ...] = (
    VaccineDefinition(
        name="COVID-19 (mRNA)",
        description="Protection against COVID-19 coronavirus",
        age_groups=_ages("6+ months"),
        contraindications=("Previous severe reaction", "Allergic to mRNA components"),
        interval_days=28,
        booster_required=True,
        travel_regions=(),
        priority_class=VaccinePriorityClass.ROUTINE,
        diseases=("COVID-19",),
    ),
    VaccineDefinition(
        name="Influenza (Flu)",
        description="Annual protection against seasonal influenza",
        age_groups=_ages("6+ months"),
        contraindications=("Eggs", "Previous severe reaction", "Guillain-Barré syndrome"),
        interval_days=365,
        booster_required=True,
        travel_regions=(),
        priority_class=VaccinePriorityClass.ROUTINE,
        diseases=("Influenza A", "Influenza B"),
    ),
    VaccineDefinition(
        name="Tetanus-Diphtheria (Td)",
        description="Protection against tetanus and diphtheria",
        age_groups=_ages("11+ years"),
        contraindications=("Previous severe reaction",),
        interval_days=3650,  # 10 years
        booster_required=True,
        travel_regions=(),
        priority_class=VaccinePriorityClass.ROUTINE,
        diseases=("Tetanus", "Diphtheria"),
    ),
    VaccineDefinition(
        name="Hepatitis A",
        description="Protection against hepatitis A virus",
        age_groups=_ages("12+ months"),
        contraindications=("Previous severe reaction",),
        interval_days=182,  # second dose after 6 months
        booster_required=False,
        travel_regions=("Asia", "Africa", "Central America", "South America"),
        priority_class=VaccinePriorityClass.TRAVEL,
        diseases=("Hepatitis A",),
    ),
    VaccineDefinition(
        name="Hepatitis B",
        description="Protection against hepatitis B virus",
        age_groups=_ages("Birth+"),
        contraindications=("Previous severe reaction", "Yeast"),
        interval_days=28,
        booster_required=False,
        travel_regions=("Asia", "Africa", "Eastern Europe"),
        priority_class=VaccinePriorityClass.ROUTINE,
        diseases=("Hepatitis B",),
    ),
    VaccineDefinition(
        name="Japanese Encephalitis",
        description="Protection against Japanese encephalitis virus",
        age_groups=_ages("2+ months"),
        contraindications=("Previous severe reaction",),
        interval_days=28,
        booster_required=True,
        travel_regions=("Japan", "Korea", "China", "Southeast Asia", "India"),
        priority_class=VaccinePriorityClass.TRAVEL,
        diseases=("Japanese Encephalitis",),
    ),
    VaccineDefinition(
        name="Yellow Fever",
        description="Protection against yellow fever virus",
        age_groups=_ages("9+ months"),
        contraindications=("Immunocompromised", "Eggs", "60+ years (relative)"),
        interval_days=0,  # single dose, lifetime protection
        booster_required=False,
        travel_regions=("Sub-Saharan Africa", "Tropical South America"),
        priority_class=VaccinePriorityClass.TRAVEL,
        diseases=("Yellow Fever",),
    ),
    VaccineDefinition(
        name="Typhoid",
        description="Protection against typhoid fever",
        age_groups=_ages("2+ years"),
        contraindications=("Immunocompromised", "Previous severe reaction"),
        interval_days=1095,  # 3 years
        booster_required=True,
        travel_regions=("India", "Southeast Asia", "Africa", "Central America"),
        priority_class=VaccinePriorityClass.TRAVEL,
        diseases=("Typhoid Fever",),
    ),
    VaccineDefinition(
        name="Meningococcal ACWY",
        description="Protection against meningococcal disease",
        age_groups=_ages("11-12 years", "16 years (booster)"),
        contraindications=("Previous severe reaction",),
        interval_days=1825,  # 5 years
        booster_required=True,
        travel_regions=("Sub-Saharan Africa", "Saudi Arabia (Hajj)"),
        priority_class=VaccinePriorityClass.HIGH_RISK,
        diseases=("Meningococcal Disease",),
    ),
    VaccineDefinition(
        name="Pneumococcal (PPSV23)",
        description="Protection against pneumococcal disease",
        age_groups=_ages("65+ years", "2-64 years (high-risk)"),
        contraindications=("Previous severe reaction",),
        interval_days=1825,  # 5 years for high-risk
        booster_required=True,
        travel_regions=(),
        priority_class=VaccinePriorityClass.HIGH_RISK,
        diseases=("Pneumococcal Disease",),
    ),
)
