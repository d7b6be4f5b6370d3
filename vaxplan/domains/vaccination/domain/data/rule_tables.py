"""
Rule Tables

Fixed lookup sets and thresholds used by the recommendation, risk and
scheduling services.
"""

# Conditions that qualify a patient for high-risk class vaccines
HIGH_RISK_QUALIFYING_CONDITIONS: frozenset[str] = frozenset(
    {"Diabetes", "Heart Disease", "Immunocompromised", "Chronic Kidney Disease", "COPD"}
)
HIGH_RISK_AGE_THRESHOLD = 65

# Risk scoring: health conditions
HIGH_RISK_CONDITIONS: frozenset[str] = frozenset(
    {"Immunocompromised", "Heart Disease", "Diabetes", "Chronic Kidney Disease", "Cancer"}
)
MEDIUM_RISK_CONDITIONS: frozenset[str] = frozenset({"Asthma", "COPD", "Hypertension"})

# Risk scoring: travel destinations (high-risk list is checked first)
HIGH_RISK_REGIONS: tuple[str, ...] = ("Sub-Saharan Africa", "Southeast Asia", "South America", "India")
MEDIUM_RISK_REGIONS: tuple[str, ...] = ("Eastern Europe", "Central America", "Middle East")

# Risk scoring: points
BASELINE_RISK = 20
MAX_RISK_SCORE = 100
ADVANCED_AGE_THRESHOLD = 65
ADVANCED_AGE_IMPACT = 25
YOUNG_AGE_THRESHOLD = 2
YOUNG_AGE_IMPACT = 20
HIGH_RISK_CONDITION_IMPACT = 20
MEDIUM_RISK_CONDITION_IMPACT = 10
HIGH_RISK_TRAVEL_IMPACT = 15
MEDIUM_RISK_TRAVEL_IMPACT = 8
MISSING_HIGH_PRIORITY_IMPACT = 5  # per high-priority recommendation
HIGH_RISK_LEVEL_THRESHOLD = 70
MEDIUM_RISK_LEVEL_THRESHOLD = 40

# Travel urgency (days until departure)
URGENT_TRAVEL_WINDOW_DAYS = 30
URGENT_TRAVEL_DUE_DAYS = 7
STANDARD_TRAVEL_DUE_DAYS = 14
TRAVEL_NOTE_WINDOW_DAYS = 60

# Schedule optimizer
LIVE_VACCINES: frozenset[str] = frozenset({"Yellow Fever", "Japanese Encephalitis"})
HEPATITIS_MARKER = "Hepatitis"
CONFLICT_SEPARATION_DAYS = 7
MAX_NOTED_INTERACTIONS = 2

# Reminders
FINAL_REMINDER_DAYS_BEFORE = 1
