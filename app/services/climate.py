"""
Climate-aware daily water target and TDEE.

Plugged into the review engine as its water collaborator; the 35 ml/kg
baseline is scaled up for exercise sweat loss and for hot or dry climates.
"""

from dataclasses import dataclass

from app.core.errors import MissingInputError
from app.core.numeric import round_half_up
from app.models.profile import ClimateType, as_value
from app.schemas.onboarding import BodyAnalysis, PersonalInfo, WorkoutPreferences
from app.services.metabolic import calculate_tdee

TROPICAL_COUNTRIES = frozenset({
    "IN", "TH", "MY", "SG", "ID", "PH", "VN", "LK", "BD", "MM", "LA", "KH",
    "NG", "KE", "TZ", "UG", "GH", "CI", "CM",
    "BR", "CO", "VE", "EC", "PE",
})
COLD_COUNTRIES = frozenset({
    "NO", "SE", "FI", "IS", "GL",
    "CA", "RU", "BY", "UA", "KZ",
    "MN", "EE", "LV", "LT",
})
ARID_COUNTRIES = frozenset({
    "AE", "SA", "QA", "OM", "KW", "BH",
    "EG", "LY", "DZ", "MA", "TN",
    "JO", "SY", "IQ", "YE",
})

US_STATE_CLIMATE: dict[str, ClimateType] = {
    **dict.fromkeys(("FL", "HI"), ClimateType.TROPICAL),
    **dict.fromkeys(("AZ", "NV", "NM", "UT"), ClimateType.ARID),
    **dict.fromkeys(
        ("AK", "MN", "WI", "ND", "SD", "MT", "WY", "ME", "VT", "NH"),
        ClimateType.COLD,
    ),
    **dict.fromkeys(
        (
            "CA", "NY", "TX", "PA", "IL", "OH", "GA", "NC", "MI", "NJ", "VA", "WA",
            "MA", "IN", "MO", "TN", "MD", "CO", "SC", "AL", "LA", "KY", "OR", "OK",
            "CT", "IA", "MS", "AR", "KS", "NE", "WV", "ID", "RI", "DE",
        ),
        ClimateType.TEMPERATE,
    ),
}

WATER_ML_PER_KG = 35
ACTIVITY_WATER_BONUS_ML: dict[str, int] = {
    "sedentary": 0,
    "light": 500,
    "moderate": 1000,
    "active": 1500,
    "extreme": 2000,
}
CLIMATE_WATER_MULTIPLIER: dict[str, float] = {
    "tropical": 1.5,
    "temperate": 1.0,
    "cold": 0.9,
    "arid": 1.7,
}
WATER_STEP_ML = 50

# thermoregulation cost on top of activity TDEE
CLIMATE_TDEE_MULTIPLIER: dict[str, float] = {
    "temperate": 1.0,
    "tropical": 1.075,
    "cold": 1.15,
    "arid": 1.05,
}


@dataclass
class ClimateDetection:
    climate: ClimateType
    confidence: int
    source: str
    should_ask_user: bool


def detect_climate(country: str, state: str = "") -> ClimateDetection:
    country = (country or "").upper()
    state = (state or "").upper()

    for countries, climate in (
        (TROPICAL_COUNTRIES, ClimateType.TROPICAL),
        (COLD_COUNTRIES, ClimateType.COLD),
        (ARID_COUNTRIES, ClimateType.ARID),
    ):
        if country in countries:
            return ClimateDetection(climate, 85, "country_database", False)

    if country == "US" and state in US_STATE_CLIMATE:
        return ClimateDetection(US_STATE_CLIMATE[state], 90, "state_database", False)

    return ClimateDetection(ClimateType.TEMPERATE, 50, "default", True)


def calculate_climate_water(weight_kg: float, activity_level: str, climate: str) -> int:
    """(35 ml/kg + activity bonus) × climate multiplier, to the nearest 50 ml."""
    if not weight_kg:
        raise MissingInputError("weight", "water intake")

    water_ml = weight_kg * WATER_ML_PER_KG
    water_ml += ACTIVITY_WATER_BONUS_ML.get(as_value(activity_level), 0)
    water_ml *= CLIMATE_WATER_MULTIPLIER[as_value(climate)]
    return round_half_up(water_ml / WATER_STEP_ML) * WATER_STEP_ML


def climate_water_calculator(
    personal_info: PersonalInfo,
    body_analysis: BodyAnalysis,
    workout_preferences: WorkoutPreferences,
) -> int:
    detection = detect_climate(personal_info.country, personal_info.state)
    return calculate_climate_water(
        body_analysis.current_weight_kg,
        workout_preferences.activity_level,
        detection.climate,
    )


def calculate_tdee_with_climate(bmr: float, activity_level: str, climate: str = "temperate") -> int:
    """BMR × activity factor × climate factor; unknown climates count as temperate."""
    if not bmr or bmr <= 0:
        raise MissingInputError("BMR", "TDEE")

    activity_tdee = calculate_tdee(bmr, activity_level)
    return round_half_up(activity_tdee * CLIMATE_TDEE_MULTIPLIER.get(as_value(climate), 1.0))
