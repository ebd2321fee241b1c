"""Metabolic calculations: BMI, Mifflin-St Jeor BMR, TDEE variants, metabolic age and habit scoring."""

import logging
import math
from dataclasses import dataclass

from app.core.errors import MissingInputError
from app.core.numeric import clamp, round_half_up
from app.models.profile import BodyFatSource, Confidence, Intensity, as_value
from app.schemas.onboarding import habit_flag

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIER: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "extreme": 1.9,
}

# Non-exercise daily expenditure by occupation
OCCUPATION_MULTIPLIER: dict[str, float] = {
    "desk_job": 1.25,
    "light_active": 1.35,
    "moderate_active": 1.45,
    "heavy_labor": 1.6,
    "very_active": 1.7,
}

MET_VALUES: dict[str, dict[str, float]] = {
    "beginner": {
        "strength": 3.5,
        "cardio": 5.0,
        "sports": 4.5,
        "yoga": 2.5,
        "hiit": 6.0,
        "pilates": 3.0,
        "flexibility": 2.5,
        "functional": 4.0,
        "mixed": 4.0,
    },
    "intermediate": {
        "strength": 5.0,
        "cardio": 7.0,
        "sports": 6.5,
        "yoga": 3.5,
        "hiit": 8.0,
        "pilates": 4.5,
        "flexibility": 3.0,
        "functional": 6.0,
        "mixed": 6.0,
    },
    "advanced": {
        "strength": 6.5,
        "cardio": 9.0,
        "sports": 8.5,
        "yoga": 4.5,
        "hiit": 10.0,
        "pilates": 6.0,
        "flexibility": 4.0,
        "functional": 7.5,
        "mixed": 7.5,
    },
}
DEFAULT_MET = 5.0

# (min_age, max_age, expected BMR) for a 70 kg male / 60 kg female
EXPECTED_BMR_BY_AGE: dict[str, list[tuple[int, int, int]]] = {
    "male": [
        (18, 24, 1750),
        (25, 34, 1700),
        (35, 44, 1650),
        (45, 54, 1580),
        (55, 64, 1500),
        (65, 120, 1400),
    ],
    "female": [
        (18, 24, 1400),
        (25, 34, 1350),
        (35, 44, 1300),
        (45, 54, 1250),
        (55, 64, 1200),
        (65, 120, 1150),
    ],
}

HABIT_WEIGHTS: dict[str, int] = {
    "drinks_enough_water": 10,
    "limits_sugary_drinks": 15,
    "eats_regular_meals": 25,
    "avoids_late_night_eating": 10,
    "controls_portion_sizes": 30,
    "reads_nutrition_labels": 20,
    "eats_5_servings_fruits_veggies": 20,
    "limits_refined_sugar": 15,
    "includes_healthy_fats": 10,
    "eats_processed_foods": -20,
    "drinks_alcohol": -10,
    "smokes_tobacco": -15,
}
HABIT_SCORE_MIN = -45
HABIT_SCORE_RANGE = 200

ACTIVITY_ORDER = ["sedentary", "light", "moderate", "active", "extreme"]

OCCUPATION_MIN_ACTIVITY: dict[str, str | None] = {
    "desk_job": None,
    "light_active": "light",
    "moderate_active": "moderate",
    "heavy_labor": "active",
    "very_active": "extreme",
}


@dataclass
class IntensityRecommendation:
    level: Intensity
    reasoning: str


@dataclass
class BodyFatEstimate:
    value: float
    source: BodyFatSource
    confidence: Confidence
    show_warning: bool


@dataclass
class ActivityCheck:
    is_valid: bool
    minimum_required: str | None = None
    message: str | None = None


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    if not weight_kg:
        raise MissingInputError("weight", "BMI")
    if not height_cm:
        raise MissingInputError("height", "BMI")

    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def calculate_bmr(
    weight_kg: float,
    height_cm: float,
    age_years: int,
    gender: str,
) -> float:
    """
    Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age − 161
    Other:  BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age − 78  (mean of both offsets)
    """
    if not weight_kg:
        raise MissingInputError("weight", "BMR")
    if not height_cm:
        raise MissingInputError("height", "BMR")
    if not age_years:
        raise MissingInputError("age", "BMR")
    if not gender:
        raise MissingInputError("gender", "BMR")

    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    gender = as_value(gender)
    if gender == "male":
        return base + 5
    if gender == "female":
        return base - 161
    return base - 78


def calculate_tdee(bmr: float, activity_level: str) -> float:
    multiplier = ACTIVITY_MULTIPLIER.get(as_value(activity_level))
    if multiplier is None:
        logger.debug("Unknown activity level %r, using sedentary factor", activity_level)
        multiplier = ACTIVITY_MULTIPLIER["sedentary"]
    return bmr * multiplier


def calculate_base_tdee(bmr: float, occupation: str) -> float:
    return bmr * OCCUPATION_MULTIPLIER.get(as_value(occupation), OCCUPATION_MULTIPLIER["desk_job"])


def estimate_session_calorie_burn(
    duration_minutes: float,
    intensity: str,
    weight_kg: float,
    workout_types: list[str],
) -> int:
    """Calories = MET × weight(kg) × duration(hours), MET keyed by intensity and first workout type."""
    primary_type = workout_types[0].lower() if workout_types and workout_types[0] else "mixed"
    row = MET_VALUES.get(as_value(intensity), {})
    met = row.get(primary_type) or row.get("mixed") or DEFAULT_MET

    hours = duration_minutes / 60
    return round_half_up(met * weight_kg * hours)


def calculate_weekly_exercise_burn(
    frequency: int,
    duration_minutes: float,
    intensity: str,
    weight_kg: float,
    workout_types: list[str],
) -> int:
    per_session = estimate_session_calorie_burn(duration_minutes, intensity, weight_kg, workout_types)
    return per_session * frequency


def calculate_daily_exercise_burn(
    frequency: int,
    duration_minutes: float,
    intensity: str,
    weight_kg: float,
    workout_types: list[str],
) -> int:
    weekly = calculate_weekly_exercise_burn(frequency, duration_minutes, intensity, weight_kg, workout_types)
    return round_half_up(weekly / 7)


def _expected_bmr_for_age(age_years: int, gender: str) -> int:
    is_male = as_value(gender) == "male"
    references = EXPECTED_BMR_BY_AGE["male" if is_male else "female"]
    for low, high, bmr in references:
        if low <= age_years <= high:
            return bmr
    return 1650 if is_male else 1300


def calculate_metabolic_age(bmr: float, age_years: int, gender: str) -> int:
    """
    Compare actual BMR with the population reference for the chronological age.

    A higher BMR than expected lowers the metabolic age, at 10 kcal/year for
    males and 8 kcal/year otherwise. Clamped to 18..85.
    """
    bmr_difference = _expected_bmr_for_age(age_years, gender) - bmr
    cal_per_year = 10 if as_value(gender) == "male" else 8
    metabolic_age = age_years + bmr_difference / cal_per_year
    return clamp(round_half_up(metabolic_age), 18, 85)


def calculate_recommended_intensity(
    experience_years: float,
    pushups: int,
    run_minutes: int,
    age_years: int,
    gender: str,
) -> IntensityRecommendation:
    if experience_years >= 3:
        return IntensityRecommendation(
            Intensity.ADVANCED,
            "3+ years training experience indicates advanced level",
        )
    if experience_years < 1:
        return IntensityRecommendation(
            Intensity.BEGINNER,
            "Less than 1 year experience - starting with beginner intensity for safety",
        )

    if as_value(gender) == "male":
        pushup_threshold = 25 if age_years < 40 else 20
    else:
        pushup_threshold = 15 if age_years < 40 else 10
    run_threshold = 15

    meets_strength = pushups >= pushup_threshold
    meets_cardio = run_minutes >= run_threshold

    if meets_strength and meets_cardio:
        return IntensityRecommendation(
            Intensity.ADVANCED,
            "Strong fitness test results indicate advanced level capability",
        )
    if meets_strength or meets_cardio:
        return IntensityRecommendation(
            Intensity.INTERMEDIATE,
            "1-3 years experience with solid fitness test results",
        )
    return IntensityRecommendation(
        Intensity.BEGINNER,
        "Building foundation strength and cardio base recommended",
    )


def calculate_pregnancy_calories(
    tdee: float,
    is_pregnant: bool,
    trimester: int | None = None,
    is_breastfeeding: bool = False,
) -> float:
    if is_breastfeeding:
        return tdee + 500
    if is_pregnant and trimester:
        return tdee + {1: 0, 2: 340, 3: 450}.get(trimester, 0)
    return tdee


def calculate_diet_readiness_score(habits) -> int:
    """Weighted habit sum normalized from its -45..155 range into 0..100."""
    raw = sum(weight for name, weight in HABIT_WEIGHTS.items() if habit_flag(habits, name))
    normalized = round_half_up((raw - HABIT_SCORE_MIN) / HABIT_SCORE_RANGE * 100)
    return clamp(normalized, 0, 100)


def calculate_water_intake(weight_kg: float) -> int:
    return round_half_up(weight_kg * 35)


def calculate_fiber(daily_calories: float) -> int:
    return round_half_up(daily_calories / 1000 * 14)


def estimate_body_fat_from_bmi(bmi: float, gender: str, age_years: int) -> int:
    """Deurenberg: 1.2 × BMI + 0.23 × age − 16.2 (male) / − 5.4 (female)."""
    male_estimate = 1.2 * bmi + 0.23 * age_years - 16.2
    female_estimate = 1.2 * bmi + 0.23 * age_years - 5.4
    gender = as_value(gender)
    if gender == "male":
        return round_half_up(male_estimate)
    if gender == "female":
        return round_half_up(female_estimate)
    return round_half_up((male_estimate + female_estimate) / 2)


def get_final_body_fat_percentage(
    user_input: float | None = None,
    ai_estimated: float | None = None,
    ai_confidence: float | None = None,
    bmi: float | None = None,
    gender: str | None = None,
    age_years: int | None = None,
) -> BodyFatEstimate:
    """
    Pick the most trustworthy body fat value.

    Priority: user input > AI analysis (confidence > 70) > BMI estimate > default.
    """
    candidates = [
        (
            user_input is not None and user_input > 0,
            lambda: user_input,
            BodyFatSource.USER_INPUT,
            Confidence.HIGH,
            False,
        ),
        (
            bool(ai_estimated) and bool(ai_confidence) and ai_confidence > 70,
            lambda: ai_estimated,
            BodyFatSource.AI_ANALYSIS,
            Confidence.MEDIUM,
            True,
        ),
        (
            bool(bmi and gender and age_years),
            lambda: estimate_body_fat_from_bmi(bmi, gender, age_years),
            BodyFatSource.BMI_ESTIMATION,
            Confidence.LOW,
            True,
        ),
    ]
    for available, value, source, confidence, show_warning in candidates:
        if available:
            return BodyFatEstimate(value(), source, confidence, show_warning)

    default = 20 if as_value(gender) == "male" else 28
    return BodyFatEstimate(default, BodyFatSource.DEFAULT_ESTIMATE, Confidence.LOW, True)


def validate_activity_for_occupation(occupation: str, activity_level: str) -> ActivityCheck:
    """Reject activity levels below the minimum implied by the occupation."""
    occupation = as_value(occupation)
    minimum = OCCUPATION_MIN_ACTIVITY.get(occupation)
    if not minimum:
        return ActivityCheck(is_valid=True)

    selected = as_value(activity_level)
    selected_index = ACTIVITY_ORDER.index(selected) if selected in ACTIVITY_ORDER else -1
    if selected_index < ACTIVITY_ORDER.index(minimum):
        return ActivityCheck(
            is_valid=False,
            minimum_required=minimum,
            message=(
                f'Your occupation ({occupation.replace("_", " ", 1)}) requires at least '
                f'"{minimum}" activity level. Please adjust.'
            ),
        )
    return ActivityCheck(is_valid=True)


def apply_age_modifier(tdee: float, age_years: int, gender: str) -> float:
    modifier = 1.0
    if age_years >= 60:
        modifier = 0.85
    elif age_years >= 50:
        modifier = 0.9
    elif age_years >= 40:
        modifier = 0.95
    elif age_years >= 30:
        modifier = 0.98

    # perimenopause window
    if as_value(gender) == "female" and 45 <= age_years <= 55:
        modifier = modifier * 0.95

    return tdee * modifier


def apply_sleep_penalty(timeline_weeks: float, sleep_hours: float) -> int:
    """Extend the timeline by 20% per hour of sleep under 7, rounded up."""
    if sleep_hours >= 7:
        return timeline_weeks
    penalty = (7 - sleep_hours) * 0.2
    return math.ceil(timeline_weeks * (1 + penalty))
