"""Ideal weight, safe loss pacing and body fat ranges."""

from dataclasses import dataclass

from app.core.numeric import clamp, round_half_up
from app.models.profile import as_value

CM_PER_INCH = 2.54
FIVE_FEET_INCHES = 60
DEVINE_BASE_KG = {"male": 50, "female": 45.5}
DEVINE_KG_PER_INCH = 2.3

MIN_WEEKLY_LOSS_KG = 0.3
MAX_WEEKLY_LOSS_KG = 1.2

# (weight above which the band applies, share of body weight per week)
LOSS_RATE_BANDS: list[tuple[float, float]] = [
    (100, 0.01),
    (80, 0.008),
]
LOSS_RATE_BASE_SHARE = 0.006
LOSS_RATE_GENDER_FACTOR = {"female": 0.85, "male": 1.0}
LOSS_RATE_OTHER_FACTOR = 0.925

# (upper age exclusive, male (min, max), female (min, max)); None = open-ended
BODY_FAT_BANDS: list[tuple[int | None, tuple[int, int], tuple[int, int]]] = [
    (25, (6, 17), (16, 24)),
    (35, (7, 18), (16, 25)),
    (45, (12, 21), (17, 28)),
    (55, (14, 23), (18, 30)),
    (None, (16, 25), (18, 31)),
]
DEFAULT_BODY_FAT_RANGE = (7, 18)


@dataclass
class WeightRange:
    min: float
    max: float


@dataclass
class BodyFatRange:
    min: int
    max: int


@dataclass
class BodyComposition:
    lean_mass: float
    fat_mass: float


def calculate_ideal_weight_range(height_cm: float, gender: str, age_years: int | None = None) -> WeightRange:
    """
    Devine formula ±10% for male/female; plain BMI 18.5-24.9 band otherwise.

    age_years is accepted for callers that pass the full profile; it does not change the range.
    """
    gender = as_value(gender)
    if gender in ("other", "prefer_not_to_say"):
        height_m = height_cm / 100
        return WeightRange(
            min=round_half_up(18.5 * height_m * height_m, 2),
            max=round_half_up(24.9 * height_m * height_m, 2),
        )

    inches_over_five_feet = max(0, height_cm / CM_PER_INCH - FIVE_FEET_INCHES)
    base = DEVINE_BASE_KG["male"] if gender == "male" else DEVINE_BASE_KG["female"]
    ideal = base + DEVINE_KG_PER_INCH * inches_over_five_feet

    return WeightRange(
        min=round_half_up(ideal * 0.9, 2),
        max=round_half_up(ideal * 1.1, 2),
    )


def calculate_healthy_weight_loss_rate(current_weight_kg: float, gender: str | None = None) -> float:
    """Weekly kg loss as 0.6-1% of body weight, gender-adjusted, clamped to 0.3..1.2."""
    share = LOSS_RATE_BASE_SHARE
    for threshold, band_share in LOSS_RATE_BANDS:
        if current_weight_kg > threshold:
            share = band_share
            break
    rate = current_weight_kg * share
    rate = rate * LOSS_RATE_GENDER_FACTOR.get(as_value(gender), LOSS_RATE_OTHER_FACTOR)
    return clamp(rate, MIN_WEEKLY_LOSS_KG, MAX_WEEKLY_LOSS_KG)


def get_healthy_body_fat_range(age_years: int, gender: str) -> BodyFatRange:
    gender = as_value(gender)
    if gender not in ("male", "female"):
        return BodyFatRange(*DEFAULT_BODY_FAT_RANGE)

    for upper_age, male_range, female_range in BODY_FAT_BANDS:
        if upper_age is None or age_years < upper_age:
            return BodyFatRange(*(male_range if gender == "male" else female_range))


def calculate_body_composition(weight_kg: float, body_fat_percentage: float) -> BodyComposition:
    fat_mass = weight_kg * body_fat_percentage / 100
    lean_mass = weight_kg - fat_mass
    return BodyComposition(
        lean_mass=round_half_up(lean_mass, 2),
        fat_mass=round_half_up(fat_mass, 2),
    )


def calculate_waist_hip_ratio(waist_cm: float, hip_cm: float) -> float:
    return round_half_up(waist_cm / hip_cm, 2)
