"""Calorie targets and macro split."""

from dataclasses import dataclass

from app.core.numeric import round_half_up
from app.schemas.onboarding import habit_flag

KCAL_PER_KG_FAT = 7700

# (protein, carbs, fat) share of daily calories; first ready flag wins
DEFAULT_MACRO_SPLIT = (0.25, 0.45, 0.3)
DIET_MACRO_SPLITS: list[tuple[str, tuple[float, float, float]]] = [
    ("keto_ready", (0.25, 0.05, 0.7)),
    ("high_protein_ready", (0.35, 0.35, 0.3)),
    ("low_carb_ready", (0.3, 0.25, 0.45)),
]
MUSCLE_GAIN_MIN_PROTEIN = 0.3


@dataclass
class Macros:
    protein_g: int
    carbs_g: int
    fat_g: int


def calculate_daily_calories_for_goal(
    tdee: float,
    weekly_change_kg: float,
    is_weight_loss: bool = True,
) -> float:
    daily_change = weekly_change_kg * KCAL_PER_KG_FAT / 7
    if is_weight_loss:
        return tdee - daily_change
    return tdee + daily_change


def calculate_macronutrients(daily_calories: float, primary_goals: list[str], diet_flags) -> Macros:
    """
    Split calories into protein/carb/fat grams (4/4/9 kcal per gram).

    A muscle_gain goal floors protein at 30% regardless of diet style.
    """
    protein_pct, carb_pct, fat_pct = DEFAULT_MACRO_SPLIT
    for flag, split in DIET_MACRO_SPLITS:
        if habit_flag(diet_flags, flag):
            protein_pct, carb_pct, fat_pct = split
            break

    if "muscle_gain" in primary_goals:
        protein_pct = max(protein_pct, MUSCLE_GAIN_MIN_PROTEIN)

    return Macros(
        protein_g=round_half_up(daily_calories * protein_pct / 4),
        carbs_g=round_half_up(daily_calories * carb_pct / 4),
        fat_g=round_half_up(daily_calories * fat_pct / 9),
    )
