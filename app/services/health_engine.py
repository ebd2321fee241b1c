"""Advanced review engine: runs every calculator in dependency order and assembles one result."""

import logging
from typing import Callable, Optional

from app.core.errors import DerivedCalculationError
from app.core.numeric import round_half_up
from app.schemas.onboarding import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences
from app.schemas.review import AdvancedReviewData
from app.services import body_composition, cardiovascular, fitness, metabolic, nutrition, scoring, sleep
from app.services.body_composition import BodyComposition
from app.services.nutrition import KCAL_PER_KG_FAT

logger = logging.getLogger(__name__)

WaterCalculator = Callable[[PersonalInfo, BodyAnalysis, WorkoutPreferences], int]


def _water_intake(
    personal_info: PersonalInfo,
    body_analysis: BodyAnalysis,
    workout_preferences: WorkoutPreferences,
    water_calculator: Optional[WaterCalculator],
) -> int:
    if water_calculator is None:
        return metabolic.calculate_water_intake(body_analysis.current_weight_kg)
    try:
        return water_calculator(personal_info, body_analysis, workout_preferences)
    except Exception as exc:
        raise DerivedCalculationError("water intake", str(exc)) from exc


def calculate_all_metrics(
    personal_info: PersonalInfo,
    diet_preferences: DietPreferences,
    body_analysis: BodyAnalysis,
    workout_preferences: WorkoutPreferences,
    water_calculator: Optional[WaterCalculator] = None,
) -> AdvancedReviewData:
    """
    Compute the full advanced review for one onboarding profile.

    Raises MissingInputError when weight, height, age or gender is absent, and
    DerivedCalculationError when the water collaborator fails. No partial
    result is ever returned.
    """
    weight = body_analysis.current_weight_kg
    age = personal_info.age
    gender = personal_info.gender
    goals = workout_preferences.primary_goals

    # Metabolism
    bmi = metabolic.calculate_bmi(weight, body_analysis.height_cm)
    bmr = metabolic.calculate_bmr(weight, body_analysis.height_cm, age, gender)
    tdee = metabolic.calculate_tdee(bmr, workout_preferences.activity_level)
    metabolic_age = metabolic.calculate_metabolic_age(bmr, age, gender)

    # Weight management
    ideal_range = body_composition.calculate_ideal_weight_range(body_analysis.height_cm, gender, age)
    weekly_rate = body_composition.calculate_healthy_weight_loss_rate(weight, gender)
    target = body_analysis.target_weight_kg
    is_weight_loss = bool(target) and weight > target
    daily_calories = nutrition.calculate_daily_calories_for_goal(
        tdee,
        workout_preferences.weekly_weight_loss_goal or weekly_rate,
        is_weight_loss,
    )

    # Nutrition
    macros = nutrition.calculate_macronutrients(daily_calories, goals, diet_preferences)
    daily_water = _water_intake(personal_info, body_analysis, workout_preferences, water_calculator)
    daily_fiber = metabolic.calculate_fiber(daily_calories)

    # Body composition
    body_fat_range = body_composition.get_healthy_body_fat_range(age, gender)
    if body_analysis.body_fat_percentage:
        composition = body_composition.calculate_body_composition(weight, body_analysis.body_fat_percentage)
    else:
        composition = BodyComposition(lean_mass=0, fat_mass=0)

    # Cardiovascular
    max_hr = cardiovascular.calculate_max_heart_rate(age)
    zones = cardiovascular.calculate_heart_rate_zones(max_hr)
    vo2_max = cardiovascular.estimate_vo2_max(workout_preferences.can_run_minutes, age, gender)

    # Training plan
    experience = workout_preferences.workout_experience_years
    workout_frequency = fitness.calculate_workout_frequency(
        goals, experience, workout_preferences.workout_frequency_per_week
    )
    cardio_minutes = fitness.calculate_cardio_minutes(goals, workout_preferences.intensity)
    strength_sessions = fitness.calculate_strength_sessions(goals, experience)

    # Scores
    overall_score = scoring.calculate_overall_health_score(
        personal_info, diet_preferences, workout_preferences, bmi
    )
    diet_score = metabolic.calculate_diet_readiness_score(diet_preferences)
    fitness_score = scoring.calculate_fitness_readiness_score(workout_preferences, body_analysis)
    goal_score = scoring.calculate_goal_realistic_score(body_analysis, workout_preferences)

    # Sleep
    recommended_sleep = sleep.get_recommended_sleep_hours(age)
    current_sleep = sleep.calculate_sleep_duration(personal_info.wake_time, personal_info.sleep_time)
    sleep_score = sleep.calculate_sleep_efficiency_score(current_sleep, recommended_sleep, diet_preferences)

    review = AdvancedReviewData(
        calculated_bmi=round_half_up(bmi, 2),
        calculated_bmr=round_half_up(bmr),
        calculated_tdee=round_half_up(tdee),
        metabolic_age=metabolic_age,
        daily_calories=round_half_up(daily_calories),
        daily_protein_g=macros.protein_g,
        daily_carbs_g=macros.carbs_g,
        daily_fat_g=macros.fat_g,
        daily_water_ml=round_half_up(daily_water),
        daily_fiber_g=daily_fiber,
        healthy_weight_min=ideal_range.min,
        healthy_weight_max=ideal_range.max,
        weekly_weight_loss_rate=weekly_rate,
        estimated_timeline_weeks=body_analysis.target_timeline_weeks,
        total_calorie_deficit=round_half_up(weekly_rate * KCAL_PER_KG_FAT),
        ideal_body_fat_min=body_fat_range.min,
        ideal_body_fat_max=body_fat_range.max,
        lean_body_mass=composition.lean_mass,
        fat_mass=composition.fat_mass,
        estimated_vo2_max=round_half_up(vo2_max, 1),
        target_hr_fat_burn_min=zones.fat_burn.min,
        target_hr_fat_burn_max=zones.fat_burn.max,
        target_hr_cardio_min=zones.cardio.min,
        target_hr_cardio_max=zones.cardio.max,
        target_hr_peak_min=zones.peak.min,
        target_hr_peak_max=zones.peak.max,
        recommended_workout_frequency=workout_frequency,
        recommended_cardio_minutes=cardio_minutes,
        recommended_strength_sessions=strength_sessions,
        overall_health_score=overall_score,
        diet_readiness_score=diet_score,
        fitness_readiness_score=fitness_score,
        goal_realistic_score=goal_score,
        recommended_sleep_hours=recommended_sleep,
        current_sleep_duration=current_sleep,
        sleep_efficiency_score=sleep_score,
    )

    logger.debug(
        "Review calculated: bmi=%.2f bmr=%d tdee=%d calories=%d",
        review.calculated_bmi,
        review.calculated_bmr,
        review.calculated_tdee,
        review.daily_calories,
    )
    return review
