"""
Composite 0-100 scores shown on the advanced review screen.

Each score starts from a baseline and adds or subtracts fixed weights. The UI
labels ("≥80 = Very Good" and so on) are tuned against these exact weights.
"""

from app.core.numeric import clamp, round_half_up
from app.models.profile import as_value
from app.schemas.onboarding import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences, habit_flag
from app.services.sleep import calculate_sleep_hours

OVERALL_ACTIVITY_BONUS: dict[str, int] = {
    "sedentary": -15,
    "light": -5,
    "moderate": 5,
    "active": 10,
    "extreme": 15,
}

OVERALL_HABIT_WEIGHTS: dict[str, int] = {
    "drinks_enough_water": 5,
    "eats_5_servings_fruits_veggies": 10,
    "limits_refined_sugar": 5,
    "eats_processed_foods": -10,
    "smokes_tobacco": -25,
    "drinks_alcohol": -5,
}

FITNESS_ACTIVITY_BONUS: dict[str, int] = {
    "sedentary": -10,
    "light": 0,
    "moderate": 10,
    "active": 15,
    "extreme": 20,
}

AMBITIOUS_GOALS = ("muscle_gain", "strength")
GOAL_SCORE_FLOOR = 20


def calculate_overall_health_score(
    personal_info: PersonalInfo,
    diet_preferences: DietPreferences,
    workout_preferences: WorkoutPreferences,
    bmi: float | None,
) -> int:
    score = 100

    if bmi:
        if bmi < 18.5 or bmi > 25:
            score -= 10
        if bmi > 30:
            score -= 20
        if 18.5 <= bmi <= 24.9:
            score += 5

    score += OVERALL_ACTIVITY_BONUS.get(as_value(workout_preferences.activity_level), 0)

    for name, weight in OVERALL_HABIT_WEIGHTS.items():
        if habit_flag(diet_preferences, name):
            score += weight

    if personal_info.wake_time and personal_info.sleep_time:
        sleep_hours = calculate_sleep_hours(personal_info.wake_time, personal_info.sleep_time)
        if 7 <= sleep_hours <= 9:
            score += 10
        if sleep_hours < 6:
            score -= 15

    if workout_preferences.workout_experience_years > 0:
        score += 5
    if workout_preferences.workout_frequency_per_week >= 3:
        score += 10

    return clamp(round_half_up(score), 0, 100)


def calculate_fitness_readiness_score(
    workout_preferences: WorkoutPreferences,
    body_analysis: BodyAnalysis,
) -> int:
    score = 50

    score += min(workout_preferences.workout_experience_years * 3, 15)
    score += min(workout_preferences.can_do_pushups * 0.5, 15)
    score += min(workout_preferences.can_run_minutes * 0.3, 15)

    score += FITNESS_ACTIVITY_BONUS.get(as_value(workout_preferences.activity_level), 0)

    score -= len(body_analysis.medical_conditions) * 5
    score -= len(body_analysis.physical_limitations) * 3

    return clamp(round_half_up(score), 0, 100)


def calculate_goal_realistic_score(
    body_analysis: BodyAnalysis,
    workout_preferences: WorkoutPreferences,
) -> int:
    """Optimistic 80 baseline, penalizing aggressive pacing and goal/experience mismatch. Floor of 20."""
    score = 80

    if body_analysis.current_weight_kg and body_analysis.target_weight_kg and body_analysis.target_timeline_weeks:
        weekly_rate = (
            abs(body_analysis.current_weight_kg - body_analysis.target_weight_kg)
            / body_analysis.target_timeline_weeks
        )
        if weekly_rate > 1.5:
            score -= 30
        elif weekly_rate > 1:
            score -= 15
        elif weekly_rate >= 0.5:
            score += 10
        elif weekly_rate < 0.25:
            score -= 10

    has_ambitious_goals = any(goal in workout_preferences.primary_goals for goal in AMBITIOUS_GOALS)
    is_experienced = workout_preferences.workout_experience_years > 1

    if has_ambitious_goals and not is_experienced:
        score -= 15
    if not has_ambitious_goals and is_experienced:
        score += 5

    if len(body_analysis.medical_conditions) > 2:
        score -= 20

    return clamp(round_half_up(score), GOAL_SCORE_FLOOR, 100)
