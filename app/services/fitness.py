"""Weekly training recommendations."""

import math

from app.models.profile import as_value

# WHO baseline of 150 weekly minutes
BASE_CARDIO_MINUTES = 150
MAX_CARDIO_MINUTES = 400
MAX_STRENGTH_SESSIONS = 5
MAX_WORKOUT_FREQUENCY = 6


def calculate_workout_frequency(primary_goals: list[str], experience_years: float, current_frequency: int) -> int:
    frequency = 3
    if "weight_loss" in primary_goals:
        frequency = max(frequency, 4)
    if "muscle_gain" in primary_goals:
        frequency = max(frequency, 4)
    if "endurance" in primary_goals:
        frequency = max(frequency, 5)

    if experience_years == 0:
        frequency = min(frequency, 3)
    if experience_years > 2:
        frequency = min(frequency + 1, MAX_WORKOUT_FREQUENCY)

    # no more than a 50% jump over what the user already does
    if current_frequency > 0:
        frequency = min(frequency, math.ceil(current_frequency * 1.5))

    return frequency


def calculate_cardio_minutes(primary_goals: list[str], intensity: str) -> int:
    minutes = BASE_CARDIO_MINUTES
    if "weight_loss" in primary_goals:
        minutes = 250
    if "endurance" in primary_goals:
        minutes = 300
    if as_value(intensity) == "advanced":
        minutes = min(minutes + 50, MAX_CARDIO_MINUTES)
    return minutes


def calculate_strength_sessions(primary_goals: list[str], experience_years: float) -> int:
    sessions = 2
    if "muscle_gain" in primary_goals:
        sessions = 4
    if "strength" in primary_goals:
        sessions = 3
    if experience_years > 2:
        sessions = min(sessions + 1, MAX_STRENGTH_SESSIONS)
    return sessions
