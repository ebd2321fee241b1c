"""Sleep duration, age-based targets and efficiency score."""

from app.core.errors import InvalidTimeError
from app.core.numeric import clamp, round_half_up
from app.schemas.onboarding import habit_flag

MINUTES_PER_DAY = 24 * 60

# (upper age exclusive, recommended hours)
SLEEP_HOURS_BY_AGE: list[tuple[int, float]] = [
    (18, 8.5),
    (26, 8.0),
    (65, 7.5),
]
SENIOR_SLEEP_HOURS = 7.0

# (max |actual - recommended| in hours, score delta)
DURATION_BANDS: list[tuple[float, int]] = [
    (0.5, 30),
    (1, 20),
    (2, 10),
]
DURATION_MISS_PENALTY = -10


def get_recommended_sleep_hours(age_years: int) -> float:
    for upper_age, hours in SLEEP_HOURS_BY_AGE:
        if age_years < upper_age:
            return hours
    return SENIOR_SLEEP_HOURS


def parse_clock_time(value: str) -> int:
    """Minutes since midnight for an "HH:MM" string."""
    try:
        hours, minutes = (int(part) for part in value.split(":"))
    except (AttributeError, ValueError):
        raise InvalidTimeError(value) from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise InvalidTimeError(value)
    return hours * 60 + minutes


def _sleep_minutes(wake_time: str, sleep_time: str) -> int:
    duration = parse_clock_time(wake_time) - parse_clock_time(sleep_time)
    if duration <= 0:
        duration += MINUTES_PER_DAY
    return duration


def calculate_sleep_hours(wake_time: str, sleep_time: str) -> float:
    """Unrounded hours between sleep and wake, wrapping past midnight."""
    return _sleep_minutes(wake_time, sleep_time) / 60


def calculate_sleep_duration(wake_time: str, sleep_time: str) -> float:
    return round_half_up(calculate_sleep_hours(wake_time, sleep_time), 1)


def calculate_sleep_efficiency_score(current_hours: float, recommended_hours: float, habits) -> int:
    score = 50

    difference = abs(current_hours - recommended_hours)
    for max_difference, delta in DURATION_BANDS:
        if difference <= max_difference:
            score += delta
            break
    else:
        score += DURATION_MISS_PENALTY

    if habit_flag(habits, "avoids_late_night_eating"):
        score += 10
    if not habit_flag(habits, "drinks_coffee"):
        score += 5
    if not habit_flag(habits, "drinks_alcohol"):
        score += 10
    if habit_flag(habits, "eats_regular_meals"):
        score += 5

    return clamp(round_half_up(score), 0, 100)
