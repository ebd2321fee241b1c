import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.schemas.onboarding import BodyAnalysis, DietPreferences, PersonalInfo, WorkoutPreferences


@pytest.fixture()
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture()
def personal_info() -> PersonalInfo:
    return PersonalInfo(
        age=30,
        gender="male",
        wake_time="07:00",
        sleep_time="23:00",
        occupation_type="desk_job",
        country="US",
        state="CA",
    )


@pytest.fixture()
def diet_preferences() -> DietPreferences:
    return DietPreferences(
        drinks_enough_water=True,
        limits_sugary_drinks=True,
        eats_regular_meals=True,
        avoids_late_night_eating=True,
        controls_portion_sizes=True,
        reads_nutrition_labels=False,
        eats_processed_foods=False,
        eats_5_servings_fruits_veggies=True,
        limits_refined_sugar=True,
        includes_healthy_fats=True,
        drinks_alcohol=False,
        smokes_tobacco=False,
        drinks_coffee=True,
    )


@pytest.fixture()
def body_analysis() -> BodyAnalysis:
    return BodyAnalysis(
        height_cm=175,
        current_weight_kg=80,
        target_weight_kg=75,
        target_timeline_weeks=16,
    )


@pytest.fixture()
def workout_preferences() -> WorkoutPreferences:
    return WorkoutPreferences(
        activity_level="moderate",
        intensity="intermediate",
        workout_types=["strength"],
        primary_goals=["weight_loss"],
        workout_experience_years=2,
        workout_frequency_per_week=4,
        can_do_pushups=20,
        can_run_minutes=15,
    )
