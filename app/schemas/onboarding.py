from collections.abc import Mapping

from pydantic import BaseModel, Field
from typing import Optional

from app.models.profile import ActivityLevel, Gender, Intensity, OccupationType

CLOCK_PATTERN = r"^\d{1,2}:\d{2}$"


def habit_flag(habits, name: str) -> bool:
    """Read a boolean habit from a DietPreferences model or a plain mapping."""
    if isinstance(habits, Mapping):
        return bool(habits.get(name, False))
    return bool(getattr(habits, name, False))


class PersonalInfo(BaseModel):
    # age and gender stay optional here: the engine raises MissingInputError for them
    age: Optional[int] = Field(default=None, ge=13, le=120)
    gender: Optional[Gender] = None
    wake_time: str = Field(default="07:00", pattern=CLOCK_PATTERN)
    sleep_time: str = Field(default="23:00", pattern=CLOCK_PATTERN)
    occupation_type: OccupationType = OccupationType.DESK_JOB
    country: str = ""
    state: str = ""

    model_config = {"frozen": True}


class DietPreferences(BaseModel):
    diet_type: str = "non-veg"
    allergies: list[str] = Field(default_factory=list)
    cuisine_preferences: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)

    keto_ready: bool = False
    intermittent_fasting_ready: bool = False
    paleo_ready: bool = False
    mediterranean_ready: bool = False
    low_carb_ready: bool = False
    high_protein_ready: bool = False

    drinks_enough_water: bool = False
    limits_sugary_drinks: bool = False
    eats_regular_meals: bool = False
    avoids_late_night_eating: bool = False
    controls_portion_sizes: bool = False
    reads_nutrition_labels: bool = False
    eats_processed_foods: bool = False
    eats_5_servings_fruits_veggies: bool = False
    limits_refined_sugar: bool = False
    includes_healthy_fats: bool = False
    drinks_alcohol: bool = False
    smokes_tobacco: bool = False
    drinks_coffee: bool = False
    takes_supplements: bool = False

    model_config = {"frozen": True}


class BodyAnalysis(BaseModel):
    height_cm: Optional[float] = Field(default=None, ge=100, le=250)
    current_weight_kg: Optional[float] = Field(default=None, ge=30, le=300)
    target_weight_kg: Optional[float] = Field(default=None, ge=30, le=300)
    target_timeline_weeks: Optional[int] = Field(default=None, ge=4, le=104)

    body_fat_percentage: Optional[float] = Field(default=None, ge=3, le=50)
    waist_cm: Optional[float] = Field(default=None, gt=0)
    hip_cm: Optional[float] = Field(default=None, gt=0)
    ai_estimated_body_fat: Optional[float] = Field(default=None, ge=0, le=100)
    ai_confidence_score: Optional[int] = Field(default=None, ge=0, le=100)

    medical_conditions: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)
    physical_limitations: list[str] = Field(default_factory=list)

    pregnancy_status: bool = False
    pregnancy_trimester: Optional[int] = Field(default=None, ge=1, le=3)
    breastfeeding_status: bool = False

    model_config = {"frozen": True}


class WorkoutPreferences(BaseModel):
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    intensity: Intensity = Intensity.BEGINNER
    workout_types: list[str] = Field(default_factory=list)
    time_preference: int = Field(default=30, ge=0)
    primary_goals: list[str] = Field(default_factory=list)
    workout_experience_years: int = Field(default=0, ge=0, le=50)
    workout_frequency_per_week: int = Field(default=0, ge=0, le=7)
    can_do_pushups: int = Field(default=0, ge=0, le=200)
    can_run_minutes: int = Field(default=0, ge=0, le=300)
    weekly_weight_loss_goal: Optional[float] = Field(default=None, ge=0, le=1.2)

    model_config = {"frozen": True}


class ReviewRequest(BaseModel):
    personal_info: PersonalInfo
    diet_preferences: DietPreferences = Field(default_factory=DietPreferences)
    body_analysis: BodyAnalysis
    workout_preferences: WorkoutPreferences = Field(default_factory=WorkoutPreferences)


class IntensityRequest(BaseModel):
    workout_experience_years: int = Field(ge=0, le=50)
    can_do_pushups: int = Field(default=0, ge=0, le=200)
    can_run_minutes: int = Field(default=0, ge=0, le=300)
    age: int = Field(ge=13, le=120)
    gender: Gender


class BodyFatRequest(BaseModel):
    user_input: Optional[float] = None
    ai_estimated: Optional[float] = None
    ai_confidence: Optional[int] = None
    bmi: Optional[float] = None
    gender: Optional[Gender] = None
    age: Optional[int] = None


class ActivityCheckRequest(BaseModel):
    occupation_type: OccupationType
    activity_level: ActivityLevel
