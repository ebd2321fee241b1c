from pydantic import BaseModel
from typing import Optional

from app.models.profile import BodyFatSource, Confidence, Intensity


class AdvancedReviewData(BaseModel):
    # Basic metabolic calculations
    calculated_bmi: float
    calculated_bmr: int
    calculated_tdee: int
    metabolic_age: int

    # Daily nutritional needs
    daily_calories: int
    daily_protein_g: int
    daily_carbs_g: int
    daily_fat_g: int
    daily_water_ml: int
    daily_fiber_g: int

    # Weight management
    healthy_weight_min: float
    healthy_weight_max: float
    weekly_weight_loss_rate: float
    estimated_timeline_weeks: Optional[int] = None
    total_calorie_deficit: int

    # Body composition
    ideal_body_fat_min: float
    ideal_body_fat_max: float
    lean_body_mass: float
    fat_mass: float

    # Fitness metrics
    estimated_vo2_max: float
    target_hr_fat_burn_min: int
    target_hr_fat_burn_max: int
    target_hr_cardio_min: int
    target_hr_cardio_max: int
    target_hr_peak_min: int
    target_hr_peak_max: int
    recommended_workout_frequency: int
    recommended_cardio_minutes: int
    recommended_strength_sessions: int

    # Health scores
    overall_health_score: int
    diet_readiness_score: int
    fitness_readiness_score: int
    goal_realistic_score: int

    # Sleep analysis
    recommended_sleep_hours: float
    current_sleep_duration: float
    sleep_efficiency_score: int

    # Filled in later by the completion aggregator
    data_completeness_percentage: int = 0
    reliability_score: int = 0
    personalization_level: int = 0

    model_config = {"frozen": True}


class IntensityRead(BaseModel):
    level: Intensity
    reasoning: str


class BodyFatRead(BaseModel):
    value: float
    source: BodyFatSource
    confidence: Confidence
    show_warning: bool


class ActivityCheckRead(BaseModel):
    is_valid: bool
    minimum_required: Optional[str] = None
    message: Optional[str] = None
