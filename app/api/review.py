import logging

from fastapi import APIRouter, HTTPException, status

from app.core.config import settings
from app.core.errors import DerivedCalculationError, InvalidTimeError, MissingInputError
from app.schemas.onboarding import ActivityCheckRequest, BodyFatRequest, IntensityRequest, ReviewRequest
from app.schemas.review import ActivityCheckRead, AdvancedReviewData, BodyFatRead, IntensityRead
from app.services.climate import climate_water_calculator
from app.services.health_engine import calculate_all_metrics
from app.services.metabolic import (
    calculate_recommended_intensity,
    get_final_body_fat_percentage,
    validate_activity_for_occupation,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review", tags=["review"])


@router.post("", response_model=AdvancedReviewData)
async def create_review(data: ReviewRequest):
    water_calculator = climate_water_calculator if settings.climate_aware_water else None
    try:
        return calculate_all_metrics(
            data.personal_info,
            data.diet_preferences,
            data.body_analysis,
            data.workout_preferences,
            water_calculator=water_calculator,
        )
    except (MissingInputError, InvalidTimeError) as exc:
        logger.warning("Review rejected: %s", exc)
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        )
    except DerivedCalculationError as exc:
        logger.exception("Derived calculation failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        )


@router.post("/intensity", response_model=IntensityRead)
async def recommend_intensity(data: IntensityRequest):
    return calculate_recommended_intensity(
        data.workout_experience_years,
        data.can_do_pushups,
        data.can_run_minutes,
        data.age,
        data.gender,
    )


@router.post("/body-fat", response_model=BodyFatRead)
async def resolve_body_fat(data: BodyFatRequest):
    return get_final_body_fat_percentage(
        user_input=data.user_input,
        ai_estimated=data.ai_estimated,
        ai_confidence=data.ai_confidence,
        bmi=data.bmi,
        gender=data.gender,
        age_years=data.age,
    )


@router.post("/activity-check", response_model=ActivityCheckRead)
async def check_activity(data: ActivityCheckRequest):
    return validate_activity_for_occupation(data.occupation_type, data.activity_level)
