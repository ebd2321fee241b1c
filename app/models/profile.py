import enum


def as_value(member):
    """Plain value of an enum member; anything else is returned unchanged."""
    if isinstance(member, enum.Enum):
        return member.value
    return member


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class ActivityLevel(str, enum.Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    EXTREME = "extreme"


class OccupationType(str, enum.Enum):
    DESK_JOB = "desk_job"
    LIGHT_ACTIVE = "light_active"
    MODERATE_ACTIVE = "moderate_active"
    HEAVY_LABOR = "heavy_labor"
    VERY_ACTIVE = "very_active"


class Intensity(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class BodyFatSource(str, enum.Enum):
    USER_INPUT = "user_input"
    AI_ANALYSIS = "ai_analysis"
    BMI_ESTIMATION = "bmi_estimation"
    DEFAULT_ESTIMATE = "default_estimate"


class Confidence(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ClimateType(str, enum.Enum):
    TROPICAL = "tropical"
    TEMPERATE = "temperate"
    COLD = "cold"
    ARID = "arid"
