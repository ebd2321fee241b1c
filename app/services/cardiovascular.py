"""Heart rate zones and VO2max estimate."""

from dataclasses import dataclass

from app.core.numeric import clamp, round_half_up
from app.models.profile import as_value

# share of max heart rate
FAT_BURN_ZONE = (0.6, 0.7)
CARDIO_ZONE = (0.7, 0.85)
PEAK_ZONE = (0.85, 0.95)

PEAK_VO2 = {"male": 50, "female": 40}
VO2_DECLINE_PER_YEAR = {"male": 0.5, "female": 0.4}
VO2_PEAK_AGE = 20
VO2_PER_RUN_MINUTE = 0.3
MIN_VO2, MAX_VO2 = 20, 80


@dataclass
class HeartRateZone:
    min: int
    max: int


@dataclass
class HeartRateZones:
    fat_burn: HeartRateZone
    cardio: HeartRateZone
    peak: HeartRateZone


def calculate_max_heart_rate(age_years: int) -> int:
    return 220 - age_years


def _zone(max_heart_rate: int, bounds: tuple[float, float]) -> HeartRateZone:
    low, high = bounds
    return HeartRateZone(
        min=round_half_up(max_heart_rate * low),
        max=round_half_up(max_heart_rate * high),
    )


def calculate_heart_rate_zones(max_heart_rate: int) -> HeartRateZones:
    return HeartRateZones(
        fat_burn=_zone(max_heart_rate, FAT_BURN_ZONE),
        cardio=_zone(max_heart_rate, CARDIO_ZONE),
        peak=_zone(max_heart_rate, PEAK_ZONE),
    )


def estimate_vo2_max(run_minutes: float, age_years: int, gender: str) -> float:
    """
    Peak VO2 at age 20 (50 male / 40 otherwise) minus yearly decline after 20,
    plus 0.3 per minute of continuous running. Clamped to 20..80 ml/kg/min.
    """
    gender = "male" if as_value(gender) == "male" else "female"
    decline = 0
    if age_years >= VO2_PEAK_AGE:
        decline = (age_years - VO2_PEAK_AGE) * VO2_DECLINE_PER_YEAR[gender]
    base = PEAK_VO2[gender] - decline
    return clamp(base + run_minutes * VO2_PER_RUN_MINUTE, MIN_VO2, MAX_VO2)
