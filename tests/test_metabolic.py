import pytest

from app.core.errors import MissingInputError
from app.models.profile import BodyFatSource, Confidence, Gender, Intensity
from app.schemas.onboarding import DietPreferences
from app.services.metabolic import (
    ACTIVITY_MULTIPLIER,
    HABIT_WEIGHTS,
    OCCUPATION_MULTIPLIER,
    apply_age_modifier,
    apply_sleep_penalty,
    calculate_base_tdee,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_exercise_burn,
    calculate_diet_readiness_score,
    calculate_fiber,
    calculate_metabolic_age,
    calculate_pregnancy_calories,
    calculate_recommended_intensity,
    calculate_tdee,
    calculate_water_intake,
    calculate_weekly_exercise_burn,
    estimate_body_fat_from_bmi,
    estimate_session_calorie_burn,
    get_final_body_fat_percentage,
    validate_activity_for_occupation,
)

POSITIVE_HABITS = [name for name, weight in HABIT_WEIGHTS.items() if weight > 0]
NEGATIVE_HABITS = [name for name, weight in HABIT_WEIGHTS.items() if weight < 0]


# ── calculate_bmi ─────────────────────────────────────────────────────────

class TestCalculateBMI:
    def test_bmi(self):
        # 80 / 1.75² = 26.12
        assert calculate_bmi(80, 175) == pytest.approx(26.12, abs=0.01)

    @pytest.mark.parametrize("weight,height", [(50, 160), (70, 170), (95.5, 188), (120, 150)])
    def test_matches_definition(self, weight, height):
        assert calculate_bmi(weight, height) == pytest.approx(weight / (height / 100) ** 2)

    def test_zero_weight_raises(self):
        with pytest.raises(MissingInputError) as exc_info:
            calculate_bmi(0, 170)
        assert exc_info.value.field == "weight"
        assert str(exc_info.value) == "Weight is required for BMI calculation. Please complete your profile."

    def test_zero_height_raises(self):
        with pytest.raises(MissingInputError) as exc_info:
            calculate_bmi(70, 0)
        assert exc_info.value.field == "height"

    def test_none_weight_raises(self):
        with pytest.raises(MissingInputError):
            calculate_bmi(None, 170)

    def test_missing_input_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_bmi(0, 170)

    def test_valid_input_does_not_raise(self):
        calculate_bmi(70, 170)


# ── calculate_bmr ─────────────────────────────────────────────────────────

class TestCalculateBMR:
    def test_male_bmr(self):
        # 10×70 + 6.25×175 − 5×25 + 5 = 1673.75
        assert calculate_bmr(70, 175, 25, "male") == 1673.75

    def test_female_bmr(self):
        # 10×60 + 6.25×165 − 5×25 − 161 = 1345.25
        assert calculate_bmr(60, 165, 25, Gender.FEMALE) == 1345.25

    @pytest.mark.parametrize("gender", ["other", "prefer_not_to_say", Gender.OTHER])
    def test_other_uses_mean_offset(self, gender):
        # 10×70 + 6.25×170 − 5×30 − 78 = 1534.5
        assert calculate_bmr(70, 170, 30, gender) == 1534.5

    @pytest.mark.parametrize("weight,height,age", [(55, 160, 20), (70, 175, 30), (110, 190, 60)])
    def test_male_vs_female_diff_is_166(self, weight, height, age):
        male = calculate_bmr(weight, height, age, "male")
        female = calculate_bmr(weight, height, age, "female")
        assert male - female == 166.0

    @pytest.mark.parametrize("gender", ["male", "female", "other"])
    def test_decreases_with_age(self, gender):
        values = [calculate_bmr(75, 175, age, gender) for age in range(18, 90, 7)]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_missing_height_raises(self):
        with pytest.raises(MissingInputError) as exc_info:
            calculate_bmr(70, 0, 25, "male")
        assert exc_info.value.field == "height"
        assert exc_info.value.calculation == "BMR"

    def test_missing_age_raises(self):
        with pytest.raises(MissingInputError) as exc_info:
            calculate_bmr(70, 175, 0, "male")
        assert exc_info.value.field == "age"

    @pytest.mark.parametrize("gender", ["", None])
    def test_missing_gender_raises(self, gender):
        with pytest.raises(MissingInputError) as exc_info:
            calculate_bmr(70, 175, 25, gender)
        assert "Gender is required for BMR calculation" in str(exc_info.value)


# ── TDEE ──────────────────────────────────────────────────────────────────

class TestCalculateTDEE:
    @pytest.mark.parametrize("level,mult", [
        ("sedentary", 1.2),
        ("light", 1.375),
        ("moderate", 1.55),
        ("active", 1.725),
        ("extreme", 1.9),
    ])
    def test_each_level(self, level, mult):
        assert calculate_tdee(1780.0, level) == pytest.approx(1780.0 * mult)

    def test_enum_member_accepted(self):
        from app.models.profile import ActivityLevel
        assert calculate_tdee(1000, ActivityLevel.ACTIVE) == pytest.approx(1725)

    def test_unknown_level_falls_back_to_sedentary(self):
        assert calculate_tdee(1500, "couch_potato") == pytest.approx(1500 * ACTIVITY_MULTIPLIER["sedentary"])

    @pytest.mark.parametrize("occupation,mult", [
        ("desk_job", 1.25),
        ("light_active", 1.35),
        ("moderate_active", 1.45),
        ("heavy_labor", 1.6),
        ("very_active", 1.7),
    ])
    def test_base_tdee_from_occupation(self, occupation, mult):
        assert calculate_base_tdee(1750, occupation) == pytest.approx(1750 * mult)

    def test_base_tdee_unknown_occupation(self):
        assert calculate_base_tdee(1750, "astronaut") == pytest.approx(1750 * OCCUPATION_MULTIPLIER["desk_job"])


# ── exercise burn ─────────────────────────────────────────────────────────

class TestExerciseBurn:
    def test_intermediate_strength(self):
        # 5.0 MET × 80 kg × 1 h
        assert estimate_session_calorie_burn(60, "intermediate", 80, ["strength"]) == 400

    def test_half_rounds_up(self):
        # 9.0 × 70 × 0.75 = 472.5
        assert estimate_session_calorie_burn(45, Intensity.ADVANCED, 70, ["cardio"]) == 473

    def test_beginner_yoga(self):
        assert estimate_session_calorie_burn(30, "beginner", 60, ["yoga"]) == 75

    def test_type_is_case_insensitive(self):
        assert estimate_session_calorie_burn(60, "intermediate", 80, ["Strength"]) == 400

    def test_uses_first_type_only(self):
        assert estimate_session_calorie_burn(60, "intermediate", 80, ["yoga", "hiit"]) == 280

    @pytest.mark.parametrize("types", [[], ["dance"], [""]])
    def test_unmatched_type_uses_mixed(self, types):
        # intermediate mixed = 6.0
        assert estimate_session_calorie_burn(60, "intermediate", 80, types) == 480

    def test_unknown_intensity_uses_default_met(self):
        assert estimate_session_calorie_burn(60, "elite", 80, ["strength"]) == 400

    def test_weekly_burn(self):
        assert calculate_weekly_exercise_burn(4, 60, "intermediate", 80, ["strength"]) == 1600

    def test_daily_burn(self):
        # 1600 / 7 = 228.57
        assert calculate_daily_exercise_burn(4, 60, "intermediate", 80, ["strength"]) == 229


# ── metabolic age ─────────────────────────────────────────────────────────

class TestMetabolicAge:
    def test_matches_reference(self):
        assert calculate_metabolic_age(1700, 30, "male") == 30

    def test_higher_bmr_is_younger(self):
        # (1700 − 1800) / 10 = −10 years
        assert calculate_metabolic_age(1800, 30, "male") == 20

    def test_female_conversion_rate(self):
        # (1350 − 1270) / 8 = +10 years
        assert calculate_metabolic_age(1270, 30, "female") == 40

    def test_other_uses_female_reference(self):
        assert calculate_metabolic_age(1350, 30, "other") == 30

    def test_clamped_low(self):
        assert calculate_metabolic_age(3000, 20, "male") == 18

    def test_clamped_high(self):
        assert calculate_metabolic_age(500, 80, "female") == 85

    def test_age_outside_bands_uses_default_reference(self):
        # under 18: male default reference 1650 → no adjustment, then floor at 18
        assert calculate_metabolic_age(1650, 16, "male") == 18

    @pytest.mark.parametrize("bmr", [400, 900, 1400, 1900, 2400, 3500])
    @pytest.mark.parametrize("age", [15, 18, 30, 50, 70, 100])
    @pytest.mark.parametrize("gender", ["male", "female", "other"])
    def test_always_within_bounds(self, bmr, age, gender):
        assert 18 <= calculate_metabolic_age(bmr, age, gender) <= 85


# ── recommended intensity ─────────────────────────────────────────────────

class TestRecommendedIntensity:
    def test_experienced_is_advanced(self):
        result = calculate_recommended_intensity(5, 0, 0, 30, "male")
        assert result.level == Intensity.ADVANCED
        assert result.reasoning == "3+ years training experience indicates advanced level"

    def test_new_is_beginner(self):
        result = calculate_recommended_intensity(0, 50, 60, 25, "male")
        assert result.level == Intensity.BEGINNER
        assert result.reasoning == "Less than 1 year experience - starting with beginner intensity for safety"

    def test_both_tests_met(self):
        result = calculate_recommended_intensity(2, 30, 20, 30, "male")
        assert result.level == Intensity.ADVANCED
        assert result.reasoning == "Strong fitness test results indicate advanced level capability"

    def test_one_test_met(self):
        result = calculate_recommended_intensity(2, 30, 5, 30, "male")
        assert result.level == Intensity.INTERMEDIATE
        assert result.reasoning == "1-3 years experience with solid fitness test results"

    def test_no_test_met(self):
        result = calculate_recommended_intensity(2, 10, 5, 30, "male")
        assert result.level == Intensity.BEGINNER
        assert result.reasoning == "Building foundation strength and cardio base recommended"

    @pytest.mark.parametrize("gender,age,pushups,expected", [
        ("male", 39, 25, Intensity.INTERMEDIATE),
        ("male", 39, 24, Intensity.BEGINNER),
        ("male", 40, 20, Intensity.INTERMEDIATE),
        ("female", 30, 15, Intensity.INTERMEDIATE),
        ("female", 30, 14, Intensity.BEGINNER),
        ("female", 45, 10, Intensity.INTERMEDIATE),
        ("other", 45, 10, Intensity.INTERMEDIATE),
    ])
    def test_pushup_thresholds(self, gender, age, pushups, expected):
        assert calculate_recommended_intensity(1, pushups, 0, age, gender).level == expected

    def test_run_threshold_is_15_minutes(self):
        assert calculate_recommended_intensity(1, 0, 15, 30, "male").level == Intensity.INTERMEDIATE
        assert calculate_recommended_intensity(1, 0, 14, 30, "male").level == Intensity.BEGINNER


# ── pregnancy ─────────────────────────────────────────────────────────────

class TestPregnancyCalories:
    @pytest.mark.parametrize("trimester,expected", [(1, 2000), (2, 2340), (3, 2450)])
    def test_trimesters(self, trimester, expected):
        assert calculate_pregnancy_calories(2000, True, trimester) == expected

    def test_breastfeeding(self):
        assert calculate_pregnancy_calories(2000, False, None, True) == 2500

    def test_breastfeeding_takes_priority(self):
        assert calculate_pregnancy_calories(2000, True, 3, True) == 2500

    def test_trimester_ignored_when_not_pregnant(self):
        assert calculate_pregnancy_calories(2000, False, 2) == 2000

    def test_pregnant_without_trimester(self):
        assert calculate_pregnancy_calories(2000, True) == 2000


# ── diet readiness ────────────────────────────────────────────────────────

class TestDietReadinessScore:
    def test_all_good_habits(self):
        habits = {name: True for name in POSITIVE_HABITS}
        # raw 155 → (155 + 45) / 200 × 100
        assert calculate_diet_readiness_score(habits) == 100

    def test_all_bad_habits(self):
        habits = {name: True for name in NEGATIVE_HABITS}
        assert calculate_diet_readiness_score(habits) == 0

    def test_no_habits_rounds_half_up(self):
        # raw 0 → 22.5
        assert calculate_diet_readiness_score({}) == 23

    def test_accepts_diet_preferences_model(self):
        prefs = DietPreferences(controls_portion_sizes=True, eats_regular_meals=True)
        # raw 55 → 50
        assert calculate_diet_readiness_score(prefs) == 50

    def test_unscored_flags_ignored(self):
        assert calculate_diet_readiness_score({"drinks_coffee": True, "takes_supplements": True}) == 23

    def test_weights_sum_to_documented_range(self):
        assert sum(w for w in HABIT_WEIGHTS.values() if w > 0) == 155
        assert sum(w for w in HABIT_WEIGHTS.values() if w < 0) == -45
        assert len(POSITIVE_HABITS) == 9
        assert len(NEGATIVE_HABITS) == 3


# ── water / fiber / body fat ──────────────────────────────────────────────

class TestWaterAndFiber:
    @pytest.mark.parametrize("weight,expected", [(80, 2800), (60, 2100), (70.5, 2468)])
    def test_water(self, weight, expected):
        assert calculate_water_intake(weight) == expected

    @pytest.mark.parametrize("calories,expected", [(2000, 28), (1500, 21), (2182.56, 31)])
    def test_fiber(self, calories, expected):
        assert calculate_fiber(calories) == expected


class TestBodyFatFromBMI:
    def test_male(self):
        # 1.2×25 + 0.23×30 − 16.2 = 20.7
        assert estimate_body_fat_from_bmi(25, "male", 30) == 21

    def test_female(self):
        # 1.2×25 + 0.23×40 − 5.4 = 33.8
        assert estimate_body_fat_from_bmi(25, "female", 40) == 34

    def test_other_averages(self):
        # (23.0 + 33.8) / 2 = 28.4
        assert estimate_body_fat_from_bmi(25, "other", 40) == 28


class TestFinalBodyFatPercentage:
    def test_user_input_wins(self):
        result = get_final_body_fat_percentage(15, 20, 85, 25, "male", 30)
        assert result.value == 15
        assert result.source == BodyFatSource.USER_INPUT
        assert result.confidence == Confidence.HIGH
        assert result.show_warning is False

    def test_ai_when_confident(self):
        result = get_final_body_fat_percentage(None, 18, 75, 25, "male", 30)
        assert result.value == 18
        assert result.source == BodyFatSource.AI_ANALYSIS
        assert result.confidence == Confidence.MEDIUM
        assert result.show_warning is True

    @pytest.mark.parametrize("confidence", [50, 70, None])
    def test_bmi_estimate_when_ai_not_confident(self, confidence):
        result = get_final_body_fat_percentage(None, 15, confidence, 25, "male", 30)
        assert result.source == BodyFatSource.BMI_ESTIMATION
        assert result.value == 21
        assert result.confidence == Confidence.LOW
        assert result.show_warning is True

    def test_zero_user_input_ignored(self):
        result = get_final_body_fat_percentage(0, None, None, 25, "female", 30)
        assert result.source == BodyFatSource.BMI_ESTIMATION

    @pytest.mark.parametrize("gender,expected", [("male", 20), ("female", 28), ("other", 28), (None, 28)])
    def test_default_estimate(self, gender, expected):
        result = get_final_body_fat_percentage(gender=gender)
        assert result.value == expected
        assert result.source == BodyFatSource.DEFAULT_ESTIMATE
        assert result.confidence == Confidence.LOW
        assert result.show_warning is True

    def test_bmi_without_age_uses_default(self):
        result = get_final_body_fat_percentage(bmi=25, gender="male")
        assert result.source == BodyFatSource.DEFAULT_ESTIMATE


# ── occupation / activity ─────────────────────────────────────────────────

class TestActivityForOccupation:
    @pytest.mark.parametrize("activity", ["sedentary", "extreme"])
    def test_desk_job_accepts_anything(self, activity):
        assert validate_activity_for_occupation("desk_job", activity).is_valid

    @pytest.mark.parametrize("activity,valid", [
        ("sedentary", False),
        ("moderate", False),
        ("active", True),
        ("extreme", True),
    ])
    def test_heavy_labor(self, activity, valid):
        assert validate_activity_for_occupation("heavy_labor", activity).is_valid is valid

    def test_rejection_message(self):
        result = validate_activity_for_occupation("heavy_labor", "sedentary")
        assert result.minimum_required == "active"
        assert result.message == (
            'Your occupation (heavy labor) requires at least "active" activity level. Please adjust.'
        )

    def test_unknown_occupation_accepted(self):
        assert validate_activity_for_occupation("astronaut", "sedentary").is_valid


# ── age modifier / sleep penalty ──────────────────────────────────────────

class TestAgeModifier:
    @pytest.mark.parametrize("age,expected", [(25, 2000), (35, 1960), (45, 1900), (55, 1800), (65, 1700)])
    def test_male_steps(self, age, expected):
        assert apply_age_modifier(2000, age, "male") == pytest.approx(expected)

    def test_female_menopause_window(self):
        # 0.90 × 0.95 = 0.855
        assert apply_age_modifier(2000, 50, "female") == pytest.approx(1710)

    def test_female_outside_window(self):
        assert apply_age_modifier(2000, 56, "female") == pytest.approx(1800)


class TestSleepPenalty:
    @pytest.mark.parametrize("hours,expected", [(8, 10), (7, 10), (6, 12), (5, 14), (4, 16)])
    def test_penalty(self, hours, expected):
        assert apply_sleep_penalty(10, hours) == expected

    def test_rounds_up(self):
        # 12 × 1.1 = 13.2
        assert apply_sleep_penalty(12, 6.5) == 14
