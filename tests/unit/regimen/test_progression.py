"""
Unit tests for the progression engine.

Tests each rule family in isolation (exercise volume, nutrition, fasting,
difficulty, copy) and the helpers that apply adjustments to content.
"""

import pytest

from app.regimen.personalization import DEFAULT_PERSONALIZATION_CONFIG, PersonalizationConfig
from app.regimen.progression import (
    ProgressionConfig,
    adjustments_for,
    apply_exercise_adjustments,
    apply_meal_adjustments,
    day_focus,
)
from app.schemas.catalog import Exercise, Meal, MealType, NutritionInfo
from app.schemas.profile import (
    DifficultyLevel,
    FastingPattern,
    FitnessGoal,
    Gender,
    UserAttributes,
    WorkType,
)
from app.schemas.progression import ProgressionAdjustments, ProgressionFactors


# ======================================================================
# Helpers
# ======================================================================


def _make_user(**overrides) -> UserAttributes:
    """Sedentary 70 kg → 16:8, beginner, light."""
    defaults = dict(user_id="u1", weight_kg=70.0, work_type=WorkType.SEDENTARY)
    defaults.update(overrides)
    return UserAttributes(**defaults)


def _make_factors(**overrides) -> ProgressionFactors:
    defaults = dict(
        day_number=1, week_number=1, completion_rate=0.0, streak_days=0,
        average_completion_percent=0.0, fasting_compliance=0.0,
    )
    defaults.update(overrides)
    return ProgressionFactors(**defaults)


def _make_adjustments(**overrides) -> ProgressionAdjustments:
    defaults = dict(
        recommended_fasting_pattern=FastingPattern.P16_8,
        suggested_difficulty=DifficultyLevel.BEGINNER,
    )
    defaults.update(overrides)
    return ProgressionAdjustments(**defaults)


# ======================================================================
# Neutral baseline
# ======================================================================


class TestNeutral:

    def test_fresh_user_gets_neutral_adjustments(self):
        adj = adjustments_for(_make_user(), ProgressionFactors())
        expected = ProgressionAdjustments.neutral(FastingPattern.P16_8, DifficultyLevel.BEGINNER)
        assert adj == expected


# ======================================================================
# Exercise volume
# ======================================================================


class TestExerciseMultipliers:

    @pytest.mark.parametrize("week,expected", [
        (1, 1.0), (2, 1.1), (3, 1.1), (4, 1.2), (8, 1.4), (10, 1.5), (20, 1.5),
    ])
    def test_sets(self, week, expected):
        adj = adjustments_for(_make_user(), _make_factors(week_number=week, completion_rate=70))
        assert adj.sets_multiplier == pytest.approx(expected)

    @pytest.mark.parametrize("day,expected", [
        (6, 1.0), (7, 1.05), (14, 1.1), (42, 1.3), (100, 1.3),
    ])
    def test_reps(self, day, expected):
        adj = adjustments_for(_make_user(), _make_factors(day_number=day, completion_rate=70))
        assert adj.reps_multiplier == pytest.approx(expected)

    def test_low_completion_freezes_volume(self):
        adj = adjustments_for(
            _make_user(), _make_factors(day_number=60, week_number=9, completion_rate=69.9),
        )
        assert adj.sets_multiplier == 1.0
        assert adj.reps_multiplier == 1.0

    @pytest.mark.parametrize("day,completion,expected", [
        (14, 95, 1.0),
        (15, 80, 1.1),
        (29, 82, 1.1),
        (29, 85, 1.2),
        (29, 79, 1.0),
    ])
    def test_duration(self, day, completion, expected):
        adj = adjustments_for(_make_user(), _make_factors(day_number=day, completion_rate=completion))
        assert adj.duration_multiplier == pytest.approx(expected)

    @pytest.mark.parametrize("completion,streak,expected", [
        (90, 7, 0.9), (89, 30, 1.0), (100, 6, 1.0),
    ])
    def test_rest(self, completion, streak, expected):
        adj = adjustments_for(
            _make_user(), _make_factors(completion_rate=completion, streak_days=streak),
        )
        assert adj.rest_multiplier == pytest.approx(expected)

    def test_monotone_in_week(self):
        user = _make_user(primary_goal=FitnessGoal.BUILD_MUSCLE)
        fields = (
            "sets_multiplier", "reps_multiplier", "duration_multiplier",
            "protein_multiplier", "portion_multiplier", "calorie_adjustment",
        )
        previous = None
        for week in range(1, 16):
            adj = adjustments_for(user, _make_factors(
                week_number=week, day_number=week * 7,
                completion_rate=85, average_completion_percent=90,
            ))
            current = [getattr(adj, name) for name in fields]
            if previous is not None:
                for name, before, after in zip(fields, previous, current):
                    assert after >= before, f"{name} dropped in week {week}"
            previous = current

    def test_custom_config_cap(self):
        cfg = ProgressionConfig(sets_max_multiplier=1.2)
        adj = adjustments_for(
            _make_user(), _make_factors(week_number=10, completion_rate=90), cfg,
        )
        assert adj.sets_multiplier == pytest.approx(1.2)


# ======================================================================
# Nutrition
# ======================================================================


class TestNutrition:

    @pytest.mark.parametrize("week,completion,expected", [
        (1, 100, 0), (2, 74, 0), (2, 75, -100), (4, 79, -100), (4, 80, -200),
    ])
    def test_lose_weight_calories(self, week, completion, expected):
        user = _make_user(primary_goal=FitnessGoal.LOSE_WEIGHT)
        adj = adjustments_for(user, _make_factors(week_number=week, completion_rate=completion))
        assert adj.calorie_adjustment == expected
        assert adj.protein_multiplier == 1.0

    @pytest.mark.parametrize("week,completion,calories,protein", [
        (2, 79, 0, 1.0), (2, 80, 150, 1.10), (4, 84, 150, 1.10), (4, 85, 250, 1.15),
    ])
    def test_build_muscle(self, week, completion, calories, protein):
        user = _make_user(primary_goal=FitnessGoal.BUILD_MUSCLE)
        adj = adjustments_for(user, _make_factors(week_number=week, completion_rate=completion))
        assert adj.calorie_adjustment == calories
        assert adj.protein_multiplier == pytest.approx(protein)

    @pytest.mark.parametrize("goal", [FitnessGoal.MAINTAIN, FitnessGoal.IMPROVE_HEALTH])
    def test_other_goals_keep_calories(self, goal):
        adj = adjustments_for(
            _make_user(primary_goal=goal), _make_factors(week_number=8, completion_rate=100),
        )
        assert adj.calorie_adjustment == 0

    @pytest.mark.parametrize("goal,average,expected", [
        (FitnessGoal.BUILD_MUSCLE, 85, 1.10),
        (FitnessGoal.LOSE_WEIGHT, 85, 0.95),
        (FitnessGoal.MAINTAIN, 90, 0.95),
        (FitnessGoal.BUILD_MUSCLE, 84.9, 1.0),
    ])
    def test_portion(self, goal, average, expected):
        adj = adjustments_for(
            _make_user(primary_goal=goal), _make_factors(average_completion_percent=average),
        )
        assert adj.portion_multiplier == pytest.approx(expected)


# ======================================================================
# Fasting
# ======================================================================


class TestFasting:

    def test_lose_weight_goes_stricter(self):
        # 79 kg / 1.70 m → BMI ≈ 27.3; sedentary under 80 kg → 16:8
        user = _make_user(weight_kg=79.0, height_cm=170, primary_goal=FitnessGoal.LOSE_WEIGHT)
        adj = adjustments_for(user, _make_factors(week_number=2, fasting_compliance=80))
        assert adj.recommended_fasting_pattern is FastingPattern.P18_6
        assert adj.fasting_hours_adjustment == 2

    def test_unknown_height_assumes_bmi_25(self):
        user = _make_user(primary_goal=FitnessGoal.LOSE_WEIGHT)
        adj = adjustments_for(user, _make_factors(week_number=3, fasting_compliance=95))
        assert adj.recommended_fasting_pattern is FastingPattern.P18_6

    def test_lean_user_keeps_pattern(self):
        # 60 kg / 1.73 m → BMI ≈ 20
        user = _make_user(weight_kg=60.0, height_cm=173, primary_goal=FitnessGoal.LOSE_WEIGHT)
        adj = adjustments_for(user, _make_factors(week_number=4, fasting_compliance=100))
        assert adj.recommended_fasting_pattern is FastingPattern.P16_8
        assert adj.fasting_hours_adjustment == 0

    @pytest.mark.parametrize("week,compliance", [(1, 100), (2, 79)])
    def test_lose_weight_needs_time_and_compliance(self, week, compliance):
        user = _make_user(primary_goal=FitnessGoal.LOSE_WEIGHT)
        adj = adjustments_for(user, _make_factors(week_number=week, fasting_compliance=compliance))
        assert adj.recommended_fasting_pattern is FastingPattern.P16_8

    def test_build_muscle_goes_gentler(self):
        user = _make_user(primary_goal=FitnessGoal.BUILD_MUSCLE)
        adj = adjustments_for(user, _make_factors(week_number=2))
        assert adj.recommended_fasting_pattern is FastingPattern.P14_10
        assert adj.fasting_hours_adjustment == -2

    def test_steps_from_stored_pattern(self):
        user = _make_user(
            primary_goal=FitnessGoal.BUILD_MUSCLE, fasting_pattern=FastingPattern.P12_12,
        )
        adj = adjustments_for(user, _make_factors(week_number=6))
        assert adj.recommended_fasting_pattern is FastingPattern.P12_12
        assert adj.fasting_hours_adjustment == 0

    def test_current_pattern_uses_custom_personalization(self):
        # 85 kg sedentary → "higher" branch, re-tuned here to 18:6
        rules = {k: dict(v) for k, v in DEFAULT_PERSONALIZATION_CONFIG.fasting_rules.items()}
        rules[WorkType.SEDENTARY]["higher"] = FastingPattern.P18_6
        custom = PersonalizationConfig(fasting_rules=rules)
        user = _make_user(weight_kg=85.0, primary_goal=FitnessGoal.LOSE_WEIGHT)
        factors = _make_factors(week_number=2, fasting_compliance=90)

        default_adj = adjustments_for(user, factors)
        custom_adj = adjustments_for(user, factors, personalization_config=custom)

        assert default_adj.recommended_fasting_pattern is FastingPattern.P16_8
        assert default_adj.fasting_hours_adjustment == 2
        assert custom_adj.recommended_fasting_pattern is FastingPattern.P18_6
        assert custom_adj.fasting_hours_adjustment == 0


# ======================================================================
# Difficulty upgrade
# ======================================================================


class TestDifficultyUpgrade:
    ELIGIBLE = dict(completion_rate=80, streak_days=7, week_number=4)

    def test_one_tier_up(self):
        adj = adjustments_for(_make_user(), _make_factors(**self.ELIGIBLE))
        assert adj.should_increase_difficulty is True
        assert adj.suggested_difficulty is DifficultyLevel.INTERMEDIATE

    def test_intermediate_to_advanced(self):
        user = _make_user(fitness_level=DifficultyLevel.INTERMEDIATE)
        adj = adjustments_for(user, _make_factors(**self.ELIGIBLE))
        assert adj.should_increase_difficulty is True
        assert adj.suggested_difficulty is DifficultyLevel.ADVANCED

    def test_never_beyond_advanced(self):
        user = _make_user(fitness_level=DifficultyLevel.ADVANCED)
        adj = adjustments_for(user, _make_factors(**self.ELIGIBLE))
        assert adj.should_increase_difficulty is False
        assert adj.suggested_difficulty is DifficultyLevel.ADVANCED

    def test_steps_from_assessed_tier_not_work_type(self):
        # Active users are assigned advanced workouts, but a beginner
        # assessment still upgrades to intermediate.
        user = _make_user(work_type=WorkType.ACTIVE, fitness_level=DifficultyLevel.BEGINNER)
        adj = adjustments_for(user, _make_factors(**self.ELIGIBLE))
        assert adj.should_increase_difficulty is True
        assert adj.suggested_difficulty is DifficultyLevel.INTERMEDIATE

    def test_ineligible_keeps_assessed_tier(self):
        user = _make_user(fitness_level=DifficultyLevel.INTERMEDIATE)
        adj = adjustments_for(user, _make_factors())
        assert adj.should_increase_difficulty is False
        assert adj.suggested_difficulty is DifficultyLevel.INTERMEDIATE

    @pytest.mark.parametrize("streak", range(0, 7))
    def test_no_upgrade_with_short_streak(self, streak):
        adj = adjustments_for(
            _make_user(),
            _make_factors(completion_rate=100, streak_days=streak, week_number=12),
        )
        assert adj.should_increase_difficulty is False
        assert adj.suggested_difficulty is DifficultyLevel.BEGINNER

    @pytest.mark.parametrize("override", [
        {"completion_rate": 79.9}, {"week_number": 3},
    ])
    def test_other_requirements(self, override):
        adj = adjustments_for(_make_user(), _make_factors(**{**self.ELIGIBLE, **override}))
        assert adj.should_increase_difficulty is False


# ======================================================================
# Copy
# ======================================================================


class TestMessages:

    def test_week_one_direct(self):
        adj = adjustments_for(_make_user(gender=Gender.MALE), _make_factors(week_number=1))
        assert adj.progression_message.startswith("Week 1: Foundation building")

    def test_week_two_supportive(self):
        adj = adjustments_for(_make_user(gender=Gender.FEMALE), _make_factors(week_number=2))
        assert adj.progression_message.startswith("Week 2: Growing stronger!")

    def test_unspecified_gender_is_supportive(self):
        adj = adjustments_for(_make_user(), _make_factors(week_number=4))
        assert adj.progression_message == "Week 4: Look how far you've come! Time to level up."

    def test_no_message_for_other_weeks(self):
        adj = adjustments_for(_make_user(), _make_factors(week_number=3))
        assert adj.progression_message == ""

    def test_upgrade_message_wins(self):
        adj = adjustments_for(
            _make_user(gender=Gender.MALE),
            _make_factors(completion_rate=90, streak_days=9, week_number=4),
        )
        assert adj.progression_message.startswith("PROMOTION READY")
        assert adj.encouragement == "9-day streak! Unstoppable discipline."

    @pytest.mark.parametrize("streak,expected", [
        (2, ""),
        (3, "You're on a roll! Keep it up!"),
        (10, "10 days in a row! You're incredible!"),
    ])
    def test_streak_encouragement(self, streak, expected):
        adj = adjustments_for(_make_user(), _make_factors(streak_days=streak))
        assert adj.encouragement == expected


# ======================================================================
# Application helpers
# ======================================================================


class TestApplyExerciseAdjustments:

    def test_scales_numeric_fields(self):
        ex = Exercise(exercise_id="e", name="E", sets=3, reps=10, rest_seconds=60)
        out = apply_exercise_adjustments(ex, _make_adjustments(
            sets_multiplier=1.2, reps_multiplier=1.1, rest_multiplier=0.9,
        ))
        assert (out.sets, out.reps, out.rest_seconds) == (4, 11, 54)

    def test_free_text_reps_untouched(self):
        ex = Exercise(exercise_id="e", name="E", sets=3, reps="12 each leg")
        out = apply_exercise_adjustments(ex, _make_adjustments(reps_multiplier=1.3))
        assert out.reps == "12 each leg"

    def test_timed_duration(self):
        ex = Exercise(exercise_id="e", name="E", sets=3, duration_seconds=30)
        out = apply_exercise_adjustments(ex, _make_adjustments(duration_multiplier=1.2))
        assert out.duration_seconds == 36

    def test_sets_at_least_one(self):
        ex = Exercise(exercise_id="e", name="E", sets=2, reps=10)
        out = apply_exercise_adjustments(ex, _make_adjustments(sets_multiplier=0.1))
        assert out.sets == 1

    def test_input_not_mutated(self):
        ex = Exercise(exercise_id="e", name="E", sets=3, reps=10)
        apply_exercise_adjustments(ex, _make_adjustments(sets_multiplier=1.5))
        assert ex.sets == 3


class TestApplyMealAdjustments:

    def _meal(self, calories=410.0, fiber=None) -> Meal:
        return Meal(
            meal_id="m", name="M", meal_type=MealType.LUNCH,
            nutrition=NutritionInfo(calories=calories, protein=30, carbs=40, fat=10, fiber=fiber),
        )

    def test_spreads_delta_then_scales(self):
        out = apply_meal_adjustments(
            self._meal(), _make_adjustments(calorie_adjustment=-200, portion_multiplier=0.95),
            meal_count=4,
        )
        # (410 - 50) × 0.95
        assert out.nutrition.calories == pytest.approx(342)
        assert out.nutrition.carbs == pytest.approx(38.0)
        assert out.nutrition.fat == pytest.approx(9.5)
        assert out.nutrition.protein == pytest.approx(30)

    def test_protein_multiplier(self):
        out = apply_meal_adjustments(
            self._meal(fiber=4), _make_adjustments(protein_multiplier=1.15), meal_count=3,
        )
        assert out.nutrition.protein == pytest.approx(34.5)
        assert out.nutrition.fiber == pytest.approx(4)

    def test_calories_never_negative(self):
        out = apply_meal_adjustments(
            self._meal(calories=20), _make_adjustments(calorie_adjustment=-200), meal_count=2,
        )
        assert out.nutrition.calories == 0


class TestDayFocus:

    @pytest.mark.parametrize("day,focus", [
        (1, "Push"), (2, "Pull"), (3, "Legs"), (4, "Core & Stability"),
        (5, "Push"), (7, "Active Recovery"), (8, "Push"), (15, "Push"),
    ])
    def test_seven_day_cycle(self, day, focus):
        assert day_focus(day) == focus
