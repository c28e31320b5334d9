"""
Unit tests for plan enrichment: workout duration estimates, meal
scheduling and nutrition totals.
"""

import pytest

from app.regimen.enrichment import (
    DEFAULT_ENRICHMENT_CONFIG,
    EnrichmentConfig,
    enrich_workout,
    schedule_meals,
    scheduled_time_for,
    total_nutrition,
)
from app.regimen.fasting import window_for
from app.schemas.catalog import (
    Exercise,
    Meal,
    MealType,
    NutritionInfo,
    WorkoutTemplate,
)
from app.schemas.profile import DifficultyLevel, FastingPattern


# ======================================================================
# Helpers
# ======================================================================


def _make_exercise(exercise_id: str = "ex", **overrides) -> Exercise:
    defaults = dict(
        exercise_id=exercise_id, name=exercise_id.title(),
        video_url=f"https://v/{exercise_id}.mp4",
    )
    defaults.update(overrides)
    return Exercise(**defaults)


def _make_workout(*exercises: Exercise, calories: int = 150) -> WorkoutTemplate:
    return WorkoutTemplate(
        template_id="wk-test", name="Test", day_of_week=1,
        difficulty=DifficultyLevel.BEGINNER,
        exercises=list(exercises), estimated_calories=calories,
    )


def _make_meal(meal_id: str, meal_type: MealType, calories=400, fiber=None) -> Meal:
    return Meal(
        meal_id=meal_id, name=meal_id.title(), meal_type=meal_type,
        nutrition=NutritionInfo(calories=calories, protein=20, carbs=40, fat=10, fiber=fiber),
    )


def _minutes(exercise: Exercise) -> int:
    return enrich_workout(_make_workout(exercise)).exercises[0].estimated_minutes


# ======================================================================
# Workouts
# ======================================================================


class TestExerciseEstimate:

    def test_reps_based(self):
        # 3 × 15 × 3 s = 2.25 min work + 60 s × 2 = 2 min rest
        ex = _make_exercise(sets=3, reps=15, rest_seconds=60)
        enriched = enrich_workout(_make_workout(ex)).exercises[0]
        assert enriched.estimated_minutes == 4
        assert enriched.rest_minutes == pytest.approx(2.0)

    def test_free_text_reps_count_as_twelve(self):
        # 3 × 12 × 3 s = 1.8 min + 2 min rest
        ex = _make_exercise(sets=3, reps="10-15", rest_seconds=60)
        assert _minutes(ex) == 4

    def test_timed(self):
        # 30 s × 3 = 1.5 min + 45 s × 2 = 1.5 min
        ex = _make_exercise(sets=3, duration_seconds=30, rest_seconds=45)
        assert _minutes(ex) == 3

    def test_rest_defaults_to_sixty_seconds(self):
        ex = _make_exercise(sets=4, duration_seconds=60)
        enriched = enrich_workout(_make_workout(ex)).exercises[0]
        assert enriched.rest_minutes == pytest.approx(3.0)
        assert enriched.estimated_minutes == 7

    def test_missing_sets_means_one_set_no_rest(self):
        ex = _make_exercise(duration_seconds=120, rest_seconds=30)
        enriched = enrich_workout(_make_workout(ex)).exercises[0]
        assert enriched.estimated_minutes == 2
        assert enriched.rest_minutes == 0.0

    def test_reps_without_sets_count_as_one_set(self):
        # 1 × 20 × 3 s = 1 min, no rest after a single set
        ex = _make_exercise(reps=20, rest_seconds=45)
        enriched = enrich_workout(_make_workout(ex)).exercises[0]
        assert enriched.estimated_minutes == 1
        assert enriched.rest_minutes == 0.0

    def test_no_prescription_is_zero(self):
        assert _minutes(_make_exercise()) == 0

    def test_video_flag(self):
        with_video = _make_exercise("a", sets=1, reps=10)
        without = _make_exercise("b", sets=1, reps=10, video_url=None)
        enriched = enrich_workout(_make_workout(with_video, without)).exercises
        assert [e.has_video for e in enriched] == [True, False]

    def test_custom_seconds_per_rep(self):
        ex = _make_exercise(sets=2, reps=30, rest_seconds=0)
        cfg = EnrichmentConfig(seconds_per_rep=5)
        enriched = enrich_workout(_make_workout(ex), cfg)
        assert enriched.exercises[0].estimated_minutes == 5


class TestWorkoutEstimate:

    def test_totals(self):
        squats = _make_exercise("squats", sets=3, reps=15, rest_seconds=60)     # 2.25 + 2.0
        plank = _make_exercise("plank", sets=3, duration_seconds=30, rest_seconds=30)  # 1.5 + 1.0
        w = enrich_workout(_make_workout(squats, plank, calories=85))
        assert w.completion_estimate.total_minutes == 7   # 6.75
        assert w.completion_estimate.rest_minutes == 3
        assert w.completion_estimate.total_calories == 85

    def test_order_is_one_based(self):
        w = enrich_workout(_make_workout(
            _make_exercise("a"), _make_exercise("b"), _make_exercise("c"),
        ))
        assert [e.order_in_workout for e in w.exercises] == [1, 2, 3]

    def test_carries_template_identity(self):
        template = _make_workout(_make_exercise(sets=1, reps=5))
        w = enrich_workout(template)
        assert w.template_id == "wk-test"
        assert w.exercises[0].exercise == template.exercises[0]

    def test_empty_workout(self):
        w = enrich_workout(_make_workout(calories=0))
        assert w.exercises == []
        assert w.completion_estimate.total_minutes == 0


# ======================================================================
# Meals
# ======================================================================


class TestScheduleMeals:

    def test_sorted_and_reindexed(self):
        meals = [
            _make_meal("d", MealType.DINNER),
            _make_meal("b", MealType.BREAKFAST),
            _make_meal("s", MealType.SNACK),
            _make_meal("l", MealType.LUNCH),
        ]
        scheduled = schedule_meals(meals, window_for(FastingPattern.P16_8))
        assert [s.scheduled_time for s in scheduled] == ["12:00", "15:00", "17:00", "19:00"]
        assert [s.meal.meal_id for s in scheduled] == ["b", "l", "s", "d"]
        assert [s.order_in_day for s in scheduled] == [1, 2, 3, 4]
        assert all(s.is_within_window for s in scheduled)

    @pytest.mark.parametrize("pattern", list(FastingPattern))
    def test_default_times_fall_inside_window(self, pattern):
        meals = [_make_meal(t.value, t) for t in MealType]
        scheduled = schedule_meals(meals, window_for(pattern))
        times = [s.scheduled_time for s in scheduled]
        assert times == sorted(times)
        assert all(s.is_within_window for s in scheduled)

    def test_outside_window_flagged(self):
        times = {k: dict(v) for k, v in DEFAULT_ENRICHMENT_CONFIG.meal_times.items()}
        times[FastingPattern.P16_8][MealType.BREAKFAST] = "07:00"
        cfg = EnrichmentConfig(meal_times=times)
        scheduled = schedule_meals(
            [_make_meal("b", MealType.BREAKFAST)], window_for(FastingPattern.P16_8), cfg,
        )
        assert scheduled[0].scheduled_time == "07:00"
        assert scheduled[0].is_within_window is False

    def test_stable_for_equal_times(self):
        meals = [_make_meal("first", MealType.LUNCH), _make_meal("second", MealType.LUNCH)]
        scheduled = schedule_meals(meals, window_for(FastingPattern.P12_12))
        assert [s.meal.meal_id for s in scheduled] == ["first", "second"]

    def test_scheduled_time_for(self):
        assert scheduled_time_for(MealType.SNACK, FastingPattern.P14_10) == "15:30"
        assert scheduled_time_for(MealType.DINNER, FastingPattern.P18_6) == "19:30"


class TestTotalNutrition:

    def test_sums_and_missing_fiber_is_zero(self):
        total = total_nutrition([
            _make_meal("a", MealType.LUNCH, calories=400, fiber=6),
            _make_meal("b", MealType.DINNER, calories=350),
        ])
        assert total.calories == pytest.approx(750)
        assert total.protein == pytest.approx(40)
        assert total.fiber == pytest.approx(6)

    def test_empty_is_zero(self):
        total = total_nutrition([])
        assert total.calories == 0
        assert total.fiber == 0
