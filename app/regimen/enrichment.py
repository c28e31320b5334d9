"""
Plan enrichment: computed fields on top of catalog content.

- **Workouts**: per-exercise duration estimate, rest time and video flag;
  whole-workout completion estimate.
- **Meals**: a scheduled clock time per meal (by fasting pattern and meal
  type), an in-window flag, and daily nutrition totals.

Duration model
--------------
Timed exercise::

    work = duration_seconds × sets / 60

Rep-based exercise (free-text reps such as ``"10-15"`` count as
``default_reps``)::

    work = sets × reps × seconds_per_rep / 60

Rest, for either kind::

    rest = rest_seconds × (sets − 1) / 60

Per-exercise minutes are rounded; workout totals are rounded from the
unrounded sums.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.regimen.fasting import is_within_eating_window
from app.schemas.catalog import Exercise, Meal, MealType, NutritionInfo, WorkoutTemplate
from app.schemas.fasting import FastingWindow
from app.schemas.plan import (
    CompletionEstimate,
    EnrichedExercise,
    EnrichedWorkout,
    ScheduledMeal,
)
from app.schemas.profile import FastingPattern

# ======================================================================
# Configuration
# ======================================================================

# pattern → meal type → default clock time
_DEFAULT_MEAL_TIMES: dict[FastingPattern, dict[MealType, str]] = {
    FastingPattern.P12_12: {
        MealType.BREAKFAST: "08:00",
        MealType.LUNCH: "12:00",
        MealType.DINNER: "18:00",
        MealType.SNACK: "15:00",
    },
    FastingPattern.P14_10: {
        MealType.BREAKFAST: "10:00",
        MealType.LUNCH: "13:00",
        MealType.DINNER: "18:00",
        MealType.SNACK: "15:30",
    },
    FastingPattern.P16_8: {
        MealType.BREAKFAST: "12:00",
        MealType.LUNCH: "15:00",
        MealType.DINNER: "19:00",
        MealType.SNACK: "17:00",
    },
    FastingPattern.P18_6: {
        MealType.BREAKFAST: "14:00",
        MealType.LUNCH: "16:00",
        MealType.DINNER: "19:30",
        MealType.SNACK: "17:30",
    },
}


class EnrichmentConfig(BaseModel):
    """Estimation constants and the default meal-time table."""

    seconds_per_rep: int = Field(3, gt=0)
    default_reps: int = Field(12, gt=0, description="Used for free-text reps")
    default_rest_seconds: int = Field(60, ge=0)
    default_sets: int = Field(1, ge=1)
    meal_times: dict[FastingPattern, dict[MealType, str]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in _DEFAULT_MEAL_TIMES.items()},
    )


DEFAULT_ENRICHMENT_CONFIG = EnrichmentConfig()


# ======================================================================
# Workouts
# ======================================================================


def _work_minutes(exercise: Exercise, cfg: EnrichmentConfig) -> float:
    sets = exercise.sets if exercise.sets is not None else cfg.default_sets
    if exercise.is_timed:
        return exercise.duration_seconds * sets / 60
    if exercise.reps is not None:
        reps = exercise.reps if isinstance(exercise.reps, int) else cfg.default_reps
        return sets * reps * cfg.seconds_per_rep / 60
    return 0.0


def _rest_minutes(exercise: Exercise, cfg: EnrichmentConfig) -> float:
    sets = exercise.sets if exercise.sets is not None else cfg.default_sets
    rest = (
        exercise.rest_seconds if exercise.rest_seconds is not None
        else cfg.default_rest_seconds
    )
    return rest * max(sets - 1, 0) / 60


def enrich_workout(
    template: WorkoutTemplate,
    config: Optional[EnrichmentConfig] = None,
) -> EnrichedWorkout:
    """Attach duration estimates and ordering to *template*'s exercises."""
    cfg = config or DEFAULT_ENRICHMENT_CONFIG
    total_minutes = 0.0
    total_rest = 0.0
    enriched: list[EnrichedExercise] = []

    for idx, exercise in enumerate(template.exercises, start=1):
        work = _work_minutes(exercise, cfg)
        rest = _rest_minutes(exercise, cfg)
        total_minutes += work + rest
        total_rest += rest
        enriched.append(EnrichedExercise(
            exercise=exercise,
            order_in_workout=idx,
            estimated_minutes=round(work + rest),
            rest_minutes=round(rest, 2),
            has_video=bool(exercise.video_url),
        ))

    return EnrichedWorkout(
        template_id=template.template_id,
        name=template.name,
        description=template.description,
        focus=template.focus,
        exercises=enriched,
        completion_estimate=CompletionEstimate(
            total_minutes=round(total_minutes),
            total_calories=max(template.estimated_calories, 0),
            rest_minutes=round(total_rest),
        ),
    )


# ======================================================================
# Meals
# ======================================================================


def scheduled_time_for(
    meal_type: MealType,
    pattern: FastingPattern,
    config: Optional[EnrichmentConfig] = None,
) -> str:
    cfg = config or DEFAULT_ENRICHMENT_CONFIG
    return cfg.meal_times[pattern][meal_type]


def schedule_meals(
    meals: Iterable[Meal],
    window: FastingWindow,
    config: Optional[EnrichmentConfig] = None,
) -> list[ScheduledMeal]:
    """Place *meals* on the clock for *window*'s pattern.

    Sorting is stable, so two meals sharing a time keep catalog order.
    ``order_in_day`` is re-indexed from 1 after sorting.
    """
    timed = [
        (scheduled_time_for(meal.meal_type, window.pattern, config), meal)
        for meal in meals
    ]
    timed.sort(key=lambda pair: pair[0])
    return [
        ScheduledMeal(
            meal=meal,
            scheduled_time=clock,
            is_within_window=is_within_eating_window(clock, window),
            order_in_day=idx,
        )
        for idx, (clock, meal) in enumerate(timed, start=1)
    ]


def total_nutrition(meals: Iterable[Meal]) -> NutritionInfo:
    """Sum macros across *meals*.  Missing fiber counts as zero."""
    calories = protein = carbs = fat = fiber = 0.0
    for meal in meals:
        n = meal.nutrition
        calories += n.calories
        protein += n.protein
        carbs += n.carbs
        fat += n.fat
        fiber += n.fiber or 0.0
    return NutritionInfo(
        calories=round(calories, 1),
        protein=round(protein, 1),
        carbs=round(carbs, 1),
        fat=round(fat, 1),
        fiber=round(fiber, 1),
    )
