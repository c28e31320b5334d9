"""
Plan export: presentation projection of an :class:`EnrichedDailyPlan`.

The result is what a PDF/print renderer consumes.  Nothing is re-derived:
every value is read off the plan.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.schemas.plan import (
    EnrichedDailyPlan,
    ExportExercise,
    ExportFasting,
    ExportMeal,
    ExportMeals,
    ExportWorkout,
    PlanExport,
)


def format_date(date: datetime.date) -> str:
    """``Monday, January 5, 2026``"""
    return f"{date:%A, %B} {date.day}, {date.year}"


def _notices(plan: EnrichedDailyPlan) -> list[str]:
    notices = [e.message for e in plan.validation.errors]
    notices.extend(w.message for w in plan.validation.warnings)
    if plan.adjustments is not None:
        notices.extend(
            text for text in (
                plan.adjustments.progression_message,
                plan.adjustments.encouragement,
            ) if text
        )
    return notices


def format_for_export(
    plan: EnrichedDailyPlan,
    app_name: str,
    generated_at: Optional[datetime.datetime] = None,
) -> PlanExport:
    window = plan.fasting.window

    workout = None
    if plan.workout is not None:
        workout = ExportWorkout(
            name=plan.workout.name,
            description=plan.workout.description,
            duration_minutes=plan.workout.completion_estimate.total_minutes,
            calories=plan.workout.completion_estimate.total_calories,
            exercises=[
                ExportExercise(
                    name=e.exercise.name,
                    sets=e.exercise.sets,
                    reps=e.exercise.reps,
                    duration_seconds=e.exercise.duration_seconds,
                    rest_seconds=e.exercise.rest_seconds,
                )
                for e in plan.workout.exercises
            ],
        )

    meals = ExportMeals(
        items=[
            ExportMeal(
                meal_type=s.meal.meal_type,
                name=s.meal.name,
                scheduled_time=s.scheduled_time,
                is_within_window=s.is_within_window,
                calories=s.meal.nutrition.calories,
                protein=s.meal.nutrition.protein,
                carbs=s.meal.nutrition.carbs,
                fat=s.meal.nutrition.fat,
                prep_minutes=s.meal.prep_minutes,
                cook_minutes=s.meal.cook_minutes,
            )
            for s in plan.meals.scheduled
        ],
        total_nutrition=plan.meals.total_nutrition,
    )

    return PlanExport(
        title=f"{app_name} Daily Plan",
        subtitle="Rest Day" if plan.is_rest_day else f"Day {plan.day_number}",
        date=format_date(plan.date),
        fasting=ExportFasting(
            pattern=window.pattern.value,
            window=window.label,
            fasting_hours=window.fasting_hours,
            eating_hours=window.eating_hours,
        ),
        workout=workout,
        meals=meals,
        notices=_notices(plan),
        generated_at=generated_at or datetime.datetime.now(),
        app_name=app_name,
    )
