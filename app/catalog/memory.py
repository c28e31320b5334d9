"""
In-memory content catalog.

Backs :class:`~app.catalog.base.ContentCatalog` with plain lists of
templates and meals.  With no arguments it serves the built-in libraries
(:mod:`app.catalog.workouts`, :mod:`app.catalog.meals`); tests and
alternate deployments pass their own content.

Workout lookup
--------------
A user at tier *T* gets the day's template at the highest tier ≤ *T*.
With the built-in content every tier exists for Monday–Saturday, so this
is an exact match; sparse custom catalogs fall back to an easier tier.

Meal composition
----------------
Meal plans are composed per (weekday, intensity): one meal of each type,
chosen by rotating through a ranked pool:

    light        cheapest half by calories
    standard     every meal, catalog order
    high_energy  richest half by protein
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from app.catalog.base import ContentCatalog
from app.catalog.meals import MEAL_CATALOG
from app.catalog.workouts import WORKOUT_CATALOG
from app.schemas.catalog import Meal, MealPlanTemplate, MealType, WorkoutTemplate
from app.schemas.profile import DIFFICULTY_ORDER, DifficultyLevel, MealIntensity

_MEAL_TYPE_ORDER = [MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER, MealType.SNACK]


class InMemoryCatalog(ContentCatalog):
    def __init__(
        self,
        workouts: Optional[Iterable[WorkoutTemplate]] = None,
        meals: Optional[Iterable[Meal]] = None,
    ):
        self._workouts: dict[str, WorkoutTemplate] = (
            {w.template_id: w for w in workouts}
            if workouts is not None else dict(WORKOUT_CATALOG)
        )
        self._meals: dict[str, Meal] = (
            {m.meal_id: m for m in meals}
            if meals is not None else dict(MEAL_CATALOG)
        )

    # ── ContentCatalog ────────────────────────────────────────────

    def workout_for(
        self, day_of_week: int, difficulty: DifficultyLevel,
    ) -> Optional[WorkoutTemplate]:
        ceiling = DIFFICULTY_ORDER.index(difficulty)
        candidates = [
            w for w in self._workouts.values()
            if w.day_of_week == day_of_week
            and DIFFICULTY_ORDER.index(w.difficulty) <= ceiling
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda w: DIFFICULTY_ORDER.index(w.difficulty))

    def meal_plan_for(
        self, day_of_week: int, intensity: MealIntensity,
    ) -> Optional[MealPlanTemplate]:
        chosen: list[Meal] = []
        for meal_type in _MEAL_TYPE_ORDER:
            pool = self._ranked_pool(meal_type, intensity)
            if pool:
                chosen.append(pool[day_of_week % len(pool)])

        if not chosen:
            return None
        return MealPlanTemplate(
            template_id=f"mp-{day_of_week}-{intensity.value}",
            day_of_week=day_of_week,
            intensity=intensity,
            meals=chosen,
        )

    def get_workout(self, template_id: str) -> Optional[WorkoutTemplate]:
        return self._workouts.get(template_id)

    def get_meal(self, meal_id: str) -> Optional[Meal]:
        return self._meals.get(meal_id)

    # ── Internals ─────────────────────────────────────────────────

    def _ranked_pool(self, meal_type: MealType, intensity: MealIntensity) -> list[Meal]:
        meals = [m for m in self._meals.values() if m.meal_type is meal_type]
        if not meals:
            return []
        half = math.ceil(len(meals) / 2)
        if intensity is MealIntensity.LIGHT:
            return sorted(meals, key=lambda m: m.nutrition.calories)[:half]
        if intensity is MealIntensity.HIGH_ENERGY:
            return sorted(meals, key=lambda m: m.nutrition.protein, reverse=True)[:half]
        return meals
