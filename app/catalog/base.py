"""
Abstract base class for content catalogs.

The synthesizer never reaches into a concrete content store; it asks a
:class:`ContentCatalog` for:

- the workout template for a (weekday, difficulty) pair,
- the meal-plan template for a (weekday, intensity) pair,
- individual workouts / meals by id (used by admin overrides).

Lookups return ``None`` when nothing matches: absence is reported by the
synthesizer as a recoverable finding, never raised.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.catalog import Meal, MealPlanTemplate, WorkoutTemplate
from app.schemas.profile import DifficultyLevel, MealIntensity


class ContentCatalog(ABC):
    """Read-only source of workout and meal content."""

    @abstractmethod
    def workout_for(
        self, day_of_week: int, difficulty: DifficultyLevel,
    ) -> Optional[WorkoutTemplate]:
        """Workout template for an ISO weekday and difficulty tier."""
        ...

    @abstractmethod
    def meal_plan_for(
        self, day_of_week: int, intensity: MealIntensity,
    ) -> Optional[MealPlanTemplate]:
        """Meal-plan template for an ISO weekday and meal intensity."""
        ...

    @abstractmethod
    def get_workout(self, template_id: str) -> Optional[WorkoutTemplate]:
        ...

    @abstractmethod
    def get_meal(self, meal_id: str) -> Optional[Meal]:
        ...
