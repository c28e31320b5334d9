"""
Content catalog schemas: exercises, workout templates, meals.

Catalog content is authored reference data.  The engine reads it and never
mutates it; enrichment produces new values that *wrap* catalog entries.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import DifficultyLevel, MealIntensity


class ExerciseType(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    HIIT = "hiit"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Exercise(BaseModel):
    """A single exercise with its template defaults."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str = Field(..., description="Unique slug, e.g. 'push_ups'")
    name: str
    description: str = ""
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER
    muscle_groups: list[str] = Field(default_factory=list)
    video_url: Optional[str] = None

    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[Union[int, str]] = Field(
        None,
        description="Rep count, or free text such as '10-15' / '12 each leg'",
    )
    duration_seconds: Optional[int] = Field(
        None, ge=0,
        description="Work time per set for timed exercises",
    )
    rest_seconds: Optional[int] = Field(None, ge=0, description="Rest between sets")
    calories: Optional[int] = Field(None, ge=0)

    @property
    def is_timed(self) -> bool:
        return bool(self.duration_seconds)


class WorkoutTemplate(BaseModel):
    """A day's workout for one difficulty tier."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    name: str
    description: str = ""
    day_of_week: int = Field(..., ge=1, le=7, description="ISO weekday, 1=Monday")
    difficulty: DifficultyLevel
    exercises: list[Exercise]
    focus: str = ""
    estimated_calories: int = Field(..., ge=0)


class NutritionInfo(BaseModel):
    """Macros for a meal or a day.  Grams except calories."""

    model_config = ConfigDict(frozen=True)

    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: Optional[float] = Field(None, ge=0)

    @classmethod
    def zero(cls) -> NutritionInfo:
        return cls(fiber=0)


class Meal(BaseModel):
    """A single meal from the catalog."""

    model_config = ConfigDict(frozen=True)

    meal_id: str
    name: str
    description: str = ""
    meal_type: MealType
    nutrition: NutritionInfo
    prep_minutes: Optional[int] = Field(None, ge=0)
    cook_minutes: Optional[int] = Field(None, ge=0)
    video_url: Optional[str] = None
    dietary_tags: list[str] = Field(default_factory=list)


class MealPlanTemplate(BaseModel):
    """A day's meals for one intensity tier."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    day_of_week: int = Field(..., ge=1, le=7, description="ISO weekday, 1=Monday")
    intensity: MealIntensity
    meals: list[Meal]
