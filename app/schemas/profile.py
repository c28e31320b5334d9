"""
User attribute and personalization schemas.

The profile subsystem owns the stored user record; the engine only ever
sees the slice of it described here.  ``UserAttributes`` is the immutable
input to the personalization resolver, the synthesizer and the progression
engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkType(str, Enum):
    """Coarse daily activity level: the primary personalization key."""
    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"


class FitnessGoal(str, Enum):
    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    BUILD_MUSCLE = "build_muscle"
    IMPROVE_HEALTH = "improve_health"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class DifficultyLevel(str, Enum):
    """Workout difficulty tier, ordered from easiest to hardest."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DIFFICULTY_ORDER: list[DifficultyLevel] = [
    DifficultyLevel.BEGINNER,
    DifficultyLevel.INTERMEDIATE,
    DifficultyLevel.ADVANCED,
]


class MealIntensity(str, Enum):
    """Calorie tier used for meal-plan selection."""
    LIGHT = "light"
    STANDARD = "standard"
    HIGH_ENERGY = "high_energy"


class FastingPattern(str, Enum):
    """Hours fasting : hours eating per day."""
    P12_12 = "12:12"
    P14_10 = "14:10"
    P16_8 = "16:8"
    P18_6 = "18:6"


# Gentlest first.  Progression steps move one position along this list.
FASTING_PATTERN_ORDER: list[FastingPattern] = [
    FastingPattern.P12_12,
    FastingPattern.P14_10,
    FastingPattern.P16_8,
    FastingPattern.P18_6,
]


class PersonalizationAssignment(BaseModel):
    """The three rule-assigned plan keys for a user."""

    model_config = ConfigDict(frozen=True)

    fasting_pattern: FastingPattern
    workout_difficulty: DifficultyLevel
    meal_intensity: MealIntensity


class UserAttributes(BaseModel):
    """Engine-facing view of a user profile.

    The ``fasting_pattern`` / ``workout_difficulty`` / ``meal_intensity``
    fields carry the *stored* assignment.  When set they take precedence
    over the resolver (e.g. after an accepted difficulty upgrade); when
    ``None`` the resolver fills them in.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    weight_kg: float = Field(
        ...,
        description="Body weight in kg.  Non-positive values are reported "
                    "as an invalid profile rather than rejected.",
    )
    height_cm: Optional[float] = Field(None, gt=0)
    work_type: WorkType
    primary_goal: FitnessGoal = FitnessGoal.MAINTAIN
    fitness_level: DifficultyLevel = Field(
        DifficultyLevel.BEGINNER,
        description="Tier from the fitness assessment",
    )
    gender: Optional[Gender] = None

    fasting_pattern: Optional[FastingPattern] = None
    workout_difficulty: Optional[DifficultyLevel] = None
    meal_intensity: Optional[MealIntensity] = None

    @property
    def bmi(self) -> Optional[float]:
        """Body-mass index, or ``None`` when height or weight is unusable."""
        if not self.height_cm or self.weight_kg <= 0:
            return None
        return self.weight_kg / (self.height_cm / 100.0) ** 2
