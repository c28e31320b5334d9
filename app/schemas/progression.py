"""
Progression schemas.

``ProgressionFactors`` is computed by the external progress-tracking
subsystem.  ``ProgressionAdjustments`` is a pure function of
``(UserAttributes, ProgressionFactors)``.  Nothing here is persisted.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import DifficultyLevel, FastingPattern, UserAttributes


class ProgressionFactors(BaseModel):
    """Adherence history aggregates for one user."""

    model_config = ConfigDict(frozen=True)

    day_number: int = Field(0, ge=0, description="Day in the program (1-based)")
    week_number: int = Field(0, ge=0, description="Week in the program (1-based)")
    completion_rate: float = Field(0.0, ge=0.0, le=100.0)
    streak_days: int = Field(0, ge=0)
    average_completion_percent: float = Field(0.0, ge=0.0, le=100.0)
    fasting_compliance: float = Field(0.0, ge=0.0, le=100.0)
    total_exercises_completed: int = Field(0, ge=0)


class ProgressionAdjustments(BaseModel):
    """Multiplicative / additive plan adjustments."""

    model_config = ConfigDict(frozen=True)

    # Exercise
    sets_multiplier: float = Field(1.0, gt=0.0)
    reps_multiplier: float = Field(1.0, gt=0.0)
    duration_multiplier: float = Field(1.0, gt=0.0)
    rest_multiplier: float = Field(1.0, gt=0.0)

    # Nutrition
    calorie_adjustment: int = Field(0, description="Daily calorie delta (+/-)")
    portion_multiplier: float = Field(1.0, gt=0.0)
    protein_multiplier: float = Field(1.0, gt=0.0)

    # Fasting
    recommended_fasting_pattern: FastingPattern
    fasting_hours_adjustment: int = 0

    # Difficulty
    should_increase_difficulty: bool = False
    suggested_difficulty: DifficultyLevel

    # Feedback copy
    progression_message: str = ""
    encouragement: str = ""

    @classmethod
    def neutral(
        cls,
        fasting_pattern: FastingPattern,
        difficulty: DifficultyLevel,
    ) -> "ProgressionAdjustments":
        """Adjustments that leave a plan unchanged."""
        return cls(
            recommended_fasting_pattern=fasting_pattern,
            suggested_difficulty=difficulty,
        )


class ProgressionRequest(BaseModel):
    """Body of ``POST /progression/adjustments``."""

    user: UserAttributes
    factors: ProgressionFactors
