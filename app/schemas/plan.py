"""
Daily plan schemas.

``EnrichedDailyPlan`` is the single output aggregate of the synthesizer.
It is frozen: regeneration always builds a new value.  Presentation layers
(screens, the export formatter) must be able to render from it alone.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.schemas.admin_override import AdminOverride
from app.schemas.catalog import Exercise, Meal, MealType, NutritionInfo
from app.schemas.fasting import FastingPhase, FastingWindow
from app.schemas.profile import PersonalizationAssignment, UserAttributes
from app.schemas.progression import ProgressionAdjustments, ProgressionFactors


# ======================================================================
# Validation findings
# ======================================================================


class PlanComponent(str, Enum):
    WORKOUT = "workout"
    MEAL = "meal"
    FASTING = "fasting"
    GENERAL = "general"


class Severity(str, Enum):
    CRITICAL = "critical"
    RECOVERABLE = "recoverable"


class FindingCode(str, Enum):
    INVALID_PROFILE = "invalid_profile"
    MISSING_WORKOUT_TEMPLATE = "missing_workout_template"
    MISSING_MEAL_TEMPLATE = "missing_meal_template"
    SCHEDULED_OUTSIDE_WINDOW = "scheduled_outside_window"
    MISSING_DEMONSTRATION_MEDIA = "missing_demonstration_media"
    OVERRIDE_NOT_APPLIED = "override_not_applied"


class PlanError(BaseModel):
    """A finding that degrades (recoverable) or voids (critical) a plan."""

    model_config = ConfigDict(frozen=True)

    code: FindingCode
    message: str
    component: PlanComponent
    severity: Severity
    fallback_applied: bool = False


class PlanWarning(BaseModel):
    """A finding that never blocks plan delivery."""

    model_config = ConfigDict(frozen=True)

    code: FindingCode
    message: str
    component: PlanComponent


class PlanValidation(BaseModel):
    """Aggregate validation result attached to every plan."""

    model_config = ConfigDict(frozen=True)

    errors: list[PlanError] = Field(default_factory=list)
    warnings: list[PlanWarning] = Field(default_factory=list)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not any(e.severity is Severity.CRITICAL for e in self.errors)

    def for_component(self, component: PlanComponent) -> PlanValidation:
        """Findings produced by a single component."""
        return PlanValidation(
            errors=[e for e in self.errors if e.component is component],
            warnings=[w for w in self.warnings if w.component is component],
        )


# ======================================================================
# Enriched workout
# ======================================================================


class EnrichedExercise(BaseModel):
    """Catalog exercise plus computed fields."""

    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    order_in_workout: int = Field(..., ge=1)
    estimated_minutes: int = Field(..., ge=0)
    rest_minutes: float = Field(..., ge=0)
    has_video: bool


class CompletionEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_minutes: int = Field(..., ge=0)
    total_calories: int = Field(..., ge=0)
    rest_minutes: int = Field(..., ge=0)


class EnrichedWorkout(BaseModel):
    model_config = ConfigDict(frozen=True)

    template_id: str
    name: str
    description: str
    focus: str
    exercises: list[EnrichedExercise]
    completion_estimate: CompletionEstimate


# ======================================================================
# Scheduled meals
# ======================================================================


class ScheduledMeal(BaseModel):
    """Catalog meal placed on the day's clock."""

    model_config = ConfigDict(frozen=True)

    meal: Meal
    scheduled_time: str = Field(..., description="HH:MM")
    is_within_window: bool
    order_in_day: int = Field(..., ge=1)


class DailyMeals(BaseModel):
    model_config = ConfigDict(frozen=True)

    template_id: Optional[str] = None
    scheduled: list[ScheduledMeal] = Field(default_factory=list)
    total_nutrition: NutritionInfo = Field(default_factory=NutritionInfo.zero)


# ======================================================================
# Fasting
# ======================================================================


class DailyFastingStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    window: FastingWindow
    current_phase: FastingPhase
    phase_start_time: str
    phase_end_time: str
    minutes_remaining: int = Field(..., ge=0)
    percent_complete: float = Field(..., ge=0.0, le=100.0)
    next_meal_time: Optional[str] = None


# ======================================================================
# Generation input
# ======================================================================


class PlanOptions(BaseModel):
    """Per-call knobs for :func:`app.regimen.synthesizer.synthesize`."""

    model_config = ConfigDict(frozen=True)

    force_rest_day: Optional[bool] = Field(
        None,
        description="True/False forces the rest-day decision; None means "
                    "'Sunday is the rest day'",
    )
    skip_workout: bool = False
    skip_meals: bool = False
    as_of: Optional[datetime.datetime] = Field(
        None,
        description="Instant for the fasting status (read once when omitted)",
    )
    program_start_date: Optional[datetime.date] = None
    progression: Optional[ProgressionFactors] = None
    apply_fasting_recommendation: bool = False
    admin_overrides: list[AdminOverride] = Field(default_factory=list)


# ======================================================================
# Output aggregate
# ======================================================================


class EnrichedDailyPlan(BaseModel):
    """Complete personalized plan for one user and one calendar day."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    date: datetime.date
    day_of_week: int = Field(..., ge=1, le=7, description="ISO weekday, 1=Monday")
    day_number: int = Field(..., ge=1, description="Day in the program")

    assignment: PersonalizationAssignment
    workout: Optional[EnrichedWorkout] = None
    meals: DailyMeals
    fasting: DailyFastingStatus

    is_rest_day: bool
    validation: PlanValidation
    adjustments: Optional[ProgressionAdjustments] = None
    admin_overrides: list[AdminOverride] = Field(default_factory=list)
    generated_at: datetime.datetime


class PlanSummary(BaseModel):
    """One-line digest of a plan for list views."""

    date: datetime.date
    is_rest_day: bool
    workout_name: Optional[str] = None
    workout_minutes: Optional[int] = None
    meal_count: int
    total_calories: float
    fasting_pattern: str
    is_valid: bool
    has_errors: bool
    has_warnings: bool


# ======================================================================
# Export projection
# ======================================================================


class ExportExercise(BaseModel):
    name: str
    sets: Optional[int] = None
    reps: Optional[Union[int, str]] = None
    duration_seconds: Optional[int] = None
    rest_seconds: Optional[int] = None


class ExportWorkout(BaseModel):
    name: str
    description: str
    duration_minutes: int
    calories: int
    exercises: list[ExportExercise]


class ExportMeal(BaseModel):
    meal_type: MealType
    name: str
    scheduled_time: str
    is_within_window: bool
    calories: float
    protein: float
    carbs: float
    fat: float
    prep_minutes: Optional[int] = None
    cook_minutes: Optional[int] = None


class ExportFasting(BaseModel):
    pattern: str
    window: str
    fasting_hours: int
    eating_hours: int


class ExportMeals(BaseModel):
    items: list[ExportMeal]
    total_nutrition: NutritionInfo


class PlanExport(BaseModel):
    """Presentation-ready sections consumed by the PDF formatter."""

    title: str
    subtitle: str
    date: str
    fasting: ExportFasting
    workout: Optional[ExportWorkout] = None
    meals: ExportMeals
    notices: list[str] = Field(default_factory=list)
    generated_at: datetime.datetime
    app_name: str


# ======================================================================
# API requests
# ======================================================================


class PlanRequest(BaseModel):
    """Body of the daily plan / export endpoints.

    Admin overrides are not accepted here; they are loaded from storage.
    """

    user: UserAttributes
    date: datetime.date
    force_rest_day: Optional[bool] = None
    skip_workout: bool = False
    skip_meals: bool = False
    as_of: Optional[datetime.datetime] = None
    program_start_date: Optional[datetime.date] = None
    progression: Optional[ProgressionFactors] = None
    apply_fasting_recommendation: bool = False

    def to_options(self, admin_overrides: list[AdminOverride]) -> PlanOptions:
        return PlanOptions(
            force_rest_day=self.force_rest_day,
            skip_workout=self.skip_workout,
            skip_meals=self.skip_meals,
            as_of=self.as_of,
            program_start_date=self.program_start_date,
            progression=self.progression,
            apply_fasting_recommendation=self.apply_fasting_recommendation,
            admin_overrides=admin_overrides,
        )
