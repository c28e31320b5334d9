"""Pydantic schemas for request/response validation."""

from app.schemas.profile import (
    DifficultyLevel,
    FastingPattern,
    FitnessGoal,
    Gender,
    MealIntensity,
    PersonalizationAssignment,
    UserAttributes,
    WorkType,
)
from app.schemas.fasting import FastingPatternInfo, FastingPhase, FastingStatus, FastingWindow
from app.schemas.catalog import Exercise, Meal, MealPlanTemplate, MealType, NutritionInfo, WorkoutTemplate
from app.schemas.progression import ProgressionAdjustments, ProgressionFactors, ProgressionRequest
from app.schemas.admin_override import AdminOverride, AdminOverrideCreate, OverrideComponent
from app.schemas.plan import (
    EnrichedDailyPlan,
    PlanExport,
    PlanOptions,
    PlanRequest,
    PlanSummary,
    PlanValidation,
)

__all__ = [
    "DifficultyLevel",
    "FastingPattern",
    "FitnessGoal",
    "Gender",
    "MealIntensity",
    "PersonalizationAssignment",
    "UserAttributes",
    "WorkType",
    "FastingPatternInfo",
    "FastingPhase",
    "FastingStatus",
    "FastingWindow",
    "Exercise",
    "Meal",
    "MealPlanTemplate",
    "MealType",
    "NutritionInfo",
    "WorkoutTemplate",
    "ProgressionAdjustments",
    "ProgressionFactors",
    "ProgressionRequest",
    "AdminOverride",
    "AdminOverrideCreate",
    "OverrideComponent",
    "EnrichedDailyPlan",
    "PlanExport",
    "PlanOptions",
    "PlanRequest",
    "PlanSummary",
    "PlanValidation",
]
