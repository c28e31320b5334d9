"""
Plan validation: findings collected alongside synthesis.

Every check returns a :class:`~app.schemas.plan.PlanValidation`; the
synthesizer concatenates them with :func:`merge`.  Nothing here raises:
a plan is always produced and carries its own findings.

Severity
--------
critical      the plan is not usable (``is_valid`` becomes ``False``)
recoverable   a component is missing; the plan degrades with a fallback
warning       informational; never affects validity
"""

from __future__ import annotations

from typing import Optional

from app.schemas.catalog import MealPlanTemplate, WorkoutTemplate
from app.schemas.plan import (
    FindingCode,
    PlanComponent,
    PlanError,
    PlanValidation,
    PlanWarning,
    ScheduledMeal,
    Severity,
)
from app.schemas.profile import UserAttributes


def validate_profile(user: UserAttributes) -> PlanValidation:
    errors = []
    if user.weight_kg <= 0:
        errors.append(PlanError(
            code=FindingCode.INVALID_PROFILE,
            message="Invalid weight in profile",
            component=PlanComponent.GENERAL,
            severity=Severity.CRITICAL,
        ))
    return PlanValidation(errors=errors)


def validate_workout(
    template: Optional[WorkoutTemplate],
    is_rest_day: bool,
) -> PlanValidation:
    """Missing template on a training day, and exercises without video."""
    errors, warnings = [], []
    if template is None:
        if not is_rest_day:
            errors.append(PlanError(
                code=FindingCode.MISSING_WORKOUT_TEMPLATE,
                message="No workout found for this day",
                component=PlanComponent.WORKOUT,
                severity=Severity.RECOVERABLE,
                fallback_applied=True,
            ))
        return PlanValidation(errors=errors)

    no_video = [ex for ex in template.exercises if not ex.video_url]
    if no_video:
        warnings.append(PlanWarning(
            code=FindingCode.MISSING_DEMONSTRATION_MEDIA,
            message=f"{len(no_video)} exercise(s) missing video",
            component=PlanComponent.WORKOUT,
        ))
    return PlanValidation(errors=errors, warnings=warnings)


def validate_meal_plan(
    template: Optional[MealPlanTemplate],
    scheduled: list[ScheduledMeal],
) -> PlanValidation:
    """Missing template, and meals placed outside the eating window."""
    if template is None:
        return PlanValidation(errors=[PlanError(
            code=FindingCode.MISSING_MEAL_TEMPLATE,
            message="No meal plan found for this day",
            component=PlanComponent.MEAL,
            severity=Severity.RECOVERABLE,
            fallback_applied=True,
        )])

    warnings = [
        PlanWarning(
            code=FindingCode.SCHEDULED_OUTSIDE_WINDOW,
            message=(
                f"{s.meal.name} ({s.meal.meal_type.value}) scheduled at "
                f"{s.scheduled_time}, outside the eating window"
            ),
            component=PlanComponent.MEAL,
        )
        for s in scheduled
        if not s.is_within_window
    ]
    return PlanValidation(warnings=warnings)


def override_not_applied(
    component: PlanComponent, message: str,
) -> PlanValidation:
    return PlanValidation(warnings=[PlanWarning(
        code=FindingCode.OVERRIDE_NOT_APPLIED,
        message=message,
        component=component,
    )])


def merge(*results: PlanValidation) -> PlanValidation:
    """Concatenate findings, preserving order."""
    errors, warnings = [], []
    for result in results:
        errors.extend(result.errors)
        warnings.extend(result.warnings)
    return PlanValidation(errors=errors, warnings=warnings)
