"""
Daily plan synthesizer: the engine's single entry point.

Pipeline for one (user, date):

1. **Profile validation**: a non-positive weight is a critical finding;
   synthesis still completes.
2. **Assignment**: resolver output with the user's stored fields on top.
3. **Progression**: when factors are supplied, compute adjustments.  The
   recommended fasting pattern is adopted only on request; a difficulty
   upgrade is reported, never applied.
4. **Admin overrides**: active overrides for this user and date replace
   the fasting pattern, the workout template or individual meals.
5. **Workout**: Sunday (or ``force_rest_day``) is a rest day.  Otherwise
   look up the template, scale it by the adjustments and enrich it.
6. **Meals**: look up the day's meal plan (rest days included), apply
   overrides and adjustments, schedule against the eating window.
7. **Fasting status**: the eating window's phase at ``as_of``.

Findings from every step are merged into ``plan.validation``.  Content
problems never raise.
"""

from __future__ import annotations

import datetime
from typing import Optional

from loguru import logger

from app.catalog import ContentCatalog, default_catalog
from app.regimen import validation
from app.regimen.enrichment import (
    EnrichmentConfig,
    enrich_workout,
    schedule_meals,
    total_nutrition,
)
from app.regimen.fasting import next_meal_time, status_at, window_for
from app.regimen.personalization import PersonalizationConfig, assignment_for
from app.regimen.progression import (
    ProgressionConfig,
    adjustments_for,
    apply_exercise_adjustments,
    apply_meal_adjustments,
)
from app.schemas.admin_override import AdminOverride, OverrideComponent
from app.schemas.catalog import Meal, MealPlanTemplate, MealType, WorkoutTemplate
from app.schemas.plan import (
    DailyFastingStatus,
    DailyMeals,
    EnrichedDailyPlan,
    PlanComponent,
    PlanOptions,
    PlanSummary,
    PlanValidation,
)
from app.schemas.profile import FastingPattern, UserAttributes
from app.schemas.progression import ProgressionAdjustments

REST_DAY = 7  # ISO Sunday


# ======================================================================
# Admin overrides
# ======================================================================


def _active_overrides(
    overrides: list[AdminOverride], user_id: str, date: datetime.date,
) -> list[AdminOverride]:
    return [
        o for o in overrides
        if o.is_active and o.user_id == user_id and o.plan_date == date
    ]


def _fasting_override(
    pattern: FastingPattern, overrides: list[AdminOverride],
) -> tuple[FastingPattern, list[PlanValidation]]:
    findings = []
    for o in overrides:
        if o.component is not OverrideComponent.FASTING:
            continue
        try:
            pattern = FastingPattern(o.new_value)
        except ValueError:
            findings.append(validation.override_not_applied(
                PlanComponent.FASTING,
                f"Override {o.id}: unknown fasting pattern {o.new_value!r}",
            ))
    return pattern, findings


def _workout_override(
    overrides: list[AdminOverride], catalog: ContentCatalog,
) -> tuple[Optional[WorkoutTemplate], list[PlanValidation]]:
    template, findings = None, []
    for o in overrides:
        if o.component is not OverrideComponent.WORKOUT:
            continue
        found = catalog.get_workout(str(o.new_value))
        if found is None:
            findings.append(validation.override_not_applied(
                PlanComponent.WORKOUT,
                f"Override {o.id}: unknown workout {o.new_value!r}",
            ))
        else:
            template = found
    return template, findings


def _meal_overrides(
    template: Optional[MealPlanTemplate],
    overrides: list[AdminOverride],
    catalog: ContentCatalog,
) -> tuple[Optional[MealPlanTemplate], list[PlanValidation]]:
    findings = []
    for o in overrides:
        if o.component is not OverrideComponent.MEAL:
            continue
        if template is None:
            findings.append(validation.override_not_applied(
                PlanComponent.MEAL, f"Override {o.id}: no meal plan for this day",
            ))
            continue

        value = o.new_value if isinstance(o.new_value, dict) else {}
        meal = catalog.get_meal(str(value.get("meal_id")))
        try:
            meal_type = MealType(value.get("meal_type"))
        except ValueError:
            meal_type = None
        if meal is None or meal_type is None or meal.meal_type is not meal_type:
            findings.append(validation.override_not_applied(
                PlanComponent.MEAL,
                f"Override {o.id}: cannot swap in meal {o.new_value!r}",
            ))
            continue

        meals = [m for m in template.meals if m.meal_type is not meal_type]
        meals.append(meal)
        template = template.model_copy(update={"meals": meals})
    return template, findings


# ======================================================================
# Components
# ======================================================================


def _adjusted_workout(
    template: WorkoutTemplate, adjustments: Optional[ProgressionAdjustments],
) -> WorkoutTemplate:
    if adjustments is None:
        return template
    return template.model_copy(update={
        "exercises": [apply_exercise_adjustments(ex, adjustments) for ex in template.exercises],
    })


def _adjusted_meals(
    meals: list[Meal], adjustments: Optional[ProgressionAdjustments],
) -> list[Meal]:
    if adjustments is None:
        return meals
    return [apply_meal_adjustments(m, adjustments, len(meals)) for m in meals]


def _day_number(date: datetime.date, start: Optional[datetime.date]) -> int:
    if start is None:
        return date.isoweekday()
    return max((date - start).days + 1, 1)


def _log_findings(plan_id: str, result: PlanValidation) -> None:
    for error in result.errors:
        logger.info(
            "Plan error",
            plan_id=plan_id,
            code=error.code.value,
            component=error.component.value,
            severity=error.severity.value,
        )
    for warning in result.warnings:
        logger.info(
            "Plan warning",
            plan_id=plan_id,
            code=warning.code.value,
            component=warning.component.value,
        )


# ======================================================================
# Main entry point
# ======================================================================


def synthesize(
    user: UserAttributes,
    date: datetime.date,
    options: Optional[PlanOptions] = None,
    catalog: Optional[ContentCatalog] = None,
    personalization_config: Optional[PersonalizationConfig] = None,
    progression_config: Optional[ProgressionConfig] = None,
    enrichment_config: Optional[EnrichmentConfig] = None,
) -> EnrichedDailyPlan:
    """Build the enriched plan for *user* on *date*.

    Deterministic given ``options.as_of``; otherwise the clock is read once.
    """
    opts = options or PlanOptions()
    cat = catalog or default_catalog
    instant = opts.as_of or datetime.datetime.now()
    plan_id = f"plan-{user.user_id}-{date.isoformat()}"

    day_of_week = date.isoweekday()
    is_rest_day = (
        opts.force_rest_day if opts.force_rest_day is not None
        else day_of_week == REST_DAY
    )
    findings: list[PlanValidation] = [validation.validate_profile(user)]

    assignment = assignment_for(user, personalization_config)
    adjustments = (
        adjustments_for(user, opts.progression, progression_config, personalization_config)
        if opts.progression is not None else None
    )
    overrides = _active_overrides(opts.admin_overrides, user.user_id, date)

    # Fasting pattern
    pattern = assignment.fasting_pattern
    if adjustments is not None and opts.apply_fasting_recommendation:
        pattern = adjustments.recommended_fasting_pattern
    pattern, fasting_findings = _fasting_override(pattern, overrides)
    findings.extend(fasting_findings)
    window = window_for(pattern)

    # Workout
    workout = None
    if not opts.skip_workout:
        template, workout_findings = _workout_override(overrides, cat)
        findings.extend(workout_findings)
        if template is not None:
            is_rest_day = False
        elif not is_rest_day:
            template = cat.workout_for(day_of_week, assignment.workout_difficulty)
        findings.append(validation.validate_workout(template, is_rest_day))
        if template is not None:
            workout = enrich_workout(_adjusted_workout(template, adjustments), enrichment_config)

    # Meals
    meals = DailyMeals()
    if not opts.skip_meals:
        meal_template = cat.meal_plan_for(day_of_week, assignment.meal_intensity)
        meal_template, meal_findings = _meal_overrides(meal_template, overrides, cat)
        findings.extend(meal_findings)

        day_meals = _adjusted_meals(meal_template.meals, adjustments) if meal_template else []
        scheduled = schedule_meals(day_meals, window, enrichment_config)
        findings.append(validation.validate_meal_plan(meal_template, scheduled))
        meals = DailyMeals(
            template_id=meal_template.template_id if meal_template else None,
            scheduled=scheduled,
            total_nutrition=total_nutrition(day_meals),
        )

    # Fasting status
    status = status_at(window, instant)
    fasting = DailyFastingStatus(
        window=window,
        current_phase=status.phase,
        phase_start_time=status.phase_start_time,
        phase_end_time=status.phase_end_time,
        minutes_remaining=status.minutes_remaining,
        percent_complete=status.percent_complete,
        next_meal_time=next_meal_time(
            [s.scheduled_time for s in meals.scheduled], window, instant,
        ),
    )

    result = validation.merge(*findings)
    _log_findings(plan_id, result)

    plan = EnrichedDailyPlan(
        id=plan_id,
        user_id=user.user_id,
        date=date,
        day_of_week=day_of_week,
        day_number=_day_number(date, opts.program_start_date),
        assignment=assignment,
        workout=workout,
        meals=meals,
        fasting=fasting,
        is_rest_day=is_rest_day,
        validation=result,
        adjustments=adjustments,
        admin_overrides=overrides,
        generated_at=instant,
    )
    logger.debug(
        "Synthesized plan",
        plan_id=plan_id,
        rest_day=is_rest_day,
        fasting_pattern=pattern.value,
        meals=len(meals.scheduled),
        is_valid=result.is_valid,
    )
    return plan


def synthesize_week(
    user: UserAttributes,
    start: datetime.date,
    options: Optional[PlanOptions] = None,
    catalog: Optional[ContentCatalog] = None,
    **configs,
) -> list[EnrichedDailyPlan]:
    """Seven consecutive plans from *start*, sharing one ``as_of`` instant."""
    opts = options or PlanOptions()
    if opts.as_of is None:
        opts = opts.model_copy(update={"as_of": datetime.datetime.now()})
    return [
        synthesize(user, start + datetime.timedelta(days=offset), opts, catalog, **configs)
        for offset in range(7)
    ]


# ======================================================================
# Helpers for callers
# ======================================================================


def summarize(plan: EnrichedDailyPlan) -> PlanSummary:
    return PlanSummary(
        date=plan.date,
        is_rest_day=plan.is_rest_day,
        workout_name=plan.workout.name if plan.workout else None,
        workout_minutes=(
            plan.workout.completion_estimate.total_minutes if plan.workout else None
        ),
        meal_count=len(plan.meals.scheduled),
        total_calories=plan.meals.total_nutrition.calories,
        fasting_pattern=plan.fasting.window.pattern.value,
        is_valid=plan.validation.is_valid,
        has_errors=bool(plan.validation.errors),
        has_warnings=bool(plan.validation.warnings),
    )


def needs_regeneration(
    plan: EnrichedDailyPlan,
    user: UserAttributes,
    config: Optional[PersonalizationConfig] = None,
) -> bool:
    """True when *user*'s current assignment differs from the plan's."""
    return assignment_for(user, config) != plan.assignment
