"""
Progression engine: adherence history to plan adjustments.

Consumes :class:`~app.schemas.progression.ProgressionFactors` (computed by
the progress-tracking subsystem) and returns
:class:`~app.schemas.progression.ProgressionAdjustments`.  Pure and total:
every input combination yields adjustments, the neutral ones at worst.

Rules
-----
Exercise
    sets      1 + floor(week / 2) × 0.10   (cap 1.5, completion ≥ 70)
    reps      1 + floor(day / 7) × 0.05    (cap 1.3, completion ≥ 70)
    duration  1.1 after day 14 (≥ 80), 1.2 after day 28 (≥ 85)
    rest      0.9 at completion ≥ 90 with a 7-day streak

Nutrition (by primary goal)
    lose_weight   −100 kcal from week 2 (≥ 75), −200 from week 4 (≥ 80)
    build_muscle  +150 kcal / protein ×1.10 from week 2 (≥ 80),
                  +250 kcal / protein ×1.15 from week 4 (≥ 85)
    portions      ×1.10 build_muscle, ×0.95 otherwise, at average ≥ 85

Fasting
    lose_weight with BMI ≥ 25, compliance ≥ 80, week ≥ 2 → one step stricter
    build_muscle from week 2                              → one step gentler

Difficulty
    completion ≥ 80, streak ≥ 7, week ≥ 4 → suggest exactly one tier above
    the fitness-assessment tier.
    A suggestion only; nothing here changes the user's stored tier.

Each threshold lives in :class:`ProgressionConfig`.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field

from app.regimen.fasting import gentler_pattern, stricter_pattern, window_for
from app.regimen.personalization import PersonalizationConfig, assignment_for
from app.schemas.catalog import Exercise, Meal, NutritionInfo
from app.schemas.profile import (
    DIFFICULTY_ORDER,
    DifficultyLevel,
    FastingPattern,
    FitnessGoal,
    Gender,
    UserAttributes,
)
from app.schemas.progression import ProgressionAdjustments, ProgressionFactors

# ======================================================================
# Configuration
# ======================================================================


class CalorieStep(BaseModel):
    """One rung of a goal's calorie ladder."""

    min_week: int
    min_completion: float
    calorie_adjustment: int
    protein_multiplier: float = 1.0


_DEFAULT_CALORIE_LADDERS: dict[FitnessGoal, list[CalorieStep]] = {
    FitnessGoal.LOSE_WEIGHT: [
        CalorieStep(min_week=2, min_completion=75, calorie_adjustment=-100),
        CalorieStep(min_week=4, min_completion=80, calorie_adjustment=-200),
    ],
    FitnessGoal.BUILD_MUSCLE: [
        CalorieStep(min_week=2, min_completion=80, calorie_adjustment=150, protein_multiplier=1.10),
        CalorieStep(min_week=4, min_completion=85, calorie_adjustment=250, protein_multiplier=1.15),
    ],
}

# (min day exclusive, min completion, multiplier), ascending
_DEFAULT_DURATION_STEPS: list[tuple[int, float, float]] = [
    (14, 80.0, 1.1),
    (28, 85.0, 1.2),
]


class ProgressionConfig(BaseModel):
    """Tunable thresholds for :func:`adjustments_for`."""

    min_completion_for_volume: float = 70.0

    sets_every_weeks: int = 2
    sets_step: float = 0.10
    sets_max_multiplier: float = 1.5

    reps_every_days: int = 7
    reps_step: float = 0.05
    reps_max_multiplier: float = 1.3

    duration_steps: list[tuple[int, float, float]] = Field(
        default_factory=lambda: list(_DEFAULT_DURATION_STEPS),
    )

    rest_min_completion: float = 90.0
    rest_min_streak: int = 7
    rest_multiplier: float = 0.9

    calorie_ladders: dict[FitnessGoal, list[CalorieStep]] = Field(
        default_factory=lambda: {k: list(v) for k, v in _DEFAULT_CALORIE_LADDERS.items()},
    )

    portion_min_average: float = 85.0
    portion_build_muscle: float = 1.10
    portion_default: float = 0.95

    assumed_bmi: float = 25.0
    stricter_fasting_min_bmi: float = 25.0
    stricter_fasting_min_compliance: float = 80.0
    fasting_change_min_week: int = 2

    upgrade_min_completion: float = 80.0
    upgrade_min_streak: int = 7
    upgrade_min_week: int = 4


DEFAULT_PROGRESSION_CONFIG = ProgressionConfig()


# ======================================================================
# Feedback copy
# ======================================================================

# Male users get the terse drill-sergeant register; everyone else the
# supportive one.
DIRECT = "direct"
SUPPORTIVE = "supportive"

_WEEK_MESSAGES: dict[tuple[int, str], str] = {
    (1, DIRECT): "Week 1: Foundation building. Master the basics, soldier.",
    (1, SUPPORTIVE): "Week 1: Building your foundation. You're doing amazing!",
    (2, DIRECT): "Week 2: Intensity increasing. Sets and reps progressing.",
    (2, SUPPORTIVE): "Week 2: Growing stronger! We're adding a little more challenge.",
    (4, DIRECT): "Week 4: Tactical upgrade. You're becoming a machine.",
    (4, SUPPORTIVE): "Week 4: Look how far you've come! Time to level up.",
}

_UPGRADE_MESSAGES: dict[str, str] = {
    DIRECT: "PROMOTION READY: You've earned the right to advance.",
    SUPPORTIVE: "You're ready for the next level! Congratulations!",
}

# (min streak, tone) → template; checked longest streak first
_STREAK_MESSAGES: list[tuple[int, dict[str, str]]] = [
    (7, {
        DIRECT: "{streak}-day streak! Unstoppable discipline.",
        SUPPORTIVE: "{streak} days in a row! You're incredible!",
    }),
    (3, {
        DIRECT: "Momentum building. Keep pushing.",
        SUPPORTIVE: "You're on a roll! Keep it up!",
    }),
]


def tone_for(gender: Optional[Gender]) -> str:
    return DIRECT if gender is Gender.MALE else SUPPORTIVE


def _messages(
    factors: ProgressionFactors, tone: str, upgrade: bool,
) -> tuple[str, str]:
    if upgrade:
        progression = _UPGRADE_MESSAGES[tone]
    else:
        progression = _WEEK_MESSAGES.get((factors.week_number, tone), "")

    encouragement = ""
    for min_streak, templates in _STREAK_MESSAGES:
        if factors.streak_days >= min_streak:
            encouragement = templates[tone].format(streak=factors.streak_days)
            break
    return progression, encouragement


# ======================================================================
# Rule helpers
# ======================================================================


def _sets_multiplier(f: ProgressionFactors, cfg: ProgressionConfig) -> float:
    if f.week_number <= 0 or f.completion_rate < cfg.min_completion_for_volume:
        return 1.0
    steps = f.week_number // cfg.sets_every_weeks
    return min(1.0 + steps * cfg.sets_step, cfg.sets_max_multiplier)


def _reps_multiplier(f: ProgressionFactors, cfg: ProgressionConfig) -> float:
    if f.day_number <= 0 or f.completion_rate < cfg.min_completion_for_volume:
        return 1.0
    steps = f.day_number // cfg.reps_every_days
    return min(1.0 + steps * cfg.reps_step, cfg.reps_max_multiplier)


def _duration_multiplier(f: ProgressionFactors, cfg: ProgressionConfig) -> float:
    multiplier = 1.0
    for min_day, min_completion, value in cfg.duration_steps:
        if f.day_number > min_day and f.completion_rate >= min_completion:
            multiplier = value
    return multiplier


def _rest_multiplier(f: ProgressionFactors, cfg: ProgressionConfig) -> float:
    if f.completion_rate >= cfg.rest_min_completion and f.streak_days >= cfg.rest_min_streak:
        return cfg.rest_multiplier
    return 1.0


def _nutrition(
    goal: FitnessGoal, f: ProgressionFactors, cfg: ProgressionConfig,
) -> tuple[int, float, float]:
    """→ (calorie delta, protein multiplier, portion multiplier)"""
    calories, protein = 0, 1.0
    for step in cfg.calorie_ladders.get(goal, []):
        if f.week_number >= step.min_week and f.completion_rate >= step.min_completion:
            calories, protein = step.calorie_adjustment, step.protein_multiplier

    portion = 1.0
    if f.average_completion_percent >= cfg.portion_min_average:
        portion = (
            cfg.portion_build_muscle if goal is FitnessGoal.BUILD_MUSCLE
            else cfg.portion_default
        )
    return calories, protein, portion


def _fasting(
    user: UserAttributes,
    current: FastingPattern,
    f: ProgressionFactors,
    cfg: ProgressionConfig,
) -> tuple[FastingPattern, int]:
    """→ (recommended pattern, fasting-hours delta vs. current)"""
    bmi = user.bmi if user.bmi is not None else cfg.assumed_bmi
    recommended = current

    if f.week_number >= cfg.fasting_change_min_week:
        if user.primary_goal is FitnessGoal.LOSE_WEIGHT:
            if (
                bmi >= cfg.stricter_fasting_min_bmi
                and f.fasting_compliance >= cfg.stricter_fasting_min_compliance
            ):
                recommended = stricter_pattern(current)
        elif user.primary_goal is FitnessGoal.BUILD_MUSCLE:
            recommended = gentler_pattern(current)

    delta = window_for(recommended).fasting_hours - window_for(current).fasting_hours
    return recommended, delta


def _upgrade(
    current: DifficultyLevel, f: ProgressionFactors, cfg: ProgressionConfig,
) -> tuple[bool, DifficultyLevel]:
    eligible = (
        f.completion_rate >= cfg.upgrade_min_completion
        and f.streak_days >= cfg.upgrade_min_streak
        and f.week_number >= cfg.upgrade_min_week
    )
    idx = DIFFICULTY_ORDER.index(current)
    if eligible and idx < len(DIFFICULTY_ORDER) - 1:
        return True, DIFFICULTY_ORDER[idx + 1]
    return False, current


# ======================================================================
# Main entry point
# ======================================================================


def adjustments_for(
    user: UserAttributes,
    factors: ProgressionFactors,
    config: Optional[ProgressionConfig] = None,
    personalization_config: Optional[PersonalizationConfig] = None,
) -> ProgressionAdjustments:
    """Compute progression adjustments for *user* given *factors*.

    The current fasting pattern is the user's effective assignment (stored
    fields over resolver output, resolved with *personalization_config*).
    Upgrades step from the fitness-assessment tier.
    """
    cfg = config or DEFAULT_PROGRESSION_CONFIG
    assignment = assignment_for(user, personalization_config)

    calories, protein, portion = _nutrition(user.primary_goal, factors, cfg)
    pattern, hours_delta = _fasting(user, assignment.fasting_pattern, factors, cfg)
    upgrade, suggested = _upgrade(user.fitness_level, factors, cfg)
    message, encouragement = _messages(factors, tone_for(user.gender), upgrade)

    adjustments = ProgressionAdjustments(
        sets_multiplier=_sets_multiplier(factors, cfg),
        reps_multiplier=_reps_multiplier(factors, cfg),
        duration_multiplier=_duration_multiplier(factors, cfg),
        rest_multiplier=_rest_multiplier(factors, cfg),
        calorie_adjustment=calories,
        portion_multiplier=portion,
        protein_multiplier=protein,
        recommended_fasting_pattern=pattern,
        fasting_hours_adjustment=hours_delta,
        should_increase_difficulty=upgrade,
        suggested_difficulty=suggested,
        progression_message=message,
        encouragement=encouragement,
    )
    logger.debug(
        "Computed progression adjustments",
        user_id=user.user_id,
        week=factors.week_number,
        sets=adjustments.sets_multiplier,
        reps=adjustments.reps_multiplier,
        calories=adjustments.calorie_adjustment,
        upgrade=upgrade,
    )
    return adjustments


# ======================================================================
# Application
# ======================================================================


def apply_exercise_adjustments(
    exercise: Exercise, adjustments: ProgressionAdjustments,
) -> Exercise:
    """Scale an exercise's prescription.  Free-text reps are left as-is."""
    update: dict = {}
    if exercise.sets is not None:
        update["sets"] = max(1, round(exercise.sets * adjustments.sets_multiplier))
    if isinstance(exercise.reps, int):
        update["reps"] = round(exercise.reps * adjustments.reps_multiplier)
    if exercise.duration_seconds is not None:
        update["duration_seconds"] = round(
            exercise.duration_seconds * adjustments.duration_multiplier
        )
    if exercise.rest_seconds is not None:
        update["rest_seconds"] = round(exercise.rest_seconds * adjustments.rest_multiplier)
    return exercise.model_copy(update=update)


def apply_meal_adjustments(
    meal: Meal, adjustments: ProgressionAdjustments, meal_count: int,
) -> Meal:
    """Spread the daily calorie delta over *meal_count* meals, then scale."""
    n = meal.nutrition
    portion = adjustments.portion_multiplier
    per_meal = adjustments.calorie_adjustment / max(meal_count, 1)

    nutrition = NutritionInfo(
        calories=round(max((n.calories + per_meal) * portion, 0.0)),
        protein=round(n.protein * adjustments.protein_multiplier, 1),
        carbs=round(n.carbs * portion, 1),
        fat=round(n.fat * portion, 1),
        fiber=round(n.fiber * portion, 1) if n.fiber is not None else None,
    )
    return meal.model_copy(update={"nutrition": nutrition})


_DAY_FOCUS = [
    "Push",
    "Pull",
    "Legs",
    "Core & Stability",
    "Push",
    "Pull",
    "Active Recovery",
]


def day_focus(day_number: int) -> str:
    """Training focus for a program day (1-based, seven-day cycle)."""
    return _DAY_FOCUS[(max(day_number, 1) - 1) % len(_DAY_FOCUS)]


__all__ = [
    "CalorieStep",
    "ProgressionConfig",
    "DEFAULT_PROGRESSION_CONFIG",
    "adjustments_for",
    "apply_exercise_adjustments",
    "apply_meal_adjustments",
    "day_focus",
    "tone_for",
]
