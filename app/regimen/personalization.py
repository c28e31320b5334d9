"""
Personalization rule resolver: attributes to plan keys.

The resolver maps a user's body weight and work type to the three
assignments that drive plan synthesis:

    fasting pattern     ← (work type, weight ≥ threshold[work type])
    workout difficulty  ← work type
    meal intensity      ← work type

Only the fasting pattern depends on weight.  Each work type carries its
own weight threshold, so "higher weight" means something different for a
desk worker and for a manual labourer.

The mapping is total over its enum domain and has no error path.  Weight
positivity is a profile-validation concern (see
:mod:`app.regimen.validation`); a non-positive weight simply falls into
the "lower" branch here.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field

from app.schemas.profile import (
    DifficultyLevel,
    FastingPattern,
    MealIntensity,
    PersonalizationAssignment,
    UserAttributes,
    WorkType,
)

# ======================================================================
# Rule tables
# ======================================================================

# Weight thresholds (kg).  At or above → "higher" branch.
_DEFAULT_WEIGHT_THRESHOLDS: dict[WorkType, float] = {
    WorkType.SEDENTARY: 80.0,
    WorkType.MODERATE: 85.0,
    WorkType.ACTIVE: 90.0,
}

# (work type) → {"higher": pattern, "lower": pattern}
_DEFAULT_FASTING_RULES: dict[WorkType, dict[str, FastingPattern]] = {
    WorkType.SEDENTARY: {"higher": FastingPattern.P14_10, "lower": FastingPattern.P16_8},
    WorkType.MODERATE: {"higher": FastingPattern.P14_10, "lower": FastingPattern.P16_8},
    WorkType.ACTIVE: {"higher": FastingPattern.P12_12, "lower": FastingPattern.P12_12},
}

_DEFAULT_DIFFICULTY_RULES: dict[WorkType, DifficultyLevel] = {
    WorkType.SEDENTARY: DifficultyLevel.BEGINNER,
    WorkType.MODERATE: DifficultyLevel.INTERMEDIATE,
    WorkType.ACTIVE: DifficultyLevel.ADVANCED,
}

_DEFAULT_INTENSITY_RULES: dict[WorkType, MealIntensity] = {
    WorkType.SEDENTARY: MealIntensity.LIGHT,
    WorkType.MODERATE: MealIntensity.STANDARD,
    WorkType.ACTIVE: MealIntensity.HIGH_ENERGY,
}


class PersonalizationConfig(BaseModel):
    """Rule tables for the resolver.  Inject a custom one to re-tune."""

    weight_thresholds: dict[WorkType, float] = Field(
        default_factory=lambda: dict(_DEFAULT_WEIGHT_THRESHOLDS),
    )
    fasting_rules: dict[WorkType, dict[str, FastingPattern]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in _DEFAULT_FASTING_RULES.items()},
    )
    difficulty_rules: dict[WorkType, DifficultyLevel] = Field(
        default_factory=lambda: dict(_DEFAULT_DIFFICULTY_RULES),
    )
    intensity_rules: dict[WorkType, MealIntensity] = Field(
        default_factory=lambda: dict(_DEFAULT_INTENSITY_RULES),
    )


DEFAULT_PERSONALIZATION_CONFIG = PersonalizationConfig()


# ======================================================================
# Resolution
# ======================================================================


def weight_category(
    weight: float,
    work_type: WorkType,
    config: Optional[PersonalizationConfig] = None,
) -> str:
    """Return ``'higher'`` or ``'lower'`` relative to the work-type threshold."""
    cfg = config or DEFAULT_PERSONALIZATION_CONFIG
    return "higher" if weight >= cfg.weight_thresholds[work_type] else "lower"


def resolve(
    weight: float,
    work_type: WorkType,
    config: Optional[PersonalizationConfig] = None,
) -> PersonalizationAssignment:
    """Map ``(weight, work_type)`` to a :class:`PersonalizationAssignment`.

    Deterministic: identical inputs always produce identical assignments.
    """
    cfg = config or DEFAULT_PERSONALIZATION_CONFIG
    category = weight_category(weight, work_type, cfg)

    assignment = PersonalizationAssignment(
        fasting_pattern=cfg.fasting_rules[work_type][category],
        workout_difficulty=cfg.difficulty_rules[work_type],
        meal_intensity=cfg.intensity_rules[work_type],
    )
    logger.debug(
        "Resolved personalization",
        work_type=work_type.value,
        weight_category=category,
        fasting_pattern=assignment.fasting_pattern.value,
    )
    return assignment


def assignment_for(
    user: UserAttributes,
    config: Optional[PersonalizationConfig] = None,
) -> PersonalizationAssignment:
    """Resolved assignment with the user's stored fields layered on top."""
    resolved = resolve(user.weight_kg, user.work_type, config)
    return PersonalizationAssignment(
        fasting_pattern=user.fasting_pattern or resolved.fasting_pattern,
        workout_difficulty=user.workout_difficulty or resolved.workout_difficulty,
        meal_intensity=user.meal_intensity or resolved.meal_intensity,
    )
