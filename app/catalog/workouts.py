"""
Built-in workout templates.

One template per (ISO weekday 1–6, difficulty tier).  Sunday (7) has no
template: it is the program's rest day.

Tiers share a day's core movements and differ by:

- **exercise list**: each tier adds one movement on top of the tier below;
- **prescription**: sets, reps, timed duration and rest scale with tier
  (see :func:`_prescribe`).
"""

from __future__ import annotations

from app.catalog.exercises import get_exercise
from app.schemas.catalog import Exercise, WorkoutTemplate
from app.schemas.profile import DIFFICULTY_ORDER, DifficultyLevel

WORKOUT_CATALOG: dict[str, WorkoutTemplate] = {}


def register_workout(template: WorkoutTemplate) -> None:
    """Register a workout template.

    Raises :class:`ValueError` if the id is already taken.
    """
    if template.template_id in WORKOUT_CATALOG:
        raise ValueError(f"Workout '{template.template_id}' already registered")
    WORKOUT_CATALOG[template.template_id] = template


def get_workout(template_id: str) -> WorkoutTemplate | None:
    return WORKOUT_CATALOG.get(template_id)


# ======================================================================
# Day layouts
# ======================================================================

# day → (name, focus, description, core exercises, intermediate add-on, advanced add-on)
_DAY_LAYOUTS: dict[int, tuple[str, str, str, list[str], str, str]] = {
    1: ("Upper Body Push", "Push",
        "Chest, shoulders and triceps.",
        ["push_ups", "tricep_dips", "plank"], "pike_push_ups", "burpees"),
    2: ("Upper Body Pull", "Pull",
        "Back and biceps with a core finisher.",
        ["superman_hold", "bicep_curls", "bicycle_crunches"], "dumbbell_rows", "mountain_climbers"),
    3: ("Lower Body", "Legs",
        "Quads, hamstrings and glutes.",
        ["squats", "glute_bridge", "lunges"], "jumping_jacks", "jump_squats"),
    4: ("Core & Stability", "Core & Stability",
        "Trunk strength and spinal control.",
        ["plank", "bicycle_crunches", "cat_cow"], "side_plank", "mountain_climbers"),
    5: ("Full Body Conditioning", "Conditioning",
        "Compound movements at a higher tempo.",
        ["jumping_jacks", "squats", "push_ups"], "mountain_climbers", "burpees"),
    6: ("Active Recovery", "Active Recovery",
        "Low-intensity mobility to prepare for the next week.",
        ["cat_cow", "hip_flexor_stretch", "glute_bridge"], "superman_hold", "side_plank"),
}


def _prescribe(exercise: Exercise, tier: DifficultyLevel) -> Exercise:
    """Scale an exercise's default prescription to *tier*."""
    level = DIFFICULTY_ORDER.index(tier)
    if level == 0:
        return exercise

    update: dict = {"sets": (exercise.sets or 3) + 1}
    if isinstance(exercise.reps, int):
        update["reps"] = exercise.reps + (2 if level == 1 else 5)
    if exercise.duration_seconds:
        update["duration_seconds"] = exercise.duration_seconds + 15 * level
    if exercise.rest_seconds is not None and level == 2:
        update["rest_seconds"] = max(exercise.rest_seconds - 15, 15)
    return exercise.model_copy(update=update)


def _build(day: int, tier: DifficultyLevel) -> WorkoutTemplate:
    name, focus, description, core, intermediate, advanced = _DAY_LAYOUTS[day]
    level = DIFFICULTY_ORDER.index(tier)
    ids = core + [intermediate, advanced][:level]

    exercises = [_prescribe(get_exercise(eid), tier) for eid in ids]
    calories = sum(ex.calories or 0 for ex in exercises)
    return WorkoutTemplate(
        template_id=f"wk-{day}-{tier.value}",
        name=name,
        description=description,
        day_of_week=day,
        difficulty=tier,
        exercises=exercises,
        focus=focus,
        estimated_calories=calories,
    )


for _day in _DAY_LAYOUTS:
    for _tier in DIFFICULTY_ORDER:
        register_workout(_build(_day, _tier))
