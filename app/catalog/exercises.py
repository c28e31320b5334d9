"""
Built-in exercise library.

Each entry is an :class:`~app.schemas.catalog.Exercise` carrying its
*default* prescription (sets, reps or timed duration, rest, calories).
Workout templates copy these and override the prescription per
difficulty tier.

To add a new exercise, call :func:`register_exercise` at import time.
"""

from __future__ import annotations

from app.schemas.catalog import Exercise, ExerciseType
from app.schemas.profile import DifficultyLevel

# ======================================================================
# Catalog storage
# ======================================================================

EXERCISE_CATALOG: dict[str, Exercise] = {}


def register_exercise(exercise: Exercise) -> None:
    """Register an exercise in the global library.

    Raises :class:`ValueError` if the id is already taken.
    """
    if exercise.exercise_id in EXERCISE_CATALOG:
        raise ValueError(f"Exercise '{exercise.exercise_id}' already registered")
    EXERCISE_CATALOG[exercise.exercise_id] = exercise


def get_exercise(exercise_id: str) -> Exercise | None:
    """Look up an exercise by its id.  Returns ``None`` if not found."""
    return EXERCISE_CATALOG.get(exercise_id)


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
S = ExerciseType.STRENGTH
H = ExerciseType.HIIT
C = ExerciseType.CARDIO
F = ExerciseType.FLEXIBILITY
BEG = DifficultyLevel.BEGINNER
INT = DifficultyLevel.INTERMEDIATE
ADV = DifficultyLevel.ADVANCED

_VIDEO_BASE = "https://media.example.com/exercises"

# ======================================================================
# Built-in exercises
# ======================================================================

_EXERCISES: list[Exercise] = [
    # ── Push ──────────────────────────────────────────────────────
    Exercise(
        exercise_id="push_ups", name="Push-Ups",
        description="Bodyweight press for chest, shoulders and triceps.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["chest", "shoulders", "triceps"],
        sets=3, reps="10-15", rest_seconds=60, calories=50,
        video_url=f"{_VIDEO_BASE}/push-ups.mp4",
    ),
    Exercise(
        exercise_id="pike_push_ups", name="Pike Push-Ups",
        description="Hips-high push-up that shifts load to the shoulders.",
        exercise_type=S, difficulty=INT,
        muscle_groups=["shoulders", "triceps"],
        sets=3, reps=10, rest_seconds=60, calories=45,
        video_url=f"{_VIDEO_BASE}/pike-push-ups.mp4",
    ),
    Exercise(
        exercise_id="tricep_dips", name="Bench Tricep Dips",
        description="Dips off a bench or chair edge.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["triceps", "chest"],
        sets=3, reps=12, rest_seconds=45, calories=35,
        video_url=f"{_VIDEO_BASE}/tricep-dips.mp4",
    ),

    # ── Pull ──────────────────────────────────────────────────────
    Exercise(
        exercise_id="dumbbell_rows", name="Dumbbell Rows",
        description="Single-arm row supported on a bench.",
        exercise_type=S, difficulty=INT,
        muscle_groups=["back", "biceps"],
        sets=3, reps=12, rest_seconds=60, calories=45,
        video_url=f"{_VIDEO_BASE}/dumbbell-rows.mp4",
    ),
    Exercise(
        exercise_id="superman_hold", name="Superman Hold",
        description="Prone hold lifting arms and legs off the floor.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["back", "glutes"],
        sets=3, duration_seconds=30, rest_seconds=30, calories=20,
        video_url=f"{_VIDEO_BASE}/superman-hold.mp4",
    ),
    Exercise(
        exercise_id="bicep_curls", name="Dumbbell Bicep Curls",
        description="Standing alternating curls.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["biceps"],
        sets=3, reps=12, rest_seconds=45, calories=30,
        video_url=f"{_VIDEO_BASE}/bicep-curls.mp4",
    ),

    # ── Legs ──────────────────────────────────────────────────────
    Exercise(
        exercise_id="squats", name="Squats",
        description="Fundamental lower-body pattern for legs and glutes.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["legs", "glutes"],
        sets=3, reps=15, rest_seconds=60, calories=60,
        video_url=f"{_VIDEO_BASE}/squats.mp4",
    ),
    Exercise(
        exercise_id="lunges", name="Lunges",
        description="Alternating forward lunges.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["legs", "glutes"],
        sets=3, reps="12 each leg", rest_seconds=60, calories=55,
        video_url=f"{_VIDEO_BASE}/lunges.mp4",
    ),
    Exercise(
        exercise_id="glute_bridge", name="Glute Bridge",
        description="Supine hip extension.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["glutes", "legs"],
        sets=3, reps=15, rest_seconds=45, calories=35,
        video_url=f"{_VIDEO_BASE}/glute-bridge.mp4",
    ),
    Exercise(
        exercise_id="jump_squats", name="Jump Squats",
        description="Explosive squat with a vertical jump.",
        exercise_type=H, difficulty=ADV,
        muscle_groups=["legs", "glutes", "cardio"],
        sets=3, reps=12, rest_seconds=60, calories=90,
        video_url=f"{_VIDEO_BASE}/jump-squats.mp4",
    ),

    # ── Core ──────────────────────────────────────────────────────
    Exercise(
        exercise_id="plank", name="Plank",
        description="Forearm plank holding a straight line head to heels.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["core"],
        sets=3, duration_seconds=30, rest_seconds=45, calories=25,
        video_url=f"{_VIDEO_BASE}/plank.mp4",
    ),
    Exercise(
        exercise_id="bicycle_crunches", name="Bicycle Crunches",
        description="Alternating elbow-to-knee crunch.",
        exercise_type=S, difficulty=BEG,
        muscle_groups=["core"],
        sets=3, reps=20, rest_seconds=45, calories=35,
        video_url=f"{_VIDEO_BASE}/bicycle-crunches.mp4",
    ),
    Exercise(
        exercise_id="side_plank", name="Side Plank",
        description="Lateral plank on one forearm, each side.",
        exercise_type=S, difficulty=INT,
        muscle_groups=["core"],
        sets=2, duration_seconds=30, rest_seconds=30, calories=20,
        video_url=f"{_VIDEO_BASE}/side-plank.mp4",
    ),

    # ── Conditioning ──────────────────────────────────────────────
    Exercise(
        exercise_id="jumping_jacks", name="Jumping Jacks",
        description="Full-body warm-up and conditioning drill.",
        exercise_type=C, difficulty=BEG,
        muscle_groups=["full_body", "cardio"],
        sets=3, duration_seconds=45, rest_seconds=30, calories=40,
        video_url=f"{_VIDEO_BASE}/jumping-jacks.mp4",
    ),
    Exercise(
        exercise_id="mountain_climbers", name="Mountain Climbers",
        description="Fast alternating knee drive from a high plank.",
        exercise_type=H, difficulty=INT,
        muscle_groups=["core", "cardio"],
        sets=3, duration_seconds=30, rest_seconds=30, calories=80,
        video_url=f"{_VIDEO_BASE}/mountain-climbers.mp4",
    ),
    Exercise(
        exercise_id="burpees", name="Burpees",
        description="Squat thrust with push-up and jump.",
        exercise_type=H, difficulty=ADV,
        muscle_groups=["full_body", "cardio"],
        sets=3, reps=10, rest_seconds=60, calories=100,
        video_url=f"{_VIDEO_BASE}/burpees.mp4",
    ),

    # ── Mobility ──────────────────────────────────────────────────
    Exercise(
        exercise_id="hip_flexor_stretch", name="Hip Flexor Stretch",
        description="Half-kneeling hip flexor stretch, each side.",
        exercise_type=F, difficulty=BEG,
        muscle_groups=["legs"],
        sets=2, duration_seconds=45, rest_seconds=15, calories=10,
        video_url=f"{_VIDEO_BASE}/hip-flexor-stretch.mp4",
    ),
    Exercise(
        exercise_id="cat_cow", name="Cat-Cow",
        description="Spinal flexion/extension flow on all fours.",
        exercise_type=F, difficulty=BEG,
        muscle_groups=["back", "core"],
        sets=2, duration_seconds=60, rest_seconds=15, calories=10,
        video_url=f"{_VIDEO_BASE}/cat-cow.mp4",
    ),
]

# Auto-register all built-in exercises
for _ex in _EXERCISES:
    register_exercise(_ex)
