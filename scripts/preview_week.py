"""What would the week look like for a sample user?

Synthesizes seven plans from next Monday and prints one line per day,
plus the progression adjustments for a user four weeks in.

Usage:
    python scripts/preview_week.py [weight_kg] [sedentary|moderate|active]
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logger import setup_logger
from app.regimen.synthesizer import summarize, synthesize_week
from app.schemas.plan import PlanOptions
from app.schemas.profile import FitnessGoal, Gender, UserAttributes, WorkType
from app.schemas.progression import ProgressionFactors

setup_logger(level="WARNING")

weight = float(sys.argv[1]) if len(sys.argv) > 1 else 82.0
work_type = WorkType(sys.argv[2]) if len(sys.argv) > 2 else WorkType.SEDENTARY

today = datetime.date.today()
monday = today + datetime.timedelta(days=(7 - today.weekday()) % 7 or 7)

user = UserAttributes(
    user_id="preview",
    weight_kg=weight,
    height_cm=178,
    work_type=work_type,
    primary_goal=FitnessGoal.LOSE_WEIGHT,
    gender=Gender.FEMALE,
)
factors = ProgressionFactors(
    day_number=28, week_number=4, completion_rate=86.0, streak_days=9,
    average_completion_percent=88.0, fasting_compliance=90.0,
)

plans = synthesize_week(
    user, monday,
    PlanOptions(
        as_of=datetime.datetime.combine(monday, datetime.time(11, 0)),
        program_start_date=monday - datetime.timedelta(days=21),
        progression=factors,
    ),
)

print(f"\n{'═' * 78}")
print(f"  Week of {monday}  |  {weight:.1f} kg  |  {work_type.value}")
print(f"  Assignment: {plans[0].assignment.model_dump(mode='json')}")
print(f"{'═' * 78}")
for plan in plans:
    s = summarize(plan)
    workout = (
        f"{s.workout_name} ({s.workout_minutes} min)" if s.workout_name else "rest"
    )
    flag = "" if s.is_valid else "  ✗ INVALID"
    print(
        f"  {s.date:%a %d %b}  {workout:<36} "
        f"{s.meal_count} meals  {s.total_calories:>6.0f} kcal  {s.fasting_pattern}{flag}"
    )

adj = plans[0].adjustments
print(f"\n  Progression: sets ×{adj.sets_multiplier:.2f}  reps ×{adj.reps_multiplier:.2f}  "
      f"calories {adj.calorie_adjustment:+d}  fasting → {adj.recommended_fasting_pattern.value}")
print(f"  {adj.progression_message}")
print(f"  {adj.encouragement}\n")
