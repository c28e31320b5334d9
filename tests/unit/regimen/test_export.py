"""Tests for the plan export projection."""

import datetime

from app.regimen.export import format_date, format_for_export
from app.regimen.synthesizer import synthesize
from app.schemas.catalog import MealType
from app.schemas.plan import PlanOptions
from app.schemas.profile import UserAttributes, WorkType
from app.schemas.progression import ProgressionFactors

MONDAY = datetime.date(2026, 10, 19)
SUNDAY = datetime.date(2026, 10, 25)
AT_11 = datetime.datetime(2026, 10, 19, 11, 0)
GENERATED = datetime.datetime(2026, 10, 19, 11, 5)


def _make_plan(date=MONDAY, **options):
    user = UserAttributes(user_id="u1", weight_kg=70.0, work_type=WorkType.SEDENTARY)
    return synthesize(user, date, PlanOptions(as_of=AT_11, **options))


class TestFormatDate:

    def test_long_form(self):
        assert format_date(MONDAY) == "Monday, October 19, 2026"

    def test_no_zero_padding(self):
        assert format_date(datetime.date(2026, 1, 5)) == "Monday, January 5, 2026"


class TestFormatForExport:

    def test_header(self):
        export = format_for_export(_make_plan(), "Regimen", GENERATED)
        assert export.title == "Regimen Daily Plan"
        assert export.subtitle == "Day 1"
        assert export.date == "Monday, October 19, 2026"
        assert export.app_name == "Regimen"
        assert export.generated_at == GENERATED

    def test_fasting_section(self):
        export = format_for_export(_make_plan(), "Regimen", GENERATED)
        assert export.fasting.pattern == "16:8"
        assert export.fasting.window == "12:00 - 20:00"
        assert (export.fasting.fasting_hours, export.fasting.eating_hours) == (16, 8)

    def test_workout_section_mirrors_plan(self):
        plan = _make_plan()
        export = format_for_export(plan, "Regimen", GENERATED)
        assert export.workout.name == "Upper Body Push"
        assert export.workout.duration_minutes == plan.workout.completion_estimate.total_minutes
        assert [e.name for e in export.workout.exercises] == [
            e.exercise.name for e in plan.workout.exercises
        ]
        assert export.workout.exercises[0].reps == "10-15"

    def test_meal_section_in_schedule_order(self):
        export = format_for_export(_make_plan(), "Regimen", GENERATED)
        assert [m.meal_type for m in export.meals.items] == [
            MealType.BREAKFAST, MealType.LUNCH, MealType.SNACK, MealType.DINNER,
        ]
        assert export.meals.items[0].scheduled_time == "12:00"
        assert export.meals.total_nutrition.calories == 1686

    def test_rest_day(self):
        export = format_for_export(_make_plan(SUNDAY), "Regimen", GENERATED)
        assert export.subtitle == "Rest Day"
        assert export.workout is None
        assert len(export.meals.items) == 4

    def test_clean_plan_has_no_notices(self):
        assert format_for_export(_make_plan(), "Regimen", GENERATED).notices == []

    def test_notices_collect_findings_and_copy(self):
        factors = ProgressionFactors(week_number=1, streak_days=3)
        plan = _make_plan(SUNDAY, force_rest_day=False, progression=factors)
        notices = format_for_export(plan, "Regimen", GENERATED).notices
        assert notices == [
            "No workout found for this day",
            "Week 1: Building your foundation. You're doing amazing!",
            "You're on a roll! Keep it up!",
        ]

    def test_generated_at_defaults_to_now(self):
        before = datetime.datetime.now()
        export = format_for_export(_make_plan(), "Regimen")
        assert export.generated_at >= before
