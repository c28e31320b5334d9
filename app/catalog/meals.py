"""
Built-in meal library.

Meals are grouped by :class:`~app.schemas.catalog.MealType`; the built-in
catalog composes one meal of each type per day (see
:meth:`app.catalog.builtin.BuiltinCatalog.meal_plan_for`).
"""

from __future__ import annotations

from app.schemas.catalog import Meal, MealType, NutritionInfo

MEAL_CATALOG: dict[str, Meal] = {}


def register_meal(meal: Meal) -> None:
    """Register a meal in the global library.

    Raises :class:`ValueError` if the id is already taken.
    """
    if meal.meal_id in MEAL_CATALOG:
        raise ValueError(f"Meal '{meal.meal_id}' already registered")
    MEAL_CATALOG[meal.meal_id] = meal


def get_meal(meal_id: str) -> Meal | None:
    return MEAL_CATALOG.get(meal_id)


def meals_of_type(meal_type: MealType) -> list[Meal]:
    """Meals of one type, in registration order."""
    return [m for m in MEAL_CATALOG.values() if m.meal_type is meal_type]


B = MealType.BREAKFAST
L = MealType.LUNCH
D = MealType.DINNER
K = MealType.SNACK


def _n(calories, protein, carbs, fat, fiber=None) -> NutritionInfo:
    return NutritionInfo(calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber)


_MEALS: list[Meal] = [
    # ── Breakfast ────────────────────────────────────────────────
    Meal(meal_id="protein_power_bowl", name="Protein Power Bowl", meal_type=B,
         description="Greek yogurt with berries, almonds and chia.",
         nutrition=_n(460, 25, 40, 22, 8), prep_minutes=5,
         dietary_tags=["vegetarian", "high_protein"]),
    Meal(meal_id="avocado_toast_eggs", name="Avocado Toast with Eggs", meal_type=B,
         description="Whole-grain toast, smashed avocado, poached eggs.",
         nutrition=_n(480, 20, 35, 30, 10), prep_minutes=10, cook_minutes=5,
         dietary_tags=["vegetarian", "high_protein"]),
    Meal(meal_id="overnight_oats", name="Overnight Oats", meal_type=B,
         description="Rolled oats soaked in milk with banana and cinnamon.",
         nutrition=_n(350, 14, 55, 8, 7), prep_minutes=5,
         dietary_tags=["vegetarian"]),

    # ── Lunch ────────────────────────────────────────────────────
    Meal(meal_id="grilled_chicken_salad", name="Grilled Chicken Salad", meal_type=L,
         description="Mixed greens, grilled chicken breast, olive oil dressing.",
         nutrition=_n(383, 40, 15, 18, 4), prep_minutes=10, cook_minutes=15,
         dietary_tags=["high_protein", "low_carb"]),
    Meal(meal_id="quinoa_buddha_bowl", name="Quinoa Buddha Bowl", meal_type=L,
         description="Quinoa, roasted chickpeas, vegetables and tahini.",
         nutrition=_n(575, 18, 65, 26, 14), prep_minutes=15, cook_minutes=30,
         dietary_tags=["vegan", "vegetarian"]),
    Meal(meal_id="lentil_soup", name="Red Lentil Soup", meal_type=L,
         description="Spiced red lentil soup with a wholemeal roll.",
         nutrition=_n(420, 22, 60, 9), prep_minutes=10, cook_minutes=25,
         dietary_tags=["vegan", "dairy_free"]),

    # ── Dinner ───────────────────────────────────────────────────
    Meal(meal_id="salmon_asparagus", name="Salmon with Asparagus", meal_type=D,
         description="Oven-baked salmon fillet with asparagus.",
         nutrition=_n(498, 42, 8, 32, 3), prep_minutes=10, cook_minutes=20,
         dietary_tags=["high_protein", "low_carb", "keto"]),
    Meal(meal_id="turkey_stir_fry", name="Turkey Stir-Fry", meal_type=D,
         description="Lean turkey strips with mixed vegetables and rice.",
         nutrition=_n(410, 38, 35, 12, 6), prep_minutes=10, cook_minutes=15,
         dietary_tags=["high_protein", "dairy_free"]),
    Meal(meal_id="beef_sweet_potato", name="Beef and Sweet Potato", meal_type=D,
         description="Lean sirloin with roasted sweet potato and greens.",
         nutrition=_n(620, 45, 50, 24, 7), prep_minutes=10, cook_minutes=30,
         dietary_tags=["high_protein", "gluten_free"]),

    # ── Snack ────────────────────────────────────────────────────
    Meal(meal_id="protein_smoothie", name="Protein Smoothie", meal_type=K,
         description="Banana and peanut butter protein shake.",
         nutrition=_n(445, 32, 40, 18, 5), prep_minutes=5,
         dietary_tags=["vegetarian", "high_protein"]),
    Meal(meal_id="mixed_nuts_fruit", name="Mixed Nuts & Fruit", meal_type=K,
         description="A handful of nuts with seasonal fruit.",
         nutrition=_n(308, 8, 20, 23, 4), prep_minutes=2,
         dietary_tags=["vegan", "gluten_free"]),
    Meal(meal_id="cottage_cheese_berries", name="Cottage Cheese & Berries", meal_type=K,
         description="Low-fat cottage cheese topped with berries.",
         nutrition=_n(210, 24, 18, 4, 3), prep_minutes=2,
         dietary_tags=["vegetarian", "high_protein"]),
]

for _meal in _MEALS:
    register_meal(_meal)
