"""Flattening of weekday meal plans into diary meals."""

from datetime import date

from nutrition_diary.domain.meals import DayPlan, FoodItem, Meal, MealType

PLACEHOLDER_QUANTITY = "1 porción"
FALLBACK_ICON = "🍴"

# Slot order is the order meals appear in during the day.
_SLOT_MEAL_TYPES: tuple[tuple[str, MealType], ...] = (
    ("breakfast", "breakfast"),
    ("mid_morning", "snack"),
    ("lunch", "lunch"),
    ("afternoon_snack", "snack"),
    ("dinner", "dinner"),
)

_MEAL_TYPE_ICONS: dict[str, str] = {
    "breakfast": "🍳",
    "lunch": "🍲",
    "dinner": "🥗",
    "snack": "🍎",
}


def icon_for_meal_type(meal_type: str) -> str:
    """Return the display icon for a meal type."""
    return _MEAL_TYPE_ICONS.get(meal_type, FALLBACK_ICON)


def meals_from_day_plan(
    plan: DayPlan, user_id: str = "", today: date | None = None
) -> list[Meal]:
    """Return one meal per non-empty slot of a day plan.

    Plans carry food names only, so every macro value is zero.
    """
    meal_date = (today or date.today()).isoformat()
    meals: list[Meal] = []
    for slot_key, meal_type in _SLOT_MEAL_TYPES:
        food_names = getattr(plan, slot_key)
        if not food_names:
            continue
        icon = icon_for_meal_type(meal_type)
        meals.append(
            Meal(
                id=f"{plan.id}-{slot_key}",
                user_id=user_id,
                date=meal_date,
                meal_type=meal_type,
                foods=[
                    FoodItem(icon=icon, quantity=PLACEHOLDER_QUANTITY, name=name)
                    for name in food_names
                ],
            )
        )
    return meals
