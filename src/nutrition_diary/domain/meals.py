"""Domain models for meals and meal plans."""

from dataclasses import dataclass, field
from typing import Literal

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

DEFAULT_CALORIE_GOAL = 2000.0


@dataclass(frozen=True)
class FoodItem:
    """Single food entry inside a meal."""

    icon: str
    quantity: str
    name: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Meal:
    """Flattened diary entry for one meal occasion."""

    id: str
    user_id: str
    date: str
    meal_type: MealType
    foods: list[FoodItem] = field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    total_fiber: float = 0.0


@dataclass(frozen=True)
class DayPlan:
    """Weekday meal plan with optional slots of food names (no macros)."""

    id: int | str
    day_of_week: str
    breakfast: list[str] | None = None
    mid_morning: list[str] | None = None
    lunch: list[str] | None = None
    afternoon_snack: list[str] | None = None
    dinner: list[str] | None = None


@dataclass(frozen=True)
class DailyNutrition:
    """Nutrition log for one calendar date."""

    date: str
    meals: list[Meal] = field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    total_fiber: float = 0.0
    water_intake: float = 0.0
    calorie_goal: float = DEFAULT_CALORIE_GOAL


def empty_daily_nutrition(date: str) -> DailyNutrition:
    """Return a zeroed nutrition log for a date."""
    return DailyNutrition(date=date)
