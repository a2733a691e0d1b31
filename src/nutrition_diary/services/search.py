"""Free-text meal search."""

from nutrition_diary.domain.meals import Meal


def normalize_term(term: str) -> str:
    """Return the trimmed, lower-cased form of a search term."""
    return term.strip().lower()


def meal_matches(meal: Meal, term: str) -> bool:
    """Return True if a normalized term matches the meal type or a food name."""
    if term in meal.meal_type.lower():
        return True
    return any(term in food.name.lower() for food in meal.foods)


def filter_meals(meals: list[Meal], term: str) -> list[Meal]:
    """Return meals matching the term; an empty term keeps every meal."""
    normalized = normalize_term(term)
    if not normalized:
        return list(meals)
    return [meal for meal in meals if meal_matches(meal, normalized)]
