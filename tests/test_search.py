"""Tests for meal search."""

from nutrition_diary.services.search import filter_meals
from tests.conftest import make_meal, salad_meal


def test_empty_term_returns_all_meals() -> None:
    meals = [make_meal(), salad_meal()]

    assert filter_meals(meals, "") == meals
    assert filter_meals(meals, "   ") == meals


def test_matches_food_name_case_insensitively() -> None:
    meals = [make_meal(), salad_meal()]

    result = filter_meals(meals, "  HUEVOS ")

    assert [meal.id for meal in result] == ["1"]


def test_matches_meal_type() -> None:
    meals = [make_meal(), salad_meal()]

    assert [meal.id for meal in filter_meals(meals, "lunch")] == ["2"]


def test_substring_match_only() -> None:
    meals = [make_meal(food_name="Pan integral")]

    assert filter_meals(meals, "integ") == meals
    assert filter_meals(meals, "pan tostado") == []


def test_filtering_is_idempotent() -> None:
    meals = [make_meal(), salad_meal(), make_meal(meal_id="3", food_name="Avena")]

    once = filter_meals(meals, "a")
    twice = filter_meals(once, "a")

    assert once == twice
