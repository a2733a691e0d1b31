"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import date

import pytest

from nutrition_diary.config import Settings
from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.meals import DailyNutrition, DayPlan, FoodItem, Meal
from nutrition_diary.services.notifier import Notifier
from nutrition_diary.services.nutrition_store import NutritionGateway, NutritionStore

# 2024-01-15 is a Monday, so the default selected day is LUNES.
TODAY = date(2024, 1, 15)


async def no_sleep(seconds: float) -> None:
    return None


@dataclass
class FakeNutritionGateway(NutritionGateway):
    """In-memory gateway with switchable failures."""

    days: list[str] = field(default_factory=list)
    plans: dict[str, DayPlan | None] = field(default_factory=dict)
    daily: dict[str, DailyNutrition] = field(default_factory=dict)
    days_error: Exception | None = None
    plan_error: Exception | None = None
    daily_error: Exception | None = None
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    days_gate: asyncio.Event | None = None
    day_list_calls: int = 0
    plan_calls: list[str] = field(default_factory=list)
    daily_calls: list[tuple[str, str]] = field(default_factory=list)

    async def get_available_meal_days(self) -> list[str]:
        self.day_list_calls += 1
        if self.days_gate is not None:
            await self.days_gate.wait()
        if self.days_error:
            raise self.days_error
        return list(self.days)

    async def get_meals_by_day(self, day: str) -> DayPlan | None:
        self.plan_calls.append(day)
        gate = self.gates.get(day)
        if gate is not None:
            await gate.wait()
        if self.plan_error:
            raise self.plan_error
        return self.plans.get(day)

    async def get_daily_nutrition(self, user_id: str, on_date: str) -> DailyNutrition:
        self.daily_calls.append((user_id, on_date))
        gate = self.gates.get(on_date)
        if gate is not None:
            await gate.wait()
        if self.daily_error:
            raise self.daily_error
        return self.daily.get(on_date, DailyNutrition(date=on_date))


@dataclass
class RecordingNotifier(Notifier):
    """Notifier that records messages."""

    successes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


def make_meal(  # noqa: PLR0913
    meal_id: str = "1",
    meal_type: str = "breakfast",
    food_name: str = "Huevos revueltos",
    calories: float = 150,
    protein: float = 12,
    carbs: float = 2,
    fat: float = 10,
    fiber: float = 0,
) -> Meal:
    return Meal(
        id=meal_id,
        user_id="user-123",
        date="2024-01-15",
        meal_type=meal_type,
        foods=[
            FoodItem(
                icon="🍳",
                quantity="2 piezas",
                name=food_name,
                calories=calories,
                protein=protein,
                carbs=carbs,
                fat=fat,
                fiber=fiber,
            )
        ],
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        total_fiber=fiber,
    )


def salad_meal() -> Meal:
    return make_meal(
        meal_id="2",
        meal_type="lunch",
        food_name="Ensalada cesar",
        calories=350,
        protein=25,
        carbs=15,
        fat=20,
        fiber=5,
    )


def make_plan(plan_id: int = 1, day: str = "LUNES", **slots: list[str]) -> DayPlan:
    return DayPlan(id=plan_id, day_of_week=day, **slots)


def make_store(
    gateway: FakeNutritionGateway | None = None,
    notifier: RecordingNotifier | None = None,
    **kwargs: object,
) -> NutritionStore:
    kwargs.setdefault("sleep", no_sleep)
    kwargs.setdefault("today", lambda: TODAY)
    return NutritionStore(
        gateway=gateway or FakeNutritionGateway(),
        notifier=notifier or RecordingNotifier(),
        **kwargs,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://api.test")


@pytest.fixture
def gateway() -> FakeNutritionGateway:
    return FakeNutritionGateway()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store(
    gateway: FakeNutritionGateway, notifier: RecordingNotifier
) -> NutritionStore:
    return make_store(gateway, notifier)


@pytest.fixture
def container(
    settings: Settings,
    gateway: FakeNutritionGateway,
    notifier: RecordingNotifier,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gateway=gateway,
        notifier=notifier,
        store_factory=lambda: make_store(gateway, notifier),
        close_resources=close_resources,
    )
