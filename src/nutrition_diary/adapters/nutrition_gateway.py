"""Meal plan backend client."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date

import httpx
from pydantic import TypeAdapter

from nutrition_diary.adapters.meal_plan_payloads import (
    FeedingRoutinePayload,
    PlanDayPayload,
)
from nutrition_diary.domain.days import week_position, weekday_label
from nutrition_diary.domain.meals import DailyNutrition, DayPlan
from nutrition_diary.services.meal_plans import meals_from_day_plan
from nutrition_diary.services.nutrition_store import NutritionGateway

_ROUTINES_PATH = "/rutinas-alimentacion"
_ROUTINES_ADAPTER = TypeAdapter(list[FeedingRoutinePayload])

_logger = logging.getLogger(__name__)


@dataclass
class HttpxNutritionGateway(NutritionGateway):
    """HTTPX-backed gateway over the feeding routine API."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0
    retry_attempts: int = 2
    retry_delay_seconds: float = 0.3

    @classmethod
    def create(
        cls,
        base_url: str,
        timeout_seconds: float = 15.0,
        retry_attempts: int = 2,
        retry_delay_seconds: float = 0.3,
    ) -> "HttpxNutritionGateway":
        """Create a gateway with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
            retry_attempts=retry_attempts,
            retry_delay_seconds=retry_delay_seconds,
        )

    async def get_available_meal_days(self) -> list[str]:
        """Return distinct plan days ordered Monday to Sunday."""
        routines = await self._list_routines()
        days: list[str] = []
        for routine in routines:
            for plan_day in routine.dias_alimentacion:
                if plan_day.dia_semana not in days:
                    days.append(plan_day.dia_semana)
        return sorted(days, key=week_position)

    async def get_meals_by_day(self, day: str) -> DayPlan | None:
        """Return the first plan found for a weekday."""
        plan_day = _find_day(await self._list_routines(), day)
        if plan_day is None:
            return None
        return plan_day.to_day_plan()

    async def get_daily_nutrition(self, user_id: str, on_date: str) -> DailyNutrition:
        """Build the nutrition log of a date from its weekday plan."""
        target = date.fromisoformat(on_date)
        plan_day = _find_day(await self._list_routines(), weekday_label(target))
        if plan_day is None:
            return DailyNutrition(date=on_date)
        meals = meals_from_day_plan(plan_day.to_day_plan(), user_id, target)
        return DailyNutrition(
            date=on_date,
            meals=meals,
            total_calories=sum(meal.total_calories for meal in meals),
            total_protein=sum(meal.total_protein for meal in meals),
            total_carbs=sum(meal.total_carbs for meal in meals),
            total_fat=sum(meal.total_fat for meal in meals),
            total_fiber=sum(meal.total_fiber for meal in meals),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _list_routines(self) -> list[FeedingRoutinePayload]:
        payload = await self._call_with_retry(
            lambda: self._get_json(_ROUTINES_PATH), action="list_routines"
        )
        return _ROUTINES_ADAPTER.validate_python(payload or [])

    async def _get_json(self, path: str) -> object:
        response = await self.http_client.get(
            f"{self.base_url}{path}", timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[object]], *, action: str
    ) -> object:
        """Call an async function, retrying transport and HTTP errors."""
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                _logger.warning(
                    "Meal plan %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _find_day(
    routines: list[FeedingRoutinePayload], day: str
) -> PlanDayPayload | None:
    for routine in routines:
        for plan_day in routine.dias_alimentacion:
            if plan_day.dia_semana == day:
                return plan_day
    return None


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
