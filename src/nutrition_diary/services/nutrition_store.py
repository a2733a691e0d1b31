"""Nutrition diary store.

The store owns all diary state for one user session. It loads meals either
from the weekday meal plan or from the calendar-date nutrition log, and
serves them through search, offset pagination or incremental loading.
Gateway failures are converted into store state and never reach callers.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from datetime import date
from typing import Literal, Protocol

from nutrition_diary.domain.days import format_day_name, weekday_label
from nutrition_diary.domain.diary import CalendarLogView, DiaryView, WeekdayPlanView
from nutrition_diary.domain.meals import (
    DailyNutrition,
    DayPlan,
    Meal,
    empty_daily_nutrition,
)
from nutrition_diary.services import pagination
from nutrition_diary.services.incremental import IncrementalLoader
from nutrition_diary.services.meal_plans import meals_from_day_plan
from nutrition_diary.services.navigation import (
    WeekdayCursor,
    next_date,
    previous_date,
)
from nutrition_diary.services.notifier import Notifier
from nutrition_diary.services.search import filter_meals

ViewMode = Literal["pagination", "infinite"]
VIEW_MODES: tuple[ViewMode, ...] = ("pagination", "infinite")

PLAN_LOAD_ERROR = "Error al cargar las comidas"
DAILY_LOAD_ERROR = "Error al cargar los datos de nutricion"
MEAL_ADDED = "Comida agregada"
MEAL_REMOVED = "Comida eliminada"
MEAL_NOT_FOUND = "Comida no encontrada"

_logger = logging.getLogger(__name__)


class NutritionGateway(Protocol):
    """Data access for meal plans and nutrition logs."""

    async def get_available_meal_days(self) -> list[str]:
        """Return the weekday labels that have a plan, in display order."""

    async def get_meals_by_day(self, day: str) -> DayPlan | None:
        """Return the plan for a weekday, if any."""

    async def get_daily_nutrition(self, user_id: str, on_date: str) -> DailyNutrition:
        """Return the nutrition log of a calendar date."""


@dataclass
class NutritionStore:
    """State container for the nutrition diary of one session."""

    gateway: NutritionGateway
    notifier: Notifier
    page_size: int = pagination.DEFAULT_PAGE_SIZE
    load_more_delay_seconds: float = 0.3
    discard_stale_responses: bool = False
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    today: Callable[[], date] = date.today

    def __post_init__(self) -> None:
        today = self.today()
        self._view: DiaryView = WeekdayPlanView()
        self._loading = False
        self._error: str | None = None
        self._search_term = ""
        self._current_page = 1
        self._current_date = today.isoformat()
        self._days = WeekdayCursor(selected_day=weekday_label(today))
        self._has_meal_plan = False
        self._view_mode: ViewMode = "pagination"
        self._loader: IncrementalLoader[Meal] = IncrementalLoader(
            page_size=self.page_size,
            delay_seconds=self.load_more_delay_seconds,
            sleep=self.sleep,
        )
        self._user_id = ""
        self._request_seq = 0

    # State

    @property
    def meals(self) -> list[Meal]:
        return list(self._view.meals)

    @property
    def daily_nutrition(self) -> DailyNutrition | None:
        if isinstance(self._view, CalendarLogView):
            return self._view.nutrition
        return None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def current_date(self) -> str:
        return self._current_date

    @property
    def selected_day(self) -> str:
        return self._days.selected_day

    @property
    def available_days(self) -> list[str]:
        return list(self._days.available_days)

    @property
    def has_meal_plan(self) -> bool:
        return self._has_meal_plan

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def has_more(self) -> bool:
        return self._loader.has_more

    @property
    def is_loading_more(self) -> bool:
        return self._loader.is_loading_more

    # Derived values

    @property
    def meal_count(self) -> int:
        return len(self._view.meals)

    @property
    def total_calories(self) -> float:
        return sum(meal.total_calories for meal in self._view.meals)

    @property
    def total_protein(self) -> float:
        return sum(meal.total_protein for meal in self._view.meals)

    @property
    def total_carbs(self) -> float:
        return sum(meal.total_carbs for meal in self._view.meals)

    @property
    def total_fat(self) -> float:
        return sum(meal.total_fat for meal in self._view.meals)

    @property
    def total_fiber(self) -> float:
        return sum(meal.total_fiber for meal in self._view.meals)

    @property
    def filtered_meals(self) -> list[Meal]:
        return filter_meals(self._view.meals, self._search_term)

    @property
    def total_pages(self) -> int:
        return pagination.total_pages(len(self.filtered_meals), self.page_size)

    @property
    def paginated_meals(self) -> list[Meal]:
        return pagination.page_slice(
            self.filtered_meals, self._current_page, self.page_size
        )

    @property
    def has_results(self) -> bool:
        return bool(self.filtered_meals)

    @property
    def is_empty(self) -> bool:
        return not self._view.meals and not self._loading and not self._error

    @property
    def has_meals_today(self) -> bool:
        return bool(self._view.meals)

    @property
    def infinite_scroll_items(self) -> list[Meal]:
        """Accumulated items, filtered by the current search term on read."""
        return filter_meals(self._loader.accumulated, self._search_term)

    @property
    def can_go_previous_day(self) -> bool:
        return self._days.can_go_previous

    @property
    def can_go_next_day(self) -> bool:
        return self._days.can_go_next

    @property
    def formatted_day_name(self) -> str:
        if not self._days.selected_day:
            return ""
        return format_day_name(self._days.selected_day)

    # Weekday plan loading

    async def load(self, user_id: str) -> None:
        """Load the plan days and the meals of the selected day."""
        self._user_id = user_id
        token = self._issue_token()
        self._loading = True
        self._error = None
        try:
            days = await self.gateway.get_available_meal_days()
        except asyncio.CancelledError:
            self._loading = False
            raise
        except Exception:
            _logger.warning(
                "Meal plan days unavailable for user %s", user_id, exc_info=True
            )
            days = []

        # The day list is applied even when a newer load owns the meal view.
        self._days.set_available_days(days)
        self._has_meal_plan = bool(days)
        if self._is_stale(token):
            return
        if not days:
            self._view = WeekdayPlanView()
            self._loading = False
            await self._after_reload()
            return
        await self._load_day(self._days.selected_day)

    async def refresh(self, user_id: str) -> None:
        """Reload the weekday plan."""
        await self.load(user_id)

    async def select_day(self, day: str) -> None:
        """Select a plan day and load its meals."""
        if not self._days.select(day):
            _logger.debug("Ignoring unavailable day %s", day)
            return
        await self._load_day(day)

    async def previous_meal_day(self) -> None:
        """Move to the previous plan day, if there is one."""
        if self._days.previous():
            await self._load_day(self._days.selected_day)

    async def next_meal_day(self) -> None:
        """Move to the next plan day, if there is one."""
        if self._days.next():
            await self._load_day(self._days.selected_day)

    async def _load_day(self, day: str) -> None:
        token = self._issue_token()
        self._loading = True
        self._error = None
        try:
            plan = await self.gateway.get_meals_by_day(day)
        except asyncio.CancelledError:
            self._loading = False
            raise
        except Exception:
            if self._is_stale(token):
                return
            _logger.warning("Failed to load meals for day %s", day, exc_info=True)
            self._error = PLAN_LOAD_ERROR
            plan = None
        if self._is_stale(token):
            return

        meals = (
            meals_from_day_plan(plan, self._user_id, self.today()) if plan else []
        )
        self._view = WeekdayPlanView(day=day, meals=meals)
        self._loading = False
        await self._after_reload()

    # Calendar log loading

    async def load_by_date(self, user_id: str, on_date: str | None = None) -> None:
        """Load the nutrition log of a calendar date (default: current date).

        Raises ValueError for a date that is not ISO formatted, before any
        state changes.
        """
        target = (
            date.fromisoformat(on_date).isoformat() if on_date else self._current_date
        )
        self._user_id = user_id
        self._current_date = target
        token = self._issue_token()
        self._loading = True
        self._error = None
        try:
            nutrition = await self.gateway.get_daily_nutrition(user_id, target)
        except asyncio.CancelledError:
            self._loading = False
            raise
        except Exception:
            if self._is_stale(token):
                return
            _logger.warning(
                "Failed to load nutrition for %s on %s", user_id, target, exc_info=True
            )
            self._error = DAILY_LOAD_ERROR
            nutrition = empty_daily_nutrition(target)
        if self._is_stale(token):
            return

        self._view = CalendarLogView(nutrition)
        self._loading = False
        await self._after_reload()

    def set_date(self, on_date: str) -> None:
        """Move the calendar cursor without loading."""
        self._current_date = date.fromisoformat(on_date).isoformat()

    async def previous_day(self, user_id: str) -> None:
        """Load the calendar day before the current one."""
        await self.load_by_date(user_id, previous_date(self._current_date))

    async def next_day(self, user_id: str) -> None:
        """Load the calendar day after the current one."""
        await self.load_by_date(user_id, next_date(self._current_date))

    # Local meal edits

    def add(self, meal: Meal) -> None:
        """Append a meal to the active view."""
        self._set_meals([*self._view.meals, meal])
        self.notifier.success(MEAL_ADDED)

    def update(self, meal: Meal) -> None:
        """Replace the meal with the same id."""
        if not self._contains(meal.id):
            self.notifier.error(MEAL_NOT_FOUND)
            return
        self._set_meals(
            [meal if current.id == meal.id else current for current in self._view.meals]
        )

    def remove(self, meal_id: str) -> None:
        """Remove a meal by id."""
        if not self._contains(meal_id):
            self.notifier.error(MEAL_NOT_FOUND)
            return
        self._set_meals([meal for meal in self._view.meals if meal.id != meal_id])
        self.notifier.success(MEAL_REMOVED)

    # Search and pagination

    def set_search_term(self, term: str) -> None:
        self._search_term = term
        self._current_page = 1

    def clear_search(self) -> None:
        self._search_term = ""
        self._current_page = 1

    def next_page(self) -> None:
        self._current_page = pagination.next_page(self._current_page, self.total_pages)

    def previous_page(self) -> None:
        self._current_page = pagination.previous_page(self._current_page)

    def go_to_page(self, page: int) -> None:
        self._current_page = pagination.go_to_page(
            self._current_page, page, self.total_pages
        )

    # Infinite mode

    async def set_view_mode(self, mode: ViewMode) -> None:
        """Switch view mode; infinite mode restarts and loads the first chunk."""
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        self._view_mode = mode
        if mode == "infinite":
            self._loader.reset()
            await self._loader.load_more(self._view.meals)

    async def load_more(self) -> None:
        """Load the next chunk in infinite mode."""
        if self._view_mode != "infinite":
            return
        await self._loader.load_more(self._view.meals)

    # Reset

    def clear(self) -> None:
        """Drop all loaded data and transient state."""
        self._view = WeekdayPlanView()
        self._loading = False
        self._error = None
        self._search_term = ""
        self._current_page = 1
        self._loader.reset()

    def clear_error(self) -> None:
        self._error = None

    # Internals

    def _issue_token(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _is_stale(self, token: int) -> bool:
        stale = self.discard_stale_responses and token != self._request_seq
        if stale:
            _logger.debug("Discarding stale response for request %s", token)
        return stale

    async def _after_reload(self) -> None:
        """Restart paging; in infinite mode the first chunk is loaded again."""
        self._current_page = 1
        self._loader.reset()
        if self._view_mode == "infinite":
            await self._loader.load_more(self._view.meals)

    def _contains(self, meal_id: str) -> bool:
        return any(meal.id == meal_id for meal in self._view.meals)

    def _set_meals(self, meals: list[Meal]) -> None:
        if isinstance(self._view, CalendarLogView):
            self._view = CalendarLogView(replace(self._view.nutrition, meals=meals))
        else:
            self._view = WeekdayPlanView(day=self._view.day, meals=meals)
        self._current_page = pagination.clamp_page(
            self._current_page, self.total_pages
        )
