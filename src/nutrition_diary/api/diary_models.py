"""Pydantic models for the diary API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from nutrition_diary.domain.meals import DailyNutrition, FoodItem, Meal, MealType
from nutrition_diary.services.nutrition_store import NutritionStore, ViewMode


class FoodItemModel(BaseModel):
    """Food entry payload."""

    model_config = ConfigDict(from_attributes=True)

    icon: str = ""
    quantity: str = ""
    name: str
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    fiber: float = Field(default=0.0, ge=0)

    def to_domain(self) -> FoodItem:
        return FoodItem(**self.model_dump())


class MealModel(BaseModel):
    """Meal payload."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str = ""
    date: str
    meal_type: MealType
    foods: list[FoodItemModel] = Field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    total_fiber: float = 0.0

    def to_domain(self) -> Meal:
        return Meal(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            meal_type=self.meal_type,
            foods=[food.to_domain() for food in self.foods],
            total_calories=self.total_calories,
            total_protein=self.total_protein,
            total_carbs=self.total_carbs,
            total_fat=self.total_fat,
            total_fiber=self.total_fiber,
        )


class DailyNutritionModel(BaseModel):
    """Calendar-date nutrition log."""

    model_config = ConfigDict(from_attributes=True)

    date: str
    meals: list[MealModel]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float
    water_intake: float
    calorie_goal: float


class SearchRequest(BaseModel):
    term: str


class ViewModeRequest(BaseModel):
    mode: ViewMode


class PageRequest(BaseModel):
    page: int


class DayRequest(BaseModel):
    day: str


class DateRequest(BaseModel):
    on_date: date = Field(alias="date")


class DiarySnapshot(BaseModel):
    """Read-only projection of a diary store."""

    meals: list[MealModel]
    daily_nutrition: DailyNutritionModel | None
    loading: bool
    error: str | None
    search_term: str
    current_page: int
    total_pages: int
    page_size: int
    paginated_meals: list[MealModel]
    filtered_count: int
    current_date: str
    selected_day: str
    formatted_day_name: str
    available_days: list[str]
    has_meal_plan: bool
    can_go_previous_day: bool
    can_go_next_day: bool
    view_mode: ViewMode
    infinite_scroll_items: list[MealModel]
    has_more: bool
    is_loading_more: bool
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    total_fiber: float

    @classmethod
    def from_store(cls, store: NutritionStore) -> "DiarySnapshot":
        return cls(
            meals=_meal_models(store.meals),
            daily_nutrition=_nutrition_model(store.daily_nutrition),
            loading=store.loading,
            error=store.error,
            search_term=store.search_term,
            current_page=store.current_page,
            total_pages=store.total_pages,
            page_size=store.page_size,
            paginated_meals=_meal_models(store.paginated_meals),
            filtered_count=len(store.filtered_meals),
            current_date=store.current_date,
            selected_day=store.selected_day,
            formatted_day_name=store.formatted_day_name,
            available_days=store.available_days,
            has_meal_plan=store.has_meal_plan,
            can_go_previous_day=store.can_go_previous_day,
            can_go_next_day=store.can_go_next_day,
            view_mode=store.view_mode,
            infinite_scroll_items=_meal_models(store.infinite_scroll_items),
            has_more=store.has_more,
            is_loading_more=store.is_loading_more,
            total_calories=store.total_calories,
            total_protein=store.total_protein,
            total_carbs=store.total_carbs,
            total_fat=store.total_fat,
            total_fiber=store.total_fiber,
        )


def _meal_models(meals: list[Meal]) -> list[MealModel]:
    return [MealModel.model_validate(meal) for meal in meals]


def _nutrition_model(nutrition: DailyNutrition | None) -> DailyNutritionModel | None:
    if nutrition is None:
        return None
    return DailyNutritionModel.model_validate(nutrition)
