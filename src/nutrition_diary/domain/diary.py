"""Diary views held by the nutrition store."""

from dataclasses import dataclass, field

from nutrition_diary.domain.meals import DailyNutrition, Meal


@dataclass(frozen=True)
class WeekdayPlanView:
    """Meals derived from the plan of a weekday."""

    day: str | None = None
    meals: list[Meal] = field(default_factory=list)


@dataclass(frozen=True)
class CalendarLogView:
    """Meals taken from the nutrition log of a calendar date."""

    nutrition: DailyNutrition

    @property
    def meals(self) -> list[Meal]:
        return self.nutrition.meals


DiaryView = WeekdayPlanView | CalendarLogView
