"""Pydantic models for the feeding routine API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_diary.domain.meals import DayPlan


class MealSlotPayload(BaseModel):
    """Meal slot of a plan day."""

    id: int | None = None
    alimentos: list[str] = Field(default_factory=list)


class PlanDayPayload(BaseModel):
    """Plan for one weekday."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    dia_semana: str = Field(alias="diaSemana")
    desayuno: MealSlotPayload | None = None
    almuerzo: MealSlotPayload | None = None
    comida: MealSlotPayload | None = None
    merienda: MealSlotPayload | None = None
    cena: MealSlotPayload | None = None

    def to_day_plan(self) -> DayPlan:
        """Map the payload onto the domain day plan."""
        return DayPlan(
            id=self.id,
            day_of_week=self.dia_semana,
            breakfast=_foods(self.desayuno),
            mid_morning=_foods(self.almuerzo),
            lunch=_foods(self.comida),
            afternoon_snack=_foods(self.merienda),
            dinner=_foods(self.cena),
        )


class FeedingRoutinePayload(BaseModel):
    """Feeding routine with its plan days."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    fecha_inicio: str | None = Field(default=None, alias="fechaInicio")
    dias_alimentacion: list[PlanDayPayload] = Field(
        default_factory=list, alias="diasAlimentacion"
    )


def _foods(slot: MealSlotPayload | None) -> list[str] | None:
    if slot is None:
        return None
    return list(slot.alimentos)
