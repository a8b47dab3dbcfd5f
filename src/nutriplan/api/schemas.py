"""Pydantic request models and response helpers."""

import dataclasses
from datetime import date, time
from uuid import UUID

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from nutriplan.domain.plans import MealContent, MealType
from nutriplan.domain.templates import TemplateCategory
from nutriplan.domain.tracking import WaterStatus


class MealContentRequest(BaseModel):
    """Meal fields shared by plan and template items."""

    meal_type: MealType
    name: str
    description: str | None = None
    time_of_day: time | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fats: float | None = None

    def to_content(self) -> MealContent:
        return MealContent(
            meal_type=self.meal_type,
            name=self.name,
            description=self.description,
            time_of_day=self.time_of_day,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
        )


class PlanItemRequest(MealContentRequest):
    """Meal added to a weekday of a plan."""

    day_of_week: int


class CreatePlanRequest(BaseModel):
    """Meal plan assigned to a patient."""

    patient_id: UUID
    title: str
    description: str | None = None
    start_date: date
    end_date: date


class CreateTemplateRequest(BaseModel):
    """New empty template."""

    name: str
    description: str | None = None
    category: TemplateCategory = TemplateCategory.FULL_DAY


class ApplyTemplateRequest(BaseModel):
    """Template applied onto a weekday."""

    template_id: UUID
    target_day: int


class SaveAsTemplateRequest(CreateTemplateRequest):
    """Plan meals saved into a new template."""

    source_day: int | None = None


class CopyDayRequest(BaseModel):
    """Weekday duplicated onto another weekday."""

    from_day: int
    to_day: int


class ToggleCompletionRequest(BaseModel):
    """Completion toggle for one item on one date."""

    item_id: UUID
    completed_date: date | None = None


class WaterRequest(BaseModel):
    """Water counter change for a date."""

    log_date: date | None = None


class ProgressLogRequest(BaseModel):
    """Daily check-in."""

    log_date: date | None = None
    weight: float | None = None
    energy_level: int | None = None
    mood: str | None = None
    notes: str | None = None


def dump(value: object) -> object:
    """Convert dataclasses (or lists of them) into JSON-ready data."""
    if isinstance(value, list):
        return [dump(entry) for entry in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return jsonable_encoder(dataclasses.asdict(value))
    return jsonable_encoder(value)


def dump_water(status: WaterStatus) -> dict[str, object]:
    """Serialize a water status including derived fields."""
    return {
        "log_date": status.log_date.isoformat(),
        "glasses_count": status.glasses_count,
        "goal_glasses": status.goal_glasses,
        "goal_reached": status.goal_reached,
        "percent": status.percent,
    }
