"""Domain models for weekly meal plans."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from uuid import UUID

DAYS_IN_WEEK = 7
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class MealType(str, Enum):
    """Closed set of meal slots."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealContent:
    """Plan-independent description of a meal, shared by plan and template items."""

    meal_type: MealType
    name: str
    description: str | None = None
    time_of_day: time | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fats: float | None = None


@dataclass(frozen=True)
class MealPlanDraft:
    """Input for creating a meal plan."""

    patient_id: UUID
    nutritionist_id: UUID
    title: str
    start_date: date
    end_date: date
    description: str | None = None


@dataclass(frozen=True)
class MealPlan:
    """A date-bounded weekly menu assigned to one patient."""

    id: UUID
    patient_id: UUID
    nutritionist_id: UUID
    title: str
    description: str | None
    start_date: date
    end_date: date
    is_active: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class MealPlanItem:
    """A meal recurring every week on a fixed weekday (Monday=0)."""

    id: UUID
    plan_id: UUID
    day_of_week: int
    content: MealContent
