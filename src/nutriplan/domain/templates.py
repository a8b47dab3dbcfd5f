"""Domain models for reusable meal templates."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from nutriplan.domain.plans import MealContent


class TemplateCategory(str, Enum):
    """Closed set of template categories."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    FULL_DAY = "full-day"


@dataclass(frozen=True)
class MealTemplate:
    """A nutritionist-owned bundle of meals."""

    id: UUID
    owner_id: UUID
    name: str
    description: str | None
    category: TemplateCategory


@dataclass(frozen=True)
class MealTemplateItem:
    """Snapshot of a meal inside a template."""

    id: UUID
    template_id: UUID
    content: MealContent
