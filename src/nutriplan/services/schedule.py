"""Weekly meal schedule service."""

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import NotFoundError, ValidationError
from nutriplan.domain.events import DomainEvent, EventType
from nutriplan.domain.plans import (
    DAYS_IN_WEEK,
    MealContent,
    MealPlan,
    MealPlanDraft,
    MealPlanItem,
)
from nutriplan.services.events import EventPublisher

_logger = logging.getLogger(__name__)


class ScheduleRepository(Protocol):
    """Persistence interface for plans and their recurring items."""

    def create_plan(self, draft: MealPlanDraft) -> MealPlan:
        """Create an active plan and return it."""

    def get_plan(self, plan_id: UUID) -> MealPlan | None:
        """Return a plan by id, if present."""

    def list_plans(self, patient_id: UUID) -> list[MealPlan]:
        """Return a patient's plans, newest first."""

    def get_active_plan(self, patient_id: UUID) -> MealPlan | None:
        """Return the newest active plan for a patient."""

    def set_plan_active(self, plan_id: UUID, is_active: bool) -> None:
        """Set a plan's active flag."""

    def create_items(
        self, plan_id: UUID, entries: list[tuple[int, MealContent]]
    ) -> list[MealPlanItem]:
        """Insert (day_of_week, content) rows in a single atomic call."""

    def get_item(self, item_id: UUID) -> MealPlanItem | None:
        """Return a plan item by id, if present."""

    def list_items(
        self, plan_id: UUID, day_of_week: int | None = None
    ) -> list[MealPlanItem]:
        """Return plan items in insertion order, optionally for one weekday."""

    def delete_item(self, item_id: UUID) -> None:
        """Delete a plan item."""


@dataclass
class ScheduleService:
    """Builds and resolves weekly recurring meal plans."""

    repository: ScheduleRepository
    events: EventPublisher

    def create_plan(self, draft: MealPlanDraft) -> MealPlan:
        """Create a plan for a patient and notify them."""
        if not draft.title.strip():
            raise ValidationError("Please fill in all required fields")
        if draft.end_date < draft.start_date:
            raise ValidationError("End date must be after start date")
        plan = self.repository.create_plan(draft)
        _logger.info("Created meal plan %s for patient %s", plan.id, plan.patient_id)
        self.events.publish(
            DomainEvent(
                type=EventType.MEAL_PLAN_ASSIGNED,
                user_id=plan.patient_id,
                title="New meal plan",
                message=f"Your nutritionist assigned you the plan '{plan.title}'.",
                related_id=plan.id,
            )
        )
        return plan

    def get_plan(self, plan_id: UUID) -> MealPlan:
        """Return a plan or raise NotFoundError."""
        plan = self.repository.get_plan(plan_id)
        if plan is None:
            raise NotFoundError("Meal plan not found")
        return plan

    def list_plans(self, patient_id: UUID) -> list[MealPlan]:
        """Return all plans of a patient."""
        return self.repository.list_plans(patient_id)

    def active_plan(self, patient_id: UUID) -> MealPlan | None:
        """Return the plan the patient is currently following."""
        return self.repository.get_active_plan(patient_id)

    def deactivate_plan(self, plan_id: UUID) -> MealPlan:
        """Deactivate a plan instead of deleting it."""
        self.get_plan(plan_id)
        self.repository.set_plan_active(plan_id, False)
        return self.get_plan(plan_id)

    def add_item(
        self, plan_id: UUID, day_of_week: int, content: MealContent
    ) -> MealPlanItem:
        """Add a recurring meal to a weekday of the plan."""
        validate_day(day_of_week)
        validate_content(content)
        self.get_plan(plan_id)
        return self.repository.create_items(plan_id, [(day_of_week, content)])[0]

    def list_items_for_day(self, plan_id: UUID, day_of_week: int) -> list[MealPlanItem]:
        """Return a weekday's items ordered by time, untimed items last."""
        validate_day(day_of_week)
        return order_by_time(self.repository.list_items(plan_id, day_of_week))

    def list_week(self, plan_id: UUID) -> dict[int, list[MealPlanItem]]:
        """Return the ordered items of every weekday."""
        self.get_plan(plan_id)
        week: dict[int, list[MealPlanItem]] = {
            day: [] for day in range(DAYS_IN_WEEK)
        }
        for item in self.repository.list_items(plan_id):
            week[item.day_of_week].append(item)
        return {day: order_by_time(items) for day, items in week.items()}

    def get_item(self, item_id: UUID) -> MealPlanItem:
        """Return a plan item or raise NotFoundError."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Meal item not found")
        return item

    def remove_item(self, item_id: UUID) -> None:
        """Delete one item; its completion rows are left orphaned."""
        self.get_item(item_id)
        self.repository.delete_item(item_id)

    def resolve_today(self, plan_id: UUID, today: date) -> list[MealPlanItem]:
        """Return the menu for the weekday of ``today``."""
        self.get_plan(plan_id)
        return self.list_items_for_day(plan_id, weekday_index(today))


def weekday_index(day: date) -> int:
    """Map a date to the Monday=0 weekday index."""
    return day.weekday()


def order_by_time(items: list[MealPlanItem]) -> list[MealPlanItem]:
    """Sort by time of day; untimed items keep insertion order at the end."""
    return sorted(
        items,
        key=lambda item: (
            item.content.time_of_day is None,
            item.content.time_of_day or time.min,
        ),
    )


def validate_day(day_of_week: int) -> None:
    """Reject weekday indexes outside Monday..Sunday."""
    if not 0 <= day_of_week < DAYS_IN_WEEK:
        raise ValidationError("Day of week must be between 0 (Monday) and 6 (Sunday)")


def validate_content(content: MealContent) -> None:
    """Reject meals without a name or with negative macros."""
    if not content.name.strip():
        raise ValidationError("Meal name is required")
    for label, value in (
        ("Calories", content.calories),
        ("Protein", content.protein),
        ("Carbs", content.carbs),
        ("Fats", content.fats),
    ):
        if value is not None and value < 0:
            raise ValidationError(f"{label} cannot be negative")
