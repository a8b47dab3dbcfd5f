"""Supabase repository for meal plans and plan items."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from supabase import Client

from nutriplan.adapters.supabase_support import (
    MEAL_COLUMNS,
    content_from_row,
    content_to_row,
    creation_stamps,
    execute,
    first_row,
    parse_date,
    parse_uuid,
)
from nutriplan.domain.plans import MealContent, MealPlan, MealPlanDraft, MealPlanItem
from nutriplan.services.schedule import ScheduleRepository

_PLAN_COLUMNS = (
    "id, patient_id, nutritionist_id, title, description, start_date, end_date, "
    "is_active, created_at"
)
_ITEM_COLUMNS = f"id, meal_plan_id, day_of_week, {MEAL_COLUMNS}"


@dataclass
class SupabaseScheduleRepository(ScheduleRepository):
    """Supabase implementation for plans and plan items."""

    client: Client

    def create_plan(self, draft: MealPlanDraft) -> MealPlan:
        """Insert an active plan row."""
        row = first_row(
            self.client.table("meal_plans").insert(
                {
                    "patient_id": str(draft.patient_id),
                    "nutritionist_id": str(draft.nutritionist_id),
                    "title": draft.title,
                    "description": draft.description,
                    "start_date": draft.start_date.isoformat(),
                    "end_date": draft.end_date.isoformat(),
                    "is_active": True,
                }
            ),
            action="create meal plan",
        )
        return _parse_plan(row)

    def get_plan(self, plan_id: UUID) -> MealPlan | None:
        """Return a plan by id."""
        rows = execute(
            self.client.table("meal_plans")
            .select(_PLAN_COLUMNS)
            .eq("id", str(plan_id))
            .limit(1),
            action="load meal plan",
        )
        return _parse_plan(rows[0]) if rows else None

    def list_plans(self, patient_id: UUID) -> list[MealPlan]:
        """Return a patient's plans, newest first."""
        rows = execute(
            self.client.table("meal_plans")
            .select(_PLAN_COLUMNS)
            .eq("patient_id", str(patient_id))
            .order("created_at", desc=True),
            action="list meal plans",
        )
        return [_parse_plan(row) for row in rows]

    def get_active_plan(self, patient_id: UUID) -> MealPlan | None:
        """Return the newest active plan."""
        rows = execute(
            self.client.table("meal_plans")
            .select(_PLAN_COLUMNS)
            .eq("patient_id", str(patient_id))
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1),
            action="load active meal plan",
        )
        return _parse_plan(rows[0]) if rows else None

    def set_plan_active(self, plan_id: UUID, is_active: bool) -> None:
        """Update the active flag."""
        execute(
            self.client.table("meal_plans")
            .update({"is_active": is_active})
            .eq("id", str(plan_id)),
            action="update meal plan",
        )

    def create_items(
        self, plan_id: UUID, entries: list[tuple[int, MealContent]]
    ) -> list[MealPlanItem]:
        """Insert all rows with one request so they land in one statement."""
        payload = [
            {
                "meal_plan_id": str(plan_id),
                "day_of_week": day_of_week,
                "created_at": created_at,
                **content_to_row(content),
            }
            for (day_of_week, content), created_at in zip(
                entries, creation_stamps(len(entries)), strict=True
            )
        ]
        if not payload:
            return []
        rows = execute(
            self.client.table("meal_plan_items").insert(payload),
            action="create meal plan items",
        )
        return [_parse_item(row) for row in rows]

    def get_item(self, item_id: UUID) -> MealPlanItem | None:
        """Return a plan item by id."""
        rows = execute(
            self.client.table("meal_plan_items")
            .select(_ITEM_COLUMNS)
            .eq("id", str(item_id))
            .limit(1),
            action="load meal plan item",
        )
        return _parse_item(rows[0]) if rows else None

    def list_items(
        self, plan_id: UUID, day_of_week: int | None = None
    ) -> list[MealPlanItem]:
        """Return plan items in creation order."""
        query = (
            self.client.table("meal_plan_items")
            .select(_ITEM_COLUMNS)
            .eq("meal_plan_id", str(plan_id))
        )
        if day_of_week is not None:
            query = query.eq("day_of_week", day_of_week)
        rows = execute(
            query.order("created_at", desc=False), action="list meal plan items"
        )
        return [_parse_item(row) for row in rows]

    def delete_item(self, item_id: UUID) -> None:
        """Delete a plan item row."""
        execute(
            self.client.table("meal_plan_items").delete().eq("id", str(item_id)),
            action="delete meal plan item",
        )


def _parse_plan(row: dict[str, Any]) -> MealPlan:
    created_raw = row.get("created_at")
    return MealPlan(
        id=parse_uuid(row["id"]),
        patient_id=parse_uuid(row["patient_id"]),
        nutritionist_id=parse_uuid(row["nutritionist_id"]),
        title=str(row.get("title", "")),
        description=row.get("description"),
        start_date=parse_date(row["start_date"]),
        end_date=parse_date(row["end_date"]),
        is_active=bool(row.get("is_active")),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )


def _parse_item(row: dict[str, Any]) -> MealPlanItem:
    return MealPlanItem(
        id=parse_uuid(row["id"]),
        plan_id=parse_uuid(row["meal_plan_id"]),
        day_of_week=int(row["day_of_week"]),
        content=content_from_row(row),
    )
