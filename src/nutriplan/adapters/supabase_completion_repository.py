"""Supabase repository for meal completions."""

from dataclasses import dataclass
from datetime import date
from typing import Any
from uuid import UUID

from supabase import Client

from nutriplan.adapters.supabase_support import (
    execute,
    first_row,
    parse_date,
    parse_uuid,
)
from nutriplan.domain.tracking import MealCompletion
from nutriplan.services.completions import CompletionRepository

_COLUMNS = "id, patient_id, meal_plan_item_id, completed_date"


@dataclass
class SupabaseCompletionRepository(CompletionRepository):
    """Supabase implementation for meal completions.

    The table carries a unique constraint on
    (patient_id, meal_plan_item_id, completed_date).
    """

    client: Client

    def get_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion | None:
        """Return the completion for the triple."""
        rows = execute(
            self.client.table("meal_completions")
            .select(_COLUMNS)
            .eq("patient_id", str(patient_id))
            .eq("meal_plan_item_id", str(item_id))
            .eq("completed_date", completed_date.isoformat())
            .limit(1),
            action="load meal completion",
        )
        return _parse_row(rows[0]) if rows else None

    def create_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion:
        """Insert a completion row."""
        row = first_row(
            self.client.table("meal_completions").insert(
                {
                    "patient_id": str(patient_id),
                    "meal_plan_item_id": str(item_id),
                    "completed_date": completed_date.isoformat(),
                }
            ),
            action="create meal completion",
        )
        return _parse_row(row)

    def delete_completion(self, completion_id: UUID) -> None:
        """Delete a completion row."""
        execute(
            self.client.table("meal_completions")
            .delete()
            .eq("id", str(completion_id)),
            action="delete meal completion",
        )

    def list_completions(
        self, patient_id: UUID, start: date, end: date
    ) -> list[MealCompletion]:
        """Return completions within the inclusive date range."""
        rows = execute(
            self.client.table("meal_completions")
            .select(_COLUMNS)
            .eq("patient_id", str(patient_id))
            .gte("completed_date", start.isoformat())
            .lte("completed_date", end.isoformat()),
            action="list meal completions",
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, Any]) -> MealCompletion:
    return MealCompletion(
        id=parse_uuid(row["id"]),
        patient_id=parse_uuid(row["patient_id"]),
        item_id=parse_uuid(row["meal_plan_item_id"]),
        completed_date=parse_date(row["completed_date"]),
    )
