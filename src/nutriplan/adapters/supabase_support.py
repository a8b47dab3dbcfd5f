"""Shared helpers for Supabase repositories."""

from datetime import UTC, date, datetime, time, timedelta
from typing import Any
from uuid import UUID

import httpx
from supabase import PostgrestAPIError

from nutriplan.domain.errors import ConflictError, StoreError
from nutriplan.domain.plans import MealContent, MealType

UNIQUE_VIOLATION = "23505"

MEAL_COLUMNS = "meal_type, meal_name, description, time, calories, protein, carbs, fats"


def execute(query: Any, *, action: str) -> list[dict[str, Any]]:
    """Run a query builder and translate store failures into domain errors."""
    try:
        response = query.execute()
    except PostgrestAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(f"Duplicate row while trying to {action}") from exc
        raise StoreError(f"Failed to {action}") from exc
    except httpx.HTTPError as exc:
        raise StoreError(f"Failed to {action}") from exc
    return response.data or []


def first_row(query: Any, *, action: str) -> dict[str, Any]:
    """Run an insert or update that must return a row."""
    rows = execute(query, action=action)
    if not rows:
        raise StoreError(f"Failed to {action}")
    return rows[0]


def creation_stamps(count: int) -> list[str]:
    """Return strictly increasing ``created_at`` values for a bulk insert.

    Rows inserted in one statement would all share ``now()``, so reads ordered
    by ``created_at`` could not reproduce the insertion order.
    """
    base = datetime.now(tz=UTC)
    return [
        (base + timedelta(microseconds=index)).isoformat() for index in range(count)
    ]


def content_to_row(content: MealContent) -> dict[str, object]:
    """Serialize meal content into table columns."""
    return {
        "meal_type": content.meal_type.value,
        "meal_name": content.name,
        "description": content.description,
        "time": content.time_of_day.isoformat() if content.time_of_day else None,
        "calories": content.calories,
        "protein": content.protein,
        "carbs": content.carbs,
        "fats": content.fats,
    }


def content_from_row(row: dict[str, Any]) -> MealContent:
    """Parse meal content columns."""
    raw_time = row.get("time")
    return MealContent(
        meal_type=MealType(row["meal_type"]),
        name=str(row.get("meal_name", "")),
        description=row.get("description"),
        time_of_day=time.fromisoformat(raw_time) if raw_time else None,
        calories=_optional_float(row.get("calories")),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fats=_optional_float(row.get("fats")),
    )


def parse_date(value: Any) -> date:
    """Parse an ISO date column."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_uuid(value: Any) -> UUID:
    """Parse a uuid column."""
    return value if isinstance(value, UUID) else UUID(str(value))


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)
