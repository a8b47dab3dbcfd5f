"""Supabase repository for water logs."""

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
from nutriplan.domain.tracking import WaterLog
from nutriplan.services.water import WaterRepository

_COLUMNS = "id, patient_id, log_date, glasses_count, goal_glasses"


@dataclass
class SupabaseWaterRepository(WaterRepository):
    """Supabase implementation for water logs, unique per (patient, date)."""

    client: Client

    def get_log(self, patient_id: UUID, log_date: date) -> WaterLog | None:
        """Return the water log for a date."""
        rows = execute(
            self.client.table("water_logs")
            .select(_COLUMNS)
            .eq("patient_id", str(patient_id))
            .eq("log_date", log_date.isoformat())
            .limit(1),
            action="load water log",
        )
        return _parse_row(rows[0]) if rows else None

    def create_log(
        self, patient_id: UUID, log_date: date, glasses_count: int, goal_glasses: int
    ) -> WaterLog:
        """Insert a water log with its goal snapshot."""
        row = first_row(
            self.client.table("water_logs").insert(
                {
                    "patient_id": str(patient_id),
                    "log_date": log_date.isoformat(),
                    "glasses_count": glasses_count,
                    "goal_glasses": goal_glasses,
                }
            ),
            action="create water log",
        )
        return _parse_row(row)

    def update_count(self, log_id: UUID, glasses_count: int) -> WaterLog:
        """Set the glasses count, leaving the goal untouched."""
        row = first_row(
            self.client.table("water_logs")
            .update({"glasses_count": glasses_count})
            .eq("id", str(log_id)),
            action="update water log",
        )
        return _parse_row(row)

    def list_logs(self, patient_id: UUID, start: date, end: date) -> list[WaterLog]:
        """Return water logs within the inclusive date range."""
        rows = execute(
            self.client.table("water_logs")
            .select(_COLUMNS)
            .eq("patient_id", str(patient_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat()),
            action="list water logs",
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, Any]) -> WaterLog:
    return WaterLog(
        id=parse_uuid(row["id"]),
        patient_id=parse_uuid(row["patient_id"]),
        log_date=parse_date(row["log_date"]),
        glasses_count=int(row.get("glasses_count") or 0),
        goal_glasses=int(row.get("goal_glasses") or 0),
    )
