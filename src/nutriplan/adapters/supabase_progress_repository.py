"""Supabase repository for progress logs and patient goals."""

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
from nutriplan.domain.tracking import PatientGoal, ProgressLog, ProgressLogDraft
from nutriplan.services.progress import ProgressRepository

_COLUMNS = "id, patient_id, log_date, weight, energy_level, mood, notes"


@dataclass
class SupabaseProgressRepository(ProgressRepository):
    """Supabase implementation for progress logs."""

    client: Client

    def create_log(self, patient_id: UUID, draft: ProgressLogDraft) -> ProgressLog:
        """Insert a progress log row."""
        row = first_row(
            self.client.table("progress_logs").insert(
                {
                    "patient_id": str(patient_id),
                    "log_date": draft.log_date.isoformat(),
                    "weight": draft.weight,
                    "energy_level": draft.energy_level,
                    "mood": draft.mood,
                    "notes": draft.notes,
                }
            ),
            action="create progress log",
        )
        return _parse_row(row)

    def list_logs(self, patient_id: UUID, limit: int | None = None) -> list[ProgressLog]:
        """Return progress logs, newest first."""
        query = (
            self.client.table("progress_logs")
            .select(_COLUMNS)
            .eq("patient_id", str(patient_id))
            .order("log_date", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        rows = execute(query, action="list progress logs")
        return [_parse_row(row) for row in rows]

    def list_log_dates(self, patient_id: UUID) -> list[date]:
        """Return the dates of all progress logs."""
        rows = execute(
            self.client.table("progress_logs")
            .select("log_date")
            .eq("patient_id", str(patient_id))
            .order("log_date", desc=True),
            action="list progress log dates",
        )
        return [parse_date(row["log_date"]) for row in rows]

    def get_patient_goal(self, patient_id: UUID) -> PatientGoal | None:
        """Return baseline and target weight from the patient record."""
        rows = execute(
            self.client.table("patients")
            .select("weight, target_weight")
            .eq("patient_id", str(patient_id))
            .limit(1),
            action="load patient goal",
        )
        if not rows:
            return None
        row = rows[0]
        if row.get("weight") is None or row.get("target_weight") is None:
            return None
        return PatientGoal(
            patient_id=patient_id,
            start_weight=float(row["weight"]),
            target_weight=float(row["target_weight"]),
        )


def _parse_row(row: dict[str, Any]) -> ProgressLog:
    weight = row.get("weight")
    energy = row.get("energy_level")
    return ProgressLog(
        id=parse_uuid(row["id"]),
        patient_id=parse_uuid(row["patient_id"]),
        log_date=parse_date(row["log_date"]),
        weight=float(weight) if weight is not None else None,
        energy_level=int(energy) if energy is not None else None,
        mood=row.get("mood"),
        notes=row.get("notes"),
    )
