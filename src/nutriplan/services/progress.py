"""Progress log service: check-ins, weight trend, goal progress and streaks."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import NotFoundError, ValidationError
from nutriplan.domain.events import DomainEvent, EventType
from nutriplan.domain.tracking import (
    GoalProgress,
    PatientGoal,
    ProgressLog,
    ProgressLogDraft,
    WeightPoint,
)
from nutriplan.services.clock import Clock
from nutriplan.services.events import EventPublisher
from nutriplan.services.streaks import compute_streak

MIN_ENERGY_LEVEL = 1
MAX_ENERGY_LEVEL = 10


class ProgressRepository(Protocol):
    """Persistence interface for progress logs and patient goals."""

    def create_log(self, patient_id: UUID, draft: ProgressLogDraft) -> ProgressLog:
        """Insert a progress log and return it."""

    def list_logs(self, patient_id: UUID, limit: int | None = None) -> list[ProgressLog]:
        """Return progress logs, newest first."""

    def list_log_dates(self, patient_id: UUID) -> list[date]:
        """Return the dates of all progress logs."""

    def get_patient_goal(self, patient_id: UUID) -> PatientGoal | None:
        """Return a patient's baseline and target weight, if recorded."""


@dataclass
class ProgressService:
    """Records check-ins and derives trends from them."""

    repository: ProgressRepository
    events: EventPublisher
    clock: Clock

    def record(self, patient_id: UUID, draft: ProgressLogDraft) -> ProgressLog:
        """Store a check-in for a date."""
        if draft.energy_level is not None and not (
            MIN_ENERGY_LEVEL <= draft.energy_level <= MAX_ENERGY_LEVEL
        ):
            raise ValidationError("Energy level must be between 1 and 10")
        if draft.weight is not None and draft.weight <= 0:
            raise ValidationError("Weight must be a positive number")
        log = self.repository.create_log(patient_id, draft)
        self.events.publish(
            DomainEvent(
                type=EventType.PROGRESS_LOGGED,
                user_id=patient_id,
                title="Progress logged",
                message=f"Check-in recorded for {draft.log_date.isoformat()}.",
                related_id=log.id,
            )
        )
        return log

    def list_logs(self, patient_id: UUID, limit: int | None = None) -> list[ProgressLog]:
        """Return recent check-ins."""
        return self.repository.list_logs(patient_id, limit)

    def weight_trend(self, patient_id: UUID) -> list[WeightPoint]:
        """Return logged weights oldest first."""
        points = [
            WeightPoint(log_date=log.log_date, weight=log.weight)
            for log in self.repository.list_logs(patient_id)
            if log.weight is not None
        ]
        return sorted(points, key=lambda point: point.log_date)

    def goal_progress(self, patient_id: UUID) -> GoalProgress:
        """Return how far the latest weight has moved toward the target."""
        goal = self.repository.get_patient_goal(patient_id)
        if goal is None:
            raise NotFoundError("No weight goal recorded for this patient")
        latest = next(
            (
                log.weight
                for log in self.repository.list_logs(patient_id)
                if log.weight is not None
            ),
            None,
        )
        current = latest if latest is not None else goal.start_weight
        total_change = abs(goal.start_weight - goal.target_weight)
        current_change = abs(goal.start_weight - current)
        return GoalProgress(
            start_weight=goal.start_weight,
            current_weight=current,
            target_weight=goal.target_weight,
            percent=current_change / total_change * 100 if total_change > 0 else 0.0,
            remaining=abs(current - goal.target_weight),
            gaining=goal.target_weight > goal.start_weight,
        )

    def current_streak(self, patient_id: UUID) -> int:
        """Return the consecutive-day logging streak ending today."""
        return compute_streak(
            self.repository.list_log_dates(patient_id), self.clock.today()
        )
