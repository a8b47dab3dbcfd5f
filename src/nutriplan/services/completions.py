"""Per-day meal completion tracking."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import ConflictError
from nutriplan.domain.tracking import DailyProgress, MealCompletion, ScheduledMeal
from nutriplan.services.retry import call_with_retry
from nutriplan.services.schedule import ScheduleService

_logger = logging.getLogger(__name__)


class CompletionRepository(Protocol):
    """Persistence interface for meal completions."""

    def get_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion | None:
        """Return the completion row for the triple, if present."""

    def create_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion:
        """Insert a completion; raise ConflictError if the triple exists."""

    def delete_completion(self, completion_id: UUID) -> None:
        """Delete a completion row; deleting a missing row is a no-op."""

    def list_completions(
        self, patient_id: UUID, start: date, end: date
    ) -> list[MealCompletion]:
        """Return completions dated within [start, end]."""


@dataclass
class CompletionService:
    """Toggles meal completions and builds the daily checklist."""

    repository: CompletionRepository
    schedule_service: ScheduleService
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def toggle_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> bool:
        """Flip the completion state of an item for a date; return the new state."""
        self.schedule_service.get_item(item_id)
        existing = self.repository.get_completion(patient_id, item_id, completed_date)
        if existing is not None:
            self.repository.delete_completion(existing.id)
            return False
        try:
            self.repository.create_completion(patient_id, item_id, completed_date)
        except ConflictError:
            _logger.info(
                "Concurrent completion for item %s on %s already recorded",
                item_id,
                completed_date,
            )
        return True

    def daily_progress(
        self, patient_id: UUID, plan_id: UUID, day: date
    ) -> DailyProgress:
        """Return the day's scheduled meals annotated with completion state."""
        return call_with_retry(
            lambda: self._daily_progress(patient_id, plan_id, day),
            action="daily_progress",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )

    def _daily_progress(
        self, patient_id: UUID, plan_id: UUID, day: date
    ) -> DailyProgress:
        items = self.schedule_service.resolve_today(plan_id, day)
        done = {
            completion.item_id
            for completion in self.repository.list_completions(patient_id, day, day)
        }
        meals = [ScheduledMeal(item=item, completed=item.id in done) for item in items]
        completed = sum(1 for meal in meals if meal.completed)
        total = len(meals)
        return DailyProgress(
            day=day,
            meals=meals,
            completed_count=completed,
            total_count=total,
            percent=completed / total * 100 if total else 0.0,
        )
