"""Daily water intake counter."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import ConflictError, StoreError
from nutriplan.domain.tracking import WaterLog, WaterStatus

DEFAULT_GOAL_GLASSES = 8

_logger = logging.getLogger(__name__)


class WaterRepository(Protocol):
    """Persistence interface for water logs."""

    def get_log(self, patient_id: UUID, log_date: date) -> WaterLog | None:
        """Return the water log for a date, if present."""

    def create_log(
        self, patient_id: UUID, log_date: date, glasses_count: int, goal_glasses: int
    ) -> WaterLog:
        """Insert a water log; raise ConflictError if one exists for the date."""

    def update_count(self, log_id: UUID, glasses_count: int) -> WaterLog:
        """Set the glasses count of an existing log."""

    def list_logs(self, patient_id: UUID, start: date, end: date) -> list[WaterLog]:
        """Return water logs dated within [start, end]."""


@dataclass
class WaterService:
    """Counts glasses per day against a goal frozen at first write."""

    repository: WaterRepository
    default_goal_glasses: int = DEFAULT_GOAL_GLASSES

    def get_daily_status(self, patient_id: UUID, log_date: date) -> WaterStatus:
        """Return the stored counter or unsaved defaults."""
        log = self.repository.get_log(patient_id, log_date)
        if log is None:
            return WaterStatus(
                log_date=log_date,
                glasses_count=0,
                goal_glasses=self.default_goal_glasses,
            )
        return _status(log)

    def increment(self, patient_id: UUID, log_date: date) -> WaterStatus:
        """Add one glass."""
        return self._adjust(patient_id, log_date, 1)

    def decrement(self, patient_id: UUID, log_date: date) -> WaterStatus:
        """Remove one glass, never going below zero."""
        return self._adjust(patient_id, log_date, -1)

    def _adjust(self, patient_id: UUID, log_date: date, delta: int) -> WaterStatus:
        log = self.repository.get_log(patient_id, log_date)
        if log is None:
            try:
                created = self.repository.create_log(
                    patient_id,
                    log_date,
                    glasses_count=max(0, delta),
                    goal_glasses=self.default_goal_glasses,
                )
            except ConflictError:
                _logger.info(
                    "Water log for %s on %s created concurrently", patient_id, log_date
                )
                log = self.repository.get_log(patient_id, log_date)
                if log is None:
                    raise StoreError("Water log vanished after conflict") from None
            else:
                return _status(created)
        updated = self.repository.update_count(
            log.id, max(0, log.glasses_count + delta)
        )
        return _status(updated)


def _status(log: WaterLog) -> WaterStatus:
    return WaterStatus(
        log_date=log.log_date,
        glasses_count=log.glasses_count,
        goal_glasses=log.goal_glasses,
    )
