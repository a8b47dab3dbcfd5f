"""Domain models for daily adherence tracking."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutriplan.domain.plans import MealPlanItem


@dataclass(frozen=True)
class MealCompletion:
    """Marks a recurring item as eaten on one date."""

    id: UUID
    patient_id: UUID
    item_id: UUID
    completed_date: date


@dataclass(frozen=True)
class ScheduledMeal:
    """A plan item resolved for a date with its completion state."""

    item: MealPlanItem
    completed: bool


@dataclass(frozen=True)
class DailyProgress:
    """Checklist for one day of a plan."""

    day: date
    meals: list[ScheduledMeal]
    completed_count: int
    total_count: int
    percent: float


@dataclass(frozen=True)
class WaterLog:
    """Stored water counter for one patient and date."""

    id: UUID
    patient_id: UUID
    log_date: date
    glasses_count: int
    goal_glasses: int


@dataclass(frozen=True)
class WaterStatus:
    """Water counter as seen by the patient; may not be persisted yet."""

    log_date: date
    glasses_count: int
    goal_glasses: int

    @property
    def goal_reached(self) -> bool:
        return self.glasses_count >= self.goal_glasses

    @property
    def percent(self) -> float:
        if self.goal_glasses <= 0:
            return 0.0
        return self.glasses_count / self.goal_glasses * 100


@dataclass(frozen=True)
class ProgressLogDraft:
    """Input for a progress log entry."""

    log_date: date
    weight: float | None = None
    energy_level: int | None = None
    mood: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ProgressLog:
    """Weight, energy and mood check-in for one date."""

    id: UUID
    patient_id: UUID
    log_date: date
    weight: float | None
    energy_level: int | None
    mood: str | None
    notes: str | None


@dataclass(frozen=True)
class WeightPoint:
    """Single point of a weight trend."""

    log_date: date
    weight: float


@dataclass(frozen=True)
class PatientGoal:
    """Baseline and target weight recorded for a patient."""

    patient_id: UUID
    start_weight: float
    target_weight: float


@dataclass(frozen=True)
class GoalProgress:
    """Progress toward a patient's target weight."""

    start_weight: float
    current_weight: float
    target_weight: float
    percent: float
    remaining: float
    gaining: bool
