"""Weekly adherence summary combining meals and water."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from nutriplan.domain.plans import DAYS_IN_WEEK
from nutriplan.domain.weekly import AdherenceTier, DaySummary, WeeklySummary
from nutriplan.services.clock import Clock
from nutriplan.services.completions import CompletionRepository
from nutriplan.services.retry import call_with_retry
from nutriplan.services.schedule import ScheduleRepository
from nutriplan.services.water import DEFAULT_GOAL_GLASSES, WaterRepository

DEFAULT_MEALS_PER_DAY = 5
REFERENCE_WEEKDAY = 1
MEDIUM_THRESHOLD = 0.5
HIGH_THRESHOLD = 0.8


@dataclass
class WeeklySummaryService:
    """Aggregates a Monday-start week of completions and water logs."""

    schedule_repository: ScheduleRepository
    completion_repository: CompletionRepository
    water_repository: WaterRepository
    clock: Clock
    default_goal_glasses: int = DEFAULT_GOAL_GLASSES
    default_meals_per_day: int = DEFAULT_MEALS_PER_DAY
    reference_weekday: int = REFERENCE_WEEKDAY
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def compute_week(
        self, patient_id: UUID, reference_date: date | None = None
    ) -> WeeklySummary:
        """Return the summary of the week containing ``reference_date``."""
        day = reference_date or self.clock.today()
        return call_with_retry(
            lambda: self._compute_week(patient_id, day),
            action="compute_week",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )

    def _compute_week(self, patient_id: UUID, reference_date: date) -> WeeklySummary:
        week_start, week_end = week_bounds(reference_date)
        meals_target, plan_item_ids = self._meal_reference(patient_id)

        completed_by_day: dict[date, int] = {}
        for completion in self.completion_repository.list_completions(
            patient_id, week_start, week_end
        ):
            if completion.item_id not in plan_item_ids:
                continue
            completed_by_day[completion.completed_date] = (
                completed_by_day.get(completion.completed_date, 0) + 1
            )
        water_by_day = {
            log.log_date: log
            for log in self.water_repository.list_logs(patient_id, week_start, week_end)
        }

        days = []
        for offset in range(DAYS_IN_WEEK):
            current = week_start + timedelta(days=offset)
            water = water_by_day.get(current)
            glasses = water.glasses_count if water else 0
            goal = water.goal_glasses if water else self.default_goal_glasses
            completed = completed_by_day.get(current, 0)
            meal_fraction = completed / meals_target if meals_target else 0.0
            water_fraction = glasses / goal if water and goal else 0.0
            score = min(max((meal_fraction + water_fraction) / 2, 0.0), 1.0)
            days.append(
                DaySummary(
                    day=current,
                    meals_completed=completed,
                    meals_target=meals_target,
                    water_glasses=glasses,
                    water_goal=goal,
                    score=score,
                    tier=adherence_tier(score),
                )
            )

        meals_completed = sum(entry.meals_completed for entry in days)
        meals_total = sum(entry.meals_target for entry in days)
        water_glasses = sum(entry.water_glasses for entry in days)
        water_goal = sum(entry.water_goal for entry in days)
        return WeeklySummary(
            week_start=week_start,
            week_end=week_end,
            days=days,
            meals_completed=meals_completed,
            meals_target=meals_total,
            meal_percent=_percent(meals_completed, meals_total),
            water_glasses=water_glasses,
            water_goal=water_goal,
            water_percent=_percent(water_glasses, water_goal),
        )

    def _meal_reference(self, patient_id: UUID) -> tuple[int, set[UUID]]:
        """Return the per-day meal target and the ids of the active plan's items.

        The target is the item count of one reference weekday, not the
        actual count of each day.
        """
        plan = self.schedule_repository.get_active_plan(patient_id)
        if plan is None:
            return self.default_meals_per_day, set()
        items = self.schedule_repository.list_items(plan.id)
        reference_total = sum(
            1 for item in items if item.day_of_week == self.reference_weekday
        )
        return reference_total or self.default_meals_per_day, {
            item.id for item in items
        }


def week_bounds(reference_date: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the week containing a date."""
    start = reference_date - timedelta(days=reference_date.weekday())
    return start, start + timedelta(days=DAYS_IN_WEEK - 1)


def adherence_tier(score: float) -> AdherenceTier:
    """Bucket a day's score into a fixed tier."""
    if score >= HIGH_THRESHOLD:
        return AdherenceTier.HIGH
    if score >= MEDIUM_THRESHOLD:
        return AdherenceTier.MEDIUM
    if score > 0:
        return AdherenceTier.LOW
    return AdherenceTier.NONE


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0.0
