"""Domain models for weekly adherence summaries."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AdherenceTier(str, Enum):
    """Bucket for a day's adherence score."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class DaySummary:
    """Meals and water for one day of the week."""

    day: date
    meals_completed: int
    meals_target: int
    water_glasses: int
    water_goal: int
    score: float
    tier: AdherenceTier


@dataclass(frozen=True)
class WeeklySummary:
    """Monday-start week of adherence."""

    week_start: date
    week_end: date
    days: list[DaySummary]
    meals_completed: int
    meals_target: int
    meal_percent: float
    water_glasses: int
    water_goal: int
    water_percent: float
