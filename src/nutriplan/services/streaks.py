"""Consecutive-day logging streaks."""

from collections.abc import Iterable
from datetime import date, timedelta


def compute_streak(log_dates: Iterable[date], today: date) -> int:
    """Count consecutive days ending today that have at least one log.

    A run that ends yesterday, with nothing logged today, counts as zero.
    """
    distinct = sorted(set(log_dates), reverse=True)
    streak = 0
    for offset, logged in enumerate(distinct):
        if logged != today - timedelta(days=offset):
            break
        streak += 1
    return streak
