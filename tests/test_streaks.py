"""Tests for the streak calculator."""

from datetime import date, timedelta

from nutriplan.services.streaks import compute_streak

TODAY = date(2026, 10, 14)


def _days_ago(*offsets: int) -> list[date]:
    return [TODAY - timedelta(days=offset) for offset in offsets]


def test_three_consecutive_days() -> None:
    assert compute_streak(_days_ago(0, 1, 2), TODAY) == 3


def test_nothing_logged_today_breaks_streak() -> None:
    assert compute_streak(_days_ago(1, 2), TODAY) == 0


def test_gap_stops_counting() -> None:
    assert compute_streak(_days_ago(0, 2), TODAY) == 1


def test_duplicates_and_order_do_not_matter() -> None:
    assert compute_streak(_days_ago(1, 0, 0, 2, 1), TODAY) == 3


def test_empty_history() -> None:
    assert compute_streak([], TODAY) == 0
