"""Clock abstraction so "today" can be pinned in tests."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Supplies the current local date."""

    def today(self) -> date:
        """Return today's date."""


@dataclass
class SystemClock(Clock):
    """Wall clock evaluated in a fixed timezone."""

    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()
