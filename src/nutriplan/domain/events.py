"""Domain events emitted to the outbound event sink."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID


class EventType(str, Enum):
    """Kinds of events the engine publishes."""

    MEAL_PLAN_ASSIGNED = "meal_plan_assigned"
    PROGRESS_LOGGED = "progress_logged"


@dataclass(frozen=True)
class DomainEvent:
    """Event addressed to one user."""

    type: EventType
    user_id: UUID
    title: str
    message: str
    related_id: UUID | None = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
