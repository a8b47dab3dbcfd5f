"""Event sink that stores events as in-app notifications."""

from dataclasses import dataclass

from supabase import Client

from nutriplan.adapters.supabase_support import execute
from nutriplan.domain.events import DomainEvent
from nutriplan.services.events import EventSink


@dataclass
class SupabaseNotificationSink(EventSink):
    """Writes each event as a row in the notifications table."""

    client: Client

    def publish(self, event: DomainEvent) -> None:
        """Insert a notification for the event's user."""
        execute(
            self.client.table("notifications").insert(
                {
                    "user_id": str(event.user_id),
                    "title": event.title,
                    "message": event.message,
                    "type": event.type.value,
                    "related_id": str(event.related_id) if event.related_id else None,
                }
            ),
            action="create notification",
        )
