"""Event sink that posts events to an HTTP webhook."""

from dataclasses import dataclass

import httpx

from nutriplan.domain.events import DomainEvent
from nutriplan.services.events import EventSink


@dataclass
class HttpxWebhookEventSink(EventSink):
    """Webhook sink implemented with httpx."""

    url: str
    http_client: httpx.Client

    @classmethod
    def create(cls, url: str) -> "HttpxWebhookEventSink":
        """Create a sink with a managed httpx session."""
        return cls(url=url, http_client=httpx.Client())

    def publish(self, event: DomainEvent) -> None:
        """POST the event as JSON."""
        payload: dict[str, object] = {
            "type": event.type.value,
            "user_id": str(event.user_id),
            "title": event.title,
            "message": event.message,
            "related_id": str(event.related_id) if event.related_id else None,
            "occurred_at": event.occurred_at.isoformat(),
        }
        response = self.http_client.post(self.url, json=payload, timeout=10)
        response.raise_for_status()

    def close(self) -> None:
        """Close the underlying HTTP client session."""
        self.http_client.close()
