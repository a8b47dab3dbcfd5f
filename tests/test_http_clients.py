"""Tests for HTTP-based adapters."""

import json
from uuid import uuid4

import httpx
import pytest

from nutriplan.adapters.webhook_event_sink import HttpxWebhookEventSink
from nutriplan.domain.events import DomainEvent, EventType


def _event() -> DomainEvent:
    return DomainEvent(
        type=EventType.MEAL_PLAN_ASSIGNED,
        user_id=uuid4(),
        title="New meal plan",
        message="Your nutritionist assigned you a plan.",
        related_id=uuid4(),
    )


def test_webhook_sink_posts_event() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/hooks/events"
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(204)

    transport = httpx.MockTransport(handler)
    sink = HttpxWebhookEventSink(
        url="https://hooks.example.com/hooks/events",
        http_client=httpx.Client(transport=transport),
    )
    event = _event()

    sink.publish(event)
    sink.close()

    assert seen[0]["type"] == "meal_plan_assigned"
    assert seen[0]["user_id"] == str(event.user_id)
    assert seen[0]["related_id"] == str(event.related_id)
    assert seen[0]["occurred_at"] == event.occurred_at.isoformat()


def test_webhook_sink_raises_on_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    sink = HttpxWebhookEventSink(
        url="https://hooks.example.com/events",
        http_client=httpx.Client(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        sink.publish(_event())
