"""Tests for container wiring."""

import asyncio

from nutriplan.adapters.supabase_notification_sink import SupabaseNotificationSink
from nutriplan.adapters.webhook_event_sink import HttpxWebhookEventSink
from nutriplan.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.weekly_service.default_meals_per_day == 5
    assert container.water_service.default_goal_glasses == 8
    assert isinstance(container.events.sink, SupabaseNotificationSink)
    asyncio.run(container.close_resources())


def test_build_container_prefers_webhook_sink(settings) -> None:
    configured = settings.model_copy(
        update={"event_webhook_url": "https://hooks.example.com/events"}
    )

    container = build_container(configured)

    assert isinstance(container.events.sink, HttpxWebhookEventSink)
    asyncio.run(container.close_resources())
