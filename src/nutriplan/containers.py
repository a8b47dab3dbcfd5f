"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from supabase import create_client

from nutriplan.adapters.supabase_completion_repository import (
    SupabaseCompletionRepository,
)
from nutriplan.adapters.supabase_notification_sink import SupabaseNotificationSink
from nutriplan.adapters.supabase_progress_repository import (
    SupabaseProgressRepository,
)
from nutriplan.adapters.supabase_schedule_repository import (
    SupabaseScheduleRepository,
)
from nutriplan.adapters.supabase_template_repository import (
    SupabaseTemplateRepository,
)
from nutriplan.adapters.supabase_water_repository import SupabaseWaterRepository
from nutriplan.adapters.webhook_event_sink import HttpxWebhookEventSink
from nutriplan.config import Settings
from nutriplan.services.clock import Clock, SystemClock
from nutriplan.services.completions import CompletionService
from nutriplan.services.events import EventPublisher, EventSink
from nutriplan.services.progress import ProgressService
from nutriplan.services.schedule import ScheduleService
from nutriplan.services.templates import TemplateService
from nutriplan.services.water import WaterService
from nutriplan.services.weekly import WeeklySummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    events: EventPublisher
    schedule_service: ScheduleService
    template_service: TemplateService
    completion_service: CompletionService
    water_service: WaterService
    progress_service: ProgressService
    weekly_service: WeeklySummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    schedule_repository = SupabaseScheduleRepository(supabase_client)
    template_repository = SupabaseTemplateRepository(supabase_client)
    completion_repository = SupabaseCompletionRepository(supabase_client)
    water_repository = SupabaseWaterRepository(supabase_client)
    progress_repository = SupabaseProgressRepository(supabase_client)

    webhook_sink: HttpxWebhookEventSink | None = None
    sink: EventSink
    if resolved_settings.event_webhook_url:
        webhook_sink = HttpxWebhookEventSink.create(resolved_settings.event_webhook_url)
        sink = webhook_sink
    else:
        sink = SupabaseNotificationSink(supabase_client)
    events = EventPublisher(
        sink=sink,
        executor=ThreadPoolExecutor(
            max_workers=resolved_settings.event_workers,
            thread_name_prefix="nutriplan-events",
        ),
    )
    clock = SystemClock(resolved_settings.timezone)

    schedule_service = ScheduleService(repository=schedule_repository, events=events)
    template_service = TemplateService(
        repository=template_repository,
        schedule_repository=schedule_repository,
    )
    completion_service = CompletionService(
        repository=completion_repository,
        schedule_service=schedule_service,
        retry_attempts=resolved_settings.read_retry_attempts,
        retry_delay_seconds=resolved_settings.read_retry_delay_seconds,
    )
    water_service = WaterService(
        repository=water_repository,
        default_goal_glasses=resolved_settings.default_water_goal,
    )
    progress_service = ProgressService(
        repository=progress_repository, events=events, clock=clock
    )
    weekly_service = WeeklySummaryService(
        schedule_repository=schedule_repository,
        completion_repository=completion_repository,
        water_repository=water_repository,
        clock=clock,
        default_goal_glasses=resolved_settings.default_water_goal,
        default_meals_per_day=resolved_settings.default_meals_per_day,
        reference_weekday=resolved_settings.reference_weekday,
        retry_attempts=resolved_settings.read_retry_attempts,
        retry_delay_seconds=resolved_settings.read_retry_delay_seconds,
    )

    async def close_resources() -> None:
        events.close()
        if webhook_sink is not None:
            webhook_sink.close()

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        events=events,
        schedule_service=schedule_service,
        template_service=template_service,
        completion_service=completion_service,
        water_service=water_service,
        progress_service=progress_service,
        weekly_service=weekly_service,
        close_resources=close_resources,
    )
