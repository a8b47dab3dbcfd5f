"""Shared test fixtures."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from nutriplan.config import Settings
from nutriplan.containers import AppContainer
from nutriplan.domain.plans import MealPlan, MealPlanDraft
from nutriplan.services.completions import CompletionService
from nutriplan.services.events import EventPublisher
from nutriplan.services.progress import ProgressService
from nutriplan.services.schedule import ScheduleService
from nutriplan.services.templates import TemplateService
from nutriplan.services.water import WaterService
from nutriplan.services.weekly import WeeklySummaryService
from tests.fakes import (
    FixedClock,
    InMemoryCompletionRepository,
    InMemoryProgressRepository,
    InMemoryScheduleRepository,
    InMemoryTemplateRepository,
    InMemoryWaterRepository,
    RecordingEventSink,
)

# Wednesday
TODAY = date(2026, 10, 14)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def event_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def events(event_sink: RecordingEventSink) -> EventPublisher:
    return EventPublisher(sink=event_sink)


@pytest.fixture
def schedule_repository() -> InMemoryScheduleRepository:
    return InMemoryScheduleRepository()


@pytest.fixture
def template_repository() -> InMemoryTemplateRepository:
    return InMemoryTemplateRepository()


@pytest.fixture
def completion_repository() -> InMemoryCompletionRepository:
    return InMemoryCompletionRepository()


@pytest.fixture
def water_repository() -> InMemoryWaterRepository:
    return InMemoryWaterRepository()


@pytest.fixture
def progress_repository() -> InMemoryProgressRepository:
    return InMemoryProgressRepository()


@pytest.fixture
def schedule_service(
    schedule_repository: InMemoryScheduleRepository, events: EventPublisher
) -> ScheduleService:
    return ScheduleService(repository=schedule_repository, events=events)


@pytest.fixture
def template_service(
    template_repository: InMemoryTemplateRepository,
    schedule_repository: InMemoryScheduleRepository,
) -> TemplateService:
    return TemplateService(
        repository=template_repository, schedule_repository=schedule_repository
    )


@pytest.fixture
def completion_service(
    completion_repository: InMemoryCompletionRepository,
    schedule_service: ScheduleService,
) -> CompletionService:
    return CompletionService(
        repository=completion_repository,
        schedule_service=schedule_service,
        retry_delay_seconds=0,
    )


@pytest.fixture
def water_service(water_repository: InMemoryWaterRepository) -> WaterService:
    return WaterService(repository=water_repository)


@pytest.fixture
def progress_service(
    progress_repository: InMemoryProgressRepository,
    events: EventPublisher,
    clock: FixedClock,
) -> ProgressService:
    return ProgressService(repository=progress_repository, events=events, clock=clock)


@pytest.fixture
def weekly_service(
    schedule_repository: InMemoryScheduleRepository,
    completion_repository: InMemoryCompletionRepository,
    water_repository: InMemoryWaterRepository,
    clock: FixedClock,
) -> WeeklySummaryService:
    return WeeklySummaryService(
        schedule_repository=schedule_repository,
        completion_repository=completion_repository,
        water_repository=water_repository,
        clock=clock,
        retry_delay_seconds=0,
    )


@pytest.fixture
def patient_id() -> UUID:
    return uuid4()


@pytest.fixture
def nutritionist_id() -> UUID:
    return uuid4()


@pytest.fixture
def plan(
    schedule_service: ScheduleService, patient_id: UUID, nutritionist_id: UUID
) -> MealPlan:
    return schedule_service.create_plan(
        MealPlanDraft(
            patient_id=patient_id,
            nutritionist_id=nutritionist_id,
            title="Weight Loss Plan",
            start_date=date(2026, 10, 1),
            end_date=date(2026, 12, 31),
        )
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    clock: FixedClock,
    events: EventPublisher,
    schedule_service: ScheduleService,
    template_service: TemplateService,
    completion_service: CompletionService,
    water_service: WaterService,
    progress_service: ProgressService,
    weekly_service: WeeklySummaryService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
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
