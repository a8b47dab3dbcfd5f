"""In-memory fakes for repositories and collaborators."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

from nutriplan.domain.errors import ConflictError, StoreError
from nutriplan.domain.events import DomainEvent
from nutriplan.domain.plans import MealContent, MealPlan, MealPlanDraft, MealPlanItem
from nutriplan.domain.templates import (
    MealTemplate,
    MealTemplateItem,
    TemplateCategory,
)
from nutriplan.domain.tracking import (
    MealCompletion,
    PatientGoal,
    ProgressLog,
    ProgressLogDraft,
    WaterLog,
)
from nutriplan.services.clock import Clock
from nutriplan.services.completions import CompletionRepository
from nutriplan.services.events import EventSink
from nutriplan.services.progress import ProgressRepository
from nutriplan.services.schedule import ScheduleRepository
from nutriplan.services.templates import TemplateRepository
from nutriplan.services.water import WaterRepository


@dataclass
class FixedClock(Clock):
    """Clock pinned to a date."""

    current: date

    def today(self) -> date:
        return self.current


@dataclass
class RecordingEventSink(EventSink):
    """Event sink that keeps published events."""

    events: list[DomainEvent] = field(default_factory=list)
    fail: bool = False

    def publish(self, event: DomainEvent) -> None:
        if self.fail:
            raise RuntimeError("sink unavailable")
        self.events.append(event)


@dataclass
class InMemoryScheduleRepository(ScheduleRepository):
    """In-memory plan repository for tests."""

    plans: dict[UUID, MealPlan] = field(default_factory=dict)
    items: dict[UUID, MealPlanItem] = field(default_factory=dict)
    fail_item_inserts: bool = False
    insert_calls: int = 0

    def create_plan(self, draft: MealPlanDraft) -> MealPlan:
        plan = MealPlan(
            id=uuid4(),
            patient_id=draft.patient_id,
            nutritionist_id=draft.nutritionist_id,
            title=draft.title,
            description=draft.description,
            start_date=draft.start_date,
            end_date=draft.end_date,
            is_active=True,
        )
        self.plans[plan.id] = plan
        return plan

    def get_plan(self, plan_id: UUID) -> MealPlan | None:
        return self.plans.get(plan_id)

    def list_plans(self, patient_id: UUID) -> list[MealPlan]:
        owned = [plan for plan in self.plans.values() if plan.patient_id == patient_id]
        return list(reversed(owned))

    def get_active_plan(self, patient_id: UUID) -> MealPlan | None:
        for plan in self.list_plans(patient_id):
            if plan.is_active:
                return plan
        return None

    def set_plan_active(self, plan_id: UUID, is_active: bool) -> None:
        plan = self.plans[plan_id]
        self.plans[plan_id] = MealPlan(
            id=plan.id,
            patient_id=plan.patient_id,
            nutritionist_id=plan.nutritionist_id,
            title=plan.title,
            description=plan.description,
            start_date=plan.start_date,
            end_date=plan.end_date,
            is_active=is_active,
        )

    def create_items(
        self, plan_id: UUID, entries: list[tuple[int, MealContent]]
    ) -> list[MealPlanItem]:
        self.insert_calls += 1
        if self.fail_item_inserts:
            raise StoreError("Failed to create meal plan items")
        created = [
            MealPlanItem(id=uuid4(), plan_id=plan_id, day_of_week=day, content=content)
            for day, content in entries
        ]
        for item in created:
            self.items[item.id] = item
        return created

    def get_item(self, item_id: UUID) -> MealPlanItem | None:
        return self.items.get(item_id)

    def list_items(
        self, plan_id: UUID, day_of_week: int | None = None
    ) -> list[MealPlanItem]:
        return [
            item
            for item in self.items.values()
            if item.plan_id == plan_id
            and (day_of_week is None or item.day_of_week == day_of_week)
        ]

    def delete_item(self, item_id: UUID) -> None:
        self.items.pop(item_id, None)


@dataclass
class InMemoryTemplateRepository(TemplateRepository):
    """In-memory template repository for tests."""

    templates: dict[UUID, MealTemplate] = field(default_factory=dict)
    items: dict[UUID, MealTemplateItem] = field(default_factory=dict)
    fail_item_inserts: bool = False

    def create_template(
        self,
        owner_id: UUID,
        name: str,
        description: str | None,
        category: TemplateCategory,
    ) -> MealTemplate:
        template = MealTemplate(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            description=description,
            category=category,
        )
        self.templates[template.id] = template
        return template

    def get_template(self, template_id: UUID) -> MealTemplate | None:
        return self.templates.get(template_id)

    def list_templates(self, owner_id: UUID) -> list[MealTemplate]:
        owned = [t for t in self.templates.values() if t.owner_id == owner_id]
        return list(reversed(owned))

    def delete_template(self, template_id: UUID) -> None:
        self.templates.pop(template_id, None)
        for item_id in [
            item.id for item in self.items.values() if item.template_id == template_id
        ]:
            del self.items[item_id]

    def create_template_items(
        self, template_id: UUID, contents: list[MealContent]
    ) -> list[MealTemplateItem]:
        if self.fail_item_inserts:
            raise StoreError("Failed to create template items")
        created = [
            MealTemplateItem(id=uuid4(), template_id=template_id, content=content)
            for content in contents
        ]
        for item in created:
            self.items[item.id] = item
        return created

    def get_template_item(self, item_id: UUID) -> MealTemplateItem | None:
        return self.items.get(item_id)

    def list_template_items(self, template_id: UUID) -> list[MealTemplateItem]:
        return [item for item in self.items.values() if item.template_id == template_id]

    def delete_template_item(self, item_id: UUID) -> None:
        self.items.pop(item_id, None)


@dataclass
class InMemoryCompletionRepository(CompletionRepository):
    """In-memory completions enforcing the (patient, item, date) constraint."""

    rows: dict[tuple[UUID, UUID, date], MealCompletion] = field(default_factory=dict)
    hide_from_reads: bool = False
    list_failures: int = 0
    list_calls: int = 0

    def get_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion | None:
        if self.hide_from_reads:
            return None
        return self.rows.get((patient_id, item_id, completed_date))

    def create_completion(
        self, patient_id: UUID, item_id: UUID, completed_date: date
    ) -> MealCompletion:
        key = (patient_id, item_id, completed_date)
        if key in self.rows:
            raise ConflictError("Duplicate row while trying to create meal completion")
        completion = MealCompletion(
            id=uuid4(),
            patient_id=patient_id,
            item_id=item_id,
            completed_date=completed_date,
        )
        self.rows[key] = completion
        return completion

    def delete_completion(self, completion_id: UUID) -> None:
        for key, completion in list(self.rows.items()):
            if completion.id == completion_id:
                del self.rows[key]

    def list_completions(
        self, patient_id: UUID, start: date, end: date
    ) -> list[MealCompletion]:
        self.list_calls += 1
        if self.list_failures > 0:
            self.list_failures -= 1
            raise StoreError("Failed to list meal completions")
        return [
            completion
            for (owner, _, day), completion in self.rows.items()
            if owner == patient_id and start <= day <= end
        ]


@dataclass
class InMemoryWaterRepository(WaterRepository):
    """In-memory water logs unique per (patient, date)."""

    logs: dict[tuple[UUID, date], WaterLog] = field(default_factory=dict)

    def get_log(self, patient_id: UUID, log_date: date) -> WaterLog | None:
        return self.logs.get((patient_id, log_date))

    def create_log(
        self, patient_id: UUID, log_date: date, glasses_count: int, goal_glasses: int
    ) -> WaterLog:
        key = (patient_id, log_date)
        if key in self.logs:
            raise ConflictError("Duplicate row while trying to create water log")
        log = WaterLog(
            id=uuid4(),
            patient_id=patient_id,
            log_date=log_date,
            glasses_count=glasses_count,
            goal_glasses=goal_glasses,
        )
        self.logs[key] = log
        return log

    def update_count(self, log_id: UUID, glasses_count: int) -> WaterLog:
        for key, log in self.logs.items():
            if log.id == log_id:
                updated = WaterLog(
                    id=log.id,
                    patient_id=log.patient_id,
                    log_date=log.log_date,
                    glasses_count=glasses_count,
                    goal_glasses=log.goal_glasses,
                )
                self.logs[key] = updated
                return updated
        raise StoreError("Failed to update water log")

    def list_logs(self, patient_id: UUID, start: date, end: date) -> list[WaterLog]:
        return [
            log
            for (owner, day), log in self.logs.items()
            if owner == patient_id and start <= day <= end
        ]


@dataclass
class InMemoryProgressRepository(ProgressRepository):
    """In-memory progress logs for tests."""

    logs: list[ProgressLog] = field(default_factory=list)
    goals: dict[UUID, PatientGoal] = field(default_factory=dict)

    def create_log(self, patient_id: UUID, draft: ProgressLogDraft) -> ProgressLog:
        log = ProgressLog(
            id=uuid4(),
            patient_id=patient_id,
            log_date=draft.log_date,
            weight=draft.weight,
            energy_level=draft.energy_level,
            mood=draft.mood,
            notes=draft.notes,
        )
        self.logs.append(log)
        return log

    def list_logs(self, patient_id: UUID, limit: int | None = None) -> list[ProgressLog]:
        owned = sorted(
            (log for log in self.logs if log.patient_id == patient_id),
            key=lambda log: log.log_date,
            reverse=True,
        )
        return owned if limit is None else owned[:limit]

    def list_log_dates(self, patient_id: UUID) -> list[date]:
        return [log.log_date for log in self.list_logs(patient_id)]

    def get_patient_goal(self, patient_id: UUID) -> PatientGoal | None:
        return self.goals.get(patient_id)
