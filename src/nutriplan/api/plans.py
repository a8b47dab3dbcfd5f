"""Meal plan endpoints for nutritionists and patients."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutriplan.api.auth import current_user_id, require_token
from nutriplan.api.schemas import (
    ApplyTemplateRequest,
    CopyDayRequest,
    CreatePlanRequest,
    PlanItemRequest,
    SaveAsTemplateRequest,
    dump,
)
from nutriplan.domain.plans import MealPlanDraft

if TYPE_CHECKING:
    from nutriplan.containers import AppContainer

router = APIRouter(
    prefix="/plans", tags=["plans"], dependencies=[Depends(require_token)]
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_plan(
    body: CreatePlanRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create a plan for a patient; the caller is the nutritionist."""
    container: AppContainer = request.app.state.container
    plan = container.schedule_service.create_plan(
        MealPlanDraft(
            patient_id=body.patient_id,
            nutritionist_id=user_id,
            title=body.title,
            description=body.description,
            start_date=body.start_date,
            end_date=body.end_date,
        )
    )
    return {"plan": dump(plan)}


@router.get("")
async def list_plans(
    request: Request,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """List a patient's plans (the caller's own by default)."""
    container: AppContainer = request.app.state.container
    plans = container.schedule_service.list_plans(patient_id or user_id)
    return {"plans": dump(plans)}


@router.get("/active")
async def active_plan(
    request: Request,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the plan the patient currently follows, if any."""
    container: AppContainer = request.app.state.container
    plan = container.schedule_service.active_plan(patient_id or user_id)
    return {"plan": dump(plan) if plan else None}


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(item_id: UUID, request: Request) -> None:
    """Delete one recurring meal."""
    container: AppContainer = request.app.state.container
    container.schedule_service.remove_item(item_id)


@router.get("/{plan_id}")
async def get_plan(plan_id: UUID, request: Request) -> dict[str, object]:
    """Return a plan with its full week."""
    container: AppContainer = request.app.state.container
    plan = container.schedule_service.get_plan(plan_id)
    week = container.schedule_service.list_week(plan_id)
    return {
        "plan": dump(plan),
        "week": {str(day): dump(items) for day, items in week.items()},
    }


@router.post("/{plan_id}/deactivate")
async def deactivate_plan(plan_id: UUID, request: Request) -> dict[str, object]:
    """Deactivate a plan."""
    container: AppContainer = request.app.state.container
    return {"plan": dump(container.schedule_service.deactivate_plan(plan_id))}


@router.post("/{plan_id}/items", status_code=status.HTTP_201_CREATED)
async def add_item(
    plan_id: UUID,
    body: PlanItemRequest,
    request: Request,
) -> dict[str, object]:
    """Add a recurring meal to a weekday."""
    container: AppContainer = request.app.state.container
    item = container.schedule_service.add_item(
        plan_id, body.day_of_week, body.to_content()
    )
    return {"item": dump(item)}


@router.get("/{plan_id}/days/{day_of_week}")
async def list_day(
    plan_id: UUID,
    day_of_week: int,
    request: Request,
) -> dict[str, object]:
    """Return one weekday's meals in time order."""
    container: AppContainer = request.app.state.container
    items = container.schedule_service.list_items_for_day(plan_id, day_of_week)
    return {"items": dump(items)}


@router.get("/{plan_id}/today")
async def today_menu(
    plan_id: UUID,
    request: Request,
    on: date | None = None,
) -> dict[str, object]:
    """Return the menu for a date's weekday."""
    container: AppContainer = request.app.state.container
    day = on or container.clock.today()
    items = container.schedule_service.resolve_today(plan_id, day)
    return {"date": day.isoformat(), "items": dump(items)}


@router.post("/{plan_id}/copy-day", status_code=status.HTTP_201_CREATED)
async def copy_day(
    plan_id: UUID,
    body: CopyDayRequest,
    request: Request,
) -> dict[str, object]:
    """Duplicate a weekday's meals onto another weekday."""
    container: AppContainer = request.app.state.container
    items = container.template_service.copy_day(plan_id, body.from_day, body.to_day)
    return {"items": dump(items)}


@router.post("/{plan_id}/apply-template", status_code=status.HTTP_201_CREATED)
async def apply_template(
    plan_id: UUID,
    body: ApplyTemplateRequest,
    request: Request,
) -> dict[str, object]:
    """Add a template's meals to a weekday."""
    container: AppContainer = request.app.state.container
    items = container.template_service.apply_template(
        body.template_id, plan_id, body.target_day
    )
    return {"items": dump(items)}


@router.post("/{plan_id}/save-as-template", status_code=status.HTTP_201_CREATED)
async def save_as_template(
    plan_id: UUID,
    body: SaveAsTemplateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Snapshot a weekday or the whole plan into a template."""
    container: AppContainer = request.app.state.container
    template = container.template_service.save_as_template(
        plan_id,
        user_id,
        body.name,
        description=body.description,
        category=body.category,
        source_day=body.source_day,
    )
    return {"template": dump(template)}
