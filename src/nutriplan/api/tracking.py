"""Patient adherence endpoints: completions, water, progress and summaries."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutriplan.api.auth import current_user_id, require_token
from nutriplan.api.schemas import (
    ProgressLogRequest,
    ToggleCompletionRequest,
    WaterRequest,
    dump,
    dump_water,
)
from nutriplan.domain.tracking import ProgressLogDraft

if TYPE_CHECKING:
    from nutriplan.containers import AppContainer

router = APIRouter(
    prefix="/tracking", tags=["tracking"], dependencies=[Depends(require_token)]
)


@router.post("/completions/toggle")
async def toggle_completion(
    body: ToggleCompletionRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Flip a meal's completion for a date."""
    container: AppContainer = request.app.state.container
    day = body.completed_date or container.clock.today()
    completed = container.completion_service.toggle_completion(
        user_id, body.item_id, day
    )
    return {"item_id": str(body.item_id), "date": day.isoformat(), "completed": completed}


@router.get("/daily")
async def daily_progress(
    plan_id: UUID,
    request: Request,
    on: date | None = None,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the day's checklist."""
    container: AppContainer = request.app.state.container
    progress = container.completion_service.daily_progress(
        patient_id or user_id, plan_id, on or container.clock.today()
    )
    return {"progress": dump(progress)}


@router.get("/water")
async def water_status(
    request: Request,
    on: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the water counter for a date."""
    container: AppContainer = request.app.state.container
    water = container.water_service.get_daily_status(
        user_id, on or container.clock.today()
    )
    return {"water": dump_water(water)}


@router.post("/water/increment")
async def water_increment(
    body: WaterRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Add a glass."""
    container: AppContainer = request.app.state.container
    water = container.water_service.increment(
        user_id, body.log_date or container.clock.today()
    )
    return {"water": dump_water(water)}


@router.post("/water/decrement")
async def water_decrement(
    body: WaterRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Remove a glass."""
    container: AppContainer = request.app.state.container
    water = container.water_service.decrement(
        user_id, body.log_date or container.clock.today()
    )
    return {"water": dump_water(water)}


@router.get("/weekly")
async def weekly_summary(
    request: Request,
    on: date | None = None,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the week's adherence summary."""
    container: AppContainer = request.app.state.container
    summary = container.weekly_service.compute_week(patient_id or user_id, on)
    return {"summary": dump(summary)}


@router.post("/progress", status_code=status.HTTP_201_CREATED)
async def record_progress(
    body: ProgressLogRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Record a daily check-in."""
    container: AppContainer = request.app.state.container
    log = container.progress_service.record(
        user_id,
        ProgressLogDraft(
            log_date=body.log_date or container.clock.today(),
            weight=body.weight,
            energy_level=body.energy_level,
            mood=body.mood or None,
            notes=body.notes or None,
        ),
    )
    return {"log": dump(log)}


@router.get("/progress")
async def list_progress(
    request: Request,
    limit: int | None = None,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return recent check-ins."""
    container: AppContainer = request.app.state.container
    logs = container.progress_service.list_logs(patient_id or user_id, limit)
    return {"logs": dump(logs)}


@router.get("/progress/weight-trend")
async def weight_trend(
    request: Request,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return logged weights oldest first."""
    container: AppContainer = request.app.state.container
    points = container.progress_service.weight_trend(patient_id or user_id)
    return {"points": dump(points)}


@router.get("/progress/goal")
async def goal_progress(
    request: Request,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return progress toward the target weight."""
    container: AppContainer = request.app.state.container
    return {"goal": dump(container.progress_service.goal_progress(patient_id or user_id))}


@router.get("/streak")
async def streak(
    request: Request,
    patient_id: UUID | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the consecutive-day logging streak."""
    container: AppContainer = request.app.state.container
    return {"streak": container.progress_service.current_streak(patient_id or user_id)}
