"""Meal template endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutriplan.api.auth import current_user_id, require_token
from nutriplan.api.schemas import CreateTemplateRequest, MealContentRequest, dump

if TYPE_CHECKING:
    from nutriplan.containers import AppContainer

router = APIRouter(
    prefix="/templates", tags=["templates"], dependencies=[Depends(require_token)]
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_template(
    body: CreateTemplateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create an empty template owned by the caller."""
    container: AppContainer = request.app.state.container
    template = container.template_service.create_template(
        user_id, body.name, body.description, body.category
    )
    return {"template": dump(template)}


@router.get("")
async def list_templates(
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """List the caller's templates."""
    container: AppContainer = request.app.state.container
    return {"templates": dump(container.template_service.list_templates(user_id))}


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_template_item(item_id: UUID, request: Request) -> None:
    """Delete a meal from a template."""
    container: AppContainer = request.app.state.container
    container.template_service.remove_template_item(item_id)


@router.get("/{template_id}")
async def get_template(template_id: UUID, request: Request) -> dict[str, object]:
    """Return a template with its meals."""
    container: AppContainer = request.app.state.container
    template = container.template_service.get_template(template_id)
    items = container.template_service.list_template_items(template_id)
    return {"template": dump(template), "items": dump(items)}


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(template_id: UUID, request: Request) -> None:
    """Delete a template."""
    container: AppContainer = request.app.state.container
    container.template_service.delete_template(template_id)


@router.post("/{template_id}/items", status_code=status.HTTP_201_CREATED)
async def add_template_item(
    template_id: UUID,
    body: MealContentRequest,
    request: Request,
) -> dict[str, object]:
    """Add a meal to a template."""
    container: AppContainer = request.app.state.container
    item = container.template_service.add_template_item(
        template_id, body.to_content()
    )
    return {"item": dump(item)}
