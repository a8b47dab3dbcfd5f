"""Supabase repository for meal templates."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from supabase import Client

from nutriplan.adapters.supabase_support import (
    MEAL_COLUMNS,
    content_from_row,
    content_to_row,
    creation_stamps,
    execute,
    first_row,
    parse_uuid,
)
from nutriplan.domain.plans import MealContent
from nutriplan.domain.templates import (
    MealTemplate,
    MealTemplateItem,
    TemplateCategory,
)
from nutriplan.services.templates import TemplateRepository

_TEMPLATE_COLUMNS = "id, nutritionist_id, name, description, category"
_ITEM_COLUMNS = f"id, meal_template_id, {MEAL_COLUMNS}"


@dataclass
class SupabaseTemplateRepository(TemplateRepository):
    """Supabase implementation for templates and template items."""

    client: Client

    def create_template(
        self,
        owner_id: UUID,
        name: str,
        description: str | None,
        category: TemplateCategory,
    ) -> MealTemplate:
        """Insert a template row."""
        row = first_row(
            self.client.table("meal_templates").insert(
                {
                    "nutritionist_id": str(owner_id),
                    "name": name,
                    "description": description,
                    "category": category.value,
                }
            ),
            action="create template",
        )
        return _parse_template(row)

    def get_template(self, template_id: UUID) -> MealTemplate | None:
        """Return a template by id."""
        rows = execute(
            self.client.table("meal_templates")
            .select(_TEMPLATE_COLUMNS)
            .eq("id", str(template_id))
            .limit(1),
            action="load template",
        )
        return _parse_template(rows[0]) if rows else None

    def list_templates(self, owner_id: UUID) -> list[MealTemplate]:
        """Return a nutritionist's templates, newest first."""
        rows = execute(
            self.client.table("meal_templates")
            .select(_TEMPLATE_COLUMNS)
            .eq("nutritionist_id", str(owner_id))
            .order("created_at", desc=True),
            action="list templates",
        )
        return [_parse_template(row) for row in rows]

    def delete_template(self, template_id: UUID) -> None:
        """Delete the template's items, then the template."""
        execute(
            self.client.table("meal_template_items")
            .delete()
            .eq("meal_template_id", str(template_id)),
            action="delete template items",
        )
        execute(
            self.client.table("meal_templates").delete().eq("id", str(template_id)),
            action="delete template",
        )

    def create_template_items(
        self, template_id: UUID, contents: list[MealContent]
    ) -> list[MealTemplateItem]:
        """Insert all template items with one request."""
        if not contents:
            return []
        payload = [
            {
                "meal_template_id": str(template_id),
                "created_at": created_at,
                **content_to_row(content),
            }
            for content, created_at in zip(
                contents, creation_stamps(len(contents)), strict=True
            )
        ]
        rows = execute(
            self.client.table("meal_template_items").insert(payload),
            action="create template items",
        )
        return [_parse_item(row) for row in rows]

    def get_template_item(self, item_id: UUID) -> MealTemplateItem | None:
        """Return a template item by id."""
        rows = execute(
            self.client.table("meal_template_items")
            .select(_ITEM_COLUMNS)
            .eq("id", str(item_id))
            .limit(1),
            action="load template item",
        )
        return _parse_item(rows[0]) if rows else None

    def list_template_items(self, template_id: UUID) -> list[MealTemplateItem]:
        """Return template items in creation order."""
        rows = execute(
            self.client.table("meal_template_items")
            .select(_ITEM_COLUMNS)
            .eq("meal_template_id", str(template_id))
            .order("created_at", desc=False),
            action="list template items",
        )
        return [_parse_item(row) for row in rows]

    def delete_template_item(self, item_id: UUID) -> None:
        """Delete a template item row."""
        execute(
            self.client.table("meal_template_items").delete().eq("id", str(item_id)),
            action="delete template item",
        )


def _parse_template(row: dict[str, Any]) -> MealTemplate:
    return MealTemplate(
        id=parse_uuid(row["id"]),
        owner_id=parse_uuid(row["nutritionist_id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        category=TemplateCategory(row.get("category") or TemplateCategory.FULL_DAY),
    )


def _parse_item(row: dict[str, Any]) -> MealTemplateItem:
    return MealTemplateItem(
        id=parse_uuid(row["id"]),
        template_id=parse_uuid(row["meal_template_id"]),
        content=content_from_row(row),
    )
