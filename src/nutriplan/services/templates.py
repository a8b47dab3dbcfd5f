"""Template engine: reusable meal bundles applied to and saved from plans."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutriplan.domain.errors import NotFoundError, StoreError, ValidationError
from nutriplan.domain.plans import DAY_NAMES, MealContent, MealPlanItem
from nutriplan.domain.templates import (
    MealTemplate,
    MealTemplateItem,
    TemplateCategory,
)
from nutriplan.services.schedule import (
    ScheduleRepository,
    validate_content,
    validate_day,
)

_logger = logging.getLogger(__name__)


class TemplateRepository(Protocol):
    """Persistence interface for templates and their items."""

    def create_template(
        self,
        owner_id: UUID,
        name: str,
        description: str | None,
        category: TemplateCategory,
    ) -> MealTemplate:
        """Create a template and return it."""

    def get_template(self, template_id: UUID) -> MealTemplate | None:
        """Return a template by id, if present."""

    def list_templates(self, owner_id: UUID) -> list[MealTemplate]:
        """Return templates owned by a nutritionist, newest first."""

    def delete_template(self, template_id: UUID) -> None:
        """Delete a template and its items."""

    def create_template_items(
        self, template_id: UUID, contents: list[MealContent]
    ) -> list[MealTemplateItem]:
        """Insert template items in a single atomic call."""

    def get_template_item(self, item_id: UUID) -> MealTemplateItem | None:
        """Return a template item by id, if present."""

    def list_template_items(self, template_id: UUID) -> list[MealTemplateItem]:
        """Return a template's items in insertion order."""

    def delete_template_item(self, item_id: UUID) -> None:
        """Delete a template item."""


@dataclass
class TemplateService:
    """Creates templates and copies meals between templates and plans."""

    repository: TemplateRepository
    schedule_repository: ScheduleRepository

    def create_template(
        self,
        owner_id: UUID,
        name: str,
        description: str | None = None,
        category: TemplateCategory = TemplateCategory.FULL_DAY,
    ) -> MealTemplate:
        """Create an empty template."""
        if not name.strip():
            raise ValidationError("Please enter a template name")
        return self.repository.create_template(
            owner_id, name.strip(), description or None, category
        )

    def get_template(self, template_id: UUID) -> MealTemplate:
        """Return a template or raise NotFoundError."""
        template = self.repository.get_template(template_id)
        if template is None:
            raise NotFoundError("Template not found")
        return template

    def list_templates(self, owner_id: UUID) -> list[MealTemplate]:
        """Return a nutritionist's templates."""
        return self.repository.list_templates(owner_id)

    def delete_template(self, template_id: UUID) -> None:
        """Delete a template; previously applied plan items are unaffected."""
        self.get_template(template_id)
        self.repository.delete_template(template_id)

    def add_template_item(
        self, template_id: UUID, content: MealContent
    ) -> MealTemplateItem:
        """Add a meal to a template."""
        validate_content(content)
        self.get_template(template_id)
        return self.repository.create_template_items(template_id, [content])[0]

    def list_template_items(self, template_id: UUID) -> list[MealTemplateItem]:
        """Return the meals of a template."""
        self.get_template(template_id)
        return self.repository.list_template_items(template_id)

    def remove_template_item(self, item_id: UUID) -> None:
        """Delete a meal from a template."""
        if self.repository.get_template_item(item_id) is None:
            raise NotFoundError("Template meal not found")
        self.repository.delete_template_item(item_id)

    def apply_template(
        self, template_id: UUID, plan_id: UUID, target_day: int
    ) -> list[MealPlanItem]:
        """Clone every template meal onto a weekday of the plan."""
        validate_day(target_day)
        self.get_template(template_id)
        self._require_plan(plan_id)
        items = self.repository.list_template_items(template_id)
        if not items:
            raise ValidationError("This template has no meals")
        created = self.schedule_repository.create_items(
            plan_id, [(target_day, item.content) for item in items]
        )
        _logger.info(
            "Applied template %s to plan %s on %s (%s meals)",
            template_id,
            plan_id,
            DAY_NAMES[target_day],
            len(created),
        )
        return created

    def save_as_template(  # noqa: PLR0913
        self,
        plan_id: UUID,
        owner_id: UUID,
        name: str,
        description: str | None = None,
        category: TemplateCategory = TemplateCategory.FULL_DAY,
        source_day: int | None = None,
    ) -> MealTemplate:
        """Snapshot one weekday, or the whole plan, into a new template."""
        if not name.strip():
            raise ValidationError("Please enter a template name")
        if source_day is not None:
            validate_day(source_day)
        self._require_plan(plan_id)
        source = self.schedule_repository.list_items(plan_id, source_day)
        if not source:
            raise ValidationError("No meals found to save")

        template = self.repository.create_template(
            owner_id, name.strip(), description or None, category
        )
        try:
            self.repository.create_template_items(
                template.id, [item.content for item in source]
            )
        except StoreError:
            _logger.warning(
                "Rolling back template %s after failed item insert", template.id
            )
            self.repository.delete_template(template.id)
            raise
        _logger.info(
            "Saved %s meals from plan %s into template %s",
            len(source),
            plan_id,
            template.id,
        )
        return template

    def copy_day(
        self, plan_id: UUID, from_day: int, to_day: int
    ) -> list[MealPlanItem]:
        """Duplicate a weekday's meals onto another weekday as new items."""
        validate_day(from_day)
        validate_day(to_day)
        self._require_plan(plan_id)
        source = self.schedule_repository.list_items(plan_id, from_day)
        if not source:
            raise ValidationError("No meals to copy from this day")
        return self.schedule_repository.create_items(
            plan_id, [(to_day, item.content) for item in source]
        )

    def _require_plan(self, plan_id: UUID) -> None:
        if self.schedule_repository.get_plan(plan_id) is None:
            raise NotFoundError("Meal plan not found")
