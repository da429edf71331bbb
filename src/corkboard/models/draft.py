"""Draft models submitted by edit dialogs.

Every field is optional. A draft without an ``id`` creates a new entity;
with an ``id`` it updates the existing one, touching only the fields that
were explicitly set on the draft.
"""

from typing import Any

from pydantic import BaseModel, Field, PositiveInt, field_validator

from .column import ColumnColor
from .item import Assignee, Priority, date_to_str


class _Draft(BaseModel):
    id: str | None = None
    title: str | None = None

    @property
    def is_new(self) -> bool:
        """True when the draft describes an entity that does not exist yet."""
        return self.id is None

    @property
    def clean_title(self) -> str:
        """Title with surrounding whitespace removed."""
        return (self.title or "").strip()

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set on the draft, excluding ``id``."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


class ItemDraft(_Draft):
    """Unvalidated item values collected by the item dialog."""

    description: str | None = None
    priority: Priority | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    assignee: Assignee | None = None
    tags: tuple[str, ...] = ()
    attachments: int | None = Field(default=None, ge=0)
    comments: int | None = Field(default=None, ge=0)

    model_config = {"populate_by_name": True}

    @field_validator("due_date", mode="before")
    @classmethod
    def validate_due_date(cls, v: Any) -> Any:
        return date_to_str(v)


class ColumnDraft(_Draft):
    """Unvalidated column values collected by the column dialog."""

    color: ColumnColor | None = None
    limit: PositiveInt | None = None
