"""Item (card) domain model."""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    """Priority levels for items."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Assignee(BaseModel):
    """Person an item is assigned to."""

    id: str
    name: str
    avatar: str | None = None  # Image URL; renderers fall back to the initial

    model_config = {"frozen": True}

    @property
    def initial(self) -> str:
        """First character of the name, for avatar fallbacks."""
        return self.name[:1].upper()

    def to_config(self) -> dict:
        """Convert to a plain dict in board configuration shape."""
        data: dict = {"id": self.id, "name": self.name}
        if self.avatar:
            data["avatar"] = self.avatar
        return data


def _unique_tags(tags: tuple[str, ...]) -> tuple[str, ...]:
    """Drop duplicate tags, keeping first-seen order."""
    return tuple(dict.fromkeys(tags))


def date_to_str(value: Any) -> Any:
    """Accept date values already parsed by YAML, keeping the ISO string form."""
    if isinstance(value, date):
        return value.isoformat()
    return value


class Item(BaseModel):
    """A single card on the board.

    Items are immutable; updates go through ``model_copy`` so that older
    board snapshots keep referring to the previous values.
    """

    id: str = Field(..., min_length=1)
    title: str

    description: str | None = None
    priority: Priority | None = None
    due_date: str | None = Field(default=None, alias="dueDate")
    assignee: Assignee | None = None
    tags: tuple[str, ...] = ()

    # Counter badges shown on the card footer
    attachments: int | None = Field(default=None, ge=0)
    comments: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("due_date", mode="before")
    @classmethod
    def validate_due_date(cls, v: Any) -> Any:
        return date_to_str(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Tags behave as a set: duplicates are dropped."""
        return _unique_tags(v)

    def to_config(self) -> dict:
        """Convert to a plain dict, omitting unset optional fields."""
        data: dict = {"id": self.id, "title": self.title}
        if self.description is not None:
            data["description"] = self.description
        if self.priority is not None:
            data["priority"] = self.priority.value
        if self.due_date is not None:
            data["dueDate"] = self.due_date
        if self.assignee is not None:
            data["assignee"] = self.assignee.to_config()
        if self.tags:
            data["tags"] = list(self.tags)
        if self.attachments is not None:
            data["attachments"] = self.attachments
        if self.comments is not None:
            data["comments"] = self.comments
        return data
