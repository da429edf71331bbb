"""Column domain model."""

from enum import Enum

from pydantic import BaseModel, Field, PositiveInt

from .item import Item


class ColumnColor(str, Enum):
    """Color tags a column can carry."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"


class Column(BaseModel):
    """An ordered, optionally capacity-limited list of items."""

    id: str = Field(..., min_length=1)
    title: str
    items: tuple[Item, ...] = ()
    color: ColumnColor | None = None
    limit: PositiveInt | None = None

    model_config = {"frozen": True}

    @property
    def item_ids(self) -> list[str]:
        """Item ids in display order."""
        return [item.id for item in self.items]

    @property
    def is_full(self) -> bool:
        """True when the column cannot accept another item."""
        return self.limit is not None and len(self.items) >= self.limit

    @property
    def over_limit(self) -> bool:
        """True when the column holds more items than its limit allows."""
        return self.limit is not None and len(self.items) > self.limit

    @property
    def count_label(self) -> str:
        """Header badge text, e.g. "2/3" for limited columns."""
        if self.limit is not None:
            return f"{len(self.items)}/{self.limit}"
        return str(len(self.items))

    def index_of(self, item_id: str) -> int:
        """Get position of an item in this column, or -1 if not found."""
        for idx, item in enumerate(self.items):
            if item.id == item_id:
                return idx
        return -1

    def to_config(self) -> dict:
        """Convert to a plain dict in board configuration shape."""
        data: dict = {
            "id": self.id,
            "title": self.title,
            "items": [item.to_config() for item in self.items],
        }
        if self.color is not None:
            data["color"] = self.color.value
        if self.limit is not None:
            data["limit"] = self.limit
        return data
