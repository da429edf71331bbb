"""Board state model."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, model_validator

from .column import Column

logger = logging.getLogger(__name__)


class Board(BaseModel):
    """Full board state: an ordered sequence of columns.

    A Board is an immutable snapshot. Column ids are unique within the
    board and item ids are unique across all of its columns.
    """

    columns: tuple[Column, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_ids(self) -> Board:
        """Validate column and item id uniqueness."""
        column_ids = [col.id for col in self.columns]
        if len(column_ids) != len(set(column_ids)):
            raise ValueError("Column IDs must be unique")

        item_ids = [item.id for col in self.columns for item in col.items]
        if len(item_ids) != len(set(item_ids)):
            raise ValueError("Item IDs must be unique across the board")

        return self

    @classmethod
    def from_config(cls, data: dict[str, Any] | None) -> Board:
        """Create a Board from configuration data (``{"columns": [...]}``)."""
        if not data:
            return cls()
        board = cls.model_validate(data)
        for col in board.columns:
            if col.over_limit:
                logger.warning(
                    "Column %s holds %d items, above its limit of %d",
                    col.id,
                    len(col.items),
                    col.limit,
                )
        return board

    @property
    def column_ids(self) -> list[str]:
        """List of column IDs in display order."""
        return [col.id for col in self.columns]

    @property
    def item_ids(self) -> list[str]:
        """All item IDs, column by column."""
        return [item.id for col in self.columns for item in col.items]

    @property
    def total_item_count(self) -> int:
        """Number of items across all columns."""
        return sum(len(col.items) for col in self.columns)

    def to_config(self) -> dict:
        """Convert to a plain dict in board configuration shape."""
        return {"columns": [col.to_config() for col in self.columns]}
