"""Drag-drop move models."""

from pydantic import BaseModel


class Move(BaseModel):
    """Relocation of one item from a (column, index) slot to another.

    ``dest_index`` refers to the destination list as it looks after the
    item has been taken out of its source position.
    """

    source_column_id: str
    source_index: int
    dest_column_id: str
    dest_index: int

    model_config = {"frozen": True}

    @property
    def is_same_column(self) -> bool:
        """True for a reorder within one column."""
        return self.source_column_id == self.dest_column_id

    @property
    def is_noop(self) -> bool:
        """True when the item is dropped back onto its own slot."""
        return self.is_same_column and self.source_index == self.dest_index
