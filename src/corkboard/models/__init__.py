"""Data models."""

from .board import Board
from .column import Column, ColumnColor
from .draft import ColumnDraft, ItemDraft
from .item import Assignee, Item, Priority
from .move import Move

__all__ = [
    "Assignee",
    "Board",
    "Column",
    "ColumnColor",
    "ColumnDraft",
    "Item",
    "ItemDraft",
    "Move",
    "Priority",
]
