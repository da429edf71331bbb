"""Contract between the board core and its presentation layer."""

from .events import BoardEvents, can_save
from .listener import BoardListener, NullBoardListener
from .render import (
    BoardView,
    CardView,
    ColumnStyle,
    ColumnView,
    column_style,
    placeholder_board,
    priority_label,
)

__all__ = [
    "BoardEvents",
    "BoardListener",
    "BoardView",
    "CardView",
    "ColumnStyle",
    "ColumnView",
    "NullBoardListener",
    "can_save",
    "column_style",
    "placeholder_board",
    "priority_label",
]
