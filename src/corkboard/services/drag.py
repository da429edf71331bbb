"""Drag gesture state machine.

A gesture arrives from the input layer as start, any number of "over"
events, then a drop or a cancel. Only the drop commits anything; it is
turned into a single ``move_item`` call on the dispatcher.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import DragStateError
from ..models import Move

if TYPE_CHECKING:
    from .dispatcher import CommandDispatcher, CommandResult

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    """States of a drag gesture."""

    IDLE = "idle"
    DRAGGING = "dragging"
    COMMITTING = "committing"


class DragSession:
    """Tracks one drag gesture at a time and commits it on drop."""

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self._dispatcher = dispatcher
        self.state = DragState.IDLE
        self.source: tuple[str, int] | None = None
        self.target: tuple[str, int] | None = None

    @property
    def is_dragging(self) -> bool:
        """Whether a gesture is in progress."""
        return self.state == DragState.DRAGGING

    def start(self, column_id: str, index: int) -> None:
        """Begin dragging the item at ``index`` of ``column_id``."""
        if self.state != DragState.IDLE:
            raise DragStateError(f"Cannot start a drag while {self.state.value}")
        self.state = DragState.DRAGGING
        self.source = (column_id, index)
        self.target = (column_id, index)
        logger.debug("Drag started: %s[%d]", column_id, index)

    def over(self, column_id: str | None, index: int = 0) -> None:
        """Record the slot currently hovered (None when outside any column)."""
        if self.state != DragState.DRAGGING:
            raise DragStateError(f"Cannot hover while {self.state.value}")
        self.target = (column_id, index) if column_id is not None else None

    def drop(self, column_id: str | None, index: int = 0) -> CommandResult | None:
        """Finish the gesture.

        A drop outside any column (``column_id`` is None) is a cancel: no
        move is dispatched and None is returned.
        """
        if self.state != DragState.DRAGGING or self.source is None:
            raise DragStateError(f"Cannot drop while {self.state.value}")

        if column_id is None:
            logger.debug("Drop outside any column, treated as cancel")
            self._reset()
            return None

        source_column_id, source_index = self.source
        move = Move(
            source_column_id=source_column_id,
            source_index=source_index,
            dest_column_id=column_id,
            dest_index=index,
        )
        self.state = DragState.COMMITTING
        try:
            return self._dispatcher.move_item(move)
        finally:
            self._reset()

    def cancel(self) -> None:
        """Abandon the gesture without touching the board."""
        if self.state == DragState.IDLE:
            return
        logger.debug("Drag cancelled")
        self._reset()

    def _reset(self) -> None:
        self.state = DragState.IDLE
        self.source = None
        self.target = None
