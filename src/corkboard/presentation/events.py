"""Routing of UI events into the board core."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..services import board_model
from ..services.drag import DragSession

if TYPE_CHECKING:
    from ..models import ColumnDraft, ItemDraft
    from ..services.dispatcher import CommandDispatcher, CommandResult
    from .listener import BoardListener

logger = logging.getLogger(__name__)


def can_save(draft: ItemDraft | ColumnDraft) -> bool:
    """Whether a dialog's save button should be enabled."""
    return bool(draft.clean_title)


class BoardEvents:
    """Turns gestures, clicks and dialog submissions into core calls.

    Clicks that need a dialog or a confirmation are forwarded to the
    listener's ``*_requested`` callbacks. Submitted dialogs, confirmed
    deletions and drops go to the dispatcher.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        listener: BoardListener | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.listener = listener or dispatcher.listener
        self.drag = DragSession(dispatcher)

    # --- Clicks ---

    def add_item_clicked(self, column_id: str) -> None:
        self.listener.on_add_item_requested(column_id)

    def edit_item_clicked(self, column_id: str, item_id: str) -> None:
        column = board_model.find_column(self.dispatcher.board, column_id)
        idx = column.index_of(item_id) if column else -1
        if column is None or idx < 0:
            logger.debug("edit_item_clicked: item not found: %s", item_id)
            return
        self.listener.on_edit_item_requested(column_id, column.items[idx])

    def delete_item_clicked(self, column_id: str, item_id: str) -> None:
        self.listener.on_delete_item_requested(column_id, item_id)

    def add_column_clicked(self) -> None:
        self.listener.on_add_column_requested()

    def delete_column_clicked(self, column_id: str) -> None:
        self.listener.on_delete_column_requested(column_id)

    # --- Submissions ---

    def item_dialog_submitted(self, column_id: str, draft: ItemDraft) -> CommandResult:
        return self.dispatcher.save_item(column_id, draft)

    def column_dialog_submitted(self, draft: ColumnDraft) -> CommandResult:
        return self.dispatcher.save_column(draft)

    def column_title_submitted(self, column_id: str, title: str) -> CommandResult | None:
        """Inline column title edit. Blank titles are dropped silently."""
        if not title.strip():
            return None
        result = self.dispatcher.rename_column(column_id, title)
        if result.ok:
            self.listener.on_edit_column_requested(column_id, title)
        return result

    def delete_item_confirmed(self, column_id: str, item_id: str) -> CommandResult:
        return self.dispatcher.delete_item(column_id, item_id)

    def delete_column_confirmed(self, column_id: str) -> CommandResult:
        return self.dispatcher.delete_column(column_id)

    # --- Drag ---

    def drag_started(self, column_id: str, index: int) -> None:
        self.drag.start(column_id, index)

    def drag_over(self, column_id: str | None, index: int = 0) -> None:
        self.drag.over(column_id, index)

    def drag_ended(self, column_id: str | None, index: int = 0) -> CommandResult | None:
        return self.drag.drop(column_id, index)

    def drag_cancelled(self) -> None:
        self.drag.cancel()
