"""Intent-level command API over the board model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import BoardError, CapacityExceeded, ColumnNotFound, ItemNotFound, ValidationError
from ..models import Board, Column, ColumnDraft, Item, ItemDraft, Move
from ..presentation.listener import NullBoardListener
from ..utils import COLUMN_PREFIX, ITEM_PREFIX, IdGenerator
from . import board_model
from .move_validator import MoveValidator

if TYPE_CHECKING:
    from ..presentation.listener import BoardListener

logger = logging.getLogger(__name__)

_COLUMN_META_FIELDS = ("title", "color", "limit")


@dataclass
class CommandResult:
    """Result of a dispatched command."""

    board: Board  # Current board after the command
    ok: bool = True
    error: BoardError | None = None
    created_id: str | None = None  # Id assigned to a newly created item or column

    @property
    def rejected(self) -> bool:
        """Whether the command was refused."""
        return not self.ok


class CommandDispatcher:
    """Translates user intents into board mutations.

    The dispatcher owns the current Board reference and is the only party
    that replaces it. After every committed change the listener receives the
    new snapshot through ``on_board_changed``; refused commands leave the
    board untouched and are reported through ``on_command_rejected``.
    """

    def __init__(
        self,
        board: Board | None = None,
        listener: BoardListener | None = None,
        ids: IdGenerator | None = None,
        validator: MoveValidator | None = None,
    ) -> None:
        self._board = board if board is not None else Board()
        self.listener: BoardListener = listener or NullBoardListener()
        self._ids = ids or IdGenerator()
        self._validator = validator or MoveValidator()
        self._last_error: BoardError | None = None

    @property
    def board(self) -> Board:
        """The current board snapshot."""
        return self._board

    @property
    def last_error(self) -> BoardError | None:
        """Error of the most recent refused command, if any."""
        return self._last_error

    def replace_board(self, board: Board) -> None:
        """Swap in a board supplied from outside (e.g. an external refresh).

        The listener is not notified since the caller already has this board.
        """
        logger.info("Board replaced (%d columns)", len(board.columns))
        self._board = board
        self._last_error = None

    # --- Items ---

    def move_item(self, move: Move) -> CommandResult:
        """Move an item between (or within) columns."""
        result = self._validator.validate(self._board, move)
        if result.error is not None:
            return self._reject(result.error)
        return self._commit(result.board)

    def save_item(self, column_id: str, draft: ItemDraft) -> CommandResult:
        """Create an item (draft without id) or update one (draft with id).

        Updates are partial: only fields set on the draft are overwritten.
        New items get a generated id and are appended to the column.
        """
        if (draft.is_new or "title" in draft.model_fields_set) and not draft.clean_title:
            return self._reject(ValidationError("title", "Item title cannot be empty"))

        if draft.is_new:
            return self._create_item(column_id, draft)
        return self._update_item(column_id, draft)

    def _create_item(self, column_id: str, draft: ItemDraft) -> CommandResult:
        column = board_model.find_column(self._board, column_id)
        if column is None:
            return self._reject(ColumnNotFound(column_id))
        if column.is_full:
            return self._reject(CapacityExceeded(column.id, column.limit or 0))

        item_id = self._ids.next_id(ITEM_PREFIX, set(self._board.item_ids))
        values = draft.changes()
        values.update(id=item_id, title=draft.clean_title)
        item = Item.model_validate(values)

        board = board_model.insert_item(self._board, column_id, len(column.items), item)
        logger.info("Item created: %s (column=%s)", item_id, column_id)
        return self._commit(board, created_id=item_id)

    def _update_item(self, column_id: str, draft: ItemDraft) -> CommandResult:
        item_id = draft.id or ""
        column = board_model.find_column(self._board, column_id)
        if column is None:
            return self._reject(ColumnNotFound(column_id))
        idx = column.index_of(item_id)
        if idx < 0:
            return self._reject(ItemNotFound(column_id, item_id))

        changes = draft.changes()
        if "title" in changes:
            changes["title"] = draft.clean_title
        current = column.items[idx]
        updated = Item.model_validate({**current.model_dump(), **changes})
        if updated.model_dump() == current.model_dump():
            logger.debug("save_item: no changes for %s", item_id)
            return self._commit(self._board)

        board = board_model.replace_item(self._board, column_id, item_id, updated)
        logger.info("Item updated: %s (%s)", item_id, ", ".join(sorted(changes)) or "no fields")
        return self._commit(board)

    def delete_item(self, column_id: str, item_id: str) -> CommandResult:
        """Delete an item. Deleting an item that is already gone is a no-op."""
        try:
            board = board_model.remove_item(self._board, column_id, item_id)
        except BoardError as e:
            return self._reject(e)
        if board is self._board:
            logger.debug("delete_item: item already absent: %s", item_id)
        else:
            logger.info("Item deleted: %s (column=%s)", item_id, column_id)
        return self._commit(board)

    # --- Columns ---

    def save_column(self, draft: ColumnDraft) -> CommandResult:
        """Create a column (draft without id) or update its title/color/limit."""
        if (draft.is_new or "title" in draft.model_fields_set) and not draft.clean_title:
            return self._reject(ValidationError("title", "Column title cannot be empty"))

        if draft.is_new:
            return self._create_column(draft)
        return self._update_column(draft)

    def _create_column(self, draft: ColumnDraft) -> CommandResult:
        column_id = self._ids.next_id(COLUMN_PREFIX, set(self._board.column_ids))
        column = Column(
            id=column_id,
            title=draft.clean_title,
            color=draft.color,
            limit=draft.limit,
        )
        board = board_model.insert_column(self._board, len(self._board.columns), column)
        logger.info("Column created: %s", column_id)
        return self._commit(board, created_id=column_id)

    def _update_column(self, draft: ColumnDraft) -> CommandResult:
        column_id = draft.id or ""
        column = board_model.find_column(self._board, column_id)
        if column is None:
            return self._reject(ColumnNotFound(column_id))

        meta: dict[str, Any] = {
            name: value
            for name, value in draft.changes().items()
            if name in _COLUMN_META_FIELDS
        }
        if "title" in meta:
            meta["title"] = draft.clean_title

        new_limit = meta.get("limit")
        if new_limit is not None and new_limit < len(column.items):
            return self._reject(
                ValidationError(
                    "limit",
                    f"Limit {new_limit} is below the {len(column.items)} items "
                    f"already in column {column_id}",
                )
            )

        board = board_model.replace_column_meta(self._board, column_id, **meta)
        logger.info("Column updated: %s (%s)", column_id, ", ".join(sorted(meta)) or "no fields")
        return self._commit(board)

    def rename_column(self, column_id: str, title: str) -> CommandResult:
        """Change only a column's title."""
        return self.save_column(ColumnDraft(id=column_id, title=title))

    def delete_column(self, column_id: str) -> CommandResult:
        """Delete a column and every item in it."""
        board = board_model.remove_column(self._board, column_id)
        if board is self._board:
            logger.debug("delete_column: column already absent: %s", column_id)
        else:
            logger.info("Column deleted: %s", column_id)
        return self._commit(board)

    # --- Internals ---

    def _commit(self, board: Board, created_id: str | None = None) -> CommandResult:
        self._last_error = None
        if board is not self._board:
            self._board = board
            self.listener.on_board_changed(board)
        return CommandResult(board=self._board, created_id=created_id)

    def _reject(self, error: BoardError) -> CommandResult:
        logger.info("Command rejected: %s", error)
        self._last_error = error
        self.listener.on_command_rejected(error)
        return CommandResult(board=self._board, ok=False, error=error)
