"""Callback surface between the board core and its presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..errors import BoardError
    from ..models import Board, Item


class BoardListener(Protocol):
    """Interface for whoever owns the board outside the core.

    The owner renders snapshots, opens edit dialogs and persists the board.
    ``on_board_changed`` fires after every committed mutation; the
    ``*_requested`` callbacks fire when the user asks for an action that
    needs a dialog or a confirmation before it can be dispatched.
    """

    def on_board_changed(self, board: Board) -> None:
        """A mutation was committed; ``board`` is the new snapshot."""
        ...

    def on_add_item_requested(self, column_id: str) -> None:
        """The user asked to add an item to a column."""
        ...

    def on_edit_item_requested(self, column_id: str, item: Item) -> None:
        """The user asked to edit an item."""
        ...

    def on_delete_item_requested(self, column_id: str, item_id: str) -> None:
        """The user asked to delete an item."""
        ...

    def on_add_column_requested(self) -> None:
        """The user asked to add a column."""
        ...

    def on_edit_column_requested(self, column_id: str, new_title: str) -> None:
        """The user submitted a new title for a column."""
        ...

    def on_delete_column_requested(self, column_id: str) -> None:
        """The user asked to delete a column."""
        ...

    def on_command_rejected(self, error: BoardError) -> None:
        """A command was refused and the board was left unchanged."""
        ...


class NullBoardListener:
    """Listener that ignores every callback.

    Subclass and override only the callbacks you need.
    """

    def on_board_changed(self, board: Board) -> None:
        pass

    def on_add_item_requested(self, column_id: str) -> None:
        pass

    def on_edit_item_requested(self, column_id: str, item: Item) -> None:
        pass

    def on_delete_item_requested(self, column_id: str, item_id: str) -> None:
        pass

    def on_add_column_requested(self) -> None:
        pass

    def on_edit_column_requested(self, column_id: str, new_title: str) -> None:
        pass

    def on_delete_column_requested(self, column_id: str) -> None:
        pass

    def on_command_rejected(self, error: BoardError) -> None:
        pass
