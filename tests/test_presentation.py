"""Tests for the presentation contract: listener, events and render projection."""

from unittest.mock import MagicMock

import pytest

from corkboard.models import Assignee, Board, Column, ColumnDraft, Item, ItemDraft
from corkboard.presentation import (
    BoardEvents,
    BoardView,
    NullBoardListener,
    can_save,
    column_style,
    placeholder_board,
    priority_label,
)
from corkboard.presentation.render import DEFAULT_STYLE
from corkboard.services import CommandDispatcher


@pytest.fixture
def board() -> Board:
    return Board(
        columns=[
            Column(
                id="todo",
                title="To Do",
                color="red",
                limit=3,
                items=[
                    Item(
                        id="item-1",
                        title="Design",
                        priority="high",
                        assignee=Assignee(id="u1", name="alex"),
                        tags=["ui"],
                    )
                ],
            ),
            Column(id="done", title="Done"),
        ]
    )


@pytest.fixture
def listener() -> MagicMock:
    return MagicMock()


@pytest.fixture
def events(board: Board, listener: MagicMock) -> BoardEvents:
    return BoardEvents(CommandDispatcher(board, listener=listener))


class TestNullBoardListener:
    """The default listener accepts every callback."""

    def test_all_callbacks_are_noops(self, board: Board):
        listener = NullBoardListener()
        listener.on_board_changed(board)
        listener.on_add_item_requested("todo")
        listener.on_edit_item_requested("todo", board.columns[0].items[0])
        listener.on_delete_item_requested("todo", "item-1")
        listener.on_add_column_requested()
        listener.on_edit_column_requested("todo", "New")
        listener.on_delete_column_requested("todo")


class TestBoardEvents:
    """Tests for UI event routing."""

    def test_clicks_forward_to_listener(self, events, listener):
        events.add_item_clicked("todo")
        events.delete_item_clicked("todo", "item-1")
        events.add_column_clicked()
        events.delete_column_clicked("done")

        listener.on_add_item_requested.assert_called_once_with("todo")
        listener.on_delete_item_requested.assert_called_once_with("todo", "item-1")
        listener.on_add_column_requested.assert_called_once_with()
        listener.on_delete_column_requested.assert_called_once_with("done")
        listener.on_board_changed.assert_not_called()

    def test_edit_click_passes_current_item(self, events, listener, board):
        events.edit_item_clicked("todo", "item-1")
        listener.on_edit_item_requested.assert_called_once_with("todo", board.columns[0].items[0])

    def test_edit_click_on_missing_item_ignored(self, events, listener):
        events.edit_item_clicked("todo", "nope")
        listener.on_edit_item_requested.assert_not_called()

    def test_item_dialog_submission_saves(self, events, listener):
        result = events.item_dialog_submitted("done", ItemDraft(title="Ship"))

        assert result.ok
        listener.on_board_changed.assert_called_once()
        assert events.dispatcher.board.columns[1].items[0].title == "Ship"

    def test_column_dialog_submission_saves(self, events):
        result = events.column_dialog_submitted(ColumnDraft(title="Review"))
        assert result.created_id is not None

    def test_column_title_submitted(self, events, listener):
        result = events.column_title_submitted("done", "Finished")

        assert result is not None and result.ok
        listener.on_edit_column_requested.assert_called_once_with("done", "Finished")
        assert events.dispatcher.board.columns[1].title == "Finished"

    def test_rejected_column_title_not_announced(self, events, listener):
        result = events.column_title_submitted("missing", "Finished")

        assert result is not None and result.rejected
        listener.on_edit_column_requested.assert_not_called()
        listener.on_command_rejected.assert_called_once_with(result.error)

    def test_blank_column_title_dropped(self, events, listener):
        assert events.column_title_submitted("done", "   ") is None
        listener.on_edit_column_requested.assert_not_called()
        listener.on_board_changed.assert_not_called()

    def test_confirmed_deletes(self, events):
        events.delete_item_confirmed("todo", "item-1")
        events.delete_column_confirmed("done")
        assert events.dispatcher.board.item_ids == []
        assert events.dispatcher.board.column_ids == ["todo"]

    def test_drag_gesture(self, events):
        events.drag_started("todo", 0)
        events.drag_over("done", 0)
        result = events.drag_ended("done", 0)

        assert result is not None and result.ok
        assert events.dispatcher.board.columns[1].item_ids == ["item-1"]

    def test_drag_cancelled(self, events, board):
        events.drag_started("todo", 0)
        events.drag_cancelled()
        assert events.dispatcher.board is board

    def test_can_save(self):
        """Save is enabled only for a non-blank title."""
        assert can_save(ItemDraft(title="Ok"))
        assert not can_save(ItemDraft(title="  "))
        assert not can_save(ColumnDraft())


class TestRender:
    """Tests for the render projection."""

    def test_board_view(self, board: Board):
        view = BoardView.from_board(board)

        assert not view.loading
        todo, done = view.columns
        assert todo.count_label == "1/3"
        assert todo.style.background == "red-50"
        assert done.style == DEFAULT_STYLE

        card = todo.cards[0]
        assert card.priority == "High"
        assert card.assignee_initial == "A"
        assert card.tags == ("ui",)

    def test_loading_shows_placeholders(self, board: Board):
        """The loading flag ignores the board entirely."""
        view = BoardView.from_board(board, loading=True)
        assert view.loading
        assert all(col.placeholder for col in view.columns)

    def test_no_board_shows_placeholders(self):
        assert BoardView.from_board(None).loading

    def test_placeholder_shape(self):
        """Column n (from 1) holds n + 1 placeholder cards."""
        view = placeholder_board()
        assert [len(col.cards) for col in view.columns] == [2, 3, 4]

    def test_placeholder_column_count(self):
        assert len(placeholder_board(5).columns) == 5

    def test_column_style_default(self):
        assert column_style(None) == DEFAULT_STYLE

    def test_priority_label(self):
        assert priority_label(None) is None
        assert priority_label("low") == "Low"
