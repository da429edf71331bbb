"""Tests for the drag gesture state machine."""

from unittest.mock import MagicMock

import pytest

from corkboard.errors import CapacityExceeded, DragStateError
from corkboard.models import Board, Column, Item
from corkboard.services import CommandDispatcher, DragSession, DragState


@pytest.fixture
def board() -> Board:
    return Board(
        columns=[
            Column(id="a", title="A", items=[Item(id="x", title="X"), Item(id="y", title="Y")]),
            Column(id="b", title="B", items=[Item(id="z", title="Z")], limit=2),
        ]
    )


@pytest.fixture
def listener() -> MagicMock:
    return MagicMock()


@pytest.fixture
def session(board: Board, listener: MagicMock) -> DragSession:
    return DragSession(CommandDispatcher(board, listener=listener))


class TestDragLifecycle:
    """Tests for state transitions."""

    def test_starts_idle(self, session: DragSession):
        assert session.state == DragState.IDLE
        assert not session.is_dragging

    def test_start_moves_to_dragging(self, session: DragSession):
        session.start("a", 0)
        assert session.state == DragState.DRAGGING
        assert session.source == ("a", 0)

    def test_over_tracks_target_without_changing_board(self, session, listener):
        session.start("a", 0)
        session.over("b", 1)

        assert session.target == ("b", 1)
        listener.on_board_changed.assert_not_called()

    def test_over_outside_clears_target(self, session: DragSession):
        session.start("a", 0)
        session.over(None)
        assert session.target is None

    def test_drop_commits_move(self, session, listener):
        session.start("a", 0)
        session.over("b", 0)
        result = session.drop("b", 0)

        assert result is not None and result.ok
        assert session.state == DragState.IDLE
        board = listener.on_board_changed.call_args.args[0]
        assert board.columns[1].item_ids == ["x", "z"]

    def test_drop_outside_is_cancel(self, session, listener):
        """Dropping outside any column never calls move_item."""
        session.start("a", 0)
        result = session.drop(None)

        assert result is None
        assert session.state == DragState.IDLE
        listener.on_board_changed.assert_not_called()
        listener.on_command_rejected.assert_not_called()

    def test_cancel(self, session, listener):
        session.start("a", 1)
        session.cancel()

        assert session.state == DragState.IDLE
        assert session.source is None
        listener.on_board_changed.assert_not_called()

    def test_cancel_when_idle_is_harmless(self, session: DragSession):
        session.cancel()
        assert session.state == DragState.IDLE

    def test_rejected_drop_returns_to_idle(self, board, listener):
        full = Board(
            columns=[
                board.columns[0],
                Column(id="b", title="B", items=[Item(id="z", title="Z")], limit=1),
            ]
        )
        session = DragSession(CommandDispatcher(full, listener=listener))

        session.start("a", 0)
        result = session.drop("b", 0)

        assert result is not None
        assert isinstance(result.error, CapacityExceeded)
        assert session.state == DragState.IDLE


class TestInvalidTransitions:
    """Events out of order raise DragStateError."""

    def test_double_start(self, session: DragSession):
        session.start("a", 0)
        with pytest.raises(DragStateError):
            session.start("a", 1)

    def test_over_when_idle(self, session: DragSession):
        with pytest.raises(DragStateError):
            session.over("a", 0)

    def test_drop_when_idle(self, session: DragSession):
        with pytest.raises(DragStateError):
            session.drop("a", 0)
