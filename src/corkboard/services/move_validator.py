"""Validation and application of drag-drop moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import BoardError, CapacityExceeded, ColumnNotFound, ItemNotFound
from ..models import Board, Move
from . import board_model

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Result of validating a move."""

    board: Board  # Resulting board, or the input board when rejected
    accepted: bool = True
    error: BoardError | None = None

    @property
    def rejected(self) -> bool:
        """Whether the move was refused."""
        return not self.accepted


class MoveValidator:
    """Decides whether a move is legal and produces the resulting board.

    Capacity is only checked when the item changes columns. A reorder inside
    a column leaves the item count as it is, so a full column can still be
    reordered.
    """

    def validate(self, board: Board, move: Move) -> MoveResult:
        """Validate ``move`` against ``board``.

        The total item count of the returned board always equals that of the
        input, whether the move is accepted or rejected.
        """
        if move.is_noop:
            return MoveResult(board=board)

        source = board_model.find_column(board, move.source_column_id)
        if source is None:
            return self._reject(board, ColumnNotFound(move.source_column_id))

        dest = board_model.find_column(board, move.dest_column_id)
        if dest is None:
            return self._reject(board, ColumnNotFound(move.dest_column_id))

        if not 0 <= move.source_index < len(source.items):
            return self._reject(
                board, ItemNotFound(source.id, f"#{move.source_index}")
            )

        if not move.is_same_column and dest.is_full:
            return self._reject(board, CapacityExceeded(dest.id, dest.limit or 0))

        item = source.items[move.source_index]
        result = board_model.remove_item(board, source.id, item.id)
        result = board_model.insert_item(result, dest.id, move.dest_index, item)

        logger.info(
            "Item moved: %s (%s[%d] -> %s[%d])",
            item.id,
            source.id,
            move.source_index,
            dest.id,
            move.dest_index,
        )
        return MoveResult(board=result)

    def _reject(self, board: Board, error: BoardError) -> MoveResult:
        logger.debug("Move rejected: %s", error)
        return MoveResult(board=board, accepted=False, error=error)


def apply_move(board: Board, move: Move) -> Board:
    """Apply a move, returning the input board unchanged if it is illegal."""
    return MoveValidator().validate(board, move).board
