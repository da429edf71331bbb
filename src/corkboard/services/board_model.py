"""Pure structural queries and mutators for boards.

Every mutator takes a Board and returns a new Board; the input is never
modified. Unchanged columns and items are shared between the old and the
new snapshot, which is safe because all models are frozen.
"""

from __future__ import annotations

from typing import Any

from ..errors import ColumnNotFound, DuplicateId, ItemNotFound
from ..models import Board, Column, ColumnColor, Item

# Marks a metadata argument that was not passed (None means "clear")
UNSET: Any = object()


def _clamp(index: int, upper: int) -> int:
    return max(0, min(index, upper))


def _with_column(board: Board, index: int, column: Column) -> Board:
    columns = list(board.columns)
    columns[index] = column
    return board.model_copy(update={"columns": tuple(columns)})


def find_column(board: Board, column_id: str) -> Column | None:
    """Get a column by ID, or None if not found."""
    for col in board.columns:
        if col.id == column_id:
            return col
    return None


def find_column_index(board: Board, column_id: str) -> int:
    """Get position of a column on the board, or -1 if not found."""
    for idx, col in enumerate(board.columns):
        if col.id == column_id:
            return idx
    return -1


def _require_column(board: Board, column_id: str) -> int:
    idx = find_column_index(board, column_id)
    if idx < 0:
        raise ColumnNotFound(column_id)
    return idx


def locate_item(board: Board, item_id: str) -> tuple[str, int] | None:
    """Find which column holds an item.

    Returns:
        ``(column_id, index)`` or None if the item is not on the board.
    """
    for col in board.columns:
        idx = col.index_of(item_id)
        if idx >= 0:
            return col.id, idx
    return None


def total_item_count(board: Board) -> int:
    """Number of items across all columns."""
    return board.total_item_count


def insert_item(board: Board, column_id: str, index: int, item: Item) -> Board:
    """Insert an item at ``index`` in a column, clamping to the valid range.

    Raises:
        ColumnNotFound: the column does not exist.
        DuplicateId: the item id is already on the board.
    """
    col_idx = _require_column(board, column_id)
    if locate_item(board, item.id) is not None:
        raise DuplicateId("item", item.id)

    column = board.columns[col_idx]
    items = list(column.items)
    items.insert(_clamp(index, len(items)), item)
    return _with_column(board, col_idx, column.model_copy(update={"items": tuple(items)}))


def remove_item(board: Board, column_id: str, item_id: str) -> Board:
    """Remove an item from a column.

    Removal is idempotent: the same Board object is returned when the item
    is not in the column.

    Raises:
        ColumnNotFound: the column does not exist.
    """
    col_idx = _require_column(board, column_id)
    column = board.columns[col_idx]
    item_idx = column.index_of(item_id)
    if item_idx < 0:
        return board

    items = column.items[:item_idx] + column.items[item_idx + 1 :]
    return _with_column(board, col_idx, column.model_copy(update={"items": items}))


def replace_item(board: Board, column_id: str, item_id: str, updated: Item) -> Board:
    """Replace an item's fields, keeping its id and position.

    Raises:
        ColumnNotFound: the column does not exist.
        ItemNotFound: the item is not in the column.
    """
    col_idx = _require_column(board, column_id)
    column = board.columns[col_idx]
    item_idx = column.index_of(item_id)
    if item_idx < 0:
        raise ItemNotFound(column_id, item_id)

    if updated.id != item_id:
        updated = updated.model_copy(update={"id": item_id})

    items = list(column.items)
    items[item_idx] = updated
    return _with_column(board, col_idx, column.model_copy(update={"items": tuple(items)}))


def insert_column(board: Board, index: int, column: Column) -> Board:
    """Insert a column at ``index``, clamping to the valid range.

    Raises:
        DuplicateId: the column id, or an id of one of its items, is taken.
    """
    if find_column(board, column.id) is not None:
        raise DuplicateId("column", column.id)
    existing = set(board.item_ids)
    for item in column.items:
        if item.id in existing:
            raise DuplicateId("item", item.id)

    columns = list(board.columns)
    columns.insert(_clamp(index, len(columns)), column)
    return board.model_copy(update={"columns": tuple(columns)})


def remove_column(board: Board, column_id: str) -> Board:
    """Remove a column together with its items.

    Returns the same Board object when the column does not exist.
    """
    col_idx = find_column_index(board, column_id)
    if col_idx < 0:
        return board
    columns = board.columns[:col_idx] + board.columns[col_idx + 1 :]
    return board.model_copy(update={"columns": columns})


def replace_column_meta(
    board: Board,
    column_id: str,
    *,
    title: str = UNSET,
    color: ColumnColor | None = UNSET,
    limit: int | None = UNSET,
) -> Board:
    """Change a column's title, color or limit. Items are never touched.

    Only the keyword arguments that are passed are applied; passing None
    for ``color`` or ``limit`` clears it.

    Raises:
        ColumnNotFound: the column does not exist.
    """
    col_idx = _require_column(board, column_id)
    update: dict[str, Any] = {}
    if title is not UNSET:
        update["title"] = title
    if color is not UNSET:
        update["color"] = color
    if limit is not UNSET:
        update["limit"] = limit
    if not update:
        return board

    column = board.columns[col_idx]
    return _with_column(board, col_idx, column.model_copy(update=update))
