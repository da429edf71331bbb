"""Exceptions raised by board operations."""


class BoardError(Exception):
    """Base exception for board errors."""

    pass


class ColumnNotFound(BoardError):
    """A column id does not exist on the board."""

    def __init__(self, column_id: str) -> None:
        super().__init__(f"Column not found: {column_id}")
        self.column_id = column_id


class ItemNotFound(BoardError):
    """An item id (or position) does not exist in a column."""

    def __init__(self, column_id: str, item_id: str) -> None:
        super().__init__(f"Item not found: {item_id} (column {column_id})")
        self.column_id = column_id
        self.item_id = item_id


class DuplicateId(BoardError):
    """An id is already used elsewhere on the board."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"Duplicate {kind} id: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class CapacityExceeded(BoardError):
    """A column is already holding its maximum number of items."""

    def __init__(self, column_id: str, limit: int) -> None:
        super().__init__(f"Column {column_id} is full (limit {limit})")
        self.column_id = column_id
        self.limit = limit


class ValidationError(BoardError):
    """Draft values were rejected before reaching the board."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class DragStateError(BoardError):
    """A drag event arrived in a state that cannot handle it."""

    pass


class BoardStoreError(BoardError):
    """A board file could not be read."""

    pass
