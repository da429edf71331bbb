"""Read-only projection of board snapshots for renderers.

Renderers draw ``BoardView`` values; they never hold a reference they could
use to change the board.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import Board, Column, ColumnColor, Item, Priority

PLACEHOLDER_COLUMNS = 3


@dataclass(frozen=True)
class ColumnStyle:
    """Style names for a column's background and header text."""

    background: str
    header: str


DEFAULT_STYLE = ColumnStyle(background="gray-50", header="gray-700")

_COLUMN_STYLES: dict[ColumnColor, ColumnStyle] = {
    ColumnColor.RED: ColumnStyle("red-50", "red-700"),
    ColumnColor.GREEN: ColumnStyle("green-50", "green-700"),
    ColumnColor.BLUE: ColumnStyle("blue-50", "blue-700"),
    ColumnColor.YELLOW: ColumnStyle("yellow-50", "yellow-700"),
    ColumnColor.PURPLE: ColumnStyle("purple-50", "purple-700"),
}

_PRIORITY_LABELS: dict[Priority, str] = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}


def column_style(color: ColumnColor | None) -> ColumnStyle:
    """Get the style for a column color, gray when untagged."""
    if color is None:
        return DEFAULT_STYLE
    return _COLUMN_STYLES.get(color, DEFAULT_STYLE)


def priority_label(priority: Priority | None) -> str | None:
    """Badge text for a priority, or None when no badge is shown."""
    if priority is None:
        return None
    return _PRIORITY_LABELS[priority]


@dataclass(frozen=True)
class CardView:
    """What a renderer needs to draw one card."""

    id: str
    title: str = ""
    description: str | None = None
    priority: str | None = None  # Badge text
    due_date: str | None = None
    assignee_name: str | None = None
    assignee_avatar: str | None = None
    assignee_initial: str | None = None
    tags: tuple[str, ...] = ()
    attachments: int | None = None
    comments: int | None = None
    placeholder: bool = False

    @classmethod
    def from_item(cls, item: Item) -> CardView:
        assignee = item.assignee
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            priority=priority_label(item.priority),
            due_date=item.due_date,
            assignee_name=assignee.name if assignee else None,
            assignee_avatar=assignee.avatar if assignee else None,
            assignee_initial=assignee.initial if assignee else None,
            tags=item.tags,
            attachments=item.attachments,
            comments=item.comments,
        )


@dataclass(frozen=True)
class ColumnView:
    """What a renderer needs to draw one column."""

    id: str
    title: str = ""
    count_label: str = ""
    style: ColumnStyle = DEFAULT_STYLE
    cards: tuple[CardView, ...] = ()
    placeholder: bool = False

    @classmethod
    def from_column(cls, column: Column) -> ColumnView:
        return cls(
            id=column.id,
            title=column.title,
            count_label=column.count_label,
            style=column_style(column.color),
            cards=tuple(CardView.from_item(item) for item in column.items),
        )


@dataclass(frozen=True)
class BoardView:
    """Projection of a whole board, or of its loading skeleton."""

    columns: tuple[ColumnView, ...] = field(default_factory=tuple)
    loading: bool = False

    @classmethod
    def from_board(
        cls,
        board: Board | None,
        loading: bool = False,
        placeholder_columns: int = PLACEHOLDER_COLUMNS,
    ) -> BoardView:
        """Project ``board``; while loading (or without a board) show placeholders."""
        if loading or board is None:
            return placeholder_board(placeholder_columns)
        return cls(columns=tuple(ColumnView.from_column(col) for col in board.columns))


def placeholder_board(columns: int = PLACEHOLDER_COLUMNS) -> BoardView:
    """Loading skeleton: the n-th column (from 1) holds n + 1 placeholder cards."""
    views = []
    for i in range(1, columns + 1):
        cards = tuple(
            CardView(id=f"placeholder-{i}-{j}", placeholder=True) for j in range(i + 1)
        )
        views.append(ColumnView(id=f"placeholder-{i}", cards=cards, placeholder=True))
    return BoardView(columns=tuple(views), loading=True)
