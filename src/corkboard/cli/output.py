"""Colorful CLI output helpers."""

import sys

from ..models import ColumnColor
from ..presentation import BoardView, CardView, ColumnView

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
MAGENTA = "\033[35m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
PLACEHOLDER = "\u2591" * 12  # loading bar

_COLUMN_COLORS = {
    ColumnColor.RED: RED,
    ColumnColor.GREEN: GREEN,
    ColumnColor.BLUE: BLUE,
    ColumnColor.YELLOW: YELLOW,
    ColumnColor.PURPLE: MAGENTA,
}


def _supports_color() -> bool:
    """Check if stdout is a TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    print(f"{_colorize(CROSS, RED)} {message}", file=sys.stderr)


def format_card(index: int, card: CardView) -> str:
    """One line for a card: position, id, title and badges."""
    if card.placeholder:
        return f"  [{index}] {PLACEHOLDER}"
    parts = [f"  [{index}] {_colorize(card.id, DIM)} {card.title}"]
    if card.priority:
        parts.append(f"({card.priority})")
    if card.due_date:
        parts.append(f"due {card.due_date}")
    if card.assignee_name:
        parts.append(f"@{card.assignee_name}")
    parts.extend(f"#{tag}" for tag in card.tags)
    return " ".join(parts)


def format_column(column: ColumnView, color: ColumnColor | None = None) -> list[str]:
    """Header line plus one line per card."""
    if column.placeholder:
        return [PLACEHOLDER] + [format_card(idx, card) for idx, card in enumerate(column.cards)]
    title = f"{column.title} [{column.count_label}] ({column.id})"
    lines = [_colorize(title, _COLUMN_COLORS.get(color, BLUE)) if color else title]
    if not column.cards:
        lines.append("  (empty)")
    lines.extend(format_card(idx, card) for idx, card in enumerate(column.cards))
    return lines


def print_board(view: BoardView, colors: dict[str, ColumnColor | None] | None = None) -> None:
    """Print a board projection, one column after the other."""
    if not view.columns:
        info("Board has no columns")
        return
    colors = colors or {}
    for column in view.columns:
        print("\n".join(format_column(column, colors.get(column.id))))
        print()
