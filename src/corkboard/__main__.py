"""CLI entry point for corkboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging

PRIORITIES = ["low", "medium", "high"]
COLORS = ["red", "green", "blue", "yellow", "purple"]


def _assignee(value: str) -> dict:
    """Parse an ID:NAME assignee option."""
    assignee_id, sep, name = value.partition(":")
    if not sep or not assignee_id.strip() or not name.strip():
        raise argparse.ArgumentTypeError(f"expected ID:NAME, got '{value}'")
    return {"id": assignee_id.strip(), "name": name.strip()}


def _add_item_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--description", default=None, help="Card description")
    parser.add_argument("--priority", choices=PRIORITIES, default=None, help="Card priority")
    parser.add_argument("--due", dest="due_date", default=None, help="Due date (YYYY-MM-DD)")
    parser.add_argument(
        "--assignee",
        type=_assignee,
        default=None,
        metavar="ID:NAME",
        help="Person the card is assigned to",
    )
    parser.add_argument(
        "--tag",
        action="append",
        default=None,
        help="Tag to attach (repeat for several tags)",
    )


def _add_column_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--color", choices=COLORS, default=None, help="Column color tag")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of cards")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="corkboard",
        description="Kanban board state engine with a YAML board file",
    )
    parser.add_argument(
        "--board-file",
        type=Path,
        default=None,
        help="Path to the board YAML file (default: board.yml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command")
    show = sub.add_parser("show", help="Print the board")
    show.add_argument(
        "--loading",
        action="store_true",
        help="Print the loading placeholder instead of the board",
    )

    add_card = sub.add_parser("add-card", help="Append a card to a column")
    add_card.add_argument("column", help="Column ID")
    add_card.add_argument("title", help="Card title")
    _add_item_options(add_card)

    edit_card = sub.add_parser("edit-card", help="Change fields of a card")
    edit_card.add_argument("column", help="Column ID")
    edit_card.add_argument("id", help="Card ID")
    edit_card.add_argument("--title", default=None, help="New title")
    _add_item_options(edit_card)

    delete_card = sub.add_parser("delete-card", help="Delete a card")
    delete_card.add_argument("column", help="Column ID")
    delete_card.add_argument("id", help="Card ID")

    move = sub.add_parser("move", help="Move a card to another position")
    move.add_argument("source_column", help="Source column ID")
    move.add_argument("source_index", type=int, help="Position in the source column")
    move.add_argument("dest_column", help="Destination column ID")
    move.add_argument("dest_index", type=int, help="Position in the destination column")

    add_column = sub.add_parser("add-column", help="Append a column")
    add_column.add_argument("title", help="Column title")
    _add_column_options(add_column)

    edit_column = sub.add_parser("edit-column", help="Change a column's title, color or limit")
    edit_column.add_argument("id", help="Column ID")
    edit_column.add_argument("--title", default=None, help="New title")
    _add_column_options(edit_column)

    delete_column = sub.add_parser("delete-column", help="Delete a column and its cards")
    delete_column.add_argument("id", help="Column ID")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.board_file:
        settings_kwargs["board_file"] = args.board_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)
    setup_logging(settings.verbose, settings.log_file)

    from .cli import run_command

    raise SystemExit(run_command(args, settings))


if __name__ == "__main__":
    main()
