"""Board commands run from the command line against a YAML board file."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

import pydantic

from ..config import Settings
from ..errors import BoardStoreError
from ..models import ColumnDraft, ItemDraft, Move
from ..presentation import BoardView
from ..repositories import PersistingListener, YamlBoardStore
from ..services import CommandDispatcher, CommandResult
from .output import error, print_board, success

logger = logging.getLogger(__name__)

Handler = Callable[[CommandDispatcher, argparse.Namespace], CommandResult | None]


def _draft_fields(args: argparse.Namespace, names: tuple[str, ...]) -> dict:
    """Collect the options that were given on the command line."""
    return {name: getattr(args, name) for name in names if getattr(args, name, None) is not None}


_ITEM_OPTIONS = ("title", "description", "priority", "due_date", "assignee")
_COLUMN_OPTIONS = ("title", "color", "limit")


def _show(dispatcher: CommandDispatcher, args: argparse.Namespace) -> None:
    board = dispatcher.board
    colors = {col.id: col.color for col in board.columns}
    view = BoardView.from_board(
        board,
        loading=getattr(args, "loading", False),
        placeholder_columns=getattr(args, "loading_columns", 3),
    )
    print_board(view, colors)


def _add_card(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    fields = _draft_fields(args, _ITEM_OPTIONS)
    if args.tag:
        fields["tags"] = args.tag
    return dispatcher.save_item(args.column, ItemDraft(**fields))


def _edit_card(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    fields = _draft_fields(args, _ITEM_OPTIONS)
    if args.tag:
        fields["tags"] = args.tag
    return dispatcher.save_item(args.column, ItemDraft(id=args.id, **fields))


def _delete_card(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    return dispatcher.delete_item(args.column, args.id)


def _move(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    move = Move(
        source_column_id=args.source_column,
        source_index=args.source_index,
        dest_column_id=args.dest_column,
        dest_index=args.dest_index,
    )
    return dispatcher.move_item(move)


def _add_column(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    return dispatcher.save_column(ColumnDraft(**_draft_fields(args, _COLUMN_OPTIONS)))


def _edit_column(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    fields = _draft_fields(args, _COLUMN_OPTIONS)
    return dispatcher.save_column(ColumnDraft(id=args.id, **fields))


def _delete_column(dispatcher: CommandDispatcher, args: argparse.Namespace) -> CommandResult:
    return dispatcher.delete_column(args.id)


COMMANDS: dict[str, Handler] = {
    "show": _show,
    "add-card": _add_card,
    "edit-card": _edit_card,
    "delete-card": _delete_card,
    "move": _move,
    "add-column": _add_column,
    "edit-column": _edit_column,
    "delete-column": _delete_column,
}


def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Load the board, run one command and persist the result.

    Returns:
        Exit code: 0 on success, 1 when loading failed or the command was refused.
    """
    store = YamlBoardStore(settings.board_file)
    try:
        board = store.load()
    except BoardStoreError as e:
        error(str(e))
        return 1

    dispatcher = CommandDispatcher(board, listener=PersistingListener(store))
    command = args.command or "show"
    args.loading_columns = settings.loading_columns
    logger.debug("Running command: %s (board=%s)", command, settings.board_file)
    try:
        result = COMMANDS[command](dispatcher, args)
    except pydantic.ValidationError as e:
        # Option values the draft models refuse, e.g. a non-positive limit
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            error(f"Invalid {field}: {err['msg']}")
        return 1
    if result is None:
        return 0

    if result.rejected:
        error(str(result.error))
        return 1

    if result.created_id:
        success(f"Created {result.created_id}")
    else:
        success(f"{command}: done")
    return 0
