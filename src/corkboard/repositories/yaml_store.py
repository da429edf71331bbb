"""YAML file storage for board configurations."""

from __future__ import annotations

import logging
from pathlib import Path

import pydantic
import yaml

from ..errors import BoardStoreError
from ..models import Board
from ..presentation.listener import NullBoardListener

logger = logging.getLogger(__name__)


class YamlBoardStore:
    """
    Loads and saves a board as a YAML document.

    The document has the board configuration shape::

        columns:
          - id: todo
            title: To Do
            limit: 5
            items:
              - id: item-1
                title: Write docs
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the store.

        Args:
            path: Path to the board YAML file
        """
        self.path = path
        self._load_error: str | None = None

    @property
    def load_error(self) -> str | None:
        """Non-fatal problem found by the last load, if any."""
        return self._load_error

    def load(self) -> Board:
        """
        Load the board from disk.

        A missing or empty file gives an empty board.

        Raises:
            BoardStoreError: the file is not valid YAML or not a valid board.
        """
        self._load_error = None

        if not self.path.exists():
            logger.debug("No board file at %s, starting empty", self.path)
            return Board()

        try:
            with self.path.open() as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BoardStoreError(f"Invalid YAML in {self.path}: {e}") from e

        if data is None:
            self._load_error = f"{self.path.name} is empty"
            logger.warning(self._load_error)
            return Board()

        if not isinstance(data, dict):
            raise BoardStoreError(f"{self.path.name} must contain a mapping with 'columns'")

        try:
            board = Board.from_config(data)
        except pydantic.ValidationError as e:
            raise BoardStoreError(f"Invalid board in {self.path}: {e}") from e

        logger.info(
            "Loaded %s with %d columns, %d items",
            self.path.name,
            len(board.columns),
            board.total_item_count,
        )
        return board

    def save(self, board: Board) -> None:
        """Write the board to disk, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w") as f:
            # sort_keys=False keeps id/title first
            yaml.safe_dump(board.to_config(), f, sort_keys=False, allow_unicode=True)
        logger.debug("Saved board to %s", self.path)


class PersistingListener(NullBoardListener):
    """Listener that writes every committed snapshot to a store."""

    def __init__(self, store: YamlBoardStore) -> None:
        self.store = store

    def on_board_changed(self, board: Board) -> None:
        self.store.save(board)
