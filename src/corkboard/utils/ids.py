"""Identifier generation for new items and columns."""

import itertools
from collections.abc import Container, Iterator

ITEM_PREFIX = "item"
COLUMN_PREFIX = "column"


class IdGenerator:
    """Generates ``<prefix>-<n>`` ids from a per-prefix monotonic counter.

    Ids already present on the board (for example loaded from a config file)
    are skipped, so a generated id never collides with an existing one.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counters: dict[str, Iterator[int]] = {}

    def next_id(self, prefix: str, taken: Container[str] = ()) -> str:
        """Return the next free id for ``prefix``."""
        counter = self._counters.setdefault(prefix, itertools.count(self._start))
        while True:
            candidate = f"{prefix}-{next(counter)}"
            if candidate not in taken:
                return candidate
