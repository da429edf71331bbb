"""Tests for id generation."""

from corkboard.utils import COLUMN_PREFIX, ITEM_PREFIX, IdGenerator


class TestIdGenerator:
    """Tests for IdGenerator."""

    def test_sequential_ids(self):
        """Ids count up from 1 per prefix."""
        ids = IdGenerator()
        assert ids.next_id(ITEM_PREFIX) == "item-1"
        assert ids.next_id(ITEM_PREFIX) == "item-2"

    def test_prefixes_have_separate_counters(self):
        ids = IdGenerator()
        assert ids.next_id(ITEM_PREFIX) == "item-1"
        assert ids.next_id(COLUMN_PREFIX) == "column-1"
        assert ids.next_id(ITEM_PREFIX) == "item-2"

    def test_taken_ids_skipped(self):
        """Ids already on the board are never handed out."""
        ids = IdGenerator()
        taken = {"item-1", "item-2", "item-4"}
        assert ids.next_id(ITEM_PREFIX, taken) == "item-3"
        assert ids.next_id(ITEM_PREFIX, taken) == "item-5"

    def test_never_repeats(self):
        """Back-to-back calls in the same instant still differ."""
        ids = IdGenerator()
        generated = [ids.next_id(ITEM_PREFIX) for _ in range(1000)]
        assert len(set(generated)) == 1000

    def test_custom_start(self):
        assert IdGenerator(start=100).next_id(COLUMN_PREFIX) == "column-100"
