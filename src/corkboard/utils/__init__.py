"""Utility functions."""

from .ids import COLUMN_PREFIX, ITEM_PREFIX, IdGenerator

__all__ = [
    "COLUMN_PREFIX",
    "ITEM_PREFIX",
    "IdGenerator",
]
