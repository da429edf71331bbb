"""Repository layer for board storage."""

from .yaml_store import PersistingListener, YamlBoardStore

__all__ = [
    "PersistingListener",
    "YamlBoardStore",
]
