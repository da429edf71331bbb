"""Service layer for board logic."""

from . import board_model
from .dispatcher import CommandDispatcher, CommandResult
from .drag import DragSession, DragState
from .move_validator import MoveResult, MoveValidator, apply_move

__all__ = [
    "CommandDispatcher",
    "CommandResult",
    "DragSession",
    "DragState",
    "MoveResult",
    "MoveValidator",
    "apply_move",
    "board_model",
]
