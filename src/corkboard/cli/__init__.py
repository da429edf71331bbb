"""Command-line front end."""

from .commands import COMMANDS, run_command

__all__ = ["COMMANDS", "run_command"]
