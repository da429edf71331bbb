"""Board state and move-validation engine for kanban widgets."""

__version__ = "0.1.0"
