"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    board_file: Path = Field(
        default=Path("board.yml"),
        description="Path to the board YAML file",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    loading_columns: int = Field(
        default=3,
        ge=1,
        description="Number of placeholder columns shown while loading",
    )

    model_config = {
        "env_prefix": "CORKBOARD_",
    }
