"""Settings for the composite-tasks CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompositeTasksSettings(BaseSettings):
    """Settings for the CLI.

    Environment variables:
    - LOG_LEVEL           (optional)
    - TASK_TREE_PATH      (optional)
    - DURATION_PRECISION  (optional)

    Notes:
        Tests can point at a specific env file via
        `CompositeTasksSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    task_tree_path: Path = Field(
        default=Path("task_tree.json"),
        validation_alias="TASK_TREE_PATH",
        description="Default JSON file written by `export`",
    )

    duration_precision: int = Field(
        default=2,
        ge=0,
        le=6,
        validation_alias="DURATION_PRECISION",
        description="Decimal places used when printing durations",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
