"""
Settings for puzzle-config.

Behaviour switches read from the environment (PUZZLE_* variables).
Configurators take an explicit `settings=` argument and fall back to
get_settings() when none is given.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ("1", "true", "yes")


class PuzzleSettings(BaseModel):
    """
    Settings model.

    Attributes:
        allow_unknown_fields: Accept keys the schema does not declare
        freeze_registry_on_configure: Freeze the registry for the duration of configure()
        log_level: Level used by configure_logging()
    """

    allow_unknown_fields: bool = Field(default=False, description="Ignore undeclared document keys")
    freeze_registry_on_configure: bool = Field(
        default=True, description="Keep the registry read-only while configure() runs"
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache
def get_settings() -> PuzzleSettings:
    """
    Get settings from environment.

    Uses lru_cache for singleton pattern; call get_settings.cache_clear()
    after changing the environment.
    """
    return PuzzleSettings(
        allow_unknown_fields=_env_flag("PUZZLE_ALLOW_UNKNOWN_FIELDS", False),
        freeze_registry_on_configure=_env_flag("PUZZLE_FREEZE_REGISTRY_ON_CONFIGURE", True),
        log_level=os.getenv("PUZZLE_LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for bootstrap code. The library itself never calls this."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
    )
