"""
Runtime settings, read from the environment.

    SPELL_MAX_DIGITS   Longest accepted number (default 101, at most 102,
                       which is all the scale table can name)
    SPELL_VERIFY       Read every spelling back and compare (default true)
    SPELL_LOG_LEVEL    Logging level for the CLI (default WARNING)

Entry points load a `.env` file first, so these can live there too.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .speller import TABLE_CAPACITY
from .validators import MAX_DIGITS_ALLOWED

ENV_PREFIX = "SPELL_"

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseModel):
    """Validated runtime settings."""

    model_config = ConfigDict(frozen=True)

    max_digits: int = Field(default=MAX_DIGITS_ALLOWED, ge=1, le=TABLE_CAPACITY)
    verify: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}, expected one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from SPELL_* environment variables.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    values = {
        name: env[f"{ENV_PREFIX}{name.upper()}"]
        for name in Settings.model_fields
        if f"{ENV_PREFIX}{name.upper()}" in env
    }
    return Settings(**values)
