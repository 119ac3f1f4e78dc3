"""str_helpers.config

Default options for the helpers, loaded from the environment (and an
optional ``.env`` file) over the built-in defaults.

Every field can be set as ``STR_HELPERS_<FIELD>``, e.g.
``STR_HELPERS_SEPARATOR=_`` or ``STR_HELPERS_TRUNCATE_LIMIT=80``.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "load_settings",
]

ENV_PREFIX = "STR_HELPERS_"


class Settings(BaseModel):
    """Configuration options for the string helpers."""

    model_config = ConfigDict(frozen=True)

    separator: str = Field(
        default="-",
        min_length=1,
        max_length=1,
        description="Character joining the words of a slug",
    )
    snake_delimiter: str = Field(
        default="_",
        description="Delimiter inserted by snake case conversion",
    )
    truncate_limit: int = Field(
        default=100,
        ge=0,
        description="Maximum characters kept by truncate",
    )
    truncate_end: str = Field(
        default="...",
        description="Marker appended to truncated strings",
    )
    json_max_depth: int = Field(
        default=512,
        ge=1,
        description="Deepest nesting accepted by the JSON sniffer",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the str_helpers logger",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from ``STR_HELPERS_*`` environment variables.

    A ``.env`` file (*env_file*, or the nearest one found from the working
    directory upwards) is loaded first; variables already present in the
    environment win.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    values = {}
    for name in Settings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return Settings(**values)
