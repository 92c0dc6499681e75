"""Settings for the graph matcher.

Settings are read from environment variables prefixed with ``GRAPH_MATCHER_``.
Values passed explicitly to an engine always win over the environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatcherSettings(BaseSettings):
    """Environment-backed settings for comparison diagnostics and logging."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_MATCHER_", extra="ignore")

    log_level: str = Field(default="WARNING", description="Level used by setup_graph_matcher_logging")
    mismatch_separator: str = Field(default="\n", description="Separator between rendered mismatches")
    value_repr_max_length: int = Field(
        default=80,
        ge=8,
        description="Maximum length of a value rendered in a mismatch description",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the level is one the logging module knows."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"unknown logging level '{value}'")
        return normalized


@lru_cache(maxsize=1)
def get_matcher_settings() -> MatcherSettings:
    """Load and cache validated matcher settings from environment."""
    try:
        return MatcherSettings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid graph matcher settings: {exc}") from exc


__all__ = [
    "MatcherSettings",
    "get_matcher_settings",
]
