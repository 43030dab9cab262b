"""Application settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseSettings):
    """Defaults for the command-line front end."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TREEQUERY_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    limit: int | None = Field(default=None, ge=1)
    bind_name: str = Field(default="match", min_length=1)
    log_profile: Literal["default", "cli"] = Field(default="cli")


def load_settings(**overrides: Any) -> QuerySettings:
    """Load settings from the environment, ignoring overrides that are None."""
    return QuerySettings(**{k: v for k, v in overrides.items() if v is not None})
