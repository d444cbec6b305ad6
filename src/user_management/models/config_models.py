"""Configuration models.

The configuration selects which storage backend the CLI drives and how its
output is rendered.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["memory", "sqlite"] = Field(
        default="sqlite", description="Storage backend type"
    )
    path: str | None = Field(
        default=None, description="SQLite database file (sqlite backend only)"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    model_config = ConfigDict(extra="forbid")

    format: str = Field(default="table")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main configuration."""

    model_config = ConfigDict(extra="forbid")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
