# arraysmith/config/schema.py
"""
Configuration schema for arraysmith.

Schema hierarchy:
- ArraySmithConfig: The root config
- BuilderConfig: Builder runtime checks
- LoggingConfig: Logging settings
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arraysmith.logging import DEFAULT_FORMAT


class BuilderConfig(BaseModel):
    """Builder runtime checks."""

    debug_checks: bool = Field(
        default=True,
        description="Assert the preconditions of the unchecked push/finish primitives",
    )

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging settings applied by configure_logging_from_config()."""

    level: str = Field(default="WARNING", description="Root log level name")
    format: str = Field(default=DEFAULT_FORMAT, description="Log record format")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class ArraySmithConfig(BaseModel):
    """
    Root configuration.

    Examples:
        >>> config = ArraySmithConfig(builder={"debug_checks": False})
        >>> config.builder.debug_checks
        False
    """

    builder: BuilderConfig = Field(default_factory=BuilderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
