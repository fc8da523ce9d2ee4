"""
arraysmith configuration: bundled YAML defaults, optional user overrides,
validated by pydantic.
"""

from .loader import (
    CONFIG_ENV_VAR,
    active_config,
    configure_logging_from_config,
    deep_merge,
    get_config,
    load_config,
    load_yaml,
    reset_config_cache,
)
from .schema import ArraySmithConfig, BuilderConfig, LoggingConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ArraySmithConfig",
    "BuilderConfig",
    "LoggingConfig",
    "active_config",
    "configure_logging_from_config",
    "deep_merge",
    "get_config",
    "load_config",
    "load_yaml",
    "reset_config_cache",
]
