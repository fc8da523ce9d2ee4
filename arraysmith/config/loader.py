# arraysmith/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (arraysmith/config/default.yaml), always loaded
    2. User config (explicit path or ARRAYSMITH_CONFIG), overrides defaults

Usage:
    from arraysmith.config import get_config

    if get_config().builder.debug_checks:
        ...
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from arraysmith.config.schema import ArraySmithConfig
from arraysmith.exceptions import ConfigError
from arraysmith.logging import configure_logging, get_logger
from arraysmith.logging_tags import CONFIG

logger = get_logger(__name__)

CONFIG_ENV_VAR = "ARRAYSMITH_CONFIG"
DEFAULTS_PATH = Path(__file__).parent / "default.yaml"

# Global cache for the resolved config
_CONFIG_CACHE: Optional[ArraySmithConfig] = None

# Used by active_config() until a config has been loaded
_SCHEMA_DEFAULTS = ArraySmithConfig()


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively, everything else is replaced.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load a YAML mapping from disk.

    Raises:
        ConfigError: If the file is missing, unparsable or not a mapping
    """
    if not path.is_file():
        raise ConfigError("Config file not found", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML must be a mapping (dict)", path)

    return data


def _find_user_config_path(explicit_path: Optional[os.PathLike] = None) -> Optional[Path]:
    if explicit_path is not None:
        return Path(explicit_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_config(
    user_config_path: Optional[os.PathLike] = None, force_reload: bool = False
) -> ArraySmithConfig:
    """
    Load package defaults merged with an optional user config.

    The result is cached unless an explicit path is given.

    Args:
        user_config_path: Explicit user config file (takes precedence over the env var)
        force_reload: Ignore and replace the cached config

    Raises:
        ConfigError: If any file cannot be read or the merged config is invalid
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None and not force_reload and user_config_path is None:
        return _CONFIG_CACHE

    data = load_yaml(DEFAULTS_PATH)

    user_path = _find_user_config_path(user_config_path)
    if user_path is not None:
        logger.debug(f"{CONFIG} Merging user config from {user_path}")
        data = deep_merge(data, load_yaml(user_path))

    try:
        config = ArraySmithConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", user_path) from e

    if user_config_path is None:
        _CONFIG_CACHE = config

    return config


def get_config() -> ArraySmithConfig:
    """Convenience helper returning the cached configuration."""
    return load_config()


def active_config() -> ArraySmithConfig:
    """
    The loaded configuration, or the schema defaults if none is loaded yet.

    Never reads from disk, so it cannot fail. The builders read their settings
    through this; call load_config() first to apply a user config.
    """
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE
    return _SCHEMA_DEFAULTS


def reset_config_cache() -> None:
    """Forget the cached configuration (used by tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None


def configure_logging_from_config(config: Optional[ArraySmithConfig] = None) -> None:
    """Apply the logging section of the config to the root logger."""
    config = config or get_config()
    configure_logging(
        level=getattr(logging, config.logging.level),
        fmt=config.logging.format,
    )
