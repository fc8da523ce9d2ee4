# tests/test_config.py
"""
Tests for layered configuration loading.

Verifies:
1. Bundled defaults load without any user file
2. User files (explicit or via env var) override defaults
3. Invalid files raise ConfigError
4. Config changes reach the builders
"""

import logging

import pytest

from arraysmith.buffer import BoundedBuffer
from arraysmith.build import build_with_index
from arraysmith.config import (
    CONFIG_ENV_VAR,
    ArraySmithConfig,
    active_config,
    configure_logging_from_config,
    deep_merge,
    get_config,
    load_config,
)
from arraysmith.exceptions import ConfigError

pytestmark = pytest.mark.tier2


def write_yaml(tmp_path, text: str):
    """Helper to write a user config file."""
    path = tmp_path / "arraysmith.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaults:
    """Tests for the bundled default.yaml."""

    def test_defaults(self):
        """Defaults enable debug checks and log at WARNING."""
        config = load_config()
        assert isinstance(config, ArraySmithConfig)
        assert config.builder.debug_checks is True
        assert config.logging.level == "WARNING"

    def test_get_config_is_cached(self):
        """Repeated calls return the same object."""
        assert get_config() is get_config()

    def test_force_reload(self):
        """force_reload builds a fresh config."""
        first = get_config()
        assert load_config(force_reload=True) is not first


class TestUserConfig:
    """Tests for user overrides."""

    def test_explicit_path_overrides(self, tmp_path):
        """Values from the user file win; the rest keeps defaults."""
        path = write_yaml(tmp_path, "builder:\n  debug_checks: false\n")
        config = load_config(path)

        assert config.builder.debug_checks is False
        assert config.logging.level == "WARNING"

    def test_explicit_path_is_not_cached(self, tmp_path):
        """Loading an explicit file leaves the cached defaults alone."""
        path = write_yaml(tmp_path, "builder:\n  debug_checks: false\n")
        load_config(path)
        assert get_config().builder.debug_checks is True

    def test_env_var(self, tmp_path, monkeypatch):
        """ARRAYSMITH_CONFIG names the user file."""
        path = write_yaml(tmp_path, "logging:\n  level: debug\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        config = load_config(force_reload=True)
        assert config.logging.level == "DEBUG"

    def test_missing_file(self, tmp_path):
        """A missing user file is a ConfigError."""
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(tmp_path / "nope.yaml")

    def test_non_mapping(self, tmp_path):
        """Top-level YAML must be a mapping."""
        path = write_yaml(tmp_path, "- just\n- a list\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        """Unparsable YAML is a ConfigError."""
        path = write_yaml(tmp_path, "builder: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        """Unknown keys are rejected by the schema."""
        path = write_yaml(tmp_path, "builder:\n  turbo: true\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_unknown_log_level(self, tmp_path):
        """Log levels must be real logging levels."""
        path = write_yaml(tmp_path, "logging:\n  level: LOUD\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)


class TestConfigEffects:
    """Tests that config values reach the code that reads them."""

    def test_debug_checks_off_reaches_buffer(self, tmp_path, monkeypatch):
        """Disabling debug checks turns off the unchecked-push assertion."""
        path = write_yaml(tmp_path, "builder:\n  debug_checks: false\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        load_config(force_reload=True)

        buffer = BoundedBuffer(1)
        buffer.push_unchecked(1)
        # The raw slot write fails instead of the debug assertion
        with pytest.raises(IndexError):
            buffer.push_unchecked(2)

    def test_builds_do_not_read_config_files(self, tmp_path, monkeypatch):
        """An unreadable user config never breaks construction."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))

        assert build_with_index(3, lambda i: i) == (0, 1, 2)
        with pytest.raises(ConfigError, match="Config file not found"):
            get_config()
        assert build_with_index(2, lambda i: -i) == (0, -1)

    def test_active_config_before_and_after_load(self, tmp_path):
        """Schema defaults until loaded, then the loaded config."""
        assert active_config().builder.debug_checks is True

        path = write_yaml(tmp_path, "builder:\n  debug_checks: false\n")
        loaded = load_config(path)
        assert active_config() is not loaded

        cached = get_config()
        assert active_config() is cached

    def test_configure_logging_from_config(self):
        """The logging section sets the root level."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = [logging.NullHandler()]
        try:
            configure_logging_from_config(ArraySmithConfig(logging={"level": "error"}))
            assert root.level == logging.ERROR
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_nested_merge(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        assert deep_merge(base, {"b": {"c": 10}}) == {"a": 1, "b": {"c": 10, "d": 3}}
        assert base == {"a": 1, "b": {"c": 2, "d": 3}}

    def test_lists_replaced(self):
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}
