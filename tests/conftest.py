# tests/conftest.py
"""
Root conftest.

Test Tiers:
- tier1: Pure logic, no I/O
         Run: pytest -m tier1
- tier2: Touches the filesystem or environment (config loading)
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import pytest

from arraysmith.config import CONFIG_ENV_VAR, reset_config_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Every test starts from the bundled defaults, with no user override."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
