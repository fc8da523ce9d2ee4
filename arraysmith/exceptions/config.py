"""
Configuration loading failures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from arraysmith.exceptions.base import ArraySmithError


class ConfigError(ArraySmithError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)
