"""
Unified import surface for all arraysmith exceptions.
"""

from .base import ArraySmithError
from .build import BuildError, TooFewElementsError
from .builder import (
    ArrayIncompleteError,
    ArrayOverflowError,
    BuilderConsumedError,
    BuilderPanic,
)
from .config import ConfigError

__all__ = [
    "ArraySmithError",
    "ArrayOverflowError",
    "ArrayIncompleteError",
    "BuilderConsumedError",
    "BuilderPanic",
    "BuildError",
    "TooFewElementsError",
    "ConfigError",
]
