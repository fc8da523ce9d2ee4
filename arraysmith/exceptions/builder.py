"""
Builder failures: overflow, incomplete finish, handle reuse and fatal misuse.
"""

from __future__ import annotations

from typing import Any

from arraysmith.exceptions.base import ArraySmithError


class ArrayOverflowError(ArraySmithError):
    """
    Raised by a checked push into a builder that is already full.

    The rejected element is handed back untouched as ``value``.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__("array is already full")


class ArrayIncompleteError(ArraySmithError):
    """
    Raised by ``try_finish`` when not every slot has been written yet.

    ``builder`` is the builder that was asked to finish, unchanged.
    """

    def __init__(self, builder: Any, length: int, capacity: int):
        self.builder = builder
        self.length = length
        self.capacity = capacity
        super().__init__(f"array is incomplete: {length} / {capacity} elements")


class BuilderConsumedError(ArraySmithError):
    """Raised when a builder handle is used after it was pushed or finished."""

    pass


class BuilderPanic(ArraySmithError):
    """
    Fatal misuse of a panicking convenience method (``push`` / ``finish``).

    Not meant to be recovered from; use the ``try_`` form instead.
    """

    pass
