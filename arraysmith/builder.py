# arraysmith/builder.py
"""
A low level builder type for creating fixed size arrays.

ArrayBuilder uses a push + finish interface to build a tuple one element at a
time. Most of its methods are fallible in some way (raising a recoverable
error, or a BuilderPanic on misuse). Consider instead the misuse-immune
MoveBuilder (arraysmith.move_builder), or the build_* functions in
arraysmith.build.

Usage:
    >>> builder = ArrayBuilder(3)
    >>> builder.push("a")
    <PushResult.NOT_FULL: 'not_full'>
    >>> builder.extend(["b", "c"])
    >>> builder.finish()
    ('a', 'b', 'c')
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, Tuple, TypeVar

from arraysmith.buffer import BoundedBuffer, MutablePrefixView, PrefixView
from arraysmith.exceptions import (
    ArrayIncompleteError,
    ArrayOverflowError,
    BuilderPanic,
)
from arraysmith.logging import get_logger
from arraysmith.logging_tags import BUILDER

logger = get_logger(__name__)

T = TypeVar("T")


class PushResult(Enum):
    """Whether there is room for more elements after a successful push."""

    NOT_FULL = "not_full"
    FULL = "full"


class ArrayBuilder(Generic[T]):
    """
    Low-level builder for tuples of exactly ``capacity`` elements.

    Args:
        capacity: Length of the array being built
    """

    __slots__ = ("_buffer",)

    def __init__(self, capacity: int):
        self._buffer: BoundedBuffer[T] = BoundedBuffer(capacity)

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def is_full(self) -> bool:
        """True if every slot is written; the next finish() will succeed."""
        return self._buffer.is_full()

    def is_empty(self) -> bool:
        return self._buffer.is_empty()

    def __len__(self) -> int:
        """Number of written elements."""
        return len(self._buffer)

    def _push_result(self) -> PushResult:
        if len(self._buffer) >= self._buffer.capacity:
            return PushResult.FULL
        return PushResult.NOT_FULL

    def push_unchecked(self, value: T) -> PushResult:
        """
        Add an element without a bounds check.

        Must only be called when the builder is not full.
        """
        self._buffer.push_unchecked(value)
        return self._push_result()

    def try_push(self, value: T) -> PushResult:
        """
        Add an element, reporting whether the array is now full.

        Raises:
            ArrayOverflowError: If the array was already full. The error
                carries the rejected value.
        """
        self._buffer.try_push(value)
        return self._push_result()

    def push(self, value: T) -> PushResult:
        """
        Add an element, reporting whether the array is now full.

        Raises:
            BuilderPanic: If the array was already full
        """
        try:
            return self.try_push(value)
        except ArrayOverflowError as e:
            logger.debug(f"{BUILDER} push into full builder of capacity {self.capacity}")
            raise BuilderPanic("ArrayBuilder.push overflow") from e

    def finish_unchecked(self) -> Tuple[T, ...]:
        """
        Return the array without checking that it is complete.

        Must only be called when the builder is full.
        """
        return self._buffer.take_unchecked()

    def try_finish(self) -> Tuple[T, ...]:
        """
        Return the finished array.

        Raises:
            ArrayIncompleteError: If the array isn't complete yet; the error
                carries this builder, unchanged.
        """
        if not self._buffer.is_full():
            raise ArrayIncompleteError(self, len(self._buffer), self._buffer.capacity)
        return self._buffer.take_unchecked()

    def finish(self) -> Tuple[T, ...]:
        """
        Return the finished array.

        Raises:
            BuilderPanic: If the array isn't complete yet
        """
        try:
            return self.try_finish()
        except ArrayIncompleteError as e:
            logger.debug(f"{BUILDER} finish at {e.length} / {e.capacity}")
            raise BuilderPanic("ArrayBuilder.finish incomplete") from e

    def finished_slice(self) -> PrefixView[T]:
        """The part of the array that has already been written."""
        return self._buffer.finished_slice()

    def finished_slice_mut(self) -> MutablePrefixView[T]:
        """Mutable view of the part of the array that has already been written."""
        return self._buffer.finished_slice_mut()

    def extend(self, items: Iterable[T]) -> None:
        """Push every item; panics like push() if the array overflows."""
        for item in items:
            self.push(item)

    def copy(self) -> ArrayBuilder[T]:
        clone = ArrayBuilder.__new__(ArrayBuilder)
        clone._buffer = self._buffer.copy()
        return clone

    __copy__ = copy

    def __repr__(self) -> str:
        if self._buffer.taken:
            return f"ArrayBuilder(<finished>, capacity={self.capacity})"
        return (
            f"ArrayBuilder(array={list(self.finished_slice())!r}, "
            f"progress={len(self)} / {self.capacity})"
        )
