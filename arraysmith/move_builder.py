# arraysmith/move_builder.py
"""
A misuse-immune array builder.

MoveBuilder never panics and never reports overflow. Every push hands the
builder over and gets back either a new builder (array not full yet) or the
finished array, so a builder can only exist while its array is incomplete.

The handle that was pushed is spent: using it again raises
BuilderConsumedError.

Usage:
    >>> state = MoveBuilder.start(3)
    >>> while isinstance(state, NotFull):
    ...     state = state.builder.push(len(state.builder))
    >>> state.array
    (0, 1, 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar, Union

from arraysmith.buffer import MutablePrefixView, PrefixView
from arraysmith.builder import ArrayBuilder, PushResult
from arraysmith.exceptions import BuilderConsumedError

T = TypeVar("T")


@dataclass(frozen=True)
class Full(Generic[T]):
    """The push completed the array."""

    array: Tuple[T, ...]


@dataclass(frozen=True)
class NotFull(Generic[T]):
    """The array still has unwritten slots; keep pushing into ``builder``."""

    builder: MoveBuilder[T]


Progress = Union[Full[T], NotFull[T]]


class MoveBuilder(Generic[T]):
    """
    Builder that can only exist while the array being built isn't full.

    Obtain one with MoveBuilder.start(); calling the class directly raises
    TypeError.
    """

    __slots__ = ("_builder",)

    def __init__(self, *args, **kwargs):
        raise TypeError("MoveBuilder cannot be constructed directly; use MoveBuilder.start()")

    @classmethod
    def _wrap(cls, builder: ArrayBuilder[T]) -> MoveBuilder[T]:
        # Invariant: while a handle is live, its builder is not full and
        # nothing else holds a reference to it
        handle = cls.__new__(cls)
        handle._builder = builder
        return handle

    @classmethod
    def start(cls, capacity: int) -> Progress[T]:
        """
        Begin building an array of ``capacity`` elements.

        A zero-length array is complete immediately, so no builder is created.
        """
        builder: ArrayBuilder[T] = ArrayBuilder(capacity)
        if builder.is_full():
            return Full(builder.finish_unchecked())
        return NotFull(cls._wrap(builder))

    @property
    def capacity(self) -> int:
        return self._live().capacity

    def is_empty(self) -> bool:
        return self._live().is_empty()

    def __len__(self) -> int:
        return len(self._live())

    def push(self, value: T) -> Progress[T]:
        """
        Add the next element, consuming this handle.

        Returns Full with the array if this push completed it, otherwise
        NotFull with a fresh handle.
        """
        builder = self._live()
        self._builder = None

        # The invariant guarantees room for one more element
        if builder.push_unchecked(value) is PushResult.FULL:
            return Full(builder.finish_unchecked())
        return NotFull(self._wrap(builder))

    def finished_slice(self) -> PrefixView[T]:
        """The part of the array that has already been written."""
        return self._live().finished_slice()

    def finished_slice_mut(self) -> MutablePrefixView[T]:
        """Mutable view of the part of the array that has already been written."""
        return self._live().finished_slice_mut()

    def copy(self) -> MoveBuilder[T]:
        """Independent handle holding a shallow copy of the written prefix."""
        return self._wrap(self._live().copy())

    __copy__ = copy

    def _live(self) -> ArrayBuilder[T]:
        if self._builder is None:
            raise BuilderConsumedError("MoveBuilder was already pushed; use the returned builder")
        return self._builder

    def __repr__(self) -> str:
        if self._builder is None:
            return "MoveBuilder(<consumed>)"
        return (
            f"MoveBuilder(array={list(self._builder.finished_slice())!r}, "
            f"progress={len(self._builder)} / {self._builder.capacity})"
        )
