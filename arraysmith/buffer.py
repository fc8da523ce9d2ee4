# arraysmith/buffer.py
"""
Bounded write-buffer: fixed storage for at most ``capacity`` elements.

Slots are allocated once, up front. Elements are written contiguously from
index 0 and the unwritten tail is never read or exposed: every accessor works
on the written prefix only.

Most code should not use this module directly. ArrayBuilder (arraysmith.builder)
wraps it with push/finish semantics and MoveBuilder (arraysmith.move_builder)
wraps that with a misuse-immune interface.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Generic, Iterator, List, Tuple, TypeVar, overload

from arraysmith.config import active_config
from arraysmith.exceptions import (
    ArrayIncompleteError,
    ArrayOverflowError,
    BuilderConsumedError,
)
from arraysmith.logging import get_logger
from arraysmith.logging_tags import BUFFER

logger = get_logger(__name__)

T = TypeVar("T")


class _Vacant:
    """Marker stored in slots that have not been written yet."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<vacant>"


_VACANT: Any = _Vacant()


class PrefixView(Sequence, Generic[T]):
    """
    Read-only view over the written prefix of a buffer.

    The view is pinned to the prefix length at the moment it was taken, so a
    producer that keeps a reference never sees elements pushed afterwards.
    Compares equal to any list or tuple with the same elements.
    """

    __slots__ = ("_slots", "_stop")

    def __init__(self, slots: List[Any], stop: int):
        self._slots = slots
        self._stop = stop

    def __len__(self) -> int:
        return self._stop

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._slots[i] for i in range(*index.indices(self._stop))]
        return self._slots[self._normalize(index)]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._stop):
            yield self._slots[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (PrefixView, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _normalize(self, index: int) -> int:
        i = operator.index(index)
        if i < 0:
            i += self._stop
        if not 0 <= i < self._stop:
            raise IndexError("prefix index out of range")
        return i


class MutablePrefixView(PrefixView[T]):
    """
    Prefix view that allows replacing already-written elements in place.

    Only item assignment is supported. The view can never grow, shrink or
    reach into the unwritten tail.
    """

    __slots__ = ()

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("prefix views do not support slice assignment")
        self._slots[self._normalize(index)] = value


class BoundedBuffer(Generic[T]):
    """
    Storage cell holding 0..capacity elements contiguously from index 0.

    Args:
        capacity: Fixed number of slots (the length of the finished array)
    """

    __slots__ = ("_capacity", "_slots", "_len", "_debug_checks")

    def __init__(self, capacity: int):
        capacity = int(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._slots: List[Any] = [_VACANT] * capacity
        self._len = 0
        self._debug_checks = active_config().builder.debug_checks

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def taken(self) -> bool:
        """True once the buffer has been disassembled into an array."""
        return self._slots is None

    def __len__(self) -> int:
        self._check_live()
        return self._len

    def is_full(self) -> bool:
        self._check_live()
        return self._len >= self._capacity

    def is_empty(self) -> bool:
        self._check_live()
        return self._len == 0

    def push_unchecked(self, value: T) -> None:
        """
        Write ``value`` into the next slot without a capacity check.

        The caller must guarantee the buffer is not full.
        """
        if self._debug_checks:
            self._check_live()
            assert self._len < self._capacity, "push_unchecked on a full buffer"
        self._slots[self._len] = value
        self._len += 1

    def try_push(self, value: T) -> None:
        """Write ``value`` into the next slot, or raise ArrayOverflowError(value)."""
        if self.is_full():
            logger.debug(f"{BUFFER} Rejected push into full buffer of capacity {self._capacity}")
            raise ArrayOverflowError(value)
        self._slots[self._len] = value
        self._len += 1

    def take_unchecked(self) -> Tuple[T, ...]:
        """
        Disassemble the buffer into the finished tuple without a length check.

        The caller must guarantee the buffer is full.
        """
        if self._debug_checks:
            self._check_live()
            assert self._len == self._capacity, "take_unchecked on an incomplete buffer"
        array = tuple(self._slots)
        self._slots = None
        return array

    def try_finish(self) -> Tuple[T, ...]:
        """
        Return the finished tuple if every slot is written.

        Raises:
            ArrayIncompleteError: If the buffer is not full (the buffer is left unchanged)
        """
        if not self.is_full():
            logger.debug(f"{BUFFER} Finish refused at {self._len} / {self._capacity}")
            raise ArrayIncompleteError(self, self._len, self._capacity)
        return self.take_unchecked()

    def finished_slice(self) -> PrefixView[T]:
        """Read-only view of the written prefix."""
        self._check_live()
        return PrefixView(self._slots, self._len)

    def finished_slice_mut(self) -> MutablePrefixView[T]:
        """Mutable view of the written prefix."""
        self._check_live()
        return MutablePrefixView(self._slots, self._len)

    def copy(self) -> BoundedBuffer[T]:
        """Independent buffer with the same capacity and written prefix (shallow)."""
        self._check_live()
        clone = BoundedBuffer.__new__(BoundedBuffer)
        clone._capacity = self._capacity
        clone._slots = list(self._slots)
        clone._len = self._len
        clone._debug_checks = self._debug_checks
        return clone

    __copy__ = copy

    def _check_live(self) -> None:
        if self.taken:
            raise BuilderConsumedError("buffer was already disassembled into an array")

    def __repr__(self) -> str:
        if self.taken:
            return f"BoundedBuffer(<finished>, capacity={self._capacity})"
        return f"BoundedBuffer({list(self.finished_slice())!r}, capacity={self._capacity})"
