# arraysmith/build.py
"""
Construction algorithms: build a tuple of fixed length by calling a producer
once per element.

Every function here reduces to try_build_with_prefix(), which drives a
MoveBuilder until it reports the array is full. Producers are called strictly
in index order, exactly once per element.

Producer shapes:
    - build_with(n, f):         f()
    - build_with_index(n, f):   f(index)
    - build_with_prefix(n, f):  f(prefix), the elements written so far

Fallible forms (try_*) wrap any exception matching ``catch`` in a BuildError
carrying the index of the element being produced. The plain forms convert
nothing: an exception raised by the producer propagates as-is.

Examples:
    >>> build_with_index(4, lambda i: i * 2)
    (0, 2, 4, 6)

    >>> build_with_prefix(7, lambda p: p[-1] + p[-2] if len(p) >= 2 else 1)
    (1, 1, 2, 3, 5, 8, 13)

    >>> try_build_iter(3, [1, 2]) is None
    True
"""

from __future__ import annotations

import copy
from collections.abc import Sized
from typing import Any, Callable, Iterable, Optional, Tuple, Type, TypeVar, Union

from arraysmith.buffer import MutablePrefixView
from arraysmith.exceptions import BuildError, TooFewElementsError
from arraysmith.logging import get_logger
from arraysmith.logging_tags import BUILD
from arraysmith.move_builder import MoveBuilder, NotFull

logger = get_logger(__name__)

T = TypeVar("T")

# Exception types a fallible producer is allowed to fail with
Catch = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class _Exhausted(Exception):
    """Raised internally when an iterator runs dry before the array is full."""


# =============================================================================
# Prefix-driven
# =============================================================================


def try_build_with_prefix(
    length: int,
    producer: Callable[[MutablePrefixView[T]], T],
    catch: Catch = Exception,
) -> Tuple[T, ...]:
    """
    Build an array by calling ``producer`` with the elements built so far.

    The prefix passed to call ``i`` has exactly ``i`` elements. The producer
    may replace earlier elements through it, but cannot grow or shrink it.

    Args:
        length: Length of the array
        producer: Called once per element with the current prefix
        catch: Exception type(s) that count as a producer failure

    Returns:
        Tuple of exactly ``length`` elements

    Raises:
        BuildError: If the producer raised a ``catch`` exception; carries
            the failing index and the original exception (also chained)
    """
    logger.debug(f"{BUILD} Building array of length {length}")
    state = MoveBuilder.start(length)

    while isinstance(state, NotFull):
        builder = state.builder
        index = len(builder)
        try:
            value = producer(builder.finished_slice_mut())
        except catch as e:
            logger.debug(f"{BUILD} Producer failed at index {index}: {e!r}")
            raise BuildError(index, e) from e
        state = builder.push(value)

    return state.array


def build_with_prefix(
    length: int, producer: Callable[[MutablePrefixView[T]], T]
) -> Tuple[T, ...]:
    """Infallible form of try_build_with_prefix()."""
    # Empty catch tuple: no exception is ever turned into a BuildError
    return try_build_with_prefix(length, producer, catch=())


# =============================================================================
# Index-driven
# =============================================================================


def try_build_with_index(
    length: int, producer: Callable[[int], T], catch: Catch = Exception
) -> Tuple[T, ...]:
    """Build an array by calling ``producer(index)`` for each index in order."""
    return try_build_with_prefix(length, lambda prefix: producer(len(prefix)), catch=catch)


def build_with_index(length: int, producer: Callable[[int], T]) -> Tuple[T, ...]:
    return try_build_with_index(length, producer, catch=())


# =============================================================================
# Argument-less
# =============================================================================


def try_build_with(
    length: int, producer: Callable[[], T], catch: Catch = Exception
) -> Tuple[T, ...]:
    """Build an array by calling ``producer()`` exactly ``length`` times."""
    return try_build_with_prefix(length, lambda prefix: producer(), catch=catch)


def build_with(length: int, producer: Callable[[], T]) -> Tuple[T, ...]:
    return try_build_with(length, producer, catch=())


# =============================================================================
# Iterator-driven
# =============================================================================


def try_build_iter(length: int, iterable: Iterable[T]) -> Optional[Tuple[T, ...]]:
    """
    Build an array from the first ``length`` items of ``iterable``.

    Never pulls more than ``length`` items. Sized inputs shorter than
    ``length`` are rejected before anything is consumed.

    Returns:
        The array, or None if the iterable ran out first
    """
    if isinstance(iterable, Sized) and len(iterable) < length:
        logger.debug(f"{BUILD} Source of size {len(iterable)} cannot fill length {length}")
        return None

    iterator = iter(iterable)

    def next_item(prefix: MutablePrefixView[T]) -> T:
        try:
            return next(iterator)
        except StopIteration:
            raise _Exhausted() from None

    try:
        return try_build_with_prefix(length, next_item, catch=_Exhausted)
    except BuildError as e:
        if isinstance(e.error, _Exhausted):
            return None
        raise


def build_iter(length: int, iterable: Iterable[T]) -> Tuple[T, ...]:
    """
    Build an array from exactly the first ``length`` items of ``iterable``.

    Raises:
        TooFewElementsError: If the iterable yields fewer than ``length`` items
    """
    array = try_build_iter(length, iterable)
    if array is None:
        raise TooFewElementsError(length)
    return array


# =============================================================================
# Clone-driven
# =============================================================================


def build_cloned(
    length: int, seed: T, clone: Callable[[T], T] = copy.deepcopy
) -> Tuple[T, ...]:
    """
    Build an array whose first element is ``seed`` and whose every later
    element is a clone of the element before it.

    Args:
        length: Length of the array
        seed: Element 0, used as-is
        clone: Copy function applied to the previous element

    Examples:
        >>> build_cloned(3, [1, 2])
        ([1, 2], [1, 2], [1, 2])
    """

    def next_clone(prefix: MutablePrefixView[Any]) -> T:
        if not prefix:
            return seed
        return clone(prefix[-1])

    return build_with_prefix(length, next_clone)
