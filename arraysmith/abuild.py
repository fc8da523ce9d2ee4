# arraysmith/abuild.py
"""
Async counterparts of arraysmith.build.

Producers return awaitables. Each one is awaited to completion before the
next producer call is made, so elements are still produced strictly in index
order and never concurrently. Cancellation propagates unchanged.

Examples:
    >>> async def read_ints(queue):
    ...     return await abuild_with(4, queue.get)
"""

from __future__ import annotations

from collections.abc import Sized
from typing import AsyncIterable, Awaitable, Callable, Optional, Tuple, TypeVar

from arraysmith.buffer import MutablePrefixView
from arraysmith.build import Catch, _Exhausted
from arraysmith.exceptions import BuildError, TooFewElementsError
from arraysmith.logging import get_logger
from arraysmith.logging_tags import BUILD
from arraysmith.move_builder import MoveBuilder, NotFull

logger = get_logger(__name__)

T = TypeVar("T")


async def atry_build_with_prefix(
    length: int,
    producer: Callable[[MutablePrefixView[T]], Awaitable[T]],
    catch: Catch = Exception,
) -> Tuple[T, ...]:
    """
    Await ``producer(prefix)`` once per element, in order.

    Raises:
        BuildError: If an awaited producer raised a ``catch`` exception
    """
    logger.debug(f"{BUILD} Building array of length {length} (async)")
    state = MoveBuilder.start(length)

    while isinstance(state, NotFull):
        builder = state.builder
        index = len(builder)
        try:
            value = await producer(builder.finished_slice_mut())
        except catch as e:
            logger.debug(f"{BUILD} Producer failed at index {index}: {e!r}")
            raise BuildError(index, e) from e
        state = builder.push(value)

    return state.array


async def abuild_with_prefix(
    length: int, producer: Callable[[MutablePrefixView[T]], Awaitable[T]]
) -> Tuple[T, ...]:
    return await atry_build_with_prefix(length, producer, catch=())


async def atry_build_with_index(
    length: int, producer: Callable[[int], Awaitable[T]], catch: Catch = Exception
) -> Tuple[T, ...]:
    return await atry_build_with_prefix(
        length, lambda prefix: producer(len(prefix)), catch=catch
    )


async def abuild_with_index(
    length: int, producer: Callable[[int], Awaitable[T]]
) -> Tuple[T, ...]:
    return await atry_build_with_index(length, producer, catch=())


async def atry_build_with(
    length: int, producer: Callable[[], Awaitable[T]], catch: Catch = Exception
) -> Tuple[T, ...]:
    return await atry_build_with_prefix(length, lambda prefix: producer(), catch=catch)


async def abuild_with(length: int, producer: Callable[[], Awaitable[T]]) -> Tuple[T, ...]:
    return await atry_build_with(length, producer, catch=())


async def atry_build_iter(length: int, source: AsyncIterable[T]) -> Optional[Tuple[T, ...]]:
    """
    Build an array from the first ``length`` items of an async iterable.

    Returns:
        The array, or None if the source ran out first
    """
    if isinstance(source, Sized) and len(source) < length:
        logger.debug(f"{BUILD} Source of size {len(source)} cannot fill length {length}")
        return None

    iterator = aiter(source)

    async def next_item(prefix: MutablePrefixView[T]) -> T:
        try:
            return await anext(iterator)
        except StopAsyncIteration:
            raise _Exhausted() from None

    try:
        return await atry_build_with_prefix(length, next_item, catch=_Exhausted)
    except BuildError as e:
        if isinstance(e.error, _Exhausted):
            return None
        raise


async def abuild_iter(length: int, source: AsyncIterable[T]) -> Tuple[T, ...]:
    """
    Raises:
        TooFewElementsError: If the source yields fewer than ``length`` items
    """
    array = await atry_build_iter(length, source)
    if array is None:
        raise TooFewElementsError(length)
    return array
