"""
Failures surfaced by the construction algorithms.
"""

from __future__ import annotations

from arraysmith.exceptions.base import ArraySmithError


class BuildError(ArraySmithError):
    """
    A producer failed while building an array.

    Attributes:
        index: Zero-based index of the element that was being produced
        error: The failure raised by the producer (also the ``__cause__``)
    """

    def __init__(self, index: int, error: BaseException):
        self.index = index
        self.error = error
        super().__init__(f"error building array at index {index}")


class TooFewElementsError(ArraySmithError):
    """Raised by ``build_iter`` when the source runs out before the array is full."""

    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"too few elements to build an array of length {expected}")
