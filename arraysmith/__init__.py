"""
arraysmith - build fixed-length arrays one element at a time.

An array is only ever handed out once every one of its slots has been
written exactly once. Partially built arrays can be inspected and discarded,
never returned as complete.

Quick Start:
    >>> from arraysmith import build_with_index
    >>> build_with_index(4, lambda i: i * 2)
    (0, 2, 4, 6)

Public API:
    Construction:
        - build_with / try_build_with: producer takes no argument
        - build_with_index / try_build_with_index: producer takes the index
        - build_with_prefix / try_build_with_prefix: producer takes the prefix
        - build_iter / try_build_iter: first N items of an iterable
        - build_cloned: seed, then clones of the previous element
        - abuild_* / atry_build_*: async producers and async iterables

    Builders:
        - MoveBuilder: misuse-immune builder (push returns Full or NotFull)
        - ArrayBuilder: low-level push + finish builder

    Exceptions:
        - ArraySmithError and subclasses (see arraysmith.exceptions)

Architecture:
    arraysmith/
    ├── buffer.py        # Pre-sized slot storage and prefix views
    ├── builder.py       # ArrayBuilder (checked / unchecked / panicking)
    ├── move_builder.py  # MoveBuilder typestate
    ├── build.py         # Construction algorithms
    ├── abuild.py        # Async construction algorithms
    ├── exceptions/      # Error hierarchy
    └── config/          # YAML defaults + pydantic schema
"""

__version__ = "0.1.0"

# =============================================================================
# BUILDERS
# =============================================================================

from arraysmith.buffer import BoundedBuffer, MutablePrefixView, PrefixView
from arraysmith.builder import ArrayBuilder, PushResult
from arraysmith.move_builder import Full, MoveBuilder, NotFull, Progress

# =============================================================================
# CONSTRUCTION
# =============================================================================

from arraysmith.build import (
    build_cloned,
    build_iter,
    build_with,
    build_with_index,
    build_with_prefix,
    try_build_iter,
    try_build_with,
    try_build_with_index,
    try_build_with_prefix,
)
from arraysmith.abuild import (
    abuild_iter,
    abuild_with,
    abuild_with_index,
    abuild_with_prefix,
    atry_build_iter,
    atry_build_with,
    atry_build_with_index,
    atry_build_with_prefix,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================

from arraysmith.exceptions import (
    ArrayIncompleteError,
    ArrayOverflowError,
    ArraySmithError,
    BuildError,
    BuilderConsumedError,
    BuilderPanic,
    ConfigError,
    TooFewElementsError,
)

__all__ = [
    "__version__",
    # Builders
    "ArrayBuilder",
    "BoundedBuffer",
    "Full",
    "MoveBuilder",
    "MutablePrefixView",
    "NotFull",
    "PrefixView",
    "Progress",
    "PushResult",
    # Construction
    "build_cloned",
    "build_iter",
    "build_with",
    "build_with_index",
    "build_with_prefix",
    "try_build_iter",
    "try_build_with",
    "try_build_with_index",
    "try_build_with_prefix",
    "abuild_iter",
    "abuild_with",
    "abuild_with_index",
    "abuild_with_prefix",
    "atry_build_iter",
    "atry_build_with",
    "atry_build_with_index",
    "atry_build_with_prefix",
    # Exceptions
    "ArraySmithError",
    "ArrayIncompleteError",
    "ArrayOverflowError",
    "BuilderConsumedError",
    "BuilderPanic",
    "BuildError",
    "ConfigError",
    "TooFewElementsError",
]
