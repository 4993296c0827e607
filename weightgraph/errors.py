"""Exception hierarchy shared by the graph primitives and algorithms.

Every error derives from :class:`WeightGraphError` and from the built-in
exception a caller would naturally catch for the same mistake.
"""

from __future__ import annotations

import numbers


class WeightGraphError(Exception):
    """Base class for all weightgraph errors."""


class InvalidArgumentError(WeightGraphError, ValueError):
    """A required value is missing or unusable."""


class OutOfRangeError(WeightGraphError, IndexError):
    """A vertex or heap index lies outside ``[0, n)``."""


class UnderflowError(WeightGraphError, IndexError):
    """Removal or inspection of the minimum of an empty queue."""


class UnsupportedOperationError(WeightGraphError, RuntimeError):
    """The result cannot answer this query, e.g. distances under a negative cycle."""


class IllegalStateError(WeightGraphError, ValueError):
    """A structure was constructed with negative counts."""


class GraphFormatError(WeightGraphError, ValueError):
    """An edge list could not be parsed into a graph."""


class InvariantViolation(WeightGraphError, AssertionError):
    """A verification check found a broken algorithmic invariant."""


def check_index(index: int, upper: int, *, label: str = "vertex") -> int:
    """Return ``index`` if ``0 <= index < upper``, otherwise raise `OutOfRangeError`."""

    if index is None:
        raise InvalidArgumentError(f"{label} must not be None")
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidArgumentError(f"{label} must be an integer, got {index!r}")
    if not 0 <= index < upper:
        raise OutOfRangeError(f"{label} {index} is not between 0 and {upper - 1}")
    return index


__all__ = [
    "WeightGraphError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "UnderflowError",
    "UnsupportedOperationError",
    "IllegalStateError",
    "GraphFormatError",
    "InvariantViolation",
    "check_index",
]
