"""
Conversions between ``Either`` and ``returns.result.Result``.

Only the data moves across: variant and payload are preserved, nothing is
re-raised or caught.
"""

from returns.result import Failure as ReturnsFailure
from returns.result import Result
from returns.result import Success as ReturnsSuccess

from .either import Either, Failure, Success


def to_returns[E, V](either: Either[E, V]) -> Result[V, E]:
    """Convert an ``Either`` into the equivalent ``returns`` result."""
    return either.extract(ReturnsFailure, ReturnsSuccess)


def from_returns[E, V](result: Result[V, E] | object) -> Either[E, V]:
    """Convert a ``returns`` result into the equivalent ``Either``."""
    match result:
        case ReturnsSuccess():
            return Success(result.unwrap())
        case ReturnsFailure():
            return Failure(result.failure())
        case _:
            raise TypeError(f"Expected a returns Result, got {type(result).__name__}")


__all__ = ["from_returns", "to_returns"]
