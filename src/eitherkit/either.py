"""
A closed, two-variant result container for explicit error handling.

An ``Either`` is a sum type that is exactly one of:

- ``Failure(error)``: the computation failed and carries an error payload.
- ``Success(value)``: the computation succeeded and carries a value.

Both variants expose the same three operations, so a pipeline of fallible
steps can be written without inspecting which variant it holds:

- ``map`` transforms the success value with a function that cannot fail.
- ``then`` chains a step that is itself fallible and returns an ``Either``.
- ``extract`` folds the container into a plain value by handling both outcomes.

Once a ``Failure`` appears in a chain every later ``map``/``then`` is a
pass-through and the functions handed to them are never called. The error
payload reaches ``extract`` exactly as it was produced.

Example:
    >>> succeed(4).map(lambda x: x - 2).then(lambda y: succeed(1 / y)).extract(str, str)
    '0.5'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, final

__all__ = ["Either", "Failure", "Success", "fail", "succeed"]


@final
@dataclass(frozen=True, slots=True)
class Failure[E]:
    """The error-carrying variant."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:
        """Carry the error through; ``f`` is never called."""
        return Failure(self.error)

    def then(self, f: Callable[[Any], Either[E, Any]]) -> Failure[E]:
        """Short-circuit the chain; ``f`` is never called."""
        return Failure(self.error)

    def extract[W](self, on_failure: Callable[[E], W], on_success: Callable[[Any], W]) -> W:
        return on_failure(self.error)


@final
@dataclass(frozen=True, slots=True)
class Success[V]:
    """The value-carrying variant."""

    value: V

    def map[W](self, f: Callable[[V], W]) -> Success[W]:
        """Apply ``f`` to the value and wrap the result."""
        return Success(f(self.value))

    def then[E, W](self, f: Callable[[V], Either[E, W]]) -> Either[E, W]:
        """Hand the value to the next fallible step and return its result as is."""
        return f(self.value)

    def extract[W](self, on_failure: Callable[[Any], W], on_success: Callable[[V], W]) -> W:
        return on_success(self.value)


# The variant set is closed: both classes are final, and this union is the type.
type Either[E, V] = Failure[E] | Success[V]


def fail[E, V](error_value: E) -> Either[E, V]:
    """Construct a ``Failure`` holding ``error_value``."""
    return Failure(error_value)


def succeed[E, V](value: V) -> Either[E, V]:
    """Construct a ``Success`` holding ``value``."""
    return Success(value)
