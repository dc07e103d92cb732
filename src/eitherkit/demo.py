"""
Example caller of the ``Either`` container.

``run_pipeline`` computes ``(((1 / x) - 2) ** -1)`` as a chain of fallible
steps: the first inversion, a subtraction that cannot fail, and a second
inversion that fails when the intermediate value is zero.
"""

import logging
from collections.abc import Iterable

from .app.config import DEFAULT_INPUTS, DIVIDE_BY_ZERO_MESSAGE, PIPELINE_OFFSET, RESULT_PREFIX
from .either import Either, fail, succeed

logger = logging.getLogger(__name__)


def invert(x: float) -> Either[str, float]:
    if x == 0:
        return fail(DIVIDE_BY_ZERO_MESSAGE)
    return succeed(1 / x)


def describe(result: Either[str, float]) -> str:
    """Render a pipeline outcome as a single line of text."""
    return result.extract(
        lambda err: err,
        lambda y: RESULT_PREFIX + str(y),
    )


def pipeline(x: float) -> Either[str, float]:
    result = invert(x).map(lambda y: y - PIPELINE_OFFSET).then(invert)
    logger.debug("pipeline(%s) -> %r", x, result)
    return result


def run_pipeline(x: float) -> str:
    return describe(pipeline(x))


def run_examples(
    inputs: Iterable[float] = DEFAULT_INPUTS,
) -> list[tuple[float, Either[str, float]]]:
    """Run the pipeline on every input, keeping the input next to its outcome."""
    return [(x, pipeline(x)) for x in inputs]


__all__ = ["describe", "invert", "pipeline", "run_examples", "run_pipeline"]
