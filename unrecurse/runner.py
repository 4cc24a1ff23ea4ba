"""
Trampolined runner with an explicit frame stack.

The runner turns an Algorithm's step function into a loop over an explicit
stack of frames.

Key properties:
- NO recursive calls: sub-computations are frames, not Python calls
- Exactly one frame (the top) steps per iteration
- Each resume action runs exactly once, when its child's subtree returns
- Stack depth equals the algorithm's logical recursion depth
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import Call, Continue, Result
from unrecurse.errors import InvalidContinuationError, MissingResumeActionError
from unrecurse.frames import DEFAULT_CAPACITY_HINT, Frame, FrameStack, validate_capacity_hint
from unrecurse.observability import RunObserver, RunStats, StackDepthProbe

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunReport(Generic[T]):
    """Output of a run together with its statistics."""

    output: T
    stats: RunStats


class Runner:
    """
    Drives an Algorithm to completion on an explicit stack.

    A Runner holds configuration only. Every call to :meth:`run` creates its
    own stack and shared context and discards both on return, so one Runner
    may be reused, and separate Runners may run on separate threads.
    """

    def __init__(
        self,
        algorithm: Algorithm[Any, Any, Any, Any],
        *,
        capacity_hint: int = DEFAULT_CAPACITY_HINT,
        observers: Iterable[RunObserver] = (),
    ) -> None:
        """Configure the runner.

        Args:
            algorithm: The algorithm definition to execute.
            capacity_hint: Number of frame slots to reserve up front. The
                stack still grows past it; this only avoids reallocation for
                algorithms known to nest deeply.
            observers: Objects notified on start, after every step and on
                finish.
        """
        self._algorithm = algorithm
        self._capacity_hint = validate_capacity_hint(capacity_hint)
        self._observers: tuple[RunObserver, ...] = tuple(observers)

    @property
    def algorithm(self) -> Algorithm[Any, Any, Any, Any]:
        return self._algorithm

    @property
    def capacity_hint(self) -> int:
        return self._capacity_hint

    def run(self, input: Any) -> Any:
        """Run the algorithm on ``input`` and return its output."""
        return self._run(input, self._observers)

    def run_with_report(self, input: Any) -> RunReport[Any]:
        """Run the algorithm and return its output with RunStats."""
        probe = StackDepthProbe()
        output = self._run(input, self._observers + (probe,))
        return RunReport(output=output, stats=probe.stats())

    def _run(self, input: Any, observers: tuple[RunObserver, ...]) -> Any:
        algorithm = self._algorithm
        state, context = algorithm.initialize(input)

        stack = FrameStack(self._capacity_hint)
        stack.push(Frame(state))

        logger.debug("Run started: algorithm=%s", type(algorithm).__name__)
        for observer in observers:
            observer.on_start(state, context)

        step = algorithm.step
        while True:
            frame = stack.top
            continuation = step(frame.state, context)

            if isinstance(continuation, Continue):
                pass

            elif isinstance(continuation, Call):
                frame.resume = continuation.resume
                stack.push(Frame(continuation.child))

            elif isinstance(continuation, Result):
                stack.pop()
                value = continuation.value
                if not stack:
                    for observer in observers:
                        observer.on_step(0, continuation)
                        observer.on_finish(value, stack.high_water)
                    logger.debug(
                        "Run finished: algorithm=%s max_depth=%d",
                        type(algorithm).__name__,
                        stack.high_water,
                    )
                    return value

                parent = stack.top
                resume = parent.resume
                if resume is None:
                    raise MissingResumeActionError(len(stack), parent.state, value)
                # Consume before invoking so it can never run twice.
                parent.resume = None
                resume(parent.state, context, value)

            else:
                raise InvalidContinuationError(continuation)

            for observer in observers:
                observer.on_step(len(stack), continuation)


def run(algorithm: Algorithm[Any, Any, Any, T], input: Any, **runner_options: Any) -> T:
    """Run ``algorithm`` on ``input`` with a one-off Runner."""
    return Runner(algorithm, **runner_options).run(input)


__all__ = [
    "RunReport",
    "Runner",
    "run",
]
