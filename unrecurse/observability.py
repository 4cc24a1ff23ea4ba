"""
Execution observability for the runner.

Observers are notified at the start of a run, after every applied
continuation, and when the run finishes. They see the stack depth but never
the stack itself, so they cannot disturb a run.

Public API:
    - RunObserver: Protocol implemented by observers
    - BaseObserver: No-op base class to override selectively
    - StackDepthProbe: Counts steps and continuation kinds, tracks max depth
    - RunStats: Immutable statistics produced by StackDepthProbe
    - StepTracer: Per-step trace written through loguru

Example usage:
    probe = StackDepthProbe()
    Runner(Parity(), observers=[probe]).run(check_even(10))
    assert probe.stats().max_stack_depth == 1
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from frozendict import frozendict
from loguru import logger as loguru_logger

from unrecurse.continuation import Call, Continuation, Continue, Result

trace_logger = loguru_logger.bind(component="unrecurse.trace")


def continuation_kind(continuation: Continuation) -> str:
    """Short name of a continuation case ("continue", "call" or "result")."""
    if isinstance(continuation, Continue):
        return "continue"
    if isinstance(continuation, Call):
        return "call"
    if isinstance(continuation, Result):
        return "result"
    raise TypeError(f"Not a continuation: {continuation!r}")


@runtime_checkable
class RunObserver(Protocol):
    """Protocol for objects watching a run."""

    def on_start(self, state: Any, context: Any) -> None:
        """Called once after initialize, before the first step."""
        ...

    def on_step(self, depth: int, continuation: Continuation) -> None:
        """Called after ``continuation`` has been applied.

        Args:
            depth: Stack depth after the transition (0 once the run is done).
            continuation: What the top frame's step returned.
        """
        ...

    def on_finish(self, output: Any, max_depth: int) -> None:
        """Called once with the final output and the stack's high-water mark."""
        ...


class BaseObserver:
    """Observer with no-op hooks."""

    def on_start(self, state: Any, context: Any) -> None:
        pass

    def on_step(self, depth: int, continuation: Continuation) -> None:
        pass

    def on_finish(self, output: Any, max_depth: int) -> None:
        pass


@dataclass(frozen=True)
class RunStats:
    """
    Statistics collected during one run.

    Attributes:
        total_steps: Number of step() calls.
        max_stack_depth: Deepest the stack got.
        continuation_counts: Continuation kind -> number of occurrences.
    """

    total_steps: int
    max_stack_depth: int
    continuation_counts: frozendict[str, int]

    @property
    def continues(self) -> int:
        return self.continuation_counts.get("continue", 0)

    @property
    def calls(self) -> int:
        return self.continuation_counts.get("call", 0)

    @property
    def results(self) -> int:
        return self.continuation_counts.get("result", 0)


class StackDepthProbe(BaseObserver):
    """Collects RunStats. Reusable: on_start resets the counters."""

    def __init__(self) -> None:
        self._steps = 0
        self._max_depth = 0
        self._counts: Counter[str] = Counter()

    def on_start(self, state: Any, context: Any) -> None:
        self._steps = 0
        # The root frame is on the stack before the first step.
        self._max_depth = 1
        self._counts = Counter()

    def on_step(self, depth: int, continuation: Continuation) -> None:
        self._steps += 1
        self._counts[continuation_kind(continuation)] += 1
        if depth > self._max_depth:
            self._max_depth = depth

    def stats(self) -> RunStats:
        return RunStats(
            total_steps=self._steps,
            max_stack_depth=self._max_depth,
            continuation_counts=frozendict(self._counts),
        )


class StepTracer(BaseObserver):
    """Writes one loguru DEBUG record per step.

    ``max_lines`` caps the output for long runs; once reached, a single
    truncation record is written and later steps are skipped.
    """

    def __init__(self, *, max_lines: int | None = 1000) -> None:
        if max_lines is not None and max_lines < 0:
            raise ValueError("max_lines must be >= 0 or None")
        self._max_lines = max_lines
        self._lines = 0
        self._truncated = False

    def on_start(self, state: Any, context: Any) -> None:
        self._lines = 0
        self._truncated = False
        trace_logger.debug("start: state={!r}", state)

    def on_step(self, depth: int, continuation: Continuation) -> None:
        if self._max_lines is not None and self._lines >= self._max_lines:
            if not self._truncated:
                self._truncated = True
                trace_logger.debug("trace truncated after {} steps", self._lines)
            return
        self._lines += 1
        trace_logger.debug(
            "step {}: {} depth={}",
            self._lines,
            _format_continuation(continuation),
            depth,
        )

    def on_finish(self, output: Any, max_depth: int) -> None:
        trace_logger.debug("finish: output={!r} max_depth={}", output, max_depth)


def _format_continuation(continuation: Continuation) -> str:
    if isinstance(continuation, Call):
        return f"Call({type(continuation.child).__name__}, resume={continuation.resume!r})"
    if isinstance(continuation, Result):
        return f"Result({continuation.value!r})"
    return "Continue"


__all__ = [
    "BaseObserver",
    "RunObserver",
    "RunStats",
    "StackDepthProbe",
    "StepTracer",
    "continuation_kind",
]
