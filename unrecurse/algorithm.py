"""The Algorithm contract driven by the runner.

An algorithm is written as a state machine instead of a recursive function.
``initialize`` builds the root state and the shared context; ``step``
advances one state by a bounded amount of work and says what happens next.

Example:
    >>> from unrecurse import CONTINUE, Algorithm, Result
    >>> class Countdown(Algorithm[int, list, None, str]):
    ...     def initialize(self, input):
    ...         return [input], None
    ...
    ...     def step(self, state, context):
    ...         if state[0] == 0:
    ...             return Result("liftoff")
    ...         state[0] -= 1
    ...         return CONTINUE
    >>> Countdown().run(10)
    'liftoff'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from unrecurse.continuation import Continuation

if TYPE_CHECKING:
    from unrecurse.runner import RunReport

InputT = TypeVar("InputT")
StateT = TypeVar("StateT")
ContextT = TypeVar("ContextT")
OutputT = TypeVar("OutputT")


class Algorithm(ABC, Generic[InputT, StateT, ContextT, OutputT]):
    """Base class for algorithms executed on the explicit stack.

    Instances are definitions, not runs: they may carry configuration but
    must not hold per-run data. Everything a run mutates lives in the states
    on the stack or in the shared context.

    When a state conceptually contains a pending computation of the same
    algorithm, keep it as a nested state value and return ``Call`` for it
    instead of computing it inside ``step``.
    """

    @abstractmethod
    def initialize(self, input: InputT) -> tuple[StateT, ContextT]:
        """Build the root state and the shared context for ``input``.

        Must be deterministic and free of side effects.
        """

    @abstractmethod
    def step(self, state: StateT, context: ContextT) -> Continuation:
        """Advance ``state`` by one bounded unit of work.

        ``state`` and ``context`` may be mutated in place. Must return
        Continue, Call or Result.
        """

    def run(self, input: InputT, **runner_options: Any) -> OutputT:
        """Run this algorithm to completion on ``input``.

        Keyword options are passed to :class:`unrecurse.runner.Runner`.
        """
        from unrecurse.runner import Runner

        return Runner(self, **runner_options).run(input)

    def run_with_report(self, input: InputT, **runner_options: Any) -> RunReport:
        """Like :meth:`run` but also return execution statistics."""
        from unrecurse.runner import Runner

        return Runner(self, **runner_options).run_with_report(input)


__all__ = [
    "Algorithm",
    "ContextT",
    "InputT",
    "OutputT",
    "StateT",
]
