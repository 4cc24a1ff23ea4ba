"""Step sequences: algorithms written as a fixed list of calls and mutations.

Many divide-and-conquer algorithms read naturally as "solve the left part,
change the data, solve the right part". A :class:`StepSequence` describes
exactly that list, and :class:`Stepper` derives the state machine the runner
needs, keeping the cursor bookkeeping out of the algorithm.

The step list may only depend on the description's own parameters, never
on results of earlier steps. The output of a sequence is always the shared
data after every step has run; sub-calls exist for their effect on it.

Example:
    >>> @dataclass(frozen=True)
    ... class Append:
    ...     value: int
    ...     def __call__(self, data):
    ...         data.append(self.value)
    >>> @dataclass(frozen=True)
    ... class Countdown(StepSequence[int, list]):
    ...     n: int
    ...
    ...     @classmethod
    ...     def initialize(cls, input):
    ...         return cls(input), []
    ...
    ...     def steps(self):
    ...         if self.n == 0:
    ...             return ()
    ...         return (Mutate(Append(self.n)), PushCall(Countdown(self.n - 1)))
    >>> Countdown.run(3)
    [3, 2, 1]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import CONTINUE, Call, Continuation, Result
from unrecurse.errors import InvalidContinuationError

InputT = TypeVar("InputT")
DataT = TypeVar("DataT")
SeqT = TypeVar("SeqT", bound="StepSequence[Any, Any]")


@dataclass(frozen=True)
class PushCall:
    """Run the sequence ``description`` as a sub-call on the same data."""

    description: StepSequence[Any, Any]


@dataclass(frozen=True)
class Mutate:
    """Apply ``mutation`` to the shared data."""

    mutation: Callable[[Any], None]


SteppingContinuation = PushCall | Mutate


class StepSequence(ABC, Generic[InputT, DataT]):
    """Description of an algorithm as an ordered list of steps."""

    @classmethod
    @abstractmethod
    def initialize(cls: type[SeqT], input: InputT) -> tuple[SeqT, DataT]:
        """Build the root description and the shared data for ``input``."""

    @abstractmethod
    def steps(self) -> Sequence[SteppingContinuation]:
        """The steps of this description, in order."""

    @classmethod
    def as_algorithm(cls) -> Stepper[DataT]:
        return Stepper(cls)

    @classmethod
    def run(cls, input: InputT, **runner_options: Any) -> DataT:
        """Run this sequence type on ``input`` and return the final data."""
        return Stepper(cls).run(input, **runner_options)


@dataclass
class StepperState:
    """A description plus a cursor into its step list."""

    description: StepSequence[Any, Any]
    cursor: int = 0
    _steps: tuple[SteppingContinuation, ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def steps(self) -> tuple[SteppingContinuation, ...]:
        # Computed once per frame, on first use.
        if self._steps is None:
            self._steps = tuple(self.description.steps())
        return self._steps

    @property
    def current(self) -> SteppingContinuation | None:
        steps = self.steps
        if self.cursor < len(steps):
            return steps[self.cursor]
        return None


@dataclass(frozen=True)
class AdvanceCursor:
    """Resume action for a finished sub-call: move past it, drop its result."""

    def __call__(self, state: StepperState, data: Any, value: Any) -> None:
        state.cursor += 1


ADVANCE_CURSOR = AdvanceCursor()


class Stepper(Algorithm[Any, StepperState, DataT, DataT], Generic[DataT]):
    """Adapter running a StepSequence type as an Algorithm.

    All frames on one stack hold descriptions of the same sequence type.
    """

    def __init__(self, sequence_type: type[StepSequence[Any, DataT]]) -> None:
        self._sequence_type = sequence_type

    @property
    def sequence_type(self) -> type[StepSequence[Any, DataT]]:
        return self._sequence_type

    def initialize(self, input: Any) -> tuple[StepperState, DataT]:
        description, data = self._sequence_type.initialize(input)
        return StepperState(description), data

    def step(self, state: StepperState, data: DataT) -> Continuation:
        entry = state.current
        if entry is None:
            return Result(data)

        if isinstance(entry, Mutate):
            entry.mutation(data)
            state.cursor += 1
            return CONTINUE

        if isinstance(entry, PushCall):
            if not isinstance(entry.description, self._sequence_type):
                raise InvalidContinuationError(
                    entry,
                    f"PushCall of {type(entry.description).__name__} inside a "
                    f"{self._sequence_type.__name__} sequence; sub-calls must use the same type",
                )
            return Call(StepperState(entry.description), ADVANCE_CURSOR)

        raise InvalidContinuationError(
            entry,
            f"{type(state.description).__name__}.steps() produced {entry!r}; "
            "expected PushCall or Mutate",
        )

    def __repr__(self) -> str:
        return f"Stepper({self._sequence_type.__name__})"


__all__ = [
    "ADVANCE_CURSOR",
    "AdvanceCursor",
    "Mutate",
    "PushCall",
    "StepSequence",
    "Stepper",
    "StepperState",
    "SteppingContinuation",
]
