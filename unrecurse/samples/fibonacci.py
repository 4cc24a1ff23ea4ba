"""Fibonacci numbers with seeds F(0) = F(1) = 1.

FibonacciSequence builds the whole sequence as a StepSequence: F(i) first
builds the sequence up to F(i - 1), then appends the sum of the last two.

MemoFibonacci is the textbook binary recursion F(i) = F(i - 1) + F(i - 2),
kept linear by a MemoTable in the shared context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import Call, Continuation, Result
from unrecurse.memo import MemoTable
from unrecurse.stepping import Mutate, PushCall, StepSequence, SteppingContinuation

SEEDS = (1, 1)


@dataclass(frozen=True)
class AppendNext:
    def __call__(self, sequence: list[int]) -> None:
        sequence.append(sequence[-1] + sequence[-2])


APPEND_NEXT = AppendNext()


@dataclass(frozen=True)
class FibonacciSequence(StepSequence[int, list[int]]):
    index: int

    @classmethod
    def initialize(cls, input: int) -> tuple[FibonacciSequence, list[int]]:
        if input < 0:
            raise ValueError(f"index must be >= 0, got {input}")
        return cls(input), list(SEEDS)

    def steps(self) -> tuple[SteppingContinuation, ...]:
        if self.index < len(SEEDS):
            return ()
        return (PushCall(FibonacciSequence(self.index - 1)), Mutate(APPEND_NEXT))


def fibonacci_sequence(index: int) -> list[int]:
    """Sequence whose last element is F(index)."""
    return FibonacciSequence.run(index)


class Operand(Enum):
    FIRST = "first"
    SECOND = "second"


@dataclass
class FibonacciState:
    index: int
    first: int | None = None
    second: int | None = None


@dataclass(frozen=True)
class StoreOperand:
    """Resume action: store a sub-result in ``operand``."""

    operand: Operand

    def __call__(self, state: FibonacciState, memo: MemoTable, value: int) -> None:
        if self.operand is Operand.FIRST:
            state.first = value
        else:
            state.second = value


class MemoFibonacci(Algorithm[int, FibonacciState, MemoTable, int]):
    def initialize(self, input: int) -> tuple[FibonacciState, MemoTable]:
        if input < 0:
            raise ValueError(f"index must be >= 0, got {input}")
        return FibonacciState(input), MemoTable()

    def step(self, state: FibonacciState, context: MemoTable) -> Continuation:
        if state.first is None:
            found, cached = context.lookup(state.index)
            if found:
                return Result(cached)
            if state.index < len(SEEDS):
                value = SEEDS[state.index]
                context.record(state.index, value)
                return Result(value)
            return Call(FibonacciState(state.index - 1), StoreOperand(Operand.FIRST))

        if state.second is None:
            return Call(FibonacciState(state.index - 2), StoreOperand(Operand.SECOND))

        value = state.first + state.second
        context.record(state.index, value)
        return Result(value)


__all__ = [
    "APPEND_NEXT",
    "AppendNext",
    "FibonacciSequence",
    "FibonacciState",
    "MemoFibonacci",
    "Operand",
    "SEEDS",
    "StoreOperand",
    "fibonacci_sequence",
]
