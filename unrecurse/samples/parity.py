"""Mutually recursive even/odd check, run as a tail loop.

is_even(n) = n == 0 or is_odd(n - 1)
is_odd(n)  = n != 0 and is_even(n - 1)

Each hop is a tail call, so the frame rewrites itself and returns Continue:
the stack never grows past the root frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import CONTINUE, Continuation, Result


class ParityKind(Enum):
    EVEN = "even"
    ODD = "odd"

    @property
    def flipped(self) -> ParityKind:
        return ParityKind.ODD if self is ParityKind.EVEN else ParityKind.EVEN


@dataclass(frozen=True)
class ParityQuery:
    kind: ParityKind
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"parity is defined for non-negative integers, got {self.value}")


@dataclass
class ParityState:
    kind: ParityKind
    value: int


def check_even(value: int) -> ParityQuery:
    return ParityQuery(ParityKind.EVEN, value)


def check_odd(value: int) -> ParityQuery:
    return ParityQuery(ParityKind.ODD, value)


class Parity(Algorithm[ParityQuery | tuple[ParityKind, int], ParityState, None, bool]):
    def initialize(self, input: ParityQuery | tuple[ParityKind, int]) -> tuple[ParityState, None]:
        query = input if isinstance(input, ParityQuery) else ParityQuery(*input)
        return ParityState(query.kind, query.value), None

    def step(self, state: ParityState, context: None) -> Continuation:
        if state.value == 0:
            return Result(state.kind is ParityKind.EVEN)
        state.kind = state.kind.flipped
        state.value -= 1
        return CONTINUE


__all__ = [
    "Parity",
    "ParityKind",
    "ParityQuery",
    "ParityState",
    "check_even",
    "check_odd",
]
