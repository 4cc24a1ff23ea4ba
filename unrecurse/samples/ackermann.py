"""Ackermann function with a self-referential state.

A(0, m) = m + 1
A(n, 0) = A(n - 1, 1)
A(n, m) = A(n - 1, A(n, m - 1))

The inner A(n, m - 1) is kept as a nested AckermannState in the ``m`` slot.
A state with a pending argument calls it; the resume action writes the
number back. Every other case rewrites the frame in place (a tail call).

With ``memoize=True`` the shared context is a MemoTable keyed by (n, m).
Since a tail call keeps the answer of the state it replaces, the keys a
frame passed through are recorded alongside its final key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from unrecurse.algorithm import Algorithm
from unrecurse.continuation import CONTINUE, Call, Continuation, Result
from unrecurse.memo import MemoTable


@dataclass
class AckermannState:
    n: int
    m: int | AckermannState
    # (n, m) pairs this frame was rewritten from; only tracked when memoizing.
    aliases: list[tuple[int, int]] = field(default_factory=list)

    @property
    def pending(self) -> bool:
        return isinstance(self.m, AckermannState)


@dataclass(frozen=True)
class ResolveArgument:
    """Resume action: the pending ``m`` evaluated to ``value``."""

    def __call__(self, state: AckermannState, memo: MemoTable | None, value: int) -> None:
        state.m = value


RESOLVE_ARGUMENT = ResolveArgument()


class Ackermann(Algorithm[tuple[int, int], AckermannState, MemoTable | None, int]):
    def __init__(self, *, memoize: bool = False) -> None:
        self.memoize = memoize

    def initialize(self, input: tuple[int, int]) -> tuple[AckermannState, MemoTable | None]:
        n, m = input
        if n < 0 or m < 0:
            raise ValueError(f"Ackermann is defined for non-negative arguments, got ({n}, {m})")
        return AckermannState(n, m), (MemoTable() if self.memoize else None)

    def step(self, state: AckermannState, context: MemoTable | None) -> Continuation:
        if isinstance(state.m, AckermannState):
            return Call(state.m, RESOLVE_ARGUMENT)

        n, m = state.n, state.m
        if context is not None:
            found, cached = context.lookup((n, m))
            if found:
                return self._finish(state, context, cached)

        if n == 0:
            return self._finish(state, context, m + 1)

        if context is not None:
            state.aliases.append((n, m))
        state.n = n - 1
        state.m = 1 if m == 0 else AckermannState(n, m - 1)
        return CONTINUE

    @staticmethod
    def _finish(state: AckermannState, memo: MemoTable | None, value: int) -> Result:
        if memo is not None:
            for key in state.aliases:
                memo.record(key, value)
            memo.record((state.n, state.m), value)
        return Result(value)

    def __repr__(self) -> str:
        return f"Ackermann(memoize={self.memoize})"


def ackermann(n: int, m: int, *, memoize: bool = False, **runner_options: Any) -> int:
    return Ackermann(memoize=memoize).run((n, m), **runner_options)


__all__ = [
    "RESOLVE_ARGUMENT",
    "Ackermann",
    "AckermannState",
    "ResolveArgument",
    "ackermann",
]
